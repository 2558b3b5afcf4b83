"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidNameError(DomainError):
    """Raised when a name is empty once surrounding whitespace is removed."""

    def __init__(self, kind: str, value: str) -> None:
        super().__init__(f"{kind.capitalize()} name {value!r} is empty.")
        self.kind = kind
        self.value = value


# ============================================================================
#                   Department related errors
# ============================================================================


class DuplicateDepartmentError(DomainError):
    """Raised when adding a department whose normalized name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Department '{name}' already exists.")
        self.name = name


class DepartmentNotFoundError(DomainError):
    """Raised when hiring into a department that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Department '{name}' does not exist.")
        self.name = name
