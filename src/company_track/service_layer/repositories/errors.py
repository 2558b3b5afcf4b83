"""Repository-related error definitions."""


class RepositoryError(Exception):
    """Base class for repository-related errors."""


class UnknownEventError(RepositoryError):
    """Raised when a repository is asked to persist an event it has no statement for."""

    event_type_name: str

    def __init__(self, event_type_name: str):
        super().__init__(f"No storage mapping for event type {event_type_name}.")
        self.event_type_name = event_type_name
