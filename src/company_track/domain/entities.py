"""Entities owned by the `Company` aggregate."""

from dataclasses import dataclass

from .errors import InvalidNameError


def normalize_department_name(name: str) -> str:
    """Trim and lower-case a department name.

    Raises:
        InvalidNameError: If nothing is left after trimming.
    """
    if not (normalized := name.strip().lower()):
        raise InvalidNameError("department", name)
    return normalized


def normalize_employee_name(name: str) -> str:
    """Trim an employee name; case is preserved.

    Raises:
        InvalidNameError: If nothing is left after trimming.
    """
    if not (normalized := name.strip()):
        raise InvalidNameError("employee", name)
    return normalized


@dataclass(frozen=True, slots=True)
class Department:
    """A department of the company. `name` is always normalized."""

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Employee:
    """An employee, attached to a department by identifier."""

    id: str
    name: str
    department_id: str
