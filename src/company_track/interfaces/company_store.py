"""Company store interface for company-track.

The store is the only way the core touches durable storage. It exposes the
two-table storage shape through four operations:

| Operation            | Table       | Statement                                   |
|----------------------|-------------|---------------------------------------------|
| `insert_department`  | departments | INSERT (id, name)                           |
| `insert_employee`    | employees   | INSERT (id, name, department_id)            |
| `select_departments` | departments | SELECT all, natural order                   |
| `select_employees`   | employees   | SELECT WHERE department_id = ?, natural order |

Constraints enforced by every implementation:

  - `departments.id` and `employees.id` are primary keys.
  - `departments.name` and `employees.name` are unique.
  - `employees.department_id` must reference an existing department.

Implementations translate backend failures into the error hierarchy below so
callers never depend on a particular driver.
"""

import abc
from collections.abc import Sequence

from company_track.domain.entities import Department, Employee

# ============================================================================
#                                 Errors
# ============================================================================


class CompanyStoreError(Exception):
    """Base class for company store errors."""


class DuplicateRecordError(CompanyStoreError):
    """A primary key or unique name is already taken."""


class InvalidRecordError(CompanyStoreError):
    """A record violates an integrity rule other than uniqueness (e.g. a dangling reference)."""


class StoreUnavailableError(CompanyStoreError):
    """Operational/connection errors."""


# ============================================================================
#                                 Port
# ============================================================================


class CompanyStore(abc.ABC):
    """An abstract base class for the departments/employees store."""

    @abc.abstractmethod
    def insert_department(self, department_id: str, name: str) -> None:
        """Insert one department row.

        Raises:
            DuplicateRecordError: If the id or name is already stored.
            StoreUnavailableError: If the backend cannot be reached.
        """

    @abc.abstractmethod
    def insert_employee(self, employee_id: str, name: str, department_id: str) -> None:
        """Insert one employee row.

        Raises:
            DuplicateRecordError: If the id or name is already stored.
            InvalidRecordError: If `department_id` does not reference a stored department.
            StoreUnavailableError: If the backend cannot be reached.
        """

    @abc.abstractmethod
    def select_departments(self) -> Sequence[Department]:
        """Return all departments in the store's natural order."""

    @abc.abstractmethod
    def select_employees(self, department_id: str) -> Sequence[Employee]:
        """Return the employees of one department in the store's natural order."""
