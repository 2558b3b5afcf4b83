"""In-memory company store implementation.

All records are stored in memory and lost when the instance is discarded.
Use for unit tests, prototyping, or scenarios where durability is not required.
It enforces the same uniqueness and reference rules as the SQL schema.
"""

from collections.abc import Sequence

from company_track.domain.entities import Department, Employee
from company_track.interfaces.company_store import (
    CompanyStore,
    DuplicateRecordError,
    InvalidRecordError,
)


class InMemoryCompanyStore(CompanyStore):
    """In-memory CompanyStore for testing and non-durable use cases."""

    def __init__(self) -> None:
        self._departments: list[Department] = []
        self._employees: list[Employee] = []

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def insert_department(self, department_id: str, name: str) -> None:
        if any(d.id == department_id for d in self._departments):
            raise DuplicateRecordError(f"duplicate department id {department_id}")
        if any(d.name == name for d in self._departments):
            raise DuplicateRecordError(f"duplicate department name {name!r}")
        self._departments.append(Department(id=department_id, name=name))

    def insert_employee(self, employee_id: str, name: str, department_id: str) -> None:
        if any(e.id == employee_id for e in self._employees):
            raise DuplicateRecordError(f"duplicate employee id {employee_id}")
        if any(e.name == name for e in self._employees):
            raise DuplicateRecordError(f"duplicate employee name {name!r}")
        if not any(d.id == department_id for d in self._departments):
            raise InvalidRecordError(f"unknown department id {department_id}")
        self._employees.append(
            Employee(id=employee_id, name=name, department_id=department_id)
        )

    def select_departments(self) -> Sequence[Department]:
        return list(self._departments)

    def select_employees(self, department_id: str) -> Sequence[Employee]:
        return [e for e in self._employees if e.department_id == department_id]

    # --------------------------------------------------------------------- #
    # Snapshots (used by the in-memory unit of work)
    # --------------------------------------------------------------------- #

    def snapshot(self) -> tuple[list[Department], list[Employee]]:
        """Return copies of the stored records."""
        return list(self._departments), list(self._employees)

    def restore(self, snapshot: tuple[list[Department], list[Employee]]) -> None:
        """Replace the stored records with a previous snapshot."""
        self._departments, self._employees = list(snapshot[0]), list(snapshot[1])
