"""Company Aggregate"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from company_track.domain import events
from company_track.domain.entities import (
    Department,
    Employee,
    normalize_department_name,
    normalize_employee_name,
)
from company_track.domain.errors import DepartmentNotFoundError, DuplicateDepartmentError

from .base import Aggregate

if TYPE_CHECKING:
    from company_track.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class Company(Aggregate):
    """Aggregate root holding every department and employee of the company.

    Both collections keep insertion order (storage order for hydrated records,
    then creation order for the session).
    """

    def __init__(self, id_generator: IdGenerator) -> None:
        super().__init__()
        self._id_generator = id_generator
        self.departments: list[Department] = []
        self.employees: list[Employee] = []

    # --- Construction Paths ---

    @classmethod
    def from_records(
        cls,
        id_generator: IdGenerator,
        departments: Iterable[Department],
        employees: Iterable[Employee],
    ) -> Company:
        """Rebuild the company from stored records.

        Hydration does not replay events, so the new aggregate has nothing to
        commit.
        """
        company = cls(id_generator)
        company.departments.extend(departments)
        company.employees.extend(employees)
        return company

    # --- Commands ---

    def add_department(self, name: str) -> Department:
        """Add a department.

        Args:
            name: Department name; trimmed and lower-cased before use.

        Returns:
            The new department.

        Raises:
            InvalidNameError: If the name is blank.
            DuplicateDepartmentError: If a department with the same normalized
                name already exists.
        """
        normalized = normalize_department_name(name)
        if self.find_department(normalized) is not None:
            raise DuplicateDepartmentError(normalized)

        event = events.DepartmentAdded(
            department_id=self._id_generator.new_id(), name=normalized
        )
        self._enqueue(event)
        logger.info("Department %r added (%s)", normalized, event.department_id)
        return self.departments[-1]

    def hire_employee(self, name: str, department_name: str) -> Employee:
        """Hire an employee into an existing department.

        Args:
            name: Employee name; trimmed, case preserved.
            department_name: Name of the department, matched after normalization.

        Returns:
            The new employee.

        Raises:
            InvalidNameError: If either name is blank.
            DepartmentNotFoundError: If no department matches `department_name`.
        """
        employee_name = normalize_employee_name(name)
        if (department := self.find_department(department_name)) is None:
            raise DepartmentNotFoundError(normalize_department_name(department_name))

        event = events.EmployeeHired(
            employee_id=self._id_generator.new_id(),
            name=employee_name,
            department_id=department.id,
        )
        self._enqueue(event)
        logger.info("Employee %r hired into %r", employee_name, department.name)
        return self.employees[-1]

    # --- Queries ---

    def find_department(self, name: str) -> Department | None:
        """Return the department matching `name` after normalization, if any."""
        normalized = normalize_department_name(name)
        return next((d for d in self.departments if d.name == normalized), None)

    def get_total_employees(self) -> int:
        """Number of employees across all departments."""
        return len(self.employees)

    def get_employees_by_department(self, department_id: str) -> int:
        """Number of employees attached to `department_id`."""
        return sum(1 for e in self.employees if e.department_id == department_id)

    # --- Event Application ---

    def _apply(self, event: events.DomainEvent) -> None:
        match event:
            case events.DepartmentAdded():
                self.departments.append(
                    Department(id=event.department_id, name=event.name)
                )
            case events.EmployeeHired():
                self.employees.append(
                    Employee(
                        id=event.employee_id,
                        name=event.name,
                        department_id=event.department_id,
                    )
                )
            case _:
                raise ValueError(f"Unhandled event type: {type(event).__name__}")
