"""Events"""

import abc
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DomainEvent(abc.ABC):
    """Base class for all domain events.
    Requires a way to determine the identifier of the entity it created.
    """

    @property
    @abc.abstractmethod
    def entity_id(self) -> str:
        """Return the ID of the entity this event is about."""


@dataclass(frozen=True, slots=True)
class DepartmentAdded(DomainEvent):
    """Event indicating that a department has been added to the company."""

    department_id: str
    name: str

    @property
    def entity_id(self) -> str:
        return self.department_id


@dataclass(frozen=True, slots=True)
class EmployeeHired(DomainEvent):
    """Event indicating that an employee has been hired into a department."""

    employee_id: str
    name: str
    department_id: str

    @property
    def entity_id(self) -> str:
        return self.employee_id
