"""Module defining Commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class AddDepartment(Command):
    """Command to add a department to the company."""

    name: str


@dataclass(frozen=True)
class HireEmployee(Command):
    """Command to hire an employee into an existing department."""

    name: str
    department_name: str
