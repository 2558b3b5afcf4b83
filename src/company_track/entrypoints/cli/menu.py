"""Interactive menu for company-track.

Each action runs to completion before the menu is shown again. Business rule
violations are reported as warnings and the loop continues; any other error
propagates to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

import click

from company_track.domain.errors import DomainError
from company_track.service_layer import commands
from company_track.service_layer.views import department_listing, write_report

from .helpers import heading, success, warn

if TYPE_CHECKING:
    from company_track.service_layer.messagebus import MessageBus

logger = logging.getLogger(__name__)

NO_DEPARTMENTS_MSG = "There are no departments yet. Add one first."


class MenuChoice(Enum):
    """Entries of the main menu, in display order."""

    ADD_DEPARTMENT = "Add department"
    HIRE_EMPLOYEE = "Hire employee"
    VIEW_LIST = "View list"
    GENERATE_REPORT = "Generate report"
    QUIT = "Quit"


def _select(prompt: str, options: list[str]) -> int:
    """Show a numbered list and return the zero-based index picked by the user."""
    for number, option in enumerate(options, start=1):
        click.echo(f"  {number}. {option}")
    return click.prompt(prompt, type=click.IntRange(1, len(options))) - 1


def next_choice() -> MenuChoice:
    """Prompt for the next menu entry."""
    click.echo()
    choices = list(MenuChoice)
    return choices[_select("Do you want...", [c.value for c in choices])]


def add_department(bus: MessageBus) -> None:
    """Prompt for a department name and add it."""
    name = click.prompt("Enter the department's name")
    try:
        bus.handle(commands.AddDepartment(name=name))
    except DomainError as e:
        warn(str(e))
        return
    success(f"Department '{bus.company.departments[-1].name}' added.")


def hire_employee(bus: MessageBus) -> None:
    """Prompt for an employee name and an existing department, then hire."""
    if not (names := [d.name for d in bus.company.departments]):
        warn(NO_DEPARTMENTS_MSG)
        return
    employee = click.prompt("Enter the employee's name")
    department = names[_select("Choose a department", names)]
    try:
        bus.handle(commands.HireEmployee(name=employee, department_name=department))
    except DomainError as e:
        warn(str(e))
        return
    success(f"{bus.company.employees[-1].name} hired into '{department}'.")


def view_list(bus: MessageBus) -> None:
    """Print every department with its numbered employees."""
    if not (listing := department_listing(bus.company)):
        click.echo(NO_DEPARTMENTS_MSG)
        return
    for department, employees in listing:
        heading(f"Department {department.name}")
        for number, employee in enumerate(employees, start=1):
            click.echo(f"{number}. {employee.name}")
        click.echo()


def generate_report(bus: MessageBus) -> None:
    """Write report.json in the working directory."""
    path = write_report(bus.company)
    success(f"Report written to {path}")


ACTIONS: dict[MenuChoice, Callable[[MessageBus], None]] = {
    MenuChoice.ADD_DEPARTMENT: add_department,
    MenuChoice.HIRE_EMPLOYEE: hire_employee,
    MenuChoice.VIEW_LIST: view_list,
    MenuChoice.GENERATE_REPORT: generate_report,
}


def run_menu(bus: MessageBus) -> None:
    """Run the menu loop until the user picks Quit."""
    while (choice := next_choice()) is not MenuChoice.QUIT:
        logger.debug("Menu choice: %s", choice.name)
        ACTIONS[choice](bus)
    logger.debug("Quit")
