"""Handlers for commands acting on the Company aggregate.

Every handler follows the same sequence: mutate the aggregate, save its
pending events inside one unit of work, commit the unit of work, and only
then clear the aggregate's buffer. A failure while saving rolls the unit of
work back and leaves the buffer untouched.
"""

from collections.abc import Callable

from company_track.domain.aggregates import Company
from company_track.interfaces.id_generator import IdGenerator
from company_track.interfaces.unit_of_work import AbstractUnitOfWork
from company_track.service_layer import commands
from company_track.service_layer.repositories import CompanyRepository


def add_department(
    cmd: commands.AddDepartment,
    company: Company,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> None:
    """Add a department and persist it."""
    company.add_department(cmd.name)
    _persist(company, uow, id_generator)


def hire_employee(
    cmd: commands.HireEmployee,
    company: Company,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> None:
    """Hire an employee into an existing department and persist it."""
    company.hire_employee(cmd.name, cmd.department_name)
    _persist(company, uow, id_generator)


def _persist(
    company: Company, uow: AbstractUnitOfWork, id_generator: IdGenerator
) -> None:
    with uow:
        CompanyRepository(uow.store, id_generator).save(company)
        uow.commit()
    company.commit()


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.AddDepartment: add_department,
    commands.HireEmployee: hire_employee,
}
