"""Repository for the Company aggregate."""

from __future__ import annotations

import logging

from company_track.domain import events
from company_track.domain.aggregates import Company
from company_track.interfaces.company_store import CompanyStore
from company_track.interfaces.id_generator import IdGenerator

from .errors import UnknownEventError

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class CompanyRepository:
    """Translate between the Company aggregate and the company store.

    Each call goes in one direction only: `load` reads, `save` writes.
    """

    def __init__(self, store: CompanyStore, id_generator: IdGenerator) -> None:
        self.store = store
        self.id_generator = id_generator

    # --- Loads ---

    def load(self) -> Company:
        """Hydrate the whole company from storage.

        Issues one query for all departments, then one query per department
        for its employees. The returned aggregate has no uncommitted events.
        """
        departments = list(self.store.select_departments())
        employees = [
            employee
            for department in departments
            for employee in self.store.select_employees(department.id)
        ]
        logger.debug(
            "Loaded %d departments and %d employees", len(departments), len(employees)
        )
        return Company.from_records(self.id_generator, departments, employees)

    # --- Saves ---

    def save(self, company: Company) -> None:
        """Write the company's uncommitted events, one insert per event, in order.

        The event buffer is left as is; callers must invoke `company.commit()`
        once the surrounding transaction has been committed.

        Raises:
            UnknownEventError: If an event has no matching insert.
            CompanyStoreError: If the store rejects an insert.
        """
        pending = company.uncommitted_events
        for event in pending:
            match event:
                case events.DepartmentAdded():
                    self.store.insert_department(event.department_id, event.name)
                case events.EmployeeHired():
                    self.store.insert_employee(
                        event.employee_id, event.name, event.department_id
                    )
                case _:
                    raise UnknownEventError(type(event).__name__)
            logger.debug("Persisted %s for %s", type(event).__name__, event.entity_id)
        logger.debug("Saved %d events", len(pending))
