"""SQLAlchemy-backed CompanyStore adapter.

Runs the four parameterized statements of the company store against a
SQLAlchemy Connection. Transaction boundaries belong to the caller (see
`company_track.adapters.unit_of_work`); this adapter never commits.

Exceptions:
    Maps SQLAlchemy errors to company store exceptions.
"""

from collections.abc import Sequence
from typing import NoReturn

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import DBAPIError, IntegrityError

from company_track.adapters.db.schema import departments, employees
from company_track.domain.entities import Department, Employee
from company_track.interfaces.company_store import (
    CompanyStore,
    DuplicateRecordError,
    InvalidRecordError,
    StoreUnavailableError,
)

# any flag is enough
UNIQUE_CONSTRAINT_KEYWORDS = ("unique", "duplicate")  # pragma: no mutate


class SqlAlchemyCompanyStore(CompanyStore):
    """SQLAlchemy-backed CompanyStore.

    - Uses the `departments` and `employees` tables (see adapters.db.schema).
    - Selects carry no ORDER BY; rows come back in the backend's natural
      order (insertion order for SQLite rowid tables).
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def insert_department(self, department_id: str, name: str) -> None:
        self._execute_insert(
            insert(departments).values(id=department_id, name=name)
        )

    def insert_employee(self, employee_id: str, name: str, department_id: str) -> None:
        self._execute_insert(
            insert(employees).values(
                id=employee_id, name=name, department_id=department_id
            )
        )

    def select_departments(self) -> Sequence[Department]:
        stmt = select(departments.c.id, departments.c.name)
        try:
            rows = self.connection.execute(stmt).mappings().all()
        except DBAPIError as e:
            raise StoreUnavailableError(str(e)) from e
        return [Department(**row) for row in rows]

    def select_employees(self, department_id: str) -> Sequence[Employee]:
        stmt = select(
            employees.c.id, employees.c.name, employees.c.department_id
        ).where(employees.c.department_id == department_id)
        try:
            rows = self.connection.execute(stmt).mappings().all()
        except DBAPIError as e:
            raise StoreUnavailableError(str(e)) from e
        return [Employee(**row) for row in rows]

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _execute_insert(self, stmt) -> None:
        try:
            self.connection.execute(stmt)
        except IntegrityError as e:
            self._raise_store_error_from_integrity_error(e)
        except DBAPIError as e:  # OperationalError, InterfaceError, etc.
            raise StoreUnavailableError(str(e)) from e

    @staticmethod
    def _raise_store_error_from_integrity_error(e: IntegrityError) -> NoReturn:
        """Raise the store error matching an IntegrityError.

        Unique and primary-key violations become DuplicateRecordError;
        anything else (foreign key, NOT NULL) becomes InvalidRecordError.
        """
        message = str(e.orig).lower()
        if any(keyword in message for keyword in UNIQUE_CONSTRAINT_KEYWORDS):
            raise DuplicateRecordError(str(e.orig)) from e
        raise InvalidRecordError(str(e.orig)) from e
