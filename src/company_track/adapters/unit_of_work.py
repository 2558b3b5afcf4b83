"""Units of Work for company-track.

`SqlAlchemyUnitOfWork` opens one connection (and therefore one transaction)
per `with` block, so every insert issued inside the block is committed or
rolled back together. `InMemoryUnitOfWork` mirrors that behavior over an
`InMemoryCompanyStore` by snapshotting the store on entry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from company_track.adapters.company_store import (
    InMemoryCompanyStore,
    SqlAlchemyCompanyStore,
)
from company_track.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.store = SqlAlchemyCompanyStore(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of Work over an in-memory store.

    Changes made inside a `with` block are discarded on exit unless
    `commit()` was called.
    """

    def __init__(self, store: InMemoryCompanyStore | None = None):
        self.store = store if store is not None else InMemoryCompanyStore()
        self._snapshot = self.store.snapshot()
        self.committed = False

    def __enter__(self):
        self._snapshot = self.store.snapshot()
        return super().__enter__()

    def commit(self):
        self._snapshot = self.store.snapshot()
        self.committed = True

    def rollback(self):
        self.store.restore(self._snapshot)
