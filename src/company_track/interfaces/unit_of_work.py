"""Unit of Work port.

A unit of work is used as a context manager around a batch of store writes.
Inside the block, `store` is the `CompanyStore` to write through; leaving the
block without calling `commit()` discards the batch.
"""

from __future__ import annotations

import abc

from .company_store import CompanyStore


class AbstractUnitOfWork(abc.ABC):
    """Transactional boundary around a `CompanyStore`."""

    store: CompanyStore

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *args):
        # After a commit there is nothing left to roll back.
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Make every write of the current block durable."""

    @abc.abstractmethod
    def rollback(self):
        """Discard the writes of the current block that were not committed."""
