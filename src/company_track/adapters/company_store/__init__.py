"""Company store adapters."""

from .in_memory import InMemoryCompanyStore
from .sqlalchemy_store import SqlAlchemyCompanyStore

__all__ = ["InMemoryCompanyStore", "SqlAlchemyCompanyStore"]
