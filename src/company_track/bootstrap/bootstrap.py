"""Bootstrap the message bus with handlers, unit of work and the loaded company."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from company_track import config
from company_track.adapters.db.engine import make_engine
from company_track.adapters.db.schema import create_schema
from company_track.adapters.id_generators import ULIDGenerator
from company_track.adapters.unit_of_work import SqlAlchemyUnitOfWork
from company_track.domain.aggregates import Company
from company_track.interfaces.id_generator import IdGenerator
from company_track.interfaces.unit_of_work import AbstractUnitOfWork
from company_track.service_layer.handlers import COMMAND_HANDLERS
from company_track.service_layer.messagebus import MessageBus
from company_track.service_layer.repositories import CompanyRepository

if TYPE_CHECKING:
    from company_track.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    message_bus: MessageBus

    @property
    def company(self) -> Company:
        """The session's Company aggregate."""
        return self.message_bus.company


def build_write_uow(url: str) -> SqlAlchemyUnitOfWork:
    """Build a unit of work on a fresh engine, creating missing tables."""
    engine = make_engine(url)
    create_schema(engine)
    return SqlAlchemyUnitOfWork(engine)


def load_company(uow: AbstractUnitOfWork, id_generator: IdGenerator) -> Company:
    """Load the Company aggregate in a read-only unit of work."""
    with uow:
        return CompanyRepository(uow.store, id_generator).load()


def build_message_bus(
    company: Company,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    command_handlers: dict[type[Command], Callable[..., None]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"company": company, "uow": uow, "id_generator": id_generator}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }
    return MessageBus(company, uow, command_handlers=injected_command_handlers)


def bootstrap(
    url: str | None = None,
    uow: AbstractUnitOfWork | None = None,
    id_generator: IdGenerator | None = None,
) -> AppContainer:
    """Wire the application and load the company.

    Args:
        url: Database URL; defaults to `config.get_db_url()`. Ignored when `uow`
            is given.
        uow: Unit of work to use instead of a SQLAlchemy one.
        id_generator: Identifier source for new entities; ULIDs by default.
    """
    if uow is None:
        url = url or config.get_db_url()
        logger.debug("Using database %s", url)
        uow = build_write_uow(url)
    id_generator = id_generator or ULIDGenerator()

    company = load_company(uow, id_generator)
    logger.info(
        "Loaded %d departments and %d employees",
        len(company.departments),
        company.get_total_employees(),
    )
    return AppContainer(
        message_bus=build_message_bus(company, uow, id_generator, COMMAND_HANDLERS)
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies a handler asks for by parameter name."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
