"""Message bus routing commands to their handlers."""

import logging
from collections.abc import Callable

from company_track.domain.aggregates import Company
from company_track.domain.errors import DomainError
from company_track.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Route commands to handlers for one interactive session.

    Args:
        company: The session's Company aggregate. Handlers receive the same
            instance through injection; it is exposed here so entrypoints can
            render listings and reports from it.
        uow: The unit of work injected into handlers, exposed for convenience.
        command_handlers: A mapping of command types to handlers that accept a
            single command argument (dependencies already bound).

    Note:
        Business rule violations (`DomainError`) are expected outcomes and are
        logged at INFO; anything else is logged with its traceback. Both are
        re-raised.
    """

    def __init__(
        self,
        company: Company,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., None]],
    ) -> None:
        self.company = company
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> None:
        """Handle a command by dispatching it to the appropriate handler.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            DomainError: If the command breaks a business rule.
            Exception: Whatever else the handler raises (e.g. storage errors).
        """
        if not (handler := self._command_handlers.get(type(cmd))):
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        handler_name = self._get_handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, handler_name)
        try:
            handler(cmd)
        except DomainError as e:
            logger.info("Command %s rejected: %s", type(cmd).__name__, e)
            raise
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling command %s with handler %s", cmd, handler_name
            )
            raise

    @staticmethod
    def _get_handler_name(fn: Callable[..., None]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
