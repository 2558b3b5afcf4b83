"""Base class for all aggregates."""

import abc

from company_track.domain.events import DomainEvent


class Aggregate(abc.ABC):
    """Generic base class for all aggregates.

    Mutations never touch storage. They are expressed as domain events which
    are applied to the in-memory state and buffered until a repository has
    durably written them and the caller acknowledges that with `commit()`.
    """

    def __init__(self) -> None:
        self._pending_events: list[DomainEvent] = []

    # --- Event Application ---

    @abc.abstractmethod
    def _apply(self, event: DomainEvent) -> None:
        """Apply an event to the aggregate.

        Args:
            event: The event to apply.
        Raises:
            ValueError: If the concrete aggregate does not implement handling
                logic for the event type.
        """

    # --- Plumbing ---

    def _enqueue(self, event: DomainEvent) -> None:
        self._apply(event)
        self._pending_events.append(event)

    @property
    def uncommitted_events(self) -> list[DomainEvent]:
        """Events recorded since the last commit, in the order they occurred.

        Returns a copy; use `commit()` to clear the buffer.
        """
        return list(self._pending_events)

    def commit(self) -> None:
        """Clear the uncommitted-event buffer.

        Call only after the events have been durably written. Calling it with an
        empty buffer is a no-op.

        Note: This is NOT thread-safe.
        """
        self._pending_events = []
