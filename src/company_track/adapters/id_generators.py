"""ID generators for departments and employees."""

import threading

from ulid import monotonic

from company_track.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Monotonic ULID generator.

    ULIDs are 26-character, collision-resistant, lexicographically sortable
    tokens, so identifiers can be assigned before anything is written.
    This generator uses the `ulid-py` library to create them.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID."""
        with self._lock:
            return str(monotonic.new())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded IDs with an optional prefix.

    Note:
        Not suitable for production use; primarily for tests and demos.
    """

    def __init__(self, prefix: str = "", length: int = 26) -> None:
        self._counter = 0
        self._prefix = prefix
        self._length = length

    def new_id(self) -> str:
        """Generate the next identifier."""
        self._counter += 1
        return f"{self._prefix}{self._counter:0{self._length}d}"
