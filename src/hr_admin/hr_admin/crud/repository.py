from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class RecordRepository(Protocol):
    """Access-layer contract shared by every entity.

    Note (DIP): services depend on this interface, never on a concrete database.
    Keys are ints, or tuples of ints for composite keys.
    """

    def list(self, filters: Optional[Mapping[str, Any]] = None) -> Sequence[dict]:
        """Return UI rows (joined with parent tables for display names)."""

        raise NotImplementedError

    def get(self, key) -> Optional[Any]:
        raise NotImplementedError

    def insert(self, values: Mapping[str, Any]):
        """Insert a row and return its key. Raises ConstraintViolation."""

        raise NotImplementedError

    def update(self, key, values: Mapping[str, Any]) -> int:
        """Return the number of matched rows (0 when the key does not exist)."""

        raise NotImplementedError

    def delete(self, key) -> int:
        """Return the number of deleted rows. Raises ReferentialBlock."""

        raise NotImplementedError
