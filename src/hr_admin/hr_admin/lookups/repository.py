from __future__ import annotations

from typing import Protocol, Sequence

from .model import Option


class LookupRepository(Protocol):
    def options(self, name: str) -> Sequence[Option]:
        """Return the dropdown entries of a named option set (e.g. "employees")."""

        raise NotImplementedError
