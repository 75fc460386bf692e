from __future__ import annotations

from typing import Any, Mapping, Optional

from src.hr_admin.hr_admin.core.enums import ViolationKind
from src.hr_admin.hr_admin.core.exceptions import ConstraintViolation, NotFoundError, ReferentialBlock
from src.hr_admin.hr_admin.lookups.model import Option


class InMemoryRecords:
    """Dict-backed record repository that enforces unique keys and delete blocks like the store."""

    def __init__(self, key_fields: tuple[str, ...], *, unique: Optional[dict[str, tuple[str, ...]]] = None):
        self._key_fields = key_fields
        self._unique = unique or {}
        self._next_id = 1
        self.rows: dict[Any, dict] = {}
        # key -> constraint name of a child row that references it
        self.blocked: dict[Any, str] = {}
        self.list_calls: list[dict] = []

    def seed(self, **row) -> Any:
        key = self._key_of(row)
        self.rows[key] = dict(row)
        if len(self._key_fields) == 1:
            self._next_id = max(self._next_id, int(key) + 1)
        return key

    def _key_of(self, values: Mapping[str, Any]):
        if len(self._key_fields) == 1:
            return int(values[self._key_fields[0]])
        return tuple(int(values[name]) for name in self._key_fields)

    def _check_unique(self, values: Mapping[str, Any], *, ignore=None) -> None:
        for constraint, cols in self._unique.items():
            for key, row in self.rows.items():
                if key != ignore and all(row.get(c) == values.get(c) for c in cols):
                    raise ConstraintViolation(constraint, kind=ViolationKind.DUPLICATE)

    def list(self, filters=None):
        self.list_calls.append(dict(filters or {}))
        rows = list(self.rows.values())
        for name, value in (filters or {}).items():
            rows = [r for r in rows if str(r.get(name)) == str(value)]
        return rows

    def get(self, key):
        row = self.rows.get(key)
        return dict(row) if row is not None else None

    def insert(self, values):
        self._check_unique(values)
        if len(self._key_fields) == 1:
            key = self._next_id
            self._next_id += 1
            self.rows[key] = {self._key_fields[0]: key, **values}
            return key
        key = self._key_of(values)
        if key in self.rows:
            raise ConstraintViolation("PRIMARY", kind=ViolationKind.DUPLICATE)
        self.rows[key] = dict(values)
        return key

    def update(self, key, values) -> int:
        if key not in self.rows:
            return 0
        self._check_unique(values, ignore=key)
        self.rows[key].update(values)
        return 1

    def delete(self, key) -> int:
        if key in self.blocked:
            raise ReferentialBlock(self.blocked[key])
        return 1 if self.rows.pop(key, None) is not None else 0


class InMemoryLinks(InMemoryRecords):
    """Composite-key link table with an all-or-nothing rekey."""

    def __init__(self):
        super().__init__(("employee_id", "training_id"))

    def rekey(self, old_key, new_key, values) -> None:
        if new_key in self.rows:
            raise ConstraintViolation("PRIMARY", kind=ViolationKind.DUPLICATE)
        if old_key not in self.rows:
            raise NotFoundError("Training record not found")
        del self.rows[old_key]
        self.rows[new_key] = {**values, "employee_id": new_key[0], "training_id": new_key[1]}


class FakeLookups:
    def __init__(self, options: Optional[dict[str, list[Option]]] = None):
        self._options = options or {}

    def options(self, name: str):
        return self._options.get(name, [])
