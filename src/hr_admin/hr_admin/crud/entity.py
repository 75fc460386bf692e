from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import format_value
from ..common.validators import Field
from ..core.enums import ViolationKind
from ..core.exceptions import ConstraintViolation, ReferentialBlock

_DEFAULT_VIOLATION_MESSAGES = {
    ViolationKind.DUPLICATE: "Duplicate entry.",
    ViolationKind.MISSING_REFERENCE: "A selected reference no longer exists.",
    ViolationKind.CHECK: "A value is out of range.",
}
_DEFAULT_BLOCK_MESSAGE = "It is referenced by other records."


def read_attr(record: Any, name: str) -> Any:
    """Read a column from either a list row (dict) or a domain record (dataclass)."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


@dataclass(frozen=True)
class Column:
    name: str
    label: str


@dataclass(frozen=True)
class EntityDescriptor:
    """Everything the generic CRUD service and controller need to know about one entity.

    ``key_fields`` doubles as the URL rule of the record routes, so a composite
    key becomes several path segments (``/edit/<employee_id>/<training_id>``).
    """

    name: str
    url_prefix: str
    singular: str
    plural: str
    key_fields: tuple[str, ...]
    fields: tuple[Field, ...]
    list_columns: tuple[Column, ...]
    detail_columns: tuple[Column, ...]
    edit_fields: Optional[tuple[Field, ...]] = None
    filters: tuple[str, ...] = ()
    violation_messages: Mapping[str, str] = field(default_factory=dict)
    block_messages: Mapping[str, str] = field(default_factory=dict)

    def form_fields(self, *, editing: bool) -> tuple[Field, ...]:
        if editing and self.edit_fields is not None:
            return self.edit_fields
        return self.fields

    def key_rule(self) -> str:
        return "/".join(f"<int:{name}>" for name in self.key_fields)

    def key_from(self, values: Mapping[str, Any]):
        """Build the record key from route arguments or cleaned form values."""
        if len(self.key_fields) == 1:
            return int(values[self.key_fields[0]])
        return tuple(int(values[name]) for name in self.key_fields)

    def key_args(self, record: Any) -> dict[str, Any]:
        return {name: read_attr(record, name) for name in self.key_fields}

    def key_args_of(self, key) -> dict[str, Any]:
        parts = key if isinstance(key, tuple) else (key,)
        return dict(zip(self.key_fields, parts))

    def to_form(self, record: Any, *, editing: bool = True) -> dict[str, str]:
        return {f.name: format_value(read_attr(record, f.name)) for f in self.form_fields(editing=editing)}

    def option_sets(self, *, editing: bool) -> set[str]:
        return {f.options for f in self.form_fields(editing=editing) if f.options}

    def violation_message(self, error: ConstraintViolation) -> str:
        message = self.violation_messages.get(error.constraint or "")
        return message or _DEFAULT_VIOLATION_MESSAGES[error.kind]

    def block_message(self, error: ReferentialBlock) -> str:
        reason = self.block_messages.get(error.constraint or "") or _DEFAULT_BLOCK_MESSAGE
        return f"Cannot delete {self.singular.lower()}: {reason}"


def columns(*pairs: Sequence[str]) -> tuple[Column, ...]:
    return tuple(Column(name=name, label=label) for name, label in pairs)
