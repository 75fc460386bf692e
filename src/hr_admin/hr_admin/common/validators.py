from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Mapping, Optional, Sequence

from ..core.constants import INT_MAX
from .datetime_utils import parse_iso_date

# A rule gets the parsed value plus the raw submitted form and returns an
# error message, or None when the value passes.
Rule = Callable[[Any, Mapping[str, str]], Optional[str]]

_DECIMAL_RE = re.compile(r"^[+-]?[0-9]+(\.[0-9]+)?$")
_INT_RE = re.compile(r"^[+-]?[0-9]+$")


def raw_value(form: Mapping[str, str], name: str) -> str:
    return (form.get(name) or "").strip()


# -------- parsers --------
def parse_text(value: str) -> str:
    return value


def parse_int(value: str) -> int:
    if not _INT_RE.match(value):
        raise ValueError(f"Not an integer: {value!r}")
    number = int(value)
    if not -INT_MAX - 1 <= number <= INT_MAX:
        raise ValueError(f"Integer out of range: {value!r}")
    return number


def parse_decimal(value: str) -> Decimal:
    if not _DECIMAL_RE.match(value):
        raise ValueError(f"Not a decimal number: {value!r}")
    try:
        return Decimal(value)
    except InvalidOperation as e:
        raise ValueError(f"Not a decimal number: {value!r}") from e


def parse_choice(enum_cls) -> Callable[[str], Any]:
    def parse(value: str):
        return enum_cls(value)

    return parse


# -------- rules --------
def max_length(limit: int, label: str) -> Rule:
    def rule(value, form):
        if len(value) > limit:
            return f"{label} must be at most {limit} characters"
        return None

    return rule


def matches(pattern: str, message: str) -> Rule:
    compiled = re.compile(pattern)

    def rule(value, form):
        if not compiled.match(value):
            return message
        return None

    return rule


def at_least(minimum, message: str) -> Rule:
    def rule(value, form):
        if value < minimum:
            return message
        return None

    return rule


def at_most(maximum, message: str) -> Rule:
    def rule(value, form):
        if value > maximum:
            return message
        return None

    return rule


def between(low, high, message: str) -> Rule:
    def rule(value, form):
        if value < low or value > high:
            return message
        return None

    return rule


def max_decimal_places(places: int, label: str) -> Rule:
    def rule(value: Decimal, form):
        # Trailing zeros do not count: 5.000 is 5.
        if -value.normalize().as_tuple().exponent > places:
            return f"{label} must have at most {places} decimal places"
        return None

    return rule


def not_before(other: str, message: str, *, parse: Callable[[str], Any] = parse_iso_date) -> Rule:
    """Cross-field ordering against the submitted value of ``other``.

    If the other field is blank or unparseable the rule passes; that field
    reports its own error.
    """

    def rule(value, form):
        other_raw = raw_value(form, other)
        if not other_raw:
            return None
        try:
            other_value = parse(other_raw)
        except (ValueError, ArithmeticError):
            return None
        if value < other_value:
            return message
        return None

    return rule


def not_less_than(other: str, message: str) -> Rule:
    return not_before(other, message, parse=parse_decimal)


# -------- fields --------
@dataclass(frozen=True)
class Field:
    """One form field: how to parse it, which rules apply and how to render it."""

    name: str
    label: str
    parse: Callable[[str], Any] = parse_text
    required: bool = True
    rules: tuple[Rule, ...] = ()
    default: Any = None
    invalid: Optional[str] = None
    widget: str = "text"
    choices: tuple[str, ...] = ()
    options: Optional[str] = None

    def check(self, form: Mapping[str, str]) -> Optional[str]:
        raw = raw_value(form, self.name)
        if not raw:
            return f"{self.label} is required" if self.required else None

        try:
            value = self.parse(raw)
        except (ValueError, ArithmeticError):
            return self.invalid or f"{self.label} is invalid"

        for rule in self.rules:
            message = rule(value, form)
            if message:
                return message
        return None

    def clean(self, form: Mapping[str, str]) -> Any:
        raw = raw_value(form, self.name)
        if not raw:
            return self.default
        return self.parse(raw)


def validate(fields: Sequence[Field], form: Mapping[str, str]) -> list[str]:
    """Return the ordered field-level errors; an empty list means the form is valid."""
    errors: list[str] = []
    for field in fields:
        message = field.check(form)
        if message:
            errors.append(message)
    return errors


def clean(fields: Sequence[Field], form: Mapping[str, str]) -> dict[str, Any]:
    """Convert an already validated form into typed values keyed by field name."""
    return {field.name: field.clean(form) for field in fields}
