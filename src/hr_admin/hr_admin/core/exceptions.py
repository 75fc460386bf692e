from __future__ import annotations

from typing import Iterable, Optional

from .enums import ViolationKind


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when submitted form data is invalid.

    Carries the ordered list of field-level messages so the form can be
    re-rendered with all of them at once.
    """

    def __init__(self, errors: Iterable[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class NotFoundError(DomainError):
    """Raised when a key does not resolve to a row."""


class StoreError(DomainError):
    """Base class for failures reported by the relational store."""


class ConstraintViolation(StoreError):
    """A uniqueness, foreign-key or check constraint rejected a write."""

    def __init__(
        self,
        constraint: Optional[str],
        *,
        kind: ViolationKind = ViolationKind.DUPLICATE,
        message: Optional[str] = None,
    ):
        self.constraint = constraint
        self.kind = kind
        super().__init__(message or f"{kind.value} ({constraint or 'unknown constraint'})")


class ReferentialBlock(StoreError):
    """A delete was refused because other rows still reference the target."""

    def __init__(self, constraint: Optional[str], *, message: Optional[str] = None):
        self.constraint = constraint
        super().__init__(message or f"Referenced by other records ({constraint or 'unknown constraint'})")


class TransientStoreError(StoreError):
    """Connectivity or timeout failure; the caller has to resubmit."""
