from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import clean, validate
from ..core.exceptions import ConstraintViolation, NotFoundError, ReferentialBlock, ValidationError
from .entity import EntityDescriptor
from .repository import RecordRepository

logger = logging.getLogger(__name__)


class RecordService:
    """Validate -> write -> translate store failures, for one entity."""

    def __init__(self, entity: EntityDescriptor, records: RecordRepository):
        self._entity = entity
        self._records = records

    @property
    def entity(self) -> EntityDescriptor:
        return self._entity

    def list(self, filters: Optional[Mapping[str, str]] = None) -> Sequence[dict]:
        wanted = {}
        for name in self._entity.filters:
            value = ((filters or {}).get(name) or "").strip()
            if value:
                wanted[name] = value
        return self._records.list(wanted)

    def get(self, key) -> Any:
        record = self._records.get(key)
        if record is None:
            raise NotFoundError(f"{self._entity.singular} not found")
        return record

    def validate(self, form: Mapping[str, str], *, editing: bool) -> dict[str, Any]:
        fields = self._entity.form_fields(editing=editing)
        errors = validate(fields, form)
        if errors:
            raise ValidationError(errors)
        return clean(fields, form)

    def create(self, form: Mapping[str, str]):
        values = self.validate(form, editing=False)
        values = self._before_insert(values)
        try:
            key = self._records.insert(values)
        except ConstraintViolation as e:
            raise self._violation(e) from e
        logger.info("Created %s %s", self._entity.name, key)
        return key

    def update(self, key, form: Mapping[str, str]) -> None:
        values = self.validate(form, editing=True)
        try:
            matched = self._records.update(key, values)
        except ConstraintViolation as e:
            raise self._violation(e) from e
        if not matched:
            raise NotFoundError(f"{self._entity.singular} not found")
        logger.info("Updated %s %s", self._entity.name, key)

    def delete(self, key) -> None:
        try:
            deleted = self._records.delete(key)
        except ReferentialBlock as e:
            raise ReferentialBlock(e.constraint, message=self._entity.block_message(e)) from e
        if not deleted:
            raise NotFoundError(f"{self._entity.singular} not found")
        logger.info("Deleted %s %s", self._entity.name, key)

    def _before_insert(self, values: dict[str, Any]) -> dict[str, Any]:
        return values

    def _violation(self, error: ConstraintViolation) -> ConstraintViolation:
        return ConstraintViolation(
            error.constraint,
            kind=error.kind,
            message=self._entity.violation_message(error),
        )
