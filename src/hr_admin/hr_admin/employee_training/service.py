from __future__ import annotations

import logging
from typing import Mapping

from ..core.exceptions import ConstraintViolation, NotFoundError
from ..crud.entity import EntityDescriptor
from ..crud.service import RecordService
from .repository import EmployeeTrainingRepository

logger = logging.getLogger(__name__)


class EmployeeTrainingService(RecordService):
    def __init__(self, entity: EntityDescriptor, records: EmployeeTrainingRepository):
        super().__init__(entity, records)
        self._links = records

    def update(self, key: tuple[int, int], form: Mapping[str, str]) -> None:
        """Edit a link row; a changed (employee, training) pair moves the row atomically."""

        values = self.validate(form, editing=True)
        new_key = self.entity.key_from(values)

        try:
            if new_key == key:
                if not self._links.update(key, values):
                    raise NotFoundError(f"{self.entity.singular} not found")
            else:
                self._links.rekey(key, new_key, values)
        except ConstraintViolation as e:
            raise self._violation(e) from e

        if new_key == key:
            logger.info("Updated employee training %s", key)
        else:
            logger.info("Moved employee training %s -> %s", key, new_key)
