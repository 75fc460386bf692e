from __future__ import annotations

from typing import Any, Mapping, Protocol

from ..crud.repository import RecordRepository


class EmployeeTrainingRepository(RecordRepository, Protocol):
    def rekey(self, old_key: tuple[int, int], new_key: tuple[int, int], values: Mapping[str, Any]) -> None:
        """Move a link row to a new (employee_id, training_id) in one transaction.

        Raises ConstraintViolation when ``new_key`` is taken and NotFoundError when
        ``old_key`` is gone; in both cases nothing changes.
        """

        raise NotImplementedError
