from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import TrainingGrade


@dataclass(frozen=True)
class EmployeeTraining:
    """Link row between an employee and a training session.

    Identified by (employee_id, training_id); there is no surrogate key.
    """

    employee_id: int
    training_id: int
    completion_date: Optional[date] = None
    grade: Optional[TrainingGrade] = None

    employee_name: Optional[str] = None
    session_title: Optional[str] = None

    @property
    def key(self) -> tuple[int, int]:
        return (self.employee_id, self.training_id)
