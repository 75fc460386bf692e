from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class TrainingSession:
    training_id: int
    session_title: str
    description: Optional[str]
    instructor: str
    session_date: date
