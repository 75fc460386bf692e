from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PerformanceEvaluation:
    evaluation_id: int
    employee_id: int
    reviewer_id: int
    evaluation_date: Optional[date]
    rating: Decimal
    comments: Optional[str] = None

    employee_name: Optional[str] = None
    reviewer_name: Optional[str] = None
