from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class JobPosition:
    job_id: int
    job_title: str
    job_description: Optional[str]
    min_salary: Decimal
    max_salary: Decimal
