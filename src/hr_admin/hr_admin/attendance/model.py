from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """One clock-in/clock-out entry; at most one per employee and work date."""

    attendance_id: int
    employee_id: int
    work_date: date
    time_in: time
    time_out: Optional[time] = None

    employee_name: Optional[str] = None
