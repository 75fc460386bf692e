from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    leave_id: int
    employee_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    submitted_date: date
    reviewed_by: Optional[int] = None
    review_date: Optional[date] = None

    employee_name: Optional[str] = None
    reviewer_name: Optional[str] = None
