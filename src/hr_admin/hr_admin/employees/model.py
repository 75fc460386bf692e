from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain record of one employee row."""

    employee_id: int
    first_name: str
    last_name: str
    cnic: str
    date_of_birth: date
    email: str
    phone_number: str
    address: str
    join_date: Optional[date]
    status: EmployeeStatus
    job_id: int
    dept_id: int

    # Display-only, joined from the parent tables.
    job_title: Optional[str] = None
    dept_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
