from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PayrollRecord:
    payroll_id: int
    employee_id: int
    pay_period_start: date
    pay_period_end: date
    gross_pay: Decimal
    deductions: Decimal
    net_pay: Decimal
    date_paid: date

    employee_name: Optional[str] = None
