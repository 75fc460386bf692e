from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status stored on the employee row."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ON_LEAVE = "On Leave"
    TERMINATED = "Terminated"


class LeaveType(str, Enum):
    SICK = "Sick"
    ANNUAL = "Annual"
    CASUAL = "Casual"
    UNPAID = "Unpaid"
    EMERGENCY = "Emergency"


class LeaveStatus(str, Enum):
    """Review flow of a leave request: Pending -> Approved | Rejected."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class TrainingGrade(str, Enum):
    A_PLUS = "A+"
    A = "A"
    B_PLUS = "B+"
    B = "B"
    C_PLUS = "C+"
    C = "C"
    FAIL = "F"


class ViolationKind(str, Enum):
    """How the store rejected a write."""

    DUPLICATE = "DUPLICATE"
    MISSING_REFERENCE = "MISSING_REFERENCE"
    CHECK = "CHECK"


def values_of(enum_cls) -> tuple[str, ...]:
    return tuple(member.value for member in enum_cls)
