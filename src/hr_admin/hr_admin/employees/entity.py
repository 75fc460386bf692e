from __future__ import annotations

from ..common.datetime_utils import parse_iso_date
from ..common.validators import Field, matches, max_length, parse_choice, parse_int
from ..core.constants import (
    ADDRESS_MAX_LENGTH,
    CNIC_PATTERN,
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
)
from ..core.enums import EmployeeStatus, values_of
from ..crud.entity import EntityDescriptor, columns

FIELDS = (
    Field("first_name", "First name", rules=(max_length(NAME_MAX_LENGTH, "First name"),)),
    Field("last_name", "Last name", rules=(max_length(NAME_MAX_LENGTH, "Last name"),)),
    Field(
        "cnic",
        "CNIC",
        rules=(matches(CNIC_PATTERN, "CNIC format invalid: 12345-1234567-1"),),
    ),
    Field("date_of_birth", "Date of birth", parse=parse_iso_date, invalid="Invalid date of birth", widget="date"),
    Field(
        "email",
        "Email",
        rules=(max_length(EMAIL_MAX_LENGTH, "Email"), matches(EMAIL_PATTERN, "Invalid email")),
        widget="email",
    ),
    Field("phone_number", "Phone number", rules=(max_length(PHONE_MAX_LENGTH, "Phone number"),)),
    Field("address", "Address", rules=(max_length(ADDRESS_MAX_LENGTH, "Address"),)),
    Field("join_date", "Join date", parse=parse_iso_date, required=False, widget="date"),
    Field(
        "status",
        "Status",
        parse=parse_choice(EmployeeStatus),
        required=False,
        default=EmployeeStatus.ACTIVE,
        widget="select",
        choices=values_of(EmployeeStatus),
    ),
    Field("job_id", "Job position", parse=parse_int, widget="select", options="job_positions"),
    Field("dept_id", "Department", parse=parse_int, widget="select", options="departments"),
)

EMPLOYEE = EntityDescriptor(
    name="employee",
    url_prefix="/employee",
    singular="Employee",
    plural="Employees",
    key_fields=("employee_id",),
    fields=FIELDS,
    list_columns=columns(
        ("employee_id", "ID"),
        ("first_name", "First name"),
        ("last_name", "Last name"),
        ("cnic", "CNIC"),
        ("email", "Email"),
        ("phone_number", "Phone"),
        ("status", "Status"),
        ("job_title", "Job position"),
        ("dept_name", "Department"),
    ),
    detail_columns=columns(
        ("employee_id", "ID"),
        ("first_name", "First name"),
        ("last_name", "Last name"),
        ("cnic", "CNIC"),
        ("date_of_birth", "Date of birth"),
        ("email", "Email"),
        ("phone_number", "Phone number"),
        ("address", "Address"),
        ("join_date", "Join date"),
        ("status", "Status"),
        ("job_title", "Job position"),
        ("dept_name", "Department"),
    ),
    filters=("dept_id", "job_id", "status"),
    violation_messages={
        "uq_employees_cnic": "CNIC must be unique.",
        "uq_employees_email": "Email must be unique.",
        "fk_employees_job": "The selected job position no longer exists.",
        "fk_employees_department": "The selected department no longer exists.",
    },
    block_messages={
        "fk_departments_manager": "The employee manages a department.",
        "fk_attendance_employee": "The employee has attendance records.",
        "fk_leave_requests_employee": "The employee has leave requests.",
        "fk_leave_requests_reviewer": "The employee has reviewed leave requests.",
        "fk_payroll_employee": "The employee has payroll records.",
        "fk_employee_trainings_employee": "The employee has training records.",
        "fk_evaluations_employee": "The employee has performance evaluations.",
        "fk_evaluations_reviewer": "The employee has reviewed performance evaluations.",
    },
)
