from __future__ import annotations

from dataclasses import replace

from ..common.datetime_utils import parse_clock_time, parse_iso_date
from ..common.validators import Field, parse_int
from ..crud.entity import EntityDescriptor, columns

EMPLOYEE_FIELD = Field(
    "employee_id",
    "Employee",
    parse=parse_int,
    widget="select",
    options="active_employees",
)

FIELDS = (
    EMPLOYEE_FIELD,
    Field("work_date", "Work date", parse=parse_iso_date, widget="date"),
    Field(
        "time_in",
        "Time in",
        parse=parse_clock_time,
        invalid="Time in must be in HH:MM format",
        widget="time",
    ),
    Field(
        "time_out",
        "Time out",
        parse=parse_clock_time,
        required=False,
        invalid="Time out must be in HH:MM format",
        widget="time",
    ),
)

# Existing records may belong to employees who are no longer active.
EDIT_FIELDS = (replace(EMPLOYEE_FIELD, options="employees"),) + FIELDS[1:]

ATTENDANCE = EntityDescriptor(
    name="attendance",
    url_prefix="/attendance",
    singular="Attendance",
    plural="Attendance",
    key_fields=("attendance_id",),
    fields=FIELDS,
    edit_fields=EDIT_FIELDS,
    list_columns=columns(
        ("attendance_id", "ID"),
        ("employee_name", "Employee"),
        ("work_date", "Work date"),
        ("time_in", "Time in"),
        ("time_out", "Time out"),
    ),
    detail_columns=columns(
        ("attendance_id", "ID"),
        ("employee_name", "Employee"),
        ("work_date", "Work date"),
        ("time_in", "Time in"),
        ("time_out", "Time out"),
    ),
    filters=("employee_id", "work_date"),
    violation_messages={
        "uq_attendance_employee_date": "Attendance for this employee on this date already exists.",
        "fk_attendance_employee": "The selected employee no longer exists.",
    },
)
