from __future__ import annotations

from dataclasses import replace

from ..common.datetime_utils import parse_iso_date
from ..common.validators import Field, max_length, not_before, parse_choice, parse_int
from ..core.constants import TEXT_MAX_LENGTH
from ..core.enums import LeaveStatus, LeaveType, values_of
from ..crud.entity import EntityDescriptor, columns

EMPLOYEE_FIELD = Field("employee_id", "Employee", parse=parse_int, widget="select", options="active_employees")

FIELDS = (
    EMPLOYEE_FIELD,
    Field(
        "leave_type",
        "Leave type",
        parse=parse_choice(LeaveType),
        widget="select",
        choices=values_of(LeaveType),
    ),
    Field("start_date", "Start date", parse=parse_iso_date, widget="date"),
    Field(
        "end_date",
        "End date",
        parse=parse_iso_date,
        rules=(not_before("start_date", "End date must be on/after start date"),),
        widget="date",
    ),
    Field("reason", "Reason", rules=(max_length(TEXT_MAX_LENGTH, "Reason"),), widget="textarea"),
)

# Blank status keeps the current one.
EDIT_FIELDS = (replace(EMPLOYEE_FIELD, options="employees"),) + FIELDS[1:] + (
    Field(
        "status",
        "Status",
        parse=parse_choice(LeaveStatus),
        required=False,
        widget="select",
        choices=values_of(LeaveStatus),
    ),
    Field("reviewed_by", "Reviewed by", parse=parse_int, required=False, widget="select", options="employees"),
)

LEAVE_REQUEST = EntityDescriptor(
    name="leave_request",
    url_prefix="/leave-request",
    singular="Leave request",
    plural="Leave requests",
    key_fields=("leave_id",),
    fields=FIELDS,
    edit_fields=EDIT_FIELDS,
    list_columns=columns(
        ("leave_id", "ID"),
        ("employee_name", "Employee"),
        ("leave_type", "Type"),
        ("start_date", "Start"),
        ("end_date", "End"),
        ("status", "Status"),
        ("submitted_date", "Submitted"),
        ("reviewer_name", "Reviewed by"),
    ),
    detail_columns=columns(
        ("leave_id", "ID"),
        ("employee_name", "Employee"),
        ("leave_type", "Type"),
        ("start_date", "Start date"),
        ("end_date", "End date"),
        ("reason", "Reason"),
        ("status", "Status"),
        ("submitted_date", "Submitted"),
        ("reviewer_name", "Reviewed by"),
        ("review_date", "Review date"),
    ),
    filters=("employee_id", "status", "leave_type"),
    violation_messages={
        "chk_leave_requests_dates": "End date must be on/after start date.",
        "fk_leave_requests_employee": "The selected employee no longer exists.",
        "fk_leave_requests_reviewer": "The selected reviewer no longer exists.",
    },
)
