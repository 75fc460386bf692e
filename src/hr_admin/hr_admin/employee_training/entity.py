from __future__ import annotations

from ..common.datetime_utils import parse_iso_date
from ..common.validators import Field, parse_choice, parse_int
from ..core.enums import TrainingGrade, values_of
from ..crud.entity import EntityDescriptor, columns

FIELDS = (
    Field("employee_id", "Employee", parse=parse_int, widget="select", options="employees"),
    Field("training_id", "Training session", parse=parse_int, widget="select", options="training_sessions"),
    Field("completion_date", "Completion date", parse=parse_iso_date, required=False, widget="date"),
    Field(
        "grade",
        "Grade",
        parse=parse_choice(TrainingGrade),
        required=False,
        widget="select",
        choices=values_of(TrainingGrade),
    ),
)

EMPLOYEE_TRAINING = EntityDescriptor(
    name="employee_training",
    url_prefix="/employee-training",
    singular="Training record",
    plural="Employee training",
    key_fields=("employee_id", "training_id"),
    fields=FIELDS,
    list_columns=columns(
        ("employee_name", "Employee"),
        ("session_title", "Training session"),
        ("session_date", "Session date"),
        ("completion_date", "Completed"),
        ("grade", "Grade"),
    ),
    detail_columns=columns(
        ("employee_name", "Employee"),
        ("session_title", "Training session"),
        ("completion_date", "Completion date"),
        ("grade", "Grade"),
    ),
    filters=("employee_id", "training_id"),
    violation_messages={
        "PRIMARY": "This employee-training record already exists.",
        "fk_employee_trainings_employee": "The selected employee no longer exists.",
        "fk_employee_trainings_training": "The selected training session no longer exists.",
    },
)
