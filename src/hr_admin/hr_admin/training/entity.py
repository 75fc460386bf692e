from __future__ import annotations

from ..common.datetime_utils import parse_iso_date
from ..common.validators import Field, max_length
from ..core.constants import INSTRUCTOR_MAX_LENGTH, SESSION_TITLE_MAX_LENGTH, TEXT_MAX_LENGTH
from ..crud.entity import EntityDescriptor, columns

FIELDS = (
    Field("session_title", "Title", rules=(max_length(SESSION_TITLE_MAX_LENGTH, "Title"),)),
    Field(
        "description",
        "Description",
        required=False,
        rules=(max_length(TEXT_MAX_LENGTH, "Description"),),
        widget="textarea",
    ),
    Field("instructor", "Instructor", rules=(max_length(INSTRUCTOR_MAX_LENGTH, "Instructor"),)),
    Field("session_date", "Session date", parse=parse_iso_date, invalid="Invalid session date", widget="date"),
)

TRAINING = EntityDescriptor(
    name="training",
    url_prefix="/training",
    singular="Training session",
    plural="Training sessions",
    key_fields=("training_id",),
    fields=FIELDS,
    list_columns=columns(
        ("training_id", "ID"),
        ("session_title", "Title"),
        ("instructor", "Instructor"),
        ("session_date", "Date"),
        ("participant_count", "Participants"),
    ),
    detail_columns=columns(
        ("training_id", "ID"),
        ("session_title", "Title"),
        ("description", "Description"),
        ("instructor", "Instructor"),
        ("session_date", "Date"),
    ),
    block_messages={
        "fk_employee_trainings_training": "Employees are enrolled in this session.",
    },
)
