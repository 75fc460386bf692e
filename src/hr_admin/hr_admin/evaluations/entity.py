from __future__ import annotations

from ..common.datetime_utils import parse_iso_date
from ..common.validators import Field, between, max_decimal_places, max_length, parse_decimal, parse_int
from ..core.constants import MAX_RATING, MIN_RATING, TEXT_MAX_LENGTH
from ..crud.entity import EntityDescriptor, columns

RATING_MESSAGE = f"Rating must be between {MIN_RATING} and {MAX_RATING}"

FIELDS = (
    Field("employee_id", "Employee", parse=parse_int, widget="select", options="employees"),
    Field("reviewer_id", "Reviewer", parse=parse_int, widget="select", options="employees"),
    Field("evaluation_date", "Evaluation date", parse=parse_iso_date, required=False, widget="date"),
    Field(
        "rating",
        "Rating",
        parse=parse_decimal,
        invalid=RATING_MESSAGE,
        # DECIMAL(3, 2) column
        rules=(between(MIN_RATING, MAX_RATING, RATING_MESSAGE), max_decimal_places(2, "Rating")),
        widget="number",
    ),
    Field(
        "comments",
        "Comments",
        required=False,
        rules=(max_length(TEXT_MAX_LENGTH, "Comments"),),
        widget="textarea",
    ),
)

EVALUATION = EntityDescriptor(
    name="evaluation",
    url_prefix="/evaluation",
    singular="Evaluation",
    plural="Performance evaluations",
    key_fields=("evaluation_id",),
    fields=FIELDS,
    list_columns=columns(
        ("evaluation_id", "ID"),
        ("employee_name", "Employee"),
        ("reviewer_name", "Reviewer"),
        ("evaluation_date", "Date"),
        ("rating", "Rating"),
    ),
    detail_columns=columns(
        ("evaluation_id", "ID"),
        ("employee_name", "Employee"),
        ("reviewer_name", "Reviewer"),
        ("evaluation_date", "Date"),
        ("rating", "Rating"),
        ("comments", "Comments"),
    ),
    filters=("employee_id", "reviewer_id"),
    violation_messages={
        "chk_evaluations_rating": RATING_MESSAGE + ".",
        "fk_evaluations_employee": "The selected employee no longer exists.",
        "fk_evaluations_reviewer": "The selected reviewer no longer exists.",
    },
)
