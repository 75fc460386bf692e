from __future__ import annotations

from decimal import Decimal

from ..common.validators import Field, at_least, at_most, max_decimal_places, max_length, not_less_than, parse_decimal
from ..core.constants import MONEY_DECIMAL_PLACES, MONEY_MAX, TEXT_MAX_LENGTH, TITLE_MAX_LENGTH
from ..crud.entity import EntityDescriptor, columns

FIELDS = (
    Field("job_title", "Job title", rules=(max_length(TITLE_MAX_LENGTH, "Job title"),)),
    Field(
        "job_description",
        "Description",
        required=False,
        rules=(max_length(TEXT_MAX_LENGTH, "Description"),),
        widget="textarea",
    ),
    Field(
        "min_salary",
        "Min salary",
        parse=parse_decimal,
        rules=(
            at_least(Decimal("0"), "Min salary cannot be negative"),
            at_most(MONEY_MAX, f"Min salary must be at most {MONEY_MAX}"),
            max_decimal_places(MONEY_DECIMAL_PLACES, "Min salary"),
        ),
        widget="number",
    ),
    Field(
        "max_salary",
        "Max salary",
        parse=parse_decimal,
        rules=(
            at_least(Decimal("0"), "Max salary cannot be negative"),
            at_most(MONEY_MAX, f"Max salary must be at most {MONEY_MAX}"),
            max_decimal_places(MONEY_DECIMAL_PLACES, "Max salary"),
            not_less_than("min_salary", "Max salary must be greater than or equal to min salary"),
        ),
        widget="number",
    ),
)

JOB_POSITION = EntityDescriptor(
    name="job_position",
    url_prefix="/job-position",
    singular="Job position",
    plural="Job positions",
    key_fields=("job_id",),
    fields=FIELDS,
    list_columns=columns(
        ("job_id", "ID"),
        ("job_title", "Title"),
        ("min_salary", "Min salary"),
        ("max_salary", "Max salary"),
        ("employee_count", "Employees"),
    ),
    detail_columns=columns(
        ("job_id", "ID"),
        ("job_title", "Title"),
        ("job_description", "Description"),
        ("min_salary", "Min salary"),
        ("max_salary", "Max salary"),
    ),
    violation_messages={
        "uq_job_positions_title": "Job title must be unique.",
        "chk_job_positions_min_salary": "Min salary cannot be negative.",
        "chk_job_positions_salary_range": "Max salary must be greater than or equal to min salary.",
    },
    block_messages={
        "fk_employees_job": "Employees still hold this position.",
    },
)
