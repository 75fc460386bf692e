from __future__ import annotations

from ..common.validators import Field, max_length, parse_int
from ..core.constants import DEPT_NAME_MAX_LENGTH, LOCATION_MAX_LENGTH
from ..crud.entity import EntityDescriptor, columns

FIELDS = (
    Field(
        "dept_name",
        "Department name",
        rules=(max_length(DEPT_NAME_MAX_LENGTH, "Department name"),),
    ),
    Field("location", "Location", required=False, rules=(max_length(LOCATION_MAX_LENGTH, "Location"),)),
    Field(
        "manager_id",
        "Manager",
        parse=parse_int,
        required=False,
        invalid="Invalid manager selection",
        widget="select",
        options="employees",
    ),
)

DEPARTMENT = EntityDescriptor(
    name="department",
    url_prefix="/department",
    singular="Department",
    plural="Departments",
    key_fields=("dept_id",),
    fields=FIELDS,
    list_columns=columns(
        ("dept_id", "ID"),
        ("dept_name", "Name"),
        ("location", "Location"),
        ("manager_name", "Manager"),
    ),
    detail_columns=columns(
        ("dept_id", "ID"),
        ("dept_name", "Name"),
        ("location", "Location"),
        ("manager_name", "Manager"),
    ),
    violation_messages={
        "uq_departments_name": "Department name must be unique.",
        "fk_departments_manager": "The selected manager no longer exists.",
    },
    block_messages={
        "fk_employees_department": "Employees are still assigned to it.",
    },
)
