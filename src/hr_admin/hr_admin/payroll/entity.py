from __future__ import annotations

from decimal import Decimal

from ..common.datetime_utils import parse_iso_date
from ..common.validators import Field, at_least, at_most, max_decimal_places, not_before, parse_decimal, parse_int
from ..core.constants import MONEY_DECIMAL_PLACES, MONEY_MAX
from ..crud.entity import EntityDescriptor, columns


def money_field(name: str, label: str, *, required: bool = True) -> Field:
    return Field(
        name,
        label,
        parse=parse_decimal,
        required=required,
        default=None if required else Decimal("0.00"),
        rules=(
            at_least(Decimal("0"), f"{label} cannot be negative"),
            at_most(MONEY_MAX, f"{label} must be at most {MONEY_MAX}"),
            max_decimal_places(MONEY_DECIMAL_PLACES, label),
        ),
        widget="number",
    )


FIELDS = (
    Field("employee_id", "Employee", parse=parse_int, widget="select", options="employees"),
    Field("pay_period_start", "Pay period start", parse=parse_iso_date, widget="date"),
    Field(
        "pay_period_end",
        "Pay period end",
        parse=parse_iso_date,
        rules=(not_before("pay_period_start", "End date must be on/after start date"),),
        widget="date",
    ),
    money_field("gross_pay", "Gross pay"),
    money_field("deductions", "Deductions", required=False),
    money_field("net_pay", "Net pay"),
    Field("date_paid", "Date paid", parse=parse_iso_date, widget="date"),
)

PAYROLL = EntityDescriptor(
    name="payroll",
    url_prefix="/payroll",
    singular="Payroll record",
    plural="Payroll records",
    key_fields=("payroll_id",),
    fields=FIELDS,
    list_columns=columns(
        ("payroll_id", "ID"),
        ("employee_name", "Employee"),
        ("pay_period_start", "Period start"),
        ("pay_period_end", "Period end"),
        ("gross_pay", "Gross"),
        ("deductions", "Deductions"),
        ("net_pay", "Net"),
        ("date_paid", "Paid on"),
    ),
    detail_columns=columns(
        ("payroll_id", "ID"),
        ("employee_name", "Employee"),
        ("pay_period_start", "Pay period start"),
        ("pay_period_end", "Pay period end"),
        ("gross_pay", "Gross pay"),
        ("deductions", "Deductions"),
        ("net_pay", "Net pay"),
        ("date_paid", "Date paid"),
    ),
    filters=("employee_id",),
    violation_messages={
        "uq_payroll_employee_period": "Payroll for this employee and period already exists.",
        "chk_payroll_period": "End date must be on/after start date.",
        "chk_payroll_amounts": "Amounts cannot be negative.",
        "fk_payroll_employee": "The selected employee no longer exists.",
    },
)
