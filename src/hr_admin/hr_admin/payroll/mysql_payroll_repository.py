from __future__ import annotations

from ..crud.mysql_repository import MySQLRecordRepository
from .model import PayrollRecord

_COLUMNS = ("employee_id", "pay_period_start", "pay_period_end", "gross_pay", "deductions", "net_pay", "date_paid")


class MySQLPayrollRepository(MySQLRecordRepository):
    table = "payroll_records"
    key_columns = ("payroll_id",)
    insert_columns = _COLUMNS
    update_columns = _COLUMNS
    list_sql = """
        SELECT p.payroll_id, p.employee_id, p.pay_period_start, p.pay_period_end,
               p.gross_pay, p.deductions, p.net_pay, p.date_paid,
               CONCAT(e.first_name, ' ', e.last_name) AS employee_name
        FROM payroll_records p
        JOIN employees e ON p.employee_id = e.employee_id
        WHERE {where}
        ORDER BY p.pay_period_end DESC, e.last_name, e.first_name
    """
    detail_sql = """
        SELECT p.*, CONCAT(e.first_name, ' ', e.last_name) AS employee_name
        FROM payroll_records p
        JOIN employees e ON p.employee_id = e.employee_id
        WHERE p.payroll_id=%s
    """
    filter_columns = {"employee_id": "p.employee_id"}

    def _to_model(self, r: dict) -> PayrollRecord:
        return PayrollRecord(
            payroll_id=int(r["payroll_id"]),
            employee_id=int(r["employee_id"]),
            pay_period_start=r["pay_period_start"],
            pay_period_end=r["pay_period_end"],
            gross_pay=r["gross_pay"],
            deductions=r["deductions"],
            net_pay=r["net_pay"],
            date_paid=r["date_paid"],
            employee_name=r.get("employee_name"),
        )
