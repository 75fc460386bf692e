from __future__ import annotations

from datetime import date, timedelta, time
from decimal import Decimal

import pytest
from mysql.connector import errors

from src.hr_admin.hr_admin.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.hr_admin.hr_admin.core.constants import DEFAULT_LIST_LIMIT
from src.hr_admin.hr_admin.core.enums import EmployeeStatus
from src.hr_admin.hr_admin.core.exceptions import ReferentialBlock, TransientStoreError
from src.hr_admin.hr_admin.employees.mysql_employee_repository import MySQLEmployeeRepository
from src.hr_admin.hr_admin.job_positions.mysql_job_position_repository import MySQLJobPositionRepository
from tests.scripted_db import ScriptedConnection, ScriptedConnFactory


def test_list_binds_known_filters_and_limit():
    conn = ScriptedConnection({"SELECT": 0})
    repo = MySQLEmployeeRepository(ScriptedConnFactory(conn))

    repo.list({"status": EmployeeStatus.ON_LEAVE, "dept_id": "2", "cnic": "ignored"})

    sql, params = conn.statements[0]
    assert "WHERE 1=1 AND e.status=%s AND e.dept_id=%s ORDER BY" in sql
    assert sql.endswith("LIMIT %s")
    assert params == ("On Leave", "2", DEFAULT_LIST_LIMIT)


def test_attendance_rows_normalize_time_columns():
    row = {
        "attendance_id": 1,
        "employee_id": 1,
        "work_date": date(2024, 5, 2),
        "time_in": timedelta(hours=9),
        "time_out": None,
        "employee_name": "Ayesha Khan",
    }
    conn = ScriptedConnection({"SELECT": 1}, rows=[row])
    repo = MySQLAttendanceRepository(ScriptedConnFactory(conn))

    assert repo.list()[0]["time_in"] == time(9, 0)
    record = repo.get(1)
    assert record.time_in == time(9, 0)
    assert record.time_out is None
    assert record.employee_name == "Ayesha Khan"


def test_insert_returns_generated_key():
    conn = ScriptedConnection({"INSERT": 1}, lastrowid=17)
    repo = MySQLJobPositionRepository(ScriptedConnFactory(conn))

    key = repo.insert(
        {"job_title": "Analyst", "job_description": None, "min_salary": Decimal("1.00"), "max_salary": Decimal("2.00")}
    )

    assert key == 17
    assert conn.statements[0][1] == ("Analyst", None, Decimal("1.00"), Decimal("2.00"))
    assert conn.committed


def test_blocked_delete_is_translated_rolled_back_and_released():
    err = errors.IntegrityError(
        msg=(
            "Cannot delete or update a parent row: a foreign key constraint fails "
            "(`hr_management_db`.`payroll_records`, CONSTRAINT `fk_payroll_employee` "
            "FOREIGN KEY (`employee_id`) REFERENCES `employees` (`employee_id`))"
        ),
        errno=1451,
    )
    conn = ScriptedConnection({"DELETE": err})
    factory = ScriptedConnFactory(conn)

    with pytest.raises(ReferentialBlock) as exc:
        MySQLEmployeeRepository(factory).delete(1)

    assert exc.value.constraint == "fk_payroll_employee"
    assert conn.rolled_back and not conn.committed
    assert factory.released == 1


def test_connection_loss_is_transient():
    conn = ScriptedConnection({"SELECT": errors.OperationalError(msg="Lost connection", errno=2013)})

    with pytest.raises(TransientStoreError):
        MySQLEmployeeRepository(ScriptedConnFactory(conn)).get(1)
    assert conn.rolled_back
