from __future__ import annotations

from mysql.connector import errors

from src.hr_admin.hr_admin.core.enums import ViolationKind
from src.hr_admin.hr_admin.core.exceptions import ConstraintViolation, ReferentialBlock, TransientStoreError
from src.hr_admin.hr_admin.database.mysql_base import translate_error


def test_duplicate_entry_reports_key_name_without_table_prefix():
    err = errors.IntegrityError(
        msg="Duplicate entry '35202-1112223-4' for key 'employees.uq_employees_cnic'",
        errno=1062,
    )
    out = translate_error(err)
    assert isinstance(out, ConstraintViolation)
    assert out.kind == ViolationKind.DUPLICATE
    assert out.constraint == "uq_employees_cnic"


def test_duplicate_primary_key():
    err = errors.IntegrityError(msg="Duplicate entry '5-11' for key 'employee_trainings.PRIMARY'", errno=1062)
    assert translate_error(err).constraint == "PRIMARY"


def test_missing_parent_is_missing_reference():
    err = errors.IntegrityError(
        msg=(
            "Cannot add or update a child row: a foreign key constraint fails "
            "(`hr_management_db`.`employees`, CONSTRAINT `fk_employees_department` "
            "FOREIGN KEY (`dept_id`) REFERENCES `departments` (`dept_id`))"
        ),
        errno=1452,
    )
    out = translate_error(err)
    assert isinstance(out, ConstraintViolation)
    assert out.kind == ViolationKind.MISSING_REFERENCE
    assert out.constraint == "fk_employees_department"


def test_referenced_parent_is_referential_block():
    err = errors.IntegrityError(
        msg=(
            "Cannot delete or update a parent row: a foreign key constraint fails "
            "(`hr_management_db`.`attendance`, CONSTRAINT `fk_attendance_employee` "
            "FOREIGN KEY (`employee_id`) REFERENCES `employees` (`employee_id`))"
        ),
        errno=1451,
    )
    out = translate_error(err)
    assert isinstance(out, ReferentialBlock)
    assert out.constraint == "fk_attendance_employee"


def test_check_constraint():
    err = errors.DatabaseError(msg="Check constraint 'chk_evaluations_rating' is violated.", errno=3819)
    out = translate_error(err)
    assert isinstance(out, ConstraintViolation)
    assert out.kind == ViolationKind.CHECK
    assert out.constraint == "chk_evaluations_rating"


def test_lost_connection_is_transient():
    err = errors.OperationalError(msg="Lost connection to MySQL server during query", errno=2013)
    assert isinstance(translate_error(err), TransientStoreError)


def test_programming_errors_are_not_translated():
    err = errors.ProgrammingError(msg="You have an error in your SQL syntax", errno=1064)
    assert translate_error(err) is None


def test_out_of_range_value_is_check_violation():
    err = errors.DataError(msg="Out of range value for column 'gross_pay' at row 1", errno=1264)
    out = translate_error(err)
    assert isinstance(out, ConstraintViolation)
    assert out.kind == ViolationKind.CHECK
    assert out.constraint == "gross_pay"


def test_too_long_value_is_check_violation():
    err = errors.DataError(msg="Data too long for column 'job_title' at row 1", errno=1406)
    out = translate_error(err)
    assert isinstance(out, ConstraintViolation)
    assert out.kind == ViolationKind.CHECK
    assert out.constraint == "job_title"
