from __future__ import annotations

from datetime import date

import pytest
from mysql.connector import errors

from src.hr_admin.hr_admin.core.enums import TrainingGrade
from src.hr_admin.hr_admin.core.exceptions import ConstraintViolation, NotFoundError
from src.hr_admin.hr_admin.employee_training.entity import EMPLOYEE_TRAINING
from src.hr_admin.hr_admin.employee_training.mysql_employee_training_repository import (
    MySQLEmployeeTrainingRepository,
)
from src.hr_admin.hr_admin.employee_training.service import EmployeeTrainingService
from tests.fakes import InMemoryLinks
from tests.scripted_db import ScriptedConnection, ScriptedConnFactory

VALUES = {"employee_id": 5, "training_id": 11, "completion_date": date(2024, 3, 15), "grade": TrainingGrade.B_PLUS}


def _form(employee_id="5", training_id="11", grade="B+"):
    return {"employee_id": employee_id, "training_id": training_id, "completion_date": "2024-03-15", "grade": grade}


# -------- SQL unit of work --------
def test_rekey_inserts_new_key_then_deletes_old_key_in_one_commit():
    conn = ScriptedConnection({"INSERT": 1, "DELETE": 1})
    factory = ScriptedConnFactory(conn)

    MySQLEmployeeTrainingRepository(factory).rekey((5, 10), (5, 11), VALUES)

    (insert_sql, insert_params), (delete_sql, delete_params) = conn.statements
    assert insert_sql.startswith("INSERT INTO employee_trainings(employee_id, training_id, completion_date, grade)")
    assert insert_params == (5, 11, date(2024, 3, 15), "B+")
    assert delete_sql == "DELETE FROM employee_trainings WHERE employee_id=%s AND training_id=%s"
    assert delete_params == (5, 10)
    assert conn.committed and not conn.rolled_back
    assert factory.released == 1


def test_rekey_onto_existing_key_rolls_back_without_deleting():
    dup = errors.IntegrityError(msg="Duplicate entry '5-11' for key 'employee_trainings.PRIMARY'", errno=1062)
    conn = ScriptedConnection({"INSERT": dup})
    factory = ScriptedConnFactory(conn)

    with pytest.raises(ConstraintViolation) as exc:
        MySQLEmployeeTrainingRepository(factory).rekey((5, 10), (5, 11), VALUES)

    assert exc.value.constraint == "PRIMARY"
    assert [sql.split()[0] for sql, _ in conn.statements] == ["INSERT"]
    assert conn.rolled_back and not conn.committed
    assert factory.released == 1


def test_rekey_of_vanished_row_rolls_back_the_insert():
    conn = ScriptedConnection({"INSERT": 1, "DELETE": 0})
    factory = ScriptedConnFactory(conn)

    with pytest.raises(NotFoundError):
        MySQLEmployeeTrainingRepository(factory).rekey((5, 10), (5, 11), VALUES)

    assert conn.rolled_back and not conn.committed
    assert factory.released == 1


def test_in_place_update_touches_only_completion_and_grade():
    conn = ScriptedConnection({"UPDATE": 1})

    matched = MySQLEmployeeTrainingRepository(ScriptedConnFactory(conn)).update((5, 10), VALUES)

    assert matched == 1
    sql, params = conn.statements[0]
    assert sql == "UPDATE employee_trainings SET completion_date=%s, grade=%s WHERE employee_id=%s AND training_id=%s"
    assert params == (date(2024, 3, 15), "B+", 5, 10)


# -------- service --------
@pytest.fixture
def links():
    repo = InMemoryLinks()
    repo.seed(employee_id=5, training_id=10, completion_date=None, grade=None)
    return repo, EmployeeTrainingService(EMPLOYEE_TRAINING, repo)


def test_changed_key_moves_the_row(links):
    repo, svc = links
    svc.update((5, 10), _form())

    assert (5, 10) not in repo.rows
    assert repo.rows[(5, 11)]["grade"] == TrainingGrade.B_PLUS
    assert repo.rows[(5, 11)]["completion_date"] == date(2024, 3, 15)


def test_changed_key_onto_taken_pair_keeps_original(links):
    repo, svc = links
    repo.seed(employee_id=5, training_id=11, completion_date=None, grade=TrainingGrade.A)

    with pytest.raises(ConstraintViolation, match="This employee-training record already exists."):
        svc.update((5, 10), _form())

    assert repo.rows[(5, 10)]["grade"] is None
    assert repo.rows[(5, 11)]["grade"] == TrainingGrade.A
    assert len(repo.rows) == 2


def test_same_key_updates_in_place(links):
    repo, svc = links
    svc.update((5, 10), _form(training_id="10", grade="A+"))

    assert list(repo.rows) == [(5, 10)]
    assert repo.rows[(5, 10)]["grade"] == TrainingGrade.A_PLUS


def test_same_key_missing_row_is_not_found(links):
    _, svc = links
    with pytest.raises(NotFoundError, match="Training record not found"):
        svc.update((9, 9), _form(employee_id="9", training_id="9"))
