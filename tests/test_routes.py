from __future__ import annotations

from datetime import date

import pytest

from src.hr_admin.hr_admin.attendance.entity import ATTENDANCE
from src.hr_admin.hr_admin.container import Container
from src.hr_admin.hr_admin.core.enums import EmployeeStatus
from src.hr_admin.hr_admin.core.exceptions import TransientStoreError
from src.hr_admin.hr_admin.crud.service import RecordService
from src.hr_admin.hr_admin.departments.entity import DEPARTMENT
from src.hr_admin.hr_admin.employee_training.entity import EMPLOYEE_TRAINING
from src.hr_admin.hr_admin.employee_training.service import EmployeeTrainingService
from src.hr_admin.hr_admin.employees.entity import EMPLOYEE
from src.hr_admin.hr_admin.evaluations.entity import EVALUATION
from src.hr_admin.hr_admin.job_positions.entity import JOB_POSITION
from src.hr_admin.hr_admin.leave_requests.entity import LEAVE_REQUEST
from src.hr_admin.hr_admin.leave_requests.service import LeaveRequestService
from src.hr_admin.hr_admin.lookups.model import Option
from src.hr_admin.hr_admin.main import create_app
from src.hr_admin.hr_admin.payroll.entity import PAYROLL
from src.hr_admin.hr_admin.training.entity import TRAINING
from tests.fakes import FakeLookups, InMemoryLinks, InMemoryRecords


@pytest.fixture
def repos():
    employees = InMemoryRecords(("employee_id",), unique={"uq_employees_cnic": ("cnic",)})
    employees.seed(
        employee_id=1,
        first_name="Ayesha",
        last_name="Khan",
        cnic="61101-1234567-1",
        date_of_birth=date(1990, 4, 12),
        email="ayesha.khan@example.com",
        phone_number="03001234567",
        address="House 12, F-8, Islamabad",
        join_date=None,
        status=EmployeeStatus.ACTIVE,
        job_id=1,
        dept_id=1,
        job_title="Software Engineer",
        dept_name="Engineering",
    )
    links = InMemoryLinks()
    links.seed(employee_id=1, training_id=1, completion_date=date(2024, 3, 15), grade=None)
    return {"employees": employees, "links": links}


@pytest.fixture
def client(monkeypatch, repos):
    monkeypatch.setenv("APP_ENV", "testing")
    lookups = FakeLookups(
        {
            "employees": [Option(1, "Ayesha Khan")],
            "active_employees": [Option(1, "Ayesha Khan")],
            "departments": [Option(1, "Engineering")],
            "job_positions": [Option(1, "Software Engineer")],
            "training_sessions": [Option(1, "Workplace Safety (2024-03-15)")],
        }
    )
    container = Container(
        conn=None,
        lookups=lookups,
        employee_service=RecordService(EMPLOYEE, repos["employees"]),
        department_service=RecordService(DEPARTMENT, InMemoryRecords(("dept_id",))),
        job_position_service=RecordService(JOB_POSITION, InMemoryRecords(("job_id",))),
        attendance_service=RecordService(ATTENDANCE, InMemoryRecords(("attendance_id",))),
        leave_request_service=LeaveRequestService(LEAVE_REQUEST, InMemoryRecords(("leave_id",))),
        payroll_service=RecordService(PAYROLL, InMemoryRecords(("payroll_id",))),
        training_service=RecordService(TRAINING, InMemoryRecords(("training_id",))),
        evaluation_service=RecordService(EVALUATION, InMemoryRecords(("evaluation_id",))),
        employee_training_service=EmployeeTrainingService(EMPLOYEE_TRAINING, repos["links"]),
    )
    app = create_app(container)
    return app.test_client()


def _employee_form(**overrides):
    form = {
        "first_name": "Bilal",
        "last_name": "Ahmed",
        "cnic": "61101-7654321-3",
        "date_of_birth": "1987-11-30",
        "email": "bilal.ahmed@example.com",
        "phone_number": "03211234567",
        "address": "House 4, G-10, Islamabad",
        "join_date": "",
        "status": "Active",
        "job_id": "1",
        "dept_id": "1",
    }
    form.update(overrides)
    return form


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json() == {"status": "ok"}


def test_index_links_every_entity(client):
    res = client.get("/")
    assert res.status_code == 200
    for path in ("/employee/view", "/job-position/view", "/leave-request/view", "/employee-training/view"):
        assert path.encode() in res.data


def test_unknown_path_is_404(client):
    assert client.get("/no-such-page").status_code == 404


def test_list_shows_rows_and_flash(client):
    res = client.get("/employee/view?success=Employee+added+successfully")
    assert res.status_code == 200
    assert b"Ayesha" in res.data
    assert b"Engineering" in res.data
    assert b"Employee added successfully" in res.data


def test_details_of_missing_record_redirects_with_error(client):
    res = client.get("/employee/details/99")
    assert res.status_code == 302
    assert "/employee/view" in res.headers["Location"]
    assert "error=" in res.headers["Location"]


def test_add_form_lists_reference_options(client):
    res = client.get("/employee/add")
    assert res.status_code == 200
    assert b"Software Engineer" in res.data
    assert b"Engineering" in res.data


def test_invalid_add_rerenders_with_messages_and_submitted_values(client, repos):
    res = client.post("/employee/add", data=_employee_form(cnic="1234", first_name="Bilal"))
    assert res.status_code == 200
    assert b"CNIC format invalid: 12345-1234567-1" in res.data
    assert b'value="1234"' in res.data
    assert b'value="Bilal"' in res.data
    assert len(repos["employees"].rows) == 1


def test_valid_add_redirects_with_success(client, repos):
    res = client.post("/employee/add", data=_employee_form())
    assert res.status_code == 302
    assert "/employee/view" in res.headers["Location"]
    assert "success=" in res.headers["Location"]
    assert len(repos["employees"].rows) == 2


def test_duplicate_add_rerenders_with_constraint_message(client, repos):
    res = client.post("/employee/add", data=_employee_form(cnic="61101-1234567-1"))
    assert res.status_code == 200
    assert b"CNIC must be unique." in res.data
    assert len(repos["employees"].rows) == 1


def test_edit_form_is_prefilled(client):
    res = client.get("/employee/edit/1")
    assert res.status_code == 200
    assert b'value="Ayesha"' in res.data
    assert b'value="1990-04-12"' in res.data


def test_blocked_delete_redirects_with_reason(client, repos):
    repos["employees"].blocked[1] = "fk_payroll_employee"
    res = client.post("/employee/delete/1")
    assert res.status_code == 302
    assert "error=" in res.headers["Location"]
    assert 1 in repos["employees"].rows


def test_delete_confirmation_then_delete(client, repos):
    assert client.get("/employee/delete/1").status_code == 200
    res = client.post("/employee/delete/1")
    assert res.status_code == 302
    assert "success=" in res.headers["Location"]
    assert repos["employees"].rows == {}


def test_composite_key_routes(client, repos):
    assert client.get("/employee-training/details/1/1").status_code == 200
    assert client.get("/employee-training/edit/1/1").status_code == 200

    res = client.post(
        "/employee-training/edit/1/1",
        data={"employee_id": "1", "training_id": "2", "completion_date": "2024-03-15", "grade": "A"},
    )
    assert res.status_code == 302
    assert list(repos["links"].rows) == [(1, 2)]


def test_store_outage_on_list_is_503(client, repos, monkeypatch):
    def down(filters=None):
        raise TransientStoreError("Lost connection")

    monkeypatch.setattr(repos["employees"], "list", down)
    res = client.get("/employee/view")
    assert res.status_code == 503
    assert b"The database is unavailable, please try again." in res.data
