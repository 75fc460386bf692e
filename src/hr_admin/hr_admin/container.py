from __future__ import annotations

from dataclasses import dataclass

from .attendance.entity import ATTENDANCE
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .crud.service import RecordService
from .database.connection import DBConfig, DatabaseConnection
from .departments.entity import DEPARTMENT
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .employee_training.entity import EMPLOYEE_TRAINING
from .employee_training.mysql_employee_training_repository import MySQLEmployeeTrainingRepository
from .employee_training.service import EmployeeTrainingService
from .employees.entity import EMPLOYEE
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .evaluations.entity import EVALUATION
from .evaluations.mysql_evaluation_repository import MySQLEvaluationRepository
from .job_positions.entity import JOB_POSITION
from .job_positions.mysql_job_position_repository import MySQLJobPositionRepository
from .leave_requests.entity import LEAVE_REQUEST
from .leave_requests.mysql_leave_request_repository import MySQLLeaveRequestRepository
from .leave_requests.service import LeaveRequestService
from .lookups.mysql_lookup_repository import MySQLLookupRepository
from .lookups.repository import LookupRepository
from .payroll.entity import PAYROLL
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .training.entity import TRAINING
from .training.mysql_training_repository import MySQLTrainingRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection | None

    lookups: LookupRepository

    employee_service: RecordService
    department_service: RecordService
    job_position_service: RecordService
    attendance_service: RecordService
    leave_request_service: LeaveRequestService
    payroll_service: RecordService
    training_service: RecordService
    evaluation_service: RecordService
    employee_training_service: EmployeeTrainingService

    @property
    def services(self) -> tuple[RecordService, ...]:
        """Every entity service, in navigation order."""
        return (
            self.employee_service,
            self.department_service,
            self.job_position_service,
            self.attendance_service,
            self.leave_request_service,
            self.payroll_service,
            self.training_service,
            self.evaluation_service,
            self.employee_training_service,
        )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return Container(
        conn=conn,
        lookups=MySQLLookupRepository(conn),
        employee_service=RecordService(EMPLOYEE, MySQLEmployeeRepository(conn)),
        department_service=RecordService(DEPARTMENT, MySQLDepartmentRepository(conn)),
        job_position_service=RecordService(JOB_POSITION, MySQLJobPositionRepository(conn)),
        attendance_service=RecordService(ATTENDANCE, MySQLAttendanceRepository(conn)),
        leave_request_service=LeaveRequestService(LEAVE_REQUEST, MySQLLeaveRequestRepository(conn)),
        payroll_service=RecordService(PAYROLL, MySQLPayrollRepository(conn)),
        training_service=RecordService(TRAINING, MySQLTrainingRepository(conn)),
        evaluation_service=RecordService(EVALUATION, MySQLEvaluationRepository(conn)),
        employee_training_service=EmployeeTrainingService(EMPLOYEE_TRAINING, MySQLEmployeeTrainingRepository(conn)),
    )
