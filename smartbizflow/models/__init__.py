"""
Record models: enums and collection metadata
"""
from smartbizflow.models.user import Role
from smartbizflow.models.employee import EmployeeStatus, Gender
from smartbizflow.models.attendance import AttendanceStatus
from smartbizflow.models.leave import LeaveType, LeaveStatus, LeaveAction, LEAVE_TRANSITIONS
from smartbizflow.models.payroll import PayrollStatus
from smartbizflow.models.training import CourseStatus, TrainingStatus
from smartbizflow.models.benefit import BenefitType, EmployeeBenefitStatus

__all__ = [
    "Role",
    "EmployeeStatus",
    "Gender",
    "AttendanceStatus",
    "LeaveType",
    "LeaveStatus",
    "LeaveAction",
    "LEAVE_TRANSITIONS",
    "PayrollStatus",
    "CourseStatus",
    "TrainingStatus",
    "BenefitType",
    "EmployeeBenefitStatus",
]
