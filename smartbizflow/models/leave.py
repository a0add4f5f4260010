"""
Leave model
"""
import enum

COLLECTION = "leaves"


class LeaveType(str, enum.Enum):
    ANNUAL = "ANNUAL"
    SICK = "SICK"
    PERSONAL = "PERSONAL"
    MATERNITY = "MATERNITY"
    PATERNITY = "PATERNITY"
    BEREAVEMENT = "BEREAVEMENT"
    UNPAID = "UNPAID"


class LeaveStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class LeaveAction(str, enum.Enum):
    APPROVE = "APPROVE"
    REJECT = "REJECT"
    CANCEL = "CANCEL"


# action -> (states it may start from, resulting state)
LEAVE_TRANSITIONS = {
    LeaveAction.APPROVE: ({LeaveStatus.PENDING}, LeaveStatus.APPROVED),
    LeaveAction.REJECT: ({LeaveStatus.PENDING}, LeaveStatus.REJECTED),
    LeaveAction.CANCEL: ({LeaveStatus.PENDING, LeaveStatus.APPROVED}, LeaveStatus.CANCELLED),
}

FIELDS = (
    "employeeId",
    "type",
    "startDate",
    "endDate",
    "days",
    "reason",
    "status",
    "approvedBy",
    "approvedAt",
    "notes",
)
SEARCH_FIELDS = ("reason", "notes")
