"""
Payroll model
"""
import enum

COLLECTION = "payroll"


class PayrollStatus(str, enum.Enum):
    PENDING = "PENDING"
    PROCESSED = "PROCESSED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


# netSalary is supplied by the caller, never recomputed
FIELDS = (
    "employeeId",
    "month",
    "year",
    "basicSalary",
    "allowances",
    "deductions",
    "netSalary",
    "status",
    "paidAt",
)
SEARCH_FIELDS = ()
