"""
Employee model
"""
import enum

COLLECTION = "employees"


class EmployeeStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    TERMINATED = "TERMINATED"
    SUSPENDED = "SUSPENDED"


class Gender(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


# managerId names another employee record; the store never checks it exists
FIELDS = (
    "employeeId",
    "firstName",
    "lastName",
    "email",
    "phone",
    "dateOfBirth",
    "gender",
    "address",
    "emergencyContacts",
    "department",
    "position",
    "hireDate",
    "managerId",
    "salary",
    "status",
    "avatar",
)
SEARCH_FIELDS = ("firstName", "lastName", "email", "employeeId")
