"""
User model
"""
import enum

COLLECTION = "users"


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    HR_MANAGER = "HR_MANAGER"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"


FIELDS = ("email", "password", "role", "isActive", "lastLogin")
SEARCH_FIELDS = ("email",)
