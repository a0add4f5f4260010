"""
Employee schemas
"""
from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from smartbizflow.models import EmployeeStatus, Gender
from smartbizflow.schemas.base import CamelModel, RecordOut, normalize_email, reject_null


class EmployeeCreate(CamelModel):
    """Schema for creating an employee"""
    employee_id: str = Field(..., min_length=1, description="Human-readable employee code (unique)")
    first_name: str = Field(..., min_length=1, description="First name")
    last_name: str = Field(..., min_length=1, description="Last name")
    email: str = Field(..., description="Work email")
    phone: Optional[str] = Field(None, description="Phone number")
    date_of_birth: Optional[date] = Field(None, description="Date of birth")
    gender: Optional[Gender] = Field(None, description="Gender")
    address: Optional[str] = Field(None, description="Postal address")
    emergency_contacts: Optional[str] = Field(None, description="Emergency contacts (free text)")
    department: str = Field(..., description="Department name")
    position: str = Field(..., description="Job title")
    hire_date: date = Field(..., description="Hire date")
    manager_id: Optional[str] = Field(None, description="Record id of the reporting manager")
    salary: float = Field(..., ge=0, description="Annual salary")
    status: EmployeeStatus = Field(default=EmployeeStatus.ACTIVE, description="Employment status")
    avatar: Optional[str] = Field(None, description="Avatar URL")

    @field_validator("employee_id")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("email")
    @classmethod
    def clean_email(cls, v: str) -> str:
        return normalize_email(v)


class EmployeeUpdate(CamelModel):
    """Schema for updating an employee"""
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    email: Optional[str] = Field(None, description="Work email")
    phone: Optional[str] = Field(None, description="Phone number")
    date_of_birth: Optional[date] = Field(None, description="Date of birth")
    gender: Optional[Gender] = Field(None, description="Gender")
    address: Optional[str] = Field(None, description="Postal address")
    emergency_contacts: Optional[str] = Field(None, description="Emergency contacts (free text)")
    department: Optional[str] = Field(None, description="Department name")
    position: Optional[str] = Field(None, description="Job title")
    hire_date: Optional[date] = Field(None, description="Hire date")
    manager_id: Optional[str] = Field(None, description="Record id of the reporting manager")
    salary: Optional[float] = Field(None, ge=0, description="Annual salary")
    status: Optional[EmployeeStatus] = Field(None, description="Employment status")
    avatar: Optional[str] = Field(None, description="Avatar URL")

    @field_validator("email")
    @classmethod
    def clean_email(cls, v: Optional[str]) -> Optional[str]:
        return normalize_email(v)

    @field_validator("first_name", "last_name", "email", "department", "position", "hire_date", "salary", "status")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)


class EmployeeOut(RecordOut):
    """Schema for employee output"""
    employee_id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    address: Optional[str] = None
    emergency_contacts: Optional[str] = None
    department: str
    position: str
    hire_date: date
    manager_id: Optional[str] = None
    salary: float
    status: EmployeeStatus
    avatar: Optional[str] = None
