"""
Payroll schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from smartbizflow.models import PayrollStatus
from smartbizflow.schemas.base import CamelModel, RecordOut, reject_null


class PayrollCreate(CamelModel):
    """Schema for creating a payroll entry; netSalary is taken as given"""
    employee_id: str = Field(..., description="Record id of the employee")
    month: int = Field(..., ge=1, le=12, description="Pay month (1-12)")
    year: int = Field(..., ge=2000, le=2100, description="Pay year")
    basic_salary: float = Field(..., ge=0, description="Basic salary for the period")
    allowances: float = Field(default=0, ge=0, description="Total allowances")
    deductions: float = Field(default=0, ge=0, description="Total deductions")
    net_salary: float = Field(..., description="Net pay computed by the caller")
    status: PayrollStatus = Field(default=PayrollStatus.PENDING, description="Payroll status")


class PayrollUpdate(CamelModel):
    """Schema for updating a payroll entry"""
    basic_salary: Optional[float] = Field(None, ge=0)
    allowances: Optional[float] = Field(None, ge=0)
    deductions: Optional[float] = Field(None, ge=0)
    net_salary: Optional[float] = None
    status: Optional[PayrollStatus] = None

    @field_validator("basic_salary", "allowances", "deductions", "net_salary", "status")
    @classmethod
    def amounts_not_null(cls, v):
        return reject_null(v)


class PayrollOut(RecordOut):
    """Schema for payroll output"""
    employee_id: str
    month: int
    year: int
    basic_salary: float
    allowances: float
    deductions: float
    net_salary: float
    status: PayrollStatus
    paid_at: Optional[datetime] = None
