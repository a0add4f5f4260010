"""
Benefit schemas
"""
from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from smartbizflow.models import BenefitType, EmployeeBenefitStatus
from smartbizflow.schemas.base import CamelModel, RecordOut


class BenefitCreate(CamelModel):
    """Schema for creating a benefit"""
    name: str = Field(..., min_length=1, description="Benefit name")
    description: Optional[str] = Field(None, description="Description")
    type: BenefitType = Field(..., description="Benefit type")
    cost: float = Field(..., ge=0, description="Cost per employee")
    is_active: bool = Field(default=True, description="Whether employees can enroll")


class BenefitOut(RecordOut):
    """Schema for benefit output"""
    name: str
    description: Optional[str] = None
    type: BenefitType
    cost: float
    is_active: bool


class EmployeeBenefitCreate(CamelModel):
    """Schema for enrolling an employee in a benefit"""
    employee_id: str = Field(..., description="Record id of the employee")
    benefit_id: str = Field(..., description="Record id of the benefit")
    start_date: date = Field(..., description="Coverage start")
    end_date: Optional[date] = Field(None, description="Coverage end")
    cost: Optional[float] = Field(None, ge=0, description="Cost override; defaults to the benefit cost")

    @model_validator(mode="after")
    def check_dates(self) -> "EmployeeBenefitCreate":
        if self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate cannot be before startDate")
        return self


class EmployeeBenefitOut(RecordOut):
    """Schema for employee benefit output"""
    employee_id: str
    benefit_id: str
    start_date: date
    end_date: Optional[date] = None
    status: EmployeeBenefitStatus
    cost: float
