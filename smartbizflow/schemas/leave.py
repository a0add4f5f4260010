"""
Leave schemas
"""
from datetime import date, datetime
from typing import Optional

from pydantic import Field, model_validator

from smartbizflow.models import LeaveStatus, LeaveType
from smartbizflow.schemas.base import CamelModel, RecordOut


class LeaveApplyRequest(CamelModel):
    """Schema for applying leave"""
    employee_id: str = Field(..., description="Record id of the employee taking leave")
    type: LeaveType = Field(..., description="Type of leave")
    start_date: date = Field(..., description="First day of leave")
    end_date: date = Field(..., description="Last day of leave (inclusive)")
    days: Optional[float] = Field(None, gt=0, description="Days requested; defaults to the inclusive calendar span")
    reason: str = Field(..., min_length=1, description="Reason for leave")
    notes: Optional[str] = Field(None, description="Additional notes")

    @model_validator(mode="after")
    def check_dates(self) -> "LeaveApplyRequest":
        if self.end_date < self.start_date:
            raise ValueError("endDate cannot be before startDate")
        return self


class LeaveDecisionRequest(CamelModel):
    """Schema for approve / reject / cancel requests"""
    notes: Optional[str] = Field(None, description="Optional remarks recorded on the leave")


class LeaveOut(RecordOut):
    """Schema for leave output"""
    employee_id: str
    type: LeaveType
    start_date: date
    end_date: date
    days: float
    reason: str
    status: LeaveStatus
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    notes: Optional[str] = None
