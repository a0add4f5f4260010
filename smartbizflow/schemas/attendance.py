"""
Attendance schemas
"""
from datetime import date, datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from smartbizflow.models import AttendanceStatus
from smartbizflow.schemas.base import CamelModel, RecordOut, reject_null


class AttendanceCreate(CamelModel):
    """Schema for recording a day of attendance"""
    employee_id: str = Field(..., description="Record id of the employee")
    day: date = Field(..., alias="date", description="Attendance day")
    check_in: Optional[datetime] = Field(None, description="Check-in time")
    check_out: Optional[datetime] = Field(None, description="Check-out time")
    total_hours: Optional[float] = Field(None, ge=0, le=24, description="Hours worked")
    status: AttendanceStatus = Field(default=AttendanceStatus.PRESENT, description="Attendance status")
    notes: Optional[str] = Field(None, description="Notes")

    @model_validator(mode="after")
    def check_out_after_check_in(self) -> "AttendanceCreate":
        if self.check_in and self.check_out and self.check_out < self.check_in:
            raise ValueError("checkOut cannot be earlier than checkIn")
        return self


class AttendanceUpdate(CamelModel):
    """Schema for correcting an attendance record"""
    check_in: Optional[datetime] = Field(None, description="Check-in time")
    check_out: Optional[datetime] = Field(None, description="Check-out time")
    total_hours: Optional[float] = Field(None, ge=0, le=24, description="Hours worked")
    status: Optional[AttendanceStatus] = Field(None, description="Attendance status")
    notes: Optional[str] = Field(None, description="Notes")

    @field_validator("status")
    @classmethod
    def status_not_null(cls, v):
        return reject_null(v)


class AttendanceOut(RecordOut):
    """Schema for attendance output"""
    employee_id: str
    day: date = Field(..., alias="date")
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    total_hours: Optional[float] = None
    status: AttendanceStatus
    notes: Optional[str] = None
