"""
Training schemas
"""
from datetime import date
from typing import Optional

from pydantic import Field

from smartbizflow.models import CourseStatus, TrainingStatus
from smartbizflow.schemas.base import CamelModel, RecordOut


class CourseCreate(CamelModel):
    """Schema for creating a training course"""
    title: str = Field(..., min_length=1, description="Course title")
    description: str = Field(default="", description="Course description")
    category: str = Field(..., description="Category, e.g. Technical or Leadership")
    level: str = Field(..., description="Level, e.g. Beginner")
    duration: float = Field(..., gt=0, description="Duration in hours")
    instructor: Optional[str] = Field(None, description="Instructor name")
    format: str = Field(default="Online", description="Delivery format")
    max_enrollment: Optional[int] = Field(None, ge=1, description="Seat limit (none when unset)")
    status: CourseStatus = Field(default=CourseStatus.ACTIVE, description="Course status")
    materials: Optional[str] = Field(None, description="Materials")
    prerequisites: Optional[str] = Field(None, description="Prerequisites")


class CourseOut(RecordOut):
    """Schema for training course output"""
    title: str
    description: str
    category: str
    level: str
    duration: float
    instructor: Optional[str] = None
    format: str
    max_enrollment: Optional[int] = None
    current_enrollment: int
    status: CourseStatus
    materials: Optional[str] = None
    prerequisites: Optional[str] = None


class EnrollmentCreate(CamelModel):
    """Schema for enrolling an employee in a course"""
    employee_id: str = Field(..., description="Record id of the employee")
    course_id: str = Field(..., description="Record id of the course")
    start_date: Optional[date] = Field(None, description="Start date")


class ProgressUpdate(CamelModel):
    """Schema for reporting training progress"""
    progress: float = Field(..., ge=0, le=100, description="Completion percentage")
    status: Optional[TrainingStatus] = Field(None, description="Explicit status; derived from progress when unset")
    score: Optional[float] = Field(None, ge=0, description="Assessment score")
    feedback: Optional[str] = Field(None, description="Feedback")
    certificate: Optional[str] = Field(None, description="Certificate reference")


class EnrollmentOut(RecordOut):
    """Schema for employee training output"""
    employee_id: str
    course_id: str
    status: TrainingStatus
    progress: float
    start_date: Optional[date] = None
    completion_date: Optional[date] = None
    certificate: Optional[str] = None
    score: Optional[float] = None
    feedback: Optional[str] = None
