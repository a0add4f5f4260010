"""
Training endpoints - courses and enrollments
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from smartbizflow.core.deps import get_current_user, get_store, require_roles
from smartbizflow.db.store import RecordStore
from smartbizflow.models import CourseStatus, Role, TrainingStatus
from smartbizflow.schemas.training import (
    CourseCreate,
    CourseOut,
    EnrollmentCreate,
    EnrollmentOut,
    ProgressUpdate,
)
from smartbizflow.services.training_service import (
    create_course,
    enroll_employee,
    list_courses,
    list_employee_training,
    update_progress,
)

router = APIRouter()


@router.post("/courses", response_model=CourseOut, status_code=201)
async def create_course_endpoint(
    course_data: CourseCreate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    return create_course(store, course_data, current_user["id"])


@router.get("/courses", response_model=List[CourseOut])
async def list_courses_endpoint(
    status_filter: Optional[CourseStatus] = Query(CourseStatus.ACTIVE, alias="status"),
    category: Optional[str] = Query(None),
    level: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    """Course catalogue (active courses unless another status is asked for)"""
    return list_courses(store, status_filter, category, level, search)


@router.post("/enrollments", response_model=EnrollmentOut, status_code=201)
async def enroll_employee_endpoint(
    enrollment_data: EnrollmentCreate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    return enroll_employee(store, enrollment_data, current_user["id"])


@router.get("/enrollments", response_model=List[EnrollmentOut])
async def list_enrollments_endpoint(
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    course_id: Optional[str] = Query(None, alias="courseId"),
    status_filter: Optional[TrainingStatus] = Query(None, alias="status"),
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    return list_employee_training(store, employee_id, course_id, status_filter)


@router.patch("/enrollments/{enrollment_id}", response_model=EnrollmentOut)
async def update_progress_endpoint(
    enrollment_id: str,
    progress_data: ProgressUpdate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    """Record progress; 100% completes the enrollment"""
    return update_progress(store, enrollment_id, progress_data, current_user["id"])
