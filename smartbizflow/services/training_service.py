"""
Training service - course catalogue and employee enrollments
"""
import logging
from typing import Dict, List, Optional

from fastapi import HTTPException, status

from smartbizflow.core.exceptions import StoreError
from smartbizflow.db.store import RecordStore
from smartbizflow.models import CourseStatus, TrainingStatus
from smartbizflow.models.training import COURSE_COLLECTION, ENROLLMENT_COLLECTION
from smartbizflow.schemas.training import CourseCreate, EnrollmentCreate, ProgressUpdate
from smartbizflow.services.audit_service import log_audit
from smartbizflow.utils.datetime_utils import now_utc

logger = logging.getLogger(__name__)


def create_course(store: RecordStore, course_data: CourseCreate, actor_id: Optional[str] = None) -> Dict:
    """Add a course to the catalogue with no seats taken"""
    record = course_data.to_record()
    record["currentEnrollment"] = 0
    course = store.create(COURSE_COLLECTION, record)
    log_audit(
        store,
        user_id=actor_id,
        action="CREATE",
        table=COURSE_COLLECTION,
        record_id=course["id"],
        new_values={"title": course["title"], "category": course["category"]},
    )
    return course


def get_course(store: RecordStore, course_id: str) -> Optional[Dict]:
    return store.get_by_id(COURSE_COLLECTION, course_id)


def list_courses(
    store: RecordStore,
    status_filter: Optional[CourseStatus] = CourseStatus.ACTIVE,
    category: Optional[str] = None,
    level: Optional[str] = None,
    search: Optional[str] = None,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Dict]:
    """
    Courses ordered by title

    Args:
        status_filter: Course status; ACTIVE by default, None for every course
        category: Exact category
        level: Exact level
        search: Case-insensitive text matched against title, description and instructor
    """
    return store.list(
        COURSE_COLLECTION,
        {"status": status_filter, "category": category, "level": level, "search": search},
        sort_by="title",
        descending=False,
        offset=skip,
        limit=limit,
    )


def enroll_employee(store: RecordStore, enrollment_data: EnrollmentCreate, actor_id: Optional[str] = None) -> Dict:
    """
    Enroll an employee in a course and take a seat

    Raises:
        HTTPException: 404 if the course does not exist, 400 if it is not
            active, full, or the employee is already enrolled
    """
    course = get_course(store, enrollment_data.course_id)
    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Course {enrollment_data.course_id} not found"
        )
    if course.get("status") != CourseStatus.ACTIVE.value:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Course is not open for enrollment"
        )

    current = course.get("currentEnrollment") or 0
    max_enrollment = course.get("maxEnrollment")
    if max_enrollment is not None and current >= max_enrollment:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Course is full"
        )

    already = store.count(
        ENROLLMENT_COLLECTION,
        lambda r: (
            r.get("employeeId") == enrollment_data.employee_id
            and r.get("courseId") == enrollment_data.course_id
            and r.get("status") != TrainingStatus.DROPPED.value
        ),
    )
    if already:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Employee is already enrolled in this course"
        )

    record = enrollment_data.to_record()
    record["status"] = TrainingStatus.ENROLLED
    record["progress"] = 0
    enrollment = store.create(ENROLLMENT_COLLECTION, record)
    try:
        store.update(COURSE_COLLECTION, course["id"], {"currentEnrollment": current + 1})
    except StoreError:
        # seat count and enrollments stay in step
        store.delete(ENROLLMENT_COLLECTION, enrollment["id"])
        raise

    log_audit(
        store,
        user_id=actor_id,
        action="CREATE",
        table=ENROLLMENT_COLLECTION,
        record_id=enrollment["id"],
        new_values={"employeeId": enrollment["employeeId"], "courseId": enrollment["courseId"]},
    )
    return enrollment


def list_employee_training(
    store: RecordStore,
    employee_id: Optional[str] = None,
    course_id: Optional[str] = None,
    status_filter: Optional[TrainingStatus] = None,
) -> List[Dict]:
    """Enrollments, newest first"""
    return store.list(
        ENROLLMENT_COLLECTION,
        {"employeeId": employee_id, "courseId": course_id, "status": status_filter},
    )


def update_progress(
    store: RecordStore,
    enrollment_id: str,
    progress_data: ProgressUpdate,
    actor_id: Optional[str] = None
) -> Dict:
    """
    Record training progress

    Without an explicit status, 100% means COMPLETED and anything above 0
    means IN_PROGRESS. Completing stamps completionDate.

    Raises:
        HTTPException: If the enrollment does not exist
    """
    enrollment = store.get_by_id(ENROLLMENT_COLLECTION, enrollment_id)
    if not enrollment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Enrollment {enrollment_id} not found"
        )

    changes = progress_data.to_changes()
    new_status = progress_data.status
    if new_status is None:
        if progress_data.progress >= 100:
            new_status = TrainingStatus.COMPLETED
        elif progress_data.progress > 0:
            new_status = TrainingStatus.IN_PROGRESS
        else:
            new_status = TrainingStatus(enrollment.get("status", TrainingStatus.ENROLLED.value))
    changes["status"] = new_status
    if new_status == TrainingStatus.COMPLETED and not enrollment.get("completionDate"):
        changes["completionDate"] = now_utc().date()

    updated = store.update(ENROLLMENT_COLLECTION, enrollment_id, changes)
    log_audit(
        store,
        user_id=actor_id,
        action="UPDATE",
        table=ENROLLMENT_COLLECTION,
        record_id=enrollment_id,
        old_values={"status": enrollment.get("status"), "progress": enrollment.get("progress")},
        new_values={"status": new_status, "progress": progress_data.progress},
    )
    if new_status == TrainingStatus.COMPLETED:
        logger.info("Employee %s completed course %s", updated["employeeId"], updated["courseId"])
    return updated
