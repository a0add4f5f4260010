"""
Attendance endpoints
"""
from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from smartbizflow.core.deps import ensure_self_or_hr, get_current_user, get_store, is_hr, require_roles
from smartbizflow.db.store import RecordStore
from smartbizflow.models import Role
from smartbizflow.schemas.attendance import AttendanceCreate, AttendanceOut, AttendanceUpdate
from smartbizflow.services.attendance_service import list_attendance, record_attendance, update_attendance
from smartbizflow.services.employee_service import get_employee_for_user

router = APIRouter()


@router.post("", response_model=AttendanceOut, status_code=201)
async def record_attendance_endpoint(
    attendance_data: AttendanceCreate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    """
    Record a day of attendance

    Employees record their own attendance; ADMIN / HR_MANAGER may record for anyone.
    """
    ensure_self_or_hr(store, current_user, attendance_data.employee_id)
    return record_attendance(store, attendance_data, current_user["id"])


@router.get("", response_model=List[AttendanceOut])
async def list_attendance_endpoint(
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    """
    List attendance, latest day first

    Non-HR users only ever see their own records.
    """
    if not is_hr(current_user):
        own = get_employee_for_user(store, current_user)
        if not own:
            return []
        employee_id = own["id"]
    return list_attendance(store, employee_id, start_date, end_date, skip, limit)


@router.patch("/{attendance_id}", response_model=AttendanceOut)
async def update_attendance_endpoint(
    attendance_id: str,
    attendance_data: AttendanceUpdate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    """Correct an attendance record (ADMIN / HR_MANAGER)"""
    return update_attendance(store, attendance_id, attendance_data, current_user["id"])
