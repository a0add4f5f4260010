"""
Leave endpoints
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from smartbizflow.core.deps import ensure_self_or_hr, get_current_user, get_store, is_hr, require_roles
from smartbizflow.db.store import RecordStore
from smartbizflow.models import LeaveStatus, Role
from smartbizflow.schemas.leave import LeaveApplyRequest, LeaveDecisionRequest, LeaveOut
from smartbizflow.services.employee_service import get_employee_for_user
from smartbizflow.services.leave_service import (
    apply_leave,
    approve_leave,
    cancel_leave,
    get_leave,
    list_leaves,
    reject_leave,
)

router = APIRouter()


@router.post("", response_model=LeaveOut, status_code=201)
async def apply_leave_endpoint(
    leave_data: LeaveApplyRequest,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    """
    Apply for leave (status PENDING)

    Employees apply for themselves; ADMIN / HR_MANAGER may apply on behalf of anyone.
    """
    ensure_self_or_hr(store, current_user, leave_data.employee_id)
    return apply_leave(store, leave_data, current_user["id"])


@router.get("", response_model=List[LeaveOut])
async def list_leaves_endpoint(
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    status_filter: Optional[LeaveStatus] = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    """List leave requests, newest first (non-HR users see only their own)"""
    if not is_hr(current_user):
        own = get_employee_for_user(store, current_user)
        if not own:
            return []
        employee_id = own["id"]
    return list_leaves(store, employee_id, status_filter, skip, limit)


@router.post("/{leave_id}/approve", response_model=LeaveOut)
async def approve_leave_endpoint(
    leave_id: str,
    decision: Optional[LeaveDecisionRequest] = None,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    """Approve a pending leave (ADMIN / HR_MANAGER)"""
    notes = decision.notes if decision else None
    return approve_leave(store, leave_id, current_user["id"], notes)


@router.post("/{leave_id}/reject", response_model=LeaveOut)
async def reject_leave_endpoint(
    leave_id: str,
    decision: Optional[LeaveDecisionRequest] = None,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    """Reject a pending leave (ADMIN / HR_MANAGER)"""
    notes = decision.notes if decision else None
    return reject_leave(store, leave_id, current_user["id"], notes)


@router.post("/{leave_id}/cancel", response_model=LeaveOut)
async def cancel_leave_endpoint(
    leave_id: str,
    decision: Optional[LeaveDecisionRequest] = None,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    """Cancel a pending or approved leave (the employee themselves or ADMIN / HR_MANAGER)"""
    leave = get_leave(store, leave_id)
    if not leave:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Leave request {leave_id} not found"
        )
    ensure_self_or_hr(store, current_user, leave["employeeId"])
    notes = decision.notes if decision else None
    return cancel_leave(store, leave_id, current_user["id"], notes)
