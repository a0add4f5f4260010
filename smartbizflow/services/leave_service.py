"""
Leave service - applying for leave and the approval workflow

The record store keeps leaves as plain data. Which status changes are legal
is decided here:

    PENDING  --approve-->  APPROVED
    PENDING  --reject--->  REJECTED
    PENDING | APPROVED  --cancel-->  CANCELLED
"""
import logging
from typing import Dict, List, Optional

from fastapi import HTTPException, status

from smartbizflow.db.store import RecordStore
from smartbizflow.models import LEAVE_TRANSITIONS, LeaveAction, LeaveStatus
from smartbizflow.schemas.leave import LeaveApplyRequest
from smartbizflow.services.audit_service import log_audit
from smartbizflow.utils.datetime_utils import now_utc

logger = logging.getLogger(__name__)

COLLECTION = "leaves"


def apply_leave(
    store: RecordStore,
    leave_data: LeaveApplyRequest,
    actor_id: Optional[str] = None
) -> Dict:
    """
    Create a PENDING leave request

    `days` defaults to the inclusive calendar span between the two dates;
    leave balances are not checked.
    """
    record = leave_data.to_record()
    if record.get("days") is None:
        record["days"] = (leave_data.end_date - leave_data.start_date).days + 1
    record["status"] = LeaveStatus.PENDING
    record["approvedBy"] = None
    record["approvedAt"] = None

    leave = store.create(COLLECTION, record)
    log_audit(
        store,
        user_id=actor_id,
        action="CREATE",
        table=COLLECTION,
        record_id=leave["id"],
        new_values={"employeeId": leave["employeeId"], "type": leave["type"], "days": leave["days"]},
    )
    return leave


def get_leave(store: RecordStore, leave_id: str) -> Optional[Dict]:
    return store.get_by_id(COLLECTION, leave_id)


def list_leaves(
    store: RecordStore,
    employee_id: Optional[str] = None,
    status_filter: Optional[LeaveStatus] = None,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Dict]:
    """Leave requests, newest first"""
    return store.list(
        COLLECTION,
        {"employeeId": employee_id, "status": status_filter},
        offset=skip,
        limit=limit,
    )


def _transition(
    store: RecordStore,
    leave_id: str,
    action: LeaveAction,
    actor_id: Optional[str],
    notes: Optional[str] = None,
) -> Dict:
    leave = get_leave(store, leave_id)
    if not leave:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Leave request {leave_id} not found"
        )

    allowed_from, target = LEAVE_TRANSITIONS[action]
    current = leave.get("status")
    if current not in {s.value for s in allowed_from}:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot {action.value.lower()} a leave that is {current}"
        )

    changes = {"status": target}
    if action == LeaveAction.APPROVE:
        changes["approvedBy"] = actor_id
        changes["approvedAt"] = now_utc()
    if notes is not None:
        changes["notes"] = notes

    updated = store.update(COLLECTION, leave_id, changes)
    log_audit(
        store,
        user_id=actor_id,
        action=action.value,
        table=COLLECTION,
        record_id=leave_id,
        old_values={"status": current},
        new_values={"status": target},
    )
    logger.info("Leave %s: %s -> %s", leave_id, current, target.value)
    return updated


def approve_leave(store: RecordStore, leave_id: str, actor_id: Optional[str], notes: Optional[str] = None) -> Dict:
    """PENDING -> APPROVED, recording approver and time"""
    return _transition(store, leave_id, LeaveAction.APPROVE, actor_id, notes)


def reject_leave(store: RecordStore, leave_id: str, actor_id: Optional[str], notes: Optional[str] = None) -> Dict:
    """PENDING -> REJECTED"""
    return _transition(store, leave_id, LeaveAction.REJECT, actor_id, notes)


def cancel_leave(store: RecordStore, leave_id: str, actor_id: Optional[str], notes: Optional[str] = None) -> Dict:
    """PENDING or APPROVED -> CANCELLED"""
    return _transition(store, leave_id, LeaveAction.CANCEL, actor_id, notes)
