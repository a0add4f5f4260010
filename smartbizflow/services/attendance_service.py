"""
Attendance service
"""
from datetime import date
from typing import Dict, List, Optional

from fastapi import HTTPException, status

from smartbizflow.db.store import RecordStore
from smartbizflow.schemas.attendance import AttendanceCreate, AttendanceUpdate
from smartbizflow.services.audit_service import log_audit

COLLECTION = "attendance"


def record_attendance(
    store: RecordStore,
    attendance_data: AttendanceCreate,
    actor_id: Optional[str] = None
) -> Dict:
    """Store one attendance record (totalHours is kept as supplied)"""
    record = store.create(COLLECTION, attendance_data.to_record())
    log_audit(
        store,
        user_id=actor_id,
        action="CREATE",
        table=COLLECTION,
        record_id=record["id"],
        new_values={"employeeId": record["employeeId"], "date": record["date"], "status": record["status"]},
    )
    return record


def list_attendance(
    store: RecordStore,
    employee_id: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Dict]:
    """
    Attendance records, latest day first

    Args:
        employee_id: Only this employee's records
        start_date: Earliest day (inclusive)
        end_date: Latest day (inclusive)
    """
    start = start_date.isoformat() if start_date else None
    end = end_date.isoformat() if end_date else None

    # Days are stored as YYYY-MM-DD; the first ten characters compare chronologically
    def matches(record: Dict) -> bool:
        if employee_id and record.get("employeeId") != employee_id:
            return False
        day = str(record.get("date") or "")[:10]
        if start and day < start:
            return False
        if end and day > end:
            return False
        return True

    return store.list(COLLECTION, matches, sort_by="date", offset=skip, limit=limit)


def update_attendance(
    store: RecordStore,
    attendance_id: str,
    attendance_data: AttendanceUpdate,
    actor_id: Optional[str] = None
) -> Dict:
    """
    Correct an attendance record

    Raises:
        HTTPException: If the record does not exist
    """
    existing = store.get_by_id(COLLECTION, attendance_id)
    if not existing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Attendance record {attendance_id} not found"
        )

    changes = attendance_data.to_changes()
    updated = store.update(COLLECTION, attendance_id, changes)
    log_audit(
        store,
        user_id=actor_id,
        action="UPDATE",
        table=COLLECTION,
        record_id=attendance_id,
        old_values={field: existing.get(field) for field in changes},
        new_values=changes,
    )
    return updated
