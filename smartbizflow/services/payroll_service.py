"""
Payroll service
"""
from typing import Dict, List, Optional

from fastapi import HTTPException, status

from smartbizflow.db.store import RecordStore
from smartbizflow.models import PayrollStatus
from smartbizflow.schemas.payroll import PayrollCreate, PayrollUpdate
from smartbizflow.services.audit_service import log_audit
from smartbizflow.utils.datetime_utils import now_utc

COLLECTION = "payroll"


def create_payroll(store: RecordStore, payroll_data: PayrollCreate, actor_id: Optional[str] = None) -> Dict:
    """
    Create a payroll entry

    Raises:
        HTTPException: If the employee already has a non-cancelled entry for the period
    """
    existing = store.count(
        COLLECTION,
        lambda r: (
            r.get("employeeId") == payroll_data.employee_id
            and r.get("month") == payroll_data.month
            and r.get("year") == payroll_data.year
            and r.get("status") != PayrollStatus.CANCELLED.value
        ),
    )
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Payroll for {payroll_data.month}/{payroll_data.year} already exists for this employee"
        )

    record = store.create(COLLECTION, payroll_data.to_record())
    log_audit(
        store,
        user_id=actor_id,
        action="CREATE",
        table=COLLECTION,
        record_id=record["id"],
        new_values={"employeeId": record["employeeId"], "period": f"{record['year']}-{record['month']:02d}"},
    )
    return record


def list_payroll(
    store: RecordStore,
    employee_id: Optional[str] = None,
    year: Optional[int] = None,
    month: Optional[int] = None,
    status_filter: Optional[PayrollStatus] = None,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Dict]:
    """Payroll entries, newest first"""
    return store.list(
        COLLECTION,
        {"employeeId": employee_id, "year": year, "month": month, "status": status_filter},
        offset=skip,
        limit=limit,
    )


def update_payroll(
    store: RecordStore,
    payroll_id: str,
    payroll_data: PayrollUpdate,
    actor_id: Optional[str] = None
) -> Dict:
    existing = store.get_by_id(COLLECTION, payroll_id)
    if not existing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Payroll entry {payroll_id} not found"
        )
    changes = payroll_data.to_changes()
    if changes.get("status") == PayrollStatus.PAID and not existing.get("paidAt"):
        changes["paidAt"] = now_utc()

    updated = store.update(COLLECTION, payroll_id, changes)
    log_audit(
        store,
        user_id=actor_id,
        action="UPDATE",
        table=COLLECTION,
        record_id=payroll_id,
        old_values={field: existing.get(field) for field in changes},
        new_values=changes,
    )
    return updated


def mark_paid(store: RecordStore, payroll_id: str, actor_id: Optional[str] = None) -> Dict:
    """Set status PAID and stamp paidAt"""
    return update_payroll(store, payroll_id, PayrollUpdate(status=PayrollStatus.PAID), actor_id)
