"""
Payroll endpoints (ADMIN / HR_MANAGER)
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from smartbizflow.core.deps import get_store, require_roles
from smartbizflow.db.store import RecordStore
from smartbizflow.models import PayrollStatus, Role
from smartbizflow.schemas.payroll import PayrollCreate, PayrollOut, PayrollUpdate
from smartbizflow.services.payroll_service import create_payroll, list_payroll, mark_paid, update_payroll

router = APIRouter()


@router.post("", response_model=PayrollOut, status_code=201)
async def create_payroll_endpoint(
    payroll_data: PayrollCreate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    return create_payroll(store, payroll_data, current_user["id"])


@router.get("", response_model=List[PayrollOut])
async def list_payroll_endpoint(
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
    status_filter: Optional[PayrollStatus] = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    return list_payroll(store, employee_id, year, month, status_filter, skip, limit)


@router.patch("/{payroll_id}", response_model=PayrollOut)
async def update_payroll_endpoint(
    payroll_id: str,
    payroll_data: PayrollUpdate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    return update_payroll(store, payroll_id, payroll_data, current_user["id"])


@router.post("/{payroll_id}/pay", response_model=PayrollOut)
async def mark_paid_endpoint(
    payroll_id: str,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    """Mark a payroll entry as PAID"""
    return mark_paid(store, payroll_id, current_user["id"])
