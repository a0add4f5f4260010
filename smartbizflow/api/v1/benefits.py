"""
Benefit endpoints
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from smartbizflow.core.deps import get_current_user, get_store, require_roles
from smartbizflow.db.store import RecordStore
from smartbizflow.models import EmployeeBenefitStatus, Role
from smartbizflow.schemas.benefit import (
    BenefitCreate,
    BenefitOut,
    EmployeeBenefitCreate,
    EmployeeBenefitOut,
)
from smartbizflow.services.benefit_service import (
    create_benefit,
    enroll_employee_benefit,
    list_benefits,
    list_employee_benefits,
)

router = APIRouter()


@router.post("", response_model=BenefitOut, status_code=201)
async def create_benefit_endpoint(
    benefit_data: BenefitCreate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    return create_benefit(store, benefit_data, current_user["id"])


@router.get("", response_model=List[BenefitOut])
async def list_benefits_endpoint(
    active_only: bool = Query(True, alias="activeOnly"),
    search: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    return list_benefits(store, active_only, search)


@router.post("/enrollments", response_model=EmployeeBenefitOut, status_code=201)
async def enroll_employee_benefit_endpoint(
    enrollment_data: EmployeeBenefitCreate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    return enroll_employee_benefit(store, enrollment_data, current_user["id"])


@router.get("/enrollments", response_model=List[EmployeeBenefitOut])
async def list_employee_benefits_endpoint(
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    status_filter: Optional[EmployeeBenefitStatus] = Query(None, alias="status"),
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    return list_employee_benefits(store, employee_id, status_filter)
