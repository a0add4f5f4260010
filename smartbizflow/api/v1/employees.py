"""
Employee management endpoints
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from smartbizflow.core.deps import get_current_user, get_store, require_roles
from smartbizflow.db.store import RecordStore
from smartbizflow.models import EmployeeStatus, Role
from smartbizflow.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate
from smartbizflow.services.employee_service import (
    create_employee,
    delete_employee,
    get_direct_reports,
    get_employee,
    get_employee_for_user,
    list_employees,
    update_employee,
)

router = APIRouter()


@router.post("", response_model=EmployeeOut, status_code=201)
async def create_employee_endpoint(
    employee_data: EmployeeCreate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    """Create a new employee (ADMIN / HR_MANAGER)"""
    return create_employee(store, employee_data, current_user["id"])


@router.get("/me", response_model=EmployeeOut)
async def get_me_endpoint(
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user),
):
    """Employee profile linked to the current account"""
    employee = get_employee_for_user(store, current_user)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return employee


@router.get("", response_model=List[EmployeeOut])
async def list_employees_endpoint(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    department: Optional[str] = Query(None, description="Filter by department"),
    status_filter: Optional[EmployeeStatus] = Query(None, alias="status", description="Filter by status"),
    search: Optional[str] = Query(None, description="Search name, email or employee code"),
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    """List employees with optional filters"""
    return list_employees(store, skip, limit, department, status_filter, search)


@router.get("/{employee_id}", response_model=EmployeeOut)
async def get_employee_endpoint(
    employee_id: str,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    """Get an employee by record id"""
    employee = get_employee(store, employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id {employee_id} not found"
        )
    return employee


@router.get("/{employee_id}/reports", response_model=List[EmployeeOut])
async def get_direct_reports_endpoint(
    employee_id: str,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    """Employees who report to the given employee"""
    return get_direct_reports(store, employee_id)


@router.patch("/{employee_id}", response_model=EmployeeOut)
async def update_employee_endpoint(
    employee_id: str,
    employee_data: EmployeeUpdate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    """Update an employee (ADMIN / HR_MANAGER)"""
    return update_employee(store, employee_id, employee_data, current_user["id"])


@router.delete("/{employee_id}", status_code=204)
async def delete_employee_endpoint(
    employee_id: str,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    """Delete an employee (ADMIN / HR_MANAGER); deleting a missing id is not an error"""
    delete_employee(store, employee_id, current_user["id"])
