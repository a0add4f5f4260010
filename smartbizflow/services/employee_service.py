"""
Employee service - business logic for employee management
"""
import logging
from typing import Dict, List, Optional

from fastapi import HTTPException, status

from smartbizflow.db.store import RecordStore
from smartbizflow.models import EmployeeStatus
from smartbizflow.schemas.employee import EmployeeCreate, EmployeeUpdate
from smartbizflow.services.audit_service import log_audit

logger = logging.getLogger(__name__)

COLLECTION = "employees"


def get_employee(store: RecordStore, employee_id: str) -> Optional[Dict]:
    """Get an employee by record id"""
    return store.get_by_id(COLLECTION, employee_id)


def get_employee_by_code(store: RecordStore, code: str) -> Optional[Dict]:
    """Get an employee by human-readable employee code (e.g. EMP003)"""
    return store.find_one(COLLECTION, employeeId=code.strip().upper())


def create_employee(
    store: RecordStore,
    employee_data: EmployeeCreate,
    actor_id: Optional[str] = None
) -> Dict:
    """
    Create a new employee

    Args:
        store: Record store
        employee_data: Employee creation data
        actor_id: ID of the user creating the employee

    Returns:
        Created employee record

    Raises:
        HTTPException: If the employee code is already taken
    """
    if get_employee_by_code(store, employee_data.employee_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Employee with employeeId '{employee_data.employee_id}' already exists"
        )

    # managerId is a weak reference; a dangling one is stored as given
    if employee_data.manager_id and not get_employee(store, employee_data.manager_id):
        logger.info(
            "Employee %s references unknown manager %s",
            employee_data.employee_id, employee_data.manager_id
        )

    employee = store.create(COLLECTION, employee_data.to_record())

    log_audit(
        store,
        user_id=actor_id,
        action="CREATE",
        table=COLLECTION,
        record_id=employee["id"],
        new_values={
            "employeeId": employee["employeeId"],
            "department": employee["department"],
            "position": employee["position"],
        },
    )
    return employee


def list_employees(
    store: RecordStore,
    skip: int = 0,
    limit: int = 100,
    department: Optional[str] = None,
    status_filter: Optional[EmployeeStatus] = None,
    search: Optional[str] = None,
) -> List[Dict]:
    """
    List employees with optional filtering

    Args:
        store: Record store
        skip: Number of records to skip
        limit: Maximum number of records to return
        department: Exact department name
        status_filter: Employment status
        search: Case-insensitive text matched against name, email and employee code

    Returns:
        Employee records, newest first
    """
    return store.list(
        COLLECTION,
        {"department": department, "status": status_filter, "search": search},
        offset=skip,
        limit=limit,
    )


def get_direct_reports(store: RecordStore, manager_id: str) -> List[Dict]:
    """Employees whose managerId points at the given record, by last name"""
    return store.list(COLLECTION, {"managerId": manager_id}, sort_by="lastName", descending=False)


def update_employee(
    store: RecordStore,
    employee_id: str,
    employee_data: EmployeeUpdate,
    actor_id: Optional[str] = None
) -> Dict:
    """
    Update an employee; fields not supplied are left untouched

    Raises:
        HTTPException: If the employee does not exist or the change is invalid
    """
    employee = get_employee(store, employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id {employee_id} not found"
        )

    changes = employee_data.to_changes()

    if changes.get("managerId") == employee_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Employee cannot be their own manager",
        )

    updated = store.update(COLLECTION, employee_id, changes)

    log_audit(
        store,
        user_id=actor_id,
        action="UPDATE",
        table=COLLECTION,
        record_id=employee_id,
        old_values={field: employee.get(field) for field in changes},
        new_values=changes,
    )
    return updated


def delete_employee(
    store: RecordStore,
    employee_id: str,
    actor_id: Optional[str] = None
) -> bool:
    """
    Delete an employee

    Returns:
        True if the employee was deleted, False if not found
    """
    employee = get_employee(store, employee_id)
    if not employee:
        return False

    deleted = store.delete(COLLECTION, employee_id)
    if deleted:
        log_audit(
            store,
            user_id=actor_id,
            action="DELETE",
            table=COLLECTION,
            record_id=employee_id,
            old_values={
                "employeeId": employee.get("employeeId"),
                "email": employee.get("email"),
            },
        )
    return deleted


def get_employee_for_user(store: RecordStore, user: Dict) -> Optional[Dict]:
    """Employee record linked to a user account (same email, ignoring case)"""
    email = (user.get("email") or "").strip().lower()
    if not email:
        return None
    matches = store.list(
        COLLECTION,
        lambda r: (r.get("email") or "").strip().lower() == email,
        sort_by=None,
        limit=1,
    )
    return matches[0] if matches else None
