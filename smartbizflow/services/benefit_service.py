"""
Benefit service - benefit catalogue and employee enrollments
"""
from typing import Dict, List, Optional

from fastapi import HTTPException, status

from smartbizflow.db.store import RecordStore
from smartbizflow.models import EmployeeBenefitStatus
from smartbizflow.models.benefit import BENEFIT_COLLECTION, ENROLLMENT_COLLECTION
from smartbizflow.schemas.benefit import BenefitCreate, EmployeeBenefitCreate
from smartbizflow.services.audit_service import log_audit


def create_benefit(store: RecordStore, benefit_data: BenefitCreate, actor_id: Optional[str] = None) -> Dict:
    benefit = store.create(BENEFIT_COLLECTION, benefit_data.to_record())
    log_audit(
        store,
        user_id=actor_id,
        action="CREATE",
        table=BENEFIT_COLLECTION,
        record_id=benefit["id"],
        new_values={"name": benefit["name"], "type": benefit["type"], "cost": benefit["cost"]},
    )
    return benefit


def list_benefits(store: RecordStore, active_only: bool = True, search: Optional[str] = None) -> List[Dict]:
    """Benefits ordered by name"""
    return store.list(
        BENEFIT_COLLECTION,
        {"isActive": True if active_only else None, "search": search},
        sort_by="name",
        descending=False,
    )


def enroll_employee_benefit(
    store: RecordStore,
    enrollment_data: EmployeeBenefitCreate,
    actor_id: Optional[str] = None
) -> Dict:
    """
    Enroll an employee in a benefit

    The enrollment cost defaults to the benefit's cost.

    Raises:
        HTTPException: 404 if the benefit does not exist, 400 if it is inactive
    """
    benefit = store.get_by_id(BENEFIT_COLLECTION, enrollment_data.benefit_id)
    if not benefit:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Benefit {enrollment_data.benefit_id} not found"
        )
    if not benefit.get("isActive", False):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Benefit '{benefit.get('name')}' is not active"
        )

    record = enrollment_data.to_record()
    if record.get("cost") is None:
        record["cost"] = benefit.get("cost", 0)
    record["status"] = EmployeeBenefitStatus.ACTIVE

    enrollment = store.create(ENROLLMENT_COLLECTION, record)
    log_audit(
        store,
        user_id=actor_id,
        action="CREATE",
        table=ENROLLMENT_COLLECTION,
        record_id=enrollment["id"],
        new_values={"employeeId": enrollment["employeeId"], "benefitId": enrollment["benefitId"]},
    )
    return enrollment


def list_employee_benefits(
    store: RecordStore,
    employee_id: Optional[str] = None,
    status_filter: Optional[EmployeeBenefitStatus] = None,
) -> List[Dict]:
    return store.list(ENROLLMENT_COLLECTION, {"employeeId": employee_id, "status": status_filter})
