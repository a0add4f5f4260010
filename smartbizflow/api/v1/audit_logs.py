"""
Audit log endpoints (read-only)
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from smartbizflow.core.deps import get_store, require_roles
from smartbizflow.db.store import RecordStore
from smartbizflow.models import Role
from smartbizflow.schemas.audit_log import AuditLogOut
from smartbizflow.services.audit_service import list_audit_logs

router = APIRouter()


@router.get("", response_model=List[AuditLogOut])
async def list_audit_logs_endpoint(
    user_id: Optional[str] = Query(None, alias="userId"),
    table: Optional[str] = Query(None),
    action: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.HR_MANAGER))
):
    """Audit trail, newest first"""
    return list_audit_logs(store, user_id, table, action, skip, limit)
