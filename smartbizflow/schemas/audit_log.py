"""
Audit log schemas
"""
from datetime import datetime
from typing import Optional

from smartbizflow.schemas.base import CamelModel


class AuditLogOut(CamelModel):
    """Audit entries have no updatedAt"""
    id: str
    user_id: Optional[str] = None
    action: str
    table: str
    record_id: Optional[str] = None
    old_values: Optional[str] = None
    new_values: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: datetime
