"""
Audit logging service
"""
import logging
from typing import Any, Dict, List, Optional

from smartbizflow.core.exceptions import StoreError
from smartbizflow.db.store import RecordStore
from smartbizflow.utils.json_serializer import dumps_opaque

logger = logging.getLogger(__name__)


def log_audit(
    store: RecordStore,
    user_id: Optional[str],
    action: str,
    table: str,
    record_id: Optional[str] = None,
    old_values: Any = None,
    new_values: Any = None,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> Optional[Dict]:
    """
    Create an audit log entry

    Best effort: the audited change is already persisted, so a failed audit
    write is logged and never undoes or fails the caller's operation.

    Args:
        store: Record store
        user_id: ID of the user performing the action (optional)
        action: Action type (e.g., "CREATE", "UPDATE", "DELETE", "LOGIN")
        table: Collection of the affected record (e.g., "employees")
        record_id: ID of the affected record (optional)
        old_values: Previous state; dicts are stored as JSON text
        new_values: New state; dicts are stored as JSON text
        ip_address: Client address (optional)
        user_agent: Client user agent (optional)

    Returns:
        Created audit record, or None when it could not be written
    """
    try:
        return store.log_audit(
            {
                "userId": user_id,
                "action": action,
                "table": table,
                "recordId": record_id,
                "oldValues": dumps_opaque(old_values),
                "newValues": dumps_opaque(new_values),
                "ipAddress": ip_address,
                "userAgent": user_agent,
            }
        )
    except StoreError as e:
        logger.warning(f"Failed to log audit for {action} on {table} {record_id}: {e}")
        return None


def list_audit_logs(
    store: RecordStore,
    user_id: Optional[str] = None,
    table: Optional[str] = None,
    action: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
) -> List[Dict]:
    """Newest first"""
    return store.list(
        "auditLogs",
        {"userId": user_id, "table": table, "action": action},
        offset=skip,
        limit=limit,
    )
