"""
User service - accounts and authentication
"""
import logging
from typing import Dict, Optional

from fastapi import HTTPException, status

from smartbizflow.core.exceptions import StoreError
from smartbizflow.core.security import hash_password, validate_password, verify_password
from smartbizflow.db.store import RecordStore
from smartbizflow.schemas.user import UserCreate
from smartbizflow.services.audit_service import log_audit
from smartbizflow.utils.datetime_utils import now_utc

logger = logging.getLogger(__name__)


def get_user_by_email(store: RecordStore, email: str) -> Optional[Dict]:
    """Get a user by login email (case-insensitive)"""
    return store.find_one("users", email=email.strip().lower())


def create_user(store: RecordStore, user_data: UserCreate, actor_id: Optional[str] = None) -> Dict:
    """
    Create a user account

    Raises:
        HTTPException: If the email is taken or the password is invalid
    """
    if get_user_by_email(store, user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"User with email '{user_data.email}' already exists"
        )

    try:
        password = validate_password(user_data.password)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    record = user_data.to_record()
    record["password"] = hash_password(password)
    user = store.create("users", record)

    log_audit(
        store,
        user_id=actor_id,
        action="CREATE",
        table="users",
        record_id=user["id"],
        new_values={"email": user["email"], "role": user["role"]},
    )
    return user


def authenticate_user(store: RecordStore, email: str, password: str) -> Optional[Dict]:
    """
    Return the user when the credentials match, else None

    Raises:
        HTTPException: If the account is inactive
    """
    user = get_user_by_email(store, email)
    if not user or not verify_password(password, user.get("password")):
        return None

    if not user.get("isActive", False):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive"
        )
    return user


def update_last_login(store: RecordStore, user_id: str) -> Optional[Dict]:
    """
    Best-effort lastLogin stamp; a failure here must not abort the login
    """
    try:
        return store.update("users", user_id, {"lastLogin": now_utc()})
    except StoreError as e:
        logger.warning(f"Could not update lastLogin for user {user_id}: {e}")
        return None
