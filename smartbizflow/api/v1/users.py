"""
User account endpoints
"""
from typing import Dict

from fastapi import APIRouter, Depends

from smartbizflow.core.deps import get_current_user, get_store, require_roles
from smartbizflow.db.store import RecordStore
from smartbizflow.models import Role
from smartbizflow.schemas.user import UserCreate, UserOut
from smartbizflow.services.user_service import create_user

router = APIRouter()


@router.post("", response_model=UserOut, status_code=201)
async def create_user_endpoint(
    user_data: UserCreate,
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.ADMIN))
):
    """Create a login account (ADMIN-only)"""
    return create_user(store, user_data, current_user["id"])


@router.get("/me", response_model=UserOut)
async def get_me_endpoint(current_user: Dict = Depends(get_current_user)):
    """Current authenticated account"""
    return current_user
