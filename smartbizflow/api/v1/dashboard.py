"""
Dashboard endpoints
"""
from typing import Dict

from fastapi import APIRouter, Depends

from smartbizflow.core.deps import get_current_user, get_store, require_roles
from smartbizflow.db.store import RecordStore
from smartbizflow.models import Role
from smartbizflow.schemas.dashboard import DashboardStats, StoreStats
from smartbizflow.services.dashboard_service import get_dashboard_stats, get_store_stats

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats_endpoint(
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(get_current_user)
):
    return get_dashboard_stats(store)


@router.get("/store", response_model=StoreStats)
async def store_stats_endpoint(
    store: RecordStore = Depends(get_store),
    current_user: Dict = Depends(require_roles(Role.ADMIN))
):
    """Record count per collection (ADMIN-only)"""
    return get_store_stats(store)
