"""
Dashboard schemas
"""
from typing import Dict

from smartbizflow.schemas.base import CamelModel


class DashboardStats(CamelModel):
    total_employees: int
    present_today: int
    pending_leaves: int
    active_trainings: int


class StoreStats(CamelModel):
    collections: Dict[str, int]
    total_records: int
