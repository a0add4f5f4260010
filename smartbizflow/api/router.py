"""
Main API router
"""
from fastapi import APIRouter

from smartbizflow.api.v1 import (
    health,
    auth,
    users,
    employees,
    attendance,
    leaves,
    payroll,
    training,
    benefits,
    audit_logs,
    dashboard,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(attendance.router, prefix="/attendance", tags=["attendance"])
api_router.include_router(leaves.router, prefix="/leaves", tags=["leaves"])
api_router.include_router(payroll.router, prefix="/payroll", tags=["payroll"])
api_router.include_router(training.router, prefix="/training", tags=["training"])
api_router.include_router(benefits.router, prefix="/benefits", tags=["benefits"])
api_router.include_router(audit_logs.router, prefix="/audit-logs", tags=["audit-logs"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
