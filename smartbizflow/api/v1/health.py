"""
Health check endpoint
"""
from fastapi import APIRouter

from smartbizflow.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint

    Returns service status and version. Needs no authentication.
    """
    return {
        "status": "ok",
        "service": "smartbizflow-hrms",
        "version": settings.VERSION,
    }
