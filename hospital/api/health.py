"""
Health Check API

Provides endpoints for monitoring service health and status.

Endpoints:
    GET /api/health - Basic health check
    GET /api/health/detailed - Detailed health information
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from ..config import SERVICE_NAME, SERVICE_VERSION
from ..core.hospital import Hospital
from .deps import get_hospital

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get(
    "",
    summary="基本健康檢查",
    description="檢查服務是否正常運行"
)
async def health_check():
    """
    基本健康檢查

    Returns:
        服務狀態資訊
    """
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "timestamp": datetime.now().isoformat()
    }


@router.get(
    "/detailed",
    summary="詳細健康檢查",
    description="檢查服務詳細狀態與目前登記人數"
)
async def detailed_health_check(hospital: Hospital = Depends(get_hospital)):
    """
    詳細健康檢查

    Returns:
        詳細的服務狀態資訊，包括人員統計與樓層分配
    """
    directory = hospital.directory
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "timestamp": datetime.now().isoformat(),
        "directory": {
            "people": len(directory),
            "patients": len(directory.list_patients()),
            "checked_in": len(directory.list_checked_in_patients()),
            "surgeons": len(directory.list_surgeons()),
            "floor_managers": len(directory.list_floor_managers())
        },
        "floors": {
            "assigned": sorted(directory.list_assigned_floors()),
            "max_floors": directory.max_floors
        },
        "rooms": hospital.rooms.room_numbers
    }
