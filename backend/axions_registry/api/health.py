"""
Health check endpoints
"""

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends

from axions_registry.api.dependencies import get_registry_service
from axions_registry.config.settings import get_settings
from axions_registry.services.registry_service import RegistryService

router = APIRouter()
settings = get_settings()


@router.get("/")
async def health_check() -> Dict[str, str]:
    """Basic health check."""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/ready")
async def readiness_check(service: RegistryService = Depends(get_registry_service)) -> Dict[str, str]:
    """Readiness check including registry reachability."""
    index = await service.get_index()
    registry_status = "reachable" if index is not None else "unavailable"

    return {
        "status": "ready" if index is not None else "not ready",
        "registry": registry_status,
        "registry_url": service.gateway.base_url,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
