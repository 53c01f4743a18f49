"""
API dependencies
"""

from fastapi import Request

from axions_registry.services.registry_service import RegistryService


def get_registry_service(request: Request) -> RegistryService:
    """Registry service created by the application lifespan."""
    return request.app.state.registry_service
