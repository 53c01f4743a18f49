"""
Registry API Endpoints
Flow: HTTP request → RegistryService → Gateway / Classifier → JSON response
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from axions_registry.api.dependencies import get_registry_service
from axions_registry.core.exceptions import NotFoundError, RegistryFetchError
from axions_registry.schemas.registry import RegistryItem, RegistryStyle
from axions_registry.schemas.results import ComponentMetadata
from axions_registry.services.registry_service import RegistryService

router = APIRouter(prefix="/api/registry", tags=["registry"])


@router.get("/index", response_model=List[RegistryItem])
async def get_index(service: RegistryService = Depends(get_registry_service)):
    """Full registry index."""
    index = await service.get_index()
    if index is None:
        raise RegistryFetchError("Failed to fetch registry index", url=service.gateway.base_url)
    return index


@router.get("/styles", response_model=List[RegistryStyle])
async def get_styles(service: RegistryService = Depends(get_registry_service)):
    """Available style variants."""
    return await service.get_styles()


@router.get("/components", response_model=List[RegistryItem])
async def get_components(
    category: Optional[str] = Query(None, description="Category tag or type fragment"),
    service: RegistryService = Depends(get_registry_service),
):
    """Index entries filtered by category."""
    return await service.get_components_by_category(category)


@router.get("/categories/{category}", response_model=List[RegistryItem])
async def get_category(category: str, service: RegistryService = Depends(get_registry_service)):
    """Items listed under one registry category (ui, hooks, themes, ...)."""
    return await service.get_category(category)


@router.get("/search", response_model=List[RegistryItem])
async def search_components(
    query: str = Query(..., min_length=1, description="Search query"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum results to return"),
    service: RegistryService = Depends(get_registry_service),
):
    """Search components by name, description or tags."""
    return await service.search_components({"query": query, "limit": limit})


@router.get("/items/{name}")
async def find_component(name: str, service: RegistryService = Depends(get_registry_service)) -> Dict[str, Any]:
    """Classify a component name and return its listing entry."""
    classified = await service.find_component(name)
    if not classified.found:
        raise NotFoundError(f"Component '{name}' not found", resource_type="component", resource_id=name)
    return {
        "category": classified.category.value,
        "item": classified.item.model_dump(by_alias=True, exclude_none=True),
    }


@router.get("/items/{name}/metadata", response_model=ComponentMetadata)
async def get_component_metadata(
    name: str,
    style: Optional[str] = Query(None, description="Style variant"),
    service: RegistryService = Depends(get_registry_service),
):
    """Dependency and file summary of a component."""
    metadata = await service.get_component_metadata(name, style)
    if metadata.item is None:
        raise NotFoundError(f"Component '{name}' not found", resource_type="component", resource_id=name)
    return metadata
