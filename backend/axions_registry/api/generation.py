"""
Resolution and Generation API Endpoints
Flow: JSON body → Request validation → Resolver / Generators → Result JSON
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from axions_registry.api.dependencies import get_registry_service
from axions_registry.core.exceptions import NotFoundError
from axions_registry.schemas.results import GeneratedArtifact, GeneratedPage
from axions_registry.services.registry_service import RegistryService

router = APIRouter(prefix="/api", tags=["generation"])


@router.post("/resolve")
async def resolve_dependencies(
    payload: Dict[str, Any] = Body(...),
    service: RegistryService = Depends(get_registry_service),
) -> Dict[str, Any]:
    """Resolve the registry dependency closure of the requested components."""
    tree = await service.resolve(payload)
    return {
        "requested": tree.requested,
        "resolved": [item.name for item in tree.resolved_items],
        "dependencies": tree.external_dependencies,
        "dev_dependencies": tree.dev_dependencies,
        "install_command": tree.install_directive,
        "tree": service.dependency_tree_text(tree),
    }


@router.post("/install-plan")
async def install_plan(
    payload: Dict[str, Any] = Body(...),
    service: RegistryService = Depends(get_registry_service),
) -> Dict[str, Any]:
    """Install directive and the dependencies it pulls in."""
    plan = await service.install_plan(payload)
    return {**plan.model_dump(), "text": plan.render()}


@router.post("/generate/component", response_model=GeneratedArtifact)
async def generate_component_code(
    payload: Dict[str, Any] = Body(...),
    service: RegistryService = Depends(get_registry_service),
):
    """Generate code, usage and install directive for one component."""
    artifact = await service.generate_component(payload)
    if artifact is None:
        name = payload.get("component")
        raise NotFoundError(f"Failed to generate code for component '{name}'", resource_type="component", resource_id=name)
    return artifact


@router.post("/generate/page", response_model=GeneratedPage)
async def create_page_with_components(
    payload: Dict[str, Any] = Body(...),
    service: RegistryService = Depends(get_registry_service),
):
    """Generate a page scaffold from requested or keyword-selected components."""
    page = await service.generate_page(payload)
    if page is None:
        page_type = payload.get("pageType") or payload.get("page_type") or service.settings.DEFAULT_PAGE_TYPE
        raise NotFoundError(f"Failed to generate {page_type} page", resource_type="page", resource_id=page_type)
    return page
