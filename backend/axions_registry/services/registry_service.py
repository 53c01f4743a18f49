"""
Registry Service
Flow: Request payload → Validation → Gateway / Classifier / Resolver / Generators → Result models

Single entry point wiring the registry subsystems together for the API.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import structlog
from pydantic import BaseModel

from axions_registry.config.settings import Settings, get_settings
from axions_registry.core.exceptions import InvalidRequestError
from axions_registry.schemas.registry import RegistryCategory, RegistryItem, RegistryStyle
from axions_registry.schemas.requests import (
    GenerateComponentRequest,
    GeneratePageRequest,
    InstallRequest,
    ResolveRequest,
    SearchRequest,
    parse_request,
)
from axions_registry.schemas.results import (
    ClassifiedItem,
    ComponentMetadata,
    GeneratedArtifact,
    GeneratedPage,
    InstallPlan,
    ResolvedTree,
)
from axions_registry.services.category_classifier import CategoryClassifier
from axions_registry.services.code_generator import CodeGenerator
from axions_registry.services.dependency_resolver import DependencyResolver
from axions_registry.services.install_plan import InstallPlanFormatter
from axions_registry.services.page_generator import PageGenerator
from axions_registry.services.registry_gateway import RegistryGateway

logger = structlog.get_logger()

RequestT = TypeVar("RequestT", bound=BaseModel)


class RegistryService:
    """
    Coordinates the registry subsystems.

    Architecture:
    - RegistryGateway: validated HTTP retrieval
    - CategoryClassifier: name → category
    - DependencyResolver: registry dependency closure
    - CodeGenerator / PageGenerator: rendered source
    - InstallPlanFormatter: install directives

    Requests may be passed as models or raw dicts; raw dicts that do not
    validate raise InvalidRequestError.
    """

    def __init__(self, gateway: RegistryGateway, settings: Optional[Settings] = None):
        """Initialize service and subsystems over one gateway."""
        self.settings = settings or get_settings()
        self.gateway = gateway
        self.formatter = InstallPlanFormatter(self.settings)
        self.classifier = CategoryClassifier(gateway)
        self.resolver = DependencyResolver(gateway, self.classifier, self.formatter, self.settings)
        self.code_generator = CodeGenerator(self.classifier, self.resolver, self.formatter, settings=self.settings)
        self.page_generator = PageGenerator(self.classifier, self.resolver, self.settings)
        self.logger = logger.bind(module="registry_service")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "RegistryService":
        settings = settings or get_settings()
        return cls(RegistryGateway(settings=settings), settings)

    async def aclose(self) -> None:
        await self.gateway.aclose()

    # Listings

    async def get_index(self) -> Optional[List[RegistryItem]]:
        return await self.gateway.fetch_index()

    async def get_styles(self) -> List[RegistryStyle]:
        return await self.gateway.fetch_styles()

    async def get_category(self, category: Union[RegistryCategory, str]) -> List[RegistryItem]:
        """Items of one category listing."""
        return await self.gateway.fetch_by_category(self._category(category))

    async def get_components_by_category(self, category: Optional[str] = None) -> List[RegistryItem]:
        """Index entries tagged with a category or whose type mentions it."""
        index = await self.gateway.fetch_index()
        if not index:
            return []
        if not category:
            return index
        return [
            item for item in index
            if category in item.categories or category in item.type.value
        ]

    async def search_components(self, request: Union[SearchRequest, Dict[str, Any]]) -> List[RegistryItem]:
        """
        Case-insensitive search over name, description and tags.

        Args:
            request: Query and optional result limit

        Returns:
            Matching index items, at most limit (SEARCH_RESULT_LIMIT by default)
        """
        request = self._coerce(SearchRequest, request)
        index = await self.gateway.fetch_index()
        if not index:
            return []

        term = request.query.lower()
        matches = [
            item for item in index
            if term in item.name.lower()
            or term in (item.description or "").lower()
            or any(term in tag.lower() for tag in item.tags)
        ]
        return matches[:request.limit or self.settings.SEARCH_RESULT_LIMIT]

    async def find_component(self, name: str) -> ClassifiedItem:
        if not name:
            raise InvalidRequestError("Component name is required", field="name")
        return await self.classifier.classify(name)

    async def get_component_metadata(self, name: str, style: Optional[str] = None) -> ComponentMetadata:
        if not name:
            raise InvalidRequestError("Component name is required", field="name")
        return await self.resolver.get_component_metadata(name, style)

    # Resolution and generation

    async def resolve(self, request: Union[ResolveRequest, Dict[str, Any]]) -> ResolvedTree:
        request = self._coerce(ResolveRequest, request)
        return await self.resolver.resolve_tree(
            request.components,
            style=request.style,
            include_dev_dependencies=request.include_dev_dependencies,
        )

    def dependency_tree_text(self, tree: ResolvedTree) -> str:
        return self.formatter.format_dependency_tree(tree.requested, tree.resolved_items, tree.install_directive)

    async def install_plan(self, request: Union[InstallRequest, Dict[str, Any]]) -> InstallPlan:
        """Install directive for the requested names plus what the closure adds."""
        request = self._coerce(InstallRequest, request)
        tree = await self.resolver.resolve_tree(request.components, style=request.style)
        return self.formatter.format_plan(
            request.components,
            tree.resolved_items,
            tree.external_dependencies,
            overwrite=request.overwrite,
            path=request.path,
            style=request.style,
        )

    async def generate_component(
        self,
        request: Union[GenerateComponentRequest, Dict[str, Any]],
    ) -> Optional[GeneratedArtifact]:
        request = self._coerce(GenerateComponentRequest, request)
        return await self.code_generator.generate_artifact(request.component, request.options())

    async def generate_page(
        self,
        request: Union[GeneratePageRequest, Dict[str, Any]],
    ) -> Optional[GeneratedPage]:
        request = self._coerce(GeneratePageRequest, request)
        page_type = request.page_type or self.settings.DEFAULT_PAGE_TYPE
        page = await self.page_generator.generate_page(page_type, request.components, request.options())
        if page is not None and request.description:
            page = page.model_copy(update={"description": request.description})
        return page

    def _coerce(self, model_cls: Type[RequestT], request: Union[RequestT, Dict[str, Any], None]) -> RequestT:
        if isinstance(request, model_cls):
            return request
        return parse_request(model_cls, request)

    @staticmethod
    def _category(category: Union[RegistryCategory, str]) -> RegistryCategory:
        if isinstance(category, RegistryCategory):
            return category
        for candidate in RegistryCategory:
            if category in (candidate.value, candidate.slug):
                return candidate
        raise InvalidRequestError(f"Unknown registry category: {category}", field="category", value=category)
