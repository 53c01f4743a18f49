"""
Dependency Resolver
Flow: Requested names → Depth-first worklist over registryDependencies → Closure + dependency union
"""

from typing import List, Optional, Sequence, Set

import structlog

from axions_registry.config.settings import Settings, get_settings
from axions_registry.schemas.registry import RegistryItem
from axions_registry.schemas.results import ComponentMetadata, ResolvedTree
from axions_registry.services.category_classifier import CategoryClassifier
from axions_registry.services.install_plan import InstallPlanFormatter
from axions_registry.services.registry_gateway import RegistryGateway

logger = structlog.get_logger()


class DependencyResolver:
    """
    Expands requested names into their registry dependency closure.

    Resolution Process:
    1. visited set → created per call, shared by every branch of the walk
    2. lookup_item() → style endpoint first, classifier listings as fallback
    3. append → closure keeps discovery (pre-order) order
    4. union → package dependencies collected across the closure
    5. descend → registryDependencies pushed in listed order

    Unknown names are dropped from the closure. Cycles and repeats end at
    the visited check, so the walk always terminates.
    """

    def __init__(
        self,
        gateway: RegistryGateway,
        classifier: Optional[CategoryClassifier] = None,
        formatter: Optional[InstallPlanFormatter] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.gateway = gateway
        self.classifier = classifier or CategoryClassifier(gateway)
        self.formatter = formatter or InstallPlanFormatter(self.settings)
        self.logger = logger.bind(module="dependency_resolver")

    async def resolve_tree(
        self,
        names: Sequence[str],
        style: Optional[str] = None,
        include_dev_dependencies: bool = False,
    ) -> ResolvedTree:
        """
        Resolve the transitive registry closure of the requested names.

        Args:
            names: Requested component names
            style: Style variant used for item lookups
            include_dev_dependencies: Also collect devDependencies

        Returns:
            ResolvedTree with items in discovery order, sorted dependency
            unions and the install directive for the requested names
        """
        style = style or self.settings.DEFAULT_STYLE
        visited: Set[str] = set()
        resolved: List[RegistryItem] = []
        dependencies: Set[str] = set()
        dev_dependencies: Set[str] = set()

        for requested in names:
            stack = [requested]
            while stack:
                name = stack.pop()
                if name in visited:
                    continue
                visited.add(name)

                item = await self.lookup_item(name, style)
                if item is None:
                    self.logger.info("Skipping unresolved component", name=name)
                    continue

                resolved.append(item)
                dependencies.update(item.dependencies)
                if include_dev_dependencies:
                    dev_dependencies.update(item.dev_dependencies)
                # Reversed so dependencies pop in listed order
                stack.extend(reversed(item.registry_dependencies))

        self.logger.info(
            "Dependency tree resolved",
            requested=list(names),
            resolved=[item.name for item in resolved],
            dependencies=len(dependencies),
        )
        return ResolvedTree(
            requested=list(names),
            resolved_items=resolved,
            external_dependencies=sorted(dependencies),
            dev_dependencies=sorted(dev_dependencies),
            install_directive=self.formatter.build_directive(list(names)),
        )

    async def get_component_metadata(self, name: str, style: Optional[str] = None) -> ComponentMetadata:
        """Dependency and file summary of a single item."""
        item = await self.lookup_item(name, style or self.settings.DEFAULT_STYLE)
        if item is None:
            return ComponentMetadata()
        return ComponentMetadata(
            item=item,
            dependencies=list(item.dependencies),
            registry_dependencies=list(item.registry_dependencies),
            total_files=len(item.files),
        )

    async def lookup_item(self, name: str, style: str) -> Optional[RegistryItem]:
        """Item by name: style endpoints first, category listings as fallback."""
        item = await self.gateway.fetch_item(name, style)
        if item is not None:
            return item
        # Themes and some blocks are only served through category listings
        return (await self.classifier.classify(name)).item
