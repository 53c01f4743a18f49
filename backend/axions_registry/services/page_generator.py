"""
Page Generator
Flow: Page type + names → Classify (or keyword fallback) → Per-component directives → Page scaffold
"""

from typing import Dict, List, Mapping, Optional, Sequence

import structlog

from axions_registry.config.settings import Settings, get_settings
from axions_registry.core import code_templates
from axions_registry.core.naming import component_identifier, import_path
from axions_registry.schemas.registry import RegistryCategory, RegistryItem
from axions_registry.schemas.requests import GenerationOptions, PageType
from axions_registry.schemas.results import ClassifiedItem, GeneratedPage
from axions_registry.services.category_classifier import CategoryClassifier
from axions_registry.services.dependency_resolver import DependencyResolver

logger = structlog.get_logger()

# Name/description keywords used to pick components when none are requested
PAGE_KEYWORDS: Dict[str, List[str]] = {
    PageType.DASHBOARD.value: ["dashboard", "card", "stat", "chart", "analytics", "overview"],
    PageType.LANDING.value: ["hero", "feature", "pricing", "testimonial", "cta", "footer"],
    PageType.AUTH.value: ["auth", "login", "signup", "register", "form", "password"],
    PageType.PROFILE.value: ["profile", "avatar", "settings", "user", "account"],
    PageType.SETTINGS.value: ["settings", "form", "toggle", "preference", "account"],
    PageType.HERO.value: ["hero", "banner", "showcase", "header"],
}


class PageGenerator:
    """
    Composes a page scaffold out of several registry components.

    Page Generation Process:
    1. Classify each requested name, unknown names are skipped
    2. Nothing requested or found → hero blocks first for hero pages,
       then keyword matching across all categories, capped in total
    3. Resolve each selected component on its own for its install directive
    4. Render imports and JSX invocations into the page-type template

    Any failure yields None.
    """

    def __init__(
        self,
        classifier: CategoryClassifier,
        resolver: DependencyResolver,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.classifier = classifier
        self.resolver = resolver
        self.logger = logger.bind(module="page_generator")

    async def generate_page(
        self,
        page_type: str,
        names: Sequence[str],
        options: Optional[GenerationOptions] = None,
    ) -> Optional[GeneratedPage]:
        """
        Generate a page using the requested (or auto-selected) components.

        Args:
            page_type: dashboard, landing, auth, profile, settings, hero or other
            names: Components to include; empty selects by keyword
            options: Generation options, the style is used for lookups

        Returns:
            GeneratedPage, or None when generation failed
        """
        options = options or GenerationOptions()
        try:
            return await self._generate(page_type, names, options)
        except Exception as e:
            self.logger.error("Error generating page", page_type=page_type, error=str(e), exc_info=True)
            return None

    async def _generate(
        self,
        page_type: str,
        names: Sequence[str],
        options: GenerationOptions,
    ) -> GeneratedPage:
        style = options.style or self.settings.DEFAULT_STYLE

        selected: List[ClassifiedItem] = []
        for name in names:
            classified = await self.classifier.classify(name)
            if classified.found:
                selected.append(classified)

        if not selected:
            listings = await self.classifier.get_all_components()
            selected = self.select_components(page_type, listings)
            self.logger.info(
                "Components selected by keyword",
                page_type=page_type,
                components=[entry.item.name for entry in selected],
            )

        install_directives = []
        for entry in selected:
            tree = await self.resolver.resolve_tree([entry.item.name], style=style)
            install_directives.append(tree.install_directive)

        items = [entry.item for entry in selected]
        return GeneratedPage(
            page_type=page_type,
            page_code=self.render_page(page_type, selected),
            items=items,
            install_directives=install_directives,
            description=self.describe(page_type, [item.name for item in items]),
        )

    def select_components(
        self,
        page_type: str,
        listings: Mapping[RegistryCategory, List[RegistryItem]],
    ) -> List[ClassifiedItem]:
        """
        Pick components for a page when none were requested.

        Args:
            page_type: Page type whose keyword list is used
            listings: Items per category

        Returns:
            At most PAGE_COMPONENT_LIMIT components, unique by name
        """
        limit = self.settings.PAGE_COMPONENT_LIMIT
        selected: List[ClassifiedItem] = []
        seen = set()

        def add(item: RegistryItem, category: RegistryCategory) -> None:
            if item.name not in seen and len(selected) < limit:
                seen.add(item.name)
                selected.append(ClassifiedItem(item=item, category=category))

        if page_type == PageType.HERO.value:
            hero_blocks = [
                item for item in listings.get(RegistryCategory.BLOCK, [])
                if "hero" in item.name.lower()
            ]
            for item in hero_blocks[:self.settings.HERO_BLOCK_LIMIT]:
                add(item, RegistryCategory.BLOCK)

        keywords = PAGE_KEYWORDS.get(page_type, [])
        for category in RegistryCategory:
            for item in listings.get(category, []):
                if _matches_keywords(item, keywords):
                    add(item, category)

        return selected

    def render_page(self, page_type: str, components: Sequence[ClassifiedItem]) -> str:
        """Render the page-type template with one import and invocation per component."""
        imports = []
        invocations = []
        for entry in components:
            identifier = component_identifier(entry.item.name)
            imports.append(f'import {{ {identifier} }} from "{import_path(entry.item.name, entry.category)}"')
            invocations.append(f"<{identifier} />")

        return code_templates.render(
            code_templates.PAGE_LAYOUT,
            imports=imports,
            components="\n      ".join(invocations),
            page_template=code_templates.page_template_name(page_type),
        )

    @staticmethod
    def describe(page_type: str, component_names: Sequence[str]) -> str:
        return f"Generated {page_type} page using AxionJS components: {', '.join(component_names)}"


def _matches_keywords(item: RegistryItem, keywords: Sequence[str]) -> bool:
    name = item.name.lower()
    description = (item.description or "").lower()
    return any(keyword in name or keyword in description for keyword in keywords)
