"""
Category Classifier
Flow: Name → Theme listing → Dynamic listing → Remaining categories in order → First match
"""

from typing import Dict, List, Optional

import structlog

from axions_registry.schemas.registry import RegistryCategory, RegistryItem
from axions_registry.schemas.results import ClassifiedItem
from axions_registry.services.registry_gateway import RegistryGateway

logger = structlog.get_logger()

# Searched ahead of every other category
PRIORITY_CATEGORIES = (RegistryCategory.THEME, RegistryCategory.DYNAMIC_COMPONENT)

LOOKUP_ORDER = PRIORITY_CATEGORIES + tuple(
    category for category in RegistryCategory if category not in PRIORITY_CATEGORIES
)


class CategoryClassifier:
    """
    Determines which registry category a bare component name belongs to.

    Classification Process:
    1. Search the theme listing, then the dynamic-component listing
    2. Search every remaining category in enumeration order
    3. Return the first category whose listing contains the name

    A name listed in several categories is classified by the first one in
    lookup order; later matches are not looked at.
    """

    def __init__(self, gateway: RegistryGateway):
        """Initialize classifier over a registry gateway."""
        self.gateway = gateway
        self.logger = logger.bind(module="category_classifier")

    async def classify(self, name: str) -> ClassifiedItem:
        """
        Classify a component name.

        Args:
            name: Component name

        Returns:
            ClassifiedItem with item and category, both None when unmatched
        """
        for category in LOOKUP_ORDER:
            item = await self.find_in_category(name, category)
            if item is not None:
                self.logger.debug("Component classified", name=name, category=category.value)
                return ClassifiedItem(item=item, category=category)

        self.logger.info("Component not found in any category", name=name)
        return ClassifiedItem()

    async def find_in_category(self, name: str, category: RegistryCategory) -> Optional[RegistryItem]:
        """Look a name up in a single category listing."""
        items = await self.gateway.fetch_by_category(category)
        return next((item for item in items if item.name == name), None)

    async def find_theme(self, name: str) -> Optional[RegistryItem]:
        """Theme item by name."""
        return await self.find_in_category(name, RegistryCategory.THEME)

    async def find_dynamic_component(self, name: str) -> Optional[RegistryItem]:
        """Dynamic component item by name."""
        return await self.find_in_category(name, RegistryCategory.DYNAMIC_COMPONENT)

    async def get_all_components(self) -> Dict[RegistryCategory, List[RegistryItem]]:
        """Every category listing, fetched concurrently and keyed in lookup order."""
        listings = await self.gateway.fetch_all_categories()
        return {category: listings.get(category, []) for category in LOOKUP_ORDER}
