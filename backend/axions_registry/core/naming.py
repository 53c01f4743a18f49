"""
Naming helpers for generated code
Flow: registry name → identifier / display name / import path
"""

import re

from axions_registry.schemas.registry import RegistryCategory, RegistryItemType

_SEPARATOR_PATTERN = re.compile(r"-.")

_TYPE_CATEGORIES = {
    RegistryItemType.UI: RegistryCategory.UI,
    RegistryItemType.COMPONENT: RegistryCategory.UI,
    RegistryItemType.EXAMPLE: RegistryCategory.UI,
    RegistryItemType.INTERNAL: RegistryCategory.UI,
    RegistryItemType.HOOK: RegistryCategory.HOOK,
    RegistryItemType.BLOCK: RegistryCategory.BLOCK,
    RegistryItemType.AUTH: RegistryCategory.AUTH,
    RegistryItemType.CHART: RegistryCategory.CHART,
    RegistryItemType.DYNAMIC_COMPONENT: RegistryCategory.DYNAMIC_COMPONENT,
    RegistryItemType.ICON: RegistryCategory.ICON,
    RegistryItemType.LIB: RegistryCategory.LIB,
    RegistryItemType.STYLE: RegistryCategory.STYLE,
    RegistryItemType.THEME: RegistryCategory.THEME,
    RegistryItemType.PAGE: RegistryCategory.PAGE,
    RegistryItemType.FILE: RegistryCategory.FILE,
    RegistryItemType.ACTIONS: RegistryCategory.ACTION,
    RegistryItemType.API: RegistryCategory.API,
    RegistryItemType.EMAIL: RegistryCategory.EMAIL,
    RegistryItemType.MIDDLEWARE: RegistryCategory.MIDDLEWARE,
    RegistryItemType.SCHEMAS: RegistryCategory.SCHEMA,
}

_IMPORT_PREFIXES = {
    RegistryCategory.UI: "@/components/ui",
    RegistryCategory.BLOCK: "@/components/blocks",
    RegistryCategory.AUTH: "@/components/auth",
    RegistryCategory.CHART: "@/components/charts",
    RegistryCategory.DYNAMIC_COMPONENT: "@/components/dynamic",
    RegistryCategory.HOOK: "@/hooks",
    RegistryCategory.ICON: "@/components/icons",
    RegistryCategory.LIB: "@/lib",
    RegistryCategory.THEME: "@/themes",
}


def category_for_item_type(item_type: RegistryItemType) -> RegistryCategory:
    """Map an item type tag to its category, defaulting to ui."""
    return _TYPE_CATEGORIES.get(item_type, RegistryCategory.UI)


def import_path(name: str, category: RegistryCategory) -> str:
    """Module path a generated snippet imports the component from."""
    prefix = _IMPORT_PREFIXES.get(category, f"@/components/{category.slug}")
    return f"{prefix}/{name}"


def to_identifier(name: str) -> str:
    """
    Drop each '-' and upper-case the character after it.

    >>> to_identifier("data-table")
    'dataTable'
    """
    return _SEPARATOR_PATTERN.sub(lambda match: match.group(0)[1].upper(), name)


def component_identifier(name: str) -> str:
    """Capitalized JSX identifier: 'hero-section' → 'HeroSection'."""
    identifier = to_identifier(name)
    return identifier[:1].upper() + identifier[1:]


def display_name(name: str) -> str:
    """Human readable title: 'hero-section' → 'Hero Section'."""
    return " ".join(part[:1].upper() + part[1:] for part in name.split("-"))
