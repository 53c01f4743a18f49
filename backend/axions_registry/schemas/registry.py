"""
Registry Schemas
Pydantic models for payloads served by the remote component registry
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RegistryItemType(str, Enum):
    """Item type tags used by registry payloads."""
    LIB = "registry:lib"
    BLOCK = "registry:block"
    COMPONENT = "registry:component"
    UI = "registry:ui"
    HOOK = "registry:hook"
    PAGE = "registry:page"
    FILE = "registry:file"
    THEME = "registry:theme"
    STYLE = "registry:style"
    EXAMPLE = "registry:example"
    INTERNAL = "registry:internal"
    AUTH = "registry:auth"
    CHART = "registry:chart"
    DYNAMIC_COMPONENT = "registry:dynamic-component"
    ICON = "registry:icon"
    ACTIONS = "registry:actions"
    API = "registry:api"
    EMAIL = "registry:email"
    MIDDLEWARE = "registry:middleware"
    SCHEMAS = "registry:schemas"


# File types whose destination path must be given explicitly
TARGETED_FILE_TYPES = frozenset({RegistryItemType.FILE, RegistryItemType.PAGE})


class RegistryCategory(str, Enum):
    """
    Registry categories in enumeration order.

    Each category is served as its own listing endpoint. The member order is
    the lookup order used by the classifier after themes and dynamic
    components.
    """
    UI = "ui"
    HOOK = "hook"
    BLOCK = "block"
    AUTH = "auth"
    CHART = "chart"
    DYNAMIC_COMPONENT = "dynamic-component"
    ICON = "icon"
    LIB = "lib"
    STYLE = "style"
    THEME = "theme"
    PAGE = "page"
    FILE = "file"
    ACTION = "action"
    API = "api"
    EMAIL = "email"
    MIDDLEWARE = "middleware"
    SCHEMA = "schema"

    @property
    def slug(self) -> str:
        """Path segment used by the listing endpoints."""
        return _CATEGORY_SLUGS[self]


_CATEGORY_SLUGS: Dict[RegistryCategory, str] = {
    RegistryCategory.UI: "ui",
    RegistryCategory.HOOK: "hooks",
    RegistryCategory.BLOCK: "blocks",
    RegistryCategory.AUTH: "auth",
    RegistryCategory.CHART: "charts",
    RegistryCategory.DYNAMIC_COMPONENT: "dynamic-components",
    RegistryCategory.ICON: "icons",
    RegistryCategory.LIB: "lib",
    RegistryCategory.STYLE: "styles",
    RegistryCategory.THEME: "themes",
    RegistryCategory.PAGE: "pages",
    RegistryCategory.FILE: "files",
    RegistryCategory.ACTION: "actions",
    RegistryCategory.API: "api",
    RegistryCategory.EMAIL: "emails",
    RegistryCategory.MIDDLEWARE: "middleware",
    RegistryCategory.SCHEMA: "schemas",
}


class RegistryModel(BaseModel):
    """Base for registry payloads: immutable, camelCase on the wire."""
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


class RegistryItemFile(RegistryModel):
    """One file shipped by a registry item."""
    path: str = Field(..., description="Source path inside the registry")
    content: Optional[str] = Field(default=None, description="File body, absent on metadata-only fetches")
    type: RegistryItemType = Field(..., description="File kind")
    target: Optional[str] = Field(default=None, description="Destination path in the consuming project")

    @model_validator(mode="after")
    def validate_target(self) -> "RegistryItemFile":
        if self.type in TARGETED_FILE_TYPES and not self.target:
            raise ValueError(f"{self.type.value} files require a target path")
        return self


class TailwindConfig(RegistryModel):
    """Tailwind configuration fragment."""
    content: Optional[List[str]] = None
    theme: Optional[Dict[str, Any]] = None
    plugins: Optional[List[str]] = None


class RegistryItemTailwind(RegistryModel):
    config: Optional[TailwindConfig] = None


class CssVars(RegistryModel):
    """CSS variables keyed by display mode."""
    theme: Optional[Dict[str, str]] = None
    light: Optional[Dict[str, str]] = None
    dark: Optional[Dict[str, str]] = None

    def for_mode(self, mode: str) -> Dict[str, str]:
        """Variables for 'light' or 'dark', empty when the mode is missing."""
        if mode == "dark":
            return dict(self.dark or {})
        return dict(self.light or {})


class RegistryItem(RegistryModel):
    """
    Atomic registry unit.

    Only name, dependencies, registry_dependencies, files and css_vars take
    part in resolution and generation; the rest is display metadata.
    """
    name: str = Field(..., min_length=1, description="Item name, unique within a category")
    type: RegistryItemType = Field(..., description="Registry item type")
    title: Optional[str] = None
    label: Optional[str] = None
    author: Optional[str] = Field(default=None, min_length=2)
    description: Optional[str] = None
    extends: Optional[str] = None
    dependencies: List[str] = Field(default_factory=list, description="Package-manager dependencies")
    dev_dependencies: List[str] = Field(default_factory=list, alias="devDependencies")
    registry_dependencies: List[str] = Field(default_factory=list, alias="registryDependencies")
    files: List[RegistryItemFile] = Field(default_factory=list)
    tailwind: Optional[RegistryItemTailwind] = None
    css_vars: Optional[CssVars] = Field(default=None, alias="cssVars")
    css_vars_v4: Optional[CssVars] = Field(default=None, alias="cssVarsV4")
    active_color: Optional[Dict[str, str]] = Field(default=None, alias="activeColor")
    meta: Optional[Dict[str, Any]] = None
    docs: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    version: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def drop_null_lists(cls, data: Any) -> Any:
        # Some registry builds emit null instead of omitting empty lists
        if isinstance(data, dict):
            list_keys = (
                "dependencies", "devDependencies", "registryDependencies",
                "files", "categories", "tags",
            )
            return {k: v for k, v in data.items() if not (k in list_keys and v is None)}
        return data

    def theme_variables(self, mode: str) -> Dict[str, str]:
        """Mode-keyed CSS variables of a theme item."""
        if self.css_vars is None:
            return {}
        return self.css_vars.for_mode(mode)


class RegistryStyle(RegistryModel):
    """Style variant entry from the style index."""
    name: str
    label: str
