"""
Request Schemas
Inbound resolution and generation requests
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from axions_registry.core.exceptions import InvalidRequestError

RequestT = TypeVar("RequestT", bound=BaseModel)


class ThemeMode(str, Enum):
    """Display mode requested for theme rendering."""
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    def normalized(self) -> "ThemeMode":
        """'system' has no variables of its own and always renders as light."""
        if self is ThemeMode.SYSTEM:
            return ThemeMode.LIGHT
        return self


class PageType(str, Enum):
    """Known page scaffolds. Other values render with the dashboard template."""
    DASHBOARD = "dashboard"
    LANDING = "landing"
    AUTH = "auth"
    PROFILE = "profile"
    SETTINGS = "settings"
    HERO = "hero"


class RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class GenerationOptions(RequestModel):
    """Options shared by component and page generation."""
    style: Optional[str] = Field(default=None, description="Style variant, defaults to the configured style")
    include_examples: bool = Field(default=True, alias="includeExamples")
    custom_props: Dict[str, Any] = Field(default_factory=dict, alias="customProps")
    theme: Optional[ThemeMode] = Field(default=None, description="Theme display mode, defaults to DEFAULT_THEME_MODE")
    custom_colors: Dict[str, str] = Field(default_factory=dict, alias="customColors")


class ComponentNamesRequest(RequestModel):
    """Base for requests that carry a list of component names."""
    components: List[str] = Field(..., description="Component names")
    style: Optional[str] = Field(default=None, description="Style variant")

    @field_validator("components")
    @classmethod
    def validate_components(cls, v: List[str]) -> List[str]:
        names = [name.strip() for name in v]
        if any(not name for name in names):
            raise ValueError("component names must be non-empty")
        return names


class ResolveRequest(ComponentNamesRequest):
    """Resolve dependency tree request."""
    include_dev_dependencies: bool = Field(default=False, alias="includeDevDeps")


class InstallRequest(ComponentNamesRequest):
    """Install plan request."""
    overwrite: bool = Field(default=False, description="Overwrite existing files")
    path: Optional[str] = Field(default=None, description="Custom installation path")


class GenerateComponentRequest(GenerationOptions):
    """Single component code generation request."""
    component: str = Field(..., min_length=1, description="Component name")

    def options(self) -> GenerationOptions:
        return GenerationOptions.model_validate(self.model_dump(exclude={"component"}))


class GeneratePageRequest(GenerationOptions):
    """Page scaffold generation request."""
    page_type: Optional[str] = Field(default=None, alias="pageType", description="Type of page, defaults to DEFAULT_PAGE_TYPE")
    components: List[str] = Field(default_factory=list, description="Components to include")
    description: Optional[str] = Field(default=None, description="Caller supplied page description")

    def options(self) -> GenerationOptions:
        return GenerationOptions.model_validate(
            self.model_dump(exclude={"page_type", "components", "description"})
        )


class SearchRequest(RequestModel):
    """Registry search request."""
    query: str = Field(..., min_length=1, description="Search query")
    limit: Optional[int] = Field(default=None, ge=1, description="Maximum results to return")


def parse_request(model_cls: Type[RequestT], payload: Optional[Dict[str, Any]]) -> RequestT:
    """
    Validate a raw request payload.

    Args:
        model_cls: Request model to validate against
        payload: Raw request arguments

    Returns:
        Validated request model

    Raises:
        InvalidRequestError: when arguments are missing or malformed
    """
    if payload is None:
        raise InvalidRequestError("Arguments are required")
    try:
        return model_cls.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise InvalidRequestError(
            f"Invalid {model_cls.__name__}: {first.get('msg', str(e))}",
            field=field,
        ) from e
