"""
Result Schemas
Resolution, generation and install plan results
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from axions_registry.schemas.registry import RegistryCategory, RegistryItem


class ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ClassifiedItem(ResultModel):
    """Classifier outcome. Both fields are None when no category matched."""
    item: Optional[RegistryItem] = None
    category: Optional[RegistryCategory] = None

    @property
    def found(self) -> bool:
        return self.item is not None


class ResolvedTree(ResultModel):
    """Dependency closure of a set of requested names."""
    requested: List[str] = Field(default_factory=list, description="Names as requested")
    resolved_items: List[RegistryItem] = Field(default_factory=list, description="Closure in discovery order")
    external_dependencies: List[str] = Field(default_factory=list, description="Union of package dependencies, sorted")
    dev_dependencies: List[str] = Field(default_factory=list, description="Union of dev dependencies, sorted")
    install_directive: str = Field(..., description="Install directive built from the requested names")

    @property
    def resolved_names(self) -> List[str]:
        return [item.name for item in self.resolved_items]


class ComponentMetadata(ResultModel):
    """Summary of a single registry item."""
    item: Optional[RegistryItem] = None
    dependencies: List[str] = Field(default_factory=list)
    registry_dependencies: List[str] = Field(default_factory=list)
    total_files: int = 0


class ArtifactKind(str, Enum):
    """Which renderer produced an artifact."""
    THEME = "theme"
    DYNAMIC_COMPONENT = "dynamic-component"
    COMPONENT = "component"


class GeneratedArtifact(ResultModel):
    """Rendered source for one component."""
    name: str
    kind: ArtifactKind
    code: str
    usage: str
    dependencies: List[str] = Field(default_factory=list)
    install_directive: str


class GeneratedPage(ResultModel):
    """Rendered page scaffold composed from several components."""
    page_type: str
    page_code: str
    items: List[RegistryItem] = Field(default_factory=list)
    install_directives: List[str] = Field(default_factory=list)
    description: str


class InstallPlan(ResultModel):
    """Install directive plus what it will pull in."""
    requested: List[str] = Field(default_factory=list)
    directive: str
    external_dependencies: List[str] = Field(default_factory=list)
    additional_components: List[str] = Field(default_factory=list)

    def render(self) -> str:
        """Plain-text installation summary."""
        lines = ["To install the requested components:", "", self.directive]
        if self.external_dependencies:
            lines += ["", "This will also install the following npm dependencies:"]
            lines += [f"- {dep}" for dep in self.external_dependencies]
        if self.additional_components:
            lines += ["", "Additional registry dependencies will be installed:"]
            lines += [f"- {name}" for name in self.additional_components]
        return "\n".join(lines)
