"""
Install Plan Formatter
Flow: Requested names + closure + dependency union → directive text and summary
"""

from typing import Iterable, List, Optional, Sequence

from axions_registry.config.settings import Settings, get_settings
from axions_registry.schemas.registry import RegistryItem
from axions_registry.schemas.results import InstallPlan


class InstallPlanFormatter:
    """
    Builds installation directives. Nothing here runs a package manager.

    Directive shape:
        <INSTALL_COMMAND> name... [--overwrite] [--path P] [--style S]

    --style is only emitted for a non-default style.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    def command(self) -> str:
        return self.settings.INSTALL_COMMAND

    def build_directive(
        self,
        names: Sequence[str],
        overwrite: bool = False,
        path: Optional[str] = None,
        style: Optional[str] = None,
    ) -> str:
        """
        Build one directive line from the literal requested names.

        Args:
            names: Requested component names
            overwrite: Add --overwrite
            path: Custom install path
            style: Style variant

        Returns:
            Directive text; with no names it is the bare command
        """
        parts = [self.command, *names]
        if overwrite:
            parts.append("--overwrite")
        if path:
            parts += ["--path", path]
        if style and style != self.settings.DEFAULT_STYLE:
            parts += ["--style", style]
        return " ".join(parts)

    def theme_directive(self, theme_name: str) -> str:
        return f"{self.command} --theme {theme_name}"

    def dynamic_directive(self, component_name: str) -> str:
        return f"{self.command} --registry dynamic-components {component_name}"

    def format_plan(
        self,
        names: Sequence[str],
        closure: Iterable[RegistryItem],
        external_dependencies: Iterable[str],
        overwrite: bool = False,
        path: Optional[str] = None,
        style: Optional[str] = None,
    ) -> InstallPlan:
        """
        Summarize an install request.

        Args:
            names: Requested component names
            closure: Resolved items, requested ones included
            external_dependencies: Package dependency union of the closure
            overwrite: Add --overwrite
            path: Custom install path
            style: Style variant

        Returns:
            InstallPlan with the directive and the extra components it pulls in
        """
        requested = set(names)
        additional: List[str] = []
        for item in closure:
            if item.name not in requested and item.name not in additional:
                additional.append(item.name)

        return InstallPlan(
            requested=list(names),
            directive=self.build_directive(names, overwrite=overwrite, path=path, style=style),
            external_dependencies=sorted(set(external_dependencies)),
            additional_components=additional,
        )

    def format_dependency_tree(
        self,
        names: Sequence[str],
        closure: Iterable[RegistryItem],
        directive: str,
    ) -> str:
        """Per-item dependency listing followed by the install directive."""
        lines = [f"Dependency resolution for: {', '.join(names)}", ""]
        for item in closure:
            lines.append(f"- {item.name}")
            if item.registry_dependencies:
                lines.append(f"  Registry deps: {', '.join(item.registry_dependencies)}")
            if item.dependencies:
                lines.append(f"  NPM deps: {', '.join(item.dependencies)}")
        lines += ["", "Install command:", directive]
        return "\n".join(lines)
