"""
Component Code Generator
Flow: Name → Theme? → Dynamic component? → Direct component → Rendered artifact | None
"""

from typing import Any, Dict, Optional

import structlog

from axions_registry.config.settings import Settings, get_settings
from axions_registry.core import code_templates
from axions_registry.core.naming import (
    category_for_item_type,
    component_identifier,
    display_name,
    import_path,
    to_identifier,
)
from axions_registry.schemas.registry import RegistryCategory, RegistryItem, RegistryItemFile
from axions_registry.schemas.requests import GenerationOptions, ThemeMode
from axions_registry.schemas.results import ArtifactKind, GeneratedArtifact
from axions_registry.services.category_classifier import CategoryClassifier
from axions_registry.services.dependency_resolver import DependencyResolver
from axions_registry.services.install_plan import InstallPlanFormatter
from axions_registry.services.prop_substitution import PropSubstituter, RegexPropSubstituter

logger = structlog.get_logger()


class CodeGenerator:
    """
    Renders source artifacts for single components.

    Dispatch Order:
    1. Theme listing match → theme module with mode-keyed colors
    2. Dynamic listing match → manifest summary of the file set
    3. Otherwise → the component's own file, props substituted

    Returns None when there is nothing to render; never raises for
    registry state.
    """

    def __init__(
        self,
        classifier: CategoryClassifier,
        resolver: DependencyResolver,
        formatter: Optional[InstallPlanFormatter] = None,
        substituter: Optional[PropSubstituter] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.classifier = classifier
        self.resolver = resolver
        self.formatter = formatter or InstallPlanFormatter(self.settings)
        self.substituter = substituter or RegexPropSubstituter()
        self.logger = logger.bind(module="code_generator")

    async def generate_artifact(
        self,
        name: str,
        options: Optional[GenerationOptions] = None,
    ) -> Optional[GeneratedArtifact]:
        """
        Generate code for a component.

        Args:
            name: Component name
            options: Style, theme mode, custom props and colors

        Returns:
            GeneratedArtifact, or None when the component cannot be rendered
        """
        options = options or GenerationOptions()

        theme = await self.classifier.find_theme(name)
        if theme is not None:
            return self.render_theme(theme, options)

        dynamic_component = await self.classifier.find_dynamic_component(name)
        if dynamic_component is not None:
            return self.render_dynamic_component(dynamic_component, options)

        return await self._render_component(name, options)

    def render_theme(self, theme: RegistryItem, options: GenerationOptions) -> GeneratedArtifact:
        """Theme module exporting the requested mode's variables as colors."""
        mode = (options.theme or ThemeMode(self.settings.DEFAULT_THEME_MODE)).normalized()

        colors = theme.theme_variables(mode.value)
        colors.update(options.custom_colors)

        context = {
            "name": theme.name,
            "label": theme.label or display_name(theme.name),
            "export_name": f"{to_identifier(theme.name)}Theme",
            "colors": colors,
            "import_path": import_path(theme.name, RegistryCategory.THEME),
        }
        self.logger.info("Theme module generated", theme=theme.name, mode=mode.value, colors=len(colors))
        return GeneratedArtifact(
            name=theme.name,
            kind=ArtifactKind.THEME,
            code=code_templates.render(code_templates.THEME_MODULE, **context),
            usage=_usage(options, code_templates.THEME_USAGE, context),
            dependencies=[],
            install_directive=self.formatter.theme_directive(theme.name),
        )

    def render_dynamic_component(
        self,
        component: RegistryItem,
        options: Optional[GenerationOptions] = None,
    ) -> GeneratedArtifact:
        """Manifest of the files and dependencies making up a dynamic component."""
        identifier = to_identifier(component.name)
        context = {
            "name": component.name,
            "description": component.description or "",
            "file_lines": [_manifest_line(file) for file in component.files],
            "registry_dependencies": component.registry_dependencies,
            "dependencies": component.dependencies,
            "identifier": identifier,
            "import_path": import_path(component.name, RegistryCategory.DYNAMIC_COMPONENT),
        }
        self.logger.info("Dynamic component manifest generated", component=component.name, files=len(component.files))
        return GeneratedArtifact(
            name=component.name,
            kind=ArtifactKind.DYNAMIC_COMPONENT,
            code=code_templates.render(code_templates.DYNAMIC_MANIFEST, **context),
            usage=_usage(options or GenerationOptions(), code_templates.DYNAMIC_USAGE, context),
            dependencies=list(component.dependencies),
            install_directive=self.formatter.dynamic_directive(component.name),
        )

    def component_usage(self, name: str, category: RegistryCategory) -> str:
        """Usage example importing the component from its category path."""
        return code_templates.render(
            code_templates.COMPONENT_USAGE,
            identifier=component_identifier(name),
            import_path=import_path(name, category),
        )

    async def _render_component(self, name: str, options: GenerationOptions) -> Optional[GeneratedArtifact]:
        style = options.style or self.settings.DEFAULT_STYLE
        item = await self.resolver.lookup_item(name, style)
        if item is None:
            self.logger.info("Component not found for generation", component=name, style=style)
            return None

        main_file = next((file for file in item.files if name in file.path), None)
        if main_file is None or not main_file.content:
            self.logger.info("Component has no renderable content", component=name)
            return None

        code = main_file.content
        if options.custom_props:
            code = self.substituter.apply(code, options.custom_props)

        usage = ""
        if options.include_examples:
            usage = self.component_usage(name, category_for_item_type(item.type))

        tree = await self.resolver.resolve_tree([name], style=style)
        return GeneratedArtifact(
            name=name,
            kind=ArtifactKind.COMPONENT,
            code=code,
            usage=usage,
            dependencies=tree.external_dependencies,
            install_directive=tree.install_directive,
        )


def _manifest_line(file: RegistryItemFile) -> str:
    line = f"{file.path} ({file.type.value})"
    if file.target:
        line += f" → {file.target}"
    return line


def _usage(options: GenerationOptions, template_name: str, context: Dict[str, Any]) -> str:
    if not options.include_examples:
        return ""
    return code_templates.render(template_name, **context)
