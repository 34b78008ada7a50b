"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering with common
utilities for code generation, and the store that resolves template
variant names to their template bodies.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Any, List, Optional, Sequence, Union

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)

from .generator import TemplateRenderError, TemplateResolutionError
from .naming import (
    capitalize,
    uncapitalize,
    to_snake_case,
    to_camel_case,
    to_pascal_case,
)

TYPE_SCOPE = "type"
FIELD_SCOPE = "field"
METHOD_SUFFIX = ".method"


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(
        self,
        loader: Optional[BaseLoader] = None,
        filters: Optional[Dict[str, Callable]] = None,
    ):
        """
        Initialize template engine.

        Args:
            loader: Jinja2 loader for named templates
            filters: Extra filters on top of the built-in naming filters
        """
        self._env = Environment(
            loader=loader,
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

        # Add custom filters for code generation
        self._env.filters["capitalize"] = capitalize
        self._env.filters["uncapitalize"] = uncapitalize
        self._env.filters["snake_case"] = to_snake_case
        self._env.filters["camel_case"] = to_camel_case
        self._env.filters["pascal_case"] = to_pascal_case
        self._env.filters["indent"] = self._indent_filter
        self._env.filters["comment"] = self._comment_filter
        self._env.filters.update(filters or {})

    @property
    def environment(self) -> Environment:
        return self._env

    def render_string(
        self, template_string: str, context: Dict[str, Any], name: str = "<string>"
    ) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template
            name: Template name used in error messages

        Returns:
            Rendered content

        Raises:
            TemplateRenderError: On syntax errors or undefined references
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except Exception as e:
            raise TemplateRenderError(f"Failed to render template {name}: {e}") from e

    # Template filters for code generation

    @staticmethod
    def _indent_filter(value: str, spaces: int = 4, tabs: bool = False) -> str:
        """Indent all non-blank lines in a string."""
        indent = "\t" if tabs else " " * spaces
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)

    @staticmethod
    def _comment_filter(value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).strip().split("\n")
        return "\n".join(f"{style} {line}".rstrip() for line in lines)


@dataclass(frozen=True)
class TypeTemplate:
    """Template body for an entity-level variant."""

    name: str
    type_template: str


@dataclass(frozen=True)
class FieldTemplate:
    """Template bodies for a field-level variant."""

    name: str
    field_template: str
    method_template: str


class TemplateStore:
    """
    Resolves template variant names to template bodies and renders them.

    Templates live in ``<dir>/type/<variant><ext>``,
    ``<dir>/field/<variant><ext>`` and ``<dir>/field/<variant>.method<ext>``.
    Directories are searched in order, so user directories listed first
    shadow packaged templates.
    """

    def __init__(
        self,
        template_dirs: Sequence[Union[str, Path]],
        extension: str = ".j2",
        filters: Optional[Dict[str, Callable]] = None,
    ):
        self.template_dirs = [Path(d) for d in template_dirs]
        self.extension = extension
        loader = ChoiceLoader(
            [FileSystemLoader(str(d)) for d in self.template_dirs]
        )
        self.engine = TemplateEngine(loader, filters)

    def _path(self, scope: str, variant: str, suffix: str = "") -> str:
        return f"{scope}/{variant}{suffix}{self.extension}"

    def _source(self, path: str) -> Optional[str]:
        env = self.engine.environment
        try:
            source, _, _ = env.loader.get_source(env, path)
        except TemplateNotFound:
            return None
        return source

    def get_type_template(self, variant: str) -> TypeTemplate:
        """
        Look up an entity-level template variant.

        Raises:
            TemplateResolutionError: If no such variant exists
        """
        source = self._source(self._path(TYPE_SCOPE, variant))
        if source is None:
            raise TemplateResolutionError(
                f"Unknown {TYPE_SCOPE} template", scope=TYPE_SCOPE, variant=variant
            )
        return TypeTemplate(variant, source.strip(" \t"))

    def get_field_template(self, variant: str) -> FieldTemplate:
        """
        Look up a field-level template variant.

        The method template is optional and defaults to an empty body.

        Raises:
            TemplateResolutionError: If no such variant exists
        """
        source = self._source(self._path(FIELD_SCOPE, variant))
        if source is None:
            raise TemplateResolutionError(
                f"Unknown {FIELD_SCOPE} template", scope=FIELD_SCOPE, variant=variant
            )
        method_source = self._source(self._path(FIELD_SCOPE, variant, METHOD_SUFFIX))
        return FieldTemplate(variant, source.strip(" \t"), method_source or "")

    def render(self, template_source: str, context: Dict[str, Any], name: str) -> str:
        """Render a resolved template body."""
        return self.engine.render_string(template_source, context, name)

    def list_templates(self) -> Dict[str, List[str]]:
        """Return the available variant names per scope."""
        found = {TYPE_SCOPE: set(), FIELD_SCOPE: set()}
        for path in self.engine.environment.list_templates():
            scope, _, filename = path.partition("/")
            if scope not in found or not filename.endswith(self.extension):
                continue
            variant = filename[: -len(self.extension)]
            if variant.endswith(METHOD_SUFFIX):
                continue
            found[scope].add(variant)
        return {scope: sorted(names) for scope, names in found.items()}
