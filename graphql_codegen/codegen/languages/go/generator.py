"""
Go code generator implementation.

Generates graphql-go resolver structs and accessor methods from a GraphQL
schema, one file per schema entity, using per-type and per-field template
variants.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ...core.config import FieldConfig, GeneratorConfig, TypeConfig
from ...core.formatting import CodeFormatter
from ...core.generator import (
    ArtifactCollisionError,
    CodeGenerator,
    TemplateRenderError,
    TemplateResolutionError,
)
from ...core.schema import Schema, SchemaField, SchemaType, TypeKind
from ...core.templates import TemplateStore
from ....logging_config import get_logger
from .naming import create_go_sanitizer, go_identifier, resolver_type_name
from .types import GoTypeMapper, ScalarMapping, remove_duplicates

logger = get_logger(__name__)

PACKAGED_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Introspection types (__Schema, __Type, ...) and other reserved names
INTERNAL_PREFIX = "_"

UNSUPPORTED_KINDS = frozenset({TypeKind.ENUM, TypeKind.INPUT_OBJECT, TypeKind.UNION})

# Field variants that only add methods around storage declared by another variant
STORAGELESS_FIELD_TEMPLATES = frozenset({"setter"})


def validate_field_templates(config: GeneratorConfig) -> List[str]:
    """Warn about fields whose variants declare no struct field to return."""
    warnings = []
    for type_name, type_config in config.types.items():
        for field_name, field_config in type_config.fields.items():
            names = [variant.name for variant in field_config.templates]
            if all(name in STORAGELESS_FIELD_TEMPLATES for name in names):
                warnings.append(
                    f"Field {type_name}.{field_name} uses only {', '.join(names)}, "
                    "which declares no storage; add a variant such as 'default'"
                )
    return warnings


@dataclass
class RenderedField:
    """Output of every configured variant for one field."""

    declaration: str = ""
    method: str = ""
    imports: List[str] = field(default_factory=list)


class GoGenerator(CodeGenerator):
    """Code generator for graphql-go resolvers."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        template_store: Optional[TemplateStore] = None,
        formatter: Optional[CodeFormatter] = None,
    ):
        """Initialize Go generator with configuration."""
        self.sanitizer = create_go_sanitizer()
        super().__init__(config or GeneratorConfig(), template_store, formatter)

        self.scalars = ScalarMapping.from_config(self.config.scalars)
        self.type_mapper = GoTypeMapper(self.scalars)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def get_template_directories(self) -> List[str]:
        """User template directory first, packaged Go templates last."""
        directories = []
        if self.config.template_dir:
            directories.append(str(self.config.template_dir))
        directories.append(str(PACKAGED_TEMPLATE_DIR))
        return directories

    def get_template_filters(self) -> Dict[str, Callable]:
        return {
            "go_identifier": lambda name: go_identifier(name, self.sanitizer),
            "resolver": resolver_type_name,
        }

    def generate(self, schema: Schema) -> Dict[str, str]:
        """
        Generate Go code for every supported entity of the schema.

        The first error aborts the whole run; no partial mapping is
        returned.
        """
        results: Dict[str, str] = {}
        owners: Dict[str, str] = {}

        for schema_type in schema:
            name = schema_type.name
            if name.startswith(INTERNAL_PREFIX):
                continue

            if self.scalars.should_skip(name):
                continue

            if schema_type.kind in UNSUPPORTED_KINDS:
                logger.info("%s not supported yet, skipping %s", schema_type.kind, name)
                continue

            file_name = self.artifact_filename(name)
            if file_name in owners:
                raise ArtifactCollisionError(
                    f"Types {owners[file_name]} and {name} both generate {file_name}"
                )

            logger.info("Generating Go code for %s %s", schema_type.kind, name)
            results[file_name] = self.render_type(schema_type)
            owners[file_name] = name

        return results

    def render_type(self, schema_type: SchemaType) -> str:
        """Render every configured variant of an entity and format the result."""
        name = schema_type.name
        type_config = self.config.type_config(name)

        declarations = []
        methods = []
        imports = []
        for schema_field in schema_type.fields:
            rendered = self.render_field(schema_field, schema_type, type_config)
            declarations.append(rendered.declaration)
            methods.append(rendered.method)
            imports.extend(rendered.imports)

        context = {
            "kind": str(schema_type.kind),
            "possible_types": schema_type.possible_type_names(),
            "type_name": name,
            "type_description": schema_type.description or "",
            "config": self.config,
            "fields": declarations,
            "methods": methods,
            "imports": remove_duplicates(imports),
        }

        code_parts = []
        for variant in type_config.templates:
            try:
                template = self.template_store.get_type_template(variant.name)
                code_parts.append(
                    self.template_store.render(
                        template.type_template,
                        {**context, "template_config": variant.params},
                        name=f"type/{variant.name}",
                    )
                )
            except (TemplateResolutionError, TemplateRenderError) as e:
                raise e.tag(type_name=name, variant=variant.name)

        return self.format_code("".join(code_parts), type_name=name)

    def render_field(
        self,
        schema_field: SchemaField,
        owner: SchemaType,
        type_config: Optional[TypeConfig] = None,
    ) -> RenderedField:
        """Render the declaration and accessor fragments of one field."""
        type_config = type_config or self.config.type_config(owner.name)
        field_config: FieldConfig = type_config.field_config(schema_field.name)

        field_type = self.type_mapper.type_expression(schema_field.type)
        rendered = RenderedField()

        for variant in field_config.templates:
            try:
                template = self.template_store.get_field_template(variant.name)

                rendered.declaration += self.template_store.render(
                    template.field_template,
                    {
                        "type_kind": str(owner.kind),
                        "field_name": schema_field.name,
                        "field_description": schema_field.description or "",
                        "field_deprecated": schema_field.deprecation_reason,
                        "field_type": field_type,
                        "config": self.config,
                        "template_config": variant.params,
                    },
                    name=f"field/{variant.name}",
                )

                rendered.method += self.template_store.render(
                    template.method_template,
                    {
                        "type_kind": str(owner.kind),
                        "type_name": owner.name,
                        "method_name": schema_field.name,
                        "method_return_type": field_type,
                        "method_return": schema_field.name,
                        "config": self.config,
                        "template_config": variant.params,
                    },
                    name=f"field/{variant.name}.method",
                )
            except (TemplateResolutionError, TemplateRenderError) as e:
                raise e.tag(
                    type_name=owner.name,
                    field_name=schema_field.name,
                    variant=variant.name,
                )

            rendered.imports.extend(self.type_mapper.imports_for(schema_field.type))

        return rendered
