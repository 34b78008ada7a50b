"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GenerationResult,
    generate_code,
    GeneratorError,
    SchemaParseError,
    SchemaError,
    TemplateResolutionError,
    TemplateRenderError,
    FormatterError,
    ArtifactCollisionError,
)
from .schema import Schema, SchemaType, SchemaField, TypeKind, parse_schema
from .naming import NameSanitizer, NamingCase, capitalize, uncapitalize
from .config import (
    GeneratorConfig,
    TypeConfig,
    FieldConfig,
    ScalarConfig,
    TemplateVariant,
    ConfigManager,
    ConfigError,
    load_config,
    validate_config,
)
from .templates import TemplateEngine, TemplateStore
from .formatting import BasicFormatter, GofmtFormatter, create_formatter

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Errors
    "GeneratorError",
    "SchemaParseError",
    "SchemaError",
    "TemplateResolutionError",
    "TemplateRenderError",
    "FormatterError",
    "ArtifactCollisionError",
    # Schema views
    "Schema",
    "SchemaType",
    "SchemaField",
    "TypeKind",
    "parse_schema",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    "capitalize",
    "uncapitalize",
    # Configuration system
    "GeneratorConfig",
    "TypeConfig",
    "FieldConfig",
    "ScalarConfig",
    "TemplateVariant",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "validate_config",
    # Template system
    "TemplateEngine",
    "TemplateStore",
    # Formatting
    "BasicFormatter",
    "GofmtFormatter",
    "create_formatter",
]
