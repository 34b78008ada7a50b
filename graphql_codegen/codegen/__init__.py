"""
GraphQL code generation module.

Generates resolver code from GraphQL schemas using per-type and per-field
template variants.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .registry import (
    GeneratorRegistry,
    get_generator,
    get_language_info,
    list_supported_languages,
)
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    generate_code,
    GeneratorError,
    SchemaParseError,
    TemplateResolutionError,
    TemplateRenderError,
    FormatterError,
    ArtifactCollisionError,
)
from .core.schema import Schema, SchemaType, SchemaField, TypeKind, parse_schema
from .core.config import GeneratorConfig, ConfigError, load_config

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def generate(schema_text: str, config: ConfigSource = None, language: str = "go") -> Dict[str, str]:
    """
    Generate source files from a GraphQL schema.

    Args:
        schema_text: GraphQL SDL document
        config: GeneratorConfig, override dict, or path to a JSON config file
        language: Target language name

    Returns:
        Mapping of file name to generated source text

    Raises:
        GeneratorError: On the first parse, template, or formatter failure;
            no partial result is returned
    """
    generator = get_generator(language, config)
    schema = parse_schema(schema_text)
    return generator.generate(schema)


def generate_from_file(
    schema_path: Union[str, Path], config: ConfigSource = None, language: str = "go"
) -> Dict[str, str]:
    """Read a schema file and generate source files from it."""
    from ..utils import load_schema_from_file

    _, schema_text = load_schema_from_file(schema_path)
    return generate(schema_text, config, language)


__all__ = [
    "GeneratorRegistry",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "SchemaParseError",
    "TemplateResolutionError",
    "TemplateRenderError",
    "FormatterError",
    "ArtifactCollisionError",
    "ConfigError",
    "Schema",
    "SchemaType",
    "SchemaField",
    "TypeKind",
    "GeneratorConfig",
    "generate",
    "generate_code",
    "generate_from_file",
    "get_generator",
    "get_language_info",
    "list_supported_languages",
    "load_config",
    "parse_schema",
]
