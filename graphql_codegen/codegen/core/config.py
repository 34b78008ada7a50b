"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional, Tuple, Union
from dataclasses import dataclass, field

from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPLATE = "default"
FORMATTERS = {"basic", "gofmt", "none"}


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass(frozen=True)
class TemplateVariant:
    """A named template variant with its parameter bag."""

    name: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


DEFAULT_VARIANTS = (TemplateVariant(DEFAULT_TEMPLATE),)


def _parse_variants(raw: Any, owner: str) -> Tuple[TemplateVariant, ...]:
    """
    Normalize a ``templates`` entry into an ordered tuple of variants.

    Accepts a JSON object (variant name -> params, in document order), a
    list of names, or a list of ``{"name": ..., "params": {...}}`` objects.
    An empty or missing entry yields the single default variant.
    """
    if not raw:
        return DEFAULT_VARIANTS

    if isinstance(raw, Mapping):
        items = list(raw.items())
    elif isinstance(raw, (list, tuple)):
        items = []
        for entry in raw:
            if isinstance(entry, str):
                items.append((entry, {}))
            elif isinstance(entry, Mapping) and "name" in entry:
                items.append((entry["name"], entry.get("params") or {}))
            else:
                raise ConfigError(f"Invalid template entry for {owner}: {entry!r}")
    else:
        raise ConfigError(f"Templates for {owner} must be an object or a list")

    variants = []
    for name, params in items:
        if params is None:
            params = {}
        if not isinstance(name, str) or not name:
            raise ConfigError(f"Invalid template name for {owner}: {name!r}")
        if not isinstance(params, Mapping):
            raise ConfigError(
                f"Parameters of template '{name}' for {owner} must be an object"
            )
        variants.append(TemplateVariant(name, params))
    return tuple(variants)


def _require_object(data: Any, owner: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"Configuration of {owner} must be an object")
    return data


@dataclass(frozen=True)
class FieldConfig:
    """Per-field template configuration."""

    templates: Tuple[TemplateVariant, ...] = DEFAULT_VARIANTS

    def __post_init__(self):
        if not self.templates:
            object.__setattr__(self, "templates", DEFAULT_VARIANTS)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]], owner: str = "field") -> "FieldConfig":
        data = _require_object(data, owner)
        return cls(templates=_parse_variants(data.get("templates"), owner))


@dataclass(frozen=True)
class TypeConfig:
    """Per-entity template configuration."""

    templates: Tuple[TemplateVariant, ...] = DEFAULT_VARIANTS
    fields: Mapping[str, FieldConfig] = field(default_factory=dict)

    def __post_init__(self):
        if not self.templates:
            object.__setattr__(self, "templates", DEFAULT_VARIANTS)
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def field_config(self, field_name: str) -> FieldConfig:
        """Return the configuration of a field, defaulting when absent."""
        return self.fields.get(field_name) or FieldConfig()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]], owner: str = "type") -> "TypeConfig":
        data = _require_object(data, owner)
        fields = data.get("fields") or {}
        if not isinstance(fields, Mapping):
            raise ConfigError(f"Fields of {owner} must be an object")

        return cls(
            templates=_parse_variants(data.get("templates"), owner),
            fields={
                name: FieldConfig.from_dict(field_data, f"{owner}.{name}")
                for name, field_data in fields.items()
            },
        )


@dataclass(frozen=True)
class ScalarConfig:
    """Target-language mapping for a custom scalar."""

    type: str = ""
    import_path: str = ""
    skip: bool = True

    @classmethod
    def from_dict(cls, name: str, data: Any) -> "ScalarConfig":
        if isinstance(data, str):
            return cls(type=data)
        if not isinstance(data, Mapping):
            raise ConfigError(f"Scalar mapping for {name} must be a string or an object")
        return cls(
            type=data.get("type", data.get("go_type", "")),
            import_path=data.get("import", data.get("import_path", "")),
            skip=bool(data.get("skip", True)),
        )


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    package_name: str = "resolvers"
    file_suffix: str = "_gen"

    # Rendering settings
    template_dir: Optional[str] = None
    formatter: str = "basic"
    add_comments: bool = True

    # Schema driven settings
    types: Dict[str, TypeConfig] = field(default_factory=dict)
    scalars: Dict[str, ScalarConfig] = field(default_factory=dict)

    # Custom settings (visible to templates as config.custom)
    custom: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.types = _convert_types(self.types)
        self.scalars = _convert_scalars(self.scalars)

    def type_config(self, type_name: str) -> TypeConfig:
        """Return the configuration of an entity, defaulting when absent."""
        return self.types.get(type_name) or TypeConfig()


def _convert_types(types: Any) -> Dict[str, TypeConfig]:
    """Normalize a ``types`` table into TypeConfig values."""
    types = types or {}
    if not isinstance(types, Mapping):
        raise ConfigError("'types' must be an object keyed by type name")
    return {
        name: value if isinstance(value, TypeConfig) else TypeConfig.from_dict(value, name)
        for name, value in types.items()
    }


def _convert_scalars(scalars: Any) -> Dict[str, ScalarConfig]:
    """Normalize a ``scalars`` table into ScalarConfig values."""
    scalars = scalars or {}
    if not isinstance(scalars, Mapping):
        raise ConfigError("'scalars' must be an object keyed by scalar name")
    return {
        name: value if isinstance(value, ScalarConfig) else ScalarConfig.from_dict(name, value)
        for name, value in scalars.items()
    }


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["go"] = {
            "package_name": "resolvers",
            "file_suffix": "_gen",
            "formatter": "basic",
            "add_comments": True,
        }

    def get_config(self, language: str = "go", custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        base_config = dict(self._configs.get(language, {}))

        if config_file:
            file_config = self._load_config_file(config_file)
            logger.debug("Loaded configuration file %s", config_file)
            base_config.update(file_config)

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f for f in GeneratorConfig.__dataclass_fields__}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get('custom') or {})
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def list_languages(self) -> list[str]:
        """Get list of languages with default configuration."""
        return list(self._configs.keys())


def validate_config(config: GeneratorConfig, language: str = "go") -> list[str]:
    """
    Validate configuration for a language.

    Returns:
        List of validation warnings
    """
    warnings = []

    if config.formatter not in FORMATTERS:
        warnings.append(f"Invalid formatter: {config.formatter}")

    if config.template_dir and not Path(config.template_dir).is_dir():
        warnings.append(f"Template directory not found: {config.template_dir}")

    if language == "go":
        from ..languages.go.naming import validate_go_package_name

        from ..languages.go.generator import validate_field_templates

        warnings.extend(validate_go_package_name(config.package_name))
        warnings.extend(validate_field_templates(config))

    return warnings


# Global configuration manager instance
_config_manager = None

def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: str = "go", custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)


# Example configuration file for reference
EXAMPLE_GO_CONFIG = {
    "package_name": "resolvers",
    "scalars": {
        "Time": {"type": "graphql.Time", "import": 'graphql "github.com/neelance/graphql-go"'},
    },
    "types": {
        "Post": {
            "templates": {"default": {}, "constructor": {"name": "NewPost"}},
            "fields": {"title": {"templates": ["default", "setter"]}},
        },
    },
}
