"""
Base generator interface for all code generation targets.

Defines the error hierarchy and the contract that all language
generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import GeneratorConfig
    from .formatting import CodeFormatter
    from .schema import Schema
    from .templates import TemplateStore


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SchemaParseError(GeneratorError):
    """Raised when the schema document cannot be parsed."""

    pass


class SchemaError(GeneratorError):
    """Raised when a schema view violates its structural invariants."""

    pass


class _TaggedError(GeneratorError):
    """Generation error that remembers which entity, field and variant failed."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
        variant: Optional[str] = None,
    ):
        self.message = message
        self.type_name = type_name
        self.field_name = field_name
        self.variant = variant
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = []
        if self.type_name:
            target = self.type_name
            if self.field_name:
                target = f"{target}.{self.field_name}"
            location.append(target)
        if self.variant:
            location.append(f"template '{self.variant}'")
        if not location:
            return self.message
        return f"{', '.join(location)}: {self.message}"

    def tag(
        self,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
        variant: Optional[str] = None,
    ):
        """Fill in missing location details and refresh the message."""
        self.type_name = self.type_name or type_name
        self.field_name = self.field_name or field_name
        self.variant = self.variant or variant
        self.args = (self._describe(),)
        return self


class TemplateResolutionError(_TaggedError):
    """Raised when a template variant name is unknown."""

    def __init__(self, message: str, scope: Optional[str] = None, **location):
        self.scope = scope
        super().__init__(message, **location)


class TemplateRenderError(_TaggedError):
    """Raised for malformed templates or invalid context references."""

    pass


class FormatterError(_TaggedError):
    """Raised when the formatter rejects rendered source text."""

    pass


class ArtifactCollisionError(GeneratorError):
    """Raised when two schema entities map to the same output file."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(
        self,
        config: "GeneratorConfig",
        template_store: Optional["TemplateStore"] = None,
        formatter: Optional["CodeFormatter"] = None,
    ):
        """
        Initialize generator.

        Args:
            config: Global generation configuration
            template_store: Template lookup; built from config when omitted
            formatter: Source formatter; built from config when omitted
        """
        from .formatting import create_formatter
        from .templates import TemplateStore

        self.config = config
        self.template_store = template_store or TemplateStore(
            self.get_template_directories(),
            extension=f"{self.file_extension}.j2",
            filters=self.get_template_filters(),
        )
        self.formatter = formatter or create_formatter(config.formatter)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    @abstractmethod
    def get_template_directories(self) -> List[str]:
        """
        Return template directories in lookup order.

        User directories from the configuration come first so they can
        shadow the packaged templates.
        """
        pass

    def get_template_filters(self) -> Dict[str, Any]:
        """Return language-specific Jinja2 filters."""
        return {}

    @abstractmethod
    def generate(self, schema: "Schema") -> Dict[str, str]:
        """
        Generate code for every supported entity of a schema.

        Args:
            schema: Parsed schema catalogue

        Returns:
            Mapping of file name to generated source text
        """
        pass

    def artifact_filename(self, type_name: str) -> str:
        """Derive the output file name for an entity."""
        return f"{type_name.lower()}{self.config.file_suffix}{self.file_extension}"

    def format_code(self, code: str, type_name: Optional[str] = None) -> str:
        """
        Apply language-specific formatting to generated code.

        Raises:
            FormatterError: If the formatter rejects the code
        """
        try:
            return self.formatter.format(code)
        except FormatterError as e:
            raise e.tag(type_name=type_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Dict[str, str],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Generated source text keyed by file name
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema_text: str) -> GenerationResult:
    """
    Parse a schema and generate code, reporting failures as a result object.

    Args:
        generator: Code generator instance
        schema_text: GraphQL SDL document

    Returns:
        GenerationResult with files, warnings, and metadata; on failure the
        result carries no files at all
    """
    from .config import validate_config
    from .schema import parse_schema

    try:
        schema = parse_schema(schema_text)
        files = generator.generate(schema)
    except GeneratorError as e:
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "type_count": len(schema),
        "file_count": len(files),
        "query_type": schema.query_type,
    }

    warnings = validate_config(generator.config, generator.language_name)
    warnings.extend(
        f"Configured type {name} is not defined in the schema"
        for name in generator.config.types
        if schema.get_type(name) is None
    )

    return GenerationResult(files, warnings=warnings, metadata=metadata)
