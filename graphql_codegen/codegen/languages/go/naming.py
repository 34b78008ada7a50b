"""
Go-specific naming utilities and sanitization.

Handles Go reserved words, builtins, and naming conventions.
"""

from ...core.naming import NameSanitizer, NamingCase

RESOLVER_SUFFIX = "Resolver"


# Go reserved words
GO_RESERVED_WORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}

# Predeclared identifiers that would be shadowed by a same-named struct field
GO_BUILTIN_TYPES = {
    "bool",
    "byte",
    "error",
    "float32",
    "float64",
    "int",
    "int32",
    "int64",
    "rune",
    "string",
    "append",
    "len",
    "make",
    "new",
}


def create_go_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Go."""
    return NameSanitizer(GO_RESERVED_WORDS, GO_BUILTIN_TYPES)


def resolver_type_name(type_name: str) -> str:
    """Name of the generated resolver type for a schema entity."""
    return f"{type_name}{RESOLVER_SUFFIX}"


def go_identifier(name: str, sanitizer: NameSanitizer) -> str:
    """
    Make a schema name usable as a Go identifier without changing its case.

    ``type`` becomes ``type_`` and ``string`` becomes ``string_``, so the
    result can name a struct field next to the predeclared identifiers.
    """
    return sanitizer.sanitize_name(name, NamingCase.ORIGINAL)


def validate_go_package_name(name: str) -> list[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    if not name.isidentifier():
        errors.append(f"'{name}' is not a valid Go identifier")

    if name[0].isupper():
        errors.append("Package names should be lowercase")

    if "-" in name:
        errors.append("Package names should not contain hyphens")

    if name in GO_RESERVED_WORDS:
        errors.append(f"'{name}' is a Go reserved word")

    return errors
