"""
Naming utilities for safe code generation.

Case conversions used as template filters, plus reserved-word
sanitization for identifiers emitted into the target language.
"""

import re
from typing import Set, Dict
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""
    SNAKE_CASE = "snake"      # user_name
    CAMEL_CASE = "camel"      # userName
    PASCAL_CASE = "pascal"    # UserName
    KEBAB_CASE = "kebab"      # user-name
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME
    ORIGINAL = "original"     # untouched


def capitalize(value: str) -> str:
    """
    Upper-case the first character, leaving the rest untouched.

    ``id`` in any casing becomes ``ID`` so accessor names follow
    Go initialism conventions.
    """
    value = str(value)
    if value.lower() == "id":
        return "ID"
    if not value:
        return value
    return value[0].upper() + value[1:]


def uncapitalize(value: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    value = str(value)
    if not value:
        return value
    return value[0].lower() + value[1:]


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    # Replace hyphens and spaces with underscores
    name = re.sub(r'[-\s]+', '_', str(name))

    # Insert underscore before uppercase letters
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)

    # Convert to lowercase and clean up multiple underscores
    name = name.lower()
    name = re.sub(r'_+', '_', name)

    return name.strip('_')


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    parts = to_snake_case(name).split('_')
    if not parts:
        return str(name)
    return parts[0].lower() + ''.join(part.capitalize() for part in parts[1:])


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    parts = to_snake_case(name).split('_')
    return ''.join(part.capitalize() for part in parts if part)


def to_kebab_case(name: str) -> str:
    """Convert to kebab-case."""
    return to_snake_case(name).replace('_', '-')


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert name to target case style."""
    if target_case == NamingCase.SNAKE_CASE:
        return to_snake_case(name)
    elif target_case == NamingCase.CAMEL_CASE:
        return to_camel_case(name)
    elif target_case == NamingCase.PASCAL_CASE:
        return to_pascal_case(name)
    elif target_case == NamingCase.KEBAB_CASE:
        return to_kebab_case(name)
    elif target_case == NamingCase.SCREAMING_SNAKE:
        return to_snake_case(name).upper()
    else:
        return name


class NameSanitizer:
    """Handles identifier sanitization against reserved words."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.ORIGINAL,
                      suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a name for safe use in target language.

        The result depends only on the arguments, so rendering the same
        schema twice yields the same identifiers.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for reserved word conflicts

        Returns:
            Sanitized name safe for use
        """
        cache_key = f"{name}_{target_case.value}_{suffix_on_conflict}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        converted = convert_case(cleaned, target_case)
        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._name_cache[cache_key] = final_name
        return final_name

    def is_reserved(self, name: str) -> bool:
        """Check whether a name clashes with a keyword or builtin."""
        return name in self.reserved_words or name in self.builtin_types

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r'[^a-zA-Z0-9_]', '_', str(name))

        # Ensure doesn't start with number
        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = "field"

        return cleaned

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Append the suffix to names that clash with reserved words."""
        if self.is_reserved(name):
            return f"{name}{suffix}"
        return name
