"""
Go code generator module.

Generates graphql-go resolver structs from GraphQL schemas.
"""

from .generator import GoGenerator, RenderedField
from .naming import create_go_sanitizer
from .types import (
    BUILTIN_SCALARS,
    GoScalar,
    GoTypeMapper,
    ScalarMapping,
    remove_duplicates,
)

__all__ = [
    "GoGenerator",
    "RenderedField",
    "GoScalar",
    "GoTypeMapper",
    "ScalarMapping",
    "BUILTIN_SCALARS",
    "create_go_sanitizer",
    "remove_duplicates",
    "create_generator",
]


def create_generator(**kwargs):
    """
    Create a Go generator from configuration overrides.

    Args:
        **kwargs: Configuration overrides (package_name, formatter, types, ...)

    Returns:
        Configured GoGenerator instance
    """
    from ...core.config import load_config

    return GoGenerator(load_config("go", custom_config=kwargs))
