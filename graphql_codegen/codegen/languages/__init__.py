"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .go import GoGenerator

__all__ = ["GoGenerator"]
