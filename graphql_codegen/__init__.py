"""GraphQL schema to resolver code generator."""

__version__ = "0.1.0"
