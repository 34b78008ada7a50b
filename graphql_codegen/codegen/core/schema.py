"""
Core schema representation for code generation.

Converts a GraphQL SDL document (parsed by graphql-core) into read-only
views that generators can walk without depending on graphql-core types.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum

from graphql import (
    GraphQLError,
    GraphQLNamedType,
    GraphQLSchema,
    build_schema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)

from .generator import SchemaError, SchemaParseError


class TypeKind(str, Enum):
    """Schema type classifications, named as in GraphQL introspection."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"

    def __str__(self) -> str:
        return self.value


WRAPPER_KINDS = frozenset({TypeKind.LIST, TypeKind.NON_NULL})


@dataclass(eq=False)
class SchemaType:
    """
    A named schema entity or an anonymous wrapper around one.

    Wrapper kinds (LIST, NON_NULL) carry ``of_type`` and no name; every
    other kind carries a name.
    """

    kind: TypeKind
    name: Optional[str] = None
    description: Optional[str] = None
    of_type: Optional["SchemaType"] = None
    fields: List["SchemaField"] = field(default_factory=list, repr=False)
    possible_types: Optional[List["SchemaType"]] = field(default=None, repr=False)

    def __post_init__(self):
        self.kind = TypeKind(self.kind)
        if self.is_wrapper and self.of_type is None:
            raise SchemaError(f"{self.kind} wrapper type has no inner type")
        if not self.is_wrapper and not self.name:
            raise SchemaError(f"{self.kind} type has no name")

    @classmethod
    def non_null(cls, inner: "SchemaType") -> "SchemaType":
        """Wrap a type in a NON_NULL layer."""
        return cls(kind=TypeKind.NON_NULL, of_type=inner)

    @classmethod
    def list_of(cls, inner: "SchemaType") -> "SchemaType":
        """Wrap a type in a LIST layer."""
        return cls(kind=TypeKind.LIST, of_type=inner)

    @property
    def is_wrapper(self) -> bool:
        return self.kind in WRAPPER_KINDS

    def named_type(self) -> "SchemaType":
        """Return the base named type after peeling every wrapper."""
        current = self
        while current.is_wrapper:
            current = current.of_type
        return current

    def possible_type_names(self) -> List[str]:
        """Names of concrete types for interfaces and unions, else empty."""
        if not self.possible_types:
            return []
        return [possible.name for possible in self.possible_types]

    def __str__(self) -> str:
        if self.kind == TypeKind.NON_NULL:
            return f"{self.of_type}!"
        if self.kind == TypeKind.LIST:
            return f"[{self.of_type}]"
        return self.name or "<unnamed>"


@dataclass(eq=False)
class SchemaField:
    """A field of an object-like schema entity."""

    name: str
    type: SchemaType
    owner: SchemaType = field(repr=False)
    description: Optional[str] = None
    is_deprecated: bool = False
    deprecation_reason: Optional[str] = None


@dataclass
class Schema:
    """Ordered catalogue of the named types of one schema document."""

    types: Dict[str, SchemaType] = field(default_factory=dict)
    query_type: Optional[str] = None
    mutation_type: Optional[str] = None
    subscription_type: Optional[str] = None

    def get_type(self, name: str) -> Optional[SchemaType]:
        return self.types.get(name)

    def __iter__(self):
        return iter(self.types.values())

    def __len__(self) -> int:
        return len(self.types)


def parse_schema(schema_text: str) -> Schema:
    """
    Parse GraphQL SDL text into a ``Schema`` catalogue.

    Args:
        schema_text: Complete type-system document

    Returns:
        Schema with one SchemaType per named type, in document order

    Raises:
        SchemaParseError: If the document is not valid SDL
    """
    try:
        gql_schema = build_schema(schema_text)
    except GraphQLError as e:
        raise SchemaParseError(f"Invalid schema: {e.message}") from e
    except TypeError as e:
        # graphql-core reports some structural problems as TypeError
        raise SchemaParseError(f"Invalid schema: {e}") from e

    return convert_graphql_schema(gql_schema)


def convert_graphql_schema(gql_schema: GraphQLSchema) -> Schema:
    """
    Convert a graphql-core schema into ``Schema`` views.

    Named types are created first so that fields of mutually referencing
    types can point at the shared instances.
    """
    schema = Schema(
        query_type=_type_name(gql_schema.query_type),
        mutation_type=_type_name(gql_schema.mutation_type),
        subscription_type=_type_name(gql_schema.subscription_type),
    )

    for name, gql_type in gql_schema.type_map.items():
        schema.types[name] = SchemaType(
            kind=_kind_of(gql_type),
            name=name,
            description=gql_type.description,
        )

    for name, gql_type in gql_schema.type_map.items():
        schema_type = schema.types[name]

        if is_object_type(gql_type) or is_interface_type(gql_type):
            for field_name, gql_field in gql_type.fields.items():
                schema_type.fields.append(
                    SchemaField(
                        name=field_name,
                        type=_convert_type_ref(gql_field.type, schema),
                        owner=schema_type,
                        description=gql_field.description,
                        is_deprecated=gql_field.deprecation_reason is not None,
                        deprecation_reason=gql_field.deprecation_reason,
                    )
                )

        if is_interface_type(gql_type) or is_union_type(gql_type):
            schema_type.possible_types = [
                schema.types[possible.name]
                for possible in gql_schema.get_possible_types(gql_type)
            ]

    return schema


def _convert_type_ref(gql_type, schema: Schema) -> SchemaType:
    """Mirror a wrapped graphql-core type reference."""
    if is_non_null_type(gql_type):
        return SchemaType.non_null(_convert_type_ref(gql_type.of_type, schema))
    if is_list_type(gql_type):
        return SchemaType.list_of(_convert_type_ref(gql_type.of_type, schema))
    return schema.types[gql_type.name]


def _kind_of(gql_type: GraphQLNamedType) -> TypeKind:
    if is_scalar_type(gql_type):
        return TypeKind.SCALAR
    if is_object_type(gql_type):
        return TypeKind.OBJECT
    if is_interface_type(gql_type):
        return TypeKind.INTERFACE
    if is_union_type(gql_type):
        return TypeKind.UNION
    if is_enum_type(gql_type):
        return TypeKind.ENUM
    if is_input_object_type(gql_type):
        return TypeKind.INPUT_OBJECT
    raise SchemaError(f"Unsupported GraphQL type: {gql_type!r}")


def _type_name(gql_type: Optional[GraphQLNamedType]) -> Optional[str]:
    return gql_type.name if gql_type is not None else None
