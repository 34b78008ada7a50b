"""
Go-specific type system for code generation.

Maps GraphQL type references (with their NON_NULL / LIST wrapper chains)
to Go type expressions and derives the imports those types require.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from ...core.config import ScalarConfig
from ...core.generator import SchemaError
from ...core.schema import SchemaType, TypeKind
from ....logging_config import get_logger
from .naming import resolver_type_name

logger = get_logger(__name__)

POINTER_MARKER = "*"
LIST_MARKER = "[]"
GRAPHQL_GO_IMPORT = 'graphql "github.com/neelance/graphql-go"'


@dataclass(frozen=True)
class GoScalar:
    """Go representation of a GraphQL scalar."""

    go_type: str
    import_path: str = ""
    skip_generation: bool = True


BUILTIN_SCALARS: Mapping[str, GoScalar] = MappingProxyType(
    {
        "Boolean": GoScalar("bool"),
        "Float": GoScalar("float64"),
        "Int": GoScalar("int32"),
        "ID": GoScalar("graphql.ID", GRAPHQL_GO_IMPORT),
        "String": GoScalar("string"),
    }
)


class ScalarMapping:
    """
    Immutable scalar name -> GoScalar table.

    Built-in scalars are always present and cannot be overridden;
    configuration may only add custom scalars.
    """

    def __init__(self, custom: Optional[Mapping[str, GoScalar]] = None):
        scalars: Dict[str, GoScalar] = dict(BUILTIN_SCALARS)
        for name, scalar in (custom or {}).items():
            if name in BUILTIN_SCALARS:
                logger.warning(
                    "Ignoring mapping for built-in scalar %s; built-ins cannot be overridden",
                    name,
                )
                continue
            scalars[name] = scalar
        self._scalars = MappingProxyType(scalars)

    @classmethod
    def from_config(cls, scalars: Mapping[str, ScalarConfig]) -> "ScalarMapping":
        return cls(
            {
                name: GoScalar(
                    go_type=scalar.type,
                    import_path=scalar.import_path,
                    skip_generation=scalar.skip,
                )
                for name, scalar in scalars.items()
            }
        )

    def get(self, name: Optional[str]) -> Optional[GoScalar]:
        if name is None:
            return None
        return self._scalars.get(name)

    def should_skip(self, name: str) -> bool:
        """Whether no artifact should be generated for an entity of this name."""
        scalar = self._scalars.get(name)
        return scalar is not None and scalar.skip_generation

    def __contains__(self, name: str) -> bool:
        return name in self._scalars

    def __len__(self) -> int:
        return len(self._scalars)

    def names(self) -> List[str]:
        return list(self._scalars)


class GoTypeMapper:
    """Resolves schema type references to Go type expressions and imports."""

    def __init__(self, scalars: Optional[ScalarMapping] = None):
        self.scalars = scalars or ScalarMapping()

    def type_expression(self, schema_type: SchemaType) -> str:
        """
        Build the Go type expression for a possibly wrapped type.

        Every nullable layer contributes a pointer marker and every list
        layer a slice marker, outermost first. The NON_NULL check is
        repeated after each LIST layer, so ``[String!]`` and ``[String]!``
        resolve to ``*[]string`` and ``[]*string``.

        Raises:
            SchemaError: If the chain ends in an unnamed type
        """
        markers = ""
        cursor = schema_type

        while True:
            if cursor.kind == TypeKind.NON_NULL:
                cursor = cursor.of_type
            else:
                markers += POINTER_MARKER

            if cursor.kind != TypeKind.LIST:
                break

            cursor = cursor.of_type
            markers += LIST_MARKER

        if not cursor.name:
            raise SchemaError(f"Type reference {schema_type} does not end in a named type")

        scalar = self.scalars.get(cursor.name)
        if scalar is not None and scalar.go_type:
            return markers + scalar.go_type

        return markers + resolver_type_name(cursor.name)

    def imports_for(self, schema_type: SchemaType) -> List[str]:
        """Return the imports required by the base named type of a reference."""
        if schema_type.name is not None:
            scalar = self.scalars.get(schema_type.name)
            if scalar is not None and scalar.import_path:
                return [scalar.import_path]
            return []

        if schema_type.of_type is not None:
            return self.imports_for(schema_type.of_type)

        return []


def remove_duplicates(values: List[str]) -> List[str]:
    """Drop repeated values, keeping first-seen order."""
    return list(dict.fromkeys(values))
