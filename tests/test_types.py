"""Tests for Go type expressions, scalar mapping, and import aggregation."""

from __future__ import annotations

import logging

import pytest

from graphql_codegen.codegen.core.config import ScalarConfig
from graphql_codegen.codegen.core.generator import SchemaError
from graphql_codegen.codegen.core.schema import SchemaType, TypeKind
from graphql_codegen.codegen.languages.go.types import (
    BUILTIN_SCALARS,
    GRAPHQL_GO_IMPORT,
    GoScalar,
    GoTypeMapper,
    ScalarMapping,
    remove_duplicates,
)

STRING = SchemaType(kind=TypeKind.SCALAR, name="String")
ID = SchemaType(kind=TypeKind.SCALAR, name="ID")
POST = SchemaType(kind=TypeKind.OBJECT, name="Post")

nn = SchemaType.non_null
list_of = SchemaType.list_of


@pytest.fixture
def mapper() -> GoTypeMapper:
    return GoTypeMapper()


class TestTypeExpression:
    """Wrapper chains resolve layer by layer, outermost first."""

    def test_non_null_list_of_non_null_string(self, mapper):
        assert mapper.type_expression(nn(list_of(nn(STRING)))) == "[]string"

    def test_list_of_non_null_string(self, mapper):
        assert mapper.type_expression(list_of(nn(STRING))) == "*[]string"

    def test_non_null_list_of_string(self, mapper):
        assert mapper.type_expression(nn(list_of(STRING))) == "[]*string"

    def test_wrapper_orderings_are_distinct(self, mapper):
        expressions = {
            mapper.type_expression(nn(list_of(nn(STRING)))),
            mapper.type_expression(list_of(nn(STRING))),
            mapper.type_expression(nn(list_of(STRING))),
        }
        assert len(expressions) == 3

    def test_nullable_scalar_is_pointer(self, mapper):
        assert mapper.type_expression(STRING) == "*string"

    def test_non_null_id(self, mapper):
        assert mapper.type_expression(nn(ID)) == "graphql.ID"

    def test_object_gets_resolver_suffix(self, mapper):
        assert mapper.type_expression(POST) == "*PostResolver"
        assert mapper.type_expression(nn(POST)) == "PostResolver"

    def test_list_of_list(self, mapper):
        assert mapper.type_expression(list_of(list_of(STRING))) == "*[]*[]*string"
        assert mapper.type_expression(nn(list_of(nn(list_of(nn(POST)))))) == "[][]PostResolver"

    def test_builtin_scalars(self, mapper):
        for name, expected in [
            ("Boolean", "bool"),
            ("Float", "float64"),
            ("Int", "int32"),
            ("String", "string"),
        ]:
            scalar = SchemaType(kind=TypeKind.SCALAR, name=name)
            assert mapper.type_expression(nn(scalar)) == expected

    def test_custom_scalar_mapping(self):
        mapper = GoTypeMapper(ScalarMapping({"Time": GoScalar("graphql.Time", GRAPHQL_GO_IMPORT)}))
        time = SchemaType(kind=TypeKind.SCALAR, name="Time")
        assert mapper.type_expression(time) == "*graphql.Time"

    def test_unmapped_scalar_uses_resolver(self, mapper):
        time = SchemaType(kind=TypeKind.SCALAR, name="Time")
        assert mapper.type_expression(nn(time)) == "TimeResolver"

    def test_scalar_without_go_type_uses_resolver(self):
        mapper = GoTypeMapper(ScalarMapping({"JSON": GoScalar("")}))
        json_scalar = SchemaType(kind=TypeKind.SCALAR, name="JSON")
        assert mapper.type_expression(nn(json_scalar)) == "JSONResolver"

    def test_unnamed_terminal_type_is_fatal(self, mapper):
        broken = nn(STRING)
        broken.of_type = SchemaType(kind=TypeKind.OBJECT, name="Tmp")
        broken.of_type.name = None
        with pytest.raises(SchemaError):
            mapper.type_expression(broken)


class TestImports:
    """Imports come from the base named type only."""

    def test_id_requires_graphql_import(self, mapper):
        assert mapper.imports_for(ID) == [GRAPHQL_GO_IMPORT]

    def test_wrappers_are_ignored(self, mapper):
        assert mapper.imports_for(nn(list_of(nn(ID)))) == [GRAPHQL_GO_IMPORT]

    def test_scalar_without_import(self, mapper):
        assert mapper.imports_for(nn(STRING)) == []

    def test_object_has_no_imports(self, mapper):
        assert mapper.imports_for(list_of(POST)) == []

    def test_custom_scalar_import(self):
        mapper = GoTypeMapper(ScalarMapping({"Time": GoScalar("time.Time", '"time"')}))
        time = SchemaType(kind=TypeKind.SCALAR, name="Time")
        assert mapper.imports_for(nn(time)) == ['"time"']

    def test_remove_duplicates_keeps_first_seen_order(self):
        assert remove_duplicates(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


class TestScalarMapping:
    """The scalar table is seeded with built-ins and immutable."""

    def test_builtins_present_and_skipped(self):
        mapping = ScalarMapping()
        for name in ["Boolean", "Float", "Int", "ID", "String"]:
            assert name in mapping
            assert mapping.should_skip(name)

    def test_builtins_cannot_be_overridden(self, caplog):
        with caplog.at_level(logging.WARNING):
            mapping = ScalarMapping({"Int": GoScalar("int64")})
        assert mapping.get("Int") == BUILTIN_SCALARS["Int"]
        assert "Int" in caplog.text

    def test_from_config(self):
        mapping = ScalarMapping.from_config(
            {"Time": ScalarConfig(type="time.Time", import_path='"time"', skip=False)}
        )
        assert mapping.get("Time") == GoScalar("time.Time", '"time"', skip_generation=False)
        assert not mapping.should_skip("Time")

    def test_unknown_names(self):
        mapping = ScalarMapping()
        assert mapping.get("Post") is None
        assert mapping.get(None) is None
        assert not mapping.should_skip("Post")

    def test_separate_mappings_do_not_share_state(self):
        first = ScalarMapping({"Time": GoScalar("time.Time")})
        second = ScalarMapping()
        assert "Time" in first
        assert "Time" not in second
        assert len(second) == len(BUILTIN_SCALARS)
