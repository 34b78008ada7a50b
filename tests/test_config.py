"""Tests for configuration loading and template variant parsing."""

from __future__ import annotations

import json

import pytest

from graphql_codegen.codegen.core.config import (
    DEFAULT_VARIANTS,
    EXAMPLE_GO_CONFIG,
    ConfigError,
    FieldConfig,
    GeneratorConfig,
    ScalarConfig,
    TemplateVariant,
    TypeConfig,
    load_config,
    validate_config,
)


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults(self):
        config = load_config("go")
        assert config.package_name == "resolvers"
        assert config.file_suffix == "_gen"
        assert config.formatter == "basic"
        assert config.add_comments
        assert config.types == {}
        assert config.scalars == {}

    def test_overrides_do_not_leak(self):
        load_config("go", custom_config={"package_name": "api"})
        assert load_config("go").package_name == "resolvers"

    def test_unknown_keys_go_to_custom(self):
        config = load_config("go", custom_config={"owner": "blog"})
        assert config.custom == {"owner": "blog"}

    def test_config_file(self, tmp_path):
        path = write_json(tmp_path / "codegen.json", EXAMPLE_GO_CONFIG)
        config = load_config("go", config_file=path)
        assert config.scalars["Time"].type == "graphql.Time"
        post = config.type_config("Post")
        assert [v.name for v in post.field_config("title").templates] == ["default", "setter"]
        assert post.templates[1].params["name"] == "NewPost"

    def test_overrides_win_over_file(self, tmp_path):
        path = write_json(tmp_path / "codegen.json", {"package_name": "fromfile"})
        config = load_config("go", custom_config={"package_name": "api"}, config_file=path)
        assert config.package_name == "api"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config("go", config_file=tmp_path / "missing.json")

    def test_non_json_suffix(self, tmp_path):
        path = tmp_path / "codegen.yaml"
        path.write_text("package_name: api")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config("go", config_file=path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config("go", config_file=path)

    def test_non_object(self, tmp_path):
        path = write_json(tmp_path / "codegen.json", ["default"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_config("go", config_file=path)

    def test_types_must_be_object(self):
        with pytest.raises(ConfigError):
            load_config("go", custom_config={"types": ["Post"]})


class TestTemplateVariants:
    def test_object_form_keeps_order(self):
        config = TypeConfig.from_dict(
            {"templates": {"default": {}, "constructor": {"name": "MakePost"}}}
        )
        assert [v.name for v in config.templates] == ["default", "constructor"]
        assert config.templates[1].params["name"] == "MakePost"

    def test_list_forms(self):
        config = FieldConfig.from_dict(
            {"templates": ["default", {"name": "setter", "params": {"x": 1}}]}
        )
        assert config.templates == (
            TemplateVariant("default"),
            TemplateVariant("setter", {"x": 1}),
        )

    def test_empty_means_default(self):
        assert TypeConfig.from_dict({"templates": {}}).templates == DEFAULT_VARIANTS
        assert FieldConfig().templates == DEFAULT_VARIANTS
        assert TypeConfig(templates=()).templates == DEFAULT_VARIANTS

    def test_missing_entries_default(self):
        config = GeneratorConfig()
        assert config.type_config("Post").templates == DEFAULT_VARIANTS
        assert config.type_config("Post").field_config("id").templates == DEFAULT_VARIANTS

    def test_params_are_read_only(self):
        variant = TemplateVariant("constructor", {"name": "MakePost"})
        with pytest.raises(TypeError):
            variant.params["name"] = "Other"

    @pytest.mark.parametrize(
        "raw",
        [
            "default",
            [42],
            [{"params": {}}],
            {"default": ["not", "an", "object"]},
            {"": {}},
        ],
    )
    def test_invalid_templates(self, raw):
        with pytest.raises(ConfigError):
            TypeConfig.from_dict({"templates": raw}, "Post")

    def test_invalid_fields(self):
        with pytest.raises(ConfigError):
            TypeConfig.from_dict({"fields": ["id"]}, "Post")


class TestScalarConfig:
    def test_string_form(self):
        assert ScalarConfig.from_dict("Time", "time.Time") == ScalarConfig(type="time.Time")

    def test_object_form(self):
        scalar = ScalarConfig.from_dict(
            "Time", {"go_type": "time.Time", "import_path": '"time"', "skip": False}
        )
        assert scalar == ScalarConfig("time.Time", '"time"', False)

    def test_invalid(self):
        with pytest.raises(ConfigError):
            ScalarConfig.from_dict("Time", 42)


class TestValidateConfig:
    def test_valid(self):
        assert validate_config(GeneratorConfig()) == []

    def test_warnings(self, tmp_path):
        config = GeneratorConfig(
            package_name="my-api",
            formatter="prettier",
            template_dir=str(tmp_path / "missing"),
        )
        warnings = validate_config(config)
        assert "Invalid formatter: prettier" in warnings
        assert any(w.startswith("Template directory not found") for w in warnings)
        assert "Package names should not contain hyphens" in warnings


class TestMalformedEntries:
    """Per-type and per-field entries must be JSON objects."""

    def test_type_entry_must_be_object(self):
        with pytest.raises(ConfigError, match="Configuration of Post must be an object"):
            load_config("go", custom_config={"types": {"Post": ["default"]}})

    def test_field_entry_must_be_object(self):
        with pytest.raises(ConfigError, match="Configuration of Post.id must be an object"):
            load_config("go", custom_config={"types": {"Post": {"fields": {"id": ["setter"]}}}})

    def test_null_entries_mean_defaults(self):
        config = load_config("go", custom_config={"types": {"Post": None}})
        assert config.type_config("Post").templates == DEFAULT_VARIANTS

    def test_malformed_file_entry(self, tmp_path):
        path = write_json(tmp_path / "codegen.json", {"types": {"Post": "default"}})
        with pytest.raises(ConfigError):
            load_config("go", config_file=path)


class TestGeneratorConfigTables:
    """Plain mappings passed to GeneratorConfig are converted on construction."""

    def test_types_from_plain_dicts(self):
        config = GeneratorConfig(
            types={"Post": {"templates": ["default", "constructor"], "fields": {"id": {}}}}
        )
        post = config.type_config("Post")
        assert isinstance(post, TypeConfig)
        assert [v.name for v in post.templates] == ["default", "constructor"]
        assert post.field_config("id").templates == DEFAULT_VARIANTS

    def test_scalars_from_plain_values(self):
        config = GeneratorConfig(scalars={"Time": "time.Time"})
        assert config.scalars["Time"] == ScalarConfig(type="time.Time")

    def test_invalid_tables(self):
        with pytest.raises(ConfigError):
            GeneratorConfig(types=["Post"])
        with pytest.raises(ConfigError):
            GeneratorConfig(scalars={"Time": 42})


class TestFieldTemplateWarnings:
    def test_setter_alone_declares_no_storage(self):
        config = load_config(
            "go", custom_config={"types": {"Post": {"fields": {"tags": {"templates": ["setter"]}}}}}
        )
        warnings = validate_config(config)
        assert any(w.startswith("Field Post.tags uses only setter") for w in warnings)

    def test_setter_with_default_is_fine(self):
        config = load_config(
            "go",
            custom_config={
                "types": {"Post": {"fields": {"tags": {"templates": ["default", "setter"]}}}}
            },
        )
        assert validate_config(config) == []
