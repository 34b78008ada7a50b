"""Tests for the graphql-codegen command line."""

from __future__ import annotations

import io
import json
import logging

import pytest

from graphql_codegen import __version__
from graphql_codegen.cli import main
from graphql_codegen.logging_config import ROOT_LOGGER_NAME

from conftest import POST_SCHEMA


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the handler and level that ``main`` installs."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(POST_SCHEMA)
    return path


class TestGenerateCommand:
    def test_writes_files(self, schema_file, tmp_path):
        output = tmp_path / "out"
        assert main([str(schema_file), "--output-dir", str(output)]) == 0
        code = (output / "post_gen.go").read_text()
        assert "\tid graphql.ID\n" in code
        assert "\ttags *[]string\n" in code

    def test_prints_to_stdout(self, schema_file, capsys):
        assert main([str(schema_file)]) == 0
        assert "post_gen.go" in capsys.readouterr().out

    def test_overrides(self, schema_file, tmp_path):
        output = tmp_path / "out"
        exit_code = main(
            [
                str(schema_file),
                "-o",
                str(output),
                "--package",
                "api",
                "--formatter",
                "none",
                "--no-comments",
            ]
        )
        assert exit_code == 0
        assert (output / "post_gen.go").read_text().startswith("package api\n")

    def test_config_file(self, schema_file, tmp_path):
        config = tmp_path / "codegen.json"
        config.write_text(json.dumps({"types": {"Post": {"templates": ["default", "constructor"]}}}))
        output = tmp_path / "out"
        assert main([str(schema_file), "--config", str(config), "-o", str(output)]) == 0
        assert "func NewPostResolver()" in (output / "post_gen.go").read_text()

    def test_stdin(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.stdin", io.StringIO(POST_SCHEMA))
        output = tmp_path / "out"
        assert main(["--stdin", "-o", str(output)]) == 0
        assert (output / "post_gen.go").exists()

    def test_verbose_and_warnings(self, schema_file, capsys):
        assert main([str(schema_file), "--verbose", "--package", "Api"]) == 0
        out = capsys.readouterr().out
        assert "Generation Metadata" in out
        assert "Package names should be lowercase" in out


class TestFailures:
    def test_missing_input(self, capsys):
        assert main([]) == 1
        assert "Input source required" in capsys.readouterr().out

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.graphql")]) == 1

    def test_unsupported_language(self, schema_file):
        assert main([str(schema_file), "--language", "cobol"]) == 1

    def test_bad_config(self, schema_file, tmp_path):
        assert main([str(schema_file), "--config", str(tmp_path / "missing.json")]) == 1

    def test_malformed_type_entry(self, schema_file, tmp_path, capsys):
        config = tmp_path / "codegen.json"
        config.write_text(json.dumps({"types": {"Post": ["default"]}}))
        output = tmp_path / "out"
        assert main([str(schema_file), "--config", str(config), "-o", str(output)]) == 1
        assert not output.exists()
        assert "Configuration error" in capsys.readouterr().out

    def test_unknown_variant_writes_nothing(self, schema_file, tmp_path, capsys):
        config = tmp_path / "codegen.json"
        config.write_text(json.dumps({"types": {"Post": {"templates": ["missing"]}}}))
        output = tmp_path / "out"
        assert main([str(schema_file), "--config", str(config), "-o", str(output)]) == 1
        assert not output.exists()
        assert "missing" in capsys.readouterr().out

    def test_invalid_schema(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type {")
        assert main([str(path)]) == 1


class TestInformation:
    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_list_languages(self, capsys):
        assert main(["--list-languages"]) == 0
        out = capsys.readouterr().out
        assert "go" in out
        assert "golang" in out

    def test_list_templates(self, capsys):
        assert main(["--list-templates"]) == 0
        out = capsys.readouterr().out
        assert "constructor" in out
        assert "setter" in out

    def test_list_templates_includes_user_directory(self, tmp_path, capsys):
        (tmp_path / "field").mkdir()
        (tmp_path / "field" / "tagged.go.j2").write_text("")
        assert main(["--list-templates", "--template-dir", str(tmp_path)]) == 0
        assert "tagged" in capsys.readouterr().out
