"""
Tests for the command line interface.
"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from json_schema_to_typebox.cli_utils import reconstruct_command_line
from json_schema_to_typebox.json_schema_to_typebox import json_schema_to_typebox

SCHEMA = {
    "title": "Person",
    "type": "object",
    "properties": {"name": {"type": "string"}},
    "required": ["name"],
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def schema_path(tmp_path):
    path = tmp_path / "person.schema.json"
    path.write_text(json.dumps(SCHEMA), encoding="utf-8")
    return path


def test_writes_to_stdout(runner, schema_path):
    result = runner.invoke(json_schema_to_typebox, [str(schema_path)])
    assert result.exit_code == 0, result.output
    assert "export const Person = Type.Object({name: Type.String()}" in result.output
    assert "Command: json_schema_to_typebox person.schema.json" in result.output


def test_writes_output_file(runner, schema_path, tmp_path):
    output = tmp_path / "out" / "person.ts"
    result = runner.invoke(json_schema_to_typebox, [str(schema_path), str(output)])
    assert result.exit_code == 0, result.output
    assert "export type Person = Static<typeof Person>;" in output.read_text(encoding="utf-8")


def test_refuses_to_overwrite_without_force(runner, schema_path, tmp_path):
    output = tmp_path / "person.ts"
    output.write_text("// hand written\n", encoding="utf-8")

    result = runner.invoke(json_schema_to_typebox, [str(schema_path), str(output)])
    assert result.exit_code == 1
    assert "already exists" in result.output
    assert output.read_text(encoding="utf-8") == "// hand written\n"

    result = runner.invoke(json_schema_to_typebox, [str(schema_path), str(output), "--force"])
    assert result.exit_code == 0, result.output
    assert "export const Person" in output.read_text(encoding="utf-8")


def test_name_option(runner, schema_path):
    result = runner.invoke(json_schema_to_typebox, ["--name", "customer", str(schema_path)])
    assert result.exit_code == 0, result.output
    assert "export const Customer = " in result.output
    assert "--name customer" in result.output


def test_name_defaults_to_file_stem(runner, tmp_path):
    path = tmp_path / "geo_point.json"
    path.write_text(json.dumps({"type": "string"}), encoding="utf-8")
    result = runner.invoke(json_schema_to_typebox, [str(path)])
    assert result.exit_code == 0, result.output
    assert "export const GeoPoint = Type.String();" in result.output


def test_config_file(runner, schema_path, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"add_generation_comment": False, "export_declarations": False}), encoding="utf-8")
    result = runner.invoke(json_schema_to_typebox, ["--config", str(config_path), str(schema_path)])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("import { Static, Type }")
    assert "\nconst Person = " in result.output


def test_invalid_config_file(runner, schema_path, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"output": {"mode": "sideways"}}), encoding="utf-8")
    result = runner.invoke(json_schema_to_typebox, ["--config", str(config_path), str(schema_path)])
    assert result.exit_code == 1
    assert "Invalid config file" in result.output


def test_invalid_json(runner, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    result = runner.invoke(json_schema_to_typebox, [str(path)])
    assert result.exit_code == 1
    assert "not valid JSON" in result.output


def test_missing_schema_file(runner, tmp_path):
    result = runner.invoke(json_schema_to_typebox, [str(tmp_path / "missing.json")])
    assert result.exit_code == 2


def test_reconstruct_command_line_without_context():
    assert reconstruct_command_line(json_schema_to_typebox) == "json_schema_to_typebox"
