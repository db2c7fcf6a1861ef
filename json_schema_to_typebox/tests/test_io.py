"""
Tests for schema loading, output writing and configuration.
"""

from __future__ import annotations

import pytest

from json_schema_to_typebox import (
    AtomicWriter,
    CodeGeneratorConfig,
    OutputConfig,
    OutputExistsError,
    OutputMode,
    SchemaLoadError,
    load_schema,
    write_output,
)


class TestLoadSchema:
    def test_loads_object(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text('{"type": "string"}', encoding="utf-8")
        assert load_schema(path) == {"type": "string"}

    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(SchemaLoadError, match="must contain a JSON object"):
            load_schema(path)

    def test_rejects_invalid_json(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(SchemaLoadError, match="not valid JSON"):
            load_schema(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError, match="Cannot read"):
            load_schema(tmp_path / "missing.json")


class TestWriteOutput:
    def test_writes_new_file(self, tmp_path):
        path = tmp_path / "nested" / "out.ts"
        write_output(path, "const a = 1;\n", OutputConfig())
        assert path.read_text(encoding="utf-8") == "const a = 1;\n"

    def test_existing_file_is_an_error(self, tmp_path):
        path = tmp_path / "out.ts"
        path.write_text("old", encoding="utf-8")
        with pytest.raises(OutputExistsError):
            write_output(path, "new", OutputConfig())
        assert path.read_text(encoding="utf-8") == "old"

    def test_output_exists_error_is_file_exists_error(self):
        assert issubclass(OutputExistsError, FileExistsError)

    def test_force_overwrites(self, tmp_path):
        path = tmp_path / "out.ts"
        path.write_text("old", encoding="utf-8")
        write_output(path, "new", OutputConfig(mode=OutputMode.FORCE))
        assert path.read_text(encoding="utf-8") == "new"

    def test_non_atomic_write(self, tmp_path):
        path = tmp_path / "out.ts"
        write_output(path, "new", OutputConfig(atomic_write=False))
        assert path.read_text(encoding="utf-8") == "new"

    def test_atomic_writer_leaves_no_temporary_files(self, tmp_path):
        path = tmp_path / "out.ts"
        AtomicWriter().write(path, "content")
        assert [p.name for p in tmp_path.iterdir()] == ["out.ts"]


class TestConfig:
    def test_defaults(self):
        config = CodeGeneratorConfig()
        assert config.add_generation_comment
        assert config.type_import_module == "@sinclair/typebox"
        assert not config.formatter.enabled
        assert config.output.mode == OutputMode.ERROR_IF_EXISTS

    def test_from_dict(self):
        config = CodeGeneratorConfig.from_dict(
            {
                "add_generation_comment": False,
                "formatter": {"enabled": True, "print_width": 120},
                "output": {"mode": "force"},
                "unknown_key": 1,
            }
        )
        assert not config.add_generation_comment
        assert config.formatter.enabled
        assert config.formatter.print_width == 120
        assert config.formatter.command == ["prettier"]
        assert config.output.mode == OutputMode.FORCE
        assert config.output.atomic_write
        assert not hasattr(config, "unknown_key")

    def test_to_dict(self):
        d = CodeGeneratorConfig().to_dict()
        assert d["output"] == {"mode": "error", "atomic_write": True}
        assert d["formatter"]["command"] == ["prettier"]
        assert CodeGeneratorConfig.from_dict(d) == CodeGeneratorConfig()
