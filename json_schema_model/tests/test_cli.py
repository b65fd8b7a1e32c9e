#!/usr/bin/env python3

import logging
import textwrap

import pytest
from click.testing import CliRunner

from json_schema_model.json_schema_model import json_schema_model

MODULE_SOURCE = textwrap.dedent(
    """
    from json_schema_model import model, null_schema, reference_schema

    class Holder:
        node = null_schema("Nothing", None, [])

    MODEL = model({"Empty": null_schema(None, None, [])}, reference_schema(None, None, "#/definitions/Empty", []))
    NOT_A_SCHEMA = {"type": "null"}
    """
)


@pytest.fixture
def schema_module(tmp_path, monkeypatch):
    (tmp_path / "cli_sample_schemas.py").write_text(MODULE_SOURCE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_sample_schemas"


class TestOutlineCommand:
    def test_model_outline(self, schema_module):
        result = CliRunner().invoke(json_schema_model, ["outline", f"{schema_module}:MODEL"])
        assert result.exit_code == 0, result.output
        assert result.output == "root: $ref -> #/definitions/Empty\ndefinitions/Empty: null\n"

    def test_dotted_attribute(self, schema_module):
        result = CliRunner().invoke(json_schema_model, ["outline", f"{schema_module}:Holder.node"])
        assert result.exit_code == 0, result.output
        assert result.output == 'root: null "Nothing"\n'

    def test_output_file(self, schema_module, tmp_path):
        out = tmp_path / "outline.txt"
        result = CliRunner().invoke(json_schema_model, ["outline", "-o", str(out), f"{schema_module}:Holder.node"])
        assert result.exit_code == 0, result.output
        assert result.output == ""
        assert out.read_text() == 'root: null "Nothing"\n'

    @pytest.mark.parametrize(
        "target,message",
        [
            ("no_colon", "Expected 'module:attribute'"),
            ("definitely_missing_module_xyz:MODEL", "Cannot import module"),
            ("{module}:MISSING", "has no attribute"),
            ("{module}:NOT_A_SCHEMA", "expected a Model or a Schema"),
        ],
    )
    def test_bad_targets(self, schema_module, target, message):
        result = CliRunner().invoke(json_schema_model, ["outline", target.format(module=schema_module)])
        assert result.exit_code == 2
        assert message in result.output

    def test_verbose_flag(self, schema_module, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        result = CliRunner().invoke(json_schema_model, ["-v", "outline", f"{schema_module}:MODEL"])
        assert result.exit_code == 0, result.output
        assert calls == [{"level": logging.DEBUG}]

    def test_quiet_by_default(self, schema_module, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        CliRunner().invoke(json_schema_model, ["outline", f"{schema_module}:MODEL"])
        assert calls == []


if __name__ == "__main__":
    pytest.main([__file__])
