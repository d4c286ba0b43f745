"""
Tests for tools/base.py — parameter checks and the ChordTool call protocol.

Exercised through the declarations of the real chord tools:
    - note lists must be text; required ones must be present
    - tone counts are restricted to their choices and reject bools
    - execute() failures become ToolResult errors and a log warning
    - to_dict() schemas as served by GET /tools/list
"""

import json
import logging

import pytest

from tools.base import ToolParameter, ToolResult
from tools.music.analyze_chord import AnalyzeChord
from tools.music.build_chord import BuildChord

analyze_chord = AnalyzeChord()
build_chord = BuildChord()


def param(tool, name: str) -> ToolParameter:
    return next(p for p in tool.parameters if p.name == name)


class TestParameterCheck:
    def test_note_list_accepted(self):
        assert param(analyze_chord, "notes").check("C4 E4 G4") is None

    def test_required_note_list_missing(self):
        assert param(analyze_chord, "notes").check(None) == "Required parameter 'notes' is missing"

    def test_optional_root_may_be_absent(self):
        assert param(analyze_chord, "root").check(None) is None

    def test_note_list_must_be_text(self):
        error = param(analyze_chord, "notes").check(["C4", "E4"])
        assert error == "Parameter 'notes' must be str, got list"

    @pytest.mark.parametrize("tones", [1, 3, 4, 7])
    def test_tone_count_in_choices(self, tones):
        assert param(build_chord, "tones").check(tones) is None

    @pytest.mark.parametrize("tones", [0, 8])
    def test_tone_count_outside_choices(self, tones):
        error = param(build_chord, "tones").check(tones)
        assert error == f"Parameter 'tones' must be one of [1, 2, 3, 4, 5, 6, 7], got {tones}"

    def test_bool_is_not_a_tone_count(self):
        assert param(build_chord, "tones").check(True) == "Parameter 'tones' must be int, got bool"

    def test_bool_parameter_accepts_bool(self):
        strict = ToolParameter(name="strict", type=bool, description="Exact matches only", required=False)
        assert strict.check(False) is None


class TestCall:
    def test_first_failing_parameter_reported(self):
        result = build_chord(degree="5", tones=True)
        assert result == ToolResult(success=False, error="Required parameter 'key_root' is missing")

    def test_bool_tone_count_rejected(self):
        result = build_chord(key_root="C", degree="5", tones=True)
        assert result.success is False
        assert result.error == "Parameter 'tones' must be int, got bool"

    def test_rejected_input_is_not_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            analyze_chord(notes=42)
        assert caplog.records == []

    def test_execute_failure_becomes_result(self, monkeypatch, caplog):
        def explode(self, **kwargs):
            raise RuntimeError("catalog unavailable")

        monkeypatch.setattr(AnalyzeChord, "execute", explode)
        with caplog.at_level(logging.WARNING, logger="tools.base"):
            result = AnalyzeChord()(notes="C4 E4 G4")

        assert result.success is False
        assert result.error == "Tool execution failed: catalog unavailable"
        assert "Tool analyze_chord failed" in caplog.text


class TestSchema:
    def test_analyze_chord_parameters(self):
        schema = analyze_chord.to_dict()
        assert schema["name"] == "analyze_chord"
        names = [p["name"] for p in schema["parameters"]]
        assert names == ["notes", "root", "key_root", "key_mode", "max_omissions"]

        notes = schema["parameters"][0]
        assert notes["type"] == "str"
        assert notes["required"] is True
        assert notes["choices"] is None

    def test_tone_choices_listed(self):
        tones = next(p for p in build_chord.to_dict()["parameters"] if p["name"] == "tones")
        assert tones["type"] == "int"
        assert tones["default"] == 3
        assert tones["choices"] == [1, 2, 3, 4, 5, 6, 7]

    def test_schema_is_json_serializable(self):
        for tool in (analyze_chord, build_chord):
            assert json.loads(json.dumps(tool.to_dict()))["name"] == tool.name
