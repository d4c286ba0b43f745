"""
Tests for tools/music/build_chord.py — the BuildChord tool.
"""

import pytest

from tools.music.build_chord import BuildChord

tool = BuildChord()


class TestStackedThirds:
    def test_dominant_seventh_on_five(self):
        result = tool(key_root="C", degree="5", tones=4)
        assert result.success is True
        assert result.data["notes"] == ["G4", "B4", "D5", "F5"]
        assert result.data["chord"] == "G7"
        assert result.data["roman_numeral"] == "V7"
        assert result.metadata == {"construction": "stacked", "tone_count": 4}

    def test_default_triad(self):
        result = tool(key_root="C", degree="7")
        assert result.data["notes"] == ["B4", "D5", "F5"]
        assert result.data["roman_numeral"] == "vii°"

    @pytest.mark.parametrize(
        "degree, numeral",
        [("1", "I"), ("2", "ii"), ("3", "iii"), ("4", "IV"), ("5", "V"), ("6", "vi")],
    )
    def test_diatonic_triads(self, degree, numeral):
        assert tool(key_root="G", degree=degree).data["roman_numeral"] == numeral

    def test_minor_key(self):
        result = tool(key_root="A3", key_mode="minor", degree="3")
        assert result.data["notes"] == ["C4", "E4", "G4"]
        assert result.data["roman_numeral"] == "III"

    def test_ninth_chord(self):
        result = tool(key_root="C", degree="2", tones=5)
        assert result.data["chord"] == "Dm9"
        assert result.data["roman_numeral"] == "ii9"


class TestQuality:
    def test_borrowed_flat_six(self):
        result = tool(key_root="C", degree="b6", quality="")
        assert result.data["notes"] == ["Ab4", "C5", "Eb5"]
        assert result.data["chord"] == "Ab"
        assert result.data["roman_numeral"] == "bVI"
        assert result.data["degree"] == "b6"
        assert result.metadata["construction"] == "quality"

    def test_quality_on_diatonic_degree(self):
        result = tool(key_root="C", degree="2", quality="7")
        assert result.data["roman_numeral"] == "II7"

    def test_sharp_four_half_diminished(self):
        result = tool(key_root="C", degree="#4", quality="m7b5")
        assert result.data["chord"] == "F#m7b5"
        assert result.data["roman_numeral"] == "#ivø7"


class TestErrors:
    def test_missing_degree(self):
        result = tool(key_root="C")
        assert result.success is False
        assert "Required parameter 'degree' is missing" in result.error

    def test_bad_degree(self):
        result = tool(key_root="C", degree="V")
        assert result.success is False
        assert "Unknown degree" in result.error

    def test_degree_beyond_scale(self):
        result = tool(key_root="C", key_mode="major pentatonic", degree="6")
        assert result.success is False
        assert "degree must be in 1–5" in result.error

    def test_altered_degree_without_quality(self):
        result = tool(key_root="C", degree="b7")
        assert result.success is False
        assert "Stacked thirds need a diatonic degree" in result.error

    def test_unknown_quality(self):
        result = tool(key_root="C", degree="1", quality="maj15")
        assert result.success is False
        assert "Unknown chord quality" in result.error

    def test_tones_out_of_range(self):
        result = tool(key_root="C", degree="1", tones=8)
        assert result.success is False
        assert "must be one of" in result.error

    def test_bad_key_root(self):
        result = tool(key_root="Q", degree="1")
        assert result.success is False
        assert "Unknown note" in result.error
