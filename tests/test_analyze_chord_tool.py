"""
Tests for tools/music/analyze_chord.py — the AnalyzeChord tool.

Covers:
    - Tool metadata and parameter declarations
    - Plain analysis, fixed-root analysis, analysis in a key
    - Input forms: spaces, commas, missing octaves
    - Explicit error results for bad notes, roots, keys and bounds
"""

from tools.music.analyze_chord import AnalyzeChord

tool = AnalyzeChord()


class TestMetadata:
    def test_name(self):
        assert tool.name == "analyze_chord"

    def test_description_mentions_roman_numerals(self):
        assert "roman numerals" in tool.description

    def test_only_notes_required(self):
        required = [p.name for p in tool.parameters if p.required]
        assert required == ["notes"]


class TestAnalysis:
    def test_dominant_seventh(self):
        result = tool(notes="C4 E4 G4 Bb4")
        assert result.success is True
        assert result.data["best"] == "C7"
        best = result.data["interpretations"][0]
        assert best == {
            "name": "C7",
            "root": "C",
            "quality": "7",
            "bass": None,
            "inversion": 0,
            "omissions": [],
        }

    def test_notes_echoed_in_canonical_form(self):
        result = tool(notes="e4, g4, c5")
        assert result.data["notes"] == ["E4", "G4", "C5"]
        assert result.data["best"] == "C/E"
        assert result.data["interpretations"][0]["bass"] == "E"
        assert result.data["interpretations"][0]["inversion"] == 1

    def test_missing_octave_defaults(self):
        # all in octave 4, so C4 is the lowest note
        result = tool(notes="A C E G")
        names = [i["name"] for i in result.data["interpretations"]]
        assert names[:2] == ["C6", "Am7/C"]

    def test_flat_spelled_root_position(self):
        result = tool(notes="Cb4 Eb4 Gb4")
        best = result.data["interpretations"][0]
        assert best["bass"] is None
        assert best["inversion"] == 0
        assert best["root"] == "B"

    def test_no_match_is_success(self):
        result = tool(notes="C4 E4 Bb4", max_omissions=0)
        assert result.success is True
        assert result.data["best"] is None
        assert result.data["interpretations"] == []
        assert result.metadata["max_omissions"] == 0

    def test_omissions_listed(self):
        result = tool(notes="C4 E4 Bb4")
        assert result.data["best"] == "C7(no5)"
        assert result.data["interpretations"][0]["omissions"] == ["no5"]

    def test_fixed_root(self):
        result = tool(notes="A3 C4 E4 G4", root="C")
        assert result.data["best"] == "C6/A"
        assert len(result.data["interpretations"]) == 1
        assert result.metadata["fixed_root"] == "C"

    def test_fixed_root_not_sounding(self):
        result = tool(notes="C4 E4 G4", root="D")
        assert result.success is True
        assert result.data["interpretations"] == []


class TestKeyAnalysis:
    def test_roman_numeral(self):
        result = tool(notes="G4 B4 D5 F5", key_root="C")
        assert result.data["key"] == "C major"
        assert result.data["roman_numeral"] == "V7"
        assert result.data["interpretations"][0]["degree"] == "5"

    def test_borrowed_chord(self):
        result = tool(notes="Ab4 C5 Eb5", key_root="C", key_mode="major")
        assert result.data["roman_numeral"] == "bVI"
        assert result.data["interpretations"][0]["degree"] == "b6"

    def test_minor_key(self):
        result = tool(notes="E4 G#4 B4", key_root="A", key_mode="Harmonic Minor")
        assert result.data["key"] == "A harmonic minor"
        assert result.data["roman_numeral"] == "V"

    def test_fixed_root_in_key(self):
        result = tool(notes="A3 C4 E4 G4", root="C", key_root="C")
        assert result.data["roman_numeral"] == "I6"


class TestErrors:
    def test_missing_notes(self):
        result = tool()
        assert result.success is False
        assert "Required parameter 'notes' is missing" in result.error

    def test_blank_notes(self):
        result = tool(notes="   ")
        assert result.success is False
        assert "No notes given" in result.error

    def test_bad_note(self):
        result = tool(notes="C4 H4 G4")
        assert result.success is False
        assert "Unknown note 'H4'" in result.error

    def test_bad_root(self):
        result = tool(notes="C4 E4 G4", root="X")
        assert result.success is False
        assert "Cannot parse root note" in result.error

    def test_unknown_mode(self):
        result = tool(notes="C4 E4 G4", key_root="C", key_mode="hypermixolydian")
        assert result.success is False
        assert "Unknown mode" in result.error

    def test_omission_bound_out_of_range(self):
        result = tool(notes="C4 E4 G4", max_omissions=9)
        assert result.success is False
        assert "max_omissions must be in [0, 6]" in result.error

    def test_wrong_type(self):
        result = tool(notes=["C4", "E4"])
        assert result.success is False
        assert "must be str" in result.error
