"""
Tests for core/music_theory/scales.py — scale patterns and spelled keys.

Validates:
    - get_scale: spelled notes for major/minor/modal keys, mode aliases
    - ScalePattern.mode: rotations re-based on the new tonic
    - ScalePattern.chord_on: stacked-thirds patterns per degree
    - ScaleInstance: membership, degree lookup, altered degrees, voicing
    - Error handling: unknown mode, degree out of range
"""

import pytest

from core.music_theory import chords as cp
from core.music_theory import intervals as iv
from core.music_theory import notes as nt
from core.music_theory.chords import ChordInstance
from core.music_theory.degree import Degree, flat, sharp
from core.music_theory.notes import parse_note
from core.music_theory.scales import (
    DORIAN,
    HARMONIC_MINOR,
    MAJOR,
    MIXOLYDIAN,
    NATURAL_MINOR,
    PHRYGIAN_DOMINANT,
    SCALE_PATTERNS,
    ScalePattern,
    get_scale,
)

C4 = nt.C.at_octave(4)
C_MAJOR = MAJOR.on(C4)


def pitch_names(scale) -> list[str]:
    return [n.pitch_name for n in scale]


# ---------------------------------------------------------------------------
# get_scale
# ---------------------------------------------------------------------------


class TestGetScale:
    def test_c_major(self):
        assert str(get_scale(C4, "major")) == "C4 D4 E4 F4 G4 A4 B4"

    def test_flat_key_spelling(self):
        assert pitch_names(get_scale(parse_note("F"), "major")) == [
            "F", "G", "A", "Bb", "C", "D", "E"
        ]

    def test_sharp_key_spelling(self):
        assert pitch_names(get_scale(parse_note("E"), "major")) == [
            "E", "F#", "G#", "A", "B", "C#", "D#"
        ]

    def test_minor_aliases(self):
        a = parse_note("A3")
        expected = ["A", "B", "C", "D", "E", "F", "G"]
        for mode in ("minor", "natural minor", "aeolian"):
            assert pitch_names(get_scale(a, mode)) == expected

    def test_mode_name_case_insensitive(self):
        assert get_scale(C4, " Dorian ") == DORIAN.on(C4)

    def test_harmonic_minor(self):
        assert pitch_names(get_scale(parse_note("A"), "harmonic minor"))[-1] == "G#"

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError, match="Unknown mode"):
            get_scale(C4, "hypermixolydian")

    def test_every_registered_mode_builds(self):
        for mode in SCALE_PATTERNS:
            assert len(get_scale(C4, mode)) >= 5


# ---------------------------------------------------------------------------
# ScalePattern
# ---------------------------------------------------------------------------


class TestScalePattern:
    def test_dorian_is_second_mode(self):
        assert DORIAN.intervals == (iv.P1, iv.M2, iv.m3, iv.P4, iv.P5, iv.M6, iv.m7)

    def test_mixolydian_is_fifth_mode(self):
        assert MIXOLYDIAN.intervals == (iv.P1, iv.M2, iv.M3, iv.P4, iv.P5, iv.M6, iv.m7)

    def test_aeolian_is_sixth_mode(self):
        assert NATURAL_MINOR.intervals == (iv.P1, iv.M2, iv.m3, iv.P4, iv.P5, iv.m6, iv.m7)

    def test_phrygian_dominant(self):
        assert PHRYGIAN_DOMINANT == HARMONIC_MINOR.mode(4)
        assert PHRYGIAN_DOMINANT.intervals[1] == iv.m2
        assert PHRYGIAN_DOMINANT.intervals[2] == iv.M3

    def test_mode_index_out_of_range_raises(self):
        with pytest.raises(ValueError, match="Mode index"):
            MAJOR.mode(7)

    @pytest.mark.parametrize(
        "degree, tones, pattern",
        [
            (1, 3, cp.MAJOR_TRIAD),
            (2, 3, cp.MINOR_TRIAD),
            (7, 3, cp.DIMINISHED_TRIAD),
            (1, 4, cp.MAJ7),
            (2, 4, cp.MIN7),
            (5, 4, cp.DOM7),
            (7, 4, cp.HALF_DIM7),
            (5, 5, cp.DOM9),
        ],
    )
    def test_chord_on(self, degree, tones, pattern):
        assert MAJOR.chord_on(degree, tones) == pattern

    def test_chord_on_out_of_range_raises(self):
        with pytest.raises(ValueError, match="Scale degree must be in"):
            MAJOR.chord_on(8)

    def test_empty_pattern_raises(self):
        with pytest.raises(ValueError, match="must not be empty"):
            ScalePattern(())


# ---------------------------------------------------------------------------
# ScaleInstance
# ---------------------------------------------------------------------------


class TestScaleInstance:
    def test_contains_by_spelling(self):
        assert C_MAJOR.contains(parse_note("E6"))
        assert not C_MAJOR.contains(parse_note("Fb4"))
        assert C_MAJOR.contains_enharmonic(parse_note("Fb4"))

    def test_degree_of(self):
        assert C_MAJOR.degree_of(nt.E) == Degree(3)
        assert C_MAJOR.degree_of(nt.Eb) is None

    def test_is_diatonic(self):
        assert C_MAJOR.is_diatonic(nt.F)
        assert C_MAJOR.is_diatonic(cp.MIN7.on(nt.D.at_octave(4)))
        assert not C_MAJOR.is_diatonic(cp.MAJOR_TRIAD.on(nt.D.at_octave(4)))

    def test_note_on_altered_degrees(self):
        assert C_MAJOR.note_on(6).pitch_name == "A"
        assert C_MAJOR.note_on(flat(6)).pitch_name == "Ab"
        assert C_MAJOR.note_on(sharp(4)).pitch_name == "F#"
        assert C_MAJOR.note_on(flat(3)).midi_pitch == 63

    def test_note_on_out_of_range_raises(self):
        with pytest.raises(ValueError, match="Scale degree must be in"):
            C_MAJOR.note_on(9)

    def test_chord_on_voices_upward(self):
        assert str(C_MAJOR.chord_on(5, 4)) == "G4 B4 D5 F5"
        assert str(C_MAJOR.chord_on(6, 3)) == "A4 C5 E5"

    def test_chord_on_returns_instance(self):
        chord = C_MAJOR.chord_on(1)
        assert isinstance(chord, ChordInstance)
        assert str(chord) == "C4 E4 G4"

    def test_chord_at_borrowed_degree(self):
        assert str(C_MAJOR.chord_at(flat(7), cp.MAJOR_TRIAD)) == "Bb4 D5 F5"

    def test_simplify(self):
        g_sharp_minor = get_scale(parse_note("G#"), "minor")
        assert pitch_names(g_sharp_minor.simplify())[0] == "Ab"
