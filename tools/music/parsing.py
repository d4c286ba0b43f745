"""
Shared text parsing and serialization for the chord tools.

Tools and API routes accept note lists like "C4 E4 G4 Bb4" or "C, E, G"
and key names split into a root ("Eb") and a mode ("dorian"). These
helpers turn that text into core.music_theory values and turn analysis
results back into plain dicts.
"""

import re
from typing import Any

from core.music_theory.notes import Note, parse_note
from core.music_theory.scales import ScaleInstance, get_scale
from core.music_theory.types import ChordAnalysis, DegreeAnalysis

_NOTE_SEPARATOR = re.compile(r"[\s,]+")


def parse_note_list(text: str) -> list[Note]:
    """
    Parse whitespace- or comma-separated note names.

    Args:
        text: e.g. "C4 E4 G4 Bb4" or "C, E, G" (octave defaults to 4)

    Returns:
        Notes in the order given

    Raises:
        ValueError: If the text holds no notes or a name cannot be parsed
    """
    tokens = [t for t in _NOTE_SEPARATOR.split(text.strip()) if t]
    if not tokens:
        raise ValueError("No notes given")
    return [parse_note(token) for token in tokens]


def resolve_key(key_root: str, key_mode: str = "major") -> ScaleInstance:
    """Build the key from a root name and a mode name; raises ValueError when unknown."""
    return get_scale(parse_note(key_root), key_mode)


def key_label(key: ScaleInstance, mode: str) -> str:
    return f"{key.root.simplify().pitch_name} {mode.strip().lower()}"


def chord_to_dict(chord: ChordAnalysis) -> dict[str, Any]:
    """Flatten a ChordAnalysis for JSON responses."""
    return {
        "name": chord.name,
        "root": chord.root.simplify().pitch_name,
        "quality": chord.quality,
        "bass": chord.bass.simplify().pitch_name if chord.bass is not None else None,
        "inversion": chord.inversion,
        "omissions": list(chord.omissions),
    }


def degree_to_dict(analysis: DegreeAnalysis) -> dict[str, Any]:
    """chord_to_dict() plus the degree and roman numeral."""
    data = chord_to_dict(analysis.chord)
    data["degree"] = str(analysis.degree) if analysis.degree is not None else None
    data["roman_numeral"] = analysis.roman_numeral
    return data
