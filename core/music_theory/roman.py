"""
core/music_theory/roman.py — Place chord interpretations in a key.

make_degree_analysis() maps a ChordAnalysis onto a ScaleInstance:
    1. Find the scale degree whose pitch class equals the chord root
    2. Otherwise respell the root around the tonic and place it a
       chromatic semitone away from a degree:
       first a degree spelled with the same letter (Ab → b6 in C major),
       then the first degree, in degree order, one semitone above or below
    3. Render the numeral: alteration prefix, upper-case for major-flavoured
       qualities or lower-case for minor/diminished ones, a quality suffix,
       and the omission list
    4. Roots that cannot be placed keep their plain chord symbol

Examples in C major: C → "I", Dm → "ii", Bdim → "vii°", G7 → "V7",
Bm7b5 → "viiø7", Ab → "bVI", Bb7 → "bVII7", Dm7(no5) → "ii7(no5)".
"""

from __future__ import annotations

from collections.abc import Sequence

from core.config import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from core.music_theory.degree import Degree
from core.music_theory.matcher import analyze_all, analyze_with_root
from core.music_theory.notes import Note
from core.music_theory.scales import ScaleInstance
from core.music_theory.types import (
    ChordAnalysis,
    DegreeAnalysis,
    KeyAnalysisResult,
    format_omissions,
)

ROMAN_UPPER: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")
ROMAN_LOWER: tuple[str, ...] = ("i", "ii", "iii", "iv", "v", "vi", "vii")

# Whole-quality substitutions checked before the prefix rules
_SUFFIX_EXACT: dict[str, str] = {
    "": "",
    "m": "",
    "dim": "°",
    "aug": "+",
    "m7b5": "ø7",
    "dim7": "°7",
}

# Fifths between a note and the same letter raised by a semitone (C → C#)
_CHROMATIC_FIFTHS: int = 7

# ---------------------------------------------------------------------------
# Quality text rules
# ---------------------------------------------------------------------------


def is_major_quality(quality: str) -> bool:
    """True when the numeral should be upper-case.

    Empty and "maj…" qualities are major; anything else starting with "m",
    and "dim…" qualities, are minor-flavoured. Everything else ("7", "aug",
    "sus4", "5", "6/9") reads as major.
    """
    if not quality or quality.startswith("maj"):
        return True
    if quality.startswith("m") or quality.startswith("dim"):
        return False
    return True


def roman_quality_suffix(quality: str) -> str:
    """Text appended to the numeral, e.g. "m7" → "7", "aug7" → "+7", "maj7" → "maj7"."""
    if quality in _SUFFIX_EXACT:
        return _SUFFIX_EXACT[quality]
    if quality.startswith("maj"):
        return quality
    if quality.startswith("m"):
        return quality[1:]
    if quality.startswith("aug"):
        return "+" + quality[3:]
    return quality


# ---------------------------------------------------------------------------
# Degree placement
# ---------------------------------------------------------------------------


def locate_degree(root: Note, scale_notes: Sequence[Note]) -> Degree | None:
    """Scale degree of ``root`` within ``scale_notes``, chromatically altered if needed.

    Args:
        root:        Chord root (its spelling decides between b and # when possible)
        scale_notes: Spelled scale degrees, tonic first

    Returns:
        Degree with alteration -1/0/+1, or None if the root is not within a
        semitone of any degree
    """
    pitch_class = root.pitch_class

    for index, note in enumerate(scale_notes):
        if note.pitch_class == pitch_class:
            return Degree(index + 1)

    for index, note in enumerate(scale_notes):
        difference = root.fifth - note.fifth
        if difference == _CHROMATIC_FIFTHS:
            return Degree(index + 1, 1)
        if difference == -_CHROMATIC_FIFTHS:
            return Degree(index + 1, -1)

    for index, note in enumerate(scale_notes):
        distance = (pitch_class - note.pitch_class) % 12
        if distance == 1:
            return Degree(index + 1, 1)
        if distance == 11:
            return Degree(index + 1, -1)
    return None


def roman_numeral(chord: ChordAnalysis, degree: Degree) -> str:
    numerals = ROMAN_UPPER if is_major_quality(chord.quality) else ROMAN_LOWER
    return (
        degree.prefix
        + numerals[(degree.number - 1) % 7]
        + roman_quality_suffix(chord.quality)
        + format_omissions(chord.omissions)
    )


def spell_in_key(root: Note, key: ScaleInstance) -> Note:
    """Respell ``root`` within six fifths of the key's tonic.

    The matcher reports roots with natural-biased spellings, which are
    relative to C. Measuring from the tonic instead keeps the lowered
    degrees of flat keys flat: Ebb in Gb major stays Ebb rather than D.
    """
    tonic = key.root.fifth
    relative = Note(root.fifth - tonic, 0).simplify()
    return Note(relative.fifth + tonic, 0)


def make_degree_analysis(chord: ChordAnalysis, key: ScaleInstance) -> DegreeAnalysis:
    """Place one chord interpretation in ``key``.

    Unplaceable roots fall back to the plain chord symbol with degree None.
    """
    degree = locate_degree(spell_in_key(chord.root, key), key.notes)
    if degree is None:
        return DegreeAnalysis(chord=chord, degree=None, roman_numeral=str(chord))
    return DegreeAnalysis(chord=chord, degree=degree, roman_numeral=roman_numeral(chord, degree))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_in_key(
    notes: Sequence[Note],
    key: ScaleInstance,
    *,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> KeyAnalysisResult:
    """Every interpretation of ``notes`` as a roman numeral in ``key``, best first."""
    return KeyAnalysisResult(
        tuple(make_degree_analysis(chord, key) for chord in analyze_all(notes, config=config))
    )


def analyze_in_key_with_root(
    notes: Sequence[Note],
    key: ScaleInstance,
    root: Note,
    *,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> DegreeAnalysis | None:
    """Roman numeral for ``notes`` with a caller-fixed root, or None if nothing matches."""
    chord = analyze_with_root(notes, root, config=config)
    if chord is None:
        return None
    return make_degree_analysis(chord, key)
