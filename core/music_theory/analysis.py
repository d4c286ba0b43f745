"""
core/music_theory/analysis.py — Single entry point for chord analysis.

analyze() picks one of four forms from the optional arguments:

    root   key    result
    ----   ----   ----------------------------------------------
    None   None   AnalysisResult      every interpretation, ranked
    Note   None   ChordAnalysis|None  best interpretation with that root
    None   key    KeyAnalysisResult   every interpretation as roman numerals
    Note   key    DegreeAnalysis|None best fixed-root interpretation in the key
"""

from __future__ import annotations

from collections.abc import Sequence

from core.config import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from core.music_theory.chords import ChordInstance, SlashChord
from core.music_theory.matcher import analyze_all, analyze_with_root
from core.music_theory.notes import Note
from core.music_theory.roman import analyze_in_key, analyze_in_key_with_root
from core.music_theory.scales import ScaleInstance
from core.music_theory.types import (
    AnalysisResult,
    ChordAnalysis,
    DegreeAnalysis,
    KeyAnalysisResult,
)


def analyze(
    notes: Sequence[Note] | ChordInstance | SlashChord,
    root: Note | None = None,
    key: ScaleInstance | None = None,
    *,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> AnalysisResult | ChordAnalysis | KeyAnalysisResult | DegreeAnalysis | None:
    """Analyze a collection of sounding notes.

    Args:
        notes:  Notes in any order, a ChordInstance, or a SlashChord (which
                keeps its upper-chord fallback, see SlashChord.analyze)
        root:   Force this root instead of trying every sounding pitch class
        key:    Express the result as scale degrees of this key
        config: Omission tolerance

    Returns:
        See the module docstring. "Nothing matched" is an empty result or
        None, never an exception.

    Examples:
        >>> from core.music_theory.notes import parse_note
        >>> str(analyze([parse_note(n) for n in ("C4", "E4", "G4", "Bb4")]).best)
        'C7'
    """
    if isinstance(notes, SlashChord):
        return notes.analyze(root, key, config=config)
    if isinstance(notes, ChordInstance):
        notes = notes.notes
    notes = tuple(notes)

    if key is None:
        if root is None:
            return analyze_all(notes, config=config)
        return analyze_with_root(notes, root, config=config)
    if root is None:
        return analyze_in_key(notes, key, config=config)
    return analyze_in_key_with_root(notes, key, root, config=config)
