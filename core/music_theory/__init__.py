"""
core/music_theory/ — Pure harmonic analysis engine.

Exports:
    Pitch:    Note, Interval, Degree, AccidentalPreference, parse_note,
              parse_degree, flat, sharp
    Chords:   ChordPattern, ChordInstance, SlashChord
    Catalog:  ChordQuality, CHORD_CATALOG, get_quality
    Scales:   ScalePattern, ScaleInstance, SCALE_PATTERNS, get_scale
    Results:  ChordAnalysis, AnalysisResult, DegreeAnalysis, KeyAnalysisResult
    Analysis: analyze, analyze_all, analyze_with_root, analyze_in_key,
              analyze_in_key_with_root
"""

from core.music_theory.analysis import analyze
from core.music_theory.catalog import CHORD_CATALOG, ChordQuality, get_quality
from core.music_theory.chords import ChordInstance, ChordPattern, SlashChord
from core.music_theory.degree import Degree, flat, parse_degree, sharp
from core.music_theory.intervals import Interval
from core.music_theory.matcher import analyze_all, analyze_with_root
from core.music_theory.notes import AccidentalPreference, Note, parse_note
from core.music_theory.roman import analyze_in_key, analyze_in_key_with_root
from core.music_theory.scales import SCALE_PATTERNS, ScaleInstance, ScalePattern, get_scale
from core.music_theory.types import (
    AnalysisResult,
    ChordAnalysis,
    DegreeAnalysis,
    KeyAnalysisResult,
)

__all__ = [
    # Pitch
    "Note",
    "Interval",
    "Degree",
    "AccidentalPreference",
    "parse_note",
    "parse_degree",
    "flat",
    "sharp",
    # Chords
    "ChordPattern",
    "ChordInstance",
    "SlashChord",
    # Catalog
    "ChordQuality",
    "CHORD_CATALOG",
    "get_quality",
    # Scales
    "ScalePattern",
    "ScaleInstance",
    "SCALE_PATTERNS",
    "get_scale",
    # Results
    "ChordAnalysis",
    "AnalysisResult",
    "DegreeAnalysis",
    "KeyAnalysisResult",
    # Analysis
    "analyze",
    "analyze_all",
    "analyze_with_root",
    "analyze_in_key",
    "analyze_in_key_with_root",
]
