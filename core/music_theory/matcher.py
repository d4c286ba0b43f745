"""
core/music_theory/matcher.py — Chord recognition by pitch-class-set matching.

analyze_all() is the main algorithm:
    1. Order the notes by sounding pitch; the lowest is the bass reference
    2. Try each distinct pitch class, lowest first, as a candidate root
    3. Express the notes as a 12-bit set relative to that root
    4. Look the set up in the chord catalog: exact matches first, otherwise
       catalog qualities that explain the set with a few omitted tones
    5. Attach bass and inversion information to every match
    6. Rank all interpretations: fewest omissions, then lowest inversion,
       then shortest quality name

Design decisions:
    - Pure and synchronous: the catalog is read-only, every intermediate
      value is call-local, so concurrent calls need no coordination.
    - No match is a valid outcome (empty AnalysisResult / None), never an error.
    - The root of a quality must sound: omission matching is attempted only
      when the candidate root is present, and never reports the root omitted.
    - The tone count handed to the matcher is the number of distinct pitch
      classes sounding. It is computed once per call against the lowest note
      and reused for every candidate root.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from core.config import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from core.music_theory.catalog import CHORD_CATALOG, ChordQuality, omission_label
from core.music_theory.notes import Note
from core.music_theory.types import AnalysisResult, ChordAnalysis

_ROOT_BIT: int = 1

# ---------------------------------------------------------------------------
# Catalog lookup
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MatchCandidate:
    """A catalog quality that explains an input set, with the tones it lacks."""

    quality: ChordQuality
    omissions: tuple[str, ...] = field(default_factory=tuple)


def relative_pitch_class_set(notes: Iterable[Note], root_pitch_class: int) -> int:
    """12-bit set of the notes' pitch classes measured from ``root_pitch_class``."""
    pcs = 0
    for note in notes:
        pcs |= 1 << ((note.pitch_class - root_pitch_class) % 12)
    return pcs


def _omission_labels(quality: ChordQuality, omitted_bits: int) -> tuple[str, ...]:
    """Labels for the omitted tones, in pattern order (root outward)."""
    labels: list[str] = []
    for semitones in quality.interval_semitones:
        if omitted_bits & (1 << semitones):
            label = omission_label(semitones)
            if label is not None:
                labels.append(label)
    return tuple(labels)


def find_matches(
    input_pcs: int,
    input_count: int,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> list[MatchCandidate]:
    """Find catalog qualities matching a root-relative pitch-class set.

    Args:
        input_pcs:   12-bit root-relative set of the sounding notes
        input_count: Number of distinct pitch classes sounding
        config:      Omission tolerance

    Returns:
        Exact matches if there are any; otherwise omission-tolerant matches,
        both in catalog priority order. Possibly empty.
    """
    exact = [
        MatchCandidate(quality) for quality in CHORD_CATALOG if quality.pitch_class_set == input_pcs
    ]
    if exact:
        return exact

    if not input_pcs & _ROOT_BIT:
        return []

    matches: list[MatchCandidate] = []
    for quality in CHORD_CATALOG:
        if quality.tone_count <= input_count:
            continue
        if input_pcs & quality.pitch_class_set != input_pcs:
            continue

        omitted_bits = quality.pitch_class_set & ~input_pcs
        omitted_count = omitted_bits.bit_count()
        if omitted_count > config.max_omissions:
            continue
        if omitted_bits & _ROOT_BIT:
            continue

        omissions = _omission_labels(quality, omitted_bits)
        # every omitted tone must carry a label, otherwise the match is unnamed
        if len(omissions) == omitted_count:
            matches.append(MatchCandidate(quality, omissions))
    return matches


# ---------------------------------------------------------------------------
# Building and ranking interpretations
# ---------------------------------------------------------------------------


def build_analysis(root: Note, match: MatchCandidate, lowest: Note) -> ChordAnalysis:
    """Turn a catalog match at ``root`` into a ChordAnalysis with bass/inversion."""
    bass: Note | None = None
    inversion = 0
    if root.pitch_class != lowest.pitch_class:
        bass = lowest
        inversion = match.quality.inversion_of((lowest.pitch_class - root.pitch_class) % 12)
    return ChordAnalysis(
        root=root.simplify(),
        quality=match.quality.name,
        bass=bass,
        inversion=inversion,
        omissions=match.omissions,
    )


def rank_key(analysis: ChordAnalysis) -> tuple[int, int, int]:
    """Sort key: fewest omissions, then lowest inversion, then shortest name."""
    return (len(analysis.omissions), analysis.inversion, len(analysis.quality))


def rank(analyses: Iterable[ChordAnalysis]) -> tuple[ChordAnalysis, ...]:
    """Stable ranking: equal keys keep their discovery order."""
    return tuple(sorted(analyses, key=rank_key))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_all(
    notes: Sequence[Note],
    *,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> AnalysisResult:
    """Find every plausible chord interpretation of a collection of notes.

    Args:
        notes:  Sounding notes in any order; duplicates and enharmonic
                repeats are allowed
        config: Omission tolerance

    Returns:
        AnalysisResult ranked simplest-first. Empty when nothing matches.

    Examples:
        >>> str(analyze_all(DOM7.on(C.at_octave(4)).notes).best)
        'C7'
        >>> str(analyze_all(MAJOR_TRIAD.inversion(1).on(C.at_octave(4)).notes).best)
        'C/E'
    """
    if not notes:
        return AnalysisResult()

    ordered = sorted(notes, key=lambda n: n.midi_pitch)
    lowest = ordered[0]
    input_count = relative_pitch_class_set(notes, lowest.pitch_class).bit_count()

    analyses: list[ChordAnalysis] = []
    tried = 0
    for candidate in ordered:
        bit = 1 << candidate.pitch_class
        if tried & bit:
            continue
        tried |= bit

        pcs = relative_pitch_class_set(notes, candidate.pitch_class)
        for match in find_matches(pcs, input_count, config):
            analyses.append(build_analysis(candidate, match, lowest))

    return AnalysisResult(rank(analyses))


def analyze_with_root(
    notes: Sequence[Note],
    root: Note,
    *,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> ChordAnalysis | None:
    """Best interpretation of ``notes`` with a caller-fixed root.

    Returns:
        The top-ranked ChordAnalysis, or None if ``root`` does not sound or
        no quality matches.
    """
    if not notes:
        return None

    pcs = relative_pitch_class_set(notes, root.pitch_class)
    lowest = min(notes, key=lambda n: n.midi_pitch)
    matches = find_matches(pcs, pcs.bit_count(), config)
    if not matches:
        return None
    return rank(build_analysis(root, m, lowest) for m in matches)[0]
