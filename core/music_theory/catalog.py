"""
core/music_theory/catalog.py — The ordered catalog of named chord qualities.

Each quality carries its root-relative interval pattern plus a 12-bit
pitch-class set (bit n = a tone n semitones above the root) and its tone
count, both computed once at import time. The catalog is read-only and
shared by every analysis call.

Registration order is significant: qualities are listed from the richest
(13th chords) to the simplest (triads, power chord), and ``priority`` records
that position explicitly. The omission-tolerant matcher walks the catalog in
priority order, so reordering the registration list changes which richer
quality is reported first when several explain the same omission pattern.

Exports:
    ChordQuality                immutable catalog entry
    CHORD_CATALOG               tuple of ChordQuality in priority order
    QUALITIES_BY_NAME           name → ChordQuality
    OMISSION_LABELS             semitone offset → omission label
    omission_label(semitones)   label or None (root is never omittable)
    get_quality(name)           lookup, raises ValueError when unknown
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.music_theory import chords as cp
from core.music_theory.chords import ChordPattern

MAX_TONES: int = 7

# Semitone offset above the root → conventional label for its absence.
# Offset 0 (the root) is deliberately absent.
OMISSION_LABELS: dict[int, str] = {
    1: "no9",
    2: "no9",
    3: "no3",
    4: "no3",
    5: "no11",
    6: "no5",
    7: "no5",
    8: "no13",
    9: "no13",
    10: "no7",
    11: "no7",
}


def omission_label(semitones: int) -> str | None:
    """Label for an omitted tone ``semitones`` above the root, or None for the root."""
    return OMISSION_LABELS.get(semitones)


def pitch_class_set(pattern: ChordPattern) -> int:
    """12-bit set with bit n set for every tone n semitones above the root."""
    pcs = 0
    for interval in pattern.intervals:
        pcs |= 1 << interval.semitones
    return pcs


# ---------------------------------------------------------------------------
# ChordQuality
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordQuality:
    """A named chord shape.

    Attributes:
        name:               Chord-symbol suffix, e.g. "" (major), "m7", "7#9"
        pattern:            Root-relative intervals, 1–7 tones, root first
        priority:           Position in the catalog (0 = tried first)
        pitch_class_set:    Derived 12-bit set of root-relative pitch classes
        tone_count:         Derived number of pattern tones
        interval_semitones: Derived semitone offset of each pattern tone
    """

    name: str
    pattern: ChordPattern
    priority: int
    pitch_class_set: int = field(init=False)
    tone_count: int = field(init=False)
    interval_semitones: tuple[int, ...] = field(init=False)

    def __post_init__(self) -> None:
        if not (1 <= len(self.pattern) <= MAX_TONES):
            raise ValueError(
                f"ChordQuality {self.name!r} must have 1–{MAX_TONES} tones, "
                f"got {len(self.pattern)}"
            )
        if self.pattern.intervals[0].semitones != 0:
            raise ValueError(f"ChordQuality {self.name!r} pattern must start on the root")
        if self.priority < 0:
            raise ValueError(f"ChordQuality.priority must be >= 0, got {self.priority}")
        object.__setattr__(self, "pitch_class_set", pitch_class_set(self.pattern))
        object.__setattr__(self, "tone_count", len(self.pattern))
        object.__setattr__(
            self, "interval_semitones", tuple(i.semitones for i in self.pattern.intervals)
        )

    def inversion_of(self, bass_semitones: int) -> int:
        """1-based pattern position of a bass tone, 0 if it is not a non-root tone."""
        for index, semitones in enumerate(self.interval_semitones[1:], start=1):
            if semitones == bass_semitones:
                return index
        return 0


# ---------------------------------------------------------------------------
# Registration list, richest first. Order is the matcher's tie-break.
# ---------------------------------------------------------------------------

_REGISTRATION: tuple[tuple[str, ChordPattern], ...] = (
    # 13ths
    ("13", cp.DOM13),
    ("maj13", cp.MAJ13),
    ("m13", cp.MIN13),
    ("13#11", cp.DOM13_SHARP11),
    # 11ths
    ("11", cp.DOM11),
    ("maj11", cp.MAJ11),
    ("m11", cp.MIN11),
    # 9ths and altered dominants
    ("9#11", cp.DOM9_SHARP11),
    ("9b13", cp.DOM9_FLAT13),
    ("9", cp.DOM9),
    ("maj9", cp.MAJ9),
    ("m9", cp.MIN9),
    ("m(maj9)", cp.MIN_MAJ9),
    ("aug9", cp.AUG9),
    ("9sus4", cp.DOM9_SUS4),
    ("9b5", cp.DOM9_FLAT5),
    ("6/9", cp.MAJ6_9),
    ("m6/9", cp.MIN6_9),
    ("7b9", cp.DOM7_FLAT9),
    ("7#9", cp.DOM7_SHARP9),
    ("7#5b9", cp.DOM7_SHARP5_FLAT9),
    ("7#5#9", cp.DOM7_SHARP5_SHARP9),
    ("7b5b9", cp.DOM7_FLAT5_FLAT9),
    # added-tone chords
    ("add9", cp.ADD9),
    ("m(add9)", cp.MIN_ADD9),
    ("add11", cp.ADD11),
    # sixths and sevenths
    ("6", cp.MAJ6),
    ("m6", cp.MIN6),
    ("7", cp.DOM7),
    ("maj7", cp.MAJ7),
    ("m7", cp.MIN7),
    ("m(maj7)", cp.MIN_MAJ7),
    ("dim7", cp.DIM7),
    ("m7b5", cp.HALF_DIM7),
    ("aug7", cp.AUG7),
    ("maj7#5", cp.AUG_MAJ7),
    ("7sus4", cp.DOM7_SUS4),
    ("7b5", cp.DOM7_FLAT5),
    # triads
    ("", cp.MAJOR_TRIAD),
    ("m", cp.MINOR_TRIAD),
    ("dim", cp.DIMINISHED_TRIAD),
    ("aug", cp.AUGMENTED_TRIAD),
    ("sus2", cp.SUS2),
    ("sus4", cp.SUS4),
    # dyads
    ("5", cp.POWER_CHORD),
)

CHORD_CATALOG: tuple[ChordQuality, ...] = tuple(
    ChordQuality(name=name, pattern=pattern, priority=priority)
    for priority, (name, pattern) in enumerate(_REGISTRATION)
)

QUALITIES_BY_NAME: dict[str, ChordQuality] = {q.name: q for q in CHORD_CATALOG}


def get_quality(name: str) -> ChordQuality:
    """Return the catalog entry for a quality name.

    Raises:
        ValueError: If the name is not in the catalog
    """
    quality = QUALITIES_BY_NAME.get(name)
    if quality is None:
        raise ValueError(
            f"Unknown chord quality {name!r}. Valid: {[q.name for q in CHORD_CATALOG]}"
        )
    return quality
