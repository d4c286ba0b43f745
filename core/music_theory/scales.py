"""
core/music_theory/scales.py — Scale patterns and spelled scale instances.

A ScalePattern is an ordered tuple of intervals from the tonic; applying it
to a root Note gives a ScaleInstance, which the degree mapper uses as a
read-only lookup table.

Exports:
    ScalePattern            interval pattern with mode() and chord_on()
    ScaleInstance           spelled notes of a key
    MAJOR … BEBOP_MAJOR     named patterns
    SCALE_PATTERNS          lowercase mode name → ScalePattern
    get_scale(root, mode)   ScaleInstance from a root and a mode name
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from core.music_theory import intervals as iv
from core.music_theory.chords import ChordInstance, ChordPattern
from core.music_theory.degree import Degree
from core.music_theory.intervals import Interval
from core.music_theory.notes import AccidentalPreference, Note

# ---------------------------------------------------------------------------
# ScalePattern
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScalePattern:
    """Ordered intervals from the tonic, e.g. (P1, M2, M3, P4, P5, M6, M7)."""

    intervals: tuple[Interval, ...]

    def __post_init__(self) -> None:
        if not self.intervals:
            raise ValueError("ScalePattern.intervals must not be empty")

    def __len__(self) -> int:
        return len(self.intervals)

    def _check_degree(self, number: int) -> None:
        if not (1 <= number <= len(self)):
            raise ValueError(f"Scale degree must be in [1, {len(self)}], got {number}")

    def mode(self, index: int) -> ScalePattern:
        """The rotation starting on the 0-based scale step ``index``.

        Examples:
            >>> MAJOR.mode(5) == NATURAL_MINOR
            True
        """
        if not (0 <= index < len(self)):
            raise ValueError(f"Mode index must be in [0, {len(self) - 1}], got {index}")
        offset = self.intervals[index]
        size = len(self)
        rotated: list[Interval] = []
        for i in range(size):
            interval = self.intervals[(i + index) % size] - offset
            if interval.steps < 0:
                interval = interval + iv.P8
            rotated.append(interval)
        return ScalePattern(tuple(rotated))

    def chord_on(self, number: int, tones: int = 3) -> ChordPattern:
        """Stack ``tones`` scale thirds on degree ``number`` as a root-relative pattern."""
        self._check_degree(number)
        if tones < 1:
            raise ValueError(f"tones must be >= 1, got {tones}")
        size = len(self)
        start = number - 1
        root = self.intervals[start]
        stacked: list[Interval] = []
        for i in range(tones):
            step = start + 2 * i
            absolute = self.intervals[step % size].compound(step // size)
            stacked.append(absolute - root)
        return ChordPattern(tuple(stacked))

    def on(self, root: Note) -> ScaleInstance:
        return ScaleInstance(root=root, notes=tuple(root + i for i in self.intervals))


# ---------------------------------------------------------------------------
# ScaleInstance
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScaleInstance:
    """A key: tonic plus the spelled notes of each scale degree.

    Attributes:
        root:  Tonic note (also fixes the register of chord_on())
        notes: One note per degree, tonic first
    """

    root: Note
    notes: tuple[Note, ...]

    def __post_init__(self) -> None:
        if not self.notes:
            raise ValueError("ScaleInstance.notes must not be empty")

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]

    def contains(self, target: Note) -> bool:
        """True if some degree has the same spelling as ``target`` (any octave)."""
        return any(n.fifth == target.fifth for n in self.notes)

    def contains_enharmonic(self, target: Note) -> bool:
        return any(n.is_enharmonic(target) for n in self.notes)

    def degree_of(self, target: Note) -> Degree | None:
        """Diatonic degree spelled like ``target``, or None."""
        for index, note in enumerate(self.notes):
            if note.fifth == target.fifth:
                return Degree(index + 1)
        return None

    def is_diatonic(self, target: Note | ChordInstance) -> bool:
        if isinstance(target, ChordInstance):
            return all(self.contains(n) for n in target.notes)
        return self.contains(target)

    def note_on(self, degree: Degree | int) -> Note:
        """The note of a (possibly altered) degree; b6 lowers degree 6 by a chromatic semitone."""
        if isinstance(degree, int):
            degree = Degree(degree)
        if degree.number > len(self):
            raise ValueError(f"Scale degree must be in [1, {len(self)}], got {degree.number}")
        note = self.notes[degree.number - 1]
        return note + Interval(7 * degree.alteration, -4 * degree.alteration)

    def chord_on(self, number: int, tones: int = 3) -> ChordInstance:
        """Diatonic chord of stacked thirds on degree ``number``, voiced upward from the tonic.

        Examples:
            >>> str(MAJOR.on(C.at_octave(4)).chord_on(5, 4))
            'G4 B4 D5 F5'
        """
        if not (1 <= number <= len(self)):
            raise ValueError(f"Scale degree must be in [1, {len(self)}], got {number}")
        if tones < 1:
            raise ValueError(f"tones must be >= 1, got {tones}")
        size = len(self)
        voiced: list[Note] = []
        for i in range(tones):
            note = self.notes[(number - 1 + 2 * i) % size]
            floor = voiced[-1].midi_pitch + 1 if voiced else self.root.midi_pitch
            while note.midi_pitch < floor:
                note = note + iv.P8
            voiced.append(note)
        return ChordInstance(tuple(voiced))

    def chord_at(self, degree: Degree | int, pattern: ChordPattern) -> ChordInstance:
        """Apply ``pattern`` on a (possibly altered) degree, e.g. ``chord_at(flat(6), MAJOR_TRIAD)``."""
        return pattern.on(self.note_on(degree))

    def simplify(self, pref: AccidentalPreference = AccidentalPreference.NATURAL) -> ScaleInstance:
        return ScaleInstance(
            root=self.root.simplify(pref),
            notes=tuple(n.simplify(pref) for n in self.notes),
        )

    def __str__(self) -> str:
        return " ".join(str(n) for n in self.notes)


# ---------------------------------------------------------------------------
# Named patterns
# ---------------------------------------------------------------------------

MAJOR = ScalePattern((iv.P1, iv.M2, iv.M3, iv.P4, iv.P5, iv.M6, iv.M7))
DORIAN = MAJOR.mode(1)
PHRYGIAN = MAJOR.mode(2)
LYDIAN = MAJOR.mode(3)
MIXOLYDIAN = MAJOR.mode(4)
NATURAL_MINOR = MAJOR.mode(5)
LOCRIAN = MAJOR.mode(6)

HARMONIC_MINOR = ScalePattern((iv.P1, iv.M2, iv.m3, iv.P4, iv.P5, iv.m6, iv.M7))
MELODIC_MINOR = ScalePattern((iv.P1, iv.M2, iv.m3, iv.P4, iv.P5, iv.M6, iv.M7))

PHRYGIAN_DOMINANT = HARMONIC_MINOR.mode(4)
LYDIAN_SHARP2 = HARMONIC_MINOR.mode(5)

LYDIAN_DOMINANT = MELODIC_MINOR.mode(3)
ALTERED = MELODIC_MINOR.mode(6)

MAJOR_PENTATONIC = ScalePattern((iv.P1, iv.M2, iv.M3, iv.P5, iv.M6))
MINOR_PENTATONIC = ScalePattern((iv.P1, iv.m3, iv.P4, iv.P5, iv.m7))

WHOLE_TONE = ScalePattern((iv.P1, iv.M2, iv.M3, iv.A4, iv.A5, iv.m7))
BLUES = ScalePattern((iv.P1, iv.m3, iv.P4, iv.d5, iv.P5, iv.m7))

CHROMATIC = ScalePattern(
    (iv.P1, iv.m2, iv.M2, iv.m3, iv.M3, iv.P4, iv.d5, iv.P5, iv.m6, iv.M6, iv.m7, iv.M7)
)

BEBOP_DOMINANT = ScalePattern((iv.P1, iv.M2, iv.M3, iv.P4, iv.P5, iv.M6, iv.m7, iv.M7))
BEBOP_MAJOR = ScalePattern((iv.P1, iv.M2, iv.M3, iv.P4, iv.P5, iv.m6, iv.M6, iv.M7))

SCALE_PATTERNS: dict[str, ScalePattern] = {
    "major": MAJOR,
    "ionian": MAJOR,
    "dorian": DORIAN,
    "phrygian": PHRYGIAN,
    "lydian": LYDIAN,
    "mixolydian": MIXOLYDIAN,
    "natural minor": NATURAL_MINOR,
    "aeolian": NATURAL_MINOR,
    "minor": NATURAL_MINOR,
    "locrian": LOCRIAN,
    "harmonic minor": HARMONIC_MINOR,
    "melodic minor": MELODIC_MINOR,
    "phrygian dominant": PHRYGIAN_DOMINANT,
    "lydian #2": LYDIAN_SHARP2,
    "lydian dominant": LYDIAN_DOMINANT,
    "altered": ALTERED,
    "major pentatonic": MAJOR_PENTATONIC,
    "minor pentatonic": MINOR_PENTATONIC,
    "whole tone": WHOLE_TONE,
    "blues": BLUES,
    "chromatic": CHROMATIC,
    "bebop dominant": BEBOP_DOMINANT,
    "bebop major": BEBOP_MAJOR,
}


def get_scale(root: Note, mode: str = "major") -> ScaleInstance:
    """Build the ScaleInstance of ``mode`` on ``root``.

    Args:
        root: Tonic note
        mode: Mode name, case-insensitive — a key of SCALE_PATTERNS

    Raises:
        ValueError: If the mode is unknown
    """
    pattern = SCALE_PATTERNS.get(mode.strip().lower())
    if pattern is None:
        raise ValueError(f"Unknown mode {mode!r}. Valid: {sorted(SCALE_PATTERNS)}")
    return pattern.on(root)
