"""
core/music_theory/chords.py — Chord shapes and sounding chords.

ChordPattern is an ordered list of root-relative intervals; applying it to a
root Note gives a ChordInstance. A SlashChord pairs a ChordInstance with a
bass note sounding below it.

Exports:
    ChordPattern    root-relative interval list with inversion/alter/omit/add
    ChordInstance   concrete notes, with analyze() entry points
    SlashChord      chord over an explicit bass
    MAJOR_TRIAD … ADD13    named patterns registered in the chord catalog
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from core.config import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from core.music_theory import intervals as iv
from core.music_theory.intervals import Interval
from core.music_theory.notes import AccidentalPreference, Note

if TYPE_CHECKING:
    from core.music_theory.scales import ScaleInstance
    from core.music_theory.types import (
        AnalysisResult,
        ChordAnalysis,
        DegreeAnalysis,
        KeyAnalysisResult,
    )

# ---------------------------------------------------------------------------
# ChordPattern
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordPattern:
    """An ordered tuple of intervals measured from the chord root.

    Examples:
        >>> str(MAJOR_TRIAD.on(C.at_octave(4)))
        'C4 E4 G4'
        >>> str(MAJOR_TRIAD.inversion(1).on(C.at_octave(4)))
        'E4 G4 C5'
    """

    intervals: tuple[Interval, ...]

    def __post_init__(self) -> None:
        if not self.intervals:
            raise ValueError("ChordPattern.intervals must not be empty")

    def __len__(self) -> int:
        return len(self.intervals)

    def inversion(self, number: int) -> ChordPattern:
        """Rotate the lowest ``number`` tones up an octave."""
        if not (0 <= number < len(self)):
            raise ValueError(
                f"Inversion number must be in [0, {len(self) - 1}], got {number}"
            )
        rotated = self.intervals[number:] + tuple(
            interval + iv.P8 for interval in self.intervals[:number]
        )
        return ChordPattern(rotated)

    def alter(self, index: int, interval: Interval) -> ChordPattern:
        """Replace the tone at ``index``, e.g. ``DOM7.alter(2, A5)`` for 7#5."""
        if not (0 <= index < len(self)):
            raise ValueError(f"Alter index must be in [0, {len(self) - 1}], got {index}")
        tones = list(self.intervals)
        tones[index] = interval
        return ChordPattern(tuple(tones))

    def omit(self, index: int) -> ChordPattern:
        if len(self) <= 1:
            raise ValueError("Cannot omit from a single-note chord")
        if not (0 <= index < len(self)):
            raise ValueError(f"Omit index must be in [0, {len(self) - 1}], got {index}")
        return ChordPattern(self.intervals[:index] + self.intervals[index + 1 :])

    def add(self, interval: Interval) -> ChordPattern:
        return ChordPattern(self.intervals + (interval,))

    def on(self, root: Note) -> ChordInstance:
        """Build the concrete chord with ``root`` as its first tone."""
        return ChordInstance(tuple(root + interval for interval in self.intervals))


# ---------------------------------------------------------------------------
# ChordInstance
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordInstance:
    """A fixed collection of sounding notes (duplicates and enharmonics allowed)."""

    notes: tuple[Note, ...]

    def __post_init__(self) -> None:
        if not self.notes:
            raise ValueError("ChordInstance.notes must not be empty")

    @classmethod
    def of(cls, notes: Iterable[Note]) -> ChordInstance:
        return cls(tuple(notes))

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]

    def lowest(self) -> Note:
        return min(self.notes, key=lambda n: n.midi_pitch)

    def highest(self) -> Note:
        return max(self.notes, key=lambda n: n.midi_pitch)

    def contains(self, target: Note) -> bool:
        """True if ``target`` sounds with the same spelling and octave."""
        return target in self.notes

    def contains_enharmonic(self, target: Note) -> bool:
        return any(n.is_enharmonic(target) for n in self.notes)

    def simplify(self, pref: AccidentalPreference = AccidentalPreference.NATURAL) -> ChordInstance:
        return ChordInstance(tuple(n.simplify(pref) for n in self.notes))

    def over(self, bass: Note) -> SlashChord:
        """Place this chord over ``bass``; same as ``chord / bass``."""
        return SlashChord(self, bass)

    def __truediv__(self, bass: Note) -> SlashChord:
        if not isinstance(bass, Note):
            return NotImplemented
        return self.over(bass)

    def analyze(
        self,
        root: Note | None = None,
        key: ScaleInstance | None = None,
        *,
        config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
    ) -> AnalysisResult | ChordAnalysis | KeyAnalysisResult | DegreeAnalysis | None:
        """Analyze these notes; see core.music_theory.analyze() for the four forms."""
        from core.music_theory.analysis import analyze  # local import to avoid circularity

        return analyze(self.notes, root=root, key=key, config=config)

    def __str__(self) -> str:
        return " ".join(str(n) for n in self.notes)


# ---------------------------------------------------------------------------
# SlashChord
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SlashChord:
    """A chord sounding above an explicit bass note.

    Chord tones enharmonic to the bass are voiced above it: every upper
    tone is raised by octaves until it sounds higher than the bass.

    Raises:
        ValueError: If the bass still does not sound below every chord tone
    """

    chord: ChordInstance
    bass: Note

    def __post_init__(self) -> None:
        chord = self.chord
        if chord.contains_enharmonic(self.bass):
            raised = []
            for note in chord.notes:
                while note.midi_pitch <= self.bass.midi_pitch:
                    note = note + iv.P8
                raised.append(note)
            chord = ChordInstance(tuple(raised))
            object.__setattr__(self, "chord", chord)
        if self.bass.midi_pitch >= chord.lowest().midi_pitch:
            raise ValueError(
                f"Slash chord bass {self.bass} must be lower than all chord tones ({chord})"
            )

    def __len__(self) -> int:
        return len(self.chord)

    def all_notes(self) -> tuple[Note, ...]:
        """Bass followed by the chord tones."""
        return (self.bass,) + self.chord.notes

    def simplify(self, pref: AccidentalPreference = AccidentalPreference.NATURAL) -> SlashChord:
        return SlashChord(self.chord.simplify(pref), self.bass.simplify(pref))

    def _bass_suffix(self) -> str:
        return "/" + self.bass.simplify().pitch_name

    def analyze(
        self,
        root: Note | None = None,
        key: ScaleInstance | None = None,
        *,
        config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
    ) -> AnalysisResult | ChordAnalysis | KeyAnalysisResult | DegreeAnalysis | None:
        """Analyze bass and chord together; fall back to the upper chord over the bass.

        When the combined notes match nothing, the upper chord is analyzed on
        its own and "/<bass>" is appended to each interpretation's quality
        (replacing any bass the upper chord reported for itself).
        """
        from core.music_theory.analysis import analyze
        from core.music_theory.roman import make_degree_analysis
        from core.music_theory.types import AnalysisResult, KeyAnalysisResult

        combined = analyze(self.all_notes(), root=root, key=key, config=config)
        if combined:
            return combined

        upper = analyze(self.chord.notes, root=root, key=key, config=config)
        if upper is None:
            return None
        suffix = self._bass_suffix()

        def _amend(chord: ChordAnalysis) -> ChordAnalysis:
            return replace(chord, quality=chord.quality + suffix, bass=None, inversion=0)

        if key is None:
            if isinstance(upper, AnalysisResult):
                return AnalysisResult(tuple(_amend(a) for a in upper))
            return _amend(upper)
        if isinstance(upper, KeyAnalysisResult):
            return KeyAnalysisResult(
                tuple(make_degree_analysis(_amend(d.chord), key) for d in upper)
            )
        return make_degree_analysis(_amend(upper.chord), key)

    def __str__(self) -> str:
        return f"{self.chord}/{self.bass}"


# ---------------------------------------------------------------------------
# Named patterns
# ---------------------------------------------------------------------------

MAJOR_TRIAD = ChordPattern((iv.P1, iv.M3, iv.P5))
MINOR_TRIAD = ChordPattern((iv.P1, iv.m3, iv.P5))
DIMINISHED_TRIAD = ChordPattern((iv.P1, iv.m3, iv.d5))
AUGMENTED_TRIAD = ChordPattern((iv.P1, iv.M3, iv.A5))
SUS2 = ChordPattern((iv.P1, iv.M2, iv.P5))
SUS4 = ChordPattern((iv.P1, iv.P4, iv.P5))

MAJ6 = MAJOR_TRIAD.add(iv.M6)
MIN6 = MINOR_TRIAD.add(iv.M6)

DOM7 = MAJOR_TRIAD.add(iv.m7)
MAJ7 = MAJOR_TRIAD.add(iv.M7)
MIN7 = MINOR_TRIAD.add(iv.m7)
MIN_MAJ7 = MINOR_TRIAD.add(iv.M7)
DIM7 = DIMINISHED_TRIAD.add(iv.d7)
HALF_DIM7 = DIMINISHED_TRIAD.add(iv.m7)
AUG7 = AUGMENTED_TRIAD.add(iv.m7)
AUG_MAJ7 = AUGMENTED_TRIAD.add(iv.M7)
DOM7_SUS4 = SUS4.add(iv.m7)

DOM7_SHARP5 = DOM7.alter(2, iv.A5)
DOM7_FLAT5 = DOM7.alter(2, iv.d5)
DOM7_SHARP9 = DOM7.add(iv.A9)
DOM7_FLAT9 = DOM7.add(iv.m9)
DOM7_SHARP5_SHARP9 = DOM7_SHARP5.add(iv.A9)
DOM7_SHARP5_FLAT9 = DOM7_SHARP5.add(iv.m9)
DOM7_FLAT5_FLAT9 = DOM7_FLAT5.add(iv.m9)

MAJ6_9 = MAJ6.add(iv.M9)
MIN6_9 = MIN6.add(iv.M9)
DOM9 = DOM7.add(iv.M9)
MAJ9 = MAJ7.add(iv.M9)
MIN9 = MIN7.add(iv.M9)
MIN_MAJ9 = MIN_MAJ7.add(iv.M9)
AUG9 = AUG7.add(iv.M9)
DOM9_SUS4 = DOM7_SUS4.add(iv.M9)

DOM9_SHARP11 = DOM9.add(iv.A11)
DOM9_FLAT13 = DOM9.add(iv.m13)
DOM9_SHARP5 = DOM9.alter(2, iv.A5)
DOM9_FLAT5 = DOM9.alter(2, iv.d5)

DOM11 = DOM9.add(iv.P11)
MAJ11 = MAJ9.add(iv.P11)
MIN11 = MIN9.add(iv.P11)

DOM13 = DOM11.add(iv.M13)
MAJ13 = MAJ11.add(iv.M13)
MIN13 = MIN11.add(iv.M13)
DOM13_SHARP11 = DOM13.alter(5, iv.A11)

POWER_CHORD = MAJOR_TRIAD.omit(1)
DOM9_NO5 = DOM9.omit(2)
DOM11_NO3 = DOM11.omit(1)
DOM13_NO5 = DOM13.omit(2)
DOM13_NO5_NO11 = DOM13_NO5.omit(3)

ADD9 = MAJOR_TRIAD.add(iv.M9)
MIN_ADD9 = MINOR_TRIAD.add(iv.M9)
ADD11 = MAJOR_TRIAD.add(iv.P11)
ADD13 = MAJOR_TRIAD.add(iv.M13)
