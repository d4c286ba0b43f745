"""
core/music_theory/notes.py — Spelled notes on the line-of-fifths lattice.

A Note is a lattice coordinate (fifth, octave). Arithmetic with Interval
values preserves spelling, so C# and Db are different notes that share a
pitch class.

Exports:
    AccidentalPreference    spelling bias used by Note.simplify()
    Note                    frozen lattice value
    parse_note(text)        "Bb3" → Note
    C, D, … Gb              octave-0 note constants
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from core.music_theory.intervals import Interval

# Letter names indexed by (fifth + 1) mod 7
_LETTERS: tuple[str, ...] = ("F", "C", "G", "D", "A", "E", "B")

_LETTER_FIFTHS: dict[str, int] = {letter: i - 1 for i, letter in enumerate(_LETTERS)}

_NOTE_PATTERN = re.compile(r"^\s*([A-Ga-g])([#b]*)(-?\d+)?\s*$")

DEFAULT_OCTAVE: int = 4


class AccidentalPreference(Enum):
    """Spelling bias for Note.simplify()."""

    NATURAL = 5
    SHARP = 1
    FLAT = 6


@dataclass(frozen=True, order=True)
class Note:
    """A spelled pitch on the line-of-fifths lattice.

    Attributes:
        fifth:  Position on the line of fifths (0 = C, 1 = G, -1 = F, 7 = C#)
        octave: Octave coordinate; C4 is Note(0, 4)

    Ordering compares raw coordinates; use ``midi_pitch`` for sounding order.
    """

    fifth: int = 0
    octave: int = 0

    def __add__(self, other: Interval) -> Note:
        if not isinstance(other, Interval):
            return NotImplemented
        return Note(self.fifth + other.fifths, self.octave + other.octaves)

    def __sub__(self, other: Note | Interval) -> Note | Interval:
        if isinstance(other, Note):
            return Interval(self.fifth - other.fifth, self.octave - other.octave)
        if isinstance(other, Interval):
            return Note(self.fifth - other.fifths, self.octave - other.octaves)
        return NotImplemented

    def at_octave(self, octave: int) -> Note:
        """Shift by whole octaves; on an octave-0 constant, ``C.at_octave(4)`` is C4."""
        return Note(self.fifth, self.octave + octave)

    @property
    def pitch_class(self) -> int:
        """Pitch class 0 (C) through 11 (B)."""
        return (self.fifth * 7) % 12

    @property
    def midi_pitch(self) -> int:
        """Absolute ordinal pitch (C4 = 60). Used only for ordering notes."""
        return self.fifth * 7 + self.octave * 12 + 12

    def is_enharmonic(self, other: Note) -> bool:
        return self.pitch_class == other.pitch_class

    def simplify(self, pref: AccidentalPreference = AccidentalPreference.NATURAL) -> Note:
        """Respell with the fewest accidentals, biased toward ``pref``.

        The sounding pitch is unchanged: dropping 12 fifths is compensated
        by adding 7 octaves.

        Examples:
            >>> Gs.simplify().pitch_name
            'Ab'
            >>> Gb.simplify(AccidentalPreference.SHARP).pitch_name
            'F#'
        """
        adjust = (self.fifth + pref.value) // 12
        return Note(self.fifth - adjust * 12, self.octave + adjust * 7)

    @property
    def pitch_name(self) -> str:
        """Letter plus accidentals, without octave, e.g. 'F#', 'Bb', 'Cbb'."""
        shifted = self.fifth + 1
        accidentals = shifted // 7
        name = _LETTERS[shifted % 7]
        if accidentals > 0:
            return name + "#" * accidentals
        return name + "b" * -accidentals

    @property
    def display_octave(self) -> int:
        return (self.midi_pitch - self.pitch_class) // 12 - 1

    def __str__(self) -> str:
        return f"{self.pitch_name}{self.display_octave}"


def parse_note(text: str, default_octave: int = DEFAULT_OCTAVE) -> Note:
    """Parse a note name such as "C4", "F#", "Bb3" or "ebb-1".

    Args:
        text:           Letter A–G, any number of '#' or 'b', optional octave
        default_octave: Octave used when the text carries none

    The octave number belongs to the letter, so "Cb4" is the B just below
    C4 and "B#3" sounds as C4. ``str()`` shows the sounding octave, which
    differs only when accidentals cross the B/C boundary ("Cb4" prints "Cb3").

    Raises:
        ValueError: If the text is not a note name
    """
    match = _NOTE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Unknown note {text!r}. Expected e.g. 'C4', 'F#', 'Bb3'")
    letter, accidentals, octave_text = match.groups()
    octave = int(octave_text) if octave_text is not None else default_octave
    natural = Note(_LETTER_FIFTHS[letter.upper()], 0)
    natural = natural.at_octave(octave - natural.display_octave)
    alteration = accidentals.count("#") - accidentals.count("b")
    return natural + Interval(7 * alteration, -4 * alteration)


# ---------------------------------------------------------------------------
# Octave-0 note constants, combine with at_octave(), e.g. C.at_octave(4)
# ---------------------------------------------------------------------------

C = Note(0, 0)
G = Note(1, 0)
D = Note(2, -1)
A = Note(3, -1)
E = Note(4, -2)
B = Note(5, -2)
Fs = Note(6, -3)
Cs = Note(7, -4)
Gs = Note(8, -4)
Ds = Note(9, -5)
As = Note(10, -5)

F = Note(-1, 1)
Bb = Note(-2, 2)
Eb = Note(-3, 2)
Ab = Note(-4, 3)
Db = Note(-5, 3)
Gb = Note(-6, 4)
