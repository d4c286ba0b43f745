"""
core/music_theory/intervals.py — Line-of-fifths interval lattice.

An interval is a pair (fifths, octaves): a count of perfect fifths plus an
octave correction. Spelling survives arithmetic, so an augmented fourth and
a diminished fifth stay distinct while still comparing enharmonically equal.

Exports:
    Interval        frozen lattice value
    P1 … M13        named interval constants (standard quality/number names)
"""

from __future__ import annotations

from dataclasses import dataclass

# Generic interval number (1-based, within an octave) for each fifths class
_GENERIC_NUMBER: tuple[int, ...] = (1, 5, 2, 6, 3, 7, 4)

# Fifths count of the perfect/major interval in each fifths class
_BASE_FIFTHS: tuple[int, ...] = (0, 1, 2, 3, 4, 5, -1)

_PERFECT_NUMBERS: frozenset[int] = frozenset({1, 4, 5})


@dataclass(frozen=True, order=True)
class Interval:
    """A musical interval on the line-of-fifths lattice.

    Attributes:
        fifths:  Number of perfect fifths (negative = fourths)
        octaves: Octave correction
    """

    fifths: int = 0
    octaves: int = 0

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self.fifths + other.fifths, self.octaves + other.octaves)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self.fifths - other.fifths, self.octaves - other.octaves)

    def __neg__(self) -> Interval:
        return Interval(-self.fifths, -self.octaves)

    def compound(self, octaves: int) -> Interval:
        """Return this interval widened by whole octaves, e.g. M2 → M9."""
        return Interval(self.fifths, self.octaves + octaves)

    # ------------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------------

    @property
    def semitones(self) -> int:
        """Pitch-class distance in semitones, folded into [0, 12)."""
        return (self.fifths * 7) % 12

    @property
    def span(self) -> int:
        """Signed size in semitones, octaves included."""
        return self.fifths * 7 + self.octaves * 12

    @property
    def steps(self) -> int:
        """Signed size in diatonic steps (0 = unison, 7 = octave)."""
        return self.fifths * 4 + self.octaves * 7

    def is_enharmonic(self, other: Interval) -> bool:
        """True if both intervals reduce to the same pitch-class distance."""
        return self.semitones == other.semitones

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        number = self.steps + 1
        if number < 1:
            return "-" + str(-self)

        fifths_class = self.fifths % 7
        quality_offset = (self.fifths - _BASE_FIFTHS[fifths_class]) // 7

        if _GENERIC_NUMBER[fifths_class] in _PERFECT_NUMBERS:
            if quality_offset == 0:
                quality = "P"
            elif quality_offset > 0:
                quality = "A" * quality_offset
            else:
                quality = "d" * -quality_offset
        else:
            if quality_offset == 0:
                quality = "M"
            elif quality_offset == -1:
                quality = "m"
            elif quality_offset > 0:
                quality = "A" * quality_offset
            else:
                quality = "d" * (-quality_offset - 1)
        return f"{quality}{number}"


# ---------------------------------------------------------------------------
# Named intervals
# ---------------------------------------------------------------------------

A1 = Interval(7, -4)

P1 = Interval(0, 0)
P4 = Interval(-1, 1)
P5 = Interval(1, 0)
P8 = Interval(0, 1)

m2 = Interval(-5, 3)
M2 = Interval(2, -1)
m3 = Interval(-3, 2)
M3 = Interval(4, -2)
m6 = Interval(-4, 3)
M6 = Interval(3, -1)
m7 = Interval(-2, 2)
M7 = Interval(5, -2)

d2 = Interval(-12, 7)
A2 = Interval(9, -5)
d3 = Interval(-10, 6)
A3 = Interval(11, -6)
d4 = Interval(-8, 5)
A4 = Interval(6, -3)
d5 = Interval(-6, 4)
A5 = Interval(8, -4)
d7 = Interval(-9, 6)
A7 = Interval(12, -6)

m9 = m2.compound(1)
M9 = M2.compound(1)
A9 = A2.compound(1)
P11 = P4.compound(1)
A11 = A4.compound(1)
m13 = m6.compound(1)
M13 = M6.compound(1)
