"""
core/music_theory/degree.py — Scale degree with chromatic alteration.

Used both as the placement of an analysed chord within a key and as an
input for building chords relative to a scale (e.g. ``flat(6)`` for the
borrowed bVI).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_DEGREE_PATTERN = re.compile(r"^\s*([b#]?)([1-9]\d*)\s*$")


@dataclass(frozen=True)
class Degree:
    """A 1-based scale degree plus an alteration of -1, 0 or +1.

    Attributes:
        number:     Scale degree, 1 = tonic
        alteration: -1 (flat), 0 (diatonic) or +1 (sharp)
    """

    number: int
    alteration: int = 0

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError(f"Degree.number must be >= 1, got {self.number}")
        if self.alteration not in (-1, 0, 1):
            raise ValueError(f"Degree.alteration must be -1, 0 or 1, got {self.alteration}")

    @property
    def prefix(self) -> str:
        """Roman-numeral prefix: 'b', '#' or ''."""
        if self.alteration == -1:
            return "b"
        if self.alteration == 1:
            return "#"
        return ""

    def __str__(self) -> str:
        return f"{self.prefix}{self.number}"


def flat(number: int) -> Degree:
    """Lowered degree, e.g. ``flat(7)`` for bVII."""
    return Degree(number, -1)


def sharp(number: int) -> Degree:
    """Raised degree, e.g. ``sharp(4)`` for #IV."""
    return Degree(number, 1)


def parse_degree(text: str) -> Degree:
    """Parse "5", "b6" or "#4" into a Degree.

    Raises:
        ValueError: If the text is not a degree
    """
    match = _DEGREE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Unknown degree {text!r}. Expected e.g. '5', 'b6', '#4'")
    accidental, number = match.groups()
    alteration = {"b": -1, "#": 1}.get(accidental, 0)
    return Degree(int(number), alteration)
