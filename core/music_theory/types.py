"""
core/music_theory/types.py — Frozen value objects produced by chord analysis.

All types are immutable frozen dataclasses — safe to hash, cache, and share
across concurrent analysis calls.

Types:
    ChordAnalysis      — one interpretation: root, quality, bass, inversion, omissions
    AnalysisResult     — ranked, ambiguity-preserving list of ChordAnalysis
    DegreeAnalysis     — a ChordAnalysis placed in a key, with its roman numeral
    KeyAnalysisResult  — ranked list of DegreeAnalysis
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from core.music_theory.degree import Degree
from core.music_theory.notes import Note

# ---------------------------------------------------------------------------
# ChordAnalysis
# ---------------------------------------------------------------------------


def format_omissions(omissions: tuple[str, ...]) -> str:
    """Render omission labels as '(no5,no9)', or '' when there are none."""
    if not omissions:
        return ""
    return "(" + ",".join(omissions) + ")"


@dataclass(frozen=True)
class ChordAnalysis:
    """A single chord interpretation.

    Attributes:
        root:       Chord root, respelled with natural preference
        quality:    Catalog quality name, e.g. "", "m7", "7#9"
        bass:       Lowest sounding note when it is not the root, else None
        inversion:  Index of the bass in the quality's interval pattern (0 = root position
                    or bass not a chord tone)
        omissions:  Labels of implied but absent tones, e.g. ("no5",)

    ``str()`` is the canonical chord symbol, e.g. "C", "Dm7", "G7(no5)", "C/E".
    """

    root: Note
    quality: str
    bass: Note | None = None
    inversion: int = 0
    omissions: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.inversion < 0:
            raise ValueError(f"ChordAnalysis.inversion must be >= 0, got {self.inversion}")

    @property
    def name(self) -> str:
        return str(self)

    def __str__(self) -> str:
        text = self.root.simplify().pitch_name + self.quality + format_omissions(self.omissions)
        if self.bass is not None:
            text += "/" + self.bass.simplify().pitch_name
        return text


@dataclass(frozen=True)
class AnalysisResult:
    """Ranked interpretations of a set of notes. May be empty."""

    interpretations: tuple[ChordAnalysis, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.interpretations)

    def __iter__(self) -> Iterator[ChordAnalysis]:
        return iter(self.interpretations)

    def __getitem__(self, index: int) -> ChordAnalysis:
        return self.interpretations[index]

    def __bool__(self) -> bool:
        return bool(self.interpretations)

    @property
    def best(self) -> ChordAnalysis | None:
        """Top-ranked interpretation, or None when nothing matched."""
        return self.interpretations[0] if self.interpretations else None

    def __str__(self) -> str:
        if not self.interpretations:
            return "?"
        return " | ".join(str(a) for a in self.interpretations)


# ---------------------------------------------------------------------------
# DegreeAnalysis
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DegreeAnalysis:
    """A chord interpretation placed within a key.

    Attributes:
        chord:          The underlying ChordAnalysis
        degree:         Scale degree of the root, or None if it could not be placed
        roman_numeral:  e.g. "V7", "vii°", "bVI", "ii7(no5)"; the plain chord
                        symbol when degree is None
    """

    chord: ChordAnalysis
    degree: Degree | None
    roman_numeral: str

    def __str__(self) -> str:
        return self.roman_numeral


@dataclass(frozen=True)
class KeyAnalysisResult:
    """Ranked DegreeAnalysis values, in the order of the underlying AnalysisResult."""

    interpretations: tuple[DegreeAnalysis, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.interpretations)

    def __iter__(self) -> Iterator[DegreeAnalysis]:
        return iter(self.interpretations)

    def __getitem__(self, index: int) -> DegreeAnalysis:
        return self.interpretations[index]

    def __bool__(self) -> bool:
        return bool(self.interpretations)

    @property
    def best(self) -> DegreeAnalysis | None:
        return self.interpretations[0] if self.interpretations else None

    def __str__(self) -> str:
        if not self.interpretations:
            return "?"
        return " | ".join(str(d) for d in self.interpretations)
