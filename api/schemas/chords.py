"""
api/schemas/chords.py — Pydantic request/response schemas for chord endpoints.

Covers:
    /chords/analyze    — ChordAnalyzeRequest / ChordAnalyzeResponse
    /chords/qualities  — QualityOut list
"""

from pydantic import BaseModel, Field, field_validator

from core.config import MAX_OMITTABLE_TONES

MAX_NOTES: int = 32

# ---------------------------------------------------------------------------
# Shared sub-schemas
# ---------------------------------------------------------------------------


class InterpretationOut(BaseModel):
    """One chord interpretation; degree fields are set only when a key was given."""

    name: str
    root: str
    quality: str
    bass: str | None = None
    inversion: int = Field(0, ge=0)
    omissions: list[str] = Field(default_factory=list)
    degree: str | None = None
    roman_numeral: str | None = None


class QualityOut(BaseModel):
    """A chord catalog entry."""

    name: str
    priority: int = Field(..., ge=0)
    intervals: list[str]
    semitones: list[int]
    tone_count: int = Field(..., ge=1)


# ---------------------------------------------------------------------------
# /chords/analyze
# ---------------------------------------------------------------------------


class ChordAnalyzeRequest(BaseModel):
    """Request body for POST /chords/analyze."""

    notes: list[str] = Field(..., min_length=1, max_length=MAX_NOTES)
    root: str | None = None
    key_root: str | None = None
    key_mode: str = "major"
    max_omissions: int = Field(2, ge=0, le=MAX_OMITTABLE_TONES)

    @field_validator("notes")
    @classmethod
    def notes_not_blank(cls, v: list[str]) -> list[str]:
        stripped = [n.strip() for n in v]
        if any(not n for n in stripped):
            raise ValueError("note names must not be blank")
        return stripped

    @field_validator("key_mode")
    @classmethod
    def normalise_mode(cls, v: str) -> str:
        return v.strip().lower()


class ChordAnalyzeResponse(BaseModel):
    """Response body for POST /chords/analyze."""

    notes: list[str]
    key: str | None = None
    best: str | None = None
    summary: str
    interpretations: list[InterpretationOut]
