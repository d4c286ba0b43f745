"""
api/routes/chords.py — Chord analysis endpoints.

Endpoints:
    POST /chords/analyze    — Name the chord(s) formed by a list of notes,
                              optionally with a fixed root and/or a key
    GET  /chords/qualities  — The chord catalog in matching priority order

Thin HTTP boundary: parses note names, delegates to core.music_theory.analyze().
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from api.schemas.chords import (
    ChordAnalyzeRequest,
    ChordAnalyzeResponse,
    InterpretationOut,
    QualityOut,
)
from core.config import AnalysisConfig
from core.music_theory.analysis import analyze
from core.music_theory.catalog import CHORD_CATALOG
from core.music_theory.notes import parse_note
from core.music_theory.types import (
    AnalysisResult,
    ChordAnalysis,
    DegreeAnalysis,
    KeyAnalysisResult,
)
from tools.music.parsing import chord_to_dict, degree_to_dict, key_label, resolve_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chords", tags=["chords"])


def _to_interpretations(
    result: AnalysisResult | ChordAnalysis | KeyAnalysisResult | DegreeAnalysis | None,
) -> list[InterpretationOut]:
    if result is None:
        return []
    if isinstance(result, KeyAnalysisResult):
        return [InterpretationOut(**degree_to_dict(d)) for d in result]
    if isinstance(result, AnalysisResult):
        return [InterpretationOut(**chord_to_dict(c)) for c in result]
    if isinstance(result, DegreeAnalysis):
        return [InterpretationOut(**degree_to_dict(result))]
    return [InterpretationOut(**chord_to_dict(result))]


# ---------------------------------------------------------------------------
# POST /chords/analyze
# ---------------------------------------------------------------------------


@router.post("/analyze", response_model=ChordAnalyzeResponse)
def analyze_chord(request: ChordAnalyzeRequest) -> ChordAnalyzeResponse:
    """Identify the chord formed by ``request.notes``.

    An input that matches nothing is not an error: the response carries an
    empty interpretation list and ``summary == "?"``.

    Raises:
        422: Unparseable note name, root or key, or an unknown mode.
    """
    try:
        notes = [parse_note(n) for n in request.notes]
        root = parse_note(request.root) if request.root else None
        key = resolve_key(request.key_root, request.key_mode) if request.key_root else None
    except ValueError as exc:
        logger.info("Rejected chord analysis request: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    config = AnalysisConfig(max_omissions=request.max_omissions)
    result = analyze(notes, root=root, key=key, config=config)
    interpretations = _to_interpretations(result)

    return ChordAnalyzeResponse(
        notes=[str(n) for n in notes],
        key=key_label(key, request.key_mode) if key is not None else None,
        best=interpretations[0].name if interpretations else None,
        summary=str(result) if result is not None else "?",
        interpretations=interpretations,
    )


# ---------------------------------------------------------------------------
# GET /chords/qualities
# ---------------------------------------------------------------------------


@router.get("/qualities", response_model=list[QualityOut])
def list_qualities() -> list[QualityOut]:
    """Return every catalog quality, richest first (the matcher's tie-break order)."""
    return [
        QualityOut(
            name=q.name,
            priority=q.priority,
            intervals=[str(i) for i in q.pattern.intervals],
            semitones=list(q.interval_semitones),
            tone_count=q.tone_count,
        )
        for q in CHORD_CATALOG
    ]
