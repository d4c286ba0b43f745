"""
analyze_chord tool — name the chord formed by a set of notes.

Pure computation: no I/O.
Given a note list (+ optional fixed root, + optional key), returns:
  - Every plausible chord interpretation, simplest first
  - Root, quality, bass, inversion and omitted tones of each
  - The roman numeral and scale degree of each when a key is given
"""

from typing import Any

from core.config import AnalysisConfig
from core.music_theory.analysis import analyze
from core.music_theory.notes import parse_note
from core.music_theory.types import AnalysisResult, KeyAnalysisResult
from tools.base import ChordTool, ToolParameter, ToolResult
from tools.music.parsing import (
    chord_to_dict,
    degree_to_dict,
    key_label,
    parse_note_list,
    resolve_key,
)


class AnalyzeChord(ChordTool):
    """
    Identify chords from sounding notes.

    Ambiguity is preserved: "A C E G" yields both Am7 and C6/A, ranked by
    omissions, inversion and name length.
    """

    @property
    def name(self) -> str:
        return "analyze_chord"

    @property
    def description(self) -> str:
        return (
            "Name the chord formed by a set of notes, e.g. 'C4 E4 G4 Bb4' → C7. "
            "Returns every interpretation ranked simplest first, with root, "
            "quality, bass note, inversion and omitted tones. "
            "Give key_root (and key_mode) to also get roman numerals such as "
            "'V7' or 'bVI'. Give root to force the chord root."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="notes",
                type=str,
                description=(
                    "Notes separated by spaces or commas, e.g. 'C4 E4 G4 Bb4' or 'E, G, C'. "
                    "Octave defaults to 4."
                ),
                required=True,
            ),
            ToolParameter(
                name="root",
                type=str,
                description="Optional fixed chord root (e.g. 'A'). Empty: try every note.",
                required=False,
                default="",
            ),
            ToolParameter(
                name="key_root",
                type=str,
                description="Optional key tonic (e.g. 'C', 'Eb'). Empty: no roman numerals.",
                required=False,
                default="",
            ),
            ToolParameter(
                name="key_mode",
                type=str,
                description="Key mode, e.g. 'major', 'minor', 'dorian'. Default: 'major'.",
                required=False,
                default="major",
            ),
            ToolParameter(
                name="max_omissions",
                type=int,
                description="Most chord tones that may be missing from a match (0–6). Default: 2.",
                required=False,
                default=2,
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        """
        Analyze the notes.

        Returns:
            ToolResult with the note list, key, best name and all
            interpretations. Success with an empty list when nothing matches.
        """
        notes_raw: str = kwargs.get("notes") or ""
        root_raw: str = (kwargs.get("root") or "").strip()
        key_root_raw: str = (kwargs.get("key_root") or "").strip()
        key_mode: str = (kwargs.get("key_mode") or "major").strip().lower()
        max_omissions = kwargs.get("max_omissions")

        try:
            notes = parse_note_list(notes_raw)
        except ValueError as exc:
            return ToolResult(success=False, error=str(exc))

        root = None
        if root_raw:
            try:
                root = parse_note(root_raw)
            except ValueError:
                return ToolResult(
                    success=False,
                    error=f"Cannot parse root note {root_raw!r}. Use e.g. 'A', 'F#', 'Bb'.",
                )

        key = None
        if key_root_raw:
            try:
                key = resolve_key(key_root_raw, key_mode)
            except ValueError as exc:
                return ToolResult(success=False, error=str(exc))

        try:
            config = AnalysisConfig(max_omissions=2 if max_omissions is None else max_omissions)
        except ValueError as exc:
            return ToolResult(success=False, error=str(exc))

        result = analyze(notes, root=root, key=key, config=config)

        if isinstance(result, KeyAnalysisResult):
            interpretations = [degree_to_dict(d) for d in result]
        elif isinstance(result, AnalysisResult):
            interpretations = [chord_to_dict(c) for c in result]
        elif result is None:
            interpretations = []
        elif key is not None:
            interpretations = [degree_to_dict(result)]
        else:
            interpretations = [chord_to_dict(result)]

        best = interpretations[0] if interpretations else None
        return ToolResult(
            success=True,
            data={
                "notes": [str(n) for n in notes],
                "key": key_label(key, key_mode) if key is not None else None,
                "best": best["name"] if best else None,
                "roman_numeral": best.get("roman_numeral") if best else None,
                "interpretations": interpretations,
            },
            metadata={
                "interpretation_count": len(interpretations),
                "max_omissions": config.max_omissions,
                "fixed_root": root.pitch_name if root is not None else None,
            },
        )
