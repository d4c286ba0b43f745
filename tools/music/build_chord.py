"""
build_chord tool — construct a chord on a scale degree of a key.

Pure computation: no I/O.
Either stacks diatonic thirds on the degree ("5" with tones=4 in C major →
G B D F) or applies a catalog quality to a possibly altered degree
("b6" with quality "" in C major → Ab C Eb). The built chord is then
analyzed in the key, so the response carries its name and roman numeral.
"""

from typing import Any

from core.music_theory.catalog import get_quality
from core.music_theory.degree import parse_degree
from core.music_theory.roman import analyze_in_key
from tools.base import ChordTool, ToolParameter, ToolResult
from tools.music.parsing import degree_to_dict, key_label, resolve_key

MAX_STACKED_TONES: int = 7


class BuildChord(ChordTool):
    """
    Build a chord relative to a key.

    Stacked-thirds mode needs a diatonic degree; borrowed chords (bVI,
    bVII, #IV°) go through the quality parameter instead.
    """

    @property
    def name(self) -> str:
        return "build_chord"

    @property
    def description(self) -> str:
        return (
            "Build the chord on a scale degree of a key. "
            "With tones (3 = triad, 4 = seventh chord, up to 7 = thirteenth), stacks "
            "the key's own thirds on the degree. With quality (e.g. '', 'm7', '7'), "
            "applies that chord shape to the degree, which may be altered ('b6', '#4'). "
            "Returns the notes, the chord name and its roman numeral in the key."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="key_root",
                type=str,
                description="Key tonic with optional octave, e.g. 'C', 'Eb3'.",
                required=True,
            ),
            ToolParameter(
                name="degree",
                type=str,
                description="Scale degree: '1'–'7', optionally altered as 'b6' or '#4'.",
                required=True,
            ),
            ToolParameter(
                name="key_mode",
                type=str,
                description="Key mode, e.g. 'major', 'minor', 'dorian'. Default: 'major'.",
                required=False,
                default="major",
            ),
            ToolParameter(
                name="tones",
                type=int,
                description="Number of stacked thirds (1–7). Default: 3.",
                required=False,
                default=3,
                choices=tuple(range(1, MAX_STACKED_TONES + 1)),
            ),
            ToolParameter(
                name="quality",
                type=str,
                description=(
                    "Optional catalog quality applied to the degree instead of stacking "
                    "thirds, e.g. '' (major), 'm', '7', 'maj7', 'm7b5'."
                ),
                required=False,
                default=None,
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        key_root_raw: str = (kwargs.get("key_root") or "").strip()
        key_mode: str = (kwargs.get("key_mode") or "major").strip().lower()
        degree_raw: str = kwargs.get("degree") or ""
        tones: int = kwargs.get("tones") or 3
        quality_name: str | None = kwargs.get("quality")

        try:
            key = resolve_key(key_root_raw, key_mode)
            degree = parse_degree(degree_raw)
        except ValueError as exc:
            return ToolResult(success=False, error=str(exc))

        if degree.number > len(key):
            return ToolResult(
                success=False,
                error=f"degree must be in 1–{len(key)} for {key_mode}. Got: {degree_raw!r}",
            )

        if quality_name is not None:
            try:
                quality = get_quality(quality_name)
            except ValueError as exc:
                return ToolResult(success=False, error=str(exc))
            chord = key.chord_at(degree, quality.pattern)
            mode = "quality"
        else:
            if degree.alteration != 0:
                return ToolResult(
                    success=False,
                    error=(
                        f"Stacked thirds need a diatonic degree, got {degree_raw!r}. "
                        "Pass a quality to build on an altered degree."
                    ),
                )
            chord = key.chord_on(degree.number, tones)
            mode = "stacked"

        result = analyze_in_key(chord.notes, key)
        best = degree_to_dict(result.best) if result else None

        return ToolResult(
            success=True,
            data={
                "key": key_label(key, key_mode),
                "degree": str(degree),
                "notes": [str(n) for n in chord],
                "chord": best["name"] if best else None,
                "roman_numeral": best["roman_numeral"] if best else None,
                "analysis": best,
            },
            metadata={"construction": mode, "tone_count": len(chord)},
        )
