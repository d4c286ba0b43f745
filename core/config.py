"""
Configuration dataclasses for the chord analysis engine.

These immutable config objects decouple tuning parameters from function
signatures, making it easy to define standard configurations and reuse them
across analysis calls.
"""

from dataclasses import dataclass

# A quality has at most 7 tones and its root can never be omitted.
MAX_OMITTABLE_TONES: int = 6


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Configuration for chord matching.

    Immutable configuration object that can be shared freely between
    concurrent analyze() calls.

    Attributes:
        max_omissions: Maximum number of catalog tones that may be absent from
            the sounding notes for an omission-tolerant match. Defaults to 2,
            the usual chord-naming convention (e.g. a 9th chord without its 5th
            and 3rd is still named as a 9th). 0 disables omission matching.

    Example:
        >>> config = AnalysisConfig(max_omissions=1)
        >>> result = analyze(notes, config=config)
    """

    max_omissions: int = 2

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not (0 <= self.max_omissions <= MAX_OMITTABLE_TONES):
            raise ValueError(
                f"max_omissions must be in [0, {MAX_OMITTABLE_TONES}], got {self.max_omissions}"
            )


# Pre-defined configurations

DEFAULT_ANALYSIS_CONFIG = AnalysisConfig()
"""Default configuration: up to 2 omitted tones."""

STRICT_ANALYSIS_CONFIG = AnalysisConfig(max_omissions=0)
"""Exact pitch-class-set matches only."""
