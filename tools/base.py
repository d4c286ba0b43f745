"""
tools/base.py — Chord tool protocol.

A ChordTool takes text arguments (note lists, key names, degree strings),
calls core.music_theory and returns a ToolResult holding JSON-ready data.
Calling a tool checks its declared parameters first; an exception raised
by execute() after that becomes a failed ToolResult and a log warning.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolParameter:
    """One keyword argument of a chord tool.

    ``choices`` restricts the value to a fixed set (e.g. tone counts 1–7);
    None accepts any value of ``type``.
    """

    name: str
    type: type
    description: str
    required: bool = True
    default: Any = None
    choices: tuple[Any, ...] | None = None

    def check(self, value: Any) -> str | None:
        """Error message for ``value``, or None when it is acceptable."""
        if value is None:
            return f"Required parameter '{self.name}' is missing" if self.required else None

        # bool is an int subclass, but tones=True is not a tone count
        wrong_type = not isinstance(value, self.type) or (
            isinstance(value, bool) and self.type is not bool
        )
        if wrong_type:
            return f"Parameter '{self.name}' must be {self.type.__name__}, got {type(value).__name__}"

        if self.choices is not None and value not in self.choices:
            return f"Parameter '{self.name}' must be one of {list(self.choices)}, got {value!r}"
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.__name__,
            "description": self.description,
            "required": self.required,
            "default": self.default,
            "choices": list(self.choices) if self.choices is not None else None,
        }


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of a tool call.

    Attributes:
        success:  False for bad input or a failed computation
        data:     Analysis payload (notes, chord names, numerals)
        error:    Message shown to the caller when success is False
        metadata: Settings the result was computed with
    """

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] | None = None


class ChordTool(ABC):
    """
    Base class of the chord tools discovered by tools.registry.

    Subclasses declare ``name``, ``description`` and ``parameters`` and
    implement ``execute()``, which receives the raw keyword arguments once
    every declared parameter has passed ToolParameter.check().
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, e.g. "analyze_chord"."""

    @property
    @abstractmethod
    def description(self) -> str:
        """What the tool computes and the text format it expects."""

    @property
    @abstractmethod
    def parameters(self) -> list[ToolParameter]: ...

    @abstractmethod
    def execute(self, **kwargs: Any) -> ToolResult: ...

    def __call__(self, **kwargs: Any) -> ToolResult:
        for param in self.parameters:
            error = param.check(kwargs.get(param.name))
            if error is not None:
                return ToolResult(success=False, error=error)

        try:
            return self.execute(**kwargs)
        except Exception as e:
            logger.warning("Tool %s failed: %s", self.name, e)
            return ToolResult(success=False, error=f"Tool execution failed: {e}")

    def to_dict(self) -> dict[str, Any]:
        """Schema served by GET /tools/list."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [p.to_dict() for p in self.parameters],
        }
