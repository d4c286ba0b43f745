"""
tools/registry.py — Chord tools by name.

discover() imports every module of the tool package and registers the
concrete ChordTool classes each module defines, so adding a tool means
adding a module under tools/music. get_registry() holds the process-wide
instance used by the HTTP layer.
"""

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Any

from tools.base import ChordTool

logger = logging.getLogger(__name__)

TOOL_PACKAGE: str = "tools.music"


def _tool_classes(module: ModuleType) -> list[type[ChordTool]]:
    """Concrete ChordTool subclasses defined in ``module`` itself, not imported into it."""
    return [
        obj
        for _name, obj in inspect.getmembers(module, inspect.isclass)
        if issubclass(obj, ChordTool)
        and obj.__module__ == module.__name__
        and not inspect.isabstract(obj)
    ]


class ToolRegistry:
    """Name → ChordTool instance."""

    def __init__(self) -> None:
        self._tools: dict[str, ChordTool] = {}

    def register(self, tool: ChordTool) -> None:
        """Add ``tool``; a second tool under the same name raises ValueError."""
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> ChordTool | None:
        return self._tools.get(name)

    def names(self) -> list[str]:
        return sorted(self._tools)

    def list_tools(self) -> list[dict[str, Any]]:
        """Tool schemas sorted by name."""
        return [self._tools[name].to_dict() for name in self.names()]

    def discover(self, package_name: str = TOOL_PACKAGE) -> int:
        """Register the tools found in ``package_name``.

        Tools already registered under the same name are left alone, so
        repeated discovery is harmless.

        Returns:
            Number of tools added; 0 when the package cannot be imported
        """
        try:
            package = importlib.import_module(package_name)
        except ImportError:
            logger.debug("Tool package %s not importable", package_name)
            return 0

        added = 0
        search_path = getattr(package, "__path__", [])
        for module_info in pkgutil.iter_modules(search_path, prefix=f"{package_name}."):
            module = importlib.import_module(module_info.name)
            for tool_class in _tool_classes(module):
                tool = tool_class()
                if tool.name not in self._tools:
                    self.register(tool)
                    added += 1

        logger.debug("Discovered %d tools in %s", added, package_name)
        return added

    def __contains__(self, name: str) -> bool:
        return name in self._tools


_registry: ToolRegistry | None = None


def get_registry() -> ToolRegistry:
    """Process-wide registry, discovered on first use."""
    global _registry
    if _registry is None:
        _registry = ToolRegistry()
        _registry.discover()
    return _registry
