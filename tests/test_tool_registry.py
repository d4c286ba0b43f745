"""
Tests for tools/registry.py — registration, discovery of the chord tools
under tools/music, and the process-wide registry.
"""

import pytest

from tools.music.analyze_chord import AnalyzeChord
from tools.music.build_chord import BuildChord
from tools.registry import TOOL_PACKAGE, ToolRegistry, get_registry


class TestRegistration:
    def test_register_and_get(self):
        registry = ToolRegistry()
        tool = AnalyzeChord()
        registry.register(tool)
        assert registry.get("analyze_chord") is tool
        assert "analyze_chord" in registry

    def test_unknown_name(self):
        registry = ToolRegistry()
        assert registry.get("transpose") is None
        assert "transpose" not in registry

    def test_duplicate_name_rejected(self):
        registry = ToolRegistry()
        registry.register(BuildChord())
        with pytest.raises(ValueError, match="'build_chord' is already registered"):
            registry.register(BuildChord())

    def test_listing_sorted_by_name(self):
        registry = ToolRegistry()
        registry.register(BuildChord())
        registry.register(AnalyzeChord())
        assert registry.names() == ["analyze_chord", "build_chord"]
        assert [t["name"] for t in registry.list_tools()] == ["analyze_chord", "build_chord"]


class TestDiscovery:
    def test_default_package(self):
        assert TOOL_PACKAGE == "tools.music"

    def test_finds_both_chord_tools(self):
        registry = ToolRegistry()
        assert registry.discover() == 2
        assert registry.names() == ["analyze_chord", "build_chord"]

    def test_rediscovery_adds_nothing(self):
        registry = ToolRegistry()
        registry.discover()
        assert registry.discover() == 0

    def test_keeps_already_registered_tool(self):
        registry = ToolRegistry()
        mine = AnalyzeChord()
        registry.register(mine)
        assert registry.discover() == 1
        assert registry.get("analyze_chord") is mine

    def test_missing_package(self):
        assert ToolRegistry().discover("tools.nonexistent") == 0

    def test_discovered_tool_analyzes(self):
        registry = ToolRegistry()
        registry.discover()
        result = registry.get("analyze_chord")(notes="G3 B3 D4 F4")
        assert result.data["best"] == "G7"


class TestGetRegistry:
    def test_singleton(self):
        assert get_registry() is get_registry()

    def test_discovered_on_first_use(self):
        assert get_registry().names() == ["analyze_chord", "build_chord"]
