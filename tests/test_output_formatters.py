"""Tests for the formatters package."""

import json

import pytest
from rich.console import Console

from deobf_insight.analysis import ObfuscationStats
from deobf_insight.classify import ObfuscatorTool
from deobf_insight.formatters import JsonFormatter, RichFormatter, get_formatter
from deobf_insight.models import RenameEntry


def _make_stats(tied=False):
    stats = ObfuscationStats(
        total_classes=4,
        obfuscated_classes=3,
        total_methods=10,
        obfuscated_methods=5,
        total_fields=6,
        obfuscated_fields=2,
        detected_tool=ObfuscatorTool.PROGUARD,
        tool_votes={ObfuscatorTool.PROGUARD: 3},
        ambiguous_tool_vote=tied,
    )
    stats.calculate_percentages()
    return stats


def _make_entries(n):
    return [RenameEntry("field", f"com.a.b.f{i}", f"f{i}", f"f{i:03d}") for i in range(n)]


def _recording_console():
    return Console(record=True, width=100, force_terminal=False)


class TestGetFormatter:
    def test_known_names(self):
        assert isinstance(get_formatter("rich"), RichFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)

    def test_limit_reaches_rich(self):
        assert get_formatter("rich", limit=5).limit == 5

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("csv")


class TestJsonFormatter:
    def test_stats(self):
        data = json.loads(JsonFormatter().format_stats(_make_stats()))
        assert data["overall_rate"] == 50.0
        assert data["classes"]["rate"] == 75.0
        assert data["recommended_mode"] == "enhanced"

    def test_plan(self):
        data = json.loads(JsonFormatter().format_plan(_make_entries(2), "DEFAULT"))
        assert data["mode"] == "DEFAULT"
        assert data["renamed"] == 2
        assert data["entries"][1]["alias"] == "f001"

    def test_render_prints(self, capsys):
        JsonFormatter().render_plan([], "DISABLED")
        assert json.loads(capsys.readouterr().out)["renamed"] == 0


class TestRichFormatter:
    def test_stats_panel(self):
        console = _recording_console()
        RichFormatter(console=console).render_stats(_make_stats())
        text = console.export_text()

        assert "Obfuscation Analysis" in text
        assert "ProGuard/R8" in text
        assert "50.0%" in text
        assert "ENHANCED" in text

    def test_tied_vote_marked(self):
        console = _recording_console()
        RichFormatter(console=console).render_stats(_make_stats(tied=True))
        assert "tied vote" in console.export_text()

    def test_plan_limit(self):
        console = _recording_console()
        RichFormatter(console=console, limit=2).render_plan(_make_entries(5), "DEFAULT")
        text = console.export_text()

        assert "DEFAULT mode: 5 symbol(s) renamed" in text
        assert "com.a.b.f1" in text
        assert "com.a.b.f2" not in text
        assert "... 3 more" in text

    def test_empty_plan(self):
        console = _recording_console()
        RichFormatter(console=console).render_plan([], "CONSERVATIVE")
        assert "0 symbol(s) renamed" in console.export_text()
