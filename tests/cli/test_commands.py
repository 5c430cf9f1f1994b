"""Tests for the analyze, plan and modes commands."""

import json

import pytest
from typer.testing import CliRunner

from deobf_insight.cli import app

runner = CliRunner()

PROGUARD_DUMP = {
    "classes": [
        {
            "name": "com.example.a.a",
            "super": "android.app.Activity",
            "fields": [{"name": "a", "type": "int"}, {"name": "b", "type": "java.lang.String"}],
            "methods": [
                {"name": "<init>", "return": "void"},
                {"name": "onCreate", "return": "void", "args": ["android.os.Bundle"], "override": True},
                {"name": "a", "return": "boolean"},
                {"name": "b", "return": "void", "args": ["int"]},
            ],
        },
        {
            "name": "com.example.a.b",
            "fields": [{"name": "c", "type": "long"}],
            "methods": [{"name": "a", "return": "java.lang.String"}],
        },
        {
            "name": "com.example.a.b$a",
            "flags": ["interface"],
            "methods": [{"name": "a", "return": "void", "args": ["int"], "flags": ["abstract"]}],
        },
    ]
}


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run from an empty directory with no global or project config."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    for key in ("DEOBF_MODE", "DEOBF_VERBOSITY"):
        monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture
def dump(workdir):
    path = workdir / "symbols.json"
    path.write_text(json.dumps(PROGUARD_DUMP))
    return path


class TestAnalyzeCommand:
    def test_json_output(self, dump):
        result = runner.invoke(app, ["analyze", str(dump), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["detected_tool"] == "ProGuard/R8"
        assert data["recommended_mode"] == "aggressive"
        assert data["classes"]["total"] == 3

    def test_plain_report(self, dump):
        result = runner.invoke(app, ["analyze", str(dump), "--report", "--quiet"])

        assert result.exit_code == 0, result.output
        assert "=== Deobfuscation Analysis Report ===" in result.stdout
        assert "Use AGGRESSIVE deobfuscation mode" in result.stdout

    def test_rich_output(self, dump):
        result = runner.invoke(app, ["analyze", str(dump), "--quiet"])

        assert result.exit_code == 0, result.output
        assert "Obfuscation Analysis" in result.stdout
        assert "AGGRESSIVE" in result.stdout

    def test_malformed_dump(self, workdir):
        bad = workdir / "bad.json"
        bad.write_text("{not json")
        result = runner.invoke(app, ["analyze", str(bad), "--quiet"])

        assert result.exit_code == 1
        assert "Cannot load symbols" in result.output

    def test_missing_file(self, workdir):
        result = runner.invoke(app, ["analyze", str(workdir / "nope.json")])
        assert result.exit_code == 2


class TestPlanCommand:
    def test_json_plan(self, dump):
        result = runner.invoke(app, ["plan", str(dump), "--mode", "default", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["mode"] == "DEFAULT"
        assert data["renamed"] == 11
        assert data["entries"][1] == {
            "kind": "class",
            "qualified_name": "com.example.a.a",
            "original": "a",
            "alias": "ActivityC0000a",
        }

    def test_parameter_suggestions(self, dump):
        result = runner.invoke(
            app, ["plan", str(dump), "--mode", "default", "--json", "--params"]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["renamed"] == 14
        assert [(e["qualified_name"], e["alias"]) for e in data["entries"][-3:]] == [
            ("com.example.a.a.onCreate#0", "bundle"),
            ("com.example.a.a.b#0", "index"),
            ("com.example.a.b$a.a#0", "index"),
        ]

    def test_auto_mode(self, dump):
        result = runner.invoke(app, ["plan", str(dump), "--mode", "auto", "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["mode"] == "AGGRESSIVE"

    def test_index_seeds(self, dump):
        result = runner.invoke(
            app, ["plan", str(dump), "--mode", "default", "--index", "0,10,0,0", "--json"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["entries"][1]["alias"] == "ActivityC0010a"

    def test_bad_index_seeds(self, dump):
        result = runner.invoke(app, ["plan", str(dump), "--index", "1,2,3"])
        assert result.exit_code == 2

    def test_unknown_mode(self, dump):
        result = runner.invoke(app, ["plan", str(dump), "--mode", "bogus", "--quiet"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_table_limit(self, dump):
        result = runner.invoke(
            app, ["plan", str(dump), "--mode", "default", "--limit", "3", "--quiet"]
        )

        assert result.exit_code == 0, result.output
        assert "11 symbol(s) renamed" in result.stdout
        assert "8 more" in result.stdout

    def test_mode_from_project_config(self, dump, workdir):
        (workdir / "deobf-insight.toml").write_text('mode = "disabled"\n')
        result = runner.invoke(app, ["plan", str(dump), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["mode"] == "DISABLED"
        assert data["renamed"] == 0


class TestModesCommand:
    def test_json_lists_every_mode(self, workdir):
        result = runner.invoke(app, ["modes", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [m["mode"] for m in data] == [
            "disabled", "conservative", "default", "enhanced", "aggressive", "auto",
        ]
        assert data[0]["conditions"] == ["No conditions (disabled)"]

    def test_detail(self, workdir):
        result = runner.invoke(app, ["modes", "--detail"])

        assert result.exit_code == 0, result.output
        assert "Mode: CONSERVATIVE" in result.stdout
        assert "Common words preservation" in result.stdout

    def test_table(self, workdir):
        result = runner.invoke(app, ["modes"])

        assert result.exit_code == 0, result.output
        assert "aggressive" in result.stdout
