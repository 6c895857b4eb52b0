"""Tests for the modgraph command line."""

import json

import pytest
from typer.testing import CliRunner

from modgraph import __version__
from modgraph.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MODGRAPH_MODULE_DEPTH", raising=False)


@pytest.fixture
def snapshot_file(tmp_path, shop_snapshot):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(shop_snapshot))
    return path


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestAnalyzeCommand:
    def test_rich_output(self, snapshot_file):
        result = runner.invoke(app, ["analyze", str(snapshot_file)])
        assert result.exit_code == 0, result.output
        assert "MODGRAPH" in result.stdout
        assert "services" in result.stdout

    def test_json_output(self, snapshot_file):
        result = runner.invoke(app, ["analyze", str(snapshot_file), "--format", "json", "-q"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["summary"]["totalModules"] == 5
        assert data["metrics"]["qualityScore"] == 52

    def test_markdown_output(self, snapshot_file):
        result = runner.invoke(app, ["analyze", str(snapshot_file), "-f", "markdown", "-q"])
        assert result.exit_code == 0, result.output
        assert result.stdout.startswith("# shop - Integration Contract")

    def test_output_file(self, snapshot_file, tmp_path):
        target = tmp_path / "contract.md"
        result = runner.invoke(
            app, ["analyze", str(snapshot_file), "-f", "markdown", "-o", str(target)]
        )
        assert result.exit_code == 0, result.output
        assert "Report written to" in result.stdout
        assert "## 2. Architecture Diagram" in target.read_text()

    def test_module_depth_option(self, tmp_path, make_snapshot, file_dict):
        path = tmp_path / "nested.json"
        path.write_text(json.dumps(make_snapshot([file_dict("src/auth/a.js"), file_dict("src/db/b.js")])))
        result = runner.invoke(app, ["analyze", str(path), "-f", "json", "-q", "-d", "2"])
        assert result.exit_code == 0, result.output
        assert [m["path"] for m in json.loads(result.stdout)["modules"]] == ["src/auth", "src/db"]

    def test_missing_prerequisite(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"structure": {"projectPath": "/x"}}))
        result = runner.invoke(app, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "Error: Missing prerequisite: language, files" in result.stdout

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        result = runner.invoke(app, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "Invalid snapshot file" in result.stdout

    def test_unknown_format(self, snapshot_file):
        result = runner.invoke(app, ["analyze", str(snapshot_file), "-f", "xml"])
        assert result.exit_code == 1
        assert "Unknown formatter" in result.stdout

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "nope.json")])
        assert result.exit_code != 0


class TestModuleCommand:
    def test_json_detail(self, snapshot_file):
        result = runner.invoke(app, ["module", str(snapshot_file), "services", "-f", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["module"]["name"] == "services"
        assert data["metrics"]["files"] == 2
        relationships = {r["name"]: r["relationship"] for r in data["relatedModules"]}
        assert relationships == {"models": "depends_on", "utils": "depends_on", "controllers": "used_by"}

    def test_rich_detail(self, snapshot_file):
        result = runner.invoke(app, ["module", str(snapshot_file), "utils"])
        assert result.exit_code == 0, result.output
        assert "utils" in result.stdout
        assert "Related Modules" in result.stdout

    def test_unknown_module(self, snapshot_file):
        result = runner.invoke(app, ["module", str(snapshot_file), "payments"])
        assert result.exit_code == 1
        assert "Module not found: payments" in result.stdout

    def test_unknown_format(self, snapshot_file):
        result = runner.invoke(app, ["module", str(snapshot_file), "services", "-f", "markdown"])
        assert result.exit_code == 1
        assert "Unknown format: 'markdown'" in result.stdout
