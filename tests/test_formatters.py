"""Tests for the formatters package."""

import json

import pytest
from rich.console import Console

from modgraph.analysis.engine import AnalysisEngine
from modgraph.formatters import (
    JsonFormatter,
    MarkdownFormatter,
    RichFormatter,
    get_formatter,
)


@pytest.fixture
def shop_result(shop_snapshot):
    return AnalysisEngine(shop_snapshot).run()


@pytest.fixture
def cyclic_result(cyclic_snapshot):
    return AnalysisEngine(cyclic_snapshot).run()


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("rich"), RichFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("markdown"), MarkdownFormatter)

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestJsonFormatter:
    def test_format_returns_valid_json(self, shop_result):
        data = json.loads(JsonFormatter().format(shop_result))
        assert data["projectName"] == "shop"
        assert len(data["modules"]) == 5
        assert data["contractDocument"] == shop_result.contract_document

    def test_render_prints(self, shop_result, capsys):
        JsonFormatter().render(shop_result)
        assert json.loads(capsys.readouterr().out)["summary"]["framework"] == "Express"


class TestMarkdownFormatter:
    def test_format_is_contract(self, shop_result):
        assert MarkdownFormatter().format(shop_result) == shop_result.contract_document


class TestRichFormatter:
    def _format(self, result):
        return RichFormatter(Console(width=120, force_terminal=False)).format(result)

    def test_summary_and_tables(self, shop_result):
        out = self._format(shop_result)
        assert "MODGRAPH" in out
        assert "Quality score: 52/100" in out
        assert "Integration Points" in out
        assert "Recommendations" in out
        assert "Risks" not in out

    def test_risks_table(self, cyclic_result):
        out = self._format(cyclic_result)
        assert "Circular dependency" in out
        assert "auth -> db -> auth" in out

    def test_empty_result(self, make_snapshot):
        result = AnalysisEngine(make_snapshot([])).run()
        out = self._format(result)
        assert "Modules: 0" in out
        assert "Integration Points" not in out
