"""Markdown formatter: the integration contract document."""

from ..analysis.models import AnalysisResult
from .base import BaseFormatter


class MarkdownFormatter(BaseFormatter):
    def render(self, result: AnalysisResult) -> None:
        print(self.format(result))

    def format(self, result: AnalysisResult) -> str:
        return result.contract_document
