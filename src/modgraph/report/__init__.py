"""Report assembly: recommendations, integration contract, final result."""

from .assembler import assemble_result, collect_external_dependencies
from .contract import SECTION_TITLES, render_contract
from .recommendations import generate_recommendations

__all__ = [
    "SECTION_TITLES",
    "assemble_result",
    "collect_external_dependencies",
    "generate_recommendations",
    "render_contract",
]
