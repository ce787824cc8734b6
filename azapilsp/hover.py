"""Hover information for configuration properties."""

from __future__ import annotations

from typing import Any

from azapilsp.ranges import MARKDOWN, HclRange, MarkupContent, hcl_range_to_lsp


def make_hover(
    name: str, modifier: str, prop_type: str, description: str, rng: HclRange
) -> dict[str, Any]:
    """A hover result in LSP form describing one property over `rng`."""
    contents = MarkupContent(
        MARKDOWN, f"```\n{name}: {modifier}({prop_type})\n```\n{description}"
    )
    return {"contents": contents.to_dict(), "range": hcl_range_to_lsp(rng).to_dict()}