"""Header and paragraph rendering for plain text blocks."""

from __future__ import annotations

from .config import RenderConfig
from .constants import HEADER_PATTERN


def parse_header(block: str, config: RenderConfig | None = None) -> str | None:
    """Rewrite every ``#``-prefixed line of a block as a heading.

    Levels one to six are recognized; lines without a heading marker are left
    as they are.

    Examples:
        parse_header("## Usage")  # "<h2>Usage</h2>"
        parse_header("####### too deep")  # None
    """
    if HEADER_PATTERN.search(block) is None:
        return None

    def _heading(match):
        level = len(match.group(1))
        return f"<h{level}>{match.group(2)}</h{level}>"

    return HEADER_PATTERN.sub(_heading, block)


def parse_paragraph(block: str, config: RenderConfig | None = None) -> str:
    return f"<p>{block}</p>"


def parse_text(block: str, config: RenderConfig | None = None) -> str:
    """Render a block of text as headings when it has any, else as a paragraph."""
    heading = parse_header(block, config)
    return heading if heading is not None else parse_paragraph(block, config)
