"""Block-level parsing."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import RenderConfig
from .constants import BLOCK_SEPARATOR
from .fences import fence_close, open_and_close
from .inline import rewrite_first_image
from .lists import parse_list
from .models import FenceState
from .paragraphs import parse_header, parse_paragraph

logger = logging.getLogger(__name__)


def parse_image_paragraph(block: str, config: RenderConfig | None = None) -> str | None:
    """Wrap a block holding an image, rewriting its first image only."""
    config = config or RenderConfig()
    result = rewrite_first_image(block, config.image_wrapper_class)
    return result.text if result.matched else None


# Tried in order once fence detection has declined the block.
BLOCK_CLASSIFIERS: tuple[Callable[[str, RenderConfig], str | None], ...] = (
    parse_list,
    parse_header,
    parse_image_paragraph,
)


def classify_block(block: str, config: RenderConfig) -> str:
    for classifier in BLOCK_CLASSIFIERS:
        fragment = classifier(block, config)
        if fragment is not None:
            return fragment
    return parse_paragraph(block, config)


def advance(
    state: FenceState, block: str, config: RenderConfig | None = None
) -> tuple[FenceState, str]:
    """Render one block and compute the fence state for the next one.

    While a fence is open the block is emitted raw unless it contains a
    closing fence. Blocks inside an open fence are prefixed with a newline
    so that, once joined, the blank line that separated them is restored.

    Args:
        state: Fence state left by the previous block.
        block: Block content.
        config: Rendering configuration. Defaults to `RenderConfig()`.

    Returns:
        tuple[FenceState, str]: The next state and the HTML fragment.

    Examples:
        advance(FenceState.CLOSED, "```\\nx")  # (FenceState.OPEN, "<code>\\nx")
        advance(FenceState.OPEN, "y```")  # (FenceState.CLOSED, "\\ny</code>")
    """
    config = config or RenderConfig()

    if state is FenceState.OPEN:
        closed = fence_close(block)
        if closed is None:
            return FenceState.OPEN, f"\n{block}"
        return FenceState.CLOSED, f"\n{closed}"

    fenced = open_and_close(block, config)
    if fenced is not None:
        text, is_closed = fenced
        return (FenceState.CLOSED if is_closed else FenceState.OPEN), text

    return FenceState.CLOSED, classify_block(block, config)


def parse_blocks(document: str, config: RenderConfig | None = None) -> str:
    """Render the block structure of a document.

    Splits on blank lines, renders each block with `advance`, and joins the
    fragments with single newlines. A fence left open at the end of the
    document is emitted without a closing tag.

    Args:
        document: Markdown source.
        config: Rendering configuration. Defaults to `RenderConfig()`.

    Returns:
        str: HTML with inline markup still unprocessed. Empty for an empty
            document.

    Examples:
        parse_blocks("one\\n\\ntwo")  # "<p>one</p>\\n<p>two</p>"
    """
    config = config or RenderConfig()
    if not document:
        return ""

    state = FenceState.CLOSED
    fragments = []
    for block in document.split(BLOCK_SEPARATOR):
        state, fragment = advance(state, block, config)
        fragments.append(fragment)

    if state is FenceState.OPEN:
        logger.debug("Document ended inside a fenced code block; leaving it unterminated")

    return "\n".join(fragments)
