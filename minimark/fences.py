"""Fenced code detection."""

from __future__ import annotations

from .config import RenderConfig
from .constants import FENCE_END_PATTERN, FENCE_START_PATTERN

CLOSING_TAG = "</code>"


def fence_start(text: str, config: RenderConfig | None = None) -> str | None:
    """Replace the first opening fence with an opening `<code>` tag.

    The fence must sit at the start of a line and may carry a language tag made
    of word characters, which becomes a class on the tag.

    Args:
        text: Block content to scan.
        config: Supplies the language class prefix. Defaults to `RenderConfig()`.

    Returns:
        str | None: Rewritten text, or None when no fence opens in `text`.

    Examples:
        fence_start("```python\\nx = 1")  # '<code class="language-python">\\nx = 1'
        fence_start("plain text")  # None
    """
    config = config or RenderConfig()
    match = FENCE_START_PATTERN.search(text)
    if match is None:
        return None

    language = match.group(1)
    if language:
        tag = f'<code class="{config.code_language_prefix}{language}">'
    else:
        tag = "<code>"
    return f"{text[: match.start()]}{tag}{text[match.end() :]}"


def fence_close(text: str, start: int = 0) -> str | None:
    """Replace the first fence found at the end of a line with `</code>`.

    Args:
        text: Text to scan.
        start: Offset where scanning begins; text before it is kept as is.

    Returns:
        str | None: Rewritten text, or None when no closing fence is present.

    Examples:
        fence_close("x = 1```")  # "x = 1</code>"
        fence_close("x = 1")  # None
    """
    match = FENCE_END_PATTERN.search(text, start)
    if match is None:
        return None
    return f"{text[: match.start()]}{CLOSING_TAG}{text[match.end() :]}"


def open_and_close(text: str, config: RenderConfig | None = None) -> tuple[str, bool] | None:
    """Open a fence and try to close it within the same text.

    Returns:
        tuple[str, bool] | None: Rewritten text and whether the fence was
            closed, or None when `text` does not open a fence.

    Examples:
        open_and_close("```\\nx```")  # ("<code>\\nx</code>", True)
        open_and_close("```\\nx")  # ("<code>\\nx", False)
    """
    config = config or RenderConfig()
    match = FENCE_START_PATTERN.search(text)
    if match is None:
        return None

    opened = fence_start(text, config)
    # Only look for the closer after the opening tag.
    tag_end = len(opened) - (len(text) - match.end())
    closed = fence_close(opened, tag_end)
    if closed is None:
        return opened, False
    return closed, True
