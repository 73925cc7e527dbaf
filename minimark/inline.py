"""Inline span rewriters.

Each rewriter is a pure text-to-text pass. They run over the whole output of
the block parser, in the order given by `INLINE_REWRITERS`.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from .constants import (
    ANCHOR_PATTERN,
    BOLD_PATTERN,
    CODE_REGION_PATTERN,
    IMAGE_PATTERN,
    INLINE_CODE_PATTERN,
    ITALIC_PATTERN,
)
from .models import RewriteResult, SpanMatch


def _rewrite(
    pattern: re.Pattern[str],
    text: str,
    replacement: str | Callable[[re.Match[str]], str],
    count: int = 0,
) -> RewriteResult:
    rewritten, replaced = pattern.subn(replacement, text, count=count)
    return RewriteResult(matched=replaced > 0, text=rewritten)


def find_spans(pattern: re.Pattern[str], text: str, kind: str) -> list[SpanMatch]:
    """List the non-overlapping regions of `text` matched by `pattern`.

    Examples:
        find_spans(BOLD_PATTERN, "a **bold** b", "bold")  # [SpanMatch(2, 10, "bold")]
    """
    return [SpanMatch(match.start(), match.end(), kind) for match in pattern.finditer(text)]


def rewrite_bold(text: str) -> RewriteResult:
    """Replace ``**X**`` with ``<strong>X</strong>``.

    X must be at least three characters on one line and must not start or end
    with whitespace, so ``** x **`` is left untouched.
    """
    return _rewrite(BOLD_PATTERN, text, r"<strong>\1</strong>")


def rewrite_italic(text: str) -> RewriteResult:
    """Replace ``*X*`` with ``<i>X</i>``.

    Runs after `rewrite_bold`; X may not start or end with whitespace or an
    asterisk, so leftover bold markers are never consumed.
    """
    return _rewrite(ITALIC_PATTERN, text, r"<i>\1</i>")


def rewrite_anchors(text: str) -> RewriteResult:
    """Replace every ``[label](href)`` with an `<a>` tag."""
    return _rewrite(ANCHOR_PATTERN, text, r'<a href="\2">\1</a>')


def rewrite_first_image(text: str, wrapper_class: str = "image-wrapper") -> RewriteResult:
    """Replace the first ``![label](src)`` and wrap the whole text in a `<div>`.

    Only the first image is rewritten. Later images keep their Markdown form
    and are picked up as plain links by `rewrite_anchors`.

    Args:
        text: Block content to scan.
        wrapper_class: CSS class of the wrapping `<div>`.

    Returns:
        RewriteResult: ``matched`` is False and the text unchanged when the
            block holds no image.

    Examples:
        rewrite_first_image("![a](u)").text  # '<div class="image-wrapper"><img src="u" alt="a" /></div>'
    """
    match = IMAGE_PATTERN.search(text)
    if match is None:
        return RewriteResult(matched=False, text=text)

    label, src = match.groups()
    prefix = text[: match.start()]
    suffix = text[match.end() :]
    return RewriteResult(
        matched=True,
        text=f'<div class="{wrapper_class}">{prefix}<img src="{src}" alt="{label}" />{suffix}</div>',
    )


def find_code_regions(text: str) -> list[SpanMatch]:
    """Locate block-level ``<code>…</code>`` regions produced by fenced code."""
    return find_spans(CODE_REGION_PATTERN, text, "code-block")


def split_code_regions(text: str) -> list[tuple[bool, str]]:
    """Split text into ``(is_code, segment)`` pairs around code regions.

    A gap made of a single newline between two code regions is dropped so that
    consecutive fenced blocks end up side by side.

    Examples:
        split_code_regions("a <code>x</code> b")
        # [(False, "a "), (True, "<code>x</code>"), (False, " b")]
    """
    segments: list[tuple[bool, str]] = []
    offset = 0
    seen_region = False

    for region in find_code_regions(text):
        gap = text[offset : region.start]
        if gap and not (seen_region and gap == "\n"):
            segments.append((False, gap))
        segments.append((True, text[region.start : region.end]))
        offset = region.end
        seen_region = True

    segments.append((False, text[offset:]))
    return segments


def rewrite_inline_code(text: str) -> RewriteResult:
    """Replace `` `X` `` with ``<code>X</code>`` outside existing code regions."""
    matched = False
    parts = []

    for is_code, segment in split_code_regions(text):
        if is_code:
            parts.append(segment)
            continue
        result = _rewrite(INLINE_CODE_PATTERN, segment, r"<code>\1</code>")
        matched = matched or result.matched
        parts.append(result.text)

    return RewriteResult(matched=matched, text="".join(parts))


INLINE_REWRITERS: tuple[Callable[[str], RewriteResult], ...] = (
    rewrite_bold,
    rewrite_italic,
    rewrite_anchors,
    rewrite_inline_code,
)


def apply_inline(text: str) -> str:
    """Run every inline rewriter over `text` in order."""
    for rewriter in INLINE_REWRITERS:
        text = rewriter(text).text
    return text
