"""Nested list parsing."""

from __future__ import annotations

from .config import RenderConfig
from .constants import ORDERED_ITEM_PATTERN, TAB_WIDTH, UNORDERED_ITEM_PATTERN
from .models import ListContainer, ListItem, ListKind
from .paragraphs import parse_text

INDENT = "  "


def _leading_whitespace_columns(line: str) -> int:
    """Compute the column width of leading whitespace.

    Tabs advance to the next multiple of four columns.

    Examples:
        _leading_whitespace_columns("    text")  # 4
        _leading_whitespace_columns("\\ttext")  # 4
    """
    columns = 0
    for character in line:
        if character == " ":
            columns += 1
            continue
        if character == "\t":
            columns += TAB_WIDTH - (columns % TAB_WIDTH)
            continue
        break
    return columns


def _match_marker(line: str) -> tuple[ListKind, str, str] | None:
    for kind, pattern in (
        (ListKind.ORDERED, ORDERED_ITEM_PATTERN),
        (ListKind.UNORDERED, UNORDERED_ITEM_PATTERN),
    ):
        match = pattern.match(line)
        if match:
            return kind, match.group("indent"), match.group("content")
    return None


def is_list(block: str) -> bool:
    """Check whether the first line of `block` carries a list marker.

    Ordered markers are digits followed by ``". "``; unordered markers are
    ``"* "`` or ``"- "``. Leading indentation is ignored.

    Examples:
        is_list("  1. first")  # True
        is_list("*emphasis*")  # False
    """
    first_line = block.split("\n", 1)[0]
    return _match_marker(first_line) is not None


def tokenize_line(line: str, base_columns: int = 0, indent_width: int = 2) -> ListItem | None:
    """Turn a list line into a `ListItem`.

    Args:
        line: Source line.
        base_columns: Indentation of the first list line of the block; depth is
            measured relative to it.
        indent_width: Columns per nesting level.

    Returns:
        ListItem | None: The tokenized item, or None when `line` has no marker.

    Examples:
        tokenize_line("    - nested", base_columns=2)  # ListItem(1, UNORDERED, "nested")
    """
    marker = _match_marker(line)
    if marker is None:
        return None

    kind, indent, content = marker
    columns = _leading_whitespace_columns(indent)
    depth = max(columns - base_columns, 0) // indent_width
    return ListItem(depth=depth, kind=kind, content=content)


def find_list_start(lines: list[str]) -> int | None:
    """Return the index of the first list line, or None when there is none."""
    return next((index for index, line in enumerate(lines) if is_list(line)), None)


def build_list_tree(tokens: list[ListItem | str]) -> ListContainer:
    """Build nested containers from tokenized list lines.

    Uses a stack of open containers keyed by depth. A deeper item opens a new
    container as the next entry of the current one; a shallower item closes
    containers until the depth matches. A kind change at the same depth keeps
    the current container. Plain strings are continuation lines and are joined
    to the previous item.

    Args:
        tokens: Tokenized lines; the first one must be a `ListItem`.

    Returns:
        ListContainer: Root container whose kind is that of the first item.
    """
    first = tokens[0]
    if not isinstance(first, ListItem):
        raise ValueError("list must start with a list item")

    root = ListContainer(kind=first.kind, depth=first.depth)
    stack = [root]

    for token in tokens:
        if isinstance(token, str):
            current = stack[-1]
            current.entries[-1] = f"{current.entries[-1]}\n{token}"
            continue

        while len(stack) > 1 and token.depth < stack[-1].depth:
            stack.pop()

        current = stack[-1]
        if token.depth > current.depth:
            nested = ListContainer(kind=token.kind, depth=token.depth)
            current.entries.append(nested)
            stack.append(nested)
            current = nested

        current.entries.append(token.content)

    return root


def render_list(container: ListContainer, level: int = 0) -> str:
    """Render a container tree as indented `<ol>`/`<ul>` markup.

    Examples:
        render_list(ListContainer(ListKind.ORDERED, 0, ["a"]))  # "<ol>\\n  <li>a</li>\\n</ol>"
    """
    pad = INDENT * 2 * level
    tag = container.kind.tag
    lines = [f"{pad}<{tag}>"]

    for entry in container.entries:
        if isinstance(entry, ListContainer):
            lines.append(f"{pad}{INDENT}<li>")
            lines.append(render_list(entry, level + 1))
            lines.append(f"{pad}{INDENT}</li>")
        else:
            lines.append(f"{pad}{INDENT}<li>{entry}</li>")

    lines.append(f"{pad}</{tag}>")
    return "\n".join(lines)


def parse_list(block: str, config: RenderConfig | None = None) -> str | None:
    """Render a block holding a list.

    Lines before the first list line are rendered as headings when they carry a
    heading marker and as a leading paragraph otherwise. Lines inside
    the list without a marker continue the previous item.

    Args:
        block: Block content.
        config: Supplies the indentation width. Defaults to `RenderConfig()`.

    Returns:
        str | None: HTML for the block, or None when it contains no list line.

    Examples:
        parse_list("Intro\\n- a\\n- b")
        # "<p>Intro</p>\\n<ul>\\n  <li>a</li>\\n  <li>b</li>\\n</ul>"
    """
    config = config or RenderConfig()
    lines = block.split("\n")
    start = find_list_start(lines)
    if start is None:
        return None

    list_lines = lines[start:]
    base_columns = _leading_whitespace_columns(list_lines[0])
    tokens: list[ListItem | str] = []
    for line in list_lines:
        item = tokenize_line(line, base_columns, config.list_indent_width)
        if item is not None:
            tokens.append(item)
        elif line.strip():
            tokens.append(line.strip())

    html = render_list(build_list_tree(tokens))
    if start == 0:
        return html

    lead = parse_text("\n".join(lines[:start]), config)
    return f"{lead}\n{html}"
