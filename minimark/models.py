"""Data models for minimark."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class FenceState(Enum):
    """Code-fence state threaded through the block sequence.

    Attributes:
        CLOSED: Blocks are classified normally.
        OPEN: A fenced code region is open; blocks are emitted verbatim until
            one of them contains a closing fence.
    """

    CLOSED = auto()
    OPEN = auto()


class ListKind(Enum):
    """Ordering kind of a list item."""

    ORDERED = auto()
    UNORDERED = auto()

    @property
    def tag(self) -> str:
        return "ol" if self is ListKind.ORDERED else "ul"


@dataclass(frozen=True)
class ListItem:
    """A single tokenized list line.

    Attributes:
        depth: Nesting level relative to the first list line of the block.
        kind: Whether the line carries an ordered or unordered marker.
        content: Text following the marker.
    """

    depth: int
    kind: ListKind
    content: str


@dataclass
class ListContainer:
    """An `<ol>` or `<ul>` container and its entries in source order.

    Entries are either item text or nested containers; a nested container is
    rendered inside its own list entry.

    Attributes:
        kind: Ordering kind of the first item placed in the container.
        depth: Nesting level of the items held by the container.
        entries: Item text and nested containers.
    """

    kind: ListKind
    depth: int
    entries: list[str | ListContainer] = field(default_factory=list)


@dataclass(frozen=True)
class SpanMatch:
    """Region of text recognized by an inline rewriter.

    Attributes:
        start: Zero-based start offset (inclusive).
        end: Zero-based end offset (exclusive).
        kind: Name of the rewriter that recognized the span.
    """

    start: int
    end: int
    kind: str


@dataclass(frozen=True)
class RewriteResult:
    """Outcome of a scan-and-replace pass."""

    matched: bool
    text: str
