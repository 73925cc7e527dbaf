"""Package-specific exception types."""

from __future__ import annotations


class MinimarkError(Exception):
    """Base class for minimark errors.

    Rendering itself never raises for malformed Markdown; these errors come
    from collaborators around the renderer.
    """


class CacheError(MinimarkError):
    """Raised when a cache collaborator cannot read or store a value.

    Args:
        key: Cache key involved in the failed operation.
        operation: Either ``"get"`` or ``"set"``.
    """

    def __init__(self, key: str, operation: str):
        self.key = key
        self.operation = operation
        super().__init__(f"Cache {operation} failed for key {key!r}")


class ReadError(MinimarkError):
    """Raised when an input document cannot be read."""
