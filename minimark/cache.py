"""Render cache collaborators."""

from __future__ import annotations

import hashlib
import os
import tempfile
from pathlib import Path
from typing import Protocol

from .exceptions import CacheError


class Cache(Protocol):
    """Key-value store consulted by `render`.

    `get` returns None on a miss. Either method may raise `CacheError`, which
    the renderer treats as a miss.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


def namespaced_key(key: str, prefix: str) -> str:
    """Prefix a caller-supplied cache key.

    Examples:
        namespaced_key("post-42", "markdown.parser.")  # "markdown.parser.post-42"
    """
    return f"{prefix}{key}"


class MemoryCache:
    """Process-local dictionary cache."""

    def __init__(self):
        self._entries: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        self._entries[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class DirectoryCache:
    """Cache storing one UTF-8 file per key inside a directory.

    File names are the SHA-256 digest of the key, so arbitrary keys are safe
    to use. Writes go through a temporary file and an atomic replace.

    Args:
        directory: Directory holding the cache files; created on first write.

    Examples:
        cache = DirectoryCache(Path(".minimark-cache"))
        cache.set("markdown.parser.readme", "<p>Hi</p>")
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.directory / f"{digest}.html"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="UTF-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as error:
            raise CacheError(key, "get") from error

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        temp_path: Path | None = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w", encoding="UTF-8", delete=False, dir=self.directory
            ) as tmp_file:
                temp_path = Path(tmp_file.name)
                tmp_file.write(value)
            os.replace(temp_path, path)
            temp_path = None
        except OSError as error:
            raise CacheError(key, "set") from error
        finally:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
