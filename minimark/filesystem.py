"""Filesystem helpers for minimark."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, MARKDOWN_EXTENSIONS
from .exceptions import ReadError

MAX_FILE_SIZE_ENV_VAR = "MINIMARK_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the input size limit in bytes.

    `MINIMARK_MAX_FILE_SIZE` overrides `default` when set; it must hold a
    positive number of bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.
    """
    raw = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw is None:
        return default

    raw = raw.strip()
    if not raw.isdecimal() or int(raw) == 0:
        raise ValueError(
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {raw!r} "
            "(expected a positive integer of bytes)"
        )
    return int(raw)


def normalize_filepath(raw_path: str) -> Path:
    """Resolve and validate a Markdown input path.

    Raises:
        ValueError: If the path does not exist, is not a regular file, or uses
            an unsupported extension.

    Examples:
        normalize_filepath("docs/README.md")
    """
    path = Path(raw_path).expanduser()

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Error resolving {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")

    if resolved.suffix.lower() not in MARKDOWN_EXTENSIONS:
        error_message = f"{resolved} is not a Markdown file.\n"
        error_message += f"Supported extensions are: {', '.join(MARKDOWN_EXTENSIONS)}"
        raise ValueError(error_message)

    return resolved


def read_document(filepath: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read a UTF-8 Markdown document, enforcing a size limit.

    Args:
        filepath: Path to the document.
        max_size: Maximum allowed size in bytes.

    Returns:
        str: Document content.

    Raises:
        ReadError: If the file is inaccessible, too large, or not valid UTF-8.

    Examples:
        content = read_document(Path("README.md"), 102400)
    """
    try:
        size = filepath.stat().st_size
    except OSError as error:
        raise ReadError(f"Error accessing {filepath}: {error}") from error

    if size > max_size:
        raise ReadError(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")

    try:
        with open(filepath, "r", encoding="UTF-8") as file:
            return file.read()
    except UnicodeDecodeError as error:
        raise ReadError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except OSError as error:
        raise ReadError(f"Error accessing {filepath}: {error}") from error


def write_output(filepath: Path, content: str) -> None:
    """Write rendered HTML through a temporary file and an atomic replace.

    Raises:
        OSError: If the file cannot be written.
    """
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", delete=False, dir=filepath.parent
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        os.replace(temp_path, filepath)
        temp_path = None
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
