"""Configuration loading and management."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

_CLASS_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


@dataclass
class RenderConfig:
    """Configuration for rendering Markdown to HTML.

    Attributes:
        list_indent_width: Number of columns that make up one list nesting level.
        image_wrapper_class: CSS class of the `<div>` wrapping image paragraphs.
        code_language_prefix: Prefix of the class attached to fenced code
            carrying a language tag.
        cache_key_prefix: Namespace prepended to cache keys.
        max_file_size: Maximum input file size in bytes accepted by the CLI.

    Examples:
        RenderConfig(list_indent_width=4, image_wrapper_class="figure")
    """

    # Block output
    list_indent_width: int = 2
    image_wrapper_class: str = "image-wrapper"
    code_language_prefix: str = "language-"

    # Cache
    cache_key_prefix: str = "markdown.parser."

    # Limits
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`list_indent_width` must be a positive integer")
    """


_CONFIG_SOURCES = (
    ("pyproject.toml", (("tool", "minimark"),)),
    (".minimark.toml", (("minimark",), ("tool", "minimark"))),
)


def load_config(search_path: Path) -> RenderConfig:
    """Return the configuration closest to `search_path`.

    Each directory from `search_path` up to the filesystem root is checked for
    `pyproject.toml` (``[tool.minimark]``) and then `.minimark.toml`
    (``[minimark]`` or ``[tool.minimark]``). The first file carrying one of
    those tables wins. Unreadable or malformed TOML files are skipped, and
    defaults are returned when nothing is found.

    Raises:
        ConfigError: If the table is not a mapping or holds unknown keys.

    Examples:
        load_config(Path("docs"))
    """
    start = search_path.resolve()
    for directory in (start, *start.parents):
        for filename, tables in _CONFIG_SOURCES:
            config = _read_config_file(directory / filename, tables)
            if config is not None:
                return config
    return RenderConfig()


def _read_config_file(
    config_file: Path, tables: tuple[tuple[str, ...], ...]
) -> RenderConfig | None:
    try:
        with open(config_file, "rb") as stream:
            document = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table in tables:
        section: object = document
        for name in table:
            section = section.get(name) if isinstance(section, dict) else None
        if section is not None:
            return _config_from_table(section, config_file, ".".join(table))
    return None


def _config_from_table(section: object, config_file: Path, table: str) -> RenderConfig:
    invalid = f"Invalid `[{table}]` settings in {config_file}"
    if not isinstance(section, dict):
        raise ConfigError(invalid)

    # TOML keys may use dashes; dataclass fields use underscores.
    settings = {key.replace("-", "_"): value for key, value in section.items()}
    try:
        return RenderConfig(**settings)
    except TypeError as error:
        raise ConfigError(invalid) from error


def validate_config(config: RenderConfig) -> None:
    """Validate a `RenderConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If numeric values are not positive integers or string
            settings are empty or malformed.

    Examples:
        validate_config(RenderConfig(list_indent_width=4))
    """
    _ensure_integers(
        {
            "list_indent_width": config.list_indent_width,
            "max_file_size": config.max_file_size,
        }
    )
    _ensure_positive(
        {
            "list_indent_width": config.list_indent_width,
            "max_file_size": config.max_file_size,
        }
    )

    if not isinstance(config.image_wrapper_class, str) or not _CLASS_NAME_PATTERN.match(
        config.image_wrapper_class
    ):
        raise ConfigError("`image_wrapper_class` must be a valid CSS class name")
    if not isinstance(config.code_language_prefix, str):
        raise ConfigError("`code_language_prefix` must be a string")
    if not isinstance(config.cache_key_prefix, str) or not config.cache_key_prefix:
        raise ConfigError("`cache_key_prefix` must not be empty")


def apply_overrides(config: RenderConfig, **overrides: object) -> RenderConfig:
    """Apply override values to a `RenderConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        RenderConfig: New configuration with the overrides applied, or the
        original configuration when nothing changes.

    Raises:
        TypeError: If an override name is not defined on `RenderConfig`.

    Examples:
        updated = apply_overrides(config, list_indent_width=4)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> RenderConfig:
    """Load, override, and validate configuration.

    Examples:
        config = build_config(Path.cwd(), image_wrapper_class="figure")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
