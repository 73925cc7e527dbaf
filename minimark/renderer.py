"""Top-level Markdown to HTML pipeline."""

from __future__ import annotations

import logging

from .blocks import parse_blocks
from .cache import Cache, namespaced_key
from .config import RenderConfig, validate_config
from .exceptions import CacheError
from .inline import apply_inline

logger = logging.getLogger(__name__)


def render_uncached(text: str, config: RenderConfig | None = None) -> str:
    """Render Markdown to HTML without consulting any cache.

    Runs the block parser, then bold, italic, anchor, and inline-code
    rewriting over the joined result.
    """
    return apply_inline(parse_blocks(text, config))


def render(
    text: str,
    cache_key: str | None = None,
    cache: Cache | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render Markdown to HTML, optionally through a cache.

    When both `cache_key` and `cache` are given and the cache holds an entry
    for the namespaced key, that entry is returned without parsing `text`.
    Otherwise the result is computed and stored. Cache failures are logged
    and treated as misses; they never stop rendering.

    Args:
        text: Markdown source.
        cache_key: Caller-chosen identifier of the document.
        cache: Collaborator implementing ``get``/``set``.
        config: Rendering configuration. Defaults to `RenderConfig()`.

    Returns:
        str: Rendered HTML.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        render("Hello **world**!")  # "<p>Hello <strong>world</strong>!</p>"
        render(source, cache_key="post-42", cache=MemoryCache())
    """
    config = config or RenderConfig()
    validate_config(config)

    if cache_key is None or cache is None:
        return render_uncached(text, config)

    key = namespaced_key(cache_key, config.cache_key_prefix)
    try:
        cached = cache.get(key)
    except CacheError:
        logger.warning("Cache lookup failed for %s, rendering instead", key, exc_info=True)
        cached = None

    if cached is not None:
        logger.debug("Cache hit for %s", key)
        return cached

    logger.debug("Cache miss for %s", key)
    output = render_uncached(text, config)

    try:
        cache.set(key, output)
    except CacheError:
        logger.warning("Could not store rendered output for %s", key, exc_info=True)

    return output
