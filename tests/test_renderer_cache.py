from __future__ import annotations

import logging

import pytest

from minimark import CacheError, ConfigError, MemoryCache, RenderConfig, render


class FailingCache:
    def __init__(self):
        self.get_calls = 0
        self.set_calls = 0

    def get(self, key: str) -> str | None:
        self.get_calls += 1
        raise CacheError(key, "get")

    def set(self, key: str, value: str) -> None:
        self.set_calls += 1
        raise CacheError(key, "set")


def test_render_stores_result_under_namespaced_key():
    cache = MemoryCache()

    html = render("Hello **world**!", cache_key="post", cache=cache)

    assert html == "<p>Hello <strong>world</strong>!</p>"
    assert cache.get("markdown.parser.post") == html
    assert len(cache) == 1


def test_render_returns_cached_value_without_parsing():
    cache = MemoryCache()
    cache.set("markdown.parser.post", "<p>cached</p>")

    assert render("# something else", cache_key="post", cache=cache) == "<p>cached</p>"


def test_empty_cached_value_is_a_hit():
    cache = MemoryCache()
    cache.set("markdown.parser.post", "")

    assert render("text", cache_key="post", cache=cache) == ""


def test_render_uses_configured_prefix():
    cache = MemoryCache()
    config = RenderConfig(cache_key_prefix="docs:")

    render("text", cache_key="intro", cache=cache, config=config)

    assert "docs:intro" in cache
    assert "markdown.parser.intro" not in cache


def test_render_without_key_leaves_cache_untouched():
    cache = MemoryCache()

    assert render("text", cache=cache) == "<p>text</p>"
    assert len(cache) == 0


def test_cache_failures_are_treated_as_misses(caplog):
    cache = FailingCache()

    with caplog.at_level(logging.WARNING, logger="minimark.renderer"):
        html = render("Hello *world*!", cache_key="post", cache=cache)

    assert html == "<p>Hello <i>world</i>!</p>"
    assert cache.get_calls == 1
    assert cache.set_calls == 1
    assert "Cache lookup failed for markdown.parser.post" in caplog.text
    assert "Could not store rendered output for markdown.parser.post" in caplog.text


def test_render_rejects_invalid_config():
    with pytest.raises(ConfigError):
        render("text", config=RenderConfig(list_indent_width=0))


def test_render_uses_configured_image_wrapper_class():
    config = RenderConfig(image_wrapper_class="figure")

    assert render("![a](u)", config=config) == '<div class="figure"><img src="u" alt="a" /></div>'
