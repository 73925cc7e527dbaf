from __future__ import annotations

import pytest

from minimark.config import RenderConfig
from minimark.fences import fence_close, fence_start, open_and_close


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("```python\nx = 1", '<code class="language-python">\nx = 1'),
        ("```\nx = 1", "<code>\nx = 1"),
        ("intro\n```sh\nls", 'intro\n<code class="language-sh">\nls'),
        ("no fence here", None),
        ("text ```", None),
    ],
)
def test_fence_start(text: str, expected: str | None):
    assert fence_start(text) == expected


def test_fence_start_uses_configured_prefix():
    config = RenderConfig(code_language_prefix="lang-")

    assert fence_start("```rust", config) == '<code class="lang-rust">'


def test_fence_start_rewrites_only_the_opening_marker():
    assert fence_start("```\na\n```") == "<code>\na\n```"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("x = 1```", "x = 1</code>"),
        ("```", "</code>"),
        ("a```\nb```", "a</code>\nb```"),
        ("```x", None),
        ("plain", None),
    ],
)
def test_fence_close(text: str, expected: str | None):
    assert fence_close(text) == expected


def test_fence_close_honors_start_offset():
    assert fence_close("```", 3) is None
    assert fence_close("<code>```", 6) == "<code></code>"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("```\nx```", ("<code>\nx</code>", True)),
        ("```\na\n```", ("<code>\na\n</code>", True)),
        ("```js```", ('<code class="language-js"></code>', True)),
        ("```", ("<code>", False)),
        ("```python\nx = 1", ('<code class="language-python">\nx = 1', False)),
        ("plain", None),
    ],
)
def test_open_and_close(text: str, expected):
    assert open_and_close(text) == expected
