"""
minimark: a small Markdown to HTML renderer.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    minimark README.md

Library Usage:
    from minimark import MemoryCache, render

    html = render("Hello **world**!")
    html = render(source, cache_key="readme", cache=MemoryCache())
"""

from .blocks import parse_blocks
from .cache import Cache, DirectoryCache, MemoryCache
from .config import ConfigError, RenderConfig
from .exceptions import CacheError, MinimarkError, ReadError
from .fences import fence_close, fence_start
from .inline import (
    apply_inline,
    rewrite_anchors,
    rewrite_bold,
    rewrite_first_image,
    rewrite_inline_code,
    rewrite_italic,
)
from .lists import is_list, parse_list
from .models import FenceState, ListKind
from .renderer import render

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "render",
    "parse_blocks",
    "parse_list",
    "is_list",
    "fence_start",
    "fence_close",
    "apply_inline",
    "rewrite_bold",
    "rewrite_italic",
    "rewrite_anchors",
    "rewrite_first_image",
    "rewrite_inline_code",
    # Data models
    "FenceState",
    "ListKind",
    "RenderConfig",
    # Caches
    "Cache",
    "MemoryCache",
    "DirectoryCache",
    # Exceptions
    "CacheError",
    "ConfigError",
    "MinimarkError",
    "ReadError",
    # Version
    "__version__",
]
