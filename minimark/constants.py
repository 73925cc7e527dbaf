"""Constants used across the minimark package."""

from __future__ import annotations

import re

from .config import RenderConfig

DEFAULT_CONFIG = RenderConfig()

BLOCK_SEPARATOR = "\n\n"

# Block-level patterns
FENCE_START_PATTERN = re.compile(r"^```([A-Za-z0-9_]+)?", re.MULTILINE)
FENCE_END_PATTERN = re.compile(r"```$", re.MULTILINE)
HEADER_PATTERN = re.compile(r"^(#{1,6})[ \t](.+)", re.MULTILINE)

# List markers; leading indentation is measured separately.
ORDERED_ITEM_PATTERN = re.compile(r"^(?P<indent>[ \t]*)\d+\. (?P<content>.*)$")
UNORDERED_ITEM_PATTERN = re.compile(r"^(?P<indent>[ \t]*)[*-] (?P<content>.*)$")
TAB_WIDTH = 4

# Inline patterns
BOLD_PATTERN = re.compile(r"\*\*(\S.+?\S)\*\*")
ITALIC_PATTERN = re.compile(r"\*([^\s*].+?[^\s*])\*")
IMAGE_PATTERN = re.compile(r"!\[([^\]]+)\]\(([^)]+)\)")
ANCHOR_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
INLINE_CODE_PATTERN = re.compile(r"`([^`]+)`")
CODE_REGION_PATTERN = re.compile(r"<code[^>]*>([\s\S]*?)</code>", re.IGNORECASE)

# File defaults
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd", ".mkdn")
