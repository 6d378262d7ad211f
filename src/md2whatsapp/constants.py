#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2whatsapp.

This module centralizes the glyphs, markers and default configuration values
used by the WhatsApp renderer and the CLI.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. WhatsApp Formatting - markers and glyphs emitted in the output
3. Table Layout - defaults for the table fitting search
4. Configuration - environment variables and config file names
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TableFormat = Literal["auto", "always-ascii", "always-list"]
TaskStatus = Literal["checked", "unchecked"]

TABLE_FORMAT_CHOICES: tuple[str, ...] = ("auto", "always-ascii", "always-list")

# Values used by the original web form radio buttons
LEGACY_TABLE_FORMAT_ALIASES: dict[str, TableFormat] = {
    "ascii": "always-ascii",
    "always": "always-list",
    "list": "always-list",
}

# =============================================================================
# WhatsApp Formatting
# =============================================================================

BOLD_MARKER = "*"
ITALIC_MARKER = "_"
STRIKE_MARKER = "~"
MONOSPACE_MARKER = "`"
CODE_FENCE = "```"

HEADER_EMOJIS: dict[int, str] = {
    1: "📌",
    2: "🟠",
    3: "🟡",
    4: "🟢",
    5: "🔵",
    6: "⚫️",
}

DEFAULT_THEMATIC_BREAK = "───────────────"

BULLET_GLYPH = "*"
NESTED_BULLET_GLYPH = "◦"
TASK_CHECKED_GLYPH = "☑"
TASK_UNCHECKED_GLYPH = "☐"

QUOTE_PREFIX = "> "

# Look-alike replacements for escaped markers, so WhatsApp shows them literally
ESCAPE_LOOKALIKES: dict[str, str] = {
    "*": "∗",  # ASTERISK OPERATOR
    "_": "＿",  # FULLWIDTH LOW LINE
    "~": "∼",  # TILDE OPERATOR
    "`": "ˋ",  # MODIFIER LETTER GRAVE ACCENT
}

# Applied in order; &amp; first so "&amp;lt;" collapses fully
HTML_ENTITY_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

# =============================================================================
# Table Layout
# =============================================================================

DEFAULT_TABLE_FORMAT: TableFormat = "auto"
DEFAULT_TABLE_THRESHOLD = 26
DEFAULT_MAX_TABLE_ROWS: int | None = None

TABLE_CELL_SEPARATOR = "|"
TABLE_JOINT = "+"
TABLE_BORDER_FILL = "-"
TABLE_HEADER_FILL = "="
TABLE_FALLBACK_COLUMN_LABEL = "Column {index}"

# =============================================================================
# Configuration
# =============================================================================

ENV_PREFIX = "MD2WHATSAPP_"
ENV_CONFIG_PATH = "MD2WHATSAPP_CONFIG"
CONFIG_TOOL_SECTION = "md2whatsapp"
CONFIG_FILENAMES: tuple[str, ...] = (
    ".md2whatsapp.toml",
    ".md2whatsapp.yaml",
    ".md2whatsapp.yml",
    ".md2whatsapp.json",
)
