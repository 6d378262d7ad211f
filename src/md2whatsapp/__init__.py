"""md2whatsapp - Convert Markdown into WhatsApp formatted text.

WhatsApp understands a small, non-nestable subset of formatting: ``*bold*``,
``_italic_``, ``~strikethrough~`` and backtick monospace. md2whatsapp parses
Markdown with mistune into a small AST and renders that tree with the rules
WhatsApp needs: emphasis in the middle of a word is dropped, bold italic is
collapsed into one marker pair, headings become bold lines with an emoji,
nested lists use bullet glyphs, and tables are drawn as ASCII art when they
fit a width threshold or as lists when they do not.

Requirements
------------
- Python 3.10+

Examples
--------
    >>> from md2whatsapp import to_whatsapp
    >>> print(to_whatsapp("## Plan\\n\\n- ***ship*** it\\n  - then rest"))
    *🟠 Plan*
    <BLANKLINE>
    * *_ship_* it
    * ◦ then rest

See Also
--------
md2whatsapp.ast : AST node definitions
md2whatsapp.renderers : WhatsApp and plain text renderers

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2whatsapp requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2whatsapp.api import render_document, resolve_renderer_options, to_whatsapp  # noqa: E402
from md2whatsapp.exceptions import (  # noqa: E402
    FileError,
    InvalidOptionsError,
    Md2WhatsAppError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2whatsapp.options import MarkdownParserOptions, WhatsAppRendererOptions  # noqa: E402

__all__ = [
    "__version__",
    "to_whatsapp",
    "render_document",
    "resolve_renderer_options",
    "MarkdownParserOptions",
    "WhatsAppRendererOptions",
    "Md2WhatsAppError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "ParsingError",
    "RenderingError",
]
