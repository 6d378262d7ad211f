"""Options classes for md2whatsapp parsing and rendering."""

from md2whatsapp.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2whatsapp.options.markdown import MarkdownParserOptions
from md2whatsapp.options.whatsapp import WhatsAppRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "WhatsAppRendererOptions",
]
