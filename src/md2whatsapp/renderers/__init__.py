#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/renderers/__init__.py
"""AST renderers for md2whatsapp.

WhatsAppRenderer
    Renders the AST to WhatsApp formatted text
PlainTextRenderer
    Strips all formatting; used for table cells and previews

"""

from md2whatsapp.renderers.base import BaseRenderer, InlineContentMixin
from md2whatsapp.renderers.plaintext import PlainTextRenderer, flatten_inline
from md2whatsapp.renderers.whatsapp import WhatsAppRenderer

__all__ = [
    "BaseRenderer",
    "InlineContentMixin",
    "PlainTextRenderer",
    "WhatsAppRenderer",
    "flatten_inline",
]
