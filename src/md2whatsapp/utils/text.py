#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/utils/text.py
"""Text utilities shared by the renderers.

Functions
---------
unescape_entities : Decode the HTML entities a Markdown tokenizer may leave in text
escape_for_whatsapp : Replace escaped marker characters with inert look-alikes

Examples
--------
    >>> from md2whatsapp.utils.text import unescape_entities, escape_for_whatsapp
    >>> unescape_entities("Fish &amp; Chips")
    'Fish & Chips'
    >>> escape_for_whatsapp("*")
    '∗'

"""

from __future__ import annotations

from md2whatsapp.constants import ESCAPE_LOOKALIKES, HTML_ENTITY_REPLACEMENTS


def unescape_entities(text: str | None) -> str:
    """Unescape the common HTML entities found in Markdown text.

    Only ``&amp;``, ``&lt;``, ``&gt;``, ``&quot;`` and ``&#39;`` are decoded;
    any other entity is left untouched.

    Parameters
    ----------
    text : str or None
        Text to unescape

    Returns
    -------
    str
        Unescaped text, or an empty string for ``None``

    """
    if not text:
        return ""
    for entity, replacement in HTML_ENTITY_REPLACEMENTS:
        text = text.replace(entity, replacement)
    return text


def escape_for_whatsapp(text: str) -> str:
    """Convert WhatsApp marker characters to Unicode look-alikes.

    WhatsApp would otherwise read an escaped ``*``, ``_``, ``~`` or backtick
    as live formatting. Characters without a look-alike pass through.

    Parameters
    ----------
    text : str
        One or more escaped characters

    Returns
    -------
    str
        Text with every marker character replaced

    """
    return "".join(ESCAPE_LOOKALIKES.get(char, char) for char in text)
