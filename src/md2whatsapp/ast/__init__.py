#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The Markdown parser adapter builds these nodes from the tokenizer output and
the renderers walk them with visitors.

- nodes: AST node classes representing document structure
- visitors: Visitor base class for AST traversal

Examples
--------
    >>> from md2whatsapp.ast import Document, Heading, Paragraph, Text
    >>> from md2whatsapp.renderers.whatsapp import WhatsAppRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> WhatsAppRenderer().render_to_string(doc)
    '*📌 Title*\\n\\nHello world'

"""

from __future__ import annotations

from md2whatsapp.ast.nodes import (
    BlankLine,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Escape,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    TaskStatus,
    Text,
    TextBlock,
    ThematicBreak,
    Unrecognized,
)
from md2whatsapp.ast.visitors import NodeVisitor

__all__ = [
    "BlankLine",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Escape",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "TaskStatus",
    "Text",
    "TextBlock",
    "ThematicBreak",
    "Unrecognized",
]
