#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/renderers/plaintext.py
"""Plain text rendering from AST.

This module provides the PlainTextRenderer class, which strips every
formatting marker from the AST and keeps only the text. The WhatsApp renderer
uses it wherever formatting cannot be shown, most importantly inside the
monospace block of a fixed-width table, and to measure cell widths.

"""

from __future__ import annotations

from typing import Sequence

from md2whatsapp.ast.nodes import (
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
    TableRow,
    Text,
    TextBlock,
    ThematicBreak,
)
from md2whatsapp.ast.visitors import NodeVisitor
from md2whatsapp.options.base import BaseRendererOptions
from md2whatsapp.renderers.base import BaseRenderer, InlineContentMixin
from md2whatsapp.utils.text import unescape_entities

_BLOCK_SEPARATOR = "\n\n"


class PlainTextRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to plain, unformatted text.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Rendering options (the plain text renderer has none of its own)

    Examples
    --------
        >>> from md2whatsapp.ast import Document, Paragraph, Strong, Text
        >>> doc = Document(children=[
        ...     Paragraph(content=[Text(content="a "), Strong(content=[Text(content="bold")])])
        ... ])
        >>> PlainTextRenderer().render_to_string(doc)
        'a bold'

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the plain text renderer with options."""
        BaseRenderer._validate_options_type(options, BaseRendererOptions, "plaintext")
        options = options or BaseRendererOptions()
        BaseRenderer.__init__(self, options)
        self._output: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a plain text string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Plain text output, blocks separated by a blank line

        """
        self._output = []
        doc.accept(self)
        return "".join(self._output).strip()

    def flatten(self, nodes: Sequence[Node]) -> str:
        """Flatten a sequence of inline nodes to plain text.

        Parameters
        ----------
        nodes : sequence of Node
            Inline nodes to flatten

        Returns
        -------
        str
            Concatenated text of the nodes with all markers removed

        """
        return self._render_inline_content(list(nodes))

    def _render_block(self, node: Node) -> str:
        saved_output = self._output
        self._output = []
        node.accept(self)
        result = "".join(self._output)
        self._output = saved_output
        return result

    def _render_blocks(self, nodes: Sequence[Node], separator: str = _BLOCK_SEPARATOR) -> None:
        rendered = [self._render_block(child) for child in nodes]
        self._output.append(separator.join(text for text in rendered if text.strip()))

    def visit_document(self, node: Document) -> None:
        """Render a Document node, one block per paragraph."""
        self._render_blocks(node.children)

    def visit_heading(self, node: Heading) -> None:
        self._output.append(self._render_inline_content(node.content))

    def visit_paragraph(self, node: Paragraph) -> None:
        self._output.append(self._render_inline_content(node.content))

    def visit_text_block(self, node: TextBlock) -> None:
        self._output.append(self._render_inline_content(node.content))

    def visit_code_block(self, node: CodeBlock) -> None:
        self._output.append(node.content.rstrip("\n"))

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._render_blocks(node.children)

    def visit_list(self, node: List) -> None:
        self._render_blocks(node.items, separator="\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node; nested blocks go on their own lines."""
        self._render_blocks(node.children, separator="\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table node as one line per row, cells separated by ``|``."""
        rows = [node.header] if node.header else []
        rows.extend(node.rows)
        self._output.append("\n".join(self._render_row(row) for row in rows))

    def _render_row(self, row: TableRow) -> str:
        return " | ".join(self.flatten(cell.content) for cell in row.cells)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        pass

    def visit_html_block(self, node: HTMLBlock) -> None:
        self._output.append(node.content.rstrip("\n"))

    def visit_text(self, node: Text) -> None:
        self._output.append(unescape_entities(node.content))

    def visit_escape(self, node: Escape) -> None:
        """Render an Escape node as the literal character, unmapped."""
        self._output.append(node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        self._output.append(self._render_inline_content(node.content))

    def visit_strong(self, node: Strong) -> None:
        self._output.append(self._render_inline_content(node.content))

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self._output.append(self._render_inline_content(node.content))

    def visit_code(self, node: Code) -> None:
        self._output.append(node.content)

    def visit_link(self, node: Link) -> None:
        content = self._render_inline_content(node.content)
        self._output.append(f"{content} ({node.url})")

    def visit_image(self, node: Image) -> None:
        self._output.append(f"[{node.alt_text}]")

    def visit_line_break(self, node: LineBreak) -> None:
        self._output.append(" ")

    def visit_html_inline(self, node: HTMLInline) -> None:
        self._output.append(node.content)

    def generic_visit(self, node: Node) -> None:
        """Emit the raw source text of nodes this renderer does not know."""
        raw = getattr(node, "raw", "")
        if isinstance(raw, str):
            self._output.append(raw)


def flatten_inline(nodes: Sequence[Node]) -> str:
    """Flatten inline nodes to plain text with a fresh renderer.

    Parameters
    ----------
    nodes : sequence of Node
        Inline nodes to flatten

    Returns
    -------
    str
        Plain text

    Examples
    --------
        >>> from md2whatsapp.ast import Link, Text
        >>> flatten_inline([Link(url="https://x.io", content=[Text(content="site")])])
        'site (https://x.io)'

    """
    return PlainTextRenderer().flatten(nodes)


__all__ = ["PlainTextRenderer", "flatten_inline"]
