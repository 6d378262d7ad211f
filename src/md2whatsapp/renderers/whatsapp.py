#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/renderers/whatsapp.py
"""WhatsApp rendering from AST.

This module provides the WhatsAppRenderer class, which converts the AST into
the text syntax understood by WhatsApp: ``*bold*``, ``_italic_``,
``~strike~`` and backtick monospace, none of which may be nested or doubled.

Unlike the buffer-based plain text renderer, each ``visit_*`` method here
returns the rendered text of its node (``None`` for nodes that produce
nothing), which keeps the inline sliding window and the list depth explicit.

WhatsApp only applies a marker when it touches whitespace or the line edge,
so emphasis in the middle of a word is emitted without markers. Tables are
drawn as ASCII art when a padding configuration fits the width threshold,
and otherwise as a list with one bold line per row.

"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

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
    Text,
    TextBlock,
    ThematicBreak,
)
from md2whatsapp.ast.visitors import NodeVisitor
from md2whatsapp.constants import (
    BOLD_MARKER,
    BULLET_GLYPH,
    CODE_FENCE,
    HEADER_EMOJIS,
    ITALIC_MARKER,
    MONOSPACE_MARKER,
    NESTED_BULLET_GLYPH,
    QUOTE_PREFIX,
    STRIKE_MARKER,
    TABLE_FALLBACK_COLUMN_LABEL,
    TASK_CHECKED_GLYPH,
    TASK_UNCHECKED_GLYPH,
)
from md2whatsapp.options.whatsapp import WhatsAppRendererOptions
from md2whatsapp.renderers._table_layout import PaddingConfig, TableGrid, select_padding
from md2whatsapp.renderers.base import BaseRenderer
from md2whatsapp.renderers.plaintext import PlainTextRenderer
from md2whatsapp.utils.text import escape_for_whatsapp, unescape_entities

logger = logging.getLogger(__name__)

_BLOCK_SEPARATOR = "\n\n"


def _sliding_window(nodes: Sequence[Node]) -> Iterator[tuple[Optional[Node], Node, Optional[Node]]]:
    """Yield ``(previous, current, next)`` for every node in ``nodes``."""
    for index, node in enumerate(nodes):
        previous = nodes[index - 1] if index > 0 else None
        following = nodes[index + 1] if index + 1 < len(nodes) else None
        yield previous, node, following


def _is_mid_word(previous: Optional[Node], following: Optional[Node]) -> bool:
    """Return True if a formatting node sits against non-whitespace text."""
    if isinstance(previous, Text) and previous.content and not previous.content[-1].isspace():
        return True
    if isinstance(following, Text) and following.content and not following.content[0].isspace():
        return True
    return False


def _prefix_lines(text: str, prefix: str) -> str:
    return "\n".join(prefix + line for line in text.split("\n"))


class WhatsAppRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to WhatsApp formatted text.

    Parameters
    ----------
    options : WhatsAppRendererOptions or None, default = None
        WhatsApp rendering options. The instance is read for every table and
        thematic break, so one renderer always renders with one configuration.

    Examples
    --------
        >>> from md2whatsapp.ast import Document, Heading, Paragraph, Strong, Text
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Strong(content=[Text(content="Hi")])]),
        ...     Paragraph(content=[Text(content="super"), Strong(content=[Text(content="bold")]), Text(content="ly")]),
        ... ])
        >>> print(WhatsAppRenderer().render_to_string(doc))
        *📌 Hi*
        <BLANKLINE>
        superboldly

    """

    _mid_word_sensitive: tuple[type[Node], ...] = (Strong, Emphasis, Strikethrough)

    def __init__(self, options: WhatsAppRendererOptions | None = None):
        """Initialize the WhatsApp renderer with options."""
        BaseRenderer._validate_options_type(options, WhatsAppRendererOptions, "whatsapp")
        options = options or WhatsAppRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: WhatsAppRendererOptions = options
        self._plain = PlainTextRenderer()
        self._heading_renderer: _HeadingInlineRenderer | None = None

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to WhatsApp text.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Rendered blocks separated by a blank line, stripped

        """
        return self.visit_document(doc)

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def render_inline(self, nodes: Sequence[Node]) -> str:
        """Render a sequence of inline nodes.

        Each node is rendered with its neighbours in view; a bold, italic or
        strikethrough node touching non-whitespace text on either side is
        flattened to plain text instead of wrapped in markers.

        Parameters
        ----------
        nodes : sequence of Node
            Sibling inline nodes

        Returns
        -------
        str
            WhatsApp formatted text

        """
        parts = []
        for previous, node, following in _sliding_window(nodes):
            if isinstance(node, self._mid_word_sensitive) and _is_mid_word(previous, following):
                parts.append(self._plain.flatten(getattr(node, "content", [])))
            else:
                parts.append(node.accept(self) or "")
        return "".join(parts)

    def visit_text(self, node: Text) -> str:
        return unescape_entities(node.content)

    def visit_escape(self, node: Escape) -> str:
        return escape_for_whatsapp(node.content)

    def visit_strong(self, node: Strong) -> str:
        """Render bold; a sole italic child collapses into ``*_..._*``."""
        if len(node.content) == 1 and isinstance(node.content[0], Emphasis):
            inner = self.render_inline(node.content[0].content)
            return f"{BOLD_MARKER}{ITALIC_MARKER}{inner}{ITALIC_MARKER}{BOLD_MARKER}"
        return f"{BOLD_MARKER}{self.render_inline(node.content)}{BOLD_MARKER}"

    def visit_emphasis(self, node: Emphasis) -> str:
        """Render italic; a sole bold child collapses into ``_*...*_``."""
        if len(node.content) == 1 and isinstance(node.content[0], Strong):
            inner = self.render_inline(node.content[0].content)
            return f"{ITALIC_MARKER}{BOLD_MARKER}{inner}{BOLD_MARKER}{ITALIC_MARKER}"
        return f"{ITALIC_MARKER}{self.render_inline(node.content)}{ITALIC_MARKER}"

    def visit_strikethrough(self, node: Strikethrough) -> str:
        return f"{STRIKE_MARKER}{self.render_inline(node.content)}{STRIKE_MARKER}"

    def visit_code(self, node: Code) -> str:
        return f"{MONOSPACE_MARKER}{node.content}{MONOSPACE_MARKER}"

    def visit_link(self, node: Link) -> str:
        return f"{self.render_inline(node.content)} ({node.url})"

    def visit_image(self, node: Image) -> str:
        return f"[{node.alt_text}: {node.url}]"

    def visit_line_break(self, node: LineBreak) -> str:
        return "\n"

    def visit_html_inline(self, node: HTMLInline) -> str:
        return node.content

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> str:
        rendered = (child.accept(self) for child in node.children)
        return _BLOCK_SEPARATOR.join(text for text in rendered if text).strip()

    def visit_heading(self, node: Heading) -> str:
        """Render a heading as a bold line led by its level emoji.

        The whole heading is bold, so bold inside it is dropped rather than
        nested.
        """
        emoji = HEADER_EMOJIS.get(node.level, HEADER_EMOJIS[6])
        if self._heading_renderer is None:
            self._heading_renderer = _HeadingInlineRenderer(self.options)
        content = self._heading_renderer.render_inline(node.content)
        return f"{BOLD_MARKER}{emoji} {content}{BOLD_MARKER}"

    def visit_paragraph(self, node: Paragraph) -> str:
        return self.render_inline(node.content)

    def visit_text_block(self, node: TextBlock) -> str:
        return self.render_inline(node.content)

    def visit_code_block(self, node: CodeBlock) -> str:
        code = node.content.rstrip("\n")
        return f"{CODE_FENCE}{code}{CODE_FENCE}"

    def visit_thematic_break(self, node: ThematicBreak) -> str:
        return self.options.thematic_break

    def visit_html_block(self, node: HTMLBlock) -> str:
        return node.content.rstrip("\n")

    def visit_block_quote(self, node: BlockQuote) -> str:
        """Render a blockquote by prefixing every line with ``> ``.

        A nested blockquote is rendered first and prefixed again, so each
        level of nesting adds one marker.
        """
        parts = []
        for child in node.children:
            text = child.accept(self)
            if text:
                parts.append(_prefix_lines(text, QUOTE_PREFIX))
        return "\n".join(parts)

    def visit_list(self, node: List) -> str:
        return self._render_list(node, depth=0)

    def visit_list_item(self, node: ListItem) -> str:
        """Render a list item outside of a list, as a top-level bullet."""
        return "\n".join(self._render_list_item(node, self._item_prefix(None, 0, node, 0), 0))

    def _render_list(self, node: List, depth: int) -> str:
        """Render a list at ``depth``; nested lists follow their parent item's line."""
        lines: list[str] = []
        for index, item in enumerate(node.items):
            lines.extend(self._render_list_item(item, self._item_prefix(node, index, item, depth), depth))
        return "\n".join(lines)

    def _render_list_item(self, item: ListItem, prefix: str, depth: int) -> list[str]:
        text_parts = []
        nested = []
        for child in item.children:
            if isinstance(child, List):
                nested.append(self._render_list(child, depth + 1))
            else:
                text_parts.append(child.accept(self) or "")

        content = "".join(text_parts).strip()
        return [f"{prefix} {content}", *nested]

    @staticmethod
    def _item_prefix(node: Optional[List], index: int, item: ListItem, depth: int) -> str:
        """Choose the marker for one list item.

        Ordered numbering wins over task boxes, which win over bullets.
        Bullets below the top level gain one nested glyph per level.
        """
        if node is not None and node.ordered:
            return f"{node.start + index}."
        if item.task_status is not None:
            return TASK_CHECKED_GLYPH if item.task_status == "checked" else TASK_UNCHECKED_GLYPH
        if depth == 0:
            return BULLET_GLYPH
        return f"{BULLET_GLYPH} " + " ".join([NESTED_BULLET_GLYPH] * depth)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table(self, node: Table) -> Optional[str]:
        """Render a table as ASCII art or as a list, per ``table_format``.

        In ``auto`` mode the most spacious padding that keeps the table within
        ``table_threshold`` characters is used; if none fits, or the table has
        more than ``max_table_rows`` body rows, the list layout is used.
        """
        grid = TableGrid.from_table(node, self._plain.flatten)
        if grid.column_count == 0:
            logger.debug("Skipping table without columns")
            return None

        table_format = self.options.table_format
        if table_format == "always-list":
            return self._render_table_as_list(node, grid)
        if table_format == "always-ascii":
            return grid.render(PaddingConfig.full(grid.column_count))

        max_rows = self.options.max_table_rows
        if max_rows is not None and len(grid.rows) > max_rows:
            logger.debug("Table has %d rows (limit %d), using list layout", len(grid.rows), max_rows)
            return self._render_table_as_list(node, grid)

        config = select_padding(grid, self.options.table_threshold)
        if config is None:
            logger.debug(
                "No padding fits %d columns within %d characters, using list layout",
                grid.column_count,
                self.options.table_threshold,
            )
            return self._render_table_as_list(node, grid)
        return grid.render(config)

    def _render_table_as_list(self, node: Table, grid: TableGrid) -> str:
        """Render each body row as a bold first-column line plus nested lines.

        Output::

            * *Name:* Alice
            * ◦ _Age:_ 30

        """
        labels = grid.header
        lines = []
        for row in node.rows:
            for index, cell in enumerate(row.cells):
                label = labels[index] if index < len(labels) else ""
                if not label:
                    label = TABLE_FALLBACK_COLUMN_LABEL.format(index=index + 1)
                value = self.render_inline(cell.content)
                if index == 0:
                    lines.append(f"{BULLET_GLYPH} {BOLD_MARKER}{label}:{BOLD_MARKER} {value}")
                else:
                    lines.append(f"{BULLET_GLYPH} {NESTED_BULLET_GLYPH} {ITALIC_MARKER}{label}:{ITALIC_MARKER} {value}")
        return "\n".join(lines)

    def generic_visit(self, node: Node) -> str:
        """Render nodes without a dedicated method as their raw source text."""
        raw = getattr(node, "raw", "")
        logger.debug("Rendering %s node as raw text", type(node).__name__)
        return raw if isinstance(raw, str) else ""


class _HeadingInlineRenderer(WhatsAppRenderer):
    """Inline renderer for heading content.

    The heading line is already bold: bold nodes render their content only
    and italic never collapses with a bold child. Images have no text form
    in a heading and are kept as their Markdown source.
    """

    _mid_word_sensitive = (Emphasis, Strikethrough)

    def visit_strong(self, node: Strong) -> str:
        return self.render_inline(node.content)

    def visit_emphasis(self, node: Emphasis) -> str:
        return f"{ITALIC_MARKER}{self.render_inline(node.content)}{ITALIC_MARKER}"

    def visit_image(self, node: Image) -> str:
        return f"![{node.alt_text}]({node.url})"


__all__ = ["WhatsAppRenderer"]
