#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/ast/nodes.py
"""Node types of the md2whatsapp document tree.

The Markdown parser adapter builds this tree from mistune's tokens and the
renderers walk it through ``accept``. Nodes hold only what WhatsApp output
can use; presentation details that the target cannot show (code languages,
link titles, column alignment) are not kept.

Block nodes
    Document, Heading, Paragraph, TextBlock, CodeBlock, BlockQuote, List,
    ListItem, Table, TableRow, TableCell, ThematicBreak, BlankLine, HTMLBlock

Inline nodes
    Text, Escape, Emphasis, Strong, Strikethrough, Code, Link, Image,
    LineBreak, HTMLInline

``Unrecognized`` may appear in either position. It stands for a token kind
the adapter has no mapping for and carries the token's raw text.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

TaskStatus = Literal["checked", "unchecked"]


class Node(ABC):
    """Abstract base of every tree node."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Dispatch to the ``visit_*`` method of ``visitor`` for this node kind.

        Parameters
        ----------
        visitor : Any
            Object implementing the ``NodeVisitor`` methods

        Returns
        -------
        Any
            Whatever the visit method returns

        """


# ----------------------------------------------------------------------------
# Blocks
# ----------------------------------------------------------------------------


@dataclass
class Document(Node):
    """Root of the tree; its children are block nodes in source order."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """ATX or setext heading.

    Parameters
    ----------
    level : int
        Heading depth, 1 to 6
    content : list of Node
        Inline nodes of the heading line

    Raises
    ------
    ValueError
        If ``level`` is outside 1 to 6

    """

    level: int
    content: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph(self)


@dataclass
class TextBlock(Node):
    """Inline text held directly by a tight list item, without a paragraph."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text_block(self)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code, kept verbatim including its final newline."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Quoted blocks; nested quotes appear as BlockQuote children."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """Bulleted or numbered list.

    Parameters
    ----------
    ordered : bool
        True for a numbered list
    items : list of ListItem
        Items in source order
    start : int, default = 1
        Number of the first item of an ordered list

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """One list entry.

    Parameters
    ----------
    children : list of Node
        Block nodes of the item: its text, then any nested lists
    task_status : {'checked', 'unchecked'} or None, default = None
        Checkbox state of a task list entry; None for a plain item

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[TaskStatus] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """Pipe table.

    Parameters
    ----------
    rows : list of TableRow
        Body rows; their lengths may differ from the header's
    header : TableRow or None, default = None
        Header row, when the source has one

    """

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    cells: list[TableCell] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    def accept(self, visitor: Any) -> Any:
        return visitor.visit_thematic_break(self)


@dataclass
class BlankLine(Node):
    """Blank source line between blocks; renderers produce nothing for it."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_blank_line(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, passed through as written."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html_block(self)


# ----------------------------------------------------------------------------
# Inlines
# ----------------------------------------------------------------------------


@dataclass
class Text(Node):
    """Literal text; HTML entities are still encoded."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text(self)


@dataclass
class Escape(Node):
    """Backslash-escaped characters, stored without the backslash."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_escape(self)


@dataclass
class Emphasis(Node):
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strong(self)


@dataclass
class Strikethrough(Node):
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strikethrough(self)


@dataclass
class Code(Node):
    """Code span; ``content`` excludes the backticks."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    url : str
        Destination as written in the source
    content : list of Node
        Inline nodes of the link text

    """

    url: str
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image reference; WhatsApp text cannot embed it, so only text is kept."""

    url: str
    alt_text: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass
class LineBreak(Node):
    """Hard or soft line break; both render the same way."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_line_break(self)


@dataclass
class HTMLInline(Node):
    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html_inline(self)


# ----------------------------------------------------------------------------
# Unknown tokens
# ----------------------------------------------------------------------------


@dataclass
class Unrecognized(Node):
    """Token kind without a node mapping.

    Parameters
    ----------
    kind : str
        Token type reported by mistune
    raw : str, default = ""
        Source text of the token, when mistune provides it

    """

    kind: str
    raw: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_unrecognized(self)
