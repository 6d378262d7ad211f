#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for traversing and processing AST
nodes. Every node's ``accept`` calls exactly one ``visit_*`` method, so a
visitor is a closed dispatch table with one arm per node kind plus
``generic_visit`` as the default arm for kinds added later.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
    Text,
    TextBlock,
    ThematicBreak,
    Unrecognized,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a visit_* method for each node type. Visitors that
    render return the rendered text from each method; ``None`` means the node
    produced nothing.

    Examples
    --------
    Simple visitor that counts text nodes:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...
        ...     def generic_visit(self, node):
        ...         for child in getattr(node, "children", []):
        ...             child.accept(self)

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_text_block(self, node: TextBlock) -> Any:
        """Visit a TextBlock node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node (normally handled by visit_table)."""
        return self.generic_visit(node)

    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node (normally handled by visit_table)."""
        return self.generic_visit(node)

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    def visit_blank_line(self, node: BlankLine) -> Any:
        """Visit a BlankLine node; produces nothing by default."""
        return None

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any:
        """Visit an HTMLBlock node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_escape(self, node: Escape) -> Any:
        """Visit an Escape node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any:
        """Visit an HTMLInline node."""
        pass

    def visit_unrecognized(self, node: Unrecognized) -> Any:
        """Visit an Unrecognized node by deferring to the default arm."""
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for node kinds without a dedicated method.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
