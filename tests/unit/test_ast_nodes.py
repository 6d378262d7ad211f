#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for AST node classes.

Tests cover:
- Node creation and defaults
- Visitor dispatch, including the default arm for unknown kinds
- Validation of node constraints

"""

from dataclasses import fields

import pytest

from md2whatsapp.ast import (
    BlankLine,
    CodeBlock,
    Document,
    Emphasis,
    Escape,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    NodeVisitor,
    Paragraph,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    TextBlock,
    Unrecognized,
)


class _RecordingVisitor(NodeVisitor):
    """Visitor that records the name of every visit method called."""

    def __init__(self):
        self.calls = []

    def _record(self, name):
        self.calls.append(name)
        return name

    def visit_document(self, node):
        return self._record("document")

    def visit_heading(self, node):
        return self._record("heading")

    def visit_paragraph(self, node):
        return self._record("paragraph")

    def visit_text_block(self, node):
        return self._record("text_block")

    def visit_code_block(self, node):
        return self._record("code_block")

    def visit_block_quote(self, node):
        return self._record("block_quote")

    def visit_list(self, node):
        return self._record("list")

    def visit_list_item(self, node):
        return self._record("list_item")

    def visit_table(self, node):
        return self._record("table")

    def visit_thematic_break(self, node):
        return self._record("thematic_break")

    def visit_html_block(self, node):
        return self._record("html_block")

    def visit_text(self, node):
        return self._record("text")

    def visit_escape(self, node):
        return self._record("escape")

    def visit_emphasis(self, node):
        return self._record("emphasis")

    def visit_strong(self, node):
        return self._record("strong")

    def visit_strikethrough(self, node):
        return self._record("strikethrough")

    def visit_code(self, node):
        return self._record("code")

    def visit_link(self, node):
        return self._record("link")

    def visit_image(self, node):
        return self._record("image")

    def visit_line_break(self, node):
        return self._record("line_break")

    def visit_html_inline(self, node):
        return self._record("html_inline")

    def generic_visit(self, node):
        return self._record(f"generic:{type(node).__name__}")


@pytest.mark.unit
class TestNodeCreation:
    """Tests for node construction and defaults."""

    def test_document_defaults(self):
        doc = Document()
        assert doc.children == []

    def test_heading_level_validation(self):
        with pytest.raises(ValueError):
            Heading(level=0)
        with pytest.raises(ValueError):
            Heading(level=7)

    def test_list_defaults(self):
        lst = List(ordered=False)
        assert lst.items == []
        assert lst.start == 1

    @pytest.mark.parametrize(
        "node_type,names",
        [
            (Document, ["children"]),
            (CodeBlock, ["content"]),
            (List, ["ordered", "items", "start"]),
            (Table, ["rows", "header"]),
            (TableRow, ["cells"]),
            (TableCell, ["content"]),
            (Link, ["url", "content"]),
            (Image, ["url", "alt_text"]),
            (LineBreak, []),
        ],
    )
    def test_nodes_hold_only_rendered_fields(self, node_type, names):
        assert [f.name for f in fields(node_type)] == names

    def test_list_item_task_status(self):
        assert ListItem().task_status is None
        assert ListItem(task_status="checked").task_status == "checked"

    def test_mutable_defaults_not_shared(self):
        first = Paragraph()
        second = Paragraph()
        first.content.append(Text(content="x"))
        assert second.content == []

    def test_unrecognized_keeps_raw(self):
        node = Unrecognized(kind="footnote_ref", raw="[^1]")
        assert node.kind == "footnote_ref"
        assert node.raw == "[^1]"


@pytest.mark.unit
class TestVisitorDispatch:
    """Tests for accept() routing to visit_* methods."""

    @pytest.mark.parametrize(
        "node,expected",
        [
            (Document(), "document"),
            (Heading(level=2), "heading"),
            (Paragraph(), "paragraph"),
            (TextBlock(), "text_block"),
            (Text(content="a"), "text"),
            (Escape(content="*"), "escape"),
            (Strong(), "strong"),
            (Emphasis(), "emphasis"),
        ],
    )
    def test_accept_calls_matching_method(self, node, expected):
        visitor = _RecordingVisitor()
        assert node.accept(visitor) == expected

    def test_unrecognized_goes_to_generic_visit(self):
        visitor = _RecordingVisitor()
        assert Unrecognized(kind="math").accept(visitor) == "generic:Unrecognized"

    def test_table_parts_go_to_generic_visit(self):
        visitor = _RecordingVisitor()
        assert TableRow().accept(visitor) == "generic:TableRow"
        assert TableCell().accept(visitor) == "generic:TableCell"

    def test_blank_line_produces_nothing(self):
        visitor = _RecordingVisitor()
        assert BlankLine().accept(visitor) is None
        assert visitor.calls == []
