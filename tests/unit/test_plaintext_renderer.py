#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_plaintext_renderer.py
"""Unit tests for the plain text renderer."""

import pytest

from md2whatsapp.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Escape,
    Heading,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    TextBlock,
    ThematicBreak,
    Unrecognized,
)
from md2whatsapp.exceptions import InvalidOptionsError
from md2whatsapp.options import WhatsAppRendererOptions
from md2whatsapp.renderers.plaintext import PlainTextRenderer, flatten_inline


@pytest.mark.unit
class TestFlattenInline:
    """Tests for flattening inline nodes."""

    def test_formatting_markers_stripped(self):
        nodes = [
            Strong(content=[Text(content="bold")]),
            Text(content=" "),
            Emphasis(content=[Text(content="italic")]),
            Text(content=" "),
            Strikethrough(content=[Text(content="gone")]),
        ]
        assert flatten_inline(nodes) == "bold italic gone"

    def test_nested_formatting(self):
        nodes = [Strong(content=[Emphasis(content=[Text(content="x")])])]
        assert flatten_inline(nodes) == "x"

    def test_code_without_delimiters(self):
        assert flatten_inline([Code(content="a*b")]) == "a*b"

    def test_link_with_url(self):
        link = Link(url="https://example.com", content=[Strong(content=[Text(content="site")])])
        assert flatten_inline([link]) == "site (https://example.com)"

    def test_image_alt_only(self):
        assert flatten_inline([Image(url="cat.png", alt_text="a cat")]) == "[a cat]"

    def test_text_entities_unescaped(self):
        assert flatten_inline([Text(content="Fish &amp; Chips")]) == "Fish & Chips"

    def test_escape_literal(self):
        assert flatten_inline([Escape(content="*")]) == "*"

    def test_line_break_is_space(self):
        nodes = [Text(content="a"), LineBreak(), Text(content="b")]
        assert flatten_inline(nodes) == "a b"

    def test_raw_passthrough(self):
        nodes = [HTMLInline(content="<br>"), Unrecognized(kind="math", raw="$x$")]
        assert flatten_inline(nodes) == "<br>$x$"

    def test_empty(self):
        assert flatten_inline([]) == ""

    def test_idempotent_on_own_output(self):
        nodes = [
            Text(content="Tom &amp; Jerry "),
            Strong(content=[Text(content="run")]),
            Text(content=" "),
            Link(url="https://x.io", content=[Text(content="home")]),
        ]
        once = flatten_inline(nodes)
        assert flatten_inline([Text(content=once)]) == once


@pytest.mark.unit
class TestPlainTextDocument:
    """Tests for whole-document plain text rendering."""

    def test_blocks_separated_by_blank_line(self):
        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="Title")]),
                Paragraph(content=[Strong(content=[Text(content="Body")])]),
                ThematicBreak(),
                CodeBlock(content="code\n"),
            ]
        )
        assert PlainTextRenderer().render_to_string(doc) == "Title\n\nBody\n\ncode"

    def test_lists_and_quotes(self):
        doc = Document(
            children=[
                List(
                    ordered=False,
                    items=[
                        ListItem(children=[TextBlock(content=[Text(content="one")])]),
                        ListItem(children=[TextBlock(content=[Text(content="two")])]),
                    ],
                ),
                BlockQuote(children=[Paragraph(content=[Text(content="quoted")])]),
            ]
        )
        assert PlainTextRenderer().render_to_string(doc) == "one\ntwo\n\nquoted"

    def test_table_rows(self, table_factory):
        doc = Document(children=[table_factory(["A", "B"], [["1", "2"]])])
        assert PlainTextRenderer().render_to_string(doc) == "A | B\n1 | 2"

    def test_wrong_options_type(self):
        class _OtherOptions:
            pass

        with pytest.raises(InvalidOptionsError):
            PlainTextRenderer(_OtherOptions())  # type: ignore[arg-type]

    def test_renderer_options_subclass_accepted(self):
        PlainTextRenderer(WhatsAppRendererOptions())
