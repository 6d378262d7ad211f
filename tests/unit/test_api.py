#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_api.py
"""Unit tests for the public conversion API."""

import pytest

from md2whatsapp import render_document, to_whatsapp
from md2whatsapp.ast import Document, Paragraph, Text
from md2whatsapp.exceptions import ParsingError, RenderingError, ValidationError
from md2whatsapp.options import MarkdownParserOptions, WhatsAppRendererOptions
from md2whatsapp.parsers.markdown import MarkdownToAstConverter
from md2whatsapp.renderers.whatsapp import WhatsAppRenderer


@pytest.mark.unit
class TestToWhatsApp:
    """Tests for to_whatsapp."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
    def test_empty_input_skips_parser(self, text, monkeypatch):
        def _fail(self, input_data):
            raise AssertionError("parser must not run")

        monkeypatch.setattr(MarkdownToAstConverter, "parse", _fail)
        assert to_whatsapp(text) == ""

    def test_non_string_input_rejected(self):
        with pytest.raises(ValidationError):
            to_whatsapp(b"# bytes")  # type: ignore[arg-type]

    def test_heading_and_paragraph(self):
        assert to_whatsapp("# Hello\n\nSome **bold** text") == "*📌 Hello*\n\nSome *bold* text"

    def test_mid_word_bold(self):
        assert to_whatsapp("super**bold**ly") == "superboldly"

    @pytest.mark.parametrize("markdown", ["***x***", "___x___", "**_x_**", "__*x*__"])
    def test_bold_italic_collapses_to_italic_inside_bold(self, markdown):
        assert to_whatsapp(markdown) == "*_x_*"

    @pytest.mark.parametrize("markdown", ["_**x**_", "*__x__*"])
    def test_italic_bold_collapses_to_bold_inside_italic(self, markdown):
        assert to_whatsapp(markdown) == "_*x*_"

    def test_mapping_options(self):
        markdown = "| A | B |\n|---|---|\n| 1 | 2 |"
        assert to_whatsapp(markdown, {"table_format": "always-list"}) == "* *A:* 1\n* ◦ _B:_ 2"

    def test_options_instance(self):
        markdown = "a\n\n---\n\nb"
        options = WhatsAppRendererOptions(thematic_break="· · ·")
        assert to_whatsapp(markdown, options) == "a\n\n· · ·\n\nb"

    def test_parser_options(self):
        markdown = "- [x] done"
        assert to_whatsapp(markdown) == "☑ done"
        assert to_whatsapp(markdown, parser_options=MarkdownParserOptions(parse_task_lists=False)) == "* [x] done"

    def test_calls_do_not_share_configuration(self):
        markdown = "| Name | Description |\n|---|---|\n| Widget | A rather long description |"
        as_list = to_whatsapp(markdown, {"table_format": "always-list"})
        as_ascii = to_whatsapp(markdown, {"table_format": "always-ascii"})
        default = to_whatsapp(markdown)
        assert "```" not in as_list
        assert as_ascii.startswith("```")
        assert default == as_list

    def test_parsing_error_propagates(self, monkeypatch):
        def _fail(self, input_data):
            raise ParsingError("bad tokens", parsing_stage="tokenize")

        monkeypatch.setattr(MarkdownToAstConverter, "parse", _fail)
        with pytest.raises(ParsingError):
            to_whatsapp("text")


@pytest.mark.unit
class TestRenderDocument:
    """Tests for render_document."""

    def test_renders_tree(self):
        doc = Document(children=[Paragraph(content=[Text(content="hi")])])
        assert render_document(doc) == "hi"

    def test_rejects_non_document(self):
        with pytest.raises(ValidationError):
            render_document("text")  # type: ignore[arg-type]

    def test_unexpected_failure_wrapped(self, monkeypatch):
        def _boom(self, doc):
            raise KeyError("missing")

        monkeypatch.setattr(WhatsAppRenderer, "render_to_string", _boom)
        with pytest.raises(RenderingError) as exc_info:
            render_document(Document())
        assert isinstance(exc_info.value.original_error, KeyError)
