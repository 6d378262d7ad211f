#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/parsers/markdown.py
"""Markdown to AST converter.

This module adapts the token stream of the mistune parser into the
md2whatsapp AST. mistune does the tokenizing; this module only maps token
dictionaries onto nodes. Token kinds without a mapping become
``Unrecognized`` nodes that keep their raw text.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional, Union

import mistune
from mistune.core import InlineState
from mistune.inline_parser import InlineParser
from mistune.plugins import import_plugin

from md2whatsapp.ast import (
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
from md2whatsapp.exceptions import ParsingError
from md2whatsapp.options.markdown import MarkdownParserOptions
from md2whatsapp.parsers.base import BaseParser

logger = logging.getLogger(__name__)

_BACKSLASH_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


class _EscapePreservingInlineParser(InlineParser):
    """Inline parser with two changes to stock mistune tokens.

    Backslash escapes become their own ``escape`` token kind; stock mistune
    folds ``\\*`` into the surrounding text, which loses the information that
    the asterisk was meant literally.

    A triple delimiter run (``***x***`` or ``___x___``) is tokenized as
    strong wrapping emphasis. Stock mistune nests it the other way round,
    which would render ``_*x*_`` instead of ``*_x_*``.
    """

    def parse_escape(self, m: re.Match[str], state: InlineState) -> int:
        text = _BACKSLASH_ESCAPE_RE.sub(r"\1", m.group(0))
        state.append_token({"type": "escape", "raw": text})
        return m.end()

    def parse_emphasis(self, m: re.Match[str], state: InlineState) -> Optional[int]:
        token_count = len(state.tokens)
        end_pos = super().parse_emphasis(m, state)

        if len(m.group(0)) == 3 and len(state.tokens) == token_count + 1:
            token = state.tokens[-1]
            children = token.get("children") or []
            if token.get("type") == "emphasis" and len(children) == 1 and children[0].get("type") == "strong":
                inner = children[0].get("children", [])
                state.tokens[-1] = {"type": "strong", "children": [{"type": "emphasis", "children": inner}]}

        return end_pos


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    Without tables:

        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> doc = MarkdownToAstConverter(options).parse(markdown_text)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    def _create_markdown(self) -> mistune.Markdown:
        plugins = [import_plugin(name) for name in self.options.plugin_names()]
        return mistune.Markdown(renderer=None, inline=_EscapePreservingInlineParser(), plugins=plugins)

    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str or bytes
            Markdown text, or UTF-8 encoded Markdown bytes

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = self._load_text_content(input_data)

        try:
            tokens, _state = self._create_markdown().parse(markdown_content)
        except Exception as e:
            raise ParsingError(f"Failed to tokenize Markdown: {e}", parsing_stage="tokenize", original_error=e) from e

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        return [self._process_token(token) for token in tokens if isinstance(token, dict)]

    def _process_token(self, token: dict[str, Any]) -> Node:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node
            Resulting AST node; ``Unrecognized`` for unknown token kinds

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type == "paragraph":
            return Paragraph(content=self._process_inline_children(token))
        elif token_type == "block_text":
            # block_text is the bare text of a tight list item
            return TextBlock(content=self._process_inline_children(token))
        elif token_type == "block_code":
            return CodeBlock(content=token.get("raw", ""))
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(self._children(token)))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "blank_line":
            return BlankLine()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))

        logger.debug("Unrecognized block token type: %s", token_type)
        return Unrecognized(kind=token_type, raw=token.get("raw", ""))

    @staticmethod
    def _children(token: dict[str, Any]) -> list[dict[str, Any]]:
        children = token.get("children", [])
        return children if isinstance(children, list) else []

    @staticmethod
    def _attrs(token: dict[str, Any]) -> dict[str, Any]:
        attrs = token.get("attrs", {})
        return attrs if isinstance(attrs, dict) else {}

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token.

        Parameters
        ----------
        token : dict
            Heading token with 'attrs' (level) and 'children'

        Returns
        -------
        Heading
            Heading AST node

        """
        level = self._attrs(token).get("level", 1)

        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        return Heading(level=level, content=self._process_inline_children(token))

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = self._attrs(token)
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        if not isinstance(start, int):
            start = 1

        items = [self._process_list_item(child) for child in self._children(token) if isinstance(child, dict)]

        return List(ordered=ordered, items=items, start=start)

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process list_item / task_list_item token."""
        content = self._process_tokens(self._children(token))

        task_status: TaskStatus | None = None
        attrs = self._attrs(token)
        if token.get("type") == "task_list_item" or "checked" in attrs:
            task_status = "checked" if attrs.get("checked") else "unchecked"

        return ListItem(children=content, task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        mistune puts header cells directly under ``table_head`` and body cells
        under ``table_body`` -> ``table_row``.

        Parameters
        ----------
        token : dict
            Table token with 'children' (head and body)

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        rows = []

        for section in self._children(token):
            section_type = section.get("type", "")
            if section_type == "table_head":
                header = TableRow(cells=self._process_table_cells(section))
            elif section_type == "table_body":
                for row_token in self._children(section):
                    rows.append(TableRow(cells=self._process_table_cells(row_token)))

        return Table(header=header, rows=rows)

    def _process_table_cells(self, row_token: dict[str, Any]) -> list[TableCell]:
        return [
            TableCell(content=self._process_inline_children(cell_token))
            for cell_token in self._children(row_token)
            if cell_token.get("type") == "table_cell"
        ]

    def _process_inline_children(self, token: dict[str, Any]) -> list[Node]:
        return self._process_inline_tokens(self._children(token))

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        return [self._process_inline_token(token) for token in tokens if isinstance(token, dict)]

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_escape_token(self, token: dict[str, Any]) -> Escape:
        return Escape(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_children(token))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_children(token))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_children(token))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = self._attrs(token)
        return Link(url=attrs.get("url", ""), content=self._process_inline_children(token))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the alt text lives in the children."""
        attrs = self._attrs(token)
        alt_text = self._collect_raw_text(self._children(token))
        return Image(url=attrs.get("url", ""), alt_text=alt_text)

    def _collect_raw_text(self, tokens: list[dict[str, Any]]) -> str:
        parts = []
        for token in tokens:
            if not isinstance(token, dict):
                continue
            if "raw" in token:
                parts.append(str(token["raw"]))
            else:
                parts.append(self._collect_raw_text(self._children(token)))
        return "".join(parts)

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak()

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node
            Inline AST node; ``Unrecognized`` for unknown token kinds

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "escape": self._handle_escape_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_linebreak_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug("Unrecognized inline token type: %s", token_type)
        return Unrecognized(kind=token_type, raw=token.get("raw", ""))


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown string to AST.

    This is a convenience function that creates a converter and parses
    the markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from md2whatsapp.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> [type(child).__name__ for child in doc.children if type(child).__name__ != "BlankLine"]
    ['Heading', 'Paragraph']

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)
