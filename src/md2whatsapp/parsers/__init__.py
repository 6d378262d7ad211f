"""Parsers that build the md2whatsapp AST."""

from md2whatsapp.parsers.base import BaseParser
from md2whatsapp.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
