#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2whatsapp/options/markdown.py
"""Configuration options for Markdown parsing.

This module defines the options that select which mistune extensions the
parser adapter enables.
"""

from dataclasses import dataclass, field

from md2whatsapp.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Parse GFM pipe tables into Table nodes.
    parse_strikethrough : bool, default True
        Parse ``~~text~~`` into Strikethrough nodes.
    parse_task_lists : bool, default True
        Parse ``- [ ]`` / ``- [x]`` list items into task items.

    """

    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse GFM tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse ~~strikethrough~~ text", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse GFM task list items", "importance": "core"},
    )

    def plugin_names(self) -> list[str]:
        """Return the mistune plugin names enabled by these options."""
        plugins = []
        if self.parse_strikethrough:
            plugins.append("strikethrough")
        if self.parse_tables:
            plugins.append("table")
        if self.parse_task_lists:
            plugins.append("task_lists")
        return plugins
