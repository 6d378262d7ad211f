#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2whatsapp/options/whatsapp.py
"""Configuration options for WhatsApp rendering.

This module defines the options consumed by the WhatsApp renderer: the table
strategy, the width threshold of the table fitting search, and the text used
for thematic breaks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from md2whatsapp.constants import (
    DEFAULT_MAX_TABLE_ROWS,
    DEFAULT_TABLE_FORMAT,
    DEFAULT_TABLE_THRESHOLD,
    DEFAULT_THEMATIC_BREAK,
    TableFormat,
)
from md2whatsapp.options.base import BaseRendererOptions


@dataclass(frozen=True)
class WhatsAppRendererOptions(BaseRendererOptions):
    """Configuration options for WhatsApp rendering.

    Parameters
    ----------
    table_format : {"auto", "always-ascii", "always-list"}, default "auto"
        How tables are rendered:
        - "auto": narrowest fixed-width table that fits ``table_threshold``,
          else the list fallback
        - "always-ascii": fixed-width table with full padding
        - "always-list": list fallback
    table_threshold : int, default 26
        Maximum rendered table width, in characters, accepted by "auto".
    max_table_rows : int or None, default None
        In "auto" mode, tables with more body rows than this use the list
        fallback regardless of width. None disables the limit.
    thematic_break : str, default "───────────────"
        Text emitted for horizontal rules.

    Examples
    --------
        >>> options = WhatsAppRendererOptions(table_format="always-list")
        >>> options.create_updated(table_threshold=40).table_threshold
        40

    """

    table_format: TableFormat = field(
        default=DEFAULT_TABLE_FORMAT,
        metadata={
            "help": "Table rendering strategy",
            "choices": ["auto", "always-ascii", "always-list"],
            "importance": "core",
        },
    )
    table_threshold: int = field(
        default=DEFAULT_TABLE_THRESHOLD,
        metadata={"help": "Maximum table width in characters for auto mode", "type": int, "importance": "core"},
    )
    max_table_rows: int | None = field(
        default=DEFAULT_MAX_TABLE_ROWS,
        metadata={
            "help": "Use the list layout for tables with more body rows than this (auto mode)",
            "type": int,
            "importance": "advanced",
        },
    )
    thematic_break: str = field(
        default=DEFAULT_THEMATIC_BREAK,
        metadata={"help": "Text used for horizontal rules", "type": str, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.table_format not in get_args(TableFormat):
            raise ValueError(f"table_format must be one of {get_args(TableFormat)}, got {self.table_format!r}")
        if isinstance(self.table_threshold, bool) or not isinstance(self.table_threshold, int):
            raise ValueError(f"table_threshold must be an integer, got {self.table_threshold!r}")
        if self.table_threshold <= 0:
            raise ValueError(f"table_threshold must be positive, got {self.table_threshold}")
        if self.max_table_rows is not None and self.max_table_rows < 0:
            raise ValueError(f"max_table_rows must be non-negative, got {self.max_table_rows}")
