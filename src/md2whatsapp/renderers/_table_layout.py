#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/renderers/_table_layout.py
"""Fixed-width table layout for the WhatsApp renderer.

WhatsApp has no tables, so a table is either drawn as ASCII art inside a
monospace block or turned into a list. This module holds the ASCII side:
the flattened cell grid, the width formula, the ordered padding candidates
and the search for the first candidate that fits a width threshold.

Width of a table under a padding configuration::

    1 + sum(column_width + left_pad + right_pad + 1 for each column)

The leading 1 is the left border; the trailing 1 per column is the
separator (or right border) that follows it.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from md2whatsapp.ast.nodes import Node, Table, TableRow
from md2whatsapp.constants import (
    CODE_FENCE,
    TABLE_BORDER_FILL,
    TABLE_CELL_SEPARATOR,
    TABLE_HEADER_FILL,
    TABLE_JOINT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaddingConfig:
    """Per-column padding choice for a fixed-width table.

    Parameters
    ----------
    left : tuple of bool
        Whether each column gets one space before its content
    right : tuple of bool
        Whether each column gets one space after its content

    """

    left: tuple[bool, ...]
    right: tuple[bool, ...]

    def __post_init__(self) -> None:
        if len(self.left) != len(self.right):
            raise ValueError(f"left and right padding lengths differ: {len(self.left)} != {len(self.right)}")

    @classmethod
    def full(cls, column_count: int) -> PaddingConfig:
        """Return the configuration with padding on both sides of every column."""
        return cls(left=(True,) * column_count, right=(True,) * column_count)

    @property
    def column_count(self) -> int:
        return len(self.left)


def generate_padding_configs(column_count: int) -> list[PaddingConfig]:
    """Generate the padding candidates from most to least spacious.

    The order is:

    1. full padding;
    2. right padding removed from the last ``k`` columns, for ``k`` from 1
       to ``column_count`` (left padding kept everywhere);
    3. with no right padding anywhere, left padding removed from the last
       ``k`` columns, for ``k`` from 1 to ``column_count``.

    Parameters
    ----------
    column_count : int
        Number of table columns

    Returns
    -------
    list of PaddingConfig
        ``2 * column_count + 1`` candidates

    Examples
    --------
        >>> [(c.left, c.right) for c in generate_padding_configs(1)]
        [((True,), (True,)), ((True,), (False,)), ((False,), (False,))]

    """
    configs = [PaddingConfig.full(column_count)]

    for first_stripped in range(column_count - 1, -1, -1):
        right = tuple(index < first_stripped for index in range(column_count))
        configs.append(PaddingConfig(left=(True,) * column_count, right=right))

    for first_stripped in range(column_count - 1, -1, -1):
        left = tuple(index < first_stripped for index in range(column_count))
        configs.append(PaddingConfig(left=left, right=(False,) * column_count))

    return configs


@dataclass(frozen=True)
class TableGrid:
    """Plain-text cell grid of a table, with per-column content widths.

    Every row holds exactly ``column_count`` cells.

    Parameters
    ----------
    header : tuple of str
        Flattened header cells
    rows : tuple of tuple of str
        Flattened body rows
    widths : tuple of int
        Content width of each column

    """

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    widths: tuple[int, ...]

    @property
    def column_count(self) -> int:
        return len(self.widths)

    @classmethod
    def from_table(cls, table: Table, flatten: Callable[[Sequence[Node]], str]) -> TableGrid:
        """Flatten a table's cells once and measure its columns.

        The column count is the header length; without a header it is the
        length of the longest body row. Body rows are padded with empty
        cells or truncated to that count.

        Parameters
        ----------
        table : Table
            Table node to measure
        flatten : callable
            Converts a cell's inline content to plain text

        Returns
        -------
        TableGrid
            The measured grid

        """
        if table.header is not None and table.header.cells:
            column_count = len(table.header.cells)
        else:
            column_count = max((len(row.cells) for row in table.rows), default=0)

        def flatten_row(row: Optional[TableRow]) -> tuple[str, ...]:
            cells = [flatten(cell.content) for cell in row.cells] if row is not None else []
            cells = cells[:column_count]
            cells.extend([""] * (column_count - len(cells)))
            return tuple(cells)

        header = flatten_row(table.header)
        rows = tuple(flatten_row(row) for row in table.rows)
        widths = tuple(
            max([len(header[index])] + [len(row[index]) for row in rows]) for index in range(column_count)
        )
        return cls(header=header, rows=rows, widths=widths)

    def width(self, config: PaddingConfig) -> int:
        """Return the rendered width of the table under ``config``."""
        total = 1
        for index, column_width in enumerate(self.widths):
            total += column_width + config.left[index] + config.right[index] + 1
        return total

    def render(self, config: PaddingConfig | None = None) -> str:
        """Draw the table as ASCII art inside a code fence.

        Parameters
        ----------
        config : PaddingConfig or None, default = None
            Padding to apply; full padding when omitted

        Returns
        -------
        str
            Fenced table: top border, header row, ``=`` separator, body
            rows and bottom border

        """
        if config is None:
            config = PaddingConfig.full(self.column_count)

        lines = [
            self._border(config, TABLE_BORDER_FILL),
            self._row(self.header, config),
            self._border(config, TABLE_HEADER_FILL),
        ]
        lines.extend(self._row(row, config) for row in self.rows)
        lines.append(self._border(config, TABLE_BORDER_FILL))

        return f"{CODE_FENCE}\n" + "\n".join(lines) + f"\n{CODE_FENCE}"

    def _border(self, config: PaddingConfig, fill: str) -> str:
        segments = [
            fill * (column_width + config.left[index] + config.right[index])
            for index, column_width in enumerate(self.widths)
        ]
        return TABLE_JOINT + TABLE_JOINT.join(segments) + TABLE_JOINT

    def _row(self, cells: tuple[str, ...], config: PaddingConfig) -> str:
        padded = []
        for index, text in enumerate(cells):
            left_pad = " " if config.left[index] else ""
            right_pad = " " * (self.widths[index] - len(text) + config.right[index])
            padded.append(f"{left_pad}{text}{right_pad}")
        return TABLE_CELL_SEPARATOR + TABLE_CELL_SEPARATOR.join(padded) + TABLE_CELL_SEPARATOR


def select_padding(grid: TableGrid, threshold: int) -> PaddingConfig | None:
    """Return the first padding candidate whose width fits ``threshold``.

    Parameters
    ----------
    grid : TableGrid
        Measured table
    threshold : int
        Maximum accepted width in characters

    Returns
    -------
    PaddingConfig or None
        The most spacious fitting configuration, or None if even the
        unpadded table is too wide

    """
    for config in generate_padding_configs(grid.column_count):
        width = grid.width(config)
        if width <= threshold:
            logger.debug("Table fits at width %d (threshold %d)", width, threshold)
            return config
    return None


__all__ = ["PaddingConfig", "TableGrid", "generate_padding_configs", "select_padding"]
