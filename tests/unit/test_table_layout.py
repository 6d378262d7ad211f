#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_table_layout.py
"""Unit tests for the fixed-width table layout engine."""

import pytest

from md2whatsapp.ast import Strong, Table, TableCell, TableRow, Text
from md2whatsapp.renderers._table_layout import (
    PaddingConfig,
    TableGrid,
    generate_padding_configs,
    select_padding,
)
from md2whatsapp.renderers.plaintext import flatten_inline

T, F = True, False


def _grid(table_factory, header, rows):
    return TableGrid.from_table(table_factory(header, rows), flatten_inline)


@pytest.mark.unit
class TestGeneratePaddingConfigs:
    """Tests for the padding candidate order."""

    @pytest.mark.parametrize("columns", [0, 1, 2, 3, 5])
    def test_candidate_count(self, columns):
        assert len(generate_padding_configs(columns)) == 2 * columns + 1

    def test_two_column_order(self):
        configs = [(config.left, config.right) for config in generate_padding_configs(2)]
        assert configs == [
            ((T, T), (T, T)),
            ((T, T), (T, F)),
            ((T, T), (F, F)),
            ((T, F), (F, F)),
            ((F, F), (F, F)),
        ]

    def test_three_column_order(self):
        configs = [(config.left, config.right) for config in generate_padding_configs(3)]
        assert configs == [
            ((T, T, T), (T, T, T)),
            ((T, T, T), (T, T, F)),
            ((T, T, T), (T, F, F)),
            ((T, T, T), (F, F, F)),
            ((T, T, F), (F, F, F)),
            ((T, F, F), (F, F, F)),
            ((F, F, F), (F, F, F)),
        ]

    def test_full_config(self):
        assert PaddingConfig.full(2) == PaddingConfig(left=(T, T), right=(T, T))

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValueError):
            PaddingConfig(left=(T,), right=(T, T))


@pytest.mark.unit
class TestTableGrid:
    """Tests for grid flattening, width and rendering."""

    def test_widths_from_header_and_body(self, table_factory):
        grid = _grid(table_factory, ["Name", "Qty"], [["Apple", "3"], ["Fig", "12345"]])
        assert grid.widths == (5, 5)
        assert grid.column_count == 2

    def test_cells_flattened_to_plain_text(self):
        table = Table(
            header=TableRow(cells=[TableCell(content=[Strong(content=[Text(content="Bold")])])]),
            rows=[TableRow(cells=[TableCell(content=[Text(content="a &amp; b")])])],
        )
        grid = TableGrid.from_table(table, flatten_inline)
        assert grid.header == ("Bold",)
        assert grid.rows == (("a & b",),)

    def test_short_rows_padded_and_long_rows_truncated(self, table_factory):
        grid = _grid(table_factory, ["A", "B"], [["1"], ["1", "2", "3"]])
        assert grid.rows == (("1", ""), ("1", "2"))

    def test_missing_header_uses_longest_row(self, table_factory):
        grid = _grid(table_factory, None, [["1"], ["1", "2"]])
        assert grid.column_count == 2
        assert grid.header == ("", "")

    def test_empty_table_has_no_columns(self):
        assert TableGrid.from_table(Table(), flatten_inline).column_count == 0

    def test_width_formula(self, table_factory):
        grid = _grid(table_factory, ["A", "B"], [["1", "2"]])
        assert grid.width(PaddingConfig.full(2)) == 9
        assert grid.width(PaddingConfig(left=(T, T), right=(T, F))) == 8
        assert grid.width(PaddingConfig(left=(F, F), right=(F, F))) == 5

    def test_render_full_padding(self, table_factory):
        grid = _grid(table_factory, ["Name", "Qty"], [["Apple", "3"]])
        expected = "\n".join(
            [
                "```",
                "+-------+-----+",
                "| Name  | Qty |",
                "+=======+=====+",
                "| Apple | 3   |",
                "+-------+-----+",
                "```",
            ]
        )
        assert grid.render() == expected

    def test_render_partial_padding(self, table_factory):
        grid = _grid(table_factory, ["Name", "Qty"], [["Apple", "3"]])
        config = PaddingConfig(left=(T, F), right=(F, F))
        expected = "\n".join(
            [
                "```",
                "+------+---+",
                "| Name |Qty|",
                "+======+===+",
                "| Apple|3  |",
                "+------+---+",
                "```",
            ]
        )
        assert grid.render(config) == expected

    def test_rendered_line_length_matches_width(self, table_factory):
        grid = _grid(table_factory, ["Name", "Qty"], [["Apple", "3"], ["Kiwi", "10"]])
        for config in generate_padding_configs(grid.column_count):
            lines = grid.render(config).split("\n")[1:-1]
            assert {len(line) for line in lines} == {grid.width(config)}


@pytest.mark.unit
class TestSelectPadding:
    """Tests for the fitting search."""

    def test_full_padding_when_it_fits(self, table_factory):
        grid = _grid(table_factory, ["A", "B"], [["1", "2"]])
        assert select_padding(grid, 26) == PaddingConfig.full(2)

    def test_first_fit_in_priority_order(self, table_factory):
        # Full padding is 9 wide; dropping the last column's right padding gives 8.
        grid = _grid(table_factory, ["A", "B"], [["1", "2"]])
        assert select_padding(grid, 8) == PaddingConfig(left=(T, T), right=(T, F))

    def test_boundary_width_is_accepted(self, table_factory):
        grid = _grid(table_factory, ["A", "B"], [["1", "2"]])
        assert select_padding(grid, 5) == PaddingConfig(left=(F, F), right=(F, F))

    def test_nothing_fits(self, table_factory):
        grid = _grid(table_factory, ["A", "B"], [["1", "2"]])
        assert select_padding(grid, 4) is None
