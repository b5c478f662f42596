"""
Tests for TableExpander.
"""

from dataclasses import replace

import pytest

from docx_report.config import RenderConfig
from docx_report.exceptions import TableLayoutError
from docx_report.models import Column, Row, StyleRef, Table
from docx_report.renderers import RenderContext, TableExpander


def cell_texts(table):
    return [[cell.text for cell in row.cells] for row in table.rows]


class TestTableExpander:
    """Test cases for TableExpander."""

    @pytest.fixture
    def expander(self, context):
        return TableExpander(context)

    def test_plain_table_unchanged(self, expander, sample_table):
        assert expander.expand(sample_table) == [sample_table]

    def test_zero_columns(self, expander):
        with pytest.raises(TableLayoutError):
            expander.expand(Table("empty", rows=[Row.from_texts(["a"])]))

    def test_list_view_with_header(self, expander, sample_table):
        table = replace(sample_table, list_view=True, style_id="GridTable")
        tables = expander.expand(table)

        assert [t.identity for t in tables] == ["t1-1", "t1-2"]
        assert cell_texts(tables[0]) == [["Name", "Apple"], ["Qty", "3"], ["Price", "1.20"]]
        assert cell_texts(tables[1]) == [["Name", "Pear"], ["Qty", "5"], ["Price", "0.80"]]
        for t in tables:
            assert t.column_count == 2
            assert [c.width for c in t.columns] == [30.0, 70.0]
            assert t.style_id == "GridTable"

    def test_list_view_uses_column_titles(self, expander):
        table = Table(
            "lv",
            columns=[Column(title="Key"), Column(title="Value")],
            rows=[Row.from_texts(["k1", "v1"], style="Highlight")],
            list_view=True,
        )
        (single,) = expander.expand(table)

        assert single.identity == "lv"
        assert cell_texts(single) == [["Key", "k1"], ["Value", "v1"]]
        assert all(row.style == StyleRef.own("Highlight") for row in single.rows)

    def test_list_view_pads_short_rows(self, expander):
        table = Table.from_texts("lv", [["A", "B", "C"], ["1"]], has_header_row=True, list_view=True)
        (single,) = expander.expand(table)
        assert cell_texts(single) == [["A", "1"], ["B", ""], ["C", ""]]

    def test_list_view_without_data_rows(self, expander):
        table = Table.from_texts("lv", [["A", "B"]], has_header_row=True, list_view=True)
        (single,) = expander.expand(table)
        assert cell_texts(single) == [["A", ""], ["B", ""]]

    def test_list_view_label_width_from_config(self, registry, sample_table):
        expander = TableExpander(RenderContext(registry, RenderConfig(list_view_label_width=40)))
        table = replace(sample_table, list_view=True)
        assert [c.width for c in expander.expand(table)[0].columns] == [40, 60]


class TestWideTableSplit:
    """Test cases for splitting tables wider than max_columns_per_table."""

    @pytest.fixture
    def expander(self, registry):
        return TableExpander(RenderContext(registry, RenderConfig(max_columns_per_table=2)))

    def test_split_chunks(self, expander, sample_table):
        tables = expander.expand(sample_table)

        assert [t.identity for t in tables] == ["t1-1", "t1-2"]
        assert cell_texts(tables[0])[0] == ["Name", "Qty"]
        assert cell_texts(tables[1]) == [["Price"], ["1.20"], ["0.80"]]
        assert all(t.has_header_row for t in tables)

    def test_split_keeps_row_styles(self, expander):
        table = Table("w", [Column()] * 3, [Row.from_texts(["a", "b", "c"], style="HeaderRow")])
        assert all(t.rows[0].style == StyleRef.own("HeaderRow") for t in expander.expand(table))

    def test_split_rescales_explicit_widths(self, expander):
        table = Table.from_texts("w", [["a", "b", "c"]], widths=[20, 20, 60])
        first, second = expander.expand(table)

        assert [c.width for c in first.columns] == pytest.approx([50.0, 50.0])
        assert [c.width for c in second.columns] == pytest.approx([100.0])

    def test_split_mixed_chunk_gets_explicit_widths(self, expander):
        table = Table.from_texts("w", [["a", "b", "c", "d"]], widths=[50, None, None, None])
        first, second = expander.expand(table)

        assert [c.width for c in first.columns] == pytest.approx([200 / 3, 100 / 3])
        assert not any(c.has_explicit_width for c in second.columns)

    def test_narrow_table_not_split(self, expander):
        table = Table.from_texts("n", [["a", "b"]])
        assert expander.expand(table) == [table]
