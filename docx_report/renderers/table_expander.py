"""
Expansion of a logical table into the physical tables that get rendered.

A list-view table becomes one two-column label/value table per data row;
a table wider than ``RenderConfig.max_columns_per_table`` is split into
consecutive column chunks. Every physical table keeps the logical table's
style, caption and placement.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence
import logging

from ..exceptions import TableLayoutError
from ..models.table import Cell, Column, Row, Table
from .base_renderer import BaseRenderer, RenderContext

logger = logging.getLogger(__name__)


class TableExpander(BaseRenderer):
    """Split logical tables into independent physical tables."""

    def __init__(self, context: Optional[RenderContext] = None) -> None:
        super().__init__(context)

    def expand(self, table: Table) -> List[Table]:
        """
        Expand a logical table.

        Args:
            table: Logical table

        Returns:
            Physical tables in output order (at least one)

        Raises:
            TableLayoutError: If the table declares no columns
        """
        if table.column_count <= 0:
            raise TableLayoutError("Table has no columns", f"table {table.identity!r}")

        if table.list_view:
            tables = self._expand_list_view(table)
        elif self.config.max_columns_per_table and table.column_count > self.config.max_columns_per_table:
            tables = self._split_columns(table, self.config.max_columns_per_table)
        else:
            return [table]

        if len(tables) > 1:
            tables = [replace(t, identity=f"{table.identity}-{n}") for n, t in enumerate(tables, 1)]
        logger.debug(f"Expanded table {table.identity!r} into {len(tables)} physical tables")
        return tables

    # ------------------------------------------------------------------
    # List view
    # ------------------------------------------------------------------
    def _expand_list_view(self, table: Table) -> List[Table]:
        if table.has_header_row and table.rows:
            labels = list(table.rows[0].cells)
            data_rows: Sequence[Row] = table.rows[1:]
        else:
            labels = [Cell(column.title) for column in table.columns]
            data_rows = table.rows

        labels += [Cell("")] * (table.column_count - len(labels))
        labels = labels[:table.column_count]

        label_width = self.config.list_view_label_width
        columns = (Column(label_width), Column(100 - label_width))

        if not data_rows:
            data_rows = [Row()]

        tables = []
        for data_row in data_rows:
            values = list(data_row.cells) + [Cell("")] * (len(labels) - len(data_row.cells))
            rows = tuple(
                Row((label, value), data_row.style)
                for label, value in zip(labels, values)
            )
            tables.append(replace(table, columns=columns, rows=rows))
        return tables

    # ------------------------------------------------------------------
    # Wide tables
    # ------------------------------------------------------------------
    def _split_columns(self, table: Table, max_columns: int) -> List[Table]:
        count = table.column_count
        equal_share = 100.0 / count
        tables = []
        for start in range(0, count, max_columns):
            stop = min(start + max_columns, count)
            chunk = table.columns[start:stop]

            # A chunk with any explicit width gets explicit widths throughout, summing to 100
            if any(c.has_explicit_width for c in chunk):
                shares = [c.width if c.has_explicit_width else equal_share for c in chunk]
                total = sum(shares)
                columns = tuple(
                    replace(c, width=min(share * 100.0 / total, 100.0))
                    for c, share in zip(chunk, shares)
                )
            else:
                columns = tuple(chunk)
            rows = tuple(Row(row.cells[start:stop], row.style) for row in table.rows)
            tables.append(replace(table, columns=columns, rows=rows))
        return tables
