"""Rendering routines for table blocks."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Optional
import logging

from ..models.paragraph import Paragraph
from ..models.style import CaptionPlacement, EffectiveStyle
from ..models.table import Cell, Row, Table
from ..utils.units import (
    indentation_to_twips,
    percentage_to_fiftieths,
    percentage_to_twips,
)
from ..utils.xml_utils import append_element
from .base_renderer import BaseRenderer, RenderContext
from .caption_renderer import CaptionRenderer
from .paragraph_renderer import ParagraphRenderer
from .table_expander import TableExpander

logger = logging.getLogger(__name__)

LIST_VIEW_COLUMNS = 2


class TableRenderer(BaseRenderer):
    """Render logical tables as one or more ``w:tbl`` elements."""

    def __init__(
        self,
        context: Optional[RenderContext] = None,
        paragraph_renderer: Optional[ParagraphRenderer] = None,
        caption_renderer: Optional[CaptionRenderer] = None,
        expander: Optional[TableExpander] = None,
    ) -> None:
        super().__init__(context)
        self.paragraph_renderer = paragraph_renderer or ParagraphRenderer(self.context)
        self.caption_renderer = caption_renderer or CaptionRenderer(self.context, self.paragraph_renderer)
        self.expander = expander or TableExpander(self.context)

    def render(self, table: Table, parent: ET.Element) -> None:
        """
        Append the physical tables of ``table`` to ``parent``.

        Each physical table is followed by its caption (when placed below)
        and one empty separator paragraph.

        Args:
            table: Logical table
            parent: Element receiving the output (``w:body``, ``w:tc`` ...)

        Raises:
            TableLayoutError: If the table declares no columns
            StyleNotFoundError: If a table, row or cell style is unknown
        """
        for physical in self.expander.expand(table):
            self._render_physical(physical, parent)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def render_width(self, table: Table) -> int:
        """Approximate rendered table width in twips (declared width less indentation)."""
        width = percentage_to_twips(table.width, self.context.content_width_twips)
        return max(width - indentation_to_twips(table.indentation), 0)

    def column_percentages(self, table: Table) -> List[float]:
        """Width of every grid column as a percentage of the table width."""
        count = LIST_VIEW_COLUMNS if table.list_view else table.column_count
        percentages = []
        for index in range(count):
            column = table.columns[index] if index < table.column_count else None
            if column is not None and column.has_explicit_width:
                percentages.append(column.width)
            else:
                percentages.append(100.0 / count)
        return percentages

    def column_widths(self, table: Table) -> List[int]:
        """Grid column widths in twips, truncated to integers."""
        total = self.render_width(table)
        return [percentage_to_twips(pct, total) for pct in self.column_percentages(table)]

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------
    def _render_physical(self, table: Table, parent: ET.Element) -> None:
        placement = self.caption_renderer.placement(table) if table.has_caption else None

        if placement is CaptionPlacement.ABOVE:
            parent.append(self.caption_renderer.render(table))

        table_style = self.resolver.resolve(table.style_id)

        tbl = append_element(parent, "w:tbl")
        self._add_table_properties(tbl, table, table_style)

        grid = append_element(tbl, "w:tblGrid")
        for width in self.column_widths(table):
            append_element(grid, "w:gridCol", {"w:w": width})

        for row_index, row in enumerate(table.rows):
            self._render_row(tbl, table, row_index, row)

        if placement is CaptionPlacement.BELOW:
            parent.append(self.caption_renderer.render(table))

        # Keeps consumers from merging adjacent tables or gluing a table to a section break
        append_element(parent, "w:p")

        logger.debug(
            f"Rendered table {table.identity!r}: {len(table.rows)} rows, "
            f"{len(grid)} columns"
        )

    def _add_table_properties(self, tbl: ET.Element, table: Table, style: EffectiveStyle) -> None:
        tbl_pr = append_element(tbl, "w:tblPr")

        if table.style_id:
            append_element(tbl_pr, "w:tblStyle", {"w:val": table.style_id})

        append_element(tbl_pr, "w:tblW", {
            "w:w": percentage_to_fiftieths(table.width),
            "w:type": "pct",
        })

        if table.indentation > 0:
            append_element(tbl_pr, "w:tblInd", {
                "w:w": indentation_to_twips(table.indentation),
                "w:type": "dxa",
            })

        if style.background_color:
            self._add_shading(tbl_pr, style.background_color)

    def _render_row(self, tbl: ET.Element, table: Table, row_index: int, row: Row) -> None:
        tr = append_element(tbl, "w:tr")

        # Inherited rows are never looked up, so they cannot override the table style
        row_style = self.resolver.resolve_ref(row.style)

        if table.is_header_row(row_index):
            tr_pr = append_element(tr, "w:trPr")
            append_element(tr_pr, "w:tblHeader")
            append_element(tr_pr, "w:cnfStyle", {"w:firstRow": 1})

        for column_index, cell in enumerate(row.cells):
            self._render_cell(tr, table, row_index, row, row_style, column_index, cell)

    def _render_cell(self, tr: ET.Element, table: Table,
                     row_index: int, row: Row, row_style: Optional[EffectiveStyle],
                     column_index: int, cell: Cell) -> None:
        tc = append_element(tr, "w:tc")
        tc_pr = append_element(tc, "w:tcPr")

        cell_style = self.resolver.resolve_ref(cell.style)

        if table.list_view and column_index == 0 and row_index > 0:
            append_element(tc_pr, "w:cnfStyle", {"w:firstColumn": 1})

        column = table.columns[column_index] if column_index < table.column_count else None
        if column is not None and column.has_explicit_width:
            append_element(tc_pr, "w:tcW", {
                "w:w": percentage_to_fiftieths(column.width),
                "w:type": "pct",
            })
        else:
            append_element(tc_pr, "w:tcW", {"w:w": 0, "w:type": "auto"})

        fill = self.resolver.background_color(cell_style, row_style)
        if fill:
            self._add_shading(tc_pr, fill)

        # Font attributes come from the first owned level: cell, row, table, document default
        font_style = self.resolver.resolve_cascade(cell.style, row.style, table.style_id)
        paragraph = self._cell_paragraph(cell, row, font_style)
        self.paragraph_renderer.render_into(tc, paragraph)

    def _cell_paragraph(self, cell: Cell, row: Row, style: EffectiveStyle) -> Paragraph:
        """One-run paragraph carrying the cell text and its effective font."""
        style_ref = cell.style if not cell.style.is_inherited else row.style
        return Paragraph(
            identity=self.config.empty_cell_text,
            text=cell.text,
            style_id=style_ref.style_id,
            font_name=style.font_name,
            font_size=style.font_size,
            bold=style.bold,
            italic=style.italic,
            underline=style.underline,
            color=style.color,
        )

    @staticmethod
    def _add_shading(parent: ET.Element, fill: str) -> None:
        append_element(parent, "w:shd", {"w:val": "clear", "w:color": "auto", "w:fill": fill})
