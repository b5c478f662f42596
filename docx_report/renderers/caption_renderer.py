"""Table caption emitter."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Optional

from ..exceptions import RenderingError
from ..models.paragraph import Paragraph
from ..models.style import CaptionPlacement
from ..models.table import Table
from .base_renderer import BaseRenderer, RenderContext
from .paragraph_renderer import ParagraphRenderer


class CaptionRenderer(BaseRenderer):
    """Render a table caption as a paragraph in the configured caption style."""

    def __init__(self, context: Optional[RenderContext] = None,
                 paragraph_renderer: Optional[ParagraphRenderer] = None) -> None:
        super().__init__(context)
        self.paragraph_renderer = paragraph_renderer or ParagraphRenderer(self.context)

    def render(self, table: Table) -> ET.Element:
        """
        Build the caption paragraph of ``table``.

        Raises:
            RenderingError: If the table has no caption
        """
        if not table.has_caption:
            raise RenderingError("Table has no caption", f"table {table.identity!r}")

        caption = Paragraph(
            identity=f"{table.identity}-caption",
            text=table.caption,
            style_id=self.config.caption_style_id,
            indentation=table.indentation,
        )
        return self.paragraph_renderer.render(caption)

    def placement(self, table: Table) -> CaptionPlacement:
        """Caption placement: the table's own, else its style's, else the configured default."""
        if table.caption_placement is not None:
            return table.caption_placement
        style = self.resolver.resolve(table.style_id)
        if style.caption_placement is not None:
            return style.caption_placement
        return self.config.caption_placement
