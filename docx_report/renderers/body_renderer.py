"""
Body renderer.

Renders a sequence of paragraph and table blocks into ``w:body`` and closes
the document with the geometry of its last section.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterable, Optional, Union
import logging

from ..exceptions import RenderingError
from ..models.paragraph import Paragraph
from ..models.table import Table
from ..utils.xml_utils import make_element
from .base_renderer import BaseRenderer, RenderContext
from .paragraph_renderer import ParagraphRenderer
from .section_renderer import SectionRenderer
from .table_renderer import TableRenderer

logger = logging.getLogger(__name__)

Block = Union[Paragraph, Table]


class BodyRenderer(BaseRenderer):
    """Render document blocks in order into a ``w:body`` element."""

    def __init__(self, context: Optional[RenderContext] = None) -> None:
        super().__init__(context)
        self.section_renderer = SectionRenderer()
        self.paragraph_renderer = ParagraphRenderer(self.context, self.section_renderer)
        self.table_renderer = TableRenderer(self.context, self.paragraph_renderer)

    def render(self, blocks: Iterable[Block]) -> ET.Element:
        """
        Render blocks into ``w:body``.

        Sections other than the last are closed by their terminator
        paragraphs; the last section's geometry is taken from the render
        context and appended as the final child of the body.

        Args:
            blocks: Paragraphs and tables in document order

        Returns:
            ``w:body`` element

        Raises:
            RenderingError: If a block is neither a Paragraph nor a Table
        """
        body = make_element("w:body")
        count = 0
        for block in blocks:
            if isinstance(block, Paragraph):
                self.paragraph_renderer.render_into(body, block)
            elif isinstance(block, Table):
                self.table_renderer.render(block, body)
            else:
                raise RenderingError("Unsupported block type", type(block).__name__)
            count += 1

        body.append(self.section_renderer.render(self.context.page_geometry))
        logger.debug(f"Rendered body with {count} blocks")
        return body

    def render_document(self, blocks: Iterable[Block]) -> ET.Element:
        """Render blocks wrapped in a ``w:document`` root."""
        document = make_element("w:document")
        document.append(self.render(blocks))
        return document
