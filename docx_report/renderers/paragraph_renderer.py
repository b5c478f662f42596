"""
Paragraph renderer.

Converts one :class:`Paragraph` snapshot into a ``w:p`` element holding a
single run.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Optional
import logging

from ..exceptions import GeometryError
from ..models.paragraph import Paragraph
from ..utils.units import indentation_to_twips, points_to_half_points
from ..utils.xml_utils import append_element, append_text, make_element
from .base_renderer import BaseRenderer, RenderContext
from .section_renderer import SectionRenderer

logger = logging.getLogger(__name__)


class ParagraphRenderer(BaseRenderer):
    """Render paragraphs as ``w:p`` elements."""

    def __init__(self, context: Optional[RenderContext] = None,
                 section_renderer: Optional[SectionRenderer] = None) -> None:
        super().__init__(context)
        self.section_renderer = section_renderer or SectionRenderer()

    def render(self, paragraph: Paragraph) -> ET.Element:
        """
        Render a paragraph.

        Args:
            paragraph: Paragraph snapshot

        Returns:
            Detached ``w:p`` element

        Raises:
            GeometryError: If a section terminator carries no or malformed geometry
        """
        lines = self.split_lines(paragraph.source_text)

        p = make_element("w:p")
        self._add_paragraph_properties(p, paragraph)

        r = append_element(p, "w:r")
        self._add_run_properties(r, paragraph)

        # Forced breaks stay inside the run; a new w:p would add spacing and reset indentation
        for index, line in enumerate(lines):
            if index:
                append_element(r, "w:br")
            append_text(r, line)

        logger.debug(f"Rendered paragraph {paragraph.identity!r} ({len(lines)} lines)")
        return p

    def render_into(self, parent: ET.Element, paragraph: Paragraph) -> ET.Element:
        """Render a paragraph and append it to ``parent``."""
        p = self.render(paragraph)
        parent.append(p)
        return p

    def split_lines(self, text: str) -> List[str]:
        """
        Split text on the configured line separator.

        Always returns at least one entry; ``k`` separators give ``k + 1``
        lines, empty lines included.
        """
        separator = self.config.line_separator
        if separator == "\n":
            text = text.replace("\r\n", "\n").replace("\r", "\n")
        return text.split(separator)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _add_paragraph_properties(self, p: ET.Element, paragraph: Paragraph) -> None:
        p_pr = append_element(p, "w:pPr")

        if paragraph.style_id:
            append_element(p_pr, "w:pStyle", {"w:val": paragraph.style_id})

        # Spacing is pinned so style-sheet defaults cannot open gaps between paragraphs
        append_element(p_pr, "w:spacing", {"w:before": 0, "w:after": 0})

        if paragraph.indentation > 0:
            append_element(p_pr, "w:ind", {"w:left": indentation_to_twips(paragraph.indentation)})

        if paragraph.is_section_terminator:
            if paragraph.geometry is None:
                raise GeometryError(
                    "Section terminator has no page geometry",
                    f"paragraph {paragraph.identity!r}",
                )
            p_pr.append(self.section_renderer.render(paragraph.geometry))

    def _add_run_properties(self, r: ET.Element, paragraph: Paragraph) -> None:
        r_pr = make_element("w:rPr")

        if paragraph.font_name:
            append_element(r_pr, "w:rFonts", {
                "w:ascii": paragraph.font_name,
                "w:hAnsi": paragraph.font_name,
            })
        if paragraph.bold:
            append_element(r_pr, "w:b")
        if paragraph.italic:
            append_element(r_pr, "w:i")
        if paragraph.color:
            append_element(r_pr, "w:color", {"w:val": paragraph.color})
        if paragraph.font_size > 0:
            append_element(r_pr, "w:sz", {"w:val": points_to_half_points(paragraph.font_size)})
        if paragraph.underline:
            append_element(r_pr, "w:u", {"w:val": "single"})

        if len(r_pr):
            r.append(r_pr)
