"""Section properties (``w:sectPr``) emitter."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Optional
import logging

from ..exceptions import GeometryError
from ..models.page import Orientation, PageGeometry
from ..utils.units import mm_to_twips
from ..utils.xml_utils import append_element, make_element, set_attr

logger = logging.getLogger(__name__)


class SectionRenderer:
    """
    Emit the page geometry of one section.

    The last section of a document is a child of ``w:body``; every other
    section rides inside the ``w:pPr`` of the paragraph that terminates it.
    """

    def render(self, geometry: Optional[PageGeometry]) -> ET.Element:
        """
        Build a ``w:sectPr`` element.

        Args:
            geometry: Page geometry of the section

        Returns:
            ``w:sectPr`` with ``w:pgSz`` and ``w:pgMar``

        Raises:
            GeometryError: If geometry is missing or malformed
        """
        if geometry is None:
            raise GeometryError("Section properties require a page geometry")
        if not isinstance(geometry, PageGeometry):
            raise GeometryError("Invalid page geometry", type(geometry).__name__)
        geometry.validate()

        sect_pr = make_element("w:sectPr")

        pg_sz = append_element(sect_pr, "w:pgSz", {
            "w:w": mm_to_twips(geometry.width_mm),
            "w:h": mm_to_twips(geometry.height_mm),
        })
        if geometry.orientation is Orientation.LANDSCAPE:
            set_attr(pg_sz, "w:orient", "landscape")

        append_element(sect_pr, "w:pgMar", {
            "w:top": mm_to_twips(geometry.margin_top_mm),
            "w:right": mm_to_twips(geometry.margin_right_mm),
            "w:bottom": mm_to_twips(geometry.margin_bottom_mm),
            "w:left": mm_to_twips(geometry.margin_left_mm),
            "w:header": mm_to_twips(geometry.header_mm),
            "w:footer": mm_to_twips(geometry.footer_mm),
            "w:gutter": 0,
        })

        logger.debug(
            f"Section properties: {geometry.width_mm}x{geometry.height_mm}mm "
            f"{geometry.orientation.value}"
        )
        return sect_pr
