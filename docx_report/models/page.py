"""
Page geometry model.

Handles page size, orientation and margins (all lengths in millimeters) for
the section properties emitted on section-terminating paragraphs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict
import logging

from ..exceptions import GeometryError

logger = logging.getLogger(__name__)


class Orientation(Enum):
    """Page orientation options."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class PageSize(Enum):
    """Standard page sizes."""
    A4 = (210.0, 297.0)  # mm
    A3 = (297.0, 420.0)
    A5 = (148.0, 210.0)
    LETTER = (215.9, 279.4)
    LEGAL = (215.9, 355.6)


@dataclass(frozen=True)
class PageGeometry:
    """
    Page geometry of one section.

    Width and height are the physical page as laid out, i.e. a landscape
    page already has ``width_mm > height_mm``.
    """

    width_mm: float = 210.0
    height_mm: float = 297.0
    margin_top_mm: float = 25.4
    margin_right_mm: float = 25.4
    margin_bottom_mm: float = 25.4
    margin_left_mm: float = 25.4
    orientation: Orientation = Orientation.PORTRAIT
    header_mm: float = 12.7
    footer_mm: float = 12.7

    @classmethod
    def from_page_size(cls, page_size: PageSize = PageSize.A4,
                       orientation: Orientation = Orientation.PORTRAIT,
                       margin_mm: float = 25.4, **kwargs: Any) -> "PageGeometry":
        """
        Create geometry for a standard page size.

        Args:
            page_size: Standard page size
            orientation: Page orientation; landscape swaps width and height
            margin_mm: Uniform margin applied to all four sides
            **kwargs: Overrides for individual fields

        Returns:
            PageGeometry instance
        """
        width, height = page_size.value
        if orientation is Orientation.LANDSCAPE:
            width, height = height, width
        values: Dict[str, Any] = {
            "width_mm": width,
            "height_mm": height,
            "margin_top_mm": margin_mm,
            "margin_right_mm": margin_mm,
            "margin_bottom_mm": margin_mm,
            "margin_left_mm": margin_mm,
            "orientation": orientation,
        }
        values.update(kwargs)
        return cls(**values)

    @property
    def content_width_mm(self) -> float:
        """Width between the left and right margins."""
        return self.width_mm - self.margin_left_mm - self.margin_right_mm

    @property
    def content_height_mm(self) -> float:
        """Height between the top and bottom margins."""
        return self.height_mm - self.margin_top_mm - self.margin_bottom_mm

    def validate(self) -> None:
        """
        Check that the geometry describes a usable page.

        Raises:
            GeometryError: On non-positive sizes, negative margins or margins
                that leave no content area
        """
        if not isinstance(self.orientation, Orientation):
            raise GeometryError("Invalid page orientation", repr(self.orientation))
        for name in ("width_mm", "height_mm"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or value <= 0:
                raise GeometryError(f"Page {name} must be positive", repr(value))
        for name in ("margin_top_mm", "margin_right_mm", "margin_bottom_mm",
                     "margin_left_mm", "header_mm", "footer_mm"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or value < 0:
                raise GeometryError(f"Page {name} must be >= 0", repr(value))
        if self.content_width_mm <= 0 or self.content_height_mm <= 0:
            raise GeometryError(
                "Margins leave no content area",
                f"{self.width_mm}x{self.height_mm}mm page",
            )
