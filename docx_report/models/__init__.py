"""
Models module for docx_report.

Immutable snapshots of the abstract document tree consumed by the renderers.
"""

from .style_ref import StyleRef
from .style import CaptionPlacement, EffectiveStyle
from .page import Orientation, PageGeometry, PageSize
from .paragraph import Paragraph
from .table import Cell, Column, Row, Table

__all__ = [
    "StyleRef",
    "CaptionPlacement",
    "EffectiveStyle",
    "Orientation",
    "PageGeometry",
    "PageSize",
    "Paragraph",
    "Cell",
    "Column",
    "Row",
    "Table",
]
