"""
Renderers module for docx_report.

WordprocessingML renderers for paragraphs, tables, captions and sections.
"""

from .base_renderer import BaseRenderer, RenderContext
from .section_renderer import SectionRenderer
from .paragraph_renderer import ParagraphRenderer
from .caption_renderer import CaptionRenderer
from .table_expander import TableExpander
from .table_renderer import TableRenderer
from .body_renderer import BodyRenderer

__all__ = [
    "BaseRenderer",
    "RenderContext",
    "SectionRenderer",
    "ParagraphRenderer",
    "CaptionRenderer",
    "TableExpander",
    "TableRenderer",
    "BodyRenderer",
]
