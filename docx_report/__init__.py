"""
docx_report - WordprocessingML rendering core for report generation.

Converts an abstract, style-annotated document tree (paragraphs, tables,
rows, cells) into ``w:`` markup fragments ready for a DOCX packaging layer.

Main Components:
- Models: immutable paragraph/table/style snapshots
- Styles: style registry and cascade resolution
- Renderers: paragraph, table, caption, section and body renderers
- Utils: unit conversion, XML helpers, logging setup
"""

from .exceptions import (
    ConfigurationError,
    DocxReportError,
    GeometryError,
    RenderingError,
    StyleError,
    StyleNotFoundError,
    TableLayoutError,
)
from .config import RenderConfig
from .models import (
    CaptionPlacement,
    Cell,
    Column,
    EffectiveStyle,
    Orientation,
    PageGeometry,
    PageSize,
    Paragraph,
    Row,
    StyleRef,
    Table,
)
from .styles import StyleRegistry, StyleResolver
from .renderers import (
    BodyRenderer,
    CaptionRenderer,
    ParagraphRenderer,
    RenderContext,
    SectionRenderer,
    TableExpander,
    TableRenderer,
)
from .utils import setup_logging, to_xml

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DocxReportError",
    "GeometryError",
    "RenderingError",
    "StyleError",
    "StyleNotFoundError",
    "TableLayoutError",
    "RenderConfig",
    "CaptionPlacement",
    "Cell",
    "Column",
    "EffectiveStyle",
    "Orientation",
    "PageGeometry",
    "PageSize",
    "Paragraph",
    "Row",
    "StyleRef",
    "Table",
    "StyleRegistry",
    "StyleResolver",
    "BodyRenderer",
    "CaptionRenderer",
    "ParagraphRenderer",
    "RenderContext",
    "SectionRenderer",
    "TableExpander",
    "TableRenderer",
    "setup_logging",
    "to_xml",
]
