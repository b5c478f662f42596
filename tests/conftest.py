"""
Pytest configuration for docx_report
"""

import logging
import sys

import pytest

from docx_report.config import RenderConfig
from docx_report.models import (
    CaptionPlacement,
    EffectiveStyle,
    PageGeometry,
    Paragraph,
    Table,
)
from docx_report.renderers import RenderContext
from docx_report.styles import StyleRegistry
from docx_report.utils.xml_utils import make_element


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Console-only logging; only warnings and errors are shown during tests
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def registry():
    """Style registry with a few table/cell styles."""
    return StyleRegistry(
        [
            EffectiveStyle("Heading1", font_name="Arial", font_size=16, bold=True),
            EffectiveStyle("Caption", italic=True, font_size=9),
            EffectiveStyle("GridTable", font_name="Calibri", font_size=10,
                           caption_placement=CaptionPlacement.BELOW),
            EffectiveStyle("ShadedTable", background_color="EEEEEE"),
            EffectiveStyle("HeaderRow", background_color="#1f4e79", bold=True, color="FFFFFF"),
            EffectiveStyle("Highlight", background_color="FFFF00", italic=True),
            EffectiveStyle("PlainCell", font_name="Courier New"),
        ],
        default_style=EffectiveStyle(font_name="Times New Roman", font_size=11),
    )


@pytest.fixture
def page_geometry():
    """A4 portrait page with 25.4 mm (1440 twips) margins."""
    return PageGeometry()


@pytest.fixture
def context(registry, page_geometry):
    """Render context over the test registry."""
    return RenderContext(registry, RenderConfig(), page_geometry)


@pytest.fixture
def body():
    """Empty ``w:body`` acting as output parent."""
    return make_element("w:body")


@pytest.fixture
def sample_paragraph():
    """Plain paragraph."""
    return Paragraph(identity="p1", text="Test paragraph text")


@pytest.fixture
def sample_table():
    """Three-column table with a header row."""
    return Table.from_texts(
        "t1",
        [["Name", "Qty", "Price"], ["Apple", "3", "1.20"], ["Pear", "5", "0.80"]],
        has_header_row=True,
    )


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    # Ignore logging errors during tests
    logging.raiseExceptions = False
