"""
Utils module for docx_report.

Unit conversion, XML helpers and logging setup.
"""

from .units import (
    MM_PER_INCH,
    PCT_UNIT,
    TWIPS_PER_INCH,
    TWIPS_PER_POINT,
    TWIPS_PER_TAB,
    half_points_to_points,
    indentation_to_twips,
    mm_to_twips,
    percentage_to_fiftieths,
    percentage_to_twips,
    points_to_half_points,
    twips_to_mm,
    twips_to_percentage,
)
from .xml_utils import (
    NAMESPACES,
    W_NS,
    append_element,
    append_text,
    make_element,
    qn,
    set_attr,
    to_xml,
)
from .logger import get_logger, setup_logging

__all__ = [
    "MM_PER_INCH",
    "PCT_UNIT",
    "TWIPS_PER_INCH",
    "TWIPS_PER_POINT",
    "TWIPS_PER_TAB",
    "half_points_to_points",
    "indentation_to_twips",
    "mm_to_twips",
    "percentage_to_fiftieths",
    "percentage_to_twips",
    "points_to_half_points",
    "twips_to_mm",
    "twips_to_percentage",
    "NAMESPACES",
    "W_NS",
    "append_element",
    "append_text",
    "make_element",
    "qn",
    "set_attr",
    "to_xml",
    "get_logger",
    "setup_logging",
]
