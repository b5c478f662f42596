"""
Unit conversion helpers for WordprocessingML output.

Handles millimeter, twip, percentage, point and half-point conversion used
when laying out paragraphs, tables and section geometry.
"""

from __future__ import annotations

from typing import Union
import logging

logger = logging.getLogger(__name__)

Number = Union[int, float]

MM_PER_INCH = 25.4
TWIPS_PER_INCH = 1440
TWIPS_PER_POINT = 20
TWIPS_PER_TAB = 720  # one default tab stop
PCT_UNIT = 50  # WordprocessingML "pct" values are fiftieths of a percent


def _require_number(value: Number, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number")


def mm_to_twips(mm: Number) -> int:
    """
    Convert millimeters to twips.

    Args:
        mm: Length in millimeters

    Returns:
        Length in twips, rounded to the nearest integer
    """
    _require_number(mm, "Millimeter value")
    twips = int(round(mm / MM_PER_INCH * TWIPS_PER_INCH))
    logger.debug(f"mm to twips: {mm} -> {twips}")
    return twips


def twips_to_mm(twips: Number) -> float:
    """
    Convert twips to millimeters.

    Args:
        twips: Length in twips

    Returns:
        Length in millimeters
    """
    _require_number(twips, "TWIP value")
    return twips * MM_PER_INCH / TWIPS_PER_INCH


def percentage_to_twips(percentage: Number, total_twips: Number) -> int:
    """
    Convert a percentage of a total width to absolute twips.

    The result is truncated, never rounded up, so a sequence of columns can
    never exceed the total.

    Args:
        percentage: Share of the total (0-100)
        total_twips: Total width in twips

    Returns:
        Width in twips
    """
    _require_number(percentage, "Percentage")
    _require_number(total_twips, "Total width")
    return int(total_twips * percentage / 100)


def twips_to_percentage(twips: Number, total_twips: Number) -> float:
    """Convert an absolute width in twips to a percentage of ``total_twips``."""
    _require_number(twips, "TWIP value")
    _require_number(total_twips, "Total width")
    if total_twips == 0:
        raise ValueError("Total width must not be zero")
    return twips * 100 / total_twips


def points_to_half_points(points: Number) -> int:
    """Convert a font size in points to WordprocessingML half-points."""
    _require_number(points, "Point value")
    return int(round(points * 2))


def half_points_to_points(half_points: Number) -> float:
    """Convert half-points back to points."""
    _require_number(half_points, "Half-point value")
    return half_points / 2


def indentation_to_twips(level: int) -> int:
    """
    Convert an indentation level to a left indent in twips.

    Args:
        level: Indentation level (number of tab stops)

    Returns:
        Left indent in twips (720 per level)
    """
    _require_number(level, "Indentation level")
    if level < 0:
        raise ValueError(f"Indentation level must be >= 0, got {level}")
    return int(TWIPS_PER_TAB * level)


def percentage_to_fiftieths(percentage: Number) -> int:
    """Convert a percentage to the fiftieths-of-a-percent unit used by ``w:type="pct"``."""
    _require_number(percentage, "Percentage")
    return int(round(percentage * PCT_UNIT))
