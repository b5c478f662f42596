"""Resolved style snapshot and caption placement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..utils.color_utils import normalize_color


class CaptionPlacement(Enum):
    """Where a table caption is emitted relative to the table."""
    ABOVE = "above"
    BELOW = "below"

    @classmethod
    def parse(cls, value: Any) -> "CaptionPlacement":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid caption placement: {value!r}") from None


@dataclass(frozen=True)
class EffectiveStyle:
    """
    Fully resolved style as returned by the style registry.

    Attributes:
        style_id: Identifier the style is registered under
        background_color: Cell/table fill as ``RRGGBB``, or ``None``
        font_name: Typeface name, or ``None`` to inherit
        font_size: Size in points, 0 to inherit
        bold: Bold run marker
        italic: Italic run marker
        underline: Single underline marker
        color: Foreground color as ``RRGGBB``, or ``None``
        caption_placement: Default caption placement for tables using this style
    """

    style_id: Optional[str] = None
    background_color: Optional[str] = None
    font_name: Optional[str] = None
    font_size: float = 0
    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: Optional[str] = None
    caption_placement: Optional[CaptionPlacement] = None

    def __post_init__(self) -> None:
        if self.font_size < 0:
            raise ValueError(f"Font size must be >= 0, got {self.font_size}")
        # Frozen dataclass: normalized values go through object.__setattr__
        object.__setattr__(self, "background_color", normalize_color(self.background_color))
        object.__setattr__(self, "color", normalize_color(self.color))
        if self.caption_placement is not None:
            object.__setattr__(self, "caption_placement", CaptionPlacement.parse(self.caption_placement))

    @classmethod
    def document_default(cls) -> "EffectiveStyle":
        """Style used when nothing along the cascade owns a style."""
        return cls(style_id=None)

    @classmethod
    def from_dict(cls, style_id: str, data: Dict[str, Any]) -> "EffectiveStyle":
        """Build a style from a plain mapping, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__ and k != "style_id"}
        return cls(style_id=style_id, **known)
