"""Paragraph snapshot consumed by the paragraph renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..utils.color_utils import normalize_color
from .page import PageGeometry


@dataclass(frozen=True)
class Paragraph:
    """
    One paragraph of the abstract document tree, rendered as a single run.

    ``text`` may embed line separators; each becomes a forced line break
    inside the run. When ``text`` is empty the ``identity`` string is
    rendered instead, so generated filler paragraphs stay visible.

    Attributes:
        identity: Identity string of the node
        text: Raw text
        style_id: Paragraph style reference, ``None`` to inherit
        indentation: Indentation level (tab stops of 720 twips)
        font_name: Typeface name
        font_size: Size in points, 0 to inherit
        bold: Bold flag
        italic: Italic flag
        underline: Underline flag
        color: Foreground color
        is_section_terminator: Paragraph closes a page-layout section
        geometry: Geometry of the closed section (required for terminators)
    """

    identity: str
    text: str = ""
    style_id: Optional[str] = None
    indentation: int = 0
    font_name: Optional[str] = None
    font_size: float = 0
    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: Optional[str] = None
    is_section_terminator: bool = False
    geometry: Optional[PageGeometry] = None

    def __post_init__(self) -> None:
        if self.indentation < 0:
            raise ValueError(f"Indentation level must be >= 0, got {self.indentation}")
        if self.font_size < 0:
            raise ValueError(f"Font size must be >= 0, got {self.font_size}")
        object.__setattr__(self, "color", normalize_color(self.color))

    @property
    def source_text(self) -> str:
        """Text to render: own text, or the identity string when empty."""
        return self.text if self.text else self.identity
