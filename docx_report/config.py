"""
Render configuration for docx_report.

Defaults and limits shared by the renderers. Passed explicitly through the
render context; nothing is read from module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional
import logging

from .exceptions import ConfigurationError
from .models.page import PageSize
from .models.style import CaptionPlacement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    """
    Renderer settings.

    Attributes:
        line_separator: Separator splitting paragraph text into forced line breaks
        caption_style_id: Paragraph style applied to table captions
        caption_placement: Caption placement when neither table nor style sets one
        max_columns_per_table: Split wider tables into several physical tables
        list_view_label_width: Label column width (percent) in list-view tables
        default_page_size: Page size of the default section geometry
        default_margin_mm: Uniform margin of the default section geometry
        empty_cell_text: Identity given to synthetic cell paragraphs; rendered
            in place of an empty cell text
    """

    line_separator: str = "\n"
    caption_style_id: str = "Caption"
    caption_placement: CaptionPlacement = CaptionPlacement.ABOVE
    max_columns_per_table: Optional[int] = None
    list_view_label_width: float = 30.0
    default_page_size: PageSize = PageSize.A4
    default_margin_mm: float = 25.4
    empty_cell_text: str = ""

    def __post_init__(self) -> None:
        if not self.line_separator:
            raise ConfigurationError("line_separator must be a non-empty string")
        if not self.caption_style_id:
            raise ConfigurationError("caption_style_id must be a non-empty string")
        if self.max_columns_per_table is not None and self.max_columns_per_table < 1:
            raise ConfigurationError(
                "max_columns_per_table must be >= 1", repr(self.max_columns_per_table))
        if not 0 < self.list_view_label_width < 100:
            raise ConfigurationError(
                "list_view_label_width must be in (0, 100)", repr(self.list_view_label_width))
        if self.default_margin_mm < 0:
            raise ConfigurationError("default_margin_mm must be >= 0", repr(self.default_margin_mm))
        if self.empty_cell_text is None:
            object.__setattr__(self, "empty_cell_text", "")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RenderConfig":
        """
        Build a configuration from a plain mapping.

        Unknown keys are logged and ignored; enum-valued settings accept their
        names or values as strings.

        Args:
            data: Settings mapping

        Returns:
            RenderConfig instance

        Raises:
            ConfigurationError: If a value is invalid
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown render setting: {key}")
                continue
            values[key] = value

        try:
            if "caption_placement" in values:
                values["caption_placement"] = CaptionPlacement.parse(values["caption_placement"])
            if isinstance(values.get("default_page_size"), str):
                values["default_page_size"] = PageSize[values["default_page_size"].upper()]
        except (KeyError, ValueError) as e:
            raise ConfigurationError("Invalid render setting", str(e)) from e

        return cls(**values)
