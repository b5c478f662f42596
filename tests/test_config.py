"""
Tests for RenderConfig and RenderContext.
"""

import logging

import pytest

from docx_report.config import RenderConfig
from docx_report.exceptions import ConfigurationError
from docx_report.models import CaptionPlacement, PageSize
from docx_report.renderers import RenderContext
from docx_report.styles import StyleRegistry


class TestRenderConfig:
    """Test cases for RenderConfig."""

    def test_defaults(self):
        config = RenderConfig()
        assert config.line_separator == "\n"
        assert config.caption_style_id == "Caption"
        assert config.caption_placement is CaptionPlacement.ABOVE
        assert config.max_columns_per_table is None
        assert config.default_page_size is PageSize.A4
        assert config.empty_cell_text == ""

    @pytest.mark.parametrize("kwargs", [
        {"line_separator": ""},
        {"caption_style_id": ""},
        {"max_columns_per_table": 0},
        {"list_view_label_width": 100},
        {"default_margin_mm": -1},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigurationError):
            RenderConfig(**kwargs)

    def test_empty_cell_text_none(self):
        assert RenderConfig(empty_cell_text=None).empty_cell_text == ""

    def test_from_dict(self):
        config = RenderConfig.from_dict({
            "caption_placement": "below",
            "default_page_size": "letter",
            "max_columns_per_table": 4,
        })
        assert config.caption_placement is CaptionPlacement.BELOW
        assert config.default_page_size is PageSize.LETTER
        assert config.max_columns_per_table == 4

    def test_from_dict_unknown_key_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="docx_report.config"):
            config = RenderConfig.from_dict({"colour": "red"})
        assert config == RenderConfig()
        assert "colour" in caplog.text

    @pytest.mark.parametrize("data", [
        {"caption_placement": "sideways"},
        {"default_page_size": "B7"},
    ])
    def test_from_dict_invalid(self, data):
        with pytest.raises(ConfigurationError):
            RenderConfig.from_dict(data)


class TestRenderContext:
    """Test cases for RenderContext."""

    def test_defaults(self):
        context = RenderContext()
        assert isinstance(context.registry, StyleRegistry)
        assert context.config == RenderConfig()
        assert context.page_geometry.width_mm == 210.0

    def test_content_width_twips(self, context):
        # 210 - 2 * 25.4 = 159.2 mm
        assert context.content_width_twips == 9026

    def test_geometry_from_config(self):
        config = RenderConfig(default_page_size=PageSize.LETTER, default_margin_mm=20)
        context = RenderContext(config=config)
        assert context.page_geometry.width_mm == 215.9
        assert context.page_geometry.margin_left_mm == 20

    def test_resolver_uses_registry(self, context, registry):
        assert context.resolver.registry is registry
