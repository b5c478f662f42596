"""
Tests for ParagraphRenderer and SectionRenderer.
"""

import pytest

from docx_report.config import RenderConfig
from docx_report.exceptions import GeometryError
from docx_report.models import Orientation, PageGeometry, PageSize, Paragraph
from docx_report.renderers import ParagraphRenderer, RenderContext, SectionRenderer
from docx_report.utils.xml_utils import find, find_all, get_attr, local_name, to_xml


def texts(p):
    return [t.text for t in find_all(p, "w:r/w:t")]


class TestParagraphRenderer:
    """Test cases for ParagraphRenderer."""

    @pytest.fixture
    def renderer(self, context):
        return ParagraphRenderer(context)

    def test_plain_paragraph(self, renderer, sample_paragraph):
        p = renderer.render(sample_paragraph)

        assert local_name(p) == "p"
        assert texts(p) == ["Test paragraph text"]
        assert len(find_all(p, "w:r")) == 1
        assert find(p, "w:r/w:rPr") is None

    def test_spacing_always_zero(self, renderer, sample_paragraph):
        spacing = find(renderer.render(sample_paragraph), "w:pPr/w:spacing")
        assert get_attr(spacing, "w:before") == "0"
        assert get_attr(spacing, "w:after") == "0"

    def test_line_breaks_bold_size(self, renderer):
        """Two lines, bold, 12pt: one break between two text nodes."""
        p = renderer.render(Paragraph("p", "Line1\nLine2", bold=True, font_size=12))

        run = find(p, "w:r")
        assert find(run, "w:rPr/w:b") is not None
        assert get_attr(find(run, "w:rPr/w:sz"), "w:val") == "24"
        assert [local_name(child) for child in run] == ["rPr", "t", "br", "t"]
        assert texts(p) == ["Line1", "Line2"]

    @pytest.mark.parametrize("text, breaks", [
        ("one", 0),
        ("a\nb", 1),
        ("a\n\nb", 2),
        ("\n", 1),
        ("a\nb\nc\n", 3),
    ])
    def test_break_count(self, renderer, text, breaks):
        """k separators give k breaks and k + 1 text nodes."""
        p = renderer.render(Paragraph("p", text))
        assert len(find_all(p, "w:r/w:br")) == breaks
        assert len(find_all(p, "w:r/w:t")) == breaks + 1

    def test_crlf_normalized(self, renderer):
        assert texts(renderer.render(Paragraph("p", "a\r\nb\rc"))) == ["a", "b", "c"]

    def test_custom_separator(self, registry):
        renderer = ParagraphRenderer(RenderContext(registry, RenderConfig(line_separator="|")))
        assert texts(renderer.render(Paragraph("p", "a|b\nc"))) == ["a", "b\nc"]

    def test_empty_text_renders_identity(self, renderer):
        """Filler paragraphs stay visible through their identity."""
        p = renderer.render(Paragraph("auto-filler-3", ""))
        assert texts(p) == ["auto-filler-3"]

    def test_whitespace_preserved(self, renderer):
        p = renderer.render(Paragraph("p", "  indented "))
        assert '<w:t xml:space="preserve">  indented </w:t>' in to_xml(p)

    def test_style_and_indentation(self, renderer):
        p = renderer.render(Paragraph("p", "x", style_id="Heading1", indentation=2))

        assert get_attr(find(p, "w:pPr/w:pStyle"), "w:val") == "Heading1"
        assert get_attr(find(p, "w:pPr/w:ind"), "w:left") == "1440"
        assert [local_name(c) for c in find(p, "w:pPr")] == ["pStyle", "spacing", "ind"]

    def test_no_indentation_element_at_level_zero(self, renderer, sample_paragraph):
        assert find(renderer.render(sample_paragraph), "w:pPr/w:ind") is None

    def test_run_properties(self, renderer):
        p = renderer.render(Paragraph(
            "p", "x", font_name="Arial", italic=True, underline=True, color="#00ff00",
        ))
        r_pr = find(p, "w:r/w:rPr")

        fonts = find(r_pr, "w:rFonts")
        assert get_attr(fonts, "w:ascii") == "Arial"
        assert get_attr(fonts, "w:hAnsi") == "Arial"
        assert find(r_pr, "w:i") is not None
        assert find(r_pr, "w:b") is None
        assert get_attr(find(r_pr, "w:u"), "w:val") == "single"
        assert get_attr(find(r_pr, "w:color"), "w:val") == "00FF00"
        assert find(r_pr, "w:sz") is None

    def test_section_terminator(self, renderer):
        geometry = PageGeometry.from_page_size(PageSize.A4, Orientation.LANDSCAPE)
        p = renderer.render(Paragraph("end", "Last", is_section_terminator=True, geometry=geometry))

        sect_pr = find(p, "w:pPr/w:sectPr")
        assert sect_pr is not None
        assert local_name(find(p, "w:pPr")[-1]) == "sectPr"
        assert get_attr(find(sect_pr, "w:pgSz"), "w:orient") == "landscape"
        assert find(p, "w:sectPr") is None

    def test_section_terminator_without_geometry(self, renderer):
        with pytest.raises(GeometryError):
            renderer.render(Paragraph("end", "Last", is_section_terminator=True))

    def test_geometry_ignored_without_terminator_flag(self, renderer, page_geometry):
        p = renderer.render(Paragraph("p", "x", geometry=page_geometry))
        assert find(p, "w:pPr/w:sectPr") is None

    def test_idempotent(self, renderer):
        paragraph = Paragraph("p", "a\nb", style_id="Heading1", bold=True, indentation=1)
        assert to_xml(renderer.render(paragraph)) == to_xml(renderer.render(paragraph))

    def test_render_into(self, renderer, body, sample_paragraph):
        p = renderer.render_into(body, sample_paragraph)
        assert list(body) == [p]


class TestSectionRenderer:
    """Test cases for SectionRenderer."""

    def test_a4_portrait(self, page_geometry):
        sect_pr = SectionRenderer().render(page_geometry)

        pg_sz = find(sect_pr, "w:pgSz")
        assert get_attr(pg_sz, "w:w") == "11906"
        assert get_attr(pg_sz, "w:h") == "16838"
        assert get_attr(pg_sz, "w:orient") is None

        pg_mar = find(sect_pr, "w:pgMar")
        for side in ("top", "right", "bottom", "left"):
            assert get_attr(pg_mar, f"w:{side}") == "1440"
        assert get_attr(pg_mar, "w:header") == "720"
        assert get_attr(pg_mar, "w:gutter") == "0"

    def test_landscape(self):
        geometry = PageGeometry.from_page_size(PageSize.A4, Orientation.LANDSCAPE)
        pg_sz = find(SectionRenderer().render(geometry), "w:pgSz")
        assert get_attr(pg_sz, "w:w") == "16838"
        assert get_attr(pg_sz, "w:h") == "11906"
        assert get_attr(pg_sz, "w:orient") == "landscape"

    @pytest.mark.parametrize("geometry", [None, "A4", PageGeometry(width_mm=-1)])
    def test_invalid_geometry(self, geometry):
        with pytest.raises(GeometryError):
            SectionRenderer().render(geometry)
