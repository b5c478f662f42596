"""
Styles module for docx_report.

Style registry and cascade resolution.
"""

from .style_registry import StyleRegistry
from .style_resolver import StyleResolver

__all__ = ["StyleRegistry", "StyleResolver"]
