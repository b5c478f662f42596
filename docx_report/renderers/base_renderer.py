"""Render context and base class shared by the WordprocessingML renderers."""

from __future__ import annotations

from typing import Optional

from ..config import RenderConfig
from ..models.page import PageGeometry
from ..styles.style_registry import StyleRegistry
from ..styles.style_resolver import StyleResolver
from ..utils.units import mm_to_twips


class RenderContext:
    """
    Collaborators of one render call, passed explicitly to every renderer.

    Args:
        registry: Style registry (read-only, may be shared between contexts)
        config: Renderer settings
        page_geometry: Geometry of the document's default/last section
    """

    def __init__(
        self,
        registry: Optional[StyleRegistry] = None,
        config: Optional[RenderConfig] = None,
        page_geometry: Optional[PageGeometry] = None,
    ) -> None:
        self.registry = registry if registry is not None else StyleRegistry()
        self.config = config or RenderConfig()
        self.page_geometry = page_geometry or PageGeometry.from_page_size(
            self.config.default_page_size,
            margin_mm=self.config.default_margin_mm,
        )
        self.resolver = StyleResolver(self.registry)

    @property
    def content_width_twips(self) -> int:
        """Usable width of the default section in twips."""
        return mm_to_twips(self.page_geometry.content_width_mm)


class BaseRenderer:
    """Common functionality shared by concrete renderer implementations."""

    def __init__(self, context: Optional[RenderContext] = None) -> None:
        self.context = context or RenderContext()

    @property
    def config(self) -> RenderConfig:
        return self.context.config

    @property
    def resolver(self) -> StyleResolver:
        return self.context.resolver
