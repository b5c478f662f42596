"""
Style resolver for docx_report.

Resolves the effective style of a node from its cascade
(cell -> row -> table -> document default).
"""

from typing import Optional, Union
import logging

from ..models.style import EffectiveStyle
from ..models.style_ref import StyleRef
from .style_registry import StyleRegistry

logger = logging.getLogger(__name__)

RefLike = Union[StyleRef, str, None]


def _as_ref(ref: RefLike) -> StyleRef:
    if isinstance(ref, StyleRef):
        return ref
    return StyleRef.of(ref)


class StyleResolver:
    """
    Resolves styles against a :class:`StyleRegistry`.

    Lookups are pure: nothing is cached and the registry is never modified.
    Unknown style ids raise ``StyleNotFoundError`` from the registry and are
    not caught here.
    """

    def __init__(self, registry: StyleRegistry):
        self.registry = registry

    def resolve(self, style_id: Optional[str] = None) -> EffectiveStyle:
        """
        Resolve a single style id.

        Args:
            style_id: Style identifier, ``None`` for the document default

        Returns:
            Effective style
        """
        if style_id is None:
            return self.registry.default_style
        return self.registry.get_style(style_id)

    def resolve_ref(self, ref: RefLike) -> Optional[EffectiveStyle]:
        """Resolve an owned reference; inherited references resolve to ``None`` without a lookup."""
        ref = _as_ref(ref)
        if ref.is_inherited:
            return None
        return self.registry.get_style(ref.style_id)

    def resolve_cascade(self, *refs: RefLike) -> EffectiveStyle:
        """
        Resolve the first owned style along a cascade.

        Args:
            *refs: References ordered from the innermost level outwards,
                e.g. ``(cell.style, row.style, table_style)``

        Returns:
            The style of the first non-inherited level, or the document
            default when every level inherits
        """
        for ref in refs:
            ref = _as_ref(ref)
            if not ref.is_inherited:
                return self.registry.get_style(ref.style_id)
        return self.registry.default_style

    def background_color(self, *styles: Optional[EffectiveStyle]) -> Optional[str]:
        """First background color among already resolved styles (innermost first)."""
        for style in styles:
            if style is not None and style.background_color:
                return style.background_color
        return None
