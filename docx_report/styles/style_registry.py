"""
Style registry for docx_report.

Read-only lookup of resolved styles by identifier.
"""

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional
import logging

from ..exceptions import StyleError, StyleNotFoundError
from ..models.style import EffectiveStyle

logger = logging.getLogger(__name__)


class StyleRegistry:
    """
    Registry of effective styles keyed by style id.

    Populated once by the style-sheet layer, then only read by the renderers,
    so a single instance can be shared between renders of independent
    output trees.
    """

    def __init__(self, styles: Optional[Iterable[EffectiveStyle]] = None,
                 default_style: Optional[EffectiveStyle] = None):
        """
        Initialize style registry.

        Args:
            styles: Styles to register; each must carry a ``style_id``
            default_style: Document default style used at the end of the cascade
        """
        self._styles: Dict[str, EffectiveStyle] = {}
        self.default_style = default_style or EffectiveStyle.document_default()
        for style in styles or ():
            self.register(style)

        logger.debug(f"Style registry initialized with {len(self._styles)} styles")

    @classmethod
    def from_dict(cls, styles: Mapping[str, Mapping[str, Any]],
                  default: Optional[Mapping[str, Any]] = None) -> "StyleRegistry":
        """
        Build a registry from plain dictionaries.

        Args:
            styles: Mapping of style id to style properties
            default: Properties of the document default style

        Returns:
            StyleRegistry instance
        """
        default_style = EffectiveStyle.from_dict(None, dict(default)) if default else None
        return cls(
            (EffectiveStyle.from_dict(style_id, dict(data)) for style_id, data in styles.items()),
            default_style=default_style,
        )

    def register(self, style: EffectiveStyle) -> None:
        """Add or replace a style."""
        if not isinstance(style, EffectiveStyle):
            raise StyleError("Registry accepts EffectiveStyle instances only", type(style).__name__)
        if not style.style_id:
            raise StyleError("Registered style must have a style_id")
        if style.style_id in self._styles:
            logger.debug(f"Replacing style: {style.style_id}")
        self._styles[style.style_id] = style

    def get_style(self, style_id: str) -> EffectiveStyle:
        """
        Get style by ID.

        Args:
            style_id: Style identifier

        Returns:
            Registered style

        Raises:
            StyleNotFoundError: If the style is not registered
        """
        try:
            return self._styles[style_id]
        except KeyError:
            raise StyleNotFoundError(style_id) from None

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._styles

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)
