"""
Style reference model.

A row or cell either carries its own style or inherits from the enclosing
level. ``StyleRef`` makes that choice explicit instead of a nullable id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(frozen=True)
class StyleRef:
    """Tagged style reference: ``StyleRef.INHERITED`` or ``StyleRef.own(style_id)``."""

    style_id: Optional[str] = None

    INHERITED: ClassVar["StyleRef"]

    def __post_init__(self) -> None:
        if self.style_id is not None and (not isinstance(self.style_id, str) or not self.style_id):
            raise ValueError("Style ID must be a non-empty string")

    @classmethod
    def own(cls, style_id: str) -> "StyleRef":
        """Reference to a style owned by the element itself."""
        if not style_id:
            raise ValueError("Style ID must be a non-empty string")
        return cls(style_id)

    @classmethod
    def of(cls, style_id: Optional[str]) -> "StyleRef":
        """``own(style_id)`` when an id is given, ``INHERITED`` otherwise."""
        return cls.own(style_id) if style_id else cls.INHERITED

    @property
    def is_inherited(self) -> bool:
        return self.style_id is None

    def __repr__(self) -> str:
        if self.is_inherited:
            return "StyleRef.INHERITED"
        return f"StyleRef.own({self.style_id!r})"


StyleRef.INHERITED = StyleRef()
