"""
Table model: columns, rows and cells of a logical table.

All classes are immutable snapshots; sequences passed as lists are stored
as tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple

from .style import CaptionPlacement
from .style_ref import StyleRef


@dataclass(frozen=True)
class Column:
    """Table column with an optional explicit width (percentage of the table)."""

    width: Optional[float] = None
    title: str = ""

    def __post_init__(self) -> None:
        if self.width is not None and not 0 < self.width <= 100:
            raise ValueError(f"Column width must be in (0, 100], got {self.width}")

    @property
    def has_explicit_width(self) -> bool:
        return self.width is not None


@dataclass(frozen=True)
class Cell:
    """Plain-text table cell."""

    text: str = ""
    style: StyleRef = StyleRef.INHERITED


@dataclass(frozen=True)
class Row:
    """Table row; ``style`` applies to every cell that does not own one."""

    cells: Tuple[Cell, ...] = ()
    style: StyleRef = StyleRef.INHERITED

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(self.cells))

    @classmethod
    def from_texts(cls, texts: Iterable[str], style: Optional[str] = None) -> "Row":
        """Row of inherited-style cells built from plain strings."""
        return cls(tuple(Cell(text) for text in texts), StyleRef.of(style))

    def __len__(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class Table:
    """
    Logical table of the document tree.

    Attributes:
        identity: Identity string of the node
        columns: Ordered column definitions
        rows: Ordered rows
        style_id: Declared table style, ``None`` for the document default
        list_view: Render each data row as a two-column label/value table
        has_header_row: Row 0 is a repeating header row
        caption: Caption text; ``None`` means no caption
        caption_placement: Caption position; ``None`` defers to the style
        width: Declared width as a percentage of the page content width
        indentation: Indentation level (tab stops of 720 twips)
    """

    identity: str
    columns: Tuple[Column, ...] = ()
    rows: Tuple[Row, ...] = ()
    style_id: Optional[str] = None
    list_view: bool = False
    has_header_row: bool = False
    caption: Optional[str] = None
    caption_placement: Optional[CaptionPlacement] = None
    width: float = 100.0
    indentation: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(self.rows))
        if self.caption_placement is not None:
            object.__setattr__(self, "caption_placement", CaptionPlacement.parse(self.caption_placement))
        if not 0 < self.width <= 100:
            raise ValueError(f"Table width must be in (0, 100], got {self.width}")
        if self.indentation < 0:
            raise ValueError(f"Indentation level must be >= 0, got {self.indentation}")

    @classmethod
    def from_texts(cls, identity: str, rows: Sequence[Sequence[str]],
                   widths: Optional[Sequence[Optional[float]]] = None, **kwargs) -> "Table":
        """
        Build a table from nested strings.

        Args:
            identity: Identity string
            rows: Row texts; the column count is taken from the first row
            widths: Optional explicit column widths
            **kwargs: Remaining ``Table`` fields

        Returns:
            Table instance
        """
        column_count = len(rows[0]) if rows else len(widths or ())
        widths = list(widths) if widths is not None else [None] * column_count
        columns = tuple(Column(width) for width in widths)
        return cls(identity, columns, tuple(Row.from_texts(r) for r in rows), **kwargs)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def has_caption(self) -> bool:
        return self.caption is not None

    def is_header_row(self, index: int) -> bool:
        return index == 0 and self.has_header_row
