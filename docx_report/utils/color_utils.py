"""Color utilities: normalize caller colors to WordprocessingML ``RRGGBB``."""

from typing import Optional, Sequence, Union

ColorValue = Union[str, Sequence[int]]

COLOR_MAP = {
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'red': (255, 0, 0),
    'green': (0, 128, 0),
    'blue': (0, 0, 255),
    'yellow': (255, 255, 0),
    'cyan': (0, 255, 255),
    'magenta': (255, 0, 255),
    'gray': (128, 128, 128),
    'grey': (128, 128, 128),
}


def hex_to_rgb(hex_color: str) -> Optional[tuple]:
    """Convert ``#RGB``/``RRGGBB`` hex to an RGB tuple, ``None`` if malformed."""
    if not hex_color or not isinstance(hex_color, str):
        return None

    hex_color = hex_color.strip().lstrip('#')
    if len(hex_color) == 3:
        hex_color = ''.join([c * 2 for c in hex_color])
    if len(hex_color) != 6:
        return None

    try:
        return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None


def rgb_to_hex(rgb_color: Sequence[int]) -> Optional[str]:
    """Convert an RGB triple to ``RRGGBB`` (no leading ``#``)."""
    if not isinstance(rgb_color, (tuple, list)) or len(rgb_color) != 3:
        return None

    try:
        r, g, b = [int(c) for c in rgb_color]
    except (ValueError, TypeError):
        return None
    if not all(0 <= c <= 255 for c in (r, g, b)):
        return None
    return f"{r:02X}{g:02X}{b:02X}"


def normalize_color(color_value: Optional[ColorValue]) -> Optional[str]:
    """
    Normalize a color to the 6-hex ``RRGGBB`` form used by ``w:color``/``w:shd``.

    Args:
        color_value: Hex string (with or without ``#``), named color or RGB triple

    Returns:
        Upper-case ``RRGGBB`` string, or ``None`` for an empty value

    Raises:
        ValueError: If the value is not a recognizable color
    """
    if color_value is None or color_value == "":
        return None

    rgb = None
    if isinstance(color_value, str):
        rgb = COLOR_MAP.get(color_value.strip().lower()) or hex_to_rgb(color_value)
    elif isinstance(color_value, (tuple, list)):
        rgb = tuple(color_value)

    normalized = rgb_to_hex(rgb) if rgb is not None else None
    if normalized is None:
        raise ValueError(f"Invalid color value: {color_value!r}")
    return normalized
