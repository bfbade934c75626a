import re
from typing import List, Sequence
import numpy as np
from numpy import ndarray as NDArray

from ..errors import InvalidFormat

HEX_PATTERN = re.compile(r"#([0-9A-F]{6})")
_DIGITS = "0123456789ABCDEF"


def color_to_hex(color: Sequence[int]) -> str:
    """Device color -> ``#RRGGBB`` with uppercase digits, high nibble first."""
    r, g, b = (int(c) for c in color)
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise ValueError(f"Device color channels must be in [0, 255], got {(r, g, b)!r}")
    return "#" + "".join(_DIGITS[c // 16] + _DIGITS[c % 16] for c in (r, g, b))


def hex_to_color(text: str) -> tuple[int, int, int]:
    """
    ``#RRGGBB`` (any letter case) -> device color.

    Raises:
        InvalidFormat: if the text is not exactly ``#`` followed by six hex digits
    """
    if not isinstance(text, str):
        raise InvalidFormat(text)
    match = HEX_PATTERN.fullmatch(text.upper())
    if match is None:
        raise InvalidFormat(text)
    digits = [_DIGITS.index(d) for d in match.group(1)]
    return (
        16 * digits[0] + digits[1],
        16 * digits[2] + digits[3],
        16 * digits[4] + digits[5],
    )


def np_colors_to_hex(colors: NDArray) -> List[str]:
    """Hex codes for every color of an (n, 3) device array, in order."""
    colors = np.asarray(colors).reshape(-1, 3)
    return [color_to_hex(row) for row in colors.tolist()]


def np_hex_to_colors(codes: Sequence[str]) -> NDArray:
    """Decode a sequence of hex codes into an (n, 3) uint8 array."""
    return np.array([hex_to_color(code) for code in codes], dtype=np.uint8).reshape(-1, 3)
