"""
Palette container
=================

Ordered, immutable sequence of device colors produced by the palette
generators. Order is the position along the sweep that generated it.
"""

from __future__ import annotations
import logging
from typing import Iterator, List, Sequence, Union

import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import ColorRGB
from ..conversions import np_colors_to_hex, np_hex_to_colors, np_color_to_lch, np_lch_to_srgb, np_srgb_to_color, np_count_clipped
from ..types.white_point import WhitePoint, D65

logger = logging.getLogger(__name__)


class Palette:
    """
    Ordered sequence of 8-bit device colors.

    Wraps an array-valued ColorRGB of shape (n, 3):
    - ``len``, iteration and integer indexing yield ColorRGB scalars
    - slicing yields another Palette
    - ``hex_codes()`` and ``to_lch()`` give the text and perceptual views
    """
    __slots__ = ('_color', '_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_frozen', False):
            raise AttributeError(f"Palette is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, colors: Union[ColorRGB, NDArray, Sequence[Sequence[int]]]) -> None:
        """
        Args:
            colors: Array-valued ColorRGB, or anything convertible to an
                    integer array of shape (n, 3).
        """
        if not isinstance(colors, ColorRGB):
            arr = np.asarray(colors)
            if arr.size == 0:
                arr = arr.reshape(0, 3).astype(np.uint8)
            colors = ColorRGB(arr)

        if not colors.is_array:
            raise ValueError("Palette requires an array of colors, not a single color")
        if colors.value.ndim != 2:
            raise ValueError(
                f"Palette requires a 2D array (n, 3), got shape {colors.value.shape}"
            )

        self._color = colors
        super().__setattr__('_frozen', True)

    @classmethod
    def from_hex(cls, codes: Sequence[str]) -> Palette:
        """Build a palette from ``#RRGGBB`` codes; raises InvalidFormat on a bad code."""
        return cls(np_hex_to_colors(codes))

    @property
    def value(self) -> NDArray:
        """Read-only uint8 array of shape (n, 3)."""
        return self._color.value

    @property
    def colors(self) -> ColorRGB:
        return self._color

    def __len__(self) -> int:
        return self.value.shape[0]

    def __iter__(self) -> Iterator[ColorRGB]:
        for row in self.value.tolist():
            yield ColorRGB(tuple(row))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Palette(ColorRGB(self.value[index]))
        return ColorRGB(tuple(self.value[index].tolist()))

    def __array__(self, dtype=None, copy=None) -> NDArray:
        """Enable numpy array interface."""
        return self.value if dtype is None else self.value.astype(dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return bool(np.array_equal(self.value, other.value))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Palette({self.hex_codes()!r})"

    def hex_codes(self) -> List[str]:
        """``#RRGGBB`` code of every color, in order."""
        return np_colors_to_hex(self.value)

    def to_lch(self, *, white: WhitePoint = D65) -> NDArray:
        """Each color mapped back to CIE LCH, shape (n, 3). Lossy, see color_to_lch."""
        return np_color_to_lch(self.value, white=white)


def build_palette(lch: NDArray, *, family: str, white: WhitePoint = D65) -> Palette:
    """Quantize an (n, 3) array of LCH samples into a Palette."""
    srgb = np_lch_to_srgb(lch, white=white)
    clipped = np_count_clipped(srgb)
    if clipped:
        logger.debug("[%s] %d of %d colors clipped to the device gamut", family, clipped, len(lch))
    return Palette(ColorRGB(np_srgb_to_color(srgb)))
