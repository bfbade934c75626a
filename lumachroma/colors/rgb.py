from typing import ClassVar, List, Tuple, Union
import numpy as np
from ..types.color_types import ColorSpace
from ..conversions.hex_codec import color_to_hex, hex_to_color, np_colors_to_hex
from .color_base import ColorBase, build_registry


class ColorLinearRGB(ColorBase):
    """Linear-light RGB; channels are left unclamped so out-of-gamut colors survive."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.LINEAR_RGB


class ColorSRGB(ColorBase):
    """Gamma-encoded sRGB, nominally in [0, 1]."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.SRGB


class ColorRGB(ColorBase):
    """8-bit device color, channels clamped to [0, 255]."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    _type: ClassVar[type] = int
    dtype: ClassVar[type] = np.uint8
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)

    @classmethod
    def from_hex(cls, text: str) -> "ColorRGB":
        """Build a color from ``#RRGGBB``; raises InvalidFormat on malformed text."""
        return cls(hex_to_color(text))

    def to_hex(self) -> Union[str, List[str]]:
        """``#RRGGBB`` for a single color, a flat list of codes for arrays."""
        if self.is_array:
            return np_colors_to_hex(self.value)
        return color_to_hex(self.value)


rgb_space_to_class = build_registry(
    ColorLinearRGB,
    ColorSRGB,
    ColorRGB,
)
