from typing import ClassVar
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class ColorLCH(ColorBase):
    """CIE LCH(uv): luminance, chroma, hue in degrees."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.LCH


class ColorLUV(ColorBase):
    """CIE 1976 L*u*v*."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.LUV


class ColorXYZ(ColorBase):
    """CIE XYZ tristimulus values, Y normalized to 100."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.XYZ


perceptual_space_to_class = build_registry(
    ColorLCH,
    ColorLUV,
    ColorXYZ,
)
