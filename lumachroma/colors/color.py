from __future__ import annotations
from numpy import ndarray

from .color_base import ColorBase
from .perceptual import perceptual_space_to_class
from .rgb import rgb_space_to_class
from ..conversions import convert, np_convert
from ..errors import UndefinedConversion
from ..types.color_types import ColorSpace, parse_space
from ..types.white_point import WhitePoint, D65
from ..utils import value_or_default

unified_space_to_class: dict[ColorSpace, type[ColorBase]] = {**perceptual_space_to_class, **rgb_space_to_class}


def color_convert(self: ColorBase, to_space: ColorSpace | str | None = None, *, white: WhitePoint = D65) -> ColorBase:
    """
    Convert this color to another space of the chain.

    Automatically detects whether the value is a scalar or array and uses
    the appropriate conversion function (convert for scalars, np_convert for arrays).

    Args:
        to_space: Target color space (e.g., "lch", "xyz", "rgb"). Defaults to the current one.
        white: Reference white for the XYZ stages

    Returns:
        New ColorBase instance in the target space
    """
    target = parse_space(value_or_default(to_space, self.mode))
    cls = get_color_class(target)
    if target == self.mode:
        return self

    if isinstance(self.value, ndarray):
        result = np_convert(self.value, self.mode, target, white=white)
    else:
        result = convert(self.value, self.mode, target, white=white)
    return cls(result)


ColorBase.convert = color_convert


def get_color_class(color_space: ColorSpace | str) -> type[ColorBase]:
    color_class = unified_space_to_class.get(parse_space(color_space))
    if color_class is None:
        raise UndefinedConversion(color_space)
    return color_class


def convert_color(value, color_space: ColorSpace | str):
    """Wrap a raw triple/array, or convert an existing color, into ``color_space``."""
    if isinstance(value, ColorBase):
        return value.convert(color_space)
    return get_color_class(color_space)(value)
