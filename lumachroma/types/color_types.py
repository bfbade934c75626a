from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

from ..errors import UndefinedConversion


class ColorSpace(str, Enum):
    LCH = "lch"
    LUV = "luv"
    XYZ = "xyz"
    LINEAR_RGB = "linear_rgb"
    SRGB = "srgb"
    RGB = "rgb"


Scalar = int | float
Triple = Tuple[float, float, float]
IntTriple = Tuple[int, int, int]
ColorElement = Union[Triple, IntTriple]
ColorValue = Union[ColorElement, ndarray]  # Includes array support

# Perceptual end first, device end last.
CONVERSION_CHAIN: Tuple[ColorSpace, ...] = (
    ColorSpace.LCH,
    ColorSpace.LUV,
    ColorSpace.XYZ,
    ColorSpace.LINEAR_RGB,
    ColorSpace.SRGB,
    ColorSpace.RGB,
)
CYLINDRICAL_SPACES = {ColorSpace.LCH}


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    return np.asarray(element, dtype=float)


def parse_space(color_space: ColorSpace | str) -> ColorSpace:
    """
    Resolve a color space name (case-insensitive) to a ColorSpace member.

    Raises:
        UndefinedConversion: if the name is not part of the conversion chain
    """
    if isinstance(color_space, ColorSpace):
        return color_space
    try:
        return ColorSpace(str(color_space).lower())
    except ValueError:
        raise UndefinedConversion(color_space) from None


def is_cylindrical_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space carries a hue angle channel.

    Args:
        color_space: Color space name or member
    Returns:
        True for LCH, False otherwise
    """
    return parse_space(color_space) in CYLINDRICAL_SPACES
