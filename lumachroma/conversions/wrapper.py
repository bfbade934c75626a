import logging
from typing import Callable, Dict, List, Sequence, Tuple, cast

import numpy as np

from ..types.color_types import ColorSpace, CONVERSION_CHAIN, Triple, IntTriple, element_to_array, parse_space
from ..types.white_point import WhitePoint, D65
from .lch_luv import lch_to_luv, luv_to_lch, np_lch_to_luv, np_luv_to_lch
from .luv_xyz import luv_to_xyz, xyz_to_luv, np_luv_to_xyz, np_xyz_to_luv
from .xyz_rgb import xyz_to_linear_rgb, linear_rgb_to_xyz, np_xyz_to_linear_rgb, np_linear_rgb_to_xyz
from .gamma import linear_rgb_to_srgb, srgb_to_linear_rgb, np_linear_to_srgb, np_srgb_to_linear
from .device import srgb_to_color, color_to_srgb, np_srgb_to_color, np_color_to_srgb

logger = logging.getLogger(__name__)

Stage = Callable[[Sequence, WhitePoint], tuple]
NpStage = Callable[[np.ndarray, WhitePoint], np.ndarray]

# One entry per adjacent pair of the chain, in both directions.
CONVERT_STAGES: Dict[Tuple[ColorSpace, ColorSpace], Stage] = {
    (ColorSpace.LCH, ColorSpace.LUV): lambda c, w: lch_to_luv(*c),
    (ColorSpace.LUV, ColorSpace.XYZ): lambda c, w: luv_to_xyz(*c, white=w),
    (ColorSpace.XYZ, ColorSpace.LINEAR_RGB): lambda c, w: xyz_to_linear_rgb(*c, white=w),
    (ColorSpace.LINEAR_RGB, ColorSpace.SRGB): lambda c, w: linear_rgb_to_srgb(*c),
    (ColorSpace.SRGB, ColorSpace.RGB): lambda c, w: srgb_to_color(*c),
    (ColorSpace.RGB, ColorSpace.SRGB): lambda c, w: color_to_srgb(*c),
    (ColorSpace.SRGB, ColorSpace.LINEAR_RGB): lambda c, w: srgb_to_linear_rgb(*c),
    (ColorSpace.LINEAR_RGB, ColorSpace.XYZ): lambda c, w: linear_rgb_to_xyz(*c, white=w),
    (ColorSpace.XYZ, ColorSpace.LUV): lambda c, w: xyz_to_luv(*c, white=w),
    (ColorSpace.LUV, ColorSpace.LCH): lambda c, w: luv_to_lch(*c),
}

CONVERT_NUMPY_STAGES: Dict[Tuple[ColorSpace, ColorSpace], NpStage] = {
    (ColorSpace.LCH, ColorSpace.LUV): lambda c, w: np_lch_to_luv(c),
    (ColorSpace.LUV, ColorSpace.XYZ): lambda c, w: np_luv_to_xyz(c, white=w),
    (ColorSpace.XYZ, ColorSpace.LINEAR_RGB): lambda c, w: np_xyz_to_linear_rgb(c, white=w),
    (ColorSpace.LINEAR_RGB, ColorSpace.SRGB): lambda c, w: np_linear_to_srgb(c),
    (ColorSpace.SRGB, ColorSpace.RGB): lambda c, w: np_srgb_to_color(c),
    (ColorSpace.RGB, ColorSpace.SRGB): lambda c, w: np_color_to_srgb(c),
    (ColorSpace.SRGB, ColorSpace.LINEAR_RGB): lambda c, w: np_srgb_to_linear(c),
    (ColorSpace.LINEAR_RGB, ColorSpace.XYZ): lambda c, w: np_linear_rgb_to_xyz(c, white=w),
    (ColorSpace.XYZ, ColorSpace.LUV): lambda c, w: np_xyz_to_luv(c, white=w),
    (ColorSpace.LUV, ColorSpace.LCH): lambda c, w: np_luv_to_lch(c),
}


def conversion_path(from_space: ColorSpace | str, to_space: ColorSpace | str) -> List[Tuple[ColorSpace, ColorSpace]]:
    """
    Adjacent (source, target) pairs to walk from one space to another.

    The chain is linear, so the path is the slice between the two spaces,
    reversed when going from the device end towards LCH.
    """
    start = CONVERSION_CHAIN.index(parse_space(from_space))
    stop = CONVERSION_CHAIN.index(parse_space(to_space))
    step = 1 if stop >= start else -1
    spaces = [CONVERSION_CHAIN[i] for i in range(start, stop + step, step)]
    return list(zip(spaces[:-1], spaces[1:]))


def convert(
    color: Sequence[float],
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    *,
    white: WhitePoint = D65,
) -> tuple:
    """
    Convert a single color triple between any two spaces of the chain.

    Args:
        color: 3-channel color in ``from_space``
        from_space: Source color space
        to_space: Target color space
        white: Reference white for the XYZ stages

    Returns:
        Converted triple (ints for ``"rgb"``, floats otherwise)
    """
    if len(color) != 3:
        raise ValueError(f"Expected a 3-channel color, got {color!r}")
    path = conversion_path(from_space, to_space)
    logger.debug('Converting %s from %s to %s', color, from_space, to_space)
    logger.debug(' @ Conversion path: %s', path)

    result = tuple(color)
    for pair in path:
        result = CONVERT_STAGES[pair](result, white)
    return result


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    *,
    white: WhitePoint = D65,
) -> np.ndarray:
    """Vectorized :func:`convert` over arrays shaped (..., 3)."""
    arr = element_to_array(color)
    if arr.shape[-1:] != (3,):
        raise ValueError(f"Expected last dimension to be 3, got shape {arr.shape}")
    path = conversion_path(from_space, to_space)
    logger.debug('Converting array %s from %s to %s', arr.shape, from_space, to_space)
    logger.debug(' @ Conversion path: %s', path)

    for pair in path:
        arr = CONVERT_NUMPY_STAGES[pair](arr, white)
    return arr


def lch_to_color(lch: Sequence[float], *, white: WhitePoint = D65) -> IntTriple:
    """CIE LCH -> device color, the whole forward chain at once."""
    luv = lch_to_luv(*lch)
    xyz = luv_to_xyz(*luv, white=white)
    linear = xyz_to_linear_rgb(*xyz, white=white)
    srgb = linear_rgb_to_srgb(*linear)
    return srgb_to_color(*srgb)


def color_to_lch(color: Sequence[int], *, white: WhitePoint = D65) -> Triple:
    """
    Device color -> CIE LCH.

    Round trip with :func:`lch_to_color` is not exact because of 8-bit quantization.
    """
    srgb = color_to_srgb(*color)
    linear = srgb_to_linear_rgb(*srgb)
    xyz = linear_rgb_to_xyz(*linear, white=white)
    luv = xyz_to_luv(*xyz, white=white)
    return cast(Triple, luv_to_lch(*luv))


def np_lch_to_color(lch: np.ndarray, *, white: WhitePoint = D65) -> np.ndarray:
    """Vectorized: CIE LCH (..., 3) -> uint8 device colors (..., 3)."""
    return np_srgb_to_color(np_lch_to_srgb(lch, white=white))


def np_lch_to_srgb(lch: np.ndarray, *, white: WhitePoint = D65) -> np.ndarray:
    """Vectorized: CIE LCH (..., 3) -> unquantized sRGB floats (..., 3)."""
    luv = np_lch_to_luv(lch)
    xyz = np_luv_to_xyz(luv, white=white)
    linear = np_xyz_to_linear_rgb(xyz, white=white)
    return np_linear_to_srgb(linear)


def np_color_to_lch(color: np.ndarray, *, white: WhitePoint = D65) -> np.ndarray:
    """Vectorized: device colors (..., 3) -> CIE LCH (..., 3)."""
    srgb = np_color_to_srgb(color)
    linear = np_srgb_to_linear(srgb)
    xyz = np_linear_rgb_to_xyz(linear, white=white)
    luv = np_xyz_to_luv(xyz, white=white)
    return np_luv_to_lch(luv)
