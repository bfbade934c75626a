"""
Sequential palettes, modelled on ``sequential_hcl`` from R colorspace.

Luminance, chroma and hue each follow their own curve from the start to the
end value; luminance and chroma are shaped by a power exponent.
"""

import logging
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.white_point import WhitePoint, D65
from .linspace import color_range
from .palette import Palette, build_palette

logger = logging.getLogger(__name__)

Pair = Tuple[float, float]

# (powers, luminances, chromas, hues)
HEAT = ((1.0, 0.2), (50.0, 90.0), (100.0, 30.0), (0.0, 90.0))
TERRAIN = ((1.0, 0.1), (60.0, 95.0), (80.0, 0.0), (130.0, 0.0))
SINGLE_HUE_POWERS = (1.5, 1.5)
SINGLE_HUE_LUMINANCES = (30.0, 90.0)
SINGLE_HUE_CHROMAS = (80.0, 0.0)
DEFAULT_HUE = 260.0


def sequential_lch(powers: Pair, luminances: Pair, chromas: Pair, hues: Pair, n: int) -> NDArray:
    """
    LCH samples of a sequential palette, shape (n, 3).

    The curve parameter x runs from 1 down to 0, so the first color sits at
    the start values and the last one at the end values.
    """
    pow_l, pow_c = powers
    l_start, l_end = luminances
    c_start, c_end = chromas
    h_start, h_end = hues

    x = color_range(n, 1.0, 0.0)
    chroma = c_end - (c_end - c_start) * x ** pow_c
    lum = l_end - (l_end - l_start) * x ** pow_l
    hue = h_end - (h_end - h_start) * x
    return np.stack([lum, chroma, hue], axis=-1)


def full(powers: Pair, luminances: Pair, chromas: Pair, hues: Pair, n: int, *, white: WhitePoint = D65) -> Palette:
    """
    Full specification of a sequential palette.

    Args:
        powers: (luminance power, chroma power)
        luminances: (start, end) luminance
        chromas: (start, end) chroma
        hues: (start, end) hue in degrees, interpolated linearly
        n: Number of colors, at least 2
        white: Reference white

    Returns:
        Palette of ``n`` colors
    """
    logger.debug(
        "sequential n=%s powers=%s luminances=%s chromas=%s hues=%s",
        n, powers, luminances, chromas, hues,
    )
    return build_palette(sequential_lch(powers, luminances, chromas, hues, n), family="sequential", white=white)


def heat(n: int) -> Palette:
    """Sequential heat colors, after ``heat_hcl``."""
    return full(*HEAT, n)


def terrain(n: int) -> Palette:
    """Sequential terrain colors, after ``terrain_hcl``."""
    return full(*TERRAIN, n)


def for_hue(hue: float, n: int) -> Palette:
    """Single-hue sequential palette with the ``sequential_hcl`` luminance and chroma defaults."""
    return full(SINGLE_HUE_POWERS, SINGLE_HUE_LUMINANCES, SINGLE_HUE_CHROMAS, (hue, hue), n)


def basic(n: int) -> Palette:
    """Basic blue sequential palette (``sequential_hcl`` default)."""
    return for_hue(DEFAULT_HUE, n)
