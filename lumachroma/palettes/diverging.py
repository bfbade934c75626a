"""
Diverging palettes, modelled on ``diverge_hcl`` from R colorspace.

Two single-hue ramps meet at a neutral center: chroma and luminance depend
on |x| while the hue only flips with the sign of x.
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

DEFAULT_POWERS = (1.5, 1.5)
DEFAULT_LUMINANCES = (30.0, 90.0)
DEFAULT_CHROMA = 80.0
BLUE_RED = (260.0, 0.0)


def diverging_lch(powers: Pair, luminances: Pair, chroma_max: float, hues: Pair, n: int) -> NDArray:
    """
    LCH samples of a diverging palette, shape (n, 3).

    x runs from 1 to -1; positive samples take the start hue, the rest
    (the center included) the end hue.
    """
    pow_l, pow_c = powers
    l_start, l_end = luminances
    h_start, h_end = hues

    x = color_range(n, 1.0, -1.0)
    ax = np.abs(x)
    chroma = chroma_max * ax ** pow_c
    lum = l_end - (l_end - l_start) * ax ** pow_l
    hue = np.where(x > 0, h_start, h_end).astype(float)
    return np.stack([lum, chroma, hue], axis=-1)


def full(powers: Pair, luminances: Pair, chroma_max: float, hues: Pair, n: int, *, white: WhitePoint = D65) -> Palette:
    """
    Full specification of a diverging palette.

    Args:
        powers: (luminance power, chroma power)
        luminances: (start, end) luminance; start at both ends, end at the center
        chroma_max: Chroma at both ends, 0 at the center
        hues: (first half hue, second half hue) in degrees
        n: Number of colors, at least 2
        white: Reference white

    Returns:
        Palette of ``n`` colors
    """
    logger.debug(
        "diverging n=%s powers=%s luminances=%s chroma_max=%s hues=%s",
        n, powers, luminances, chroma_max, hues,
    )
    return build_palette(diverging_lch(powers, luminances, chroma_max, hues, n), family="diverging", white=white)


def for_hues(hues: Pair, n: int) -> Palette:
    """Diverging palette for given hues with the ``diverge_hcl`` defaults."""
    return full(DEFAULT_POWERS, DEFAULT_LUMINANCES, DEFAULT_CHROMA, hues, n)


def basic(n: int) -> Palette:
    """Basic blue - red diverging palette (``diverge_hcl`` default)."""
    return for_hues(BLUE_RED, n)
