"""
Qualitative palettes: constant luminance and chroma, equally spaced hues.

Similar to ``rainbow_hcl`` from the R colorspace package. The defaults
(luminance 65, chroma 100) are the ggplot2 ones rather than colorspace's
(70, 50), they give more saturated colors on screen.
"""

import logging
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.white_point import WhitePoint, D65
from .linspace import color_range, check_count
from .palette import Palette, build_palette

logger = logging.getLogger(__name__)

DEFAULT_LUMINANCE = 65.0
DEFAULT_CHROMA = 100.0
COLD_HUES = (270.0, 150.0)
WARM_HUES = (90.0, -30.0)


def qualitative_lch(luminance: float, chroma: float, hues: Tuple[float, float], n: int) -> NDArray:
    """LCH samples of a qualitative palette, shape (n, 3)."""
    h_start, h_end = hues
    h = color_range(n, h_start, h_end)
    return np.stack([np.full_like(h, luminance), np.full_like(h, chroma), h], axis=-1)


def full(luminance: float, chroma: float, hues: Tuple[float, float], n: int, *, white: WhitePoint = D65) -> Palette:
    """
    Full specification of a qualitative palette.

    Args:
        luminance: Constant luminance of every color
        chroma: Constant chroma of every color
        hues: (start, end) of the hue sweep in degrees, both included
        n: Number of colors, at least 2
        white: Reference white

    Returns:
        Palette of ``n`` colors
    """
    logger.debug("qualitative n=%s luminance=%s chroma=%s hues=%s", n, luminance, chroma, hues)
    return build_palette(qualitative_lch(luminance, chroma, hues, n), family="qualitative", white=white)


def for_hues(hues: Tuple[float, float], n: int) -> Palette:
    """Qualitative palette with default luminance 65 and chroma 100 over a hue range."""
    return full(DEFAULT_LUMINANCE, DEFAULT_CHROMA, hues, n)


def default_hues(n: int) -> Tuple[float, float]:
    """
    Hue window for ``n`` colors around the whole wheel, (15, 375 - 360/n).

    The end stops one step short of a full turn so the last hue does not
    repeat the first.
    """
    n = check_count(n)
    return 15.0, 375.0 - 360.0 / n


def basic(n: int) -> Palette:
    """Basic qualitative palette with equally spaced hues from the whole wheel."""
    return for_hues(default_hues(n), n)


def cold_hues(n: int) -> Palette:
    """Qualitative palette with equally spaced cold hues."""
    return for_hues(COLD_HUES, n)


def warm_hues(n: int) -> Palette:
    """Qualitative palette with equally spaced warm hues."""
    return for_hues(WARM_HUES, n)
