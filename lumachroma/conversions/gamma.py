import numpy as np
from numpy import ndarray as NDArray

# sRGB transfer curve. Inputs outside [0, 1] go through the formulas as-is.


def linear_to_srgb(c: float) -> float:
    """Convert one linear-light channel to nonlinear sRGB."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def srgb_to_linear(c: float) -> float:
    """Convert one nonlinear sRGB channel to linear-light."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_rgb_to_srgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Gamma-encode a linear RGB triple."""
    return linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)


def srgb_to_linear_rgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Decode a gamma-encoded sRGB triple to linear RGB."""
    return srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB to nonlinear sRGB, channel-wise."""
    c = np.asarray(c, dtype=float)
    # the unused branch of np.where may see negative bases
    with np.errstate(invalid="ignore"):
        result = np.where(
            c <= 0.0031308,
            12.92 * c,
            1.055 * (c ** (1 / 2.4)) - 0.055
        )
    return result


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB to linear-light RGB, channel-wise."""
    c = np.asarray(c, dtype=float)
    with np.errstate(invalid="ignore"):
        result = np.where(
            c <= 0.04045,
            c / 12.92,
            ((c + 0.055) / 1.055) ** 2.4
        )
    return result
