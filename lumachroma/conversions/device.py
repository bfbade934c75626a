import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

# Gamma-encoded sRGB <-> 8-bit device channels.
#
# Forward scales by 256 and truncates, inverse divides by 255. The two are
# deliberately not inverses of each other: srgb -> color -> srgb is not exact.

CHANNEL_MAX = 255

_np_clamp = bound_type_to_np_function[BoundType.CLAMP]


def _to_channel(c: float) -> int:
    return max(0, min(int(c * 256.0), CHANNEL_MAX))


def srgb_to_color(r: float, g: float, b: float) -> tuple[int, int, int]:
    """sRGB in [0, 1] -> device color, each channel ``clamp(trunc(c * 256), 0, 255)``."""
    return _to_channel(r), _to_channel(g), _to_channel(b)


def color_to_srgb(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Device color -> sRGB in [0, 1], each channel ``c / 255``."""
    return r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX


def np_srgb_to_color(srgb: NDArray) -> NDArray:
    """Vectorized: sRGB (..., 3) -> uint8 device colors (..., 3)."""
    srgb = np.asarray(srgb, dtype=float)
    channels = _np_clamp(np.trunc(srgb * 256.0), 0, CHANNEL_MAX)
    return np.asarray(channels).astype(np.uint8)


def np_color_to_srgb(color: NDArray) -> NDArray:
    """Vectorized: device colors (..., 3) -> sRGB floats (..., 3)."""
    return np.asarray(color, dtype=float) / CHANNEL_MAX


def np_count_clipped(srgb: NDArray) -> int:
    """Number of colors in an sRGB array with at least one channel outside the device range."""
    scaled = np.trunc(np.asarray(srgb, dtype=float) * 256.0)
    out = (scaled < 0) | (scaled > CHANNEL_MAX)
    return int(np.count_nonzero(out.any(axis=-1)))
