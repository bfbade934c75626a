import math
import numpy as np
from numpy import ndarray as NDArray

# LCH is the cylindrical form of LUV, so this stage is a plain polar <-> cartesian change.


def lch_to_luv(L: float, C: float, h: float) -> tuple[float, float, float]:
    """
    CIE LCH(uv) -> CIE LUV.

    L and C are conventionally in [0, 100]; h is an angle in degrees and may
    lie outside [0, 360).
    """
    rad = h * math.pi / 180.0
    return L, C * math.cos(rad), C * math.sin(rad)


def luv_to_lch(L: float, u: float, v: float) -> tuple[float, float, float]:
    """
    CIE LUV -> CIE LCH(uv).

    Hue is returned in [0, 360). An achromatic input (u = v = 0) has hue 0.
    """
    C = math.sqrt(u * u + v * v)
    if C == 0:
        return L, 0.0, 0.0
    h = math.atan2(v, u) * 180.0 / math.pi
    return L, C, (h + 360.0) % 360.0


def np_lch_to_luv(lch: NDArray) -> NDArray:
    """Vectorized: CIE LCH(uv) (..., 3) -> CIE LUV (..., 3)."""
    lch = np.asarray(lch, dtype=float)
    L, C, h = lch[..., 0], lch[..., 1], lch[..., 2]
    rad = h * np.pi / 180.0
    return np.stack([L, C * np.cos(rad), C * np.sin(rad)], axis=-1)


def np_luv_to_lch(luv: NDArray) -> NDArray:
    """Vectorized: CIE LUV (..., 3) -> CIE LCH(uv) (..., 3), hue in [0, 360)."""
    luv = np.asarray(luv, dtype=float)
    L, u, v = luv[..., 0], luv[..., 1], luv[..., 2]
    C = np.sqrt(u * u + v * v)
    h = np.arctan2(v, u) * 180.0 / np.pi
    h = (h + 360.0) % 360.0
    h = np.where(C == 0, 0.0, h)
    return np.stack([L, C, h], axis=-1)
