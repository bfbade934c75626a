import numpy as np
from numpy import ndarray as NDArray

from ..types.white_point import WhitePoint, D65

# CIE LUV <-> XYZ relative to a reference white (D65 unless told otherwise).

# Y/Yn threshold between the linear and the cube-root branch of L*
_EPSILON = (6.0 / 29.0) ** 3
_KAPPA = (29.0 / 3.0) ** 3


def xyz_to_uv(X: float, Y: float, Z: float) -> tuple[float, float]:
    """CIE 1976 u'v' chromaticity of a tristimulus value."""
    denom = X + 15.0 * Y + 3.0 * Z
    return 4.0 * X / denom, 9.0 * Y / denom


def luv_to_xyz(L: float, u: float, v: float, *, white: WhitePoint = D65) -> tuple[float, float, float]:
    """
    CIE LUV -> XYZ.

    ``L <= 0`` is black: the u'v' terms divide by ``13 L``, so it is
    short-circuited to ``(0, 0, 0)`` instead of producing non-finite values.
    A chromaticity with ``v' == 0`` has no finite XYZ; it falls back to
    the white point chromaticity, giving the neutral color of the same L.
    """
    if L <= 0:
        return 0.0, 0.0, 0.0
    u_ = u / (13.0 * L) + white.un
    v_ = v / (13.0 * L) + white.vn
    if v_ == 0:
        u_, v_ = white.un, white.vn
    if L <= 8.0:
        Y = white.y * L * (3.0 / 29.0) ** 3
    else:
        Y = white.y * ((L + 16.0) / 116.0) ** 3
    X = Y * 9.0 * u_ / (4.0 * v_)
    Z = Y * (12.0 - 3.0 * u_ - 20.0 * v_) / (4.0 * v_)
    return X, Y, Z


def xyz_to_luv(X: float, Y: float, Z: float, *, white: WhitePoint = D65) -> tuple[float, float, float]:
    """
    XYZ -> CIE LUV.

    Black (and any input with a zero chromaticity denominator) maps to
    ``u = v = 0``.
    """
    Yr = Y / white.y
    if Yr <= _EPSILON:
        L = Yr * _KAPPA
    else:
        L = 116.0 * Yr ** (1.0 / 3.0) - 16.0
    if L == 0 or X + 15.0 * Y + 3.0 * Z == 0:
        return L, 0.0, 0.0
    u_, v_ = xyz_to_uv(X, Y, Z)
    return L, 13.0 * L * (u_ - white.un), 13.0 * L * (v_ - white.vn)


def np_luv_to_xyz(luv: NDArray, *, white: WhitePoint = D65) -> NDArray:
    """
    Vectorized: CIE LUV (..., 3) -> XYZ (..., 3).

    Rows with L <= 0 become black, rows with v' == 0 the neutral color of the same L.
    """
    luv = np.asarray(luv, dtype=float)
    L, u, v = luv[..., 0], luv[..., 1], luv[..., 2]
    black = L <= 0

    with np.errstate(divide="ignore", invalid="ignore"):
        u_ = u / (13.0 * L) + white.un
        v_ = v / (13.0 * L) + white.vn
        neutral = v_ == 0
        u_ = np.where(neutral, white.un, u_)
        v_ = np.where(neutral, white.vn, v_)
        Y = np.where(
            L <= 8.0,
            white.y * L * (3.0 / 29.0) ** 3,
            white.y * ((L + 16.0) / 116.0) ** 3,
        )
        X = Y * 9.0 * u_ / (4.0 * v_)
        Z = Y * (12.0 - 3.0 * u_ - 20.0 * v_) / (4.0 * v_)

    xyz = np.stack([X, Y, Z], axis=-1)
    return np.where(black[..., None], 0.0, xyz)


def np_xyz_to_luv(xyz: NDArray, *, white: WhitePoint = D65) -> NDArray:
    """Vectorized: XYZ (..., 3) -> CIE LUV (..., 3)."""
    xyz = np.asarray(xyz, dtype=float)
    X, Y, Z = xyz[..., 0], xyz[..., 1], xyz[..., 2]
    Yr = Y / white.y

    with np.errstate(divide="ignore", invalid="ignore"):
        L = np.where(Yr <= _EPSILON, Yr * _KAPPA, 116.0 * Yr ** (1.0 / 3.0) - 16.0)
        denom = X + 15.0 * Y + 3.0 * Z
        u_ = 4.0 * X / denom
        v_ = 9.0 * Y / denom
        u = 13.0 * L * (u_ - white.un)
        v = 13.0 * L * (v_ - white.vn)

    achromatic = (L == 0) | (denom == 0)
    u = np.where(achromatic, 0.0, u)
    v = np.where(achromatic, 0.0, v)
    return np.stack([L, u, v], axis=-1)
