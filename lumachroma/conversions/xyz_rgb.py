import numpy as np
from numpy import ndarray as NDArray

from ..types.white_point import WhitePoint, D65

# XYZ <-> linear RGB is linear. Coefficients are the sRGB (D65) matrices as
# published on Wikipedia; the W3C note rounds them slightly differently.

M_XYZ_TO_LINEAR_RGB = np.array([
    [ 3.2406, -1.5372, -0.4986],
    [-0.9689,  1.8758,  0.0415],
    [ 0.0557, -0.2040,  1.0570],
])

M_LINEAR_RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
])


def xyz_to_linear_rgb(X: float, Y: float, Z: float, *, white: WhitePoint = D65) -> tuple[float, float, float]:
    """XYZ -> linear RGB. Out-of-gamut colors give channels outside [0, 1], left unclamped."""
    x, y, z = X / white.y, Y / white.y, Z / white.y
    r = 3.2406 * x - 1.5372 * y - 0.4986 * z
    g = -0.9689 * x + 1.8758 * y + 0.0415 * z
    b = 0.0557 * x - 0.2040 * y + 1.0570 * z
    return r, g, b


def linear_rgb_to_xyz(r: float, g: float, b: float, *, white: WhitePoint = D65) -> tuple[float, float, float]:
    """Linear RGB -> XYZ."""
    x = 0.4124 * r + 0.3576 * g + 0.1805 * b
    y = 0.2126 * r + 0.7152 * g + 0.0722 * b
    z = 0.0193 * r + 0.1192 * g + 0.9505 * b
    return x * white.y, y * white.y, z * white.y


def np_xyz_to_linear_rgb(xyz: NDArray, *, white: WhitePoint = D65) -> NDArray:
    """Vectorized: XYZ (..., 3) -> linear RGB (..., 3)."""
    xyz = np.asarray(xyz, dtype=float) / white.y
    return xyz @ M_XYZ_TO_LINEAR_RGB.T


def np_linear_rgb_to_xyz(rgb: NDArray, *, white: WhitePoint = D65) -> NDArray:
    """Vectorized: linear RGB (..., 3) -> XYZ (..., 3)."""
    rgb = np.asarray(rgb, dtype=float)
    return (rgb @ M_LINEAR_RGB_TO_XYZ.T) * white.y
