import numpy as np
import pytest

from lumachroma.conversions.xyz_rgb import (
    xyz_to_linear_rgb,
    linear_rgb_to_xyz,
    np_xyz_to_linear_rgb,
    np_linear_rgb_to_xyz,
    M_XYZ_TO_LINEAR_RGB,
    M_LINEAR_RGB_TO_XYZ,
)
from lumachroma.types.white_point import D65


def test_linear_white_to_xyz():
    assert linear_rgb_to_xyz(1.0, 1.0, 1.0) == pytest.approx((95.05, 100.0, 108.9))


def test_reference_white_to_linear_rgb():
    assert xyz_to_linear_rgb(*D65.as_tuple()) == pytest.approx((1.0, 1.0, 1.0), abs=1e-3)


def test_out_of_gamut_is_not_clamped():
    r, g, b = xyz_to_linear_rgb(0.0, 100.0, 0.0)
    assert r == pytest.approx(-1.5372)
    assert g == pytest.approx(1.8758)
    assert b == pytest.approx(-0.2040)


def test_matrices_are_near_inverses():
    assert np.allclose(M_XYZ_TO_LINEAR_RGB @ M_LINEAR_RGB_TO_XYZ, np.eye(3), atol=1e-3)


def test_np_matches_scalar():
    xyz = np.array([
        [41.24, 21.26, 1.93],
        [95.047, 100.0, 108.883],
        [0.0, 100.0, 0.0],
        [0.0, 0.0, 0.0],
    ])
    rgb = np_xyz_to_linear_rgb(xyz)
    assert rgb.shape == (4, 3)
    for row_in, row_out in zip(xyz, rgb):
        assert np.allclose(row_out, xyz_to_linear_rgb(*row_in))

    back = np_linear_rgb_to_xyz(rgb)
    for row_in, row_out in zip(rgb, back):
        assert np.allclose(row_out, linear_rgb_to_xyz(*row_in))
