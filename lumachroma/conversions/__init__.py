"""
lumachroma Color Space Conversions
==================================

Conversions along the chain used to turn perceptual coordinates into
displayable colors, with both scalar and vectorized (numpy) implementations.

Chain
-----
    LCH <-> LUV <-> XYZ <-> linear RGB <-> sRGB <-> device RGB (0-255) <-> #RRGGBB

1. LCH <-> LUV
    lch_to_luv(L, C, h), luv_to_lch(L, u, v)
        LCH is the polar form of CIE LUV; hue in degrees.
2. LUV <-> XYZ
    luv_to_xyz(L, u, v, white=D65), xyz_to_luv(X, Y, Z, white=D65)
        Relative to a reference white, D65 / 2 degree observer by default.
3. XYZ <-> linear RGB
    xyz_to_linear_rgb(X, Y, Z), linear_rgb_to_xyz(r, g, b)
        sRGB primaries, no clamping of out-of-gamut colors.
4. linear RGB <-> sRGB
    linear_rgb_to_srgb(r, g, b), srgb_to_linear_rgb(r, g, b)
        sRGB transfer curve (gamma correction).
5. sRGB <-> device RGB
    srgb_to_color(r, g, b), color_to_srgb(r, g, b)
        Forward truncates ``c * 256`` and clamps to [0, 255]; inverse divides by 255.

All at once
-----------
    lch_to_color(lch), color_to_lch(color)
    color_to_hex(color), hex_to_color(text)

High-Level API
--------------
    convert(color, from_space, to_space, white=D65)
        Walk the chain between any two spaces for a single triple
    np_convert(color, from_space, to_space, white=D65)
        Vectorized version for arrays shaped (..., 3)

Every scalar function has an ``np_`` twin working on (..., 3) arrays.

Examples
--------
>>> from lumachroma.conversions import lch_to_color, color_to_hex, color_to_lch
>>> rgb = lch_to_color((65.0, 100.0, 15.0))
>>> color_to_hex(rgb)
>>> color_to_lch(rgb)  # approximately (65, 100, 15)
>>>
>>> import numpy as np
>>> from lumachroma.conversions import np_convert
>>> np_convert(np.array([[50.0, 0.0, 0.0], [90.0, 30.0, 260.0]]), "lch", "rgb")
"""

from .lch_luv import lch_to_luv, luv_to_lch, np_lch_to_luv, np_luv_to_lch
from .luv_xyz import luv_to_xyz, xyz_to_luv, xyz_to_uv, np_luv_to_xyz, np_xyz_to_luv
from .xyz_rgb import (
    xyz_to_linear_rgb,
    linear_rgb_to_xyz,
    np_xyz_to_linear_rgb,
    np_linear_rgb_to_xyz,
    M_XYZ_TO_LINEAR_RGB,
    M_LINEAR_RGB_TO_XYZ,
)
from .gamma import (
    linear_to_srgb,
    srgb_to_linear,
    linear_rgb_to_srgb,
    srgb_to_linear_rgb,
    np_linear_to_srgb,
    np_srgb_to_linear,
)
from .device import srgb_to_color, color_to_srgb, np_srgb_to_color, np_color_to_srgb, np_count_clipped
from .hex_codec import color_to_hex, hex_to_color, np_colors_to_hex, np_hex_to_colors

# High-level API
from .wrapper import (
    convert,
    np_convert,
    conversion_path,
    lch_to_color,
    color_to_lch,
    np_lch_to_color,
    np_lch_to_srgb,
    np_color_to_lch,
)

from ..types.color_types import ColorSpace

__all__ = [
    # LCH <-> LUV
    'lch_to_luv',
    'luv_to_lch',
    'np_lch_to_luv',
    'np_luv_to_lch',

    # LUV <-> XYZ
    'luv_to_xyz',
    'xyz_to_luv',
    'xyz_to_uv',
    'np_luv_to_xyz',
    'np_xyz_to_luv',

    # XYZ <-> linear RGB
    'xyz_to_linear_rgb',
    'linear_rgb_to_xyz',
    'np_xyz_to_linear_rgb',
    'np_linear_rgb_to_xyz',
    'M_XYZ_TO_LINEAR_RGB',
    'M_LINEAR_RGB_TO_XYZ',

    # linear RGB <-> sRGB
    'linear_to_srgb',
    'srgb_to_linear',
    'linear_rgb_to_srgb',
    'srgb_to_linear_rgb',
    'np_linear_to_srgb',
    'np_srgb_to_linear',

    # sRGB <-> device
    'srgb_to_color',
    'color_to_srgb',
    'np_srgb_to_color',
    'np_color_to_srgb',
    'np_count_clipped',

    # device <-> hex
    'color_to_hex',
    'hex_to_color',
    'np_colors_to_hex',
    'np_hex_to_colors',

    # High-level API
    'convert',
    'np_convert',
    'conversion_path',
    'lch_to_color',
    'color_to_lch',
    'np_lch_to_color',
    'np_lch_to_srgb',
    'np_color_to_lch',

    # Types
    'ColorSpace',
]
