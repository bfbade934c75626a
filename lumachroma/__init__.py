"""lumachroma: perceptual color conversions and HCL palettes for data visualization."""

from .colors.color_base import ColorBase
from .colors.perceptual import ColorLCH, ColorLUV, ColorXYZ
from .colors.rgb import ColorLinearRGB, ColorSRGB, ColorRGB
from .colors.color import color_convert, convert_color, get_color_class

# Friendly aliases
LCH = ColorLCH
RGB = ColorRGB

from .conversions import (
    lch_to_luv,
    luv_to_lch,
    luv_to_xyz,
    xyz_to_luv,
    xyz_to_linear_rgb,
    linear_rgb_to_xyz,
    linear_rgb_to_srgb,
    srgb_to_linear_rgb,
    srgb_to_color,
    color_to_srgb,
    lch_to_color,
    color_to_lch,
    color_to_hex,
    hex_to_color,
    np_lch_to_color,
    np_color_to_lch,
    convert,
    np_convert,
)
from .palettes import qualitative, sequential, diverging, color_range, Palette
from .errors import PaletteError, InvalidCount, InvalidFormat, UndefinedConversion
from .types import ColorSpace, WhitePoint, D65, D50

__all__ = [
    # core color types
    "ColorBase",
    "ColorLCH",
    "ColorLUV",
    "ColorXYZ",
    "ColorLinearRGB",
    "ColorSRGB",
    "ColorRGB",
    "LCH",
    "RGB",
    "color_convert",
    "convert_color",
    "get_color_class",

    # conversions
    "lch_to_luv",
    "luv_to_lch",
    "luv_to_xyz",
    "xyz_to_luv",
    "xyz_to_linear_rgb",
    "linear_rgb_to_xyz",
    "linear_rgb_to_srgb",
    "srgb_to_linear_rgb",
    "srgb_to_color",
    "color_to_srgb",
    "lch_to_color",
    "color_to_lch",
    "color_to_hex",
    "hex_to_color",
    "np_lch_to_color",
    "np_color_to_lch",
    "convert",
    "np_convert",

    # palettes
    "qualitative",
    "sequential",
    "diverging",
    "color_range",
    "Palette",

    # errors
    "PaletteError",
    "InvalidCount",
    "InvalidFormat",
    "UndefinedConversion",

    # configuration
    "ColorSpace",
    "WhitePoint",
    "D65",
    "D50",
]
