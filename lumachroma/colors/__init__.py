"""
lumachroma Color Classes
========================

Immutable value classes, one per representation of the conversion chain,
holding either a single triple or an array of colors.

Features
--------
- Immutable color instances (frozen after initialization, read-only arrays)
- Scalar colors (single triples) and array colors (batch conversion)
- Conversion between any two spaces with ``color.convert(space)``
- Device colors clamped to [0, 255] with hex encoding and decoding

Usage
-----
>>> from lumachroma.colors import ColorLCH, ColorRGB
>>>
>>> lch = ColorLCH((65.0, 100.0, 15.0))
>>> rgb = lch.convert("rgb")
>>> rgb.to_hex()
>>> ColorRGB.from_hex("#F8766D").convert("lch")

Color Classes
-------------
    - ColorLCH: CIE LCH(uv)
    - ColorLUV: CIE LUV
    - ColorXYZ: CIE XYZ
    - ColorLinearRGB: linear-light RGB
    - ColorSRGB: gamma-encoded sRGB floats
    - ColorRGB: 8-bit device RGB
"""

from .color_base import ColorBase
from .perceptual import ColorLCH, ColorLUV, ColorXYZ
from .rgb import ColorLinearRGB, ColorSRGB, ColorRGB
from .color import color_convert, convert_color, get_color_class, unified_space_to_class


__all__ = [
    'ColorBase',
    'ColorLCH',
    'ColorLUV',
    'ColorXYZ',
    'ColorLinearRGB',
    'ColorSRGB',
    'ColorRGB',
    'color_convert',
    'convert_color',
    'get_color_class',
    'unified_space_to_class',
]
