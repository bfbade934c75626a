"""
lumachroma Palettes
===================

Ordered color palettes for data visualization, after the R colorspace package:

- ``qualitative``: rainbow_hcl (and ggplot2's hue palette with ``basic``)
- ``sequential``: sequential_hcl, heat_hcl, terrain_hcl
- ``diverging``: diverge_hcl

Every family has a ``full`` entry point taking all parameters plus presets
taking only the number of colors. The full specification is often needed to
get the best result for a given chart.

>>> from lumachroma.palettes import qualitative, diverging
>>> qualitative.basic(4).hex_codes()
>>> diverging.for_hues((130, 43), 9)
"""

from . import qualitative, sequential, diverging
from .linspace import color_range, check_count
from .palette import Palette, build_palette

__all__ = [
    "qualitative",
    "sequential",
    "diverging",
    "color_range",
    "check_count",
    "Palette",
    "build_palette",
]
