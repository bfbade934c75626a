from .color_types import (
    ColorSpace,
    Scalar,
    Triple,
    IntTriple,
    ColorElement,
    ColorValue,
    CONVERSION_CHAIN,
    element_to_array,
    is_cylindrical_space,
    parse_space,
)
from .white_point import WhitePoint, D65, D50

__all__ = [
    'ColorSpace',
    'Scalar',
    'Triple',
    'IntTriple',
    'ColorElement',
    'ColorValue',
    'CONVERSION_CHAIN',
    'element_to_array',
    'is_cylindrical_space',
    'parse_space',
    'WhitePoint',
    'D65',
    'D50',
]
