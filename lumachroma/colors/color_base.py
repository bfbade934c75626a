from __future__ import annotations
from typing import Any, Callable, ClassVar, Optional, Tuple, cast
from numpy import ndarray
import numpy as np

from ..types.color_types import ColorSpace, ColorValue, Scalar, is_cylindrical_space
from ..utils import get_dimension


class ColorBase:
    """
    Immutable 3-channel color in one space of the conversion chain.

    The value is either a single triple (stored as a tuple) or an array whose
    last dimension holds the channels (stored read-only).
    """
    __slots__ = ('_value', '_frozen')  # no per-instance dict → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    _type:      ClassVar[type] = float
    dtype:      ClassVar[type] = np.float64
    maxima:     ClassVar[Optional[Tuple[Scalar, Scalar, Scalar]]] = None  # None: unbounded channels
    # def color_convert(self: ColorBase, to_space: ColorSpace | str) -> ColorBase:
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue | ColorBase) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                value = value.convert(self.mode)
            value = value.value

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            arr = value
            if arr.shape[-1:] != (self.num_channels,):
                raise ValueError(
                    f"{self.mode.value} expects last dimension to be {self.num_channels}, "
                    f"got shape {arr.shape}"
                )
            if self._type is int and not np.issubdtype(arr.dtype, np.integer):
                raise TypeError(
                    f"{self.mode.value} expects an integer dtype, got {arr.dtype}"
                )
            if self.maxima is not None:
                arr = np.clip(arr, 0, np.array(self.maxima))
            arr = arr.astype(self.dtype)  # always a copy, the caller's array stays writable
            arr.flags.writeable = False
            value = arr

        # ---- Handle scalar/tuple input ----
        else:
            if get_dimension(value) != self.num_channels:
                raise ValueError(f"{self.mode.value} expects a {self.num_channels}-channel value, got {value!r}")
            value = tuple(self._type(v) for v in cast(Tuple[Any, ...], value))
            if self.maxima is not None:
                value = tuple(max(0, min(v, m)) for v, m in zip(value, self.maxima))

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_cylindrical_space(self.mode)

    def __iter__(self):
        if isinstance(self._value, ndarray):
            return iter(self._value[..., i] for i in range(self.num_channels))
        return iter(self._value)

    def __array__(self, dtype=None, copy=None) -> ndarray:
        arr = np.asarray(self._value, dtype=self.dtype)
        return arr if dtype is None else arr.astype(dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if other.mode != self.mode or other.is_array != self.is_array:
            return False
        if self.is_array:
            return bool(np.array_equal(self._value, other._value))
        return self._value == other._value

    def __hash__(self) -> int:
        if self.is_array:
            raise TypeError(f"unhashable array-valued {self.__class__.__name__}")
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        if self.is_array:
            return f"{self.__class__.__name__}(array{self.shape})"
        return f"{self.__class__.__name__}({self._value!r})"


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
