import numpy as np
from numpy import ndarray as NDArray

from ..errors import InvalidCount


def check_count(n) -> int:
    """Validate a sample count; a range needs at least two points to define a step."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 2:
        raise InvalidCount(n)
    return int(n)


def color_range(n: int, start: float, end: float) -> NDArray:
    """
    ``n`` evenly spaced values from ``start`` to ``end``, both included.

    The first and last elements are exactly ``start`` and ``end``.

    Raises:
        InvalidCount: if ``n < 2``
    """
    n = check_count(n)
    return np.linspace(float(start), float(end), n, dtype=float)
