from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class WhitePoint:
    """
    Reference white in tristimulus coordinates, normalized to Y = 100.

    The u'v' chromaticity of the white is derived once on construction and
    is what the LUV <-> XYZ transforms actually consume.
    """
    x: float
    y: float
    z: float
    un: float = field(init=False, repr=False, compare=False)
    vn: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        denom = self.x + 15.0 * self.y + 3.0 * self.z
        if denom == 0:
            raise ValueError(f"Degenerate white point: {self.as_tuple()!r}")
        # frozen dataclass, bypass __setattr__ for the derived fields
        object.__setattr__(self, "un", 4.0 * self.x / denom)
        object.__setattr__(self, "vn", 9.0 * self.y / denom)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


# Illuminant D65, 2 degree standard observer
D65 = WhitePoint(95.047, 100.000, 108.883)
# Illuminant D50, 2 degree standard observer
D50 = WhitePoint(96.422, 100.000, 82.521)
