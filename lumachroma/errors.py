"""Exception types raised by lumachroma.

All of them derive from :class:`PaletteError`, itself a ``ValueError``, so
callers that already guard conversions with ``except ValueError`` keep working.
"""


class PaletteError(ValueError):
    """Base class for lumachroma errors."""


class InvalidCount(PaletteError):
    """A range or palette was requested with fewer than two samples."""

    def __init__(self, n):
        self.n = n
        super().__init__(f"Cannot generate a range with {n!r} element(s), at least 2 are required.")


class InvalidFormat(PaletteError):
    """A text color code could not be decoded."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"{text!r} is not a valid color code, expected #RRGGBB.")


class UndefinedConversion(PaletteError):
    """No conversion path exists between the requested color spaces."""

    def __init__(self, from_space, to_space=None):
        self.from_space = from_space
        self.to_space = to_space
        if to_space is None:
            msg = f"Unknown color space: {from_space!r}"
        else:
            msg = f"Conversion from {from_space!r} to {to_space!r} is not defined"
        super().__init__(msg)
