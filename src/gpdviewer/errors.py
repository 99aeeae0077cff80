"""
Error Taxonomy
==============
All errors raised by the viewer derive from ``GPDViewerError`` so the GUI can
report them uniformly.

Startup errors (``LoadError``, ``ShapeMismatchError``) are fatal: no scene is
built from partial data. Lookup errors during a re-slice are programming
contract violations and abort that slice only.
"""


class GPDViewerError(Exception):
    """Base class for every error raised by gpdviewer."""


class LoadError(GPDViewerError):
    """A sample file could not be fetched or decoded."""

    def __init__(self, locator: str, reason: str) -> None:
        super().__init__(f"Failed to load '{locator}': {reason}")
        self.locator = locator
        self.reason = reason


class ShapeMismatchError(GPDViewerError):
    """Flat sample count does not match the declared shape."""


class IndexOutOfRangeError(GPDViewerError, IndexError):
    """A multi-index or axis index lies outside its axis bounds."""


class ValueNotFoundError(GPDViewerError, ValueError):
    """A selected axis value has no exact match in its axis array."""

    def __init__(self, axis: str, value: float) -> None:
        super().__init__(f"Value {value!r} is not a sample of axis '{axis}'")
        self.axis = axis
        self.value = value


class EmptyArrayError(GPDViewerError, ValueError):
    """An extent was requested for an array without usable samples."""


class UnknownPaletteError(GPDViewerError, ValueError):
    """The requested colormap is not one of the supported palettes."""
