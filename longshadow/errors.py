"""Exception hierarchy for shadow construction."""

from __future__ import annotations


class LongShadowError(Exception):
    """Root of all errors raised by longshadow."""


class ShadowStateError(LongShadowError, RuntimeError):
    """An operation was called in a state of the shadow lifecycle that does not allow it."""


class DisposedShapeError(LongShadowError, RuntimeError):
    """A shape was used after it had been removed."""


class GeometryError(LongShadowError, ValueError):
    """The geometry engine produced or received something it cannot work with."""


class SvgParseError(GeometryError):
    """SVG input held no usable shape."""
