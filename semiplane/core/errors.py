"""Exception types raised by the geometry kernel."""
from __future__ import annotations


class GeometryError(Exception):
    """Base class for all semiplane errors."""


class InvalidPolygonError(GeometryError, ValueError):
    """A polygon was built from fewer than 3 points/segments or a malformed array."""


class DegenerateVectorError(GeometryError, ValueError):
    """A unit direction was requested for a (near) zero-length vector."""


class InvariantViolation(GeometryError, RuntimeError):
    """An internal consistency check failed. Indicates a logic defect, not bad input."""


__all__ = [
    'GeometryError',
    'InvalidPolygonError',
    'DegenerateVectorError',
    'InvariantViolation',
]
