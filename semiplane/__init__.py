"""Public package API for the semiplane 2D geometry kernel.

This facade provides a flat import surface on top of the internal
implementation package ``semiplane.core``. Plotting helpers depend on
matplotlib and are loaded lazily on first use.

Example
-------
    from semiplane import Point, Line, Polygon

    square = Polygon.from_points([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
    square.clip(Line.from_points(Point(0, 0.5), Point(0.5, 0.5)), True)
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("semiplane")
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import EPS, EPS_SHORT_EDGE
from .core.errors import (
    GeometryError, InvalidPolygonError, DegenerateVectorError, InvariantViolation,
)
from .core.vector import Point, Vector, ORIGIN
from .core.segment import Segment
from .core.line import Line, PointLineRelation, SegmentRelation, SegmentLineRelation
from .core.polygon import Polygon, polygon_signed_area
from .core.config import ClipConfig
from .core.stats import ClipStats, format_stats_table
from .core.clipping import HalfPlane, clip_polygon
from .core.logging_utils import configure_logging, get_logger


def _lazy_viz_attr(name):
    def _wrapper(*args, **kwargs):
        viz = _imp('semiplane.core.visualization')
        return getattr(viz, name)(*args, **kwargs)
    _wrapper.__name__ = name
    return _wrapper


plot_polygon = _lazy_viz_attr('plot_polygon')
plot_clip = _lazy_viz_attr('plot_clip')

__all__ = [
    '__version__',
    # tolerances
    'EPS', 'EPS_SHORT_EDGE',
    # errors
    'GeometryError', 'InvalidPolygonError', 'DegenerateVectorError', 'InvariantViolation',
    # value types
    'Point', 'Vector', 'ORIGIN', 'Segment', 'Line', 'Polygon',
    'PointLineRelation', 'SegmentRelation', 'SegmentLineRelation',
    'polygon_signed_area',
    # clipping driver
    'HalfPlane', 'clip_polygon', 'ClipConfig', 'ClipStats', 'format_stats_table',
    # logging / plotting
    'configure_logging', 'get_logger', 'plot_polygon', 'plot_clip',
]
