"""Clip a polygon against a sequence of half-planes.

Each half-plane is applied with :meth:`Polygon.intersect_with_halfplane`;
the input polygon is never modified. Optionally the short-edge cleanup runs
after every clip so that slivers produced by cutting close to a vertex do
not accumulate.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable, Optional

from .config import ClipConfig
from .line import Line
from .logging_utils import get_logger
from .polygon import Polygon
from .stats import ClipStats
from .vector import Point

__all__ = ['HalfPlane', 'clip_polygon']

logger = get_logger('semiplane.clipping')


@dataclass(frozen=True)
class HalfPlane:
    """One side of a line; ``left`` has the same meaning as in Polygon.clip."""
    line: Line
    left: bool = True

    @classmethod
    def through(cls, p0: Point, p1: Point, left: bool = True) -> 'HalfPlane':
        return cls(Line.from_points(p0, p1), left)


def _merge_short_edges(polygon: Polygon, cfg: ClipConfig, stats: ClipStats) -> Polygon:
    segs = polygon.segments
    n_short = sum(1 for s in segs[1:] if s.length() < cfg.short_edge_tol)
    if n_short == 0:
        return polygon
    merged = polygon.skip_short_edges(cfg.short_edge_tol)
    stats.short_edge_merges += 1
    stats.edges_removed += len(segs) - len(merged)
    if len(segs) - n_short <= 2:
        stats.fallback_used += 1
    return merged


def clip_polygon(polygon: Polygon, halfplanes: Iterable[HalfPlane],
                 config: Optional[ClipConfig] = None,
                 stats: Optional[ClipStats] = None) -> Optional[Polygon]:
    """Intersect ``polygon`` with every half-plane in order.

    Returns the remaining polygon, or None as soon as a half-plane discards
    everything (half-planes after that one are counted as skipped).
    """
    cfg = config or ClipConfig()
    stats = stats if stats is not None else ClipStats()
    level = logging.INFO if cfg.verbose else logging.DEBUG
    current = polygon
    planes = list(halfplanes)
    for i, hp in enumerate(planes):
        stats.attempts += 1
        t0 = time.perf_counter()
        result = current.intersect_with_halfplane(hp.line, hp.left)
        if result is not None and cfg.merge_short_edges:
            result = _merge_short_edges(result, cfg, stats)
        stats.record_time(time.perf_counter() - t0)
        if result is None:
            stats.emptied += 1
            stats.skipped += len(planes) - i - 1
            logger.log(level, 'half-plane %d/%d emptied the polygon', i + 1, len(planes))
            return None
        if result.segments == current.segments:
            stats.unchanged += 1
        else:
            stats.clipped += 1
        logger.log(level, 'half-plane %d/%d: %d -> %d edges', i + 1, len(planes), len(current), len(result))
        current = result
    return current
