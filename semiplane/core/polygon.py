"""Simple polygons as closed chains of segments, with half-plane clipping.

The boundary is stored as a tuple of segments where each segment ends where
the next one starts (cyclically). A polygon always holds at least 3
segments; operations that would break this either return ``None`` or fall
back to a minimal triangle.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .constants import EPS_SHORT_EDGE
from .errors import InvalidPolygonError, InvariantViolation
from .line import Line, PointLineRelation, SegmentRelation
from .logging_utils import get_logger
from .segment import Segment
from .vector import Point

__all__ = ['Polygon', 'polygon_signed_area']

logger = get_logger('semiplane.polygon')


class _CapOrder(Enum):
    # FIRST: the run of kept edges ends here; cap goes new point -> stashed point
    FIRST = 'first'
    # SECOND: a run of kept edges starts here; cap goes stashed point -> new point
    SECOND = 'second'


class _CutPairing:
    """Pairs successive cut points into cap segments along the clip line.

    Holds at most one pending point: the first cut point is stashed, the
    second one is combined with it into a new boundary segment.
    """
    __slots__ = ('pending',)

    def __init__(self) -> None:
        self.pending: Optional[Point] = None

    def touch(self, p: Point, order: _CapOrder) -> Optional[Segment]:
        if self.pending is None:
            self.pending = p
            return None
        p0, self.pending = self.pending, None
        if order is _CapOrder.FIRST:
            return Segment.from_points(p, p0)
        return Segment.from_points(p0, p)


def polygon_signed_area(points) -> float:
    """Return signed area of polygon (array-like of (x,y)); positive if CCW."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.shape[0] < 3:
        return 0.0
    x = arr[:, 0]; y = arr[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))


class Polygon:
    """Closed polygon boundary owning its segment tuple."""

    __slots__ = ('_segments',)

    def __init__(self, segments: Iterable[Segment]):
        segs = tuple(segments)
        if len(segs) < 3:
            raise InvalidPolygonError(f"polygon needs at least 3 segments, got {len(segs)}")
        self._segments: Tuple[Segment, ...] = segs

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> 'Polygon':
        pts = list(points)
        n = len(pts)
        if n < 3:
            raise InvalidPolygonError(f"polygon needs at least 3 points, got {n}")
        return cls(Segment.from_points(pts[i], pts[(i + 1) % n]) for i in range(n))

    @classmethod
    def from_array(cls, vertices) -> 'Polygon':
        """Build from an (N,2) array-like of vertex coordinates."""
        arr = np.asarray(vertices, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise InvalidPolygonError(f"vertices must be an (N,2) array, got shape {arr.shape}")
        return cls.from_points([Point(float(x), float(y)) for x, y in arr])

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self._segments

    def __len__(self) -> int:
        return len(self._segments)

    def points(self) -> Iterator[Point]:
        """Vertices in boundary order; each call starts a fresh pass."""
        return (s.p for s in self._segments)

    def __iter__(self) -> Iterator[Point]:
        return self.points()

    def __repr__(self) -> str:
        pts = ', '.join(f"({p.x:g}, {p.y:g})" for p in self.points())
        return f"Polygon([{pts}])"

    def to_array(self) -> np.ndarray:
        return np.array([p.as_tuple() for p in self.points()], dtype=np.float64)

    def signed_area(self) -> float:
        return polygon_signed_area(self.to_array())

    def intersect_with_halfplane(self, line: Line, left_halfplane: bool) -> Optional['Polygon']:
        """Return the part of the polygon on one side of ``line``, or None if nothing is left.

        The walk always keeps the left side (``dot(n, q) < a``) of the line it
        works with; ``left_halfplane=True`` flips the line first so that the
        region ``dot(n, q) >= a`` of the caller's line is kept instead.
        """
        cut_line = line.flipped() if left_halfplane else line
        out: List[Segment] = []
        pairing = _CutPairing()

        def cap(p: Point, order: _CapOrder) -> None:
            seg = pairing.touch(p, order)
            if seg is not None:
                out.append(seg)

        for s in self._segments:
            p0, p1 = s.start, s.end
            rel = cut_line.segment_relation(s)
            kind = rel.kind
            if kind in (SegmentRelation.RIGHT, SegmentRelation.RIGHT_TOUCH, SegmentRelation.ON_LINE):
                continue
            if kind is SegmentRelation.LEFT:
                out.append(s)
            elif kind is SegmentRelation.LEFT_TOUCH:
                if cut_line.point_relation(p0) == PointLineRelation.ON_LINE:
                    cap(p0, _CapOrder.SECOND)
                    out.append(s)
                else:
                    out.append(s)
                    cap(p1, _CapOrder.FIRST)
            else:
                p = rel.point
                side = cut_line.point_relation(p0)
                if side == PointLineRelation.LEFT:
                    out.append(Segment.from_points(p0, p))
                    cap(p, _CapOrder.FIRST)
                elif side == PointLineRelation.RIGHT:
                    cap(p, _CapOrder.SECOND)
                    out.append(Segment.from_points(p, p1))
                else:
                    raise InvariantViolation(f"crossing segment {s} starts on the clip line")

        if pairing.pending is not None:
            logger.warning('half-plane clip left an unpaired cut point at (%g, %g)',
                           pairing.pending.x, pairing.pending.y)
        if not out:
            logger.debug('half-plane clip discarded all %d segments', len(self))
            return None
        if len(out) < 3:
            raise InvariantViolation(f"half-plane clip produced {len(out)} segments")
        logger.debug('half-plane clip: %d -> %d segments', len(self), len(out))
        return Polygon(out)

    def clip(self, line: Line, left_halfplane: bool) -> bool:
        """Clip in place. Returns False (polygon untouched) when nothing would remain."""
        clipped = self.intersect_with_halfplane(line, left_halfplane)
        if clipped is None:
            return False
        self._segments = clipped._segments
        return True

    def skip_short_edges(self, tol: float = EPS_SHORT_EDGE) -> 'Polygon':
        """Return a copy with edges shorter than ``tol`` folded into their predecessor.

        The first edge is always kept. If merging leaves 2 or fewer edges the
        result is the triangle spanned by the surviving edge's endpoints and
        the original vertex farthest from both of them.
        """
        segs = self._segments
        merged: List[Segment] = [segs[0]]
        for s in segs[1:]:
            if s.length() < tol:
                last = merged[-1]
                merged[-1] = Segment(last.p, last.e.add(s.e))
            else:
                merged.append(s)

        if len(merged) >= 3:
            return Polygon(merged)

        p0 = merged[0].start
        p1 = merged[0].end
        best = segs[1].p
        best_dist = min(best.distance_to(p0), best.distance_to(p1))
        for s in segs[2:]:
            dist = min(s.p.distance_to(p0), s.p.distance_to(p1))
            if dist > best_dist:
                best, best_dist = s.p, dist
        logger.info('short-edge merge collapsed %d edges to %d; rebuilding triangle through (%g, %g)',
                    len(segs), len(merged), best.x, best.y)
        return Polygon.from_points([p0, best, p1])
