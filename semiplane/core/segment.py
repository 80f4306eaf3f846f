"""Finite line segments and their intersection queries.

A segment is stored as a base point ``p`` and a displacement ``e``; it covers
the points ``p + t*e`` for ``t`` in ``[0, 1]``.

Intersection queries return one of three things:

- ``None`` when the two objects do not meet,
- a :class:`Point` for a single crossing/touch location,
- a :class:`Segment` when the objects overlap along a stretch (collinear case).

Parameters that land within ``EPS`` of a segment end are snapped to the
stored endpoint so callers get the exact vertex back instead of a value
polluted by rounding.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple, Union

from .constants import EPS
from .vector import Point, Vector

if TYPE_CHECKING:  # pragma: no cover
    from .line import Line

__all__ = ['Segment', 'SegmentIntersection']

SegmentIntersection = Optional[Union[Point, 'Segment']]


@dataclass(frozen=True)
class Segment:
    p: Point
    e: Vector

    @classmethod
    def from_points(cls, p0: Point, p1: Point) -> 'Segment':
        return cls(p0, p1.sub(p0))

    @property
    def start(self) -> Point:
        return self.p

    @property
    def end(self) -> Point:
        return self.p.add(self.e)

    def length(self) -> float:
        return self.e.length()

    def point_at(self, t: float) -> Point:
        return self.p.add(self.e.scale(t))

    def reversed(self) -> 'Segment':
        return Segment.from_points(self.end, self.p)

    def bbox(self) -> Tuple[float, float, float, float]:
        """Return (minx, maxx, miny, maxy)."""
        p0, p1 = self.p, self.end
        return (min(p0.x, p1.x), max(p0.x, p1.x), min(p0.y, p1.y), max(p0.y, p1.y))

    def distance_to(self, q: Point) -> float:
        """Distance from ``q`` to the nearest point of the segment."""
        ee = self.e.dot(self.e)
        if ee == 0.0:
            return self.p.distance_to(q)
        t = q.sub(self.p).dot(self.e) / ee
        t = min(1.0, max(0.0, t))
        return self.point_at(t).distance_to(q)

    def intersect_segment(self, o: 'Segment') -> SegmentIntersection:
        """Intersect with another finite segment.

        Collinear overlapping segments produce the overlapping piece, oriented
        along ``self``; an overlap that shrinks to one location is reported as
        a Point. Raises DegenerateVectorError for a collinear query where
        ``self`` has zero length.
        """
        p00, p01 = self.p, self.end
        p10 = o.p
        minx0, maxx0, miny0, maxy0 = self.bbox()
        minx1, maxx1, miny1, maxy1 = o.bbox()
        if (maxx0 < minx1 - EPS or minx0 > maxx1 + EPS
                or maxy0 < miny1 - EPS or miny0 > maxy1 + EPS):
            return None

        # Solve  u * self.e - v * o.e = o.p - self.p  for (u, v)
        w = p10.sub(p00)
        d = -self.e.x * o.e.y + self.e.y * o.e.x
        if abs(d) < EPS:
            if abs(self.e.cross(w)) > EPS:
                return None
            return self._collinear_overlap(o)

        u = (-w.x * o.e.y + w.y * o.e.x) / d
        v = (self.e.x * w.y - self.e.y * w.x) / d
        if u < -EPS or u > 1.0 + EPS or v < -EPS or v > 1.0 + EPS:
            return None
        if u < EPS:
            return p00
        if u > 1.0 - EPS:
            return p01
        return self.point_at(u)

    def _collinear_overlap(self, o: 'Segment') -> SegmentIntersection:
        # Positions of o's endpoints measured along self, self spans [0, length]
        direction = self.e.unit()
        length = self.length()
        p00, p01 = self.p, self.end
        q0, q1 = o.p, o.end
        ends = sorted(
            ((q0.sub(p00).dot(direction), q0), (q1.sub(p00).dot(direction), q1)),
            key=lambda item: item[0],
        )
        (near_pos, near_pt), (far_pos, far_pt) = ends

        if near_pos > EPS:
            lo_pos, lo_pt = near_pos, near_pt
        else:
            lo_pos, lo_pt = 0.0, p00
        if far_pos < length - EPS:
            hi_pos, hi_pt = far_pos, far_pt
        else:
            hi_pos, hi_pt = length, p01

        if hi_pos < lo_pos - EPS:
            return None
        if hi_pos - lo_pos <= EPS:
            # touching either end of self reports self's own endpoint
            return p01 if hi_pt is p01 else lo_pt
        if lo_pt is p00 and hi_pt is p01:
            return self
        if lo_pt is q0 and hi_pt is q1:
            return o
        return Segment.from_points(lo_pt, hi_pt)

    def intersect_line(self, line: 'Line') -> SegmentIntersection:
        """Intersect with an infinite line given in normal form.

        Solves ``dot(n, p + t*e) = a`` for ``t``. A segment lying on the line
        is returned whole; a parallel segment off the line gives None.
        """
        p_offset = line.a - line.normal.dot(self.p.to_vec())
        denom = self.e.dot(line.normal)
        if abs(denom) < EPS:
            if abs(p_offset) < EPS:
                return self
            return None
        t = p_offset / denom
        if t < -EPS or t > 1.0 + EPS:
            return None
        if t < EPS:
            return self.p
        if t > 1.0 - EPS:
            return self.end
        return self.point_at(t)
