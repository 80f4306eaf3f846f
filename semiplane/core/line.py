"""Infinite lines in normal form and side classification.

A line is the set of points ``q`` with ``dot(n, q) == a``. Points with
``dot(n, q) < a`` are on its left, points with ``dot(n, q) > a`` on its
right; anything within ``EPS`` of ``a`` is on the line.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import EPS
from .errors import InvariantViolation
from .segment import Segment
from .vector import Point, Vector

__all__ = ['Line', 'PointLineRelation', 'SegmentRelation', 'SegmentLineRelation']


class PointLineRelation(Enum):
    LEFT = 'left'
    ON_LINE = 'on_line'
    RIGHT = 'right'


class SegmentRelation(Enum):
    LEFT = 'left'
    LEFT_TOUCH = 'left_touch'
    ON_LINE = 'on_line'
    INTERSECTS = 'intersects'
    RIGHT = 'right'
    RIGHT_TOUCH = 'right_touch'


@dataclass(frozen=True)
class SegmentLineRelation:
    """Relation of a segment to a line; ``point`` is set only for INTERSECTS."""
    kind: SegmentRelation
    point: Optional[Point] = None


_SAME_SIDE = {
    PointLineRelation.LEFT: SegmentRelation.LEFT,
    PointLineRelation.ON_LINE: SegmentRelation.ON_LINE,
    PointLineRelation.RIGHT: SegmentRelation.RIGHT,
}


@dataclass(frozen=True)
class Line:
    normal: Vector
    a: float

    @classmethod
    def from_points(cls, p0: Point, p1: Point) -> 'Line':
        """Line through p0 and p1 with normal perpendicular(p1 - p0)."""
        n = p1.sub(p0).perpendicular()
        return cls(n, n.dot(p0.to_vec()))

    def flipped(self) -> 'Line':
        """Same point set with left and right exchanged."""
        return Line(-self.normal, -self.a)

    def point_relation(self, p: Point) -> PointLineRelation:
        offset = self.normal.dot(p.to_vec())
        if offset < self.a - EPS:
            return PointLineRelation.LEFT
        if offset > self.a + EPS:
            return PointLineRelation.RIGHT
        return PointLineRelation.ON_LINE

    def segment_relation(self, s: Segment) -> SegmentLineRelation:
        r0 = self.point_relation(s.start)
        r1 = self.point_relation(s.end)
        if r0 == r1:
            return SegmentLineRelation(_SAME_SIDE[r0])
        if PointLineRelation.ON_LINE in (r0, r1):
            other = r1 if r0 == PointLineRelation.ON_LINE else r0
            if other == PointLineRelation.LEFT:
                return SegmentLineRelation(SegmentRelation.LEFT_TOUCH)
            return SegmentLineRelation(SegmentRelation.RIGHT_TOUCH)
        # Endpoints strictly on opposite sides: the crossing must be a single point
        hit = s.intersect_line(self)
        if not isinstance(hit, Point):
            raise InvariantViolation(
                f"segment {s} has endpoints on both sides of {self} but intersect_line gave {hit!r}")
        return SegmentLineRelation(SegmentRelation.INTERSECTS, hit)
