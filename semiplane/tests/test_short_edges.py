"""Degenerate-edge cleanup (skip_short_edges) including the triangle fallback."""
import pytest

from semiplane.core.constants import EPS_SHORT_EDGE
from semiplane.core.polygon import Polygon
from semiplane.core.vector import Point


def pts(p):
    return [q.as_tuple() for q in p.points()]


def test_no_short_edges_is_identity():
    p = Polygon.from_points([Point(0., 0.), Point(1., 0.), Point(1., 1.), Point(0., 1.)])
    out = p.skip_short_edges(1e-3)
    assert out is not p
    assert out.segments == p.segments


def test_short_edge_folded_into_predecessor():
    p = Polygon.from_points([
        Point(0., 0.), Point(1., 0.), Point(1., 1e-7), Point(1., 1.), Point(0., 1.),
    ])
    out = p.skip_short_edges(1e-6)
    assert len(out) == 4
    assert pts(out) == [(0., 0.), (1., 1e-7), (1., 1.), (0., 1.)]
    # predecessor now ends where the dropped edge ended
    assert out.segments[0].end.y == pytest.approx(1e-7)
    assert out.segments[0].end.x == 1.0


def test_consecutive_short_edges_accumulate():
    p = Polygon.from_points([
        Point(0., 0.), Point(2., 0.), Point(2., 3e-7), Point(2., 6e-7), Point(0., 2.),
    ])
    out = p.skip_short_edges(1e-6)
    assert len(out) == 3
    assert out.segments[0].end.y == pytest.approx(6e-7)
    assert out.segments[1].start == Point(2., 6e-7)


def test_first_edge_is_always_kept():
    p = Polygon.from_points([Point(0., 0.), Point(1e-9, 0.), Point(1., 0.), Point(0.5, 1.)])
    out = p.skip_short_edges(1e-6)
    assert len(out) == 4


def test_default_tolerance():
    p = Polygon.from_points([
        Point(0., 0.), Point(1., 0.), Point(1., 0.5 * EPS_SHORT_EDGE), Point(1., 1.), Point(0., 1.),
    ])
    assert len(p.skip_short_edges()) == 4


def test_collapse_falls_back_to_triangle():
    a, b, c, d = Point(0., 0.), Point(3., 0.), Point(3., 4e-7), Point(3. - 4e-7, 4e-7)
    p = Polygon.from_points([a, b, c, d])
    out = p.skip_short_edges(1e-6)
    assert len(out) == 3
    # rebuilt from the surviving edge's endpoints (a, d) and the vertex farthest from both (b)
    q0, q1, q2 = out.points()
    assert (q0, q1) == (a, b)
    assert q2.distance_to(d) < 1e-12


def test_collapse_triangle_keeps_three_edges():
    a, b, c = Point(0., 0.), Point(1., 0.), Point(1., 1e-7)
    out = Polygon.from_points([a, b, c]).skip_short_edges(1e-6)
    assert len(out) == 3
    assert list(out.points()) == [a, b, c]


def test_result_is_a_new_polygon():
    p = Polygon.from_points([Point(0., 0.), Point(1., 0.), Point(1., 1e-7), Point(0., 1.)])
    before = p.segments
    p.skip_short_edges(1e-6)
    assert p.segments is before
