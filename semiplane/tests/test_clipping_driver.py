import numpy as np
import pytest

from semiplane.core.clipping import HalfPlane, clip_polygon
from semiplane.core.config import ClipConfig
from semiplane.core.line import Line
from semiplane.core.polygon import Polygon
from semiplane.core.stats import ClipStats, format_stats_table
from semiplane.core.vector import Point, Vector


def big_square():
    return Polygon.from_points([Point(-300., -300.), Point(300., -300.), Point(300., 300.), Point(-300., 300.)])


def test_sequential_halfplanes():
    e = Vector(1., 0.)
    square = big_square()
    stats = ClipStats()
    out = clip_polygon(square, [HalfPlane(Line(e, -10.), True), HalfPlane(Line(e, 70.), False)], stats=stats)
    np.testing.assert_allclose(out.to_array(), [[-10., -300.], [70., -300.], [70., 300.], [-10., 300.]], atol=1e-5)
    # input polygon is not modified
    assert len(square) == 4
    assert square.to_array()[0].tolist() == [-300., -300.]
    assert stats.attempts == 2
    assert stats.clipped == 2
    assert stats.emptied == 0
    assert stats.time_total >= 0.0


def test_halfplane_through_points():
    hp = HalfPlane.through(Point(0., 0.5), Point(0.5, 0.5))
    assert hp.left is True
    out = clip_polygon(Polygon.from_points([Point(0., 0.), Point(1., 0.), Point(1., 1.), Point(0., 1.)]), [hp])
    assert out.signed_area() == pytest.approx(0.5)


def test_empty_result_skips_remaining():
    e = Vector(1., 0.)
    stats = ClipStats()
    planes = [HalfPlane(Line(e, 0.), True), HalfPlane(Line(e, 1000.), True), HalfPlane(Line(e, 5.), False)]
    assert clip_polygon(big_square(), planes, stats=stats) is None
    assert stats.attempts == 2
    assert stats.clipped == 1
    assert stats.emptied == 1
    assert stats.skipped == 1


def test_unchanged_counted():
    stats = ClipStats()
    out = clip_polygon(big_square(), [HalfPlane(Line(Vector(1., 0.), -1000.), True)], stats=stats)
    assert out is not None
    assert stats.unchanged == 1
    assert stats.clipped == 0


def test_merge_short_edges_after_clip():
    tri = Polygon.from_points([Point(0., 0.), Point(2., -1.), Point(2., 1.)])
    hp = HalfPlane(Line(Vector(1., 0.), 0.), True)

    raw = clip_polygon(tri, [hp])
    assert len(raw) == 4

    stats = ClipStats()
    merged = clip_polygon(tri, [hp], config=ClipConfig(merge_short_edges=True), stats=stats)
    assert len(merged) == 3
    assert stats.short_edge_merges == 1
    assert stats.edges_removed == 1
    assert stats.fallback_used == 0


def test_verbose_logs_at_info(caplog):
    import logging
    pkg = logging.getLogger('semiplane')
    pkg.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.INFO, logger='semiplane'):
            clip_polygon(big_square(), [HalfPlane(Line(Vector(1., 0.), 0.), True)], config=ClipConfig(verbose=True))
    finally:
        pkg.removeHandler(caplog.handler)
    assert any('half-plane 1/1' in r.getMessage() for r in caplog.records)


def test_stats_dict_and_table():
    stats = ClipStats()
    clip_polygon(big_square(), [HalfPlane(Line(Vector(0., 1.), 0.), False)], stats=stats)
    d = stats.to_dict()
    assert d['attempts'] == 1
    assert d['clip_rate'] == 1.0
    table = format_stats_table({'square': d})
    assert 'square' in table
    assert table.splitlines()[0].split()[0] == 'label'
    assert format_stats_table({}) == '<no stats>'
