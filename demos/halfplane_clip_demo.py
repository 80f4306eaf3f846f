#!/usr/bin/env python3
"""
Small demo: clip a square by a sequence of half-planes and save before/after plots.

Each --cut takes "x0,y0,x1,y1" (a line through two points); prefix it with
"!" to keep the other side, e.g. --cut '!70,0,70,1'. Use the --cut=... form when
the first coordinate is negative.
"""
from __future__ import annotations

import argparse

from semiplane.core.clipping import HalfPlane, clip_polygon
from semiplane.core.config import ClipConfig
from semiplane.core.logging_utils import configure_logging, get_logger
from semiplane.core.polygon import Polygon
from semiplane.core.stats import ClipStats, format_stats_table
from semiplane.core.vector import Point
from semiplane.core.visualization import plot_clip


def square(half_size: float):
    h = float(half_size)
    return Polygon.from_points([Point(-h, -h), Point(h, -h), Point(h, h), Point(-h, h)])


def parse_cut(text: str) -> HalfPlane:
    left = True
    if text.startswith('!'):
        left, text = False, text[1:]
    parts = [float(v) for v in text.split(',')]
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f'expected x0,y0,x1,y1, got {text!r}')
    x0, y0, x1, y1 = parts
    return HalfPlane.through(Point(x0, y0), Point(x1, y1), left=left)


def main():
    ap = argparse.ArgumentParser(description='Half-plane clipping demo: before/after plot')
    ap.add_argument('--size', type=float, default=300.0, help='Half side length of the input square')
    ap.add_argument('--cut', type=parse_cut, action='append', default=None,
                    help='Cut line "x0,y0,x1,y1"; prefix with ! to keep the other side (repeatable)')
    ap.add_argument('--merge-short-edges', action='store_true', help='Fold short edges after every cut')
    ap.add_argument('--short-edge-tol', type=float, default=None)
    ap.add_argument('--out', type=str, default='halfplane_clip_demo.png')
    ap.add_argument('--log-level', type=str, default='INFO')
    args = ap.parse_args()

    configure_logging(args.log_level)
    logger = get_logger('semiplane.demo')

    cuts = args.cut or [parse_cut('-10,1,-10,0'), parse_cut('!70,1,70,0')]
    cfg = ClipConfig(merge_short_edges=args.merge_short_edges, verbose=True)
    if args.short_edge_tol is not None:
        cfg.short_edge_tol = args.short_edge_tol

    before = square(args.size)
    stats = ClipStats()
    after = clip_polygon(before, cuts, config=cfg, stats=stats)
    if after is None:
        logger.info('everything was clipped away')
    else:
        logger.info('result: %r (area %.3f)', after, after.signed_area())
    plot_clip(before, after, cuts, outname=args.out, title=f'{len(cuts)} half-plane cut(s)')
    print(format_stats_table({'square': stats.to_dict()}))


if __name__ == '__main__':  # pragma: no cover
    main()
