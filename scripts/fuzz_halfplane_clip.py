#!/usr/bin/env python3
"""Fuzz half-plane clipping of random convex polygons and save failing cases.

For each seed a convex polygon (hull of random points) is clipped by a random
line on both sides. A case fails when
  - either side raises,
  - the two pieces do not add up to the input area,
  - clipping the same side twice changes the area, or
  - clipping left and then right of the same line leaves a non-degenerate piece.
Failures are written to ./diagnostics/clipfail_seed_<seed>.npz.
"""
import argparse
import os

import numpy as np
from scipy.spatial import ConvexHull

from semiplane.core.errors import GeometryError
from semiplane.core.line import Line
from semiplane.core.logging_utils import configure_logging, get_logger
from semiplane.core.polygon import Polygon
from semiplane.core.vector import Point, Vector

logger = get_logger('semiplane.fuzz')


def random_convex_polygon(rng, npts=12, scale=10.0):
    pts = rng.uniform(-scale, scale, size=(npts, 2))
    hull = ConvexHull(pts)
    return Polygon.from_array(pts[hull.vertices])


def random_line(rng, scale=10.0):
    angle = rng.uniform(0.0, 2.0 * np.pi)
    n = Vector(float(np.cos(angle)), float(np.sin(angle)))
    return Line(n, float(rng.uniform(-scale, scale)))


def area_or_zero(poly):
    return 0.0 if poly is None else abs(poly.signed_area())


def check_case(poly, line, tol):
    """Return a list of problem descriptions (empty when the case passes)."""
    problems = []
    try:
        left = poly.intersect_with_halfplane(line, True)
        right = poly.intersect_with_halfplane(line, False)
    except GeometryError as exc:
        return [f'clip raised {type(exc).__name__}: {exc}']
    total = abs(poly.signed_area())
    if abs(area_or_zero(left) + area_or_zero(right) - total) > tol * max(1.0, total):
        problems.append('pieces do not add up to the input area')
    if left is not None:
        again = left.intersect_with_halfplane(line, True)
        if abs(area_or_zero(again) - area_or_zero(left)) > tol * max(1.0, total):
            problems.append('second clip on the same side changed the area')
        other = left.intersect_with_halfplane(line, False)
        if area_or_zero(other) > tol * max(1.0, total):
            problems.append('left-then-right clip left a non-degenerate piece')
    return problems


def run_fuzz(max_seeds=1000, max_failures=20, npts=12, tol=1e-6, outdir='diagnostics'):
    os.makedirs(outdir, exist_ok=True)
    found = 0
    for seed in range(max_seeds):
        rng = np.random.default_rng(seed)
        poly = random_convex_polygon(rng, npts=npts)
        line = random_line(rng)
        problems = check_case(poly, line, tol)
        if problems:
            fname = os.path.join(outdir, f'clipfail_seed_{seed}.npz')
            logger.warning('[FOUND] seed=%d %s -> dumping %s', seed, '; '.join(problems), fname)
            np.savez(fname,
                     seed=seed,
                     vertices=poly.to_array(),
                     normal=np.array(line.normal.as_tuple()),
                     offset=line.a,
                     problems=np.array(problems, dtype=object))
            found += 1
            if found >= max_failures:
                logger.warning('Reached max_failures=%d; stopping fuzz.', max_failures)
                break
        if seed % 100 == 0 and seed > 0:
            logger.info('Checked %d seeds, found %d failures so far...', seed, found)
    logger.info('Fuzz finished: max_seeds=%d, failures=%d', max_seeds, found)
    return found


def main():
    ap = argparse.ArgumentParser(description='Fuzz half-plane clipping on random convex polygons')
    ap.add_argument('--seeds', type=int, default=1000)
    ap.add_argument('--max-failures', type=int, default=20)
    ap.add_argument('--npts', type=int, default=12)
    ap.add_argument('--outdir', type=str, default='diagnostics')
    ap.add_argument('--log-level', type=str, default='INFO')
    args = ap.parse_args()
    configure_logging(args.log_level)
    run_fuzz(max_seeds=args.seeds, max_failures=args.max_failures, npts=args.npts, outdir=args.outdir)


if __name__ == '__main__':  # pragma: no cover
    main()
