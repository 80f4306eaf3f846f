"""Central numerical tolerances.

Every geometric predicate in the package compares against the same ``EPS``
so that point classification, segment/line intersection and clipping agree
with each other near the boundary.
"""
from __future__ import annotations

# Geometry tolerances
EPS: float = 1e-8               # shared comparison band for all predicates
EPS_SHORT_EDGE: float = 1e-6    # default length below which an edge is merged away

__all__ = [
    'EPS',
    'EPS_SHORT_EDGE',
]
