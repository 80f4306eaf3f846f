"""Configuration objects for multi half-plane clipping."""
from __future__ import annotations

from dataclasses import dataclass

from .constants import EPS_SHORT_EDGE


@dataclass
class ClipConfig:
    """Options for :func:`semiplane.core.clipping.clip_polygon`.

    Attributes
    ----------
    merge_short_edges : bool
        Run the short-edge cleanup after every successful clip.
    short_edge_tol : float
        Edges shorter than this are folded into their predecessor.
    verbose : bool
        Log a one-line summary per half-plane at INFO instead of DEBUG.
    """
    merge_short_edges: bool = False
    short_edge_tol: float = EPS_SHORT_EDGE
    verbose: bool = False


__all__ = ['ClipConfig']
