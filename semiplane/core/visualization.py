"""Plotting helpers for inspecting half-plane clips."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .line import Line
from .logging_utils import get_logger

logger = get_logger('semiplane.viz')


def _closed(arr):
    return np.vstack((arr, arr[:1]))


def _line_extent(line: Line, xlim, ylim):
    """Return two far-apart points on ``line`` covering the given view box."""
    n = np.array([line.normal.x, line.normal.y], dtype=float)
    nn = float(np.dot(n, n))
    base = n * (line.a / nn)
    d = np.array([-n[1], n[0]])
    span = max(xlim[1] - xlim[0], ylim[1] - ylim[0]) * 2.0 + 1.0
    d = d / np.sqrt(nn)
    return base - span * d, base + span * d


def plot_polygon(polygon, ax=None, color=(0.2, 0.3, 0.8), label=None, vertex_labels=False):
    """Draw a polygon boundary (closed polyline) and its vertices on ``ax``."""
    ax = ax or plt.gca()
    arr = polygon.to_array()
    closed = _closed(arr)
    ax.plot(closed[:, 0], closed[:, 1], color=color, linewidth=1.6, label=label)
    ax.scatter(arr[:, 0], arr[:, 1], s=10, color=color)
    if vertex_labels:
        for i, (x, y) in enumerate(arr):
            ax.annotate(str(i), (x, y), textcoords='offset points', xytext=(3, 3), fontsize=7)
    return ax


def plot_clip(before, after, halfplanes=(), outname='clip.png', title=None):
    """Plot a polygon before and after clipping, with the cutting lines.

    ``after`` may be None (everything discarded). ``halfplanes`` is an iterable
    of HalfPlane-like objects with a ``.line`` attribute.
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_polygon(before, ax=ax, color=(0.6, 0.6, 0.6), label='input')
    arr = before.to_array()
    xlim = (float(arr[:, 0].min()), float(arr[:, 0].max()))
    ylim = (float(arr[:, 1].min()), float(arr[:, 1].max()))
    for hp in halfplanes:
        a, b = _line_extent(hp.line, xlim, ylim)
        ax.plot([a[0], b[0]], [a[1], b[1]], linestyle='--', color=(0.85, 0.2, 0.2), linewidth=1.0)
    if after is not None:
        plot_polygon(after, ax=ax, color=(0.1, 0.6, 0.2), label='clipped', vertex_labels=True)
        fill = after.to_array()
        ax.fill(fill[:, 0], fill[:, 1], facecolor=(0.1, 0.6, 0.2), alpha=0.2, edgecolor='none')
    else:
        logger.info('plot_clip: clipped polygon is empty, drawing input only')
    pad_x = 0.1 * (xlim[1] - xlim[0] or 1.0)
    pad_y = 0.1 * (ylim[1] - ylim[0] or 1.0)
    ax.set_xlim(xlim[0] - pad_x, xlim[1] + pad_x)
    ax.set_ylim(ylim[0] - pad_y, ylim[1] + pad_y)
    ax.set_aspect('equal')
    ax.legend(loc='upper right', fontsize=8)
    if title:
        ax.set_title(title)
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    return outname


__all__ = ['plot_polygon', 'plot_clip']
