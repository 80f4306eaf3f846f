"""Clip statistics data structures and presentation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ClipStats:
    attempts: int = 0
    clipped: int = 0
    unchanged: int = 0
    emptied: int = 0
    skipped: int = 0
    # Short-edge cleanup
    short_edge_merges: int = 0
    edges_removed: int = 0
    fallback_used: int = 0
    # Timing (seconds)
    time_total: float = 0.0
    time_max: float = 0.0
    time_min: float = 0.0  # 0 means uninitialized

    def record_time(self, dt: float) -> None:
        self.time_total += dt
        self.time_max = max(self.time_max, dt)
        self.time_min = dt if self.time_min == 0.0 else min(self.time_min, dt)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'attempts': self.attempts,
            'clipped': self.clipped,
            'unchanged': self.unchanged,
            'emptied': self.emptied,
            'skipped': self.skipped,
            'short_edge_merges': self.short_edge_merges,
            'edges_removed': self.edges_removed,
            'fallback_used': self.fallback_used,
            'clip_rate': (self.clipped / self.attempts) if self.attempts else 0.0,
            'empty_rate': (self.emptied / self.attempts) if self.attempts else 0.0,
            'time_total': self.time_total,
            'time_max': self.time_max,
            'time_min': self.time_min,
            'time_avg': (self.time_total / self.attempts) if self.attempts else 0.0,
        }


def format_stats_table(stats_dict) -> str:
    """Return a human readable multi-line table summarizing clip stats.

    ``stats_dict`` maps a label (e.g. a polygon name) to ``ClipStats.to_dict()``.
    """
    if not stats_dict:
        return "<no stats>"
    header = ["label", "attempts", "clipped", "same", "empty", "merges", "fallback", "avg_ms", "max_ms"]
    rows = []
    for label in sorted(stats_dict.keys()):
        s = stats_dict[label]
        rows.append([
            str(label), str(s['attempts']), str(s['clipped']), str(s['unchanged']), str(s['emptied']),
            str(s['short_edge_merges']), str(s['fallback_used']),
            f"{s['time_avg'] * 1000.0:8.3f}", f"{s['time_max'] * 1000.0:8.3f}",
        ])
    col_w = [len(h) for h in header]
    for r in rows:
        for i, v in enumerate(r):
            if len(v) > col_w[i]: col_w[i] = len(v)
    def fmt(r):
        return " ".join(r[i].rjust(col_w[i]) for i in range(len(r)))
    lines = [fmt(header), "-" * (sum(col_w) + len(col_w) - 1)] + [fmt(r) for r in rows]
    return "\n".join(lines)


__all__ = ["ClipStats", "format_stats_table"]
