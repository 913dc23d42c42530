"""Cue point collection for previewing and scrubbing through timings."""

from __future__ import annotations

from dataclasses import dataclass

from .model import Entry, Timings
from .show import ShowConfig

_EDGE_ORDER = {"upcoming": 0, "start": 1, "end": 2}


@dataclass
class CuePoint:
    time_seconds: float
    label: str
    entry_index: int
    edge: str  # "upcoming", "start" or "end"


def _build_label(index: int, entry: Entry) -> str:
    text = entry.text.strip()
    return text or f"entry[{index}]"


def collect_cue_points(timings: Timings, config: ShowConfig | None = None) -> list[CuePoint]:
    """Collect the times at which a show's displays change for each entry.

    Every entry yields an ``upcoming`` point (when its preview may appear,
    never before 0), a ``start`` point and an ``end`` point. Points are
    sorted by time, upcoming before start before end.
    """
    config = config or ShowConfig()
    points: list[CuePoint] = []

    for i, entry in enumerate(timings):
        label = _build_label(i, entry)
        upcoming = max(0.0, entry.start - config.upcoming_threshold)
        points.append(CuePoint(upcoming, f"{label} (upcoming)", i, "upcoming"))
        points.append(CuePoint(entry.start, f"{label} (start)", i, "start"))
        points.append(CuePoint(entry.end, f"{label} (end)", i, "end"))

    points.sort(key=lambda p: (p.time_seconds, _EDGE_ORDER[p.edge]))
    return points
