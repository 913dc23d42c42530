"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from lyricshow import LineKind, TextDisplayEngine, Timings


@dataclass
class RecordingDisplay:
    """Display that records every call made to it."""

    kind: LineKind | None = None
    calls: list[tuple] = field(default_factory=list)

    def clear(self) -> None:
        self.calls.append(("clear",))

    def render_text(self, text: str) -> None:
        self.calls.append(("text", text))

    def render_ready_countdown(self, countdown: int) -> None:
        self.calls.append(("ready", countdown))

    def render_instrumental(self) -> None:
        self.calls.append(("instrumental",))

    def render_karaoke(self, passed, current, upcoming, percent) -> None:
        self.calls.append((
            "karaoke",
            [f.text for f in passed],
            current.text if current is not None else None,
            [f.text for f in upcoming],
            percent,
        ))

    @property
    def last(self) -> tuple | None:
        return self.calls[-1] if self.calls else None


class RecordingEngine:

    def __init__(self, num_lines: int) -> None:
        self.displays = [RecordingDisplay() for _ in range(num_lines)]

    def get_display(self, index: int) -> RecordingDisplay:
        return self.displays[index]


def kinds(show) -> list[LineKind | None]:
    return [line.kind if line is not None else None for line in show.slots]


HI_THERE = [(10, 15, [(0, "Hi "), (2, "there")])]

# Two lines separated by a gap longer than the default upcoming threshold
WITH_GAP = [
    (0, 2, [(0, "One")]),
    (12, 14, [(0, "Two")]),
]

SONG = [
    (1, 4, [(0, "Twin"), (0.5, "kle "), (1, "twin"), (1.5, "kle")]),
    (4.2, 7, [(0, "lit"), (0.5, "tle "), (1, "star")]),
    (7.1, 10, [(0, "How "), (1, "I "), (1.5, "won"), (2, "der")]),
    (22, 25, [(0, "Up "), (1, "a"), (1.5, "bove")]),
    (25.3, 28, [(0, "the "), (1, "world")]),
]


@pytest.fixture
def hi_there() -> Timings:
    return Timings.from_simple(HI_THERE)


@pytest.fixture
def with_gap() -> Timings:
    return Timings.from_simple(WITH_GAP)


@pytest.fixture
def song() -> Timings:
    return Timings.from_simple(SONG)


@pytest.fixture
def text_engine() -> TextDisplayEngine:
    return TextDisplayEngine(2)
