"""Line states: what a single display is currently showing."""

from __future__ import annotations

import enum
import math
from typing import TYPE_CHECKING, ClassVar

from .model import Entry, Fragment

if TYPE_CHECKING:
    from .display import Display


class LineKind(enum.Enum):
    LIVE = "live"
    UPCOMING = "upcoming"
    READY = "ready"
    FILLER = "filler"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    >>> round_half_up(2.5), round(2.5)
    (3, 2)
    """
    return math.floor(value + 0.5)


class Line:
    """Base for the state held by one occupied display.

    ``end`` is the time at which the show expires the line. ``expire``
    returns the line that takes over the display, or None to free it.
    """

    kind: ClassVar[LineKind]

    def __init__(self, display: Display, end: float) -> None:
        self.display = display
        self.end = end
        self.display.kind = self.kind

    def update(self, elapsed: float) -> bool:
        return True

    def expire(self, elapsed: float) -> Line | None:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(end={self.end!r})"


class LiveLine(Line):
    """The entry being sung, with per-fragment highlight progress."""

    kind = LineKind.LIVE

    def __init__(self, display: Display, elapsed: float, entry: Entry) -> None:
        super().__init__(display, entry.end)
        self.entry = entry
        self.passed: list[Fragment] = []
        self.current: Fragment | None = None
        self.upcoming: list[Fragment] = []
        self.percent = 0.0
        self.update(elapsed)

    def _fragment_end(self, index: int) -> float:
        fragments = self.entry.fragments
        fragment = fragments[index]
        if fragment.end is not None:
            return fragment.end
        if index + 1 < len(fragments):
            return fragments[index + 1].start
        return self.entry.end - self.entry.start

    def update(self, elapsed: float) -> bool:
        passed: list[Fragment] = []
        current: Fragment | None = None
        upcoming: list[Fragment] = []
        percent = 0.0

        for i, fragment in enumerate(self.entry.fragments):
            fragment_start = self.entry.start + fragment.start
            if fragment_start <= elapsed:
                if current is not None:
                    passed.append(current)
                current = fragment
                span = self._fragment_end(i) - fragment.start
                if span <= 0:
                    percent = 100.0
                else:
                    percent = (elapsed - fragment_start) / span * 100
                    percent = max(0.0, min(100.0, percent))
            else:
                upcoming.append(fragment)

        self.passed, self.current, self.upcoming, self.percent = passed, current, upcoming, percent
        self.display.render_karaoke(passed, current, upcoming, percent)
        return True


class UpcomingLine(Line):
    """Preview of an entry; hands the display over to a LiveLine at its start."""

    kind = LineKind.UPCOMING

    def __init__(self, display: Display, elapsed: float, entry: Entry) -> None:
        super().__init__(display, entry.start)
        self.entry = entry
        self.display.render_text(entry.text)

    def expire(self, elapsed: float) -> Line | None:
        return LiveLine(self.display, elapsed, self.entry)


class ReadyLine(Line):
    """Countdown ("Ready... 3... 2... 1...") before a line that follows a pause."""

    kind = LineKind.READY

    def __init__(self, display: Display, elapsed: float, countdown: float) -> None:
        super().__init__(display, elapsed + countdown)
        self.start = elapsed
        self.countdown = round_half_up(countdown + 1)
        self.display.render_ready_countdown(self.countdown)

    def update(self, elapsed: float) -> bool:
        self.countdown = round_half_up(self.end - elapsed + 1)
        self.display.render_ready_countdown(self.countdown)
        return True


class FillerLine(Line):
    """Instrumental notice for a gap with no lyrics coming up soon."""

    kind = LineKind.FILLER

    def __init__(self, display: Display, elapsed: float, end: float) -> None:
        super().__init__(display, end)
        self.start = elapsed
        self.display.render_instrumental()
