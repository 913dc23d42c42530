"""Scheduling of timed entries onto a fixed set of displays."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .display import Display, DisplayEngine
from .lines import FillerLine, Line, LineKind, LiveLine, ReadyLine, UpcomingLine
from .model import Entry, Timings

log = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a show is constructed with inconsistent settings."""


@dataclass(frozen=True)
class ShowConfig:
    """Tunable timing behaviour of a show. All thresholds are in seconds."""

    show_ready: bool = True
    show_instrumental: bool = True
    # How long before an entry starts its upcoming preview is shown
    upcoming_threshold: float = 5.0
    # Minimum pause after the previous line for a "Ready..." countdown. The
    # countdown is shown alongside the preview, so it cannot exceed
    # upcoming_threshold.
    ready_threshold: float = 2.0
    # Entries starting closer than this to the previous line's end are
    # previewed right away; 0 disables this
    anti_flicker_threshold: float = 0.5

    def __post_init__(self) -> None:
        if self.ready_threshold > self.upcoming_threshold:
            raise ConfigError(
                f"ready_threshold ({self.ready_threshold}) cannot be greater than "
                f"upcoming_threshold ({self.upcoming_threshold})"
            )


class Show:
    """Decides, on every render, what each of ``num_lines`` displays shows.

    Progress through the timings is cached between renders, so elapsed time
    may only move forward. After a seek backwards, call ``reset()`` before
    rendering again, or use ``seek()``, which resets and renders in accurate
    mode.
    """

    def __init__(
        self,
        timings: Timings | Sequence[Entry],
        display_engine: DisplayEngine,
        num_lines: int,
        config: ShowConfig | None = None,
    ) -> None:
        if num_lines < 1:
            raise ConfigError(f"A show needs at least one line, got {num_lines!r}")
        self._timings = timings if isinstance(timings, Timings) else Timings(timings)
        self._display_engine = display_engine
        self._num_lines = num_lines
        self.config = config or ShowConfig()

        self._slots: list[Line | None] = [None] * num_lines
        self._index = 0
        self._last_live_end = 0.0
        self._has_ready_line = False
        self._has_instrumental_line = False

        self.reset()

    @property
    def timings(self) -> Timings:
        return self._timings

    @property
    def num_lines(self) -> int:
        return self._num_lines

    @property
    def slots(self) -> tuple[Line | None, ...]:
        return tuple(self._slots)

    @property
    def cursor(self) -> int:
        """Index of the first entry not yet scheduled."""
        return self._index

    @property
    def last_live_end(self) -> float:
        """End of the latest entry shown (or previewed) as a live line."""
        return self._last_live_end

    @property
    def has_ready_line(self) -> bool:
        return self._has_ready_line

    @property
    def has_instrumental_line(self) -> bool:
        return self._has_instrumental_line

    def get_display(self, index: int) -> Display:
        if not 0 <= index < self._num_lines:
            raise IndexError(f"Line index {index} out of range (0..{self._num_lines - 1})")
        return self._display_engine.get_display(index)

    def reset(self) -> None:
        """Forget all progress and clear every display."""
        for i in range(self._num_lines):
            self._slots[i] = None
            self.get_display(i).clear()

        self._index = 0
        self._last_live_end = 0.0
        self._has_ready_line = False
        self._has_instrumental_line = False
        log.debug("Show reset (%d lines)", self._num_lines)

    def seek(self, elapsed: float) -> None:
        """Jump to *elapsed*, forwards or backwards."""
        self.reset()
        self.render(elapsed, accurate=True)

    def render(self, elapsed: float, accurate: bool = False) -> None:
        """Bring every display up to date for *elapsed* seconds.

        Meant to be called many times a second. Rendering the same time
        twice leaves the displays unchanged, except for a live line that
        started exactly at its entry's end: the second render expires it.
        In accurate mode, one extra pass per line is rendered a millisecond
        apart leading up to *elapsed*, for use after a scrubber moves.
        """
        if accurate:
            for i in range(self._num_lines, 0, -1):
                self.render(elapsed - i / 1000)

            self._last_live_end = 0.0
            for entry in self._timings:
                if entry.start < elapsed and entry.end > self._last_live_end:
                    self._last_live_end = entry.end
                    break

        free: list[int] = []
        to_clear: list[int] = []
        to_update: list[int] = []

        for i, line in enumerate(self._slots):
            if line is None:
                free.append(i)
            elif line.end <= elapsed:
                if line.kind is LineKind.READY:
                    self._has_ready_line = False
                elif line.kind is LineKind.FILLER:
                    self._has_instrumental_line = False

                replacement = line.expire(elapsed)
                log.debug("Line %d: %s expired at %.3fs", i, line.kind.value, elapsed)
                if replacement is not None:
                    self._slots[i] = replacement
                else:
                    free.append(i)
                    to_clear.append(i)
            else:
                to_update.append(i)

        refilled: set[int] = set()
        if free:
            self._schedule(elapsed, free, refilled)

        for i in to_clear:
            if i not in refilled:
                self._slots[i] = None
                self.get_display(i).clear()

        for i in to_update:
            self._slots[i].update(elapsed)

    def _schedule(self, elapsed: float, free: list[int], refilled: set[int]) -> None:
        """Fill free lines with entries starting at the cursor."""
        config = self.config
        timings = self._timings

        def take() -> int:
            index = free.pop(0)
            refilled.add(index)
            return index

        i = self._index
        while i < len(timings) and free:
            entry = timings[i]

            if entry.end < elapsed:
                # Over before it could be shown (e.g. first render after a seek)
                if i == self._index:
                    self._index = i + 1

            elif entry.start <= elapsed:
                index = take()
                self._slots[index] = LiveLine(self.get_display(index), elapsed, entry)
                self._last_live_end = entry.end
                self._index = i + 1
                log.debug("Line %d: live entry %d at %.3fs", index, i, elapsed)

            elif (entry.start - config.upcoming_threshold <= elapsed
                  or entry.start - self._last_live_end < config.anti_flicker_threshold):
                index = take()
                self._slots[index] = UpcomingLine(self.get_display(index), elapsed, entry)
                self._index = i + 1
                log.debug("Line %d: upcoming entry %d at %.3fs", index, i, elapsed)

                if (config.show_ready
                        and free
                        and not self._has_ready_line
                        and elapsed - self._last_live_end >= config.ready_threshold):
                    index = take()
                    self._slots[index] = ReadyLine(
                        self.get_display(index), elapsed, entry.start - elapsed
                    )
                    self._has_ready_line = True
                    log.debug("Line %d: ready countdown until %.3fs", index, entry.start)

                # The preview turns into the live line without coming back
                # here, so record its end now
                self._last_live_end = entry.end

            elif (config.show_instrumental
                  and len(free) == self._num_lines
                  and not self._has_instrumental_line):
                index = take()
                self._slots[index] = FillerLine(
                    self.get_display(index), elapsed, entry.start - config.upcoming_threshold
                )
                self._has_instrumental_line = True
                log.debug("Line %d: instrumental until %.3fs", index, self._slots[index].end)

            else:
                # Sorted by start, so nothing later can be due sooner
                break

            i += 1
