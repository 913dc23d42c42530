"""Display protocols consumed by a show, plus a plain-text implementation."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from .lines import LineKind
from .model import Fragment


@runtime_checkable
class Display(Protocol):
    """One line of output. ``kind`` is set by the line occupying it."""

    kind: LineKind | None

    def clear(self) -> None: ...

    def render_text(self, text: str) -> None: ...

    def render_ready_countdown(self, countdown: int) -> None: ...

    def render_instrumental(self) -> None: ...

    def render_karaoke(
        self,
        passed: Sequence[Fragment],
        current: Fragment | None,
        upcoming: Sequence[Fragment],
        percent: float,
    ) -> None: ...


@runtime_checkable
class DisplayEngine(Protocol):

    def get_display(self, index: int) -> Display: ...


_STYLES = {
    LineKind.LIVE: "karaoke-type-karaoke",
    LineKind.UPCOMING: "karaoke-type-upcoming",
    LineKind.READY: "karaoke-type-ready",
    LineKind.FILLER: "karaoke-type-instrumental",
}

INSTRUMENTAL_TEXT = "♫ Instrumental ♫"


class TextDisplay:
    """Display that keeps its output as strings.

    ``highlighted`` is the prefix of ``text`` that has been sung, measured
    in characters. ``style`` follows ``kind``.
    """

    def __init__(self) -> None:
        self.kind: LineKind | None = None
        self.text = ""
        self.highlighted = ""

    @property
    def style(self) -> str:
        return _STYLES.get(self.kind, _STYLES[LineKind.LIVE])

    def clear(self) -> None:
        self.text = ""
        self.highlighted = ""

    def render_text(self, text: str) -> None:
        self.text = text
        self.highlighted = ""

    def render_ready_countdown(self, countdown: int) -> None:
        self.text = f"(Ready... {countdown})"
        self.highlighted = ""

    def render_instrumental(self) -> None:
        self.text = INSTRUMENTAL_TEXT
        self.highlighted = ""

    def render_karaoke(self, passed, current, upcoming, percent) -> None:
        passed_text = "".join(f.text for f in passed)
        upcoming_text = "".join(f.text for f in upcoming)
        current_text = current.text if current is not None else ""
        self.text = passed_text + current_text + upcoming_text

        # Leading whitespace of the current fragment is not sung
        stripped = current_text.lstrip()
        passed_text += current_text[:len(current_text) - len(stripped)]
        sung = int(len(stripped) * percent / 100)
        self.highlighted = passed_text + stripped[:sung]


class TextDisplayEngine:

    def __init__(self, num_lines: int) -> None:
        self.displays = [TextDisplay() for _ in range(num_lines)]

    def get_display(self, index: int) -> TextDisplay:
        if not 0 <= index < len(self.displays):
            raise IndexError(f"Display index {index} out of range (0..{len(self.displays) - 1})")
        return self.displays[index]

    def lines(self) -> list[str]:
        """Current text of every display, in order."""
        return [display.text for display in self.displays]
