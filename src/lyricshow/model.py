"""Timed lyric entries and conversion from the shorthand timing format."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Sequence

if TYPE_CHECKING:
    from .display import DisplayEngine
    from .show import Show, ShowConfig


@dataclass
class Fragment:
    """A syllable or word of an entry.

    ``start`` and ``end`` are offsets from the owning entry's start.
    """

    start: float
    text: str
    end: float | None = None
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class Entry:
    start: float
    end: float
    fragments: list[Fragment] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "".join(fragment.text for fragment in self.fragments)


def normalize_fragments(simple_fragments: Sequence[Sequence[Any]]) -> list[Fragment]:
    """Convert ``(offset, text[, end[, options]])`` tuples to fragments.

    >>> normalize_fragments([(0, "Hi "), (0.5, "there", 1.2)])[1]
    Fragment(start=0.5, text='there', end=1.2, options={})
    """
    fragments = []
    for simple in simple_fragments:
        fragments.append(Fragment(
            start=simple[0],
            text=simple[1],
            end=float(simple[2]) if len(simple) >= 3 and simple[2] is not None else None,
            options=simple[3] if len(simple) >= 4 else {},
        ))
    return fragments


def normalize(simple_timings: Sequence[Sequence[Any]]) -> list[Entry]:
    """Convert ``(start, end, fragments[, options])`` tuples to sorted entries.

    Fragment order inside an entry is kept as given. Entries are stably
    sorted by start.
    """
    entries = []
    for simple in simple_timings:
        entries.append(Entry(
            start=simple[0],
            end=simple[1],
            fragments=normalize_fragments(simple[2]),
            options=simple[3] if len(simple) >= 4 else {},
        ))
    entries.sort(key=lambda e: e.start)
    return entries


class Timings:
    """Sorted entry sequence shared by every show created from it.

    Inverted entries (``start > end``) and unsorted fragments are not
    rejected; shows scheduled from them behave unpredictably.
    """

    def __init__(self, entries: Sequence[Entry]) -> None:
        self._entries: list[Entry] = sorted(entries, key=lambda e: e.start)

    @classmethod
    def from_simple(cls, simple_timings: Sequence[Sequence[Any]]) -> Timings:
        return cls(normalize(simple_timings))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Timings({len(self._entries)} entries)"

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    @property
    def duration(self) -> float:
        """End of the latest entry in seconds."""
        if not self._entries:
            return 0.0
        return max(entry.end for entry in self._entries)

    def create_show(
        self,
        display_engine: DisplayEngine,
        num_lines: int,
        config: ShowConfig | None = None,
    ) -> Show:
        """Create a show that schedules these timings onto *num_lines* displays.

        Every display needs its own show; one ``Timings`` can back many.
        """
        from .show import Show

        return Show(self, display_engine, num_lines, config=config)
