"""Karaoke line scheduling for synchronized lyric playback."""

from .display import Display, DisplayEngine, TextDisplay, TextDisplayEngine
from .lines import FillerLine, Line, LineKind, LiveLine, ReadyLine, UpcomingLine
from .model import Entry, Fragment, Timings, normalize, normalize_fragments
from .show import ConfigError, Show, ShowConfig
from .verify import CuePoint, collect_cue_points

__all__ = [
    "collect_cue_points",
    "ConfigError",
    "CuePoint",
    "Display",
    "DisplayEngine",
    "Entry",
    "FillerLine",
    "Fragment",
    "Line",
    "LineKind",
    "LiveLine",
    "normalize",
    "normalize_fragments",
    "ReadyLine",
    "Show",
    "ShowConfig",
    "TextDisplay",
    "TextDisplayEngine",
    "Timings",
    "UpcomingLine",
]

__version__ = "0.1.0"
