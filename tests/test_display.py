"""Tests for the plain-text display."""

import pytest

from lyricshow import Display, DisplayEngine, Fragment, LineKind, TextDisplay, TextDisplayEngine


def frags(*texts: str) -> list[Fragment]:
    return [Fragment(i, text) for i, text in enumerate(texts)]


class TestProtocols:
    def test_text_display_is_display(self) -> None:
        assert isinstance(TextDisplay(), Display)

    def test_text_engine_is_engine(self) -> None:
        assert isinstance(TextDisplayEngine(1), DisplayEngine)


class TestTextDisplay:
    def test_render_text(self) -> None:
        display = TextDisplay()
        display.render_text("Hi there")
        assert display.text == "Hi there"
        assert display.highlighted == ""

    def test_ready_countdown(self) -> None:
        display = TextDisplay()
        display.render_ready_countdown(3)
        assert display.text == "(Ready... 3)"

    def test_instrumental(self) -> None:
        display = TextDisplay()
        display.render_instrumental()
        assert display.text == "♫ Instrumental ♫"

    def test_karaoke_highlight(self) -> None:
        display = TextDisplay()
        (passed, current, upcoming) = frags("Hi ", "there", "!")
        display.render_karaoke([passed], current, [upcoming], 40)
        assert display.text == "Hi there!"
        assert display.highlighted == "Hi th"

    def test_leading_space_counts_as_passed(self) -> None:
        display = TextDisplay()
        (passed, current) = frags("Hello", " world")
        display.render_karaoke([passed], current, [], 0)
        assert display.text == "Hello world"
        assert display.highlighted == "Hello "

    def test_full_highlight(self) -> None:
        display = TextDisplay()
        (current,) = frags("done")
        display.render_karaoke([], current, [], 100)
        assert display.highlighted == "done"

    def test_karaoke_without_current(self) -> None:
        display = TextDisplay()
        display.render_karaoke([], None, [], 0)
        assert display.text == ""

    def test_clear(self) -> None:
        display = TextDisplay()
        (current,) = frags("done")
        display.render_karaoke([], current, [], 50)
        display.clear()
        assert display.text == ""
        assert display.highlighted == ""

    @pytest.mark.parametrize(
        ("kind", "style"),
        [
            (LineKind.LIVE, "karaoke-type-karaoke"),
            (LineKind.UPCOMING, "karaoke-type-upcoming"),
            (LineKind.READY, "karaoke-type-ready"),
            (LineKind.FILLER, "karaoke-type-instrumental"),
            (None, "karaoke-type-karaoke"),
        ],
    )
    def test_style(self, kind: LineKind | None, style: str) -> None:
        display = TextDisplay()
        display.kind = kind
        assert display.style == style


class TestTextDisplayEngine:
    def test_displays(self) -> None:
        engine = TextDisplayEngine(3)
        assert len(engine.displays) == 3
        assert engine.get_display(2) is engine.displays[2]

    @pytest.mark.parametrize("index", [3, -1])
    def test_out_of_range(self, index: int) -> None:
        engine = TextDisplayEngine(3)
        with pytest.raises(IndexError):
            engine.get_display(index)

    def test_lines(self) -> None:
        engine = TextDisplayEngine(2)
        engine.get_display(1).render_text("second")
        assert engine.lines() == ["", "second"]
