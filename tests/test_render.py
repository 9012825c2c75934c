# tests/test_render.py
# Text layout & centered drawing against a fake screen

from countdown.font import GLYPHS
from countdown.render import RenderedText, draw, origin, to_text


def test_to_text_keeps_mapped_characters():
    text = to_text("12:34")
    assert len(text.glyphs) == 5
    assert text.glyphs[2].lines == GLYPHS[":"]


def test_to_text_drops_unmapped_characters():
    text = to_text("1a 2")
    assert [g.lines for g in text.glyphs] == [GLYPHS["1"], GLYPHS["2"]]


def test_rendered_text_dimensions():
    text = to_text("00:00")
    assert text.width == 7 * 4 + 3
    assert text.height == 5


def test_empty_rendered_text():
    text = RenderedText(())
    assert text.width == 0
    assert text.height == 0


def test_origin_centers_text():
    assert origin(80, 24, to_text("00:00")) == (25, 10)


def test_origin_goes_negative_on_small_terminal():
    assert origin(10, 2, to_text("00:00")) == (-10, -1)


def test_draw_clears_then_writes_glyph_rows_then_flushes(screen):
    draw(screen, 0)

    assert screen.calls[0] == ("clear",)
    assert screen.calls[-1] == ("flush",)
    writes = screen.writes
    assert len(writes) == 5 * 5
    assert writes[0] == (25, 10, GLYPHS["0"][0])
    assert writes[4] == (25, 14, GLYPHS["0"][4])
    # second glyph starts after the first one's width
    assert writes[5] == (32, 10, GLYPHS["0"][0])
    # separator after two digits
    assert writes[10] == (39, 10, GLYPHS[":"][0])


def test_draw_uses_hour_format(screen):
    draw(screen, 3661)
    drawn = [w[2] for w in screen.writes if w[1] == 10]
    assert drawn == [GLYPHS[ch][0] for ch in "1:01:01"]


def test_draw_on_tiny_terminal_does_not_fail(screen):
    screen.width, screen.height = 4, 2
    draw(screen, 59)
    assert screen.writes[0][0] < 0
    assert screen.calls[-1] == ("flush",)
