from dataclasses import dataclass
from typing import Tuple

from .font import Glyph, glyph_for
from .timecalc import format_clock


@dataclass(frozen=True)
class RenderedText:
    glyphs: Tuple[Glyph, ...]

    @property
    def width(self) -> int:
        return sum(glyph.width for glyph in self.glyphs)

    @property
    def height(self) -> int:
        return max((glyph.height for glyph in self.glyphs), default=0)


def to_text(text: str) -> RenderedText:
    # characters without a glyph are left out of the display
    glyphs = []
    for ch in text:
        glyph = glyph_for(ch)
        if glyph is not None:
            glyphs.append(glyph)
    return RenderedText(tuple(glyphs))


def origin(width: int, height: int, text: RenderedText) -> Tuple[int, int]:
    # negative when the terminal is smaller than the text
    return width // 2 - text.width // 2, height // 2 - text.height // 2


def draw(screen, value: int) -> None:
    text = to_text(format_clock(value))
    width, height = screen.size()
    x, y = origin(width, height, text)

    screen.clear()
    for glyph in text.glyphs:
        for row, line in enumerate(glyph.lines):
            screen.write(x, y + row, line)
        x += glyph.width
    screen.flush()
