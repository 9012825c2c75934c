from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Glyph:
    lines: Tuple[str, ...]

    @property
    def width(self) -> int:
        return len(self.lines[0]) if self.lines else 0

    @property
    def height(self) -> int:
        return len(self.lines)


GLYPHS: Dict[str, Tuple[str, ...]] = {
    "0": (
        r"  ___  ",
        r" / _ \ ",
        r"| | | |",
        r"| |_| |",
        r" \___/ ",
    ),
    "1": (
        r" _ ",
        r"/ |",
        r"| |",
        r"| |",
        r"|_|",
    ),
    "2": (
        r" ____  ",
        r"|___ \ ",
        r"  __) |",
        r" / __/ ",
        r"|_____|",
    ),
    "3": (
        r" _____ ",
        r"|___ / ",
        r"  |_ \ ",
        r" ___) |",
        r"|____/ ",
    ),
    "4": (
        r" _  _   ",
        r"| || |  ",
        r"| || |_ ",
        r"|__   _|",
        r"   |_|  ",
    ),
    "5": (
        r" ____  ",
        r"| ___| ",
        r"|___ \ ",
        r" ___) |",
        r"|____/ ",
    ),
    "6": (
        r"  __   ",
        r" / /_  ",
        r"| '_ \ ",
        r"| (_) |",
        r" \___/ ",
    ),
    "7": (
        r" _____ ",
        r"|___  |",
        r"   / / ",
        r"  / /  ",
        r" /_/   ",
    ),
    "8": (
        r"  ___  ",
        r" ( _ ) ",
        r" / _ \ ",
        r"| (_) |",
        r" \___/ ",
    ),
    "9": (
        r"  ___  ",
        r" / _ \ ",
        r"| (_) |",
        r" \__, |",
        r"   /_/ ",
    ),
    ":": (
        r"   ",
        r" _ ",
        r"(_)",
        r" _ ",
        r"(_)",
    ),
}


def glyph_for(ch: str) -> Optional[Glyph]:
    lines = GLYPHS.get(ch)
    if lines is None:
        return None
    return Glyph(lines)
