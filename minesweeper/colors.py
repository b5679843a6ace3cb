"""Colour palette used when drawing the board."""

from __future__ import annotations

Color = tuple[int, int, int]

BACKGROUND: Color = (0xFA, 0xF8, 0xEF)
RED: Color = (255, 0, 0)
ORANGE: Color = (245, 120, 0)
YELLOW: Color = (255, 255, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
CYAN: Color = (0, 255, 255)
VIOLET: Color = (125, 0, 255)
PINK: Color = (255, 0, 255)
BROWN: Color = (125, 50, 0)
BLACK: Color = (0, 0, 0)
GREY20: Color = (51, 51, 51)
GREY50: Color = (127, 127, 127)
GREY80: Color = (204, 204, 204)
WHITE: Color = (255, 255, 255)

_NUMBER_COLORS: dict[int, Color] = {
    1: BLUE,
    2: GREEN,
    3: YELLOW,
    4: ORANGE,
    5: RED,
    6: PINK,
    7: CYAN,
    8: BROWN,
}


def num_color(num: int) -> Color:
    """Return the colour used to draw a neighbouring-bomb count."""
    try:
        return _NUMBER_COLORS[num]
    except KeyError:
        raise ValueError(f"couldn't match number {num} for color") from None