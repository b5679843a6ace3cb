"""Tiles of the minefield, their generation and bomb placement."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable

from .colors import GREY50, GREY80, RED, WHITE, Color, num_color
from .input import MouseButton

logger = logging.getLogger(__name__)

TILE_SIZE = 20
FONT_SIZE = 20


class Difficulty(IntEnum):
    EASY = 0
    MEDIUM = 1
    HARD = 2


DIFF_FILL: dict[Difficulty, float] = {
    Difficulty.EASY: 0.2,
    Difficulty.MEDIUM: 0.45,
    Difficulty.HARD: 0.6,
}


class TileState(IntEnum):
    BASE = 0
    MARKED = 1
    CLEARED = 2
    EXPLODE = 3


_STATE_TINT: dict[TileState, Color] = {
    TileState.BASE: GREY80,
    TileState.MARKED: GREY80,
    TileState.CLEARED: WHITE,
    TileState.EXPLODE: RED,
}


def _tint(base: Color, scale: Color) -> Color:
    return tuple(b * s // 255 for b, s in zip(base, scale))  # type: ignore[return-value]


@dataclass
class Tile:
    """A single cell of the minefield."""

    row: int
    col: int
    x: int = 0
    y: int = 0
    size: int = 0
    bomb: bool = False
    state: TileState = TileState.BASE
    surrounding: int = 0

    def update(self, button: MouseButton, surrounding: Iterable[Tile]) -> None:
        """Apply a click with the given button, given the neighbouring tiles."""
        if button is MouseButton.LEFT:
            if self.state in (TileState.MARKED, TileState.CLEARED):
                return
            if self.bomb:
                logger.debug("tile r:%d c:%d is a bomb", self.row, self.col)
                self.state = TileState.EXPLODE
                return
            self.surrounding = sum(1 for t in surrounding if t.bomb)
            # zero tiles are cleared by the flood fill instead
            if self.surrounding > 0:
                self.state = TileState.CLEARED
        elif button is MouseButton.MIDDLE:
            if self.state is not TileState.CLEARED or self.bomb:
                return
            for t in surrounding:
                if t.state is not TileState.MARKED:
                    t.state = TileState.CLEARED
        elif button is MouseButton.RIGHT:
            if self.state is TileState.BASE:
                self.state = TileState.MARKED
            elif self.state is TileState.MARKED:
                self.state = TileState.BASE

    def draw(self, surface: Any, font: Any) -> None:
        """Draw the tile onto a surface, with its count or mark rendered by font."""
        inner = TILE_SIZE - 2
        surface.fill(_tint(GREY50, _STATE_TINT[self.state]), (self.x + 1, self.y + 1, inner, inner))

        if self.state in (TileState.BASE, TileState.EXPLODE):
            return

        msg = ""
        color = WHITE
        if self.state is TileState.MARKED:
            msg, color = "X", RED
        if self.surrounding > 0:
            msg, color = str(self.surrounding), num_color(self.surrounding)

        if msg:
            surface.blit(font.render(msg, True, color), (self.x + 5, self.y - 1))


def make_tiles(width: int, height: int, tile_size: int) -> list[list[Tile]]:
    """Lay out as many whole tiles as fit in the given pixel area."""
    return [
        [
            Tile(row=r, col=c, x=c * tile_size, y=r * tile_size, size=tile_size)
            for c in range(width // tile_size)
        ]
        for r in range(height // tile_size)
    ]


def place_bombs(difficulty: Difficulty, tiles: list[list[Tile]], rng: random.Random) -> None:
    """Place bombs at random on a share of the tiles set by the difficulty."""
    if not tiles:
        return
    rows, cols = len(tiles), len(tiles[0])
    count = math.floor(rows * cols * DIFF_FILL[Difficulty(difficulty)])
    logger.debug(
        "placing bombs: diff: %d rows: %d cols: %d tile count: %d, bomb count: %d",
        difficulty, rows, cols, rows * cols, count,
    )
    placed = 0
    while placed < count:
        tile = tiles[rng.randrange(rows)][rng.randrange(cols)]
        if tile.bomb:
            continue
        tile.bomb = True
        placed += 1


def explode_all(tiles: list[list[Tile]]) -> None:
    """Set every bomb tile to the exploded state."""
    for row in tiles:
        for tile in row:
            if tile.bomb:
                tile.state = TileState.EXPLODE