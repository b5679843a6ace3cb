"""The minefield and the rules for clicking on it."""

from __future__ import annotations

import random
from typing import Any

from .colors import BLACK
from .input import Input, MouseButton, MouseState
from .tile import (
    TILE_SIZE,
    Difficulty,
    Tile,
    TileState,
    explode_all,
    make_tiles,
    place_bombs,
)


class Board:
    """A grid of tiles with bombs placed according to a difficulty."""

    def __init__(
        self,
        width: int,
        height: int,
        difficulty: Difficulty,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.difficulty = difficulty
        self.tiles = make_tiles(width, height, TILE_SIZE)
        place_bombs(difficulty, self.tiles, rng if rng is not None else random.Random())

    def size(self) -> tuple[int, int]:
        """Pixel size of the board image, with one-pixel borders between tiles."""
        return (
            self.width * TILE_SIZE + self.width + 1,
            self.height * TILE_SIZE + self.height + 1,
        )

    def draw(self, surface: Any, font: Any) -> None:
        """Draw every tile onto the surface."""
        surface.fill(BLACK)
        for row in self.tiles:
            for tile in row:
                tile.draw(surface, font)

    def update(self, mouse: Input) -> None:
        """Apply a settled mouse click to the tile under the cursor."""
        if mouse.state is not MouseState.SETTLED:
            return

        match = match_tile(mouse.x, mouse.y, self.tiles)
        if match is None:
            return

        surrounding = surrounding_tiles(match.row, match.col, self.tiles)
        match.update(mouse.button, surrounding)

        if match.state is TileState.EXPLODE:
            explode_all(self.tiles)

        if match.surrounding == 0 and not match.bomb:
            clear_zero_surrounds(surrounding, self.tiles)


def match_tile(x: int, y: int, tiles: list[list[Tile]]) -> Tile | None:
    """Return the tile whose area holds the given point, if any."""
    for row in tiles:
        for tile in row:
            if tile.x <= x < tile.x + tile.size and tile.y <= y < tile.y + tile.size:
                return tile
    return None


def surrounding_tiles(row: int, col: int, tiles: list[list[Tile]]) -> list[Tile]:
    """Return the up to eight neighbours of a cell, in row-major order."""
    if not tiles or not tiles[0]:
        return []
    rows = tiles[max(row - 1, 0):min(row + 2, len(tiles))]
    col_start, col_end = max(col - 1, 0), min(col + 2, len(tiles[0]))
    return [
        tile
        for sub_row in rows
        for tile in sub_row[col_start:col_end]
        if not (tile.row == row and tile.col == col)
    ]


def clear_zero_surrounds(surrounding: list[Tile], tiles: list[list[Tile]]) -> None:
    """Reveal the given tiles and flood outward from any that have no bomb neighbours."""
    zeros = []
    for neighbour in surrounding:
        tile = tiles[neighbour.row][neighbour.col]
        tile.update(MouseButton.LEFT, surrounding_tiles(tile.row, tile.col, tiles))
        if tile.surrounding == 0 and tile.state is not TileState.CLEARED and not tile.bomb:
            zeros.append(tile)
        tile.state = TileState.CLEARED

    for zero in zeros:
        clear_zero_surrounds(surrounding_tiles(zero.row, zero.col, tiles), tiles)