import random

import pygame
import pytest

from minesweeper.board import surrounding_tiles
from minesweeper.colors import BLACK
from minesweeper.game import SCREEN_HEIGHT, SCREEN_WIDTH, Game
from minesweeper.input import MouseButton, MouseState
from minesweeper.tile import TILE_SIZE, Difficulty, TileState


def _game(seed=2113, difficulty=Difficulty.MEDIUM):
    return Game(difficulty, random.Random(seed))


def _click(game, button, position):
    game.update({button}, position)
    game.update(set(), position)


def _center(tile):
    return (tile.x + TILE_SIZE // 2, tile.y + TILE_SIZE // 2)


def _all_tiles(game):
    return [t for row in game.board.tiles for t in row]


@pytest.mark.parametrize("outside", [(100, 100), (500, 600), (1000, 1000)])
def test_layout_is_fixed(outside):
    assert _game().layout(*outside) == (SCREEN_WIDTH, SCREEN_HEIGHT)


def test_initial_board_dimensions_and_window():
    game = _game()
    assert game.board.width == SCREEN_WIDTH
    assert game.board.height == SCREEN_HEIGHT
    assert game.board.difficulty == Difficulty.MEDIUM
    assert game.window_size == (SCREEN_WIDTH, SCREEN_HEIGHT + 100)
    assert len(game.board.tiles) == SCREEN_HEIGHT // TILE_SIZE


def test_restart_key_replaces_board():
    game = _game(difficulty=Difficulty.HARD)
    old = game.board
    game.handle_key("r")
    assert game.board is not old
    assert game.board.difficulty == Difficulty.HARD
    assert (game.board.width, game.board.height) == (old.width, old.height)
    assert all(t.state is TileState.BASE for t in _all_tiles(game))


def test_size_key_doubles_window_and_restarts():
    game = _game()
    old = game.board
    game.handle_key("S")
    assert game.window_size == (SCREEN_WIDTH * 2, SCREEN_HEIGHT * 2)
    assert game.board is not old


def test_other_keys_do_nothing():
    game = _game()
    old = game.board
    game.handle_key("q")
    assert game.board is old
    assert game.window_size == (SCREEN_WIDTH, SCREEN_HEIGHT + 100)


def test_press_then_release_settles_input():
    game = _game()
    game.update({MouseButton.LEFT}, (0, 0))
    assert game.input.state is MouseState.PRESSING
    game.update(set(), (3, 4))
    assert game.input.state is MouseState.SETTLED
    assert (game.input.x, game.input.y) == (3, 4)


def test_left_click_on_numbered_tile_clears_it():
    game = _game()
    tiles = game.board.tiles
    target = next(
        t
        for t in _all_tiles(game)
        if not t.bomb and any(n.bomb for n in surrounding_tiles(t.row, t.col, tiles))
    )
    expected = sum(n.bomb for n in surrounding_tiles(target.row, target.col, tiles))
    _click(game, MouseButton.LEFT, _center(target))
    assert target.state is TileState.CLEARED
    assert target.surrounding == expected


def test_right_click_marks_and_unmarks():
    game = _game()
    target = game.board.tiles[0][0]
    _click(game, MouseButton.RIGHT, _center(target))
    assert target.state is TileState.MARKED
    game.update(set(), (0, 0))  # settle back to idle
    _click(game, MouseButton.RIGHT, _center(target))
    assert target.state is TileState.BASE


def test_clicking_bomb_explodes_all_bombs():
    game = _game()
    bomb = next(t for t in _all_tiles(game) if t.bomb)
    _click(game, MouseButton.LEFT, _center(bomb))
    assert all(t.state is TileState.EXPLODE for t in _all_tiles(game) if t.bomb)
    assert all(t.state is not TileState.EXPLODE for t in _all_tiles(game) if not t.bomb)


def test_draw_copies_board_onto_screen():
    game = _game()
    screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    game.draw(screen)
    assert tuple(screen.get_at((0, 0)))[:3] == BLACK
    assert screen.get_at((5, 5)) == game.board_image.get_at((5, 5))
    assert game.board_image.get_size() == (SCREEN_WIDTH, SCREEN_HEIGHT)


def test_draw_after_click_shows_cleared_tile():
    game = _game()
    tiles = game.board.tiles
    target = next(
        t
        for t in _all_tiles(game)
        if not t.bomb and any(n.bomb for n in surrounding_tiles(t.row, t.col, tiles))
    )
    screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    game.draw(screen)
    before = screen.get_at((target.x + 2, target.y + 2))
    _click(game, MouseButton.LEFT, _center(target))
    game.draw(screen)
    after = screen.get_at((target.x + 2, target.y + 2))
    assert after != before