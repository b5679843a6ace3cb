"""The game object and the window loop that drives it."""

from __future__ import annotations

import argparse
import random
from typing import Any, Collection, Sequence

from .board import Board
from .colors import BACKGROUND
from .input import Input, MouseButton
from .tile import FONT_SIZE, Difficulty

SCREEN_WIDTH = 500
SCREEN_HEIGHT = 500
FRAME_RATE = 60


class Game:
    """Holds the board and the mouse input, and draws the board to a screen."""

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.board = Board(SCREEN_WIDTH, SCREEN_HEIGHT, difficulty, self.rng)
        self.input = Input()
        self.window_size: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT + 100)
        self.board_image: Any = None
        self.font: Any = None

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]:
        """Logical screen size, whatever the window size is."""
        return SCREEN_WIDTH, SCREEN_HEIGHT

    def _restart(self) -> None:
        self.board = Board(self.board.width, self.board.height, self.board.difficulty, self.rng)

    def handle_key(self, key: str) -> None:
        """React to a key press: "r" restarts, "s" doubles the window and restarts."""
        key = key.lower()
        if key == "r":
            self._restart()
        elif key == "s":
            self.window_size = (SCREEN_WIDTH * 2, SCREEN_HEIGHT * 2)
            self._restart()

    def update(self, pressed: Collection[MouseButton], position: tuple[int, int]) -> None:
        """Advance the mouse state and apply any settled click to the board."""
        self.input.update(pressed, position)
        self.board.update(self.input)

    def draw(self, screen: Any) -> None:
        """Draw the current state of the game onto the screen surface."""
        import pygame

        if self.font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self.font = pygame.font.Font(None, FONT_SIZE)
        if self.board_image is None:
            width, height = self.board.size()
            # only the part that can appear on the logical screen is kept
            self.board_image = pygame.Surface(
                (min(width, SCREEN_WIDTH), min(height, SCREEN_HEIGHT))
            )
        screen.fill(BACKGROUND)
        self.board.draw(self.board_image, self.font)
        screen.blit(self.board_image, (0, 0))


def _fit(window: tuple[int, int], logical: tuple[int, int]) -> tuple[float, tuple[int, int], tuple[int, int]]:
    """Scale, offset and scaled size that fit the logical screen into the window."""
    scale = min(window[0] / logical[0], window[1] / logical[1])
    size = (int(logical[0] * scale), int(logical[1] * scale))
    offset = ((window[0] - size[0]) // 2, (window[1] - size[1]) // 2)
    return scale, offset, size


def _pressed_buttons(states: Sequence[bool]) -> set[MouseButton]:
    buttons = (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT)
    return {button for button, down in zip(buttons, states) if down}


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="minesweeper", description="Play Minesweeper.")
    parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in Difficulty],
        default=Difficulty.MEDIUM.name.lower(),
    )
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        game = Game(Difficulty[args.difficulty.upper()])
        window_size = game.window_size
        window = pygame.display.set_mode(window_size)
        pygame.display.set_caption("Minesweeper")
        logical = game.layout(*window_size)
        screen = pygame.Surface(logical)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(pygame.key.name(event.key))
            if not running:
                break

            if game.window_size != window_size:
                window_size = game.window_size
                window = pygame.display.set_mode(window_size)
            logical = game.layout(*window_size)
            if screen.get_size() != logical:
                screen = pygame.Surface(logical)

            scale, offset, size = _fit(window_size, logical)
            mx, my = pygame.mouse.get_pos()
            position = (int((mx - offset[0]) / scale), int((my - offset[1]) / scale))
            game.update(_pressed_buttons(pygame.mouse.get_pressed(3)), position)

            game.draw(screen)
            window.fill((0, 0, 0))
            window.blit(pygame.transform.scale(screen, size), offset)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())