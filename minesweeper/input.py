"""Mouse input tracking: a click settles when its button is released."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from enum import IntEnum


class MouseState(IntEnum):
    NONE = 0
    PRESSING = 1
    SETTLED = 2


class MouseButton(IntEnum):
    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


_PRIORITY = (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT)


@dataclass
class Input:
    """Current state of the mouse as seen by the game."""

    state: MouseState = MouseState.NONE
    button: MouseButton = MouseButton.NONE
    x: int = 0
    y: int = 0

    def update(self, pressed: Collection[MouseButton], position: tuple[int, int]) -> None:
        """Advance the state machine given the pressed buttons and cursor position."""
        if self.state is MouseState.NONE:
            for button in _PRIORITY:
                if button in pressed:
                    self.button = button
                    self.state = MouseState.PRESSING
                    break
        elif self.state is MouseState.PRESSING:
            if self.button not in pressed:
                self.x, self.y = position
                self.state = MouseState.SETTLED
        elif self.state is MouseState.SETTLED:
            self.button = MouseButton.NONE
            self.state = MouseState.NONE