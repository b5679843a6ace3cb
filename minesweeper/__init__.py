"""A Minesweeper game: board logic, mouse input handling and a pygame window."""

__version__ = "0.1.0"