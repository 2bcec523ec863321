"""Plain-text rendering of a board position for ``showboard``."""

from __future__ import annotations

from typing import Iterable

from gtp_adapter.models import COLUMN_LETTERS, MAX_BOARD_SIZE, Vertex


def draw_board(
    board_size: int,
    black_stones: Iterable[Vertex],
    white_stones: Iterable[Vertex],
    black_captures: int,
    white_captures: int,
) -> str:
    """Render the board, highest row first, followed by a column legend.

    The result never contains an empty line so it can be embedded in a response.
    """
    if not 1 <= board_size <= MAX_BOARD_SIZE:
        raise ValueError(f"Invalid board size for drawing: {board_size}")

    grid = [["." for _ in range(board_size)] for _ in range(board_size)]
    for symbol, stones in (("B", black_stones), ("W", white_stones)):
        for stone in stones:
            if stone.x > board_size or stone.y > board_size:
                raise ValueError(f"Stone {stone.to_gtp()} lies outside a {board_size}x{board_size} board")
            grid[stone.y - 1][stone.x - 1] = symbol

    lines = [f"Captured stones : {black_captures} by white and {white_captures} by black."]
    for row in range(board_size, 0, -1):
        cells = "".join(f" {cell}" for cell in grid[row - 1])
        lines.append(f"{row:2d}{cells}")
    lines.append("  " + "".join(f" {letter}" for letter in COLUMN_LETTERS[:board_size]))
    return "\n".join(lines)
