"""A rules-light engine that keeps a real board.

Stones are never captured; a move is legal when it lands on an empty point of
the board. Move generation takes the empty point closest to the centre.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from gtp_adapter.engine import BoardState, EngineBase
from gtp_adapter.errors import (
    BadVertexList,
    BoardNotEmpty,
    CannotUndo,
    InvalidBoardSize,
    InvalidMove,
    InvalidStoneCount,
)
from gtp_adapter.models import PASS, Colour, ColouredMove, Move, StoneStatus, Vertex

MIN_BOARD_SIZE = 2


def max_fixed_handicap(size: int) -> int:
    if size < 7:
        return 0
    if size == 7 or size % 2 == 0:
        return 4
    return 9


def fixed_handicap_points(size: int, number: int) -> list[Vertex]:
    """Standard handicap placement for ``number`` stones on a ``size`` board."""
    if not 2 <= number <= max_fixed_handicap(size):
        raise InvalidStoneCount()

    edge = 3 if size < 13 else 4
    low, high, mid = edge, size + 1 - edge, (size + 1) // 2
    corners = [Vertex(low, low), Vertex(high, high), Vertex(low, high), Vertex(high, low)]
    sides = [Vertex(low, mid), Vertex(high, mid), Vertex(mid, low), Vertex(mid, high)]
    centre = Vertex(mid, mid)

    if number <= 4:
        return corners[:number]
    points = corners + sides[: (number - 4) // 2 * 2]
    if number % 2:
        points.append(centre)
    return points


@dataclass(slots=True)
class TimeSettings:
    main_time: int
    byo_yomi_time: int
    byo_yomi_stones: int


class BoardEngine(EngineBase):
    """Tracks stones and move history; supports most optional commands."""

    def __init__(self, board_size: int = 19) -> None:
        self._size = board_size
        self._komi = 0.0
        self._stones: dict[Vertex, Colour] = {}
        self._history: list[ColouredMove] = []
        self.time: TimeSettings | None = None

    # mandatory operations

    def name(self) -> str:
        return "BoardBot"

    def version(self) -> str:
        return "1.0"

    def clear_board(self) -> None:
        self._stones.clear()
        self._history.clear()
        self.time = None

    def komi(self, value: float) -> None:
        self._komi = value

    def boardsize(self, size: int) -> None:
        if size < MIN_BOARD_SIZE:
            raise InvalidBoardSize()
        self._size = size
        self.clear_board()

    def play(self, move: ColouredMove) -> None:
        vertex = move.move.vertex
        if vertex is not None and (not self._on_board(vertex) or vertex in self._stones):
            raise InvalidMove()
        self._record(move)

    def genmove(self, player: Colour) -> Move:
        move = self._suggest()
        self._record(ColouredMove(player=player, move=move))
        return move

    # optional operations

    def reg_genmove(self, player: Colour) -> Move:
        return self._suggest()

    def undo(self) -> None:
        if not self._history:
            raise CannotUndo()
        move = self._history.pop()
        if move.move.vertex is not None:
            del self._stones[move.move.vertex]

    def fixed_handicap(self, number: int) -> list[Vertex]:
        self._require_empty()
        points = fixed_handicap_points(self._size, number)
        self._place_black(points)
        return points

    def place_free_handicap(self, number: int) -> list[Vertex]:
        self._require_empty()
        if number < 2 or number >= self._size * self._size:
            raise InvalidStoneCount()
        limit = max_fixed_handicap(self._size)
        if limit:
            points = fixed_handicap_points(self._size, min(number, limit))
        else:
            points = self._empty_points_by_centre()[:number]
        self._place_black(points)
        return points

    def set_free_handicap(self, stones: Sequence[Vertex]) -> None:
        self._require_empty()
        if len(set(stones)) != len(stones) or not all(self._on_board(stone) for stone in stones):
            raise BadVertexList()
        self._place_black(stones)

    def time_settings(self, main_time: int, byo_yomi_time: int, byo_yomi_stones: int) -> None:
        self.time = TimeSettings(main_time, byo_yomi_time, byo_yomi_stones)

    def final_status_list(self, status: StoneStatus) -> list[Vertex]:
        if status is not StoneStatus.ALIVE:
            return []
        return sorted(self._stones, key=lambda vertex: (vertex.y, vertex.x))

    def final_score(self) -> tuple[float, Colour]:
        black = sum(1 for colour in self._stones.values() if colour is Colour.BLACK)
        white = len(self._stones) - black + self._komi
        margin = black - white
        if margin < 0:
            return -margin, Colour.WHITE
        return margin, Colour.BLACK

    def showboard(self) -> BoardState:
        black = [vertex for vertex, colour in self._stones.items() if colour is Colour.BLACK]
        white = [vertex for vertex, colour in self._stones.items() if colour is Colour.WHITE]
        return self._size, black, white, 0, 0

    def custom_command(self, command: str, args: str) -> tuple[bool, str]:
        if command == "move_history":
            return True, " ".join(move.to_gtp() for move in self._history)
        return False, "unknown command"

    def known_custom_command(self, command: str) -> bool:
        return command in self.list_custom_commands()

    def list_custom_commands(self) -> list[str]:
        return ["move_history"]

    # helpers

    def _on_board(self, vertex: Vertex) -> bool:
        return vertex.x <= self._size and vertex.y <= self._size

    def _require_empty(self) -> None:
        if self._stones:
            raise BoardNotEmpty()

    def _place_black(self, points: Sequence[Vertex]) -> None:
        for point in points:
            self._stones[point] = Colour.BLACK

    def _record(self, move: ColouredMove) -> None:
        vertex = move.move.vertex
        if vertex is not None:
            self._stones[vertex] = move.player
        self._history.append(move)

    def _empty_points_by_centre(self) -> list[Vertex]:
        centre = (self._size + 1) / 2
        points = [
            Vertex(x, y)
            for y in range(1, self._size + 1)
            for x in range(1, self._size + 1)
            if Vertex(x, y) not in self._stones
        ]
        return sorted(points, key=lambda p: (abs(p.x - centre) + abs(p.y - centre), p.y, p.x))

    def _suggest(self) -> Move:
        points = self._empty_points_by_centre()
        if not points:
            return PASS
        return Move.stone(points[0])
