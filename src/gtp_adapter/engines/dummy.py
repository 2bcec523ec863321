"""A bot that does not know the rules; it only exercises the mandatory interface."""

from __future__ import annotations

from gtp_adapter.engine import BoardState, EngineBase
from gtp_adapter.errors import InvalidBoardSize
from gtp_adapter.models import Colour, ColouredMove, Move, Vertex

_SHOWCASE_BLACK = (Vertex(2, 12), Vertex(9, 2), Vertex(8, 8), Vertex(17, 18))
_SHOWCASE_WHITE = (Vertex(17, 3), Vertex(6, 9), Vertex(3, 17))


class DummyEngine(EngineBase):
    """Accepts every move and always answers the centre point."""

    def __init__(self, board_size: int = 19) -> None:
        self._board_size = board_size

    def name(self) -> str:
        return "DummyBot"

    def version(self) -> str:
        return "0.42"

    def clear_board(self) -> None:
        pass

    def komi(self, value: float) -> None:
        pass

    def boardsize(self, size: int) -> None:
        if size < 1:
            raise InvalidBoardSize()
        self._board_size = size

    def play(self, move: ColouredMove) -> None:
        pass

    def genmove(self, player: Colour) -> Move:
        centre = (self._board_size + 1) // 2
        return Move.stone(Vertex(centre, centre))

    def showboard(self) -> BoardState:
        # fixed 19x19 position
        return 19, list(_SHOWCASE_BLACK), list(_SHOWCASE_WHITE), 3, 4
