"""Boundary between the protocol adapter and a Go-playing engine.

An engine must provide the operations of :class:`GtpEngine`. Every operation of
:class:`OptionalOperations` may be left out entirely or raise
:class:`~gtp_adapter.errors.OperationNotImplemented`; the dispatcher probes each
one once at startup and only advertises the ones that answer.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from gtp_adapter.errors import OperationNotImplemented
from gtp_adapter.models import Colour, ColouredMove, Move, StoneStatus, Vertex

# (board_size, black_stones, white_stones, black_captured, white_captured)
BoardState = tuple[int, Sequence[Vertex], Sequence[Vertex], int, int]


class GtpEngine(Protocol):
    """Mandatory operations every engine implements."""

    def name(self) -> str:
        """Engine name, e.g. ``"My Go Bot"``."""

    def version(self) -> str:
        """Engine version string."""

    def clear_board(self) -> None:
        """Reset the game. Never fails."""

    def komi(self, value: float) -> None:
        """Set komi. Never fails, must accept absurd values."""

    def boardsize(self, size: int) -> None:
        """Change board size; raise ``InvalidBoardSize`` if unsupported."""

    def play(self, move: ColouredMove) -> None:
        """Play ``move``; raise ``InvalidMove`` if illegal."""

    def genmove(self, player: Colour) -> Move:
        """Generate and play a move for ``player``. Never fails."""


class OptionalOperations(Protocol):
    """Operations an engine may support; errors listed are the only ones allowed."""

    def reg_genmove(self, player: Colour) -> Move:
        """Deterministic move suggestion that is not played."""

    def undo(self) -> None:
        """Take back the last move; ``CannotUndo``."""

    def fixed_handicap(self, number: int) -> list[Vertex]:
        """Place standard handicap stones; ``BoardNotEmpty``, ``InvalidStoneCount``."""

    def place_free_handicap(self, number: int) -> list[Vertex]:
        """Choose and place handicap stones; ``BoardNotEmpty``, ``InvalidStoneCount``."""

    def set_free_handicap(self, stones: Sequence[Vertex]) -> None:
        """Use ``stones`` as black handicap; ``BoardNotEmpty``, ``BadVertexList``."""

    def time_settings(self, main_time: int, byo_yomi_time: int, byo_yomi_stones: int) -> None:
        """Informative time settings. Never fails."""

    def final_status_list(self, status: StoneStatus) -> list[Vertex]:
        """Stones of either colour in ``status``. Never fails."""

    def final_score(self) -> tuple[float, Colour]:
        """Score margin and winner, margin 0 for a draw; ``CannotScore``."""

    def showboard(self) -> BoardState:
        """Board as seen by the engine. Never fails."""

    def loadsgf(self, path: str, move_number: int | None) -> None:
        """Load a game record; ``CannotLoadFile``."""

    def custom_command(self, command: str, args: str) -> tuple[bool, str]:
        """Handle an engine-specific command, returning ``(success, output)``."""

    def known_custom_command(self, command: str) -> bool:
        ...

    def list_custom_commands(self) -> list[str]:
        ...


class EngineBase:
    """Convenience base class: every optional operation reports itself unsupported.

    Subclasses override only what they support. Engines need not inherit from it;
    leaving an optional method out is equivalent.
    """

    def reg_genmove(self, player: Colour) -> Move:
        raise OperationNotImplemented("reg_genmove")

    def undo(self) -> None:
        raise OperationNotImplemented("undo")

    def fixed_handicap(self, number: int) -> list[Vertex]:
        raise OperationNotImplemented("fixed_handicap")

    def place_free_handicap(self, number: int) -> list[Vertex]:
        raise OperationNotImplemented("place_free_handicap")

    def set_free_handicap(self, stones: Sequence[Vertex]) -> None:
        raise OperationNotImplemented("set_free_handicap")

    def time_settings(self, main_time: int, byo_yomi_time: int, byo_yomi_stones: int) -> None:
        raise OperationNotImplemented("time_settings")

    def final_status_list(self, status: StoneStatus) -> list[Vertex]:
        raise OperationNotImplemented("final_status_list")

    def final_score(self) -> tuple[float, Colour]:
        raise OperationNotImplemented("final_score")

    def showboard(self) -> BoardState:
        raise OperationNotImplemented("showboard")

    def loadsgf(self, path: str, move_number: int | None) -> None:
        raise OperationNotImplemented("loadsgf")
