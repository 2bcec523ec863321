from __future__ import annotations

import pytest

from gtp_adapter.engines import BoardEngine, DummyEngine, build_engine
from gtp_adapter.engines.board import fixed_handicap_points, max_fixed_handicap
from gtp_adapter.errors import (
    BadVertexList,
    BoardNotEmpty,
    CannotUndo,
    InvalidBoardSize,
    InvalidMove,
    InvalidStoneCount,
)
from gtp_adapter.models import PASS, Colour, ColouredMove, Move, Vertex


def _names(points: list[Vertex]) -> list[str]:
    return [point.to_gtp() for point in points]


def test_fixed_handicap_patterns() -> None:
    assert _names(fixed_handicap_points(9, 5)) == ["C3", "G7", "C7", "G3", "E5"]
    assert _names(fixed_handicap_points(19, 6)) == ["D4", "Q16", "D16", "Q4", "D10", "Q10"]
    assert _names(fixed_handicap_points(19, 9))[-1] == "K10"
    assert len(fixed_handicap_points(19, 8)) == 8
    assert max_fixed_handicap(6) == 0
    assert max_fixed_handicap(7) == 4
    assert max_fixed_handicap(10) == 4
    with pytest.raises(InvalidStoneCount):
        fixed_handicap_points(10, 5)


def test_play_rejects_occupied_and_off_board_points() -> None:
    engine = BoardEngine(board_size=5)
    engine.play(ColouredMove(Colour.BLACK, Move.stone(Vertex(3, 3))))

    with pytest.raises(InvalidMove):
        engine.play(ColouredMove(Colour.WHITE, Move.stone(Vertex(3, 3))))
    with pytest.raises(InvalidMove):
        engine.play(ColouredMove(Colour.WHITE, Move.stone(Vertex(6, 1))))
    engine.play(ColouredMove(Colour.WHITE, PASS))


def test_genmove_prefers_centre_and_passes_when_full() -> None:
    engine = BoardEngine()
    assert engine.genmove(Colour.BLACK).to_gtp() == "K10"
    assert engine.genmove(Colour.WHITE).to_gtp() == "K9"

    engine.boardsize(2)
    for _ in range(4):
        assert not engine.genmove(Colour.BLACK).is_pass
    assert engine.genmove(Colour.WHITE) == PASS


def test_undo_takes_back_last_move() -> None:
    engine = BoardEngine()
    with pytest.raises(CannotUndo):
        engine.undo()

    engine.play(ColouredMove(Colour.BLACK, Move.stone(Vertex(4, 4))))
    engine.undo()

    assert engine.showboard() == (19, [], [], 0, 0)


def test_handicap_requires_empty_board() -> None:
    engine = BoardEngine(board_size=5)
    assert _names(engine.place_free_handicap(3)) == ["C3", "C2", "B3"]

    with pytest.raises(BoardNotEmpty):
        engine.fixed_handicap(2)
    with pytest.raises(BoardNotEmpty):
        engine.set_free_handicap([Vertex(1, 1), Vertex(2, 2)])

    engine.clear_board()
    with pytest.raises(BadVertexList):
        engine.set_free_handicap([Vertex(1, 1), Vertex(9, 9)])


def test_boardsize_limits() -> None:
    with pytest.raises(InvalidBoardSize):
        BoardEngine().boardsize(1)
    with pytest.raises(InvalidBoardSize):
        DummyEngine().boardsize(0)


def test_registry_builds_known_engines() -> None:
    assert isinstance(build_engine("board"), BoardEngine)
    assert isinstance(build_engine("DUMMY"), DummyEngine)
    with pytest.raises(KeyError):
        build_engine("gnugo")
