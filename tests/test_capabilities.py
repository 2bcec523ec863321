from __future__ import annotations

from gtp_adapter.capabilities import CapabilityTable, probe_capabilities
from gtp_adapter.engine import EngineBase
from gtp_adapter.engines import BoardEngine, DummyEngine
from gtp_adapter.errors import CannotScore, CannotUndo, OperationNotImplemented
from gtp_adapter.models import PASS, Colour, ColouredMove, Move


class MandatoryOnlyEngine:
    def __init__(self) -> None:
        self.cleared = 0

    def name(self) -> str:
        return "mandatory"

    def version(self) -> str:
        return "1"

    def clear_board(self) -> None:
        self.cleared += 1

    def komi(self, value: float) -> None:
        pass

    def boardsize(self, size: int) -> None:
        pass

    def play(self, move: ColouredMove) -> None:
        pass

    def genmove(self, player: Colour) -> Move:
        return PASS


class PartialEngine(EngineBase, MandatoryOnlyEngine):
    """Supports undo, final_score and a custom command; reg_genmove reports itself missing."""

    def __init__(self) -> None:
        super().__init__()
        self.probed: list[str] = []

    def reg_genmove(self, player: Colour) -> Move:
        self.probed.append("reg_genmove")
        raise OperationNotImplemented()

    def undo(self) -> None:
        self.probed.append("undo")
        raise CannotUndo()

    def final_score(self) -> tuple[float, Colour]:
        self.probed.append("final_score")
        raise CannotScore()

    def custom_command(self, command: str, args: str) -> tuple[bool, str]:
        return True, args


def test_engine_without_optional_operations_has_empty_table() -> None:
    engine = MandatoryOnlyEngine()

    table = probe_capabilities(engine)

    assert table == CapabilityTable()
    assert table.enabled_commands() == []
    assert engine.cleared == 1


def test_table_matches_exactly_the_supported_subset() -> None:
    engine = PartialEngine()

    table = probe_capabilities(engine)

    assert table.enabled_commands() == ["undo", "final_score"]
    assert table.custom_commands is True
    assert table.reg_genmove is False
    assert engine.probed == ["reg_genmove", "undo", "final_score"]


def test_reference_engines_report_their_capabilities() -> None:
    assert probe_capabilities(DummyEngine()).enabled_commands() == ["showboard"]
    assert probe_capabilities(BoardEngine()).as_dict() == {
        "reg_genmove": True,
        "undo": True,
        "fixed_handicap": True,
        "place_free_handicap": True,
        "set_free_handicap": True,
        "time_settings": True,
        "final_status_list": True,
        "final_score": True,
        "showboard": True,
        "custom_commands": True,
    }


def test_probing_leaves_engine_as_after_clear_board() -> None:
    probed = BoardEngine()
    probe_capabilities(probed)

    fresh = BoardEngine()
    fresh.clear_board()

    assert probed.showboard() == fresh.showboard()
    assert probed.custom_command("move_history", "") == (True, "")
    assert probed.time is None
