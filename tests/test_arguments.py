from __future__ import annotations

import pytest

from gtp_adapter.arguments import (
    decode_arguments,
    decode_colour,
    decode_move,
    decode_stone_status,
    decode_vertex,
    parse_float,
    parse_int,
)
from gtp_adapter.models import (
    COLUMN_LETTERS,
    PASS,
    RESIGN,
    ArgumentType,
    Colour,
    ColouredMove,
    Move,
    StoneStatus,
    Vertex,
)


def test_vertex_decoding_skips_letter_i() -> None:
    assert decode_vertex("A1") == Vertex(1, 1)
    assert decode_vertex("H8") == Vertex(8, 8)
    assert decode_vertex("J1") == Vertex(9, 1)
    assert decode_vertex("T19") == Vertex(19, 19)
    assert decode_vertex("Z25") == Vertex(25, 25)
    assert decode_vertex("c7") == Vertex(3, 7)


def test_every_vertex_decodes_back_to_its_coordinates() -> None:
    for x in range(1, 26):
        for y in range(1, 26):
            text = f"{COLUMN_LETTERS[x - 1]}{y}"
            assert decode_vertex(text) == Vertex(x, y)
            assert Vertex(x, y).to_gtp() == text


@pytest.mark.parametrize("token", ["Z26", "I5", "", "A0", "A", "5A", "AA1", "A100", "A-1", "ä3"])
def test_vertex_rejects_malformed_tokens(token: str) -> None:
    assert decode_vertex(token) is None


def test_vertex_rendering_matches_known_points() -> None:
    assert Vertex(8, 7).to_gtp() == "H7"
    assert Vertex(9, 13).to_gtp() == "J13"
    assert Vertex(19, 1).to_gtp() == "T1"


def test_vertex_constructor_enforces_range() -> None:
    with pytest.raises(ValueError):
        Vertex(26, 13)
    assert Vertex.from_coords(0, 3) is None
    assert Vertex.from_coords(4, 4) == Vertex(4, 4)
    assert Vertex(3, 7).to_coords() == (3, 7)


def test_colour_move_and_status_are_case_insensitive() -> None:
    assert decode_colour("B") is Colour.BLACK
    assert decode_colour("White") is Colour.WHITE
    assert decode_colour("red") is None
    assert decode_move("PASS") == PASS
    assert decode_move("Resign") == RESIGN
    assert RESIGN.is_resign and not RESIGN.is_pass
    assert decode_move("d4") == Move.stone(Vertex(4, 4))
    assert decode_move("I4") is None
    assert decode_stone_status("SEKI") is StoneStatus.SEKI
    assert decode_stone_status("undecided") is None


def test_decode_arguments_coloured_move_consumes_two_tokens() -> None:
    decoded = decode_arguments("w Q16", (ArgumentType.COLOURED_MOVE,))

    assert decoded == [ColouredMove(player=Colour.WHITE, move=Move.stone(Vertex(16, 16)))]


def test_decode_arguments_mixed_sequence() -> None:
    decoded = decode_arguments(
        "black A1 dead",
        (ArgumentType.COLOUR, ArgumentType.VERTEX, ArgumentType.STONE_STATUS),
    )

    assert decoded == [Colour.BLACK, Vertex(1, 1), StoneStatus.DEAD]


def test_decode_arguments_is_all_or_nothing() -> None:
    assert decode_arguments("B", (ArgumentType.COLOURED_MOVE,)) is None
    assert decode_arguments("B I9", (ArgumentType.COLOURED_MOVE,)) is None
    assert decode_arguments("", (ArgumentType.COLOUR,)) is None
    assert decode_arguments("b c3", (ArgumentType.COLOUR, ArgumentType.VERTEX, ArgumentType.MOVE)) is None


def test_decode_arguments_ignores_surplus_tokens() -> None:
    assert decode_arguments("b extra ", (ArgumentType.COLOUR,)) == [Colour.BLACK]


def test_scalar_helpers() -> None:
    assert parse_int("19") == 19
    assert parse_int("-1") is None
    assert parse_int("1.5") is None
    assert parse_float("6.5") == 6.5
    assert parse_float("-3") == -3.0
    assert parse_float("komi") is None
