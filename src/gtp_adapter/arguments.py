"""Typed argument decoding.

Every decoder returns ``None`` on failure rather than raising; the dispatcher
turns a failed decode into a ``syntax error`` response.
"""

from __future__ import annotations

import re
from typing import Sequence, Union

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

ArgumentValue = Union[Colour, Vertex, Move, ColouredMove, StoneStatus]

_VERTEX_RE = re.compile(r"([A-Z])([0-9]{1,2})")
_INT_RE = re.compile(r"[0-9]+")

_COLOURS = {
    "b": Colour.BLACK,
    "black": Colour.BLACK,
    "w": Colour.WHITE,
    "white": Colour.WHITE,
}

_STATUSES = {status.value: status for status in StoneStatus}


def decode_colour(token: str) -> Colour | None:
    return _COLOURS.get(token.lower())


def decode_vertex(token: str) -> Vertex | None:
    match = _VERTEX_RE.fullmatch(token.upper())
    if match is None:
        return None
    letter, number = match.groups()
    if letter not in COLUMN_LETTERS:
        return None
    return Vertex.from_coords(COLUMN_LETTERS.index(letter) + 1, int(number))


def decode_move(token: str) -> Move | None:
    lowered = token.lower()
    if lowered == "pass":
        return PASS
    if lowered == "resign":
        return RESIGN
    vertex = decode_vertex(token)
    if vertex is None:
        return None
    return Move.stone(vertex)


def decode_stone_status(token: str) -> StoneStatus | None:
    return _STATUSES.get(token.lower())


def decode_coloured_move(colour_token: str, move_token: str) -> ColouredMove | None:
    colour = decode_colour(colour_token)
    move = decode_move(move_token)
    if colour is None or move is None:
        return None
    return ColouredMove(player=colour, move=move)


_SINGLE_TOKEN_DECODERS = {
    ArgumentType.COLOUR: decode_colour,
    ArgumentType.VERTEX: decode_vertex,
    ArgumentType.MOVE: decode_move,
    ArgumentType.STONE_STATUS: decode_stone_status,
}


def decode_arguments(args: str, expected: Sequence[ArgumentType]) -> list[ArgumentValue] | None:
    """Decode ``args`` against ``expected``; all-or-nothing.

    Tokens are separated by single spaces. ``COLOURED_MOVE`` consumes two tokens.
    Surplus tokens are ignored.
    """
    tokens = args.split(" ")
    position = 0
    values: list[ArgumentValue] = []

    for arg_type in expected:
        if arg_type is ArgumentType.COLOURED_MOVE:
            if position + 1 >= len(tokens):
                return None
            value = decode_coloured_move(tokens[position], tokens[position + 1])
            position += 2
        else:
            if position >= len(tokens):
                return None
            value = _SINGLE_TOKEN_DECODERS[arg_type](tokens[position])
            position += 1
        if value is None:
            return None
        values.append(value)

    return values


def parse_int(token: str) -> int | None:
    """Parse a non-negative decimal integer."""
    if not _INT_RE.fullmatch(token):
        return None
    return int(token)


def parse_float(token: str) -> float | None:
    try:
        return float(token)
    except ValueError:
        return None
