"""Line normalization and command tokenization for the text protocol."""

from __future__ import annotations

import re

from gtp_adapter.models import Command

MAX_COMMAND_ID = 2**32 - 1

_ID_RE = re.compile(r"[0-9]+")


def _is_control(char: str) -> bool:
    code = ord(char)
    return code < 9 or 10 < code < 32 or code == 127


def normalize(raw: str) -> str:
    """Strip comments and control characters, collapse whitespace and blank lines."""
    output: list[str] = []
    last_char = "\n"
    in_comment = False
    for char in raw:
        if _is_control(char):
            continue
        if char == "\n":
            in_comment = False
            if last_char == "\n":
                continue
            last_char = "\n"
            output.append(char)
            continue
        if char == "#":
            in_comment = True
            continue
        if in_comment:
            continue
        if char in (" ", "\t"):
            # leading and repeated whitespace
            if last_char.isspace():
                continue
            last_char = " "
            output.append(" ")
            continue
        last_char = char
        output.append(char)
    return "".join(output)


def _parse_id(token: str) -> int | None:
    if not _ID_RE.fullmatch(token):
        return None
    value = int(token)
    if value > MAX_COMMAND_ID:
        return None
    return value


def tokenize(line: str) -> Command | None:
    """Split a normalized, newline-free line into id, command name and arguments.

    A line made only of digits is an id without a command and yields ``None``.
    """
    if not line or line.isspace():
        return None

    first, _, rest = line.partition(" ")
    command_id = _parse_id(first)
    region = rest if command_id is not None else line

    name, _, args = region.partition(" ")
    if not name:
        return None
    return Command(id=command_id, name=name, raw_args=args)


def parse_command(raw: str) -> Command | None:
    """Normalize ``raw`` and tokenize its first line; later lines are discarded."""
    first_line = normalize(raw).split("\n", 1)[0]
    return tokenize(first_line)
