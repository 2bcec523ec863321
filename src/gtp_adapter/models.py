"""Protocol value types: colours, vertices, moves, commands and responses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_BOARD_SIZE = 25

# Column letters used on the wire; "I" is skipped.
COLUMN_LETTERS = "ABCDEFGHJKLMNOPQRSTUVWXYZ"


class Colour(str, Enum):
    BLACK = "black"
    WHITE = "white"

    def to_gtp(self) -> str:
        return self.value


class StoneStatus(str, Enum):
    ALIVE = "alive"
    DEAD = "dead"
    SEKI = "seki"


class ArgumentType(str, Enum):
    """Kinds of typed arguments a command may expect."""

    COLOUR = "colour"
    VERTEX = "vertex"
    MOVE = "move"
    COLOURED_MOVE = "coloured_move"
    STONE_STATUS = "stone_status"


@dataclass(frozen=True, slots=True)
class Vertex:
    """A board point; ``x`` is the column (1 = A), ``y`` the row, both in 1..25."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not (1 <= self.x <= MAX_BOARD_SIZE and 1 <= self.y <= MAX_BOARD_SIZE):
            raise ValueError(f"Vertex coordinates out of range: ({self.x}, {self.y})")

    @classmethod
    def from_coords(cls, x: int, y: int) -> Vertex | None:
        if not (1 <= x <= MAX_BOARD_SIZE and 1 <= y <= MAX_BOARD_SIZE):
            return None
        return cls(x, y)

    def to_coords(self) -> tuple[int, int]:
        return self.x, self.y

    def to_gtp(self) -> str:
        return f"{COLUMN_LETTERS[self.x - 1]}{self.y}"


class MoveKind(str, Enum):
    STONE = "stone"
    PASS = "pass"
    RESIGN = "resign"


@dataclass(frozen=True, slots=True)
class Move:
    """A stone placement, a pass or a resignation."""

    kind: MoveKind
    vertex: Vertex | None = None

    def __post_init__(self) -> None:
        if (self.kind is MoveKind.STONE) != (self.vertex is not None):
            raise ValueError("Only stone moves carry a vertex")

    @classmethod
    def stone(cls, vertex: Vertex) -> Move:
        return cls(MoveKind.STONE, vertex)

    @property
    def is_pass(self) -> bool:
        return self.kind is MoveKind.PASS

    @property
    def is_resign(self) -> bool:
        return self.kind is MoveKind.RESIGN

    def to_gtp(self) -> str:
        if self.vertex is not None:
            return self.vertex.to_gtp()
        return self.kind.value


PASS = Move(MoveKind.PASS)
RESIGN = Move(MoveKind.RESIGN)


@dataclass(frozen=True, slots=True)
class ColouredMove:
    player: Colour
    move: Move

    def to_gtp(self) -> str:
        return f"{self.player.to_gtp()} {self.move.to_gtp()}"


@dataclass(frozen=True, slots=True)
class Command:
    """One tokenized input line."""

    id: int | None
    name: str
    raw_args: str = ""


@dataclass(frozen=True, slots=True)
class Response:
    """Outcome of a dispatch cycle, before protocol framing."""

    success: bool
    text: str = ""
    id: int | None = None
    terminate: bool = False

    def format(self) -> str:
        prefix = "=" if self.success else "?"
        ident = "" if self.id is None else str(self.id)
        return f"{prefix}{ident} {self.text}"
