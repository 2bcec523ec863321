"""Command table construction and per-command dispatch to the engine."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from gtp_adapter.arguments import decode_arguments, decode_vertex, parse_float, parse_int
from gtp_adapter.board import draw_board
from gtp_adapter.capabilities import CapabilityTable, probe_capabilities
from gtp_adapter.engine import GtpEngine
from gtp_adapter.errors import (
    BadVertexList,
    BoardNotEmpty,
    CannotLoadFile,
    CannotScore,
    CannotUndo,
    EngineContractError,
    GtpError,
    InvalidBoardSize,
    InvalidMove,
    InvalidStoneCount,
    OperationNotImplemented,
)
from gtp_adapter.models import MAX_BOARD_SIZE, ArgumentType, Colour, Command, Response, Vertex
from gtp_adapter.parsing import parse_command

PROTOCOL_VERSION = "2"

MANDATORY_COMMANDS: tuple[str, ...] = (
    "protocol_version",
    "name",
    "version",
    "known_command",
    "list_commands",
    "quit",
    "boardsize",
    "clear_board",
    "komi",
    "play",
    "genmove",
)

# Optional command -> capability flag that enables it.
GATED_COMMANDS: Mapping[str, str] = MappingProxyType(
    {
        "reg_genmove": "reg_genmove",
        "undo": "undo",
        "fixed_handicap": "fixed_handicap",
        "place_free_handicap": "place_free_handicap",
        "set_free_handicap": "set_free_handicap",
        "time_settings": "time_settings",
        "final_status_list": "final_status_list",
        "final_score": "final_score",
        "showboard": "showboard",
        "time_left": "reg_genmove",
        "loadsgf": "reg_genmove",
    }
)

ERROR_TEXTS: Mapping[type[GtpError], str] = MappingProxyType(
    {
        error_type: error_type.message
        for error_type in (
            OperationNotImplemented,
            InvalidBoardSize,
            InvalidMove,
            BadVertexList,
            BoardNotEmpty,
            InvalidStoneCount,
            CannotUndo,
            CannotScore,
            CannotLoadFile,
        )
    }
)

SYNTAX_ERROR = "syntax error"
UNKNOWN_COMMAND = "unknown command"

Result = tuple[bool, str]
Handler = Callable[[str], Result]


def _error_text(error: GtpError) -> str:
    for error_type, text in ERROR_TEXTS.items():
        if isinstance(error, error_type):
            return text
    return error.message


def _first_token(args: str) -> str:
    return args.split(" ", 1)[0]


def _tokens(args: str) -> list[str]:
    return [token for token in args.split(" ") if token]


def _vertex_list(vertices: Iterable[Vertex]) -> str:
    return " ".join(vertex.to_gtp() for vertex in vertices)


def _format_score(score: float, winner: Colour) -> str:
    if score == 0:
        return "0"
    prefix = "B" if winner is Colour.BLACK else "W"
    return f"{prefix}+{abs(score):g}"


class GtpDispatcher:
    """Routes tokenized commands to an engine and formats the outcome.

    Constructing a dispatcher probes the engine's optional operations exactly
    once; the resulting command table does not change afterwards.
    """

    def __init__(self, engine: GtpEngine, *, logger: logging.Logger | None = None) -> None:
        self._engine = engine
        self._logger = logger or logging.getLogger("gtp_adapter.dispatcher")
        self._capabilities = probe_capabilities(engine)
        self._commands = self._build_command_table()

    @property
    def capabilities(self) -> CapabilityTable:
        return self._capabilities

    def handle(self, raw: str) -> Response | None:
        """Parse raw input and dispatch its first command; ``None`` if there is none."""
        command = parse_command(raw)
        if command is None:
            return None
        return self.dispatch(command)

    def dispatch(self, command: Command) -> Response:
        self._logger.debug(
            "command_received",
            extra={"command_id": command.id, "command": command.name, "command_args": command.raw_args},
        )
        if command.name == "quit":
            return Response(success=True, text="bye", id=command.id, terminate=True)

        handler = self._commands.get(command.name)
        if handler is None:
            success, text = self._custom_command(command.name, command.raw_args)
        else:
            success, text = handler(command.raw_args)

        if not success:
            self._logger.info("command_failed", extra={"command": command.name, "reason": text})
        return Response(success=success, text=text, id=command.id)

    # ------------------------------------------------------------------
    # Command table
    # ------------------------------------------------------------------
    def _build_command_table(self) -> Mapping[str, Handler]:
        table: dict[str, Handler] = {
            "protocol_version": lambda args: (True, PROTOCOL_VERSION),
            "name": lambda args: (True, self._invoke("name", ())[1]),
            "version": lambda args: (True, self._invoke("version", ())[1]),
            "known_command": self._cmd_known_command,
            "list_commands": lambda args: (True, self._list_commands()),
            "boardsize": self._cmd_boardsize,
            "clear_board": self._cmd_clear_board,
            "komi": self._cmd_komi,
            "play": self._cmd_play,
            "genmove": self._cmd_genmove,
        }
        optional: dict[str, Handler] = {
            "reg_genmove": self._cmd_reg_genmove,
            "undo": self._cmd_undo,
            "fixed_handicap": self._cmd_fixed_handicap,
            "place_free_handicap": self._cmd_place_free_handicap,
            "set_free_handicap": self._cmd_set_free_handicap,
            "time_settings": self._cmd_time_settings,
            "time_left": lambda args: (True, ""),
            "loadsgf": self._cmd_loadsgf,
            "final_status_list": self._cmd_final_status_list,
            "final_score": self._cmd_final_score,
            "showboard": self._cmd_showboard,
        }
        for command, flag in GATED_COMMANDS.items():
            if getattr(self._capabilities, flag):
                table[command] = optional[command]
            else:
                table[command] = lambda args: (False, UNKNOWN_COMMAND)
        return MappingProxyType(table)

    def _invoke(self, operation: str, allowed: tuple[type[GtpError], ...], *args: Any) -> tuple[bool, Any]:
        """Call an engine operation, mapping the errors it may raise to failure text.

        Any other ``GtpError`` means the engine broke its contract and is fatal.
        """
        method = getattr(self._engine, operation)
        try:
            return True, method(*args)
        except allowed as exc:
            return False, _error_text(exc)
        except GtpError as exc:
            self._logger.critical(
                "engine_contract_violation",
                extra={"operation": operation, "error": type(exc).__name__},
            )
            raise EngineContractError(operation, exc) from exc

    def _custom_command(self, name: str, args: str) -> Result:
        if not self._capabilities.custom_commands:
            return False, UNKNOWN_COMMAND
        _, (success, output) = self._invoke("custom_command", (), name, args)
        return bool(success), output

    def _is_custom_command(self, name: str) -> bool:
        if not callable(getattr(self._engine, "known_custom_command", None)):
            return False
        _, known = self._invoke("known_custom_command", (), name)
        return bool(known)

    def _custom_command_names(self) -> list[str]:
        if not callable(getattr(self._engine, "list_custom_commands", None)):
            return []
        _, names = self._invoke("list_custom_commands", ())
        return list(names)

    # ------------------------------------------------------------------
    # Administrative commands
    # ------------------------------------------------------------------
    def _list_commands(self) -> str:
        names = [*MANDATORY_COMMANDS, *self._capabilities.enabled_commands(), *self._custom_command_names()]
        return "\n".join(names)

    def _cmd_known_command(self, args: str) -> Result:
        name = _first_token(args)
        if not name:
            return False, SYNTAX_ERROR
        if name in MANDATORY_COMMANDS:
            known = True
        elif name in self._capabilities.enabled_commands():
            known = True
        elif name in GATED_COMMANDS:
            # time_left and loadsgf are served but not advertised
            known = False
        else:
            known = self._is_custom_command(name)
        return True, "true" if known else "false"

    # ------------------------------------------------------------------
    # Game setup and play
    # ------------------------------------------------------------------
    def _cmd_boardsize(self, args: str) -> Result:
        size = parse_int(_first_token(args))
        if size is None:
            return False, SYNTAX_ERROR
        if not 1 <= size <= MAX_BOARD_SIZE:
            return False, ERROR_TEXTS[InvalidBoardSize]
        ok, result = self._invoke("boardsize", (InvalidBoardSize,), size)
        return (True, "") if ok else (False, result)

    def _cmd_clear_board(self, args: str) -> Result:
        self._invoke("clear_board", ())
        return True, ""

    def _cmd_komi(self, args: str) -> Result:
        value = parse_float(_first_token(args))
        if value is None:
            return False, SYNTAX_ERROR
        self._invoke("komi", (), value)
        return True, ""

    def _cmd_play(self, args: str) -> Result:
        decoded = decode_arguments(args, (ArgumentType.COLOURED_MOVE,))
        if decoded is None:
            return False, SYNTAX_ERROR
        ok, result = self._invoke("play", (InvalidMove,), decoded[0])
        return (True, "") if ok else (False, result)

    def _cmd_genmove(self, args: str) -> Result:
        decoded = decode_arguments(args, (ArgumentType.COLOUR,))
        if decoded is None:
            return False, SYNTAX_ERROR
        _, move = self._invoke("genmove", (), decoded[0])
        return True, move.to_gtp()

    def _cmd_reg_genmove(self, args: str) -> Result:
        decoded = decode_arguments(args, (ArgumentType.COLOUR,))
        if decoded is None:
            return False, SYNTAX_ERROR
        _, move = self._invoke("reg_genmove", (), decoded[0])
        return True, move.to_gtp()

    def _cmd_undo(self, args: str) -> Result:
        ok, result = self._invoke("undo", (CannotUndo,))
        return (True, "") if ok else (False, result)

    # ------------------------------------------------------------------
    # Handicap and time
    # ------------------------------------------------------------------
    def _cmd_fixed_handicap(self, args: str) -> Result:
        number = parse_int(_first_token(args))
        if number is None:
            return False, SYNTAX_ERROR
        if not 2 <= number <= 9:
            return False, ERROR_TEXTS[InvalidStoneCount]
        ok, result = self._invoke("fixed_handicap", (BoardNotEmpty, InvalidStoneCount), number)
        return (True, _vertex_list(result)) if ok else (False, result)

    def _cmd_place_free_handicap(self, args: str) -> Result:
        number = parse_int(_first_token(args))
        if number is None:
            return False, SYNTAX_ERROR
        if number < 2:
            return False, ERROR_TEXTS[InvalidStoneCount]
        ok, result = self._invoke("place_free_handicap", (BoardNotEmpty, InvalidStoneCount), number)
        return (True, _vertex_list(result)) if ok else (False, result)

    def _cmd_set_free_handicap(self, args: str) -> Result:
        vertices = [decode_vertex(token) for token in _tokens(args)]
        if not vertices or any(vertex is None for vertex in vertices):
            return False, SYNTAX_ERROR
        if len(vertices) < 2:
            return False, ERROR_TEXTS[BadVertexList]
        ok, result = self._invoke("set_free_handicap", (BoardNotEmpty, BadVertexList), vertices)
        return (True, "") if ok else (False, result)

    def _cmd_time_settings(self, args: str) -> Result:
        values = [parse_int(token) for token in _tokens(args)[:3]]
        if len(values) < 3 or any(value is None for value in values):
            return False, SYNTAX_ERROR
        self._invoke("time_settings", (), *values)
        return True, ""

    def _cmd_loadsgf(self, args: str) -> Result:
        tokens = _tokens(args)
        if not tokens:
            return False, SYNTAX_ERROR
        move_number = None
        if len(tokens) > 1:
            move_number = parse_int(tokens[1])
            if move_number is None:
                return False, SYNTAX_ERROR
        # absence of loadsgf cannot be probed, so it may still report itself missing
        ok, result = self._invoke("loadsgf", (CannotLoadFile, OperationNotImplemented), tokens[0], move_number)
        return (True, "") if ok else (False, result)

    # ------------------------------------------------------------------
    # End of game
    # ------------------------------------------------------------------
    def _cmd_final_status_list(self, args: str) -> Result:
        decoded = decode_arguments(args, (ArgumentType.STONE_STATUS,))
        if decoded is None:
            return False, SYNTAX_ERROR
        _, vertices = self._invoke("final_status_list", (), decoded[0])
        return True, _vertex_list(vertices)

    def _cmd_final_score(self, args: str) -> Result:
        ok, result = self._invoke("final_score", (CannotScore,))
        if not ok:
            return False, result
        score, winner = result
        return True, _format_score(score, winner)

    def _cmd_showboard(self, args: str) -> Result:
        _, state = self._invoke("showboard", ())
        try:
            rendered = draw_board(*state)
        except ValueError as exc:
            self._logger.critical("engine_contract_violation", extra={"operation": "showboard", "error": str(exc)})
            raise EngineContractError("showboard", exc) from exc
        return True, "\n" + rendered
