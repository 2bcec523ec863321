"""Engine-reported failures and the fatal contract violation."""

from __future__ import annotations


class GtpError(Exception):
    """Base class for failures an engine may report to the adapter."""

    message = "error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)


class OperationNotImplemented(GtpError):
    """Signals that an optional operation is not supported by the engine."""

    message = "unknown command"


class InvalidBoardSize(GtpError):
    message = "invalid board size"


class InvalidMove(GtpError):
    message = "invalid move"


class BadVertexList(GtpError):
    message = "bad vertex list"


class BoardNotEmpty(GtpError):
    message = "board not empty"


class InvalidStoneCount(GtpError):
    message = "invalid number of stones"


class CannotUndo(GtpError):
    message = "cannot undo"


class CannotScore(GtpError):
    message = "cannot score"


class CannotLoadFile(GtpError):
    message = "cannot load file"


class EngineContractError(RuntimeError):
    """Raised when an engine reports an error its operation must never produce."""

    def __init__(self, operation: str, error: Exception) -> None:
        super().__init__(
            f"engine operation {operation!r} raised undocumented {type(error).__name__}: {error}"
        )
        self.operation = operation
        self.error = error
