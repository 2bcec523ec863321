"""One-shot discovery of the optional operations an engine supports."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Callable

from gtp_adapter.errors import EngineContractError, GtpError, OperationNotImplemented
from gtp_adapter.models import Colour, StoneStatus, Vertex

logger = logging.getLogger("gtp_adapter.capabilities")


@dataclass(frozen=True, slots=True)
class CapabilityTable:
    """Which optional commands are enabled for one engine instance."""

    reg_genmove: bool = False
    undo: bool = False
    fixed_handicap: bool = False
    place_free_handicap: bool = False
    set_free_handicap: bool = False
    time_settings: bool = False
    final_status_list: bool = False
    final_score: bool = False
    showboard: bool = False
    custom_commands: bool = False

    def enabled_commands(self) -> list[str]:
        """Enabled optional protocol commands, in advertisement order."""
        return [
            field.name
            for field in fields(self)
            if field.name != "custom_commands" and getattr(self, field.name)
        ]

    def as_dict(self) -> dict[str, bool]:
        return asdict(self)


# Benign invocation used to probe each optional operation.
_PROBES: tuple[tuple[str, Callable[[Any], Any]], ...] = (
    ("reg_genmove", lambda op: op(Colour.BLACK)),
    ("undo", lambda op: op()),
    ("fixed_handicap", lambda op: op(1)),
    ("place_free_handicap", lambda op: op(1)),
    ("set_free_handicap", lambda op: op([Vertex(2, 2)])),
    ("time_settings", lambda op: op(5, 0, 0)),
    ("final_status_list", lambda op: op(StoneStatus.ALIVE)),
    ("final_score", lambda op: op()),
    ("showboard", lambda op: op()),
)


def _probe(engine: object, operation: str, invoke: Callable[[Any], Any]) -> bool:
    method = getattr(engine, operation, None)
    if not callable(method):
        return False
    try:
        invoke(method)
    except OperationNotImplemented:
        return False
    except GtpError:
        # Any other domain error still proves the operation exists.
        return True
    return True


def probe_capabilities(engine: object) -> CapabilityTable:
    """Invoke every optional operation once, then reset the engine with ``clear_board``."""
    found: dict[str, bool] = {}
    for operation, invoke in _PROBES:
        found[operation] = _probe(engine, operation, invoke)
        logger.debug("capability_probed", extra={"operation": operation, "enabled": found[operation]})

    found["custom_commands"] = callable(getattr(engine, "custom_command", None))

    try:
        engine.clear_board()  # type: ignore[attr-defined]
    except GtpError as exc:
        logger.critical("engine_contract_violation", extra={"operation": "clear_board", "error": type(exc).__name__})
        raise EngineContractError("clear_board", exc) from exc

    table = CapabilityTable(**found)
    logger.info("capabilities_probed", extra={"enabled": table.enabled_commands()})
    return table
