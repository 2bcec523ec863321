"""Go Text Protocol adapter: parses, validates and dispatches GTP commands to an engine."""

from .dispatcher import GtpDispatcher
from .engine import EngineBase, GtpEngine
from .models import Colour, ColouredMove, Command, Move, Response, StoneStatus, Vertex
from .serve import serve

__all__ = [
    "Colour",
    "ColouredMove",
    "Command",
    "EngineBase",
    "GtpDispatcher",
    "GtpEngine",
    "Move",
    "Response",
    "StoneStatus",
    "Vertex",
    "serve",
]
