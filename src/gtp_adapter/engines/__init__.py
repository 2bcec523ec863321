"""Built-in reference engines."""

from __future__ import annotations

from typing import Callable

from .board import BoardEngine
from .dummy import DummyEngine

ENGINES: dict[str, Callable[[], object]] = {
    "board": BoardEngine,
    "dummy": DummyEngine,
}


def build_engine(name: str) -> object:
    """Instantiate a built-in engine by registry name."""
    try:
        factory = ENGINES[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown engine {name!r}; choose from {', '.join(sorted(ENGINES))}") from None
    return factory()


__all__ = ["BoardEngine", "DummyEngine", "ENGINES", "build_engine"]
