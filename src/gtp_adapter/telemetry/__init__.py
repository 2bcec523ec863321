"""Logging setup for the adapter process."""

from .logging import configure_logging

__all__ = ["configure_logging"]
