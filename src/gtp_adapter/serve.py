"""Synchronous request/response pump over a text stream."""

from __future__ import annotations

import logging
from typing import Iterator, TextIO

from gtp_adapter.dispatcher import GtpDispatcher
from gtp_adapter.models import Command, Response

logger = logging.getLogger("gtp_adapter.serve")


def _read_lines(stdin: TextIO) -> Iterator[str]:
    # undecodable bytes are replaced with U+FFFD
    buffer = getattr(stdin, "buffer", None)
    if buffer is None:
        yield from stdin
        return
    for raw in buffer:
        yield raw.decode("utf-8", errors="replace")


def _write(stream: TextIO, response: Response) -> None:
    stream.write(response.format() + "\n\n")
    stream.flush()
    logger.debug("response_sent", extra={"success": response.success, "command_id": response.id})


def serve(dispatcher: GtpDispatcher, stdin: TextIO, stdout: TextIO) -> int:
    """Answer one command per input line until ``quit`` or end of input.

    End of input is treated as an implicit ``quit``. Returns the number of
    responses written.
    """
    answered = 0
    for line in _read_lines(stdin):
        response = dispatcher.handle(line)
        if response is None:
            continue
        _write(stdout, response)
        answered += 1
        if response.terminate:
            logger.info("session_closed", extra={"reason": "quit", "answered": answered})
            return answered

    _write(stdout, dispatcher.dispatch(Command(id=None, name="quit")))
    answered += 1
    logger.info("session_closed", extra={"reason": "end_of_input", "answered": answered})
    return answered
