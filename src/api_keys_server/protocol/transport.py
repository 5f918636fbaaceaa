"""Line transport — newline-delimited JSON over stdin/stdout.

Each transport satisfies the :class:`LineTransport` protocol, providing
``receive`` and ``send``.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Protocol, TextIO, runtime_checkable


@runtime_checkable
class LineTransport(Protocol):
    """Abstract transport for line-framed JSON-RPC communication."""

    def receive(self) -> str | None: ...
    def send(self, data: dict[str, Any]) -> None: ...


class StdioTransport:
    """Reads request lines from stdin and writes response lines to stdout.

    A line is the unit of framing: one JSON value per line, no length
    prefix.  Streams default to the process's ``sys.stdin`` / ``sys.stdout``
    and can be swapped for any text stream.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def receive(self) -> str | None:
        """Read one line without its terminator; ``None`` at end of stream."""
        line = self._stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def send(self, data: dict[str, Any]) -> None:
        """Write *data* as one compact JSON line and flush."""
        self._stdout.write(json.dumps(data, separators=(",", ":"), allow_nan=False) + "\n")
        self._stdout.flush()
