"""Infrastructure: terminal-backed line source and sink.

These adapters bind the :class:`~simple_cli.core.protocols.LineSource`
and :class:`~simple_cli.core.protocols.LineSink` protocols to the
process's standard streams.

Rules
-----
* ``sys.stdin`` / ``sys.stdout`` are looked up at call time, never
  cached at import, so redirected or captured streams are honoured.
* Every raw ``OSError`` and end-of-input is re-raised as
  :class:`~simple_cli.exceptions.InputStreamError`.
"""

from __future__ import annotations

import sys
from typing import TextIO

from simple_cli.core.protocols import LineSink, LineSource
from simple_cli.exceptions import InputStreamError


class StdinLineSource:
    """Read lines from *stream*, or from ``sys.stdin`` when omitted."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream

    def read_line(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        try:
            line = stream.readline()
        except (OSError, ValueError) as exc:
            # ValueError: I/O operation on closed file.
            raise InputStreamError(
                f"Unexpected stdin error while reading input: {exc}",
            ) from exc
        if line == "":
            raise InputStreamError(
                "Unexpected stdin error while reading input: end of input reached.",
                hint="The input stream was closed before a valid value was entered.",
            )
        return line


class StdoutLineSink:
    """Write lines to *stream*, or to ``sys.stdout`` when omitted."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream

    def _target(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, text: str) -> None:
        target = self._target()
        target.write(f"{text}\n")
        target.flush()

    def write(self, text: str) -> None:
        target = self._target()
        target.write(text)
        target.flush()


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

def resolve_source(source: LineSource | None) -> LineSource:
    """Return *source*, or a stdin-backed source when ``None``."""
    return source if source is not None else StdinLineSource()


def resolve_sink(sink: LineSink | None) -> LineSink:
    """Return *sink*, or a stdout-backed sink when ``None``."""
    return sink if sink is not None else StdoutLineSink()
