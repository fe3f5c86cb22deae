"""Protocols (interfaces) consumed by the core layer.

The prompt loop and validators never touch ``sys.stdin`` or
``sys.stdout`` directly.  They talk to a :class:`LineSource` and a
:class:`LineSink`; the infrastructure layer provides the terminal-backed
implementations and tests provide in-memory ones.
"""

from __future__ import annotations

from typing import Protocol


class LineSource(Protocol):
    """Contract for line-oriented input backends."""

    def read_line(self) -> str:
        """Return the next line of input, without any trimming.

        Raises
        ------
        InputStreamError
            When the stream is closed, exhausted, or fails.  Backends
            must never return a sentinel for end-of-input.
        """
        ...  # pragma: no cover


class LineSink(Protocol):
    """Contract for line-oriented output backends."""

    def write_line(self, text: str) -> None:
        """Write *text* followed by a newline."""
        ...  # pragma: no cover

    def write(self, text: str) -> None:
        """Write *text* verbatim (no newline) and flush."""
        ...  # pragma: no cover
