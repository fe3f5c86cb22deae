"""Infrastructure: terminal control."""

from __future__ import annotations

from simple_cli.core.protocols import LineSink
from simple_cli.infra.streams import resolve_sink

CLEAR_SEQUENCE: str = "\x1bc"
"""``ESC c``: full terminal reset, which clears the visible screen."""


def clear_terminal(*, sink: LineSink | None = None) -> None:
    """Clear all printed lines from the terminal.

    Best-effort: the sequence is written and flushed, nothing else.
    """
    resolve_sink(sink).write(CLEAR_SEQUENCE)
