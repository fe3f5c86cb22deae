"""Status console for the demo application, with optional Rich support.

Library prompts never go through here; they are plain text on stdout.
This console carries the application's own messages (errors, hints,
interrupts) to stderr.  Rich is imported lazily so ``--help`` and
``--version`` keep working when it is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from simple_cli.exceptions import MissingDependencyError

_MARKUP_TAG = re.compile(r"\[/?[a-z ]+\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def strip_markup(text: str) -> str:
    """Remove simple ``[style]...[/style]`` tags for plain output."""
    return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain stderr fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
