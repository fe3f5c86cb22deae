"""List rendering: one-shot :func:`print_list` and interactive
:func:`paginated_list`.

The navigator keeps a single piece of state, the current page, held in
an immutable :class:`~simple_cli.core.models.PaginationState` that is
replaced on every command.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from simple_cli.core.models import PaginationState
from simple_cli.core.protocols import LineSink, LineSource
from simple_cli.infra.streams import resolve_sink, resolve_source
from simple_cli.infra.terminal import clear_terminal
from simple_cli.interactive.inputs import (
    select_number_from_choices,
    select_string_from_choices,
)

logger = logging.getLogger(__name__)

NAVIGATION_PROMPT: str = (
    "Press N to view the next page, P for previous, S for a specific page, "
    "or E to Exit."
)
PAGE_PROMPT: str = "Enter the page you would like to view."
NAVIGATION_COMMANDS: tuple[str, ...] = ("N", "P", "S", "E")


def print_list(
    header: str | None,
    items: Sequence[Any],
    *,
    sink: LineSink | None = None,
) -> None:
    """Write *header* (when present) and then each item on its own line."""
    out = resolve_sink(sink)
    if header is not None:
        out.write_line(header)
    for item in items:
        out.write_line(str(item))


def _render(header: str | None, state: PaginationState, sink: LineSink) -> None:
    print_list(header, state.page_items, sink=sink)
    sink.write_line(state.indicator)


def _apply_command(
    command: str,
    state: PaginationState,
    source: LineSource,
    sink: LineSink,
) -> PaginationState:
    if command == "n":
        return state.next_page()
    if command == "p":
        return state.previous_page()
    if command == "s":
        page = select_number_from_choices(
            PAGE_PROMPT,
            PAGE_PROMPT,
            list(range(1, state.total_pages + 1)),
            False,
            number_type=int,
            source=source,
            sink=sink,
        )
        return state.go_to(page)
    return state


def paginated_list(
    header: str | None,
    items: Sequence[Any],
    items_per_page: int,
    clear_on_update: bool = False,
    *,
    source: LineSource | None = None,
    sink: LineSink | None = None,
) -> None:
    """Display *items* one page at a time until the user exits.

    Parameters
    ----------
    header:
        Shown above every page.
    items:
        Anything with a ``str()``; rendered one per line.
    items_per_page:
        Positive number of items on each page.
    clear_on_update:
        Clear the terminal after every command, so each page replaces
        the previous one on screen.

    Commands (case-insensitive): ``N`` next, ``P`` previous, ``S`` jump
    to a page, ``E`` exit.  ``N`` and ``P`` stop at the last and first
    page.

    Raises
    ------
    InvalidPageSizeError
        If *items_per_page* is not a positive ``int``.
    InputStreamError
        If the input stream fails or closes.

    Example::

        paginated_list("Here is my paginated list:", ["Moe", "Larry", "Curly"], 2, True)
    """
    state = PaginationState.start(items, items_per_page)
    in_ = resolve_source(source)
    out = resolve_sink(sink)

    finished = False
    while not finished:
        _render(header, state, out)
        command = select_string_from_choices(
            NAVIGATION_PROMPT,
            NAVIGATION_PROMPT,
            NAVIGATION_COMMANDS,
            False,
            True,
            source=in_,
            sink=out,
        ).lower()
        if command == "e":
            finished = True
        else:
            previous = state.page
            state = _apply_command(command, state, in_, out)
            logger.debug("Command %r: page %d -> %d", command, previous, state.page)
        if clear_on_update:
            clear_terminal(sink=out)
