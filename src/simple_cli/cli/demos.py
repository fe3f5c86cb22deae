"""Demo programs showing the prompt helpers in small games.

Each demo takes optional ``source``/``sink`` arguments that are passed
straight through to the library, so the demos run unchanged against
in-memory streams.
"""

from __future__ import annotations

import random

from simple_cli.core.protocols import LineSink, LineSource
from simple_cli.infra.streams import resolve_sink
from simple_cli.infra.terminal import clear_terminal
from simple_cli.interactive import get_number, paginated_list, select_string_from_choices

COLORS: tuple[str, ...] = (
    "Blue", "Red", "Green", "Yellow", "Orange", "Purple",
    "Brown", "Pink", "Gray", "Black", "White",
)

ANIMALS: tuple[str, ...] = (
    "Hippo", "Elephant", "Lion", "Crocodile", "Giraffe", "Cheetah", "Hyena",
    "Rhino", "Buffalo", "Gorilla", "Mongoose", "Impala", "Mosquito", "Bird",
)

SAFARI_HEADER: str = "Animals seen on the Super Cool Safari:"


# ---------------------------------------------------------------------------
# Guessing game
# ---------------------------------------------------------------------------

def guessing_game(
    secret: int | None = None,
    *,
    rng: random.Random | None = None,
    clear: bool = True,
    source: LineSource | None = None,
    sink: LineSink | None = None,
) -> int:
    """Play until the secret number in ``[1, 100]`` is guessed.

    Returns the number of guesses taken.
    """
    if secret is None:
        secret = (rng or random.Random()).randint(1, 100)
    out = resolve_sink(sink)
    if clear:
        clear_terminal(sink=out)

    guesses = 0
    while True:
        guess = get_number(
            "Pick a number between 1 and 100!",
            "Try Again.",
            1,
            100,
            source=source,
            sink=out,
        )
        if clear:
            clear_terminal(sink=out)
        guesses += 1
        if guess < secret:
            out.write_line(f"{guess} is too low!")
        elif guess > secret:
            out.write_line(f"{guess} is too high!")
        else:
            out.write_line("YOU WIN!")
            out.write_line(f"{guess} was the secret number!")
            out.write_line(f"Number of guesses: {guesses}")
            return guesses


# ---------------------------------------------------------------------------
# Favorite color
# ---------------------------------------------------------------------------

def favorite_color(
    *,
    clear: bool = True,
    source: LineSource | None = None,
    sink: LineSink | None = None,
) -> str:
    """Ask for a favorite color from :data:`COLORS` and announce it."""
    out = resolve_sink(sink)
    if clear:
        clear_terminal(sink=out)
    choice = select_string_from_choices(
        "Enter your favorite color!",
        "That isn't a color!",
        COLORS,
        False,
        False,
        source=source,
        sink=out,
    )
    out.write_line(f"Your favorite color is {choice}!")
    return choice


# ---------------------------------------------------------------------------
# Safari
# ---------------------------------------------------------------------------

def safari(
    items_per_page: int = 3,
    *,
    clear: bool = True,
    source: LineSource | None = None,
    sink: LineSink | None = None,
) -> None:
    """Browse the animals seen on safari, a few per page."""
    out = resolve_sink(sink)
    if clear:
        clear_terminal(sink=out)
    paginated_list(
        SAFARI_HEADER,
        ANIMALS,
        items_per_page,
        clear,
        source=source,
        sink=out,
    )
