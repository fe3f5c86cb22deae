"""Input acquisition operations.

Each operation instantiates :func:`~simple_cli.core.prompt_loop.prompt_loop`
with a parser and a validator list.  All of them block until valid
input arrives.

Every operation accepts keyword-only ``source`` and ``sink`` arguments;
when omitted, standard input and standard output are used.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from simple_cli.core.models import PromptText
from simple_cli.core.prompt_loop import identity, number_parser, prompt_loop, type_label
from simple_cli.core.protocols import LineSink, LineSource
from simple_cli.core.validators import is_member, length_ok, nonempty_ok, range_ok
from simple_cli.exceptions import EmptyChoicesError
from simple_cli.infra.streams import resolve_sink, resolve_source


def _infer_number_type(number_type: type | None, *samples: Any) -> type:
    if number_type is not None:
        return number_type
    present = [sample for sample in samples if sample is not None]
    if any(isinstance(sample, float) for sample in present):
        return float
    return type(present[0]) if present else int


def get_string(
    header: str | None = None,
    retry: str | None = None,
    max_length: int | None = None,
    allow_empty: bool = False,
    *,
    source: LineSource | None = None,
    sink: LineSink | None = None,
) -> str:
    """Prompt for a string and return it stripped.

    Parameters
    ----------
    header:
        Shown before the first attempt.
    retry:
        Shown after every rejected attempt.
    max_length:
        Maximum number of characters, or ``None`` for no limit.
    allow_empty:
        Whether an empty (or all-whitespace) entry is accepted.

    Example::

        name = get_string("Enter your name:", "Enter your name:", 25)
    """
    out = resolve_sink(sink)
    return prompt_loop(
        identity,
        [
            lambda text: length_ok(len(text), max_length, sink=out),
            lambda text: nonempty_ok(len(text), allow_empty, sink=out),
        ],
        prompt=PromptText(header, retry),
        source=resolve_source(source),
        sink=out,
    )


def get_number(
    header: str | None = None,
    retry: str | None = None,
    min_value: Any | None = None,
    max_value: Any | None = None,
    *,
    number_type: type | None = None,
    source: LineSource | None = None,
    sink: LineSink | None = None,
) -> Any:
    """Prompt for a number within optional inclusive bounds.

    *number_type* (``int``, ``float``, ``Decimal``, ...) converts the
    text.  When omitted it is taken from the type of *min_value* or
    *max_value*, falling back to ``int``.

    Example::

        guess = get_number("Pick a number between 1 and 100!", "Try Again.", 1, 100)
        ratio = get_number("Enter a float from 0 to 10:", None, 0.0, 10.0)
    """
    kind = _infer_number_type(number_type, min_value, max_value)
    out = resolve_sink(sink)
    return prompt_loop(
        number_parser(kind),
        [lambda number: range_ok(number, min_value, max_value, sink=out)],
        prompt=PromptText(header, retry),
        source=resolve_source(source),
        sink=out,
        label=type_label(kind),
    )


def select_number_from_choices(
    header: str | None,
    retry: str | None,
    choices: Sequence[Any],
    show_choices_on_failure: bool = True,
    *,
    number_type: type | None = None,
    source: LineSource | None = None,
    sink: LineSink | None = None,
) -> Any:
    """Prompt until the user enters one of the numeric *choices*.

    *number_type* defaults to the type of the first choice.

    Raises
    ------
    EmptyChoicesError
        If *choices* is empty.  Raised before anything is read or shown.
    """
    if len(choices) == 0:
        raise EmptyChoicesError(
            "You have not supplied at least one number choice.",
            hint="Pass a non-empty sequence of choices.",
        )
    kind = _infer_number_type(number_type, choices[0])
    out = resolve_sink(sink)
    return prompt_loop(
        number_parser(kind),
        [
            lambda number: is_member(
                number,
                choices,
                show_choices_on_failure=show_choices_on_failure,
                sink=out,
            ),
        ],
        prompt=PromptText(header, retry),
        source=resolve_source(source),
        sink=out,
        label=type_label(kind),
    )


def select_string_from_choices(
    header: str | None,
    retry: str | None,
    choices: Sequence[str],
    case_sensitive: bool = False,
    show_choices_on_failure: bool = True,
    *,
    source: LineSource | None = None,
    sink: LineSink | None = None,
) -> str:
    """Prompt until the user enters one of the string *choices*.

    Returns the stripped text as the user typed it, which may differ in
    case from the matching choice when *case_sensitive* is off.

    Raises
    ------
    EmptyChoicesError
        If *choices* is empty.  Raised before anything is read or shown.

    Example::

        who = select_string_from_choices(
            "Select Moe, Larry, or Curly", None, ["Moe", "Larry", "Curly"],
        )
    """
    if len(choices) == 0:
        raise EmptyChoicesError(
            "You have not supplied at least one string choice.",
            hint="Pass a non-empty sequence of choices.",
        )
    out = resolve_sink(sink)
    return prompt_loop(
        identity,
        [
            lambda text: is_member(
                text,
                choices,
                case_sensitive,
                show_choices_on_failure,
                sink=out,
            ),
        ],
        prompt=PromptText(header, retry),
        source=resolve_source(source),
        sink=out,
    )
