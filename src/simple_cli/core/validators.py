"""Validators: accept/reject predicates for candidate input.

Each validator returns ``True`` to accept.  On rejection it writes one
human-readable diagnostic to the given sink and returns
``False``.  The diagnostic wording is part of the public contract.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from simple_cli.core.protocols import LineSink


def _bool_text(flag: bool) -> str:
    return "true" if flag else "false"


def length_ok(
    length: int,
    max_length: int | None,
    *,
    sink: LineSink,
) -> bool:
    """Accept when there is no limit or *length* does not exceed it."""
    if max_length is None or length <= max_length:
        return True
    sink.write_line(
        f"Your input is {length - max_length} characters higher than the "
        f"{max_length} character limit. Please try again."
    )
    return False


def nonempty_ok(
    length: int,
    can_be_empty: bool,
    *,
    sink: LineSink,
) -> bool:
    """Accept non-empty input, or anything when *can_be_empty*."""
    if can_be_empty or length > 0:
        return True
    sink.write_line("Your input cannot be empty.")
    return False


def range_ok(
    value: Any,
    min_value: Any | None,
    max_value: Any | None,
    *,
    sink: LineSink,
) -> bool:
    """Accept *value* inside the inclusive, independently optional bounds.

    The minimum is checked first, so only one diagnostic is written even
    when the bounds are inverted.
    """
    if min_value is not None and value < min_value:
        sink.write_line(
            f"Your input ({value}) is lower than the minimum allowed value "
            f"of {min_value}."
        )
        return False
    if max_value is not None and value > max_value:
        sink.write_line(
            f"Your input ({value}) is larger than the maximum allowed value "
            f"of {max_value}."
        )
        return False
    return True


def is_member(
    value: Any,
    choices: Sequence[Any],
    case_sensitive: bool = True,
    show_choices_on_failure: bool = True,
    *,
    sink: LineSink,
) -> bool:
    """Accept *value* when it equals one of *choices*.

    Strings additionally match case-insensitively unless
    *case_sensitive* is set.  Numbers only ever match exactly.

    On rejection the diagnostic lists every choice when
    *show_choices_on_failure* is set; for strings it also reports the
    case-sensitivity mode.
    """
    is_text = isinstance(value, str)
    lowered = value.lower() if is_text and not case_sensitive else None
    for choice in choices:
        if value == choice:
            return True
        if lowered is not None and isinstance(choice, str) and lowered == choice.lower():
            return True

    case_note = f"(Case Sensitive: {_bool_text(case_sensitive)})"
    if show_choices_on_failure:
        listed = ", ".join(str(choice) for choice in choices)
        sink.write_line(f"Your input ({value}) is not an option of the choices: {listed}")
        if is_text:
            sink.write_line(case_note)
    elif is_text:
        sink.write_line(f"Your input ({value}) is not a valid choice. {case_note}")
    else:
        sink.write_line(f"Your input ({value}) is not a valid choice.")
    return False
