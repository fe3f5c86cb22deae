"""The shared "read, parse, validate, retry" loop.

Every input acquisition operation is this loop with a specific parser
and validator list plugged in.

Guarantees
----------
* The header is written once, before the first attempt; the retry text
  after every rejected attempt.  ``None`` text writes nothing.
* Each attempt reads a fresh line and strips surrounding whitespace.
* Validators run in order and stop at the first rejection; each one
  writes its own diagnostic.
* There is no attempt cap.  Only :class:`InputStreamError` from the
  source ends the loop without a value.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from simple_cli.core.models import PromptText
from simple_cli.core.protocols import LineSink, LineSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

Parser = Callable[[str], T]
Validator = Callable[[T], bool]


def _write_optional(text: str | None, sink: LineSink) -> bool:
    """Write *text* as a line when present; report whether it was written."""
    if text is None:
        return False
    sink.write_line(text)
    return True


def identity(text: str) -> str:
    return text


def number_parser(number_type: Callable[[str], Any]) -> Callable[[str], Any]:
    """Build a parser that converts text with *number_type*.

    Non-finite floats (``nan``, ``inf``) are rejected like any other
    malformed value, since they cannot be compared against bounds or
    choices meaningfully.
    """

    def parse(text: str) -> Any:
        value = number_type(text)
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"non-finite value: {text!r}")
        return value

    return parse


def type_label(number_type: type) -> str:
    """Name used in the ``Please enter a valid ... value.`` diagnostic."""
    return getattr(number_type, "__name__", str(number_type))


def prompt_loop(
    parser: Parser[T],
    validators: Sequence[Validator[T]],
    *,
    prompt: PromptText,
    source: LineSource,
    sink: LineSink,
    label: str = "str",
) -> T:
    """Prompt until a line parses and passes every validator.

    Parameters
    ----------
    parser:
        Converts the stripped line; raises ``ValueError`` or
        ``ArithmeticError`` on malformed text.
    validators:
        Predicates applied to the parsed value, in order.
    prompt:
        Header and retry text.
    label:
        Expected type shown when parsing fails.

    Raises
    ------
    InputStreamError
        Propagated unchanged from *source*; never retried.
    """
    _write_optional(prompt.header, sink)
    attempt = 0
    while True:
        attempt += 1
        raw = source.read_line().strip()
        try:
            value = parser(raw)
        except (ValueError, ArithmeticError):
            logger.debug("Attempt %d: could not parse %r as %s", attempt, raw, label)
            sink.write_line(f"Please enter a valid {label} value.")
        else:
            if all(check(value) for check in validators):
                logger.debug("Attempt %d: accepted %r", attempt, value)
                return value
            logger.debug("Attempt %d: rejected %r", attempt, value)
        _write_optional(prompt.retry, sink)
