"""Public validators that write their diagnostics to stdout by default.

Thin wrappers over :mod:`simple_cli.core.validators`, which always
needs an explicit sink.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from simple_cli.core import validators as _core
from simple_cli.core.protocols import LineSink
from simple_cli.infra.streams import resolve_sink


def length_ok(length: int, max_length: int | None, *, sink: LineSink | None = None) -> bool:
    return _core.length_ok(length, max_length, sink=resolve_sink(sink))


def nonempty_ok(length: int, can_be_empty: bool, *, sink: LineSink | None = None) -> bool:
    return _core.nonempty_ok(length, can_be_empty, sink=resolve_sink(sink))


def range_ok(
    value: Any,
    min_value: Any | None,
    max_value: Any | None,
    *,
    sink: LineSink | None = None,
) -> bool:
    return _core.range_ok(value, min_value, max_value, sink=resolve_sink(sink))


def is_member(
    value: Any,
    choices: Sequence[Any],
    case_sensitive: bool = True,
    show_choices_on_failure: bool = True,
    *,
    sink: LineSink | None = None,
) -> bool:
    return _core.is_member(
        value,
        choices,
        case_sensitive,
        show_choices_on_failure,
        sink=resolve_sink(sink),
    )
