"""Tests for the shared retry loop (core/prompt_loop.py)."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from simple_cli.core.models import PromptText
from simple_cli.core.prompt_loop import (
    identity,
    number_parser,
    prompt_loop,
    type_label,
)
from simple_cli.exceptions import InputStreamError


def _accept_all(_value: object) -> bool:
    return True


# ---------------------------------------------------------------------------
# Prompt text handling
# ---------------------------------------------------------------------------

class TestPromptText:
    def test_header_written_once_before_first_read(self, make_source, sink) -> None:
        result = prompt_loop(
            identity,
            [_accept_all],
            prompt=PromptText("Header", "Again"),
            source=make_source("ok"),
            sink=sink,
        )
        assert result == "ok"
        assert sink.lines == ["Header"]

    def test_retry_written_after_each_rejection(self, make_source, sink) -> None:
        result = prompt_loop(
            identity,
            [lambda text: text == "yes"],
            prompt=PromptText("Header", "Again"),
            source=make_source("no", "nope", "yes"),
            sink=sink,
        )
        assert result == "yes"
        assert sink.lines == ["Header", "Again", "Again"]

    def test_absent_text_writes_nothing(self, make_source, sink) -> None:
        prompt_loop(
            identity,
            [lambda text: text == "yes"],
            prompt=PromptText(),
            source=make_source("no", "yes"),
            sink=sink,
        )
        assert sink.lines == []

    def test_input_is_stripped(self, make_source, sink) -> None:
        result = prompt_loop(
            identity,
            [_accept_all],
            prompt=PromptText(),
            source=make_source("   padded value \t"),
            sink=sink,
        )
        assert result == "padded value"


# ---------------------------------------------------------------------------
# Parsing and validation
# ---------------------------------------------------------------------------

class TestParsing:
    def test_parse_failure_names_type_and_retries(self, make_source, sink) -> None:
        result = prompt_loop(
            number_parser(int),
            [_accept_all],
            prompt=PromptText(None, "Again"),
            source=make_source("abc", "12"),
            sink=sink,
            label="int",
        )
        assert result == 12
        assert sink.lines == ["Please enter a valid int value.", "Again"]

    def test_validators_short_circuit(self, make_source, sink) -> None:
        second = MagicMock(return_value=True)
        prompt_loop(
            identity,
            [lambda text: text == "b", second],
            prompt=PromptText(),
            source=make_source("a", "b"),
            sink=sink,
        )
        second.assert_called_once_with("b")

    def test_validators_are_not_run_on_parse_failure(self, make_source, sink) -> None:
        check = MagicMock(return_value=True)
        prompt_loop(
            number_parser(int),
            [check],
            prompt=PromptText(),
            source=make_source("x", "3"),
            sink=sink,
            label="int",
        )
        check.assert_called_once_with(3)


class TestNumberParser:
    def test_int(self) -> None:
        assert number_parser(int)("42") == 42

    def test_int_rejects_float_text(self) -> None:
        with pytest.raises(ValueError):
            number_parser(int)("4.2")

    def test_float(self) -> None:
        assert number_parser(float)("4.25") == 4.25

    @pytest.mark.parametrize("text", ["nan", "inf", "-inf", "NaN"])
    def test_non_finite_float_rejected(self, text: str) -> None:
        with pytest.raises(ValueError):
            number_parser(float)(text)

    def test_decimal_failure_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError):
            number_parser(Decimal)("abc")


class TestTypeLabel:
    @pytest.mark.parametrize(
        ("number_type", "expected"),
        [(int, "int"), (float, "float"), (Decimal, "Decimal")],
    )
    def test_uses_type_name(self, number_type: type, expected: str) -> None:
        assert type_label(number_type) == expected


# ---------------------------------------------------------------------------
# Fatal stream errors
# ---------------------------------------------------------------------------

class TestStreamFailure:
    def test_stream_error_propagates_without_retry(self, make_source, sink) -> None:
        source = make_source("no")
        with pytest.raises(InputStreamError):
            prompt_loop(
                identity,
                [lambda text: text == "yes"],
                prompt=PromptText("Header", "Again"),
                source=source,
                sink=sink,
            )
        assert source.reads == 1
        assert sink.lines == ["Header", "Again"]
