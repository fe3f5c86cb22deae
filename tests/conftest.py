"""Shared pytest fixtures and configuration for the simple-cli test suite.

Guidelines
----------
* No real terminal interaction: prompts run against in-memory
  sources and sinks, or against ``capsys`` with a patched ``sys.stdin``.
* An exhausted fake source behaves like a closed stream and raises
  :class:`~simple_cli.exceptions.InputStreamError`, so a test that
  feeds too few lines fails loudly instead of hanging.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from simple_cli.exceptions import InputStreamError


class FakeLineSource:
    """Serve pre-scripted lines, newline-terminated like a real stream."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: list[str] = list(lines)
        self.reads: int = 0

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def read_line(self) -> str:
        if not self._lines:
            raise InputStreamError("scripted input exhausted")
        self.reads += 1
        return self._lines.pop(0) + "\n"


class RecordingSink:
    """Record every line and raw write, in order."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.raw: list[str] = []
        self.chunks: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)
        self.chunks.append(f"{text}\n")

    def write(self, text: str) -> None:
        self.raw.append(text)
        self.chunks.append(text)

    @property
    def text(self) -> str:
        return "".join(self.chunks)


@pytest.fixture
def make_source() -> Callable[..., FakeLineSource]:
    """Factory: ``make_source("abc", "42")``."""

    def _make(*lines: str) -> FakeLineSource:
        return FakeLineSource(lines)

    return _make


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
