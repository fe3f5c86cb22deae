"""Custom exception hierarchy for simple-cli.

Only *fatal* conditions are raised as exceptions.  Recoverable input
problems (malformed numbers, out-of-range values, non-member choices,
empty or over-length strings) are reported to the user and retried by
the prompt loop; they never reach the caller.

Hierarchy
---------
SimpleCliError
├── ConfigurationError
│   ├── EmptyChoicesError
│   └── InvalidPageSizeError
├── InputStreamError
└── MissingDependencyError
"""

from __future__ import annotations


class SimpleCliError(Exception):
    """Base exception for all simple-cli errors.

    Every fatal condition maps to a subclass of this exception so that
    an application error boundary can render a clean message without
    leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Caller configuration --------------------------------------------------

class ConfigurationError(SimpleCliError):
    """Raised when an operation is given a constraint no input can satisfy."""


class EmptyChoicesError(ConfigurationError):
    """Raised when a selection operation receives an empty choice set."""


class InvalidPageSizeError(ConfigurationError):
    """Raised when ``items_per_page`` is not a positive integer."""


# --- Environment -----------------------------------------------------------

class InputStreamError(SimpleCliError):
    """Raised when the input stream is closed or fails while reading."""


class MissingDependencyError(SimpleCliError):
    """Raised when an optional runtime dependency is not installed."""
