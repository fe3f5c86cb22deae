"""Value objects shared by the prompt loop and the navigator.

All models are **frozen** dataclasses.  :class:`PaginationState`
transitions return new instances instead of mutating in place.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from simple_cli.exceptions import InvalidPageSizeError


# ---------------------------------------------------------------------------
# Prompt text
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PromptText:
    """Text shown around an input attempt."""

    header: str | None = None
    """Shown once, before the first attempt.  ``None`` prints nothing."""

    retry: str | None = None
    """Shown after every rejected attempt.  ``None`` prints nothing."""


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

def count_pages(item_count: int, items_per_page: int) -> int:
    """Return ``ceil(item_count / items_per_page)``, never less than 1."""
    return max(1, -(-item_count // items_per_page))


@dataclass(frozen=True, slots=True)
class PaginationState:
    """Immutable snapshot of a paginated list at one page.

    Build instances with :meth:`start`, which validates the page size.
    """

    items: tuple[Any, ...]
    items_per_page: int
    page: int = 1

    @classmethod
    def start(cls, items: Any, items_per_page: int) -> PaginationState:
        """Create the initial state (page 1) for *items*.

        Raises
        ------
        InvalidPageSizeError
            If *items_per_page* is not a positive ``int``.
        """
        if (
            isinstance(items_per_page, bool)
            or not isinstance(items_per_page, int)
            or items_per_page <= 0
        ):
            raise InvalidPageSizeError(
                f"Items per page must be greater than zero (got {items_per_page!r}).",
                hint="Pass a positive integer as items_per_page.",
            )
        return cls(items=tuple(items), items_per_page=items_per_page)

    @property
    def total_pages(self) -> int:
        return count_pages(len(self.items), self.items_per_page)

    @property
    def page_items(self) -> tuple[Any, ...]:
        """Items on the current page, in order."""
        start = (self.page - 1) * self.items_per_page
        end = min(self.page * self.items_per_page, len(self.items))
        return self.items[start:end]

    @property
    def indicator(self) -> str:
        return f"(Page {self.page} of {self.total_pages})"

    def next_page(self) -> PaginationState:
        """Advance one page; stays put on the last page."""
        if self.page < self.total_pages:
            return replace(self, page=self.page + 1)
        return self

    def previous_page(self) -> PaginationState:
        """Go back one page; stays put on the first page."""
        if self.page > 1:
            return replace(self, page=self.page - 1)
        return self

    def go_to(self, page: int) -> PaginationState:
        """Jump to *page*, which must lie in ``[1, total_pages]``."""
        if not 1 <= page <= self.total_pages:
            raise ValueError(
                f"page {page} is outside 1..{self.total_pages}",
            )
        return replace(self, page=page)
