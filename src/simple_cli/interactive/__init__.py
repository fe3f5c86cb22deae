"""Interactive layer: blocking prompt operations and the list navigator.

May import from ``core`` and ``infra``; never from ``cli``.
"""

from simple_cli.interactive.inputs import (
    get_number,
    get_string,
    select_number_from_choices,
    select_string_from_choices,
)
from simple_cli.interactive.navigator import paginated_list, print_list

__all__: list[str] = [
    "get_number",
    "get_string",
    "paginated_list",
    "print_list",
    "select_number_from_choices",
    "select_string_from_choices",
]
