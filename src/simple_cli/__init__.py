"""simple-cli — interactive command-line input helpers.

Ask-until-valid prompts for strings, numbers and choices, plus a
paginated list navigator, for small interactive terminal programs.
"""

from simple_cli.core.models import PaginationState, PromptText
from simple_cli.interactive.validators import is_member, length_ok, nonempty_ok, range_ok
from simple_cli.exceptions import (
    ConfigurationError,
    EmptyChoicesError,
    InputStreamError,
    InvalidPageSizeError,
    SimpleCliError,
)
from simple_cli.infra.terminal import clear_terminal
from simple_cli.interactive import (
    get_number,
    get_string,
    paginated_list,
    print_list,
    select_number_from_choices,
    select_string_from_choices,
)
from simple_cli.version import __version__

__all__: list[str] = [
    "ConfigurationError",
    "EmptyChoicesError",
    "InputStreamError",
    "InvalidPageSizeError",
    "PaginationState",
    "PromptText",
    "SimpleCliError",
    "__version__",
    "clear_terminal",
    "get_number",
    "get_string",
    "is_member",
    "length_ok",
    "nonempty_ok",
    "paginated_list",
    "print_list",
    "range_ok",
    "select_number_from_choices",
    "select_string_from_choices",
]
