"""CLI application entry point and demo routing for simple-cli.

This module is the **sole error boundary** of the demo application.
It catches :class:`~simple_cli.exceptions.SimpleCliError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
messages via the console proxy and returning well-defined exit codes.

The library itself never catches its own fatal errors; they surface
here.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from simple_cli.cli import exit_codes
from simple_cli.cli.console import console
from simple_cli.exceptions import SimpleCliError
from simple_cli.version import __version__

logger = logging.getLogger(__name__)

LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{text!r} is not an integer") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``simple-cli guessing-game [--seed N] [--no-clear]``
    * ``simple-cli favorite-color [--no-clear]``
    * ``simple-cli safari [--per-page N] [--no-clear]``
    * ``simple-cli --version``
    """
    parser = argparse.ArgumentParser(
        prog="simple-cli",
        description="Interactive demos for the simple-cli prompt helpers.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log prompt attempts and page changes to stderr.",
    )

    subparsers = parser.add_subparsers(dest="demo", metavar="DEMO")

    guess = subparsers.add_parser("guessing-game", help="Guess a number from 1 to 100.")
    guess.add_argument("--seed", type=int, default=None, help="Seed for the secret number.")
    guess.add_argument("--no-clear", action="store_true", help="Never clear the screen.")

    color = subparsers.add_parser("favorite-color", help="Pick your favorite color.")
    color.add_argument("--no-clear", action="store_true", help="Never clear the screen.")

    safari = subparsers.add_parser("safari", help="Page through a list of animals.")
    safari.add_argument(
        "--per-page",
        type=_positive_int,
        default=3,
        help="Animals shown on each page (default: 3).",
    )
    safari.add_argument("--no-clear", action="store_true", help="Never clear the screen.")

    return parser


def setup_logging(verbose: bool = False) -> None:
    """Configure stderr logging; DEBUG when *verbose*, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Demo dispatch
# ---------------------------------------------------------------------------

def _run_demo(args: argparse.Namespace) -> int:
    from simple_cli.cli import demos

    clear = not args.no_clear
    if args.demo == "guessing-game":
        rng = random.Random(args.seed) if args.seed is not None else None
        demos.guessing_game(rng=rng, clear=clear)
    elif args.demo == "favorite-color":
        demos.favorite_color(clear=clear)
    else:
        demos.safari(args.per_page, clear=clear)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the simple-cli demo application.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.demo is None:
        parser.print_help()
        return exit_codes.SUCCESS

    logger.debug("Starting demo %s", args.demo)
    return _run_demo(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except SimpleCliError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
