"""Allow ``python -m simple_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m simple_cli`` behaves identically to the ``simple-cli``
console script.
"""

from __future__ import annotations

from simple_cli.cli.app import cli

if __name__ == "__main__":
    cli()
