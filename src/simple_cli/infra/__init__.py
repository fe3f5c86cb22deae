"""Infrastructure layer: standard-stream adapters and terminal control.

Rules
-----
* No imports from ``interactive`` or ``cli``.
* Raw stream failures are re-raised as
  :class:`~simple_cli.exceptions.InputStreamError`.
"""
