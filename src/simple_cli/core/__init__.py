"""Core layer: validators, the prompt loop, and pagination state.

Rules
-----
* No direct use of ``print()``, ``input()`` or ``sys`` streams; all
  output goes through a :class:`~simple_cli.core.protocols.LineSink`
  supplied by the caller.
* No imports from ``interactive``, ``cli`` or ``infra``.
* Submodules are imported explicitly; this package re-exports nothing.
"""
