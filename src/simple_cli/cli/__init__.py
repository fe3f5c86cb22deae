"""CLI layer: the ``simple-cli`` demo application and its error boundary.

This package is the outermost layer.  It may import from every other
layer, but no other layer may import from ``cli``.
"""
