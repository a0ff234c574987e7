"""CLI layer — argument parsing, terminal output, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, but no other layer may import from ``cli``.
"""
