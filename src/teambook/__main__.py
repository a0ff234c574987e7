"""Allow ``python -m teambook`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m teambook`` behaves identically to the ``teambook``
console script.
"""

from __future__ import annotations

from teambook.cli.app import cli

if __name__ == "__main__":
    cli()
