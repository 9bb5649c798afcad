"""Allow ``python -m romanconv`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m romanconv`` behaves identically to the ``romanconv``
console script.
"""

from __future__ import annotations

from romanconv.cli.app import cli

if __name__ == "__main__":
    cli()
