"""romanconv — Arabic ⇄ Roman numeral converter.

A pure conversion core wrapped in a thin interactive command-line shell.
"""

from romanconv.version import __version__

__all__: list[str] = ["__version__"]
