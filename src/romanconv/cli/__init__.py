"""CLI layer — argument parsing, the interactive session, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, but the core never imports from ``cli``.
"""
