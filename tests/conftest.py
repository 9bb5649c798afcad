"""Shared pytest fixtures and configuration for the romanconv test suite.

Guidelines
----------
* No terminal interaction — questionary is always replaced.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations
