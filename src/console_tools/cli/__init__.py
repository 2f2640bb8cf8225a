"""CLI layer — argument pre-parsing, console output, command handlers
and error boundaries.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra``, and ``utils``, but no other layer may import
from ``cli``.
"""
