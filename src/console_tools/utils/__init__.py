"""Shared utilities — constants and pure formatting helpers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""
