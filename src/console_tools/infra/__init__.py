"""Infrastructure layer — filesystem access.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Missing or non-regular files surface as
  :class:`~console_tools.exceptions.MissingFileError`; other ``OSError``
  failures propagate to the router's unexpected-error boundary.
"""

from console_tools.infra.text_files import (
    compute_stats,
    head_lines,
    open_lines,
    require_file,
    resolve_path,
)

__all__: list[str] = [
    "compute_stats",
    "head_lines",
    "open_lines",
    "require_file",
    "resolve_path",
]
