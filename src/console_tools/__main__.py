"""Allow ``python -m console_tools`` invocation.

Delegates to the launcher's error-boundary entry point so that
``python -m console_tools`` behaves identically to the ``console-tools``
console script.
"""

from __future__ import annotations

from console_tools.cli.app import cli

if __name__ == "__main__":
    cli()
