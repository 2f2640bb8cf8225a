"""``console-tools doctor`` — environment diagnostics command.

Gathers system information and renders a table summarising whether
the runtime environment satisfies console-tools' requirements, and
which numeric locale the number parsers will try first.

Rich is optional: without it the same table is printed as plain text.
"""

from __future__ import annotations

import locale
import platform
import sys
from importlib.metadata import PackageNotFoundError, version

from console_tools.cli.console import console
from console_tools.core.numbers import current_decimal_point
from console_tools.utils import exit_codes
from console_tools.version import __version__

Check = tuple[str, str, str]
"""(label, value, status) row; status carries Rich markup."""


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    python_version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", python_version, status


def _rich_check() -> Check:
    """Return (label, value, status) for the Rich row.

    Rich only improves rendering, so a missing Rich is a warning.
    """
    try:
        import rich  # noqa: F401
    except ImportError:
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"
    try:
        return "rich", version("rich"), "[green]OK[/green]"
    except PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _locale_check() -> Check:
    """Return (label, value, status) for the numeric locale row."""
    name = locale.setlocale(locale.LC_NUMERIC)
    value = f"{name} (decimal point {current_decimal_point()!r})"
    return "Locale", value, "[green]OK[/green]"


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _console_tools_version_check() -> Check:
    """Return (label, value, status) for the console-tools version row."""
    return "console-tools", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print()
    print("console-tools doctor")
    print("=" * 64)
    print(f"{'Component':<14} {'Value':<40} {'Status':<8}")
    print("-" * 64)
    for label, value, status in checks:
        print(f"{label:<14} {value:<40} {_status_plain(status):<8}")
    print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def collect_checks() -> list[Check]:
    """Run every diagnostic collector in display order."""
    return [
        _console_tools_version_check(),
        _python_version_check(),
        _rich_check(),
        _locale_check(),
        _os_check(),
    ]


def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no critical check fails,
        :data:`exit_codes.UNEXPECTED_ERROR` otherwise.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.")
    else:
        table = Table(
            title="console-tools doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=14)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.UNEXPECTED_ERROR if has_failure else exit_codes.SUCCESS
