"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that every tool keeps
working, in plain text, when Rich is not installed.

Command output is written straight to stdout, unchanged: tabs and
control characters survive.  Rich renders the doctor table, the prompt
and the window title.
"""

from __future__ import annotations

from typing import Any

from console_tools.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stdout."""
	console_class = _load_rich_console_class()
	return console_class(soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``/``input`` proxy with plain-stdout fallback."""

	def print(self, *objects: object, end: str = "\n") -> None:
		"""Render with Rich markup when available, else plain print."""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			print(*objects, end=end)
			return
		rich_console.print(*objects, end=end)

	def write_line(self, line: str = "") -> None:
		"""Write one line of text to stdout exactly as given."""
		print(line)

	def input(self, prompt: str = "") -> str:
		"""Show *prompt* and read one line from stdin.

		Raises ``EOFError`` when the input stream is closed.
		"""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			return input(prompt)
		return rich_console.input(prompt, markup=False)

	def set_title(self, title: str) -> bool:
		"""Set the terminal window title; return whether it was applied."""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			return False
		return bool(rich_console.set_window_title(title))


console = _ConsoleProxy()
