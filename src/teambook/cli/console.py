"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from teambook.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def _load_rich_handler_class() -> type[logging.Handler]:
	"""Return ``rich.logging.RichHandler`` class or raise ``EnvironmentError``."""
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
			hint="Run without --verbose to skip debug logging.",
		) from exc
	return RichHandler


def escape(text: object) -> str:
	"""Escape Rich markup in *text*; plain output needs no escaping."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return str(text)
	return rich_escape(str(text))


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def configure_logging(verbose: bool) -> None:
	"""Route ``teambook`` debug records to a Rich handler when *verbose*."""
	if not verbose:
		return
	handler_class = _load_rich_handler_class()
	package_logger = logging.getLogger("teambook")
	package_logger.setLevel(logging.DEBUG)
	if any(isinstance(h, handler_class) for h in package_logger.handlers):
		return

	handler = handler_class(console=get_rich_console(), show_path=False)
	handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
	package_logger.addHandler(handler)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
