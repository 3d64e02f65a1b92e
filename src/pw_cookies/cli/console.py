"""CLI console helpers with optional Rich support.

Rich is imported lazily so every command keeps working (as plain
``print``) when it is not installed.  Two proxies are exposed:

* ``console`` — stderr, for errors, hints and warnings.
* ``out`` — stdout, for the snippet, help text and save summary.
"""

from __future__ import annotations

import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console`` or ``None`` when Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def get_rich_console(*, stderr: bool) -> Any | None:
	"""Create a Rich console bound to the current stdout/stderr."""
	console_class = _load_rich_console_class()
	if console_class is None:
		return None
	# soft_wrap keeps long paths and snippet lines intact when piped.
	return console_class(stderr=stderr, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with a plain-text fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain ``print``.

		Pass ``markup=False`` for text that may contain square brackets
		(JSON, paths, usage lines) so Rich does not eat them.
		"""
		rich_console = get_rich_console(stderr=self._stderr)
		if rich_console is None:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, markup=markup, highlight=markup, emoji=markup)


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)
