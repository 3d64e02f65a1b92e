"""pw-cookies — Playwright storage-state extraction helper.

Prints a snippet for the Playwright MCP ``browser_run_code`` tool and
saves the JSON it returns to disk.
"""

from pw_cookies.version import __version__

__all__: list[str] = ["__version__"]
