"""Extraction snippets for the Playwright MCP ``browser_run_code`` tool.

Each snippet is an ``async (page) => { ... }`` function that returns the
browser context's state as pretty-printed JSON text.  Pure templates, no
I/O.
"""

from __future__ import annotations

STORAGE_STATE_SNIPPET: str = """\
async (page) => {
  const state = await page.context().storageState();
  return JSON.stringify(state, null, 2);
}"""

COOKIES_ONLY_SNIPPET: str = """\
async (page) => {
  const cookies = await page.context().cookies();
  return JSON.stringify({ cookies }, null, 2);
}"""


def generate_extraction_code(*, cookies_only: bool = False) -> str:
    """Return the snippet to paste into ``browser_run_code``.

    The default variant captures the full storage state (cookies plus
    per-origin localStorage); ``cookies_only`` captures just cookies,
    which keeps the result small.
    """
    if cookies_only:
        return COOKIES_ONLY_SNIPPET
    return STORAGE_STATE_SNIPPET
