"""CLI application entry point and command routing for pw-cookies.

This module is the **sole error boundary** for the entire application.
It catches :class:`~pw_cookies.exceptions.PwCookiesError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Dispatch order
--------------
1. ``--help`` — print usage and exit, regardless of other flags.
2. ``--save [FILE]`` — read JSON from stdin and write it to *FILE*.
3. otherwise — print the extraction snippet (``--cookies-only`` picks
   the smaller variant).

Flags are matched as exact tokens; anything else (including
``--save=FILE``) is ignored.
"""

from __future__ import annotations

import sys

from pw_cookies.cli import exit_codes
from pw_cookies.cli.console import console, out
from pw_cookies.core.state_service import DEFAULT_OUTPUT
from pw_cookies.exceptions import PwCookiesError

PROG: str = "pw-cookies"

HELP_TEXT: str = f"""
Playwright Cookies Extraction
==============================
Extract and save browser state from Playwright MCP.

Usage:
  {PROG}              # Generate extraction code
  {PROG} --save       # Save piped JSON to {DEFAULT_OUTPUT}

Options:
  --save [file]    Save piped JSON to file (default: {DEFAULT_OUTPUT})
  --cookies-only   Only extract cookies, not localStorage
  --help           Show this help

Workflow:
  1. Run: {PROG}
  2. Copy the generated code
  3. Execute via browser_run_code MCP tool
  4. Save the result: echo '<result>' | {PROG} --save

Examples:
  {PROG}                           # Get extraction code
  {PROG} --cookies-only            # Cookies only (smaller)
  echo '{{"cookies":[]}}' | {PROG} --save
  echo '{{"cookies":[]}}' | {PROG} --save my-state.json
"""


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

HELP_FLAG: str = "--help"
SAVE_FLAG: str = "--save"
COOKIES_ONLY_FLAG: str = "--cookies-only"


def _save_target(argv: list[str]) -> str | None:
    """Return the output path for save mode, or ``None`` outside it.

    Only the first ``--save`` counts.  The token right after it is the
    path unless it is missing or starts with ``--``; single-dash names
    such as ``-backup.json`` are valid paths.
    """
    if SAVE_FLAG not in argv:
        return None
    index = argv.index(SAVE_FLAG)
    following = argv[index + 1] if index + 1 < len(argv) else None
    if following is None or following.startswith("--"):
        return DEFAULT_OUTPUT
    return following


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_help() -> int:
    out.print(HELP_TEXT, markup=False)
    return exit_codes.SUCCESS


def _handle_save(output_path: str) -> int:
    """Read stdin, write it to *output_path*, and print a summary."""
    from pw_cookies.core.state_service import StateService
    from pw_cookies.infra.state_file import StateFileSink
    from pw_cookies.infra.stdin_source import StdinSource

    service = StateService(StdinSource(), StateFileSink())
    result = service.save(output_path)

    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")

    out.print(f"State saved to: {result.path}", markup=False)
    out.print(
        f"Stats: {result.cookie_count} cookies, {result.origin_count} origins",
        markup=False,
    )
    return exit_codes.SUCCESS


def _handle_emit(cookies_only: bool) -> int:
    """Print the extraction snippet wrapped in copy/paste instructions."""
    from pw_cookies.core.snippet import generate_extraction_code

    code = generate_extraction_code(cookies_only=cookies_only)
    lines = (
        "// Playwright Cookies Extraction",
        "// Generated inline code for browser_run_code",
        "// Copy and paste this into the MCP tool parameter",
        "",
        code,
        "",
        "// After running, save the result:",
        f"// echo '<result>' | {PROG} --save",
    )
    out.print("\n".join(lines), markup=False)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the pw-cookies CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    if HELP_FLAG in argv:
        return _handle_help()

    output_path = _save_target(argv)
    if output_path is not None:
        return _handle_save(output_path)

    return _handle_emit(COOKIES_ONLY_FLAG in argv)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except PwCookiesError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(exc.hint, markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] Please report this issue."
        )
        console.print(f"  {type(exc).__name__}: {exc}", markup=False)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
