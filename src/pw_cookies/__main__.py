"""Allow ``python -m pw_cookies`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m pw_cookies`` behaves identically to the ``pw-cookies``
console script.
"""

from __future__ import annotations

from pw_cookies.cli.app import cli

if __name__ == "__main__":
    cli()
