"""Infrastructure layer — standard input and the filesystem.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Classes satisfy the protocols in :mod:`pw_cookies.core.protocols`.
"""

from pw_cookies.infra.state_file import StateFileSink, resolve_output_path
from pw_cookies.infra.stdin_source import StdinSource

__all__: list[str] = [
    "StateFileSink",
    "StdinSource",
    "resolve_output_path",
]
