"""Core / service layer — pure logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or stream I/O (that lives behind ``protocols``).
* No imports from ``cli`` or ``infra``.
"""

from pw_cookies.core.models import SaveResult, StorageState
from pw_cookies.core.protocols import InputSource, StateSink
from pw_cookies.core.snippet import generate_extraction_code
from pw_cookies.core.state_service import (
    DEFAULT_OUTPUT,
    StateService,
    check_expected_keys,
    parse_storage_state,
    serialize_storage_state,
)

__all__: list[str] = [
    "DEFAULT_OUTPUT",
    "InputSource",
    "SaveResult",
    "StateService",
    "StateSink",
    "StorageState",
    "check_expected_keys",
    "generate_extraction_code",
    "parse_storage_state",
    "serialize_storage_state",
]
