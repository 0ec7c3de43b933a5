"""Input-layer public API for key decoding and key handlers.

Low-level terminal decoding (``KeyReader``) is kept apart from the handlers
that turn key tokens into editor actions.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, KeyReader
from .keys import handle_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyReader",
    "handle_key",
]
