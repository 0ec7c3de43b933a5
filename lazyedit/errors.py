"""Exception types shared across the editor runtime.

Only unrecoverable terminal failures get a dedicated type. File I/O errors
surface as plain ``OSError`` and are handled at the command that caused them.
"""

from __future__ import annotations


class FatalSystemError(RuntimeError):
    """Terminal mode, geometry, or input failure that ends the session."""

    def __init__(self, operation: str, reason: object = None) -> None:
        self.operation = operation
        self.reason = reason
        message = operation if reason is None else f"{operation}: {reason}"
        super().__init__(message)
