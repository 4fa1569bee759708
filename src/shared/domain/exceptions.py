"""Domain error taxonomy shared by every module.

Errors carry a machine-readable ``code`` and a human-readable
``message`` but no HTTP status: translating them into transport
responses is the job of ``modules.core.errors``.
"""

from __future__ import annotations

from typing import Any

VALIDATION_ERROR = "VALIDATION_ERROR"
RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"


class BusinessError(Exception):
    """Base domain failure; the raiser supplies the code."""

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(BusinessError):
    """Client-supplied data violates a business invariant."""

    def __init__(self, message: str, code: str = VALIDATION_ERROR) -> None:
        super().__init__(message, code)


class NotFoundError(BusinessError):
    """A referenced entity does not exist."""

    def __init__(self, resource_type: str, identifier: Any) -> None:
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(
            f"{resource_type} with identifier {identifier} was not found",
            RESOURCE_NOT_FOUND,
        )
