"""Error taxonomy for identifier generation.

Example:
    >>> from cuidkit.errors import LengthExceededError
    >>> err = LengthExceededError(99)
    >>> err.error_code
    'LEN_001'
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .config import MAXIMUM_LENGTH


@dataclass
class CuidError(Exception):
    """Base cuidkit error.

    Attributes:
        error_code: Stable error identifier.
        description: Human-readable error description.
        actual_value: Value that violated the constraint.
        limit_value: Bound the value was checked against.
        remediation_hint: Complete correction instruction for the caller.
    """

    error_code: str
    description: str
    actual_value: Any
    limit_value: Any
    remediation_hint: str

    def __post_init__(self) -> None:
        super().__init__(self.description)

    def to_dict(self) -> dict[str, Any]:
        """Return serializable error details.

        Example:
            >>> CuidError("X_1", "bad", 2, 1, "Fix it.").to_dict()["error_code"]
            'X_1'
        """
        return {
            "error_code": self.error_code,
            "description": self.description,
            "actual_value": self.actual_value,
            "limit_value": self.limit_value,
            "remediation_hint": self.remediation_hint,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


class LengthExceededError(CuidError):
    """Raised when a requested ID length is above the supported maximum."""

    def __init__(self, length: int, maximum: int = MAXIMUM_LENGTH):
        super().__init__(
            error_code="LEN_001",
            description=f"Length must never exceed {maximum} characters (got {length}).",
            actual_value=length,
            limit_value=maximum,
            remediation_hint=f"Request a length of {maximum} or below.",
        )


class InvalidLengthError(CuidError):
    """Raised when a requested length is below one character."""

    def __init__(self, length: int):
        super().__init__(
            error_code="LEN_002",
            description=f"Length must be at least 1 character (got {length}).",
            actual_value=length,
            limit_value=1,
            remediation_hint="Request a positive length.",
        )


LengthExceeded = LengthExceededError
InvalidLength = InvalidLengthError
