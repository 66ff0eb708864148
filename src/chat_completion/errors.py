"""Decoding errors.

`DecodeError` is the common base. Choice and usage failures are recovered
inside the package; only `InvalidPayloadError` reaches callers of
`ResponseAssembler.assemble`.
"""
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError


def describe_validation_error(error: PydanticValidationError) -> List[Dict[str, Any]]:
    """Reduce a pydantic error to JSON-friendly location/message pairs."""
    return [
        {
            "loc": ".".join(str(part) for part in item["loc"]),
            "msg": item["msg"],
            "type": item["type"],
        }
        for item in error.errors()
    ]


class DecodeError(Exception):
    """Payload fragment could not be decoded."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize decode error.

        Args:
            message: Error message
            details: Optional error details
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @classmethod
    def from_validation_error(
        cls, message: str, error: PydanticValidationError
    ) -> "DecodeError":
        """Build error carrying the pydantic field errors as details."""
        errors = describe_validation_error(error)
        reasons = "; ".join(f"{item['loc'] or '<root>'}: {item['msg']}" for item in errors)
        return cls(f"{message}: {reasons}", details={"errors": errors})


class ChoiceDecodeError(DecodeError):
    """Single element of `choices` is malformed."""


class UsageDecodeError(DecodeError):
    """The `usage` block is malformed."""


class InvalidPayloadError(DecodeError):
    """Top-level payload violates the response contract."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize payload error.

        Args:
            message: Error message
            field: Top-level field that failed validation, if known
            details: Optional error details
        """
        details = dict(details or {})
        if field is not None:
            details.setdefault("field", field)
        super().__init__(message, details=details)
        self.field = field
