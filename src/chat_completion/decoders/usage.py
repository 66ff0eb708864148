"""Usage decoding with zero fallback."""
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from core.logger import LoggerService
from ..errors import UsageDecodeError
from ..models import Usage


def parse_usage(raw: Any) -> Usage:
    """Decode a usage block strictly.

    Args:
        raw: Value found at the payload's `usage` key

    Returns:
        Decoded usage

    Raises:
        UsageDecodeError: If the block is not an object or a counter is invalid
    """
    if not isinstance(raw, Mapping):
        raise UsageDecodeError(
            f"Usage must be an object, got {type(raw).__name__}",
            details={"type": type(raw).__name__},
        )

    try:
        return Usage.model_validate(dict(raw))
    except PydanticValidationError as e:
        raise UsageDecodeError.from_validation_error("Invalid usage", e) from e


class UsageDecoder:
    """Decode usage, falling back to zero counters.

    `decode` never raises. A missing block is expected for some providers and
    is not reported; a malformed one is logged once at WARNING.
    """

    def __init__(self, logger: LoggerService) -> None:
        """Initialize decoder.

        Args:
            logger: Logger service instance
        """
        self.logger = logger.get_logger(__name__)

    def decode(self, raw: Any = None) -> Usage:
        """Decode usage block.

        Args:
            raw: Value found at the payload's `usage` key, None if missing

        Returns:
            Decoded usage or zero usage
        """
        if raw is None:
            self.logger.debug("Usage block absent, using zero usage")
            return Usage.zero()

        self.logger.debug(
            "Decoding usage block",
            extra={"usage_type": type(raw).__name__},
        )

        try:
            return parse_usage(raw)
        except UsageDecodeError as e:
            self.logger.warning(
                "Failed to process usage data: %s" % e.message,
                extra={"error": e.message, "error_details": e.details},
            )
            return Usage.zero()
