"""Choice decoding.

Both functions here are pure: failures are returned or raised, never logged.
"""
from collections.abc import Mapping
from typing import Any, Iterable, List, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..errors import ChoiceDecodeError
from ..models import Choice


class ChoiceFailure(BaseModel):
    """Record of a `choices` element that failed to decode."""

    model_config = ConfigDict(frozen=True)

    position: int = Field(description="Position of the element in the raw list")
    raw: Any = Field(description="The raw element as received")
    reason: str = Field(description="Why the element was rejected")


class ChoiceBatch(BaseModel):
    """Outcome of decoding a whole `choices` list."""

    model_config = ConfigDict(frozen=True)

    choices: Tuple[Choice, ...] = Field(
        default=(), description="Decoded choices in payload order"
    )
    failures: Tuple[ChoiceFailure, ...] = Field(
        default=(), description="Elements that were dropped"
    )


def decode_choice(raw: Any) -> Choice:
    """Decode one element of the `choices` list.

    A malformed tool call fails the whole choice.

    Args:
        raw: Raw choice element

    Returns:
        Decoded choice

    Raises:
        ChoiceDecodeError: If the element is not an object or any required
            field is missing or has the wrong type
    """
    if not isinstance(raw, Mapping):
        raise ChoiceDecodeError(
            f"Choice must be an object, got {type(raw).__name__}",
            details={"type": type(raw).__name__},
        )

    try:
        return Choice.model_validate(dict(raw))
    except PydanticValidationError as e:
        raise ChoiceDecodeError.from_validation_error("Invalid choice", e) from e


def decode_choices(raw_choices: Iterable[Any]) -> ChoiceBatch:
    """Decode every element, splitting successes from failures.

    Args:
        raw_choices: Raw `choices` list

    Returns:
        Batch with decoded choices and failure records, both in payload order
    """
    choices: List[Choice] = []
    failures: List[ChoiceFailure] = []

    for position, raw in enumerate(raw_choices):
        try:
            choices.append(decode_choice(raw))
        except ChoiceDecodeError as e:
            failures.append(ChoiceFailure(position=position, raw=raw, reason=e.message))

    return ChoiceBatch(choices=tuple(choices), failures=tuple(failures))
