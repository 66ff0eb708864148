"""Decoders for the sub-structures of a chat completion payload."""

from .choice import ChoiceBatch, ChoiceFailure, decode_choice, decode_choices
from .usage import UsageDecoder, parse_usage

__all__ = [
    "ChoiceBatch",
    "ChoiceFailure",
    "UsageDecoder",
    "decode_choice",
    "decode_choices",
    "parse_usage",
]
