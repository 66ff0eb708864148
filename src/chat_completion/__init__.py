"""Chat completion response decoding."""

from .assembler import ResponseAssembler, decode_response
from .decoders import (
    ChoiceBatch,
    ChoiceFailure,
    UsageDecoder,
    decode_choice,
    decode_choices,
    parse_usage,
)
from .encoder import encode_response, encode_response_json
from .errors import (
    ChoiceDecodeError,
    DecodeError,
    InvalidPayloadError,
    UsageDecodeError,
)
from .models import (
    ChatCompletionResponse,
    Choice,
    CompletionTokensDetails,
    FunctionCall,
    PromptTokensDetails,
    ResponseMessage,
    ToolCall,
    Usage,
)

__all__ = [
    "ChatCompletionResponse",
    "Choice",
    "ChoiceBatch",
    "ChoiceDecodeError",
    "ChoiceFailure",
    "CompletionTokensDetails",
    "DecodeError",
    "FunctionCall",
    "InvalidPayloadError",
    "PromptTokensDetails",
    "ResponseAssembler",
    "ResponseMessage",
    "ToolCall",
    "Usage",
    "UsageDecodeError",
    "UsageDecoder",
    "decode_choice",
    "decode_choices",
    "decode_response",
    "encode_response",
    "encode_response_json",
    "parse_usage",
]
