"""Chat completion response models."""

from .choice import Choice
from .message import ResponseMessage
from .response import ChatCompletionResponse
from .tools import FunctionCall, ToolCall
from .usage import CompletionTokensDetails, PromptTokensDetails, Usage

__all__ = [
    "ChatCompletionResponse",
    "Choice",
    "CompletionTokensDetails",
    "FunctionCall",
    "PromptTokensDetails",
    "ResponseMessage",
    "ToolCall",
    "Usage",
]
