"""Assistant message model."""
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .tools import FunctionCall, ToolCall


class ResponseMessage(BaseModel):
    """Message generated by the model.

    `content`, `function_call` and `tool_calls` are independently optional.
    A well-formed response fills exactly one of them, but tool-only and
    function-only turns legitimately carry no text.
    """

    model_config = ConfigDict(frozen=True)

    role: StrictStr = Field(description="The role of the author of this message")
    content: Optional[StrictStr] = Field(
        None, description="The contents of the message"
    )
    function_call: Optional[FunctionCall] = Field(
        None,
        description="Legacy single function call, superseded by tool_calls",
    )
    tool_calls: Optional[Tuple[ToolCall, ...]] = Field(
        None,
        description="The tool calls generated by the model, such as function calls",
    )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"role": self.role}
        if self.content is not None:
            data["content"] = self.content
        if self.function_call is not None:
            data["function_call"] = self.function_call.to_dict()
        if self.tool_calls is not None:
            data["tool_calls"] = [call.to_dict() for call in self.tool_calls]
        return data
