"""Function and tool call models."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class FunctionCall(BaseModel):
    """Function call model."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(description="The name of the function to call")
    arguments: StrictStr = Field(
        description="The arguments to call the function with, as JSON text"
    )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "arguments": self.arguments}


class ToolCall(BaseModel):
    """Tool call generated by the model."""

    model_config = ConfigDict(frozen=True)

    id: StrictStr = Field(description="ID of this tool call")
    type: StrictStr = Field(description="The type of the tool, usually function")
    function: FunctionCall = Field(description="The function that was called")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "function": self.function.to_dict(),
        }
