"""Completion choice model."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from .message import ResponseMessage


class Choice(BaseModel):
    """One candidate completion within a response."""

    model_config = ConfigDict(frozen=True)

    index: StrictInt = Field(ge=0, description="Index of the choice in the list")
    message: ResponseMessage = Field(description="The message generated by the model")
    finish_reason: Optional[StrictStr] = Field(
        None,
        description=(
            "The reason the model stopped generating tokens. "
            "None while generation has not finished"
        ),
    )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "index": self.index,
            "message": self.message.to_dict(),
        }
        if self.finish_reason is not None:
            data["finish_reason"] = self.finish_reason
        return data
