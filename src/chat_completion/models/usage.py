"""Token accounting models."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class PromptTokensDetails(BaseModel):
    """Breakdown of prompt tokens."""

    model_config = ConfigDict(frozen=True)

    cached_tokens: Optional[StrictInt] = Field(
        None, ge=0, description="Prompt tokens served from the provider cache"
    )
    audio_tokens: Optional[StrictInt] = Field(
        None, ge=0, description="Audio input tokens present in the prompt"
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class CompletionTokensDetails(BaseModel):
    """Breakdown of completion tokens."""

    model_config = ConfigDict(frozen=True)

    reasoning_tokens: Optional[StrictInt] = Field(
        None, ge=0, description="Tokens generated by the model for reasoning"
    )
    audio_tokens: Optional[StrictInt] = Field(
        None, ge=0, description="Audio tokens generated by the model"
    )
    accepted_prediction_tokens: Optional[StrictInt] = Field(
        None,
        ge=0,
        description="Predicted output tokens that appeared in the completion",
    )
    rejected_prediction_tokens: Optional[StrictInt] = Field(
        None,
        ge=0,
        description="Predicted output tokens that did not appear in the completion",
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class Usage(BaseModel):
    """Usage statistics for the completion request.

    Counters are stored exactly as reported. `total_tokens` is not checked
    against the sum of the other two: cached and predicted tokens are
    accounted separately by some providers.
    """

    model_config = ConfigDict(frozen=True)

    prompt_tokens: StrictInt = Field(ge=0, description="Number of tokens in the prompt")
    completion_tokens: Optional[StrictInt] = Field(
        None, ge=0, description="Number of tokens in the generated completion"
    )
    total_tokens: StrictInt = Field(
        ge=0, description="Total number of tokens used in the request"
    )
    prompt_tokens_details: Optional[PromptTokensDetails] = Field(
        None, description="Breakdown of tokens used in the prompt"
    )
    completion_tokens_details: Optional[CompletionTokensDetails] = Field(
        None, description="Breakdown of tokens used in the completion"
    )

    @classmethod
    def zero(cls) -> "Usage":
        """Usage with every counter set to zero."""
        return cls(prompt_tokens=0, completion_tokens=0, total_tokens=0)

    def to_dict(self) -> Dict[str, Any]:
        """Canonical representation, absent counters and details omitted."""
        data: Dict[str, Any] = {"prompt_tokens": self.prompt_tokens}
        if self.completion_tokens is not None:
            data["completion_tokens"] = self.completion_tokens
        data["total_tokens"] = self.total_tokens
        if self.prompt_tokens_details is not None:
            data["prompt_tokens_details"] = self.prompt_tokens_details.to_dict()
        if self.completion_tokens_details is not None:
            data["completion_tokens_details"] = (
                self.completion_tokens_details.to_dict()
            )
        return data
