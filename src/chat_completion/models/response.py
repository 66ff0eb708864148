"""Chat completion response aggregate."""
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from .choice import Choice
from .usage import Usage


class ChatCompletionResponse(BaseModel):
    """Decoded chat completion response.

    Instances are frozen and may be shared between threads. The `meta` handle
    belongs to the caller: it is stored by reference and never serialized.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[StrictStr] = Field(
        None, description="Unique identifier for this completion"
    )
    object: StrictStr = Field(description="The object type, e.g. chat.completion")
    created: StrictInt = Field(
        description="Unix timestamp (seconds) of when the completion was created"
    )
    model: StrictStr = Field(description="The model used for the completion")
    system_fingerprint: Optional[StrictStr] = Field(
        None,
        description="Backend configuration fingerprint the model ran with",
    )
    choices: Tuple[Choice, ...] = Field(
        default=(),
        description="Successfully decoded choices, in payload order",
    )
    usage: Usage = Field(
        default_factory=Usage.zero,
        description="Usage statistics for the completion request",
    )
    meta: Any = Field(
        None,
        exclude=True,
        repr=False,
        description="Response metadata supplied by the transport layer",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Canonical representation with absent optional keys omitted."""
        data: Dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data["object"] = self.object
        data["created"] = self.created
        data["model"] = self.model
        if self.system_fingerprint is not None:
            data["system_fingerprint"] = self.system_fingerprint
        data["choices"] = [choice.to_dict() for choice in self.choices]
        data["usage"] = self.usage.to_dict()
        return data

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __contains__(self, key: object) -> bool:
        return key in self.to_dict()

    # `meta` is owned by the caller and may be unhashable; it is left out of
    # equality and hashing.
    def _decoded_fields(self) -> Tuple[Any, ...]:
        return (
            self.id,
            self.object,
            self.created,
            self.model,
            self.system_fingerprint,
            self.choices,
            self.usage,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChatCompletionResponse):
            return NotImplemented
        return self._decoded_fields() == other._decoded_fields()

    def __hash__(self) -> int:
        return hash(self._decoded_fields())
