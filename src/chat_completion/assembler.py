"""Chat completion response assembly."""
import json
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from core.logger import LoggerService
from core.settings import Settings
from .decoders import ChoiceBatch, ChoiceFailure, UsageDecoder, decode_choices
from .errors import InvalidPayloadError, describe_validation_error
from .models import ChatCompletionResponse

TOP_LEVEL_FIELDS = ("id", "object", "created", "model", "system_fingerprint")


class ResponseAssembler:
    """Build `ChatCompletionResponse` objects from raw API payloads.

    Malformed choices are dropped and logged, malformed usage is replaced by
    zero usage. Only a broken top-level contract (`object`, `created`,
    `model`, or a mistyped `id`/`system_fingerprint`) raises.
    """

    def __init__(
        self,
        logger: LoggerService,
        settings: Settings,
        usage_decoder: UsageDecoder,
    ) -> None:
        """Initialize assembler.

        Args:
            logger: Logger service used as the diagnostic sink
            settings: Settings instance
            usage_decoder: Decoder for the usage block
        """
        self.logger = logger.get_logger(__name__)
        self.settings = settings
        self.usage_decoder = usage_decoder

    def assemble(self, payload: Any, meta: Any = None) -> ChatCompletionResponse:
        """Decode a raw payload into a response.

        Args:
            payload: Decoded JSON body of a chat completion response
            meta: Response metadata handle, stored as is

        Returns:
            Immutable chat completion response

        Raises:
            InvalidPayloadError: If the payload is not an object or a required
                top-level field is missing or mistyped
        """
        if not isinstance(payload, Mapping):
            raise InvalidPayloadError(
                f"Chat completion payload must be an object, got {type(payload).__name__}",
                details={"type": type(payload).__name__},
            )

        self.logger.debug(
            "Assembling chat completion response",
            extra={"response_id": payload.get("id"), "model": payload.get("model")},
        )

        # Top-level fields are validated before choices and usage are decoded
        fields = {name: payload.get(name) for name in TOP_LEVEL_FIELDS}
        try:
            header = ChatCompletionResponse.model_validate({**fields, "meta": meta})
        except PydanticValidationError as e:
            errors = describe_validation_error(e)
            field = errors[0]["loc"] if errors else None
            raise InvalidPayloadError(
                "Invalid chat completion payload: "
                + "; ".join(f"{item['loc']}: {item['msg']}" for item in errors),
                field=field,
                details={"errors": errors},
            ) from e

        batch = self._decode_choices(payload.get("choices"))
        usage = self.usage_decoder.decode(payload.get("usage"))
        response = header.model_copy(update={"choices": batch.choices, "usage": usage})

        self.logger.debug(
            "Assembled chat completion response",
            extra={
                "response_id": response.id,
                "choices_count": len(response.choices),
                "dropped_choices": len(batch.failures),
            },
        )
        return response

    def _decode_choices(self, raw_choices: Any) -> ChoiceBatch:
        # A missing or non-list container is read as "no choices" and is
        # not reported.
        # TODO: warn about a present but non-list `choices` container.
        if not isinstance(raw_choices, list):
            return ChoiceBatch()

        batch = decode_choices(raw_choices)
        for failure in batch.failures:
            self._report_choice_failure(failure)
        return batch

    def _report_choice_failure(self, failure: ChoiceFailure) -> None:
        self.logger.warning(
            "Failed to process choice: %s. Error: %s"
            % (self._preview(failure.raw), failure.reason),
            extra={"choice_position": failure.position, "error": failure.reason},
        )

    def _preview(self, raw: Any) -> str:
        try:
            text = json.dumps(raw, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            text = repr(raw)

        limit = self.settings.DIAGNOSTIC_PREVIEW_LIMIT
        if limit and len(text) > limit:
            return text[:limit] + "..."
        return text


def decode_response(
    payload: Any, meta: Any = None, assembler: Optional[ResponseAssembler] = None
) -> ChatCompletionResponse:
    """Decode a payload with the container's assembler unless one is given."""
    if assembler is None:
        from di import container

        assembler = container.response_assembler()
    return assembler.assemble(payload, meta)
