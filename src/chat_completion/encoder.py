"""Canonical encoding of decoded responses."""
import json
from typing import Any, Dict, Optional

from .models import ChatCompletionResponse


def encode_response(response: ChatCompletionResponse) -> Dict[str, Any]:
    """Encode a response back into the API payload shape.

    Keys follow the order id, object, created, model, system_fingerprint,
    choices, usage. Absent values are omitted rather than emitted as null.
    Choices dropped during decoding are not restored.

    Args:
        response: Decoded response

    Returns:
        Plain dictionary ready for JSON serialization
    """
    return response.to_dict()


def encode_response_json(
    response: ChatCompletionResponse, indent: Optional[int] = None
) -> str:
    """Encode a response as JSON text."""
    return json.dumps(encode_response(response), ensure_ascii=False, indent=indent)
