"""Shared fixtures."""
import copy
from typing import Any, Dict

import pytest

from chat_completion import ResponseAssembler, UsageDecoder
from core.logger import LoggerService
from core.settings import Settings

BASE_PAYLOAD: Dict[str, Any] = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-4",
    "system_fingerprint": "fp_44709d6fcb",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello there"},
            "finish_reason": "stop",
        },
        {
            "index": 1,
            "message": {
                "role": "assistant",
                "content": None,
                "tool_calls": [
                    {
                        "id": "call_abc",
                        "type": "function",
                        "function": {
                            "name": "get_weather",
                            "arguments": '{"city": "Paris"}',
                        },
                    }
                ],
            },
            "finish_reason": "tool_calls",
        },
        {
            "index": 2,
            "message": {
                "role": "assistant",
                "function_call": {"name": "lookup", "arguments": "{}"},
            },
            "finish_reason": "function_call",
        },
    ],
    "usage": {
        "prompt_tokens": 9,
        "completion_tokens": 12,
        "total_tokens": 21,
    },
}


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment."""
    return Settings(_env_file=None, LOG_LEVEL="DEBUG", LOG_FORMAT="text")


@pytest.fixture
def logger_service(settings: Settings) -> LoggerService:
    return LoggerService(settings_instance=settings)


@pytest.fixture
def usage_decoder(logger_service: LoggerService) -> UsageDecoder:
    return UsageDecoder(logger=logger_service)


@pytest.fixture
def assembler(
    logger_service: LoggerService, settings: Settings, usage_decoder: UsageDecoder
) -> ResponseAssembler:
    return ResponseAssembler(
        logger=logger_service, settings=settings, usage_decoder=usage_decoder
    )


@pytest.fixture
def payload() -> Dict[str, Any]:
    """Fresh copy of a well-formed payload with three choices."""
    return copy.deepcopy(BASE_PAYLOAD)
