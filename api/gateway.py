"""
Client for the OpenAI-compatible AI gateway.

Routes call ``chat_completion`` and map the SDK's exceptions to their own
HTTP responses; the rate-limit (429) and credits (402) cases are exposed as
helpers because every endpoint treats them specially.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import openai
from openai import OpenAI

from api.config import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.7


def get_client(settings: Optional[Settings] = None) -> OpenAI:
    settings = settings or get_settings()
    if not settings.lovable_api_key:
        raise RuntimeError("LOVABLE_API_KEY is not configured")
    return OpenAI(base_url=settings.ai_gateway_url, api_key=settings.lovable_api_key, max_retries=0)


def chat_completion(
    messages: List[Dict[str, str]],
    *,
    tools: Optional[List[Dict[str, Any]]] = None,
    tool_choice: Optional[Dict[str, Any]] = None,
    temperature: float = DEFAULT_TEMPERATURE,
    max_tokens: Optional[int] = None,
    settings: Optional[Settings] = None,
):
    settings = settings or get_settings()
    client = get_client(settings)
    kwargs: Dict[str, Any] = {
        "model": settings.ai_gateway_model,
        "messages": messages,
        "temperature": temperature,
    }
    if tools:
        kwargs["tools"] = tools
    if tool_choice:
        kwargs["tool_choice"] = tool_choice
    if max_tokens:
        kwargs["max_tokens"] = max_tokens
    return client.chat.completions.create(**kwargs)


def is_rate_limited(error: Exception) -> bool:
    return isinstance(error, openai.RateLimitError)


def is_out_of_credits(error: Exception) -> bool:
    return isinstance(error, openai.APIStatusError) and error.status_code == 402


def status_of(error: Exception) -> Optional[int]:
    return error.status_code if isinstance(error, openai.APIStatusError) else None


def message_content(response) -> Optional[str]:
    choices = getattr(response, "choices", None) or []
    if not choices:
        return None
    return choices[0].message.content


def tool_call_arguments(response, tool_name: str) -> Optional[str]:
    """Raw JSON arguments of the first call to ``tool_name``, if any."""
    choices = getattr(response, "choices", None) or []
    if not choices:
        return None
    for call in choices[0].message.tool_calls or []:
        if call.function.name == tool_name:
            return call.function.arguments
    return None
