# apps/backend/writewell/core/openai_client.py

from __future__ import annotations

import logging
from typing import AsyncIterator, Dict, List, Optional, Protocol

import httpx
from openai import AsyncOpenAI, OpenAIError

from .config import Settings
from .errors import ConfigurationError, EmptyUpstreamResponse, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

JSON_ARRAY_SYSTEM = (
    "You are a JSON API. Respond with a single JSON array and nothing else.\n"
    "No markdown, no code fences, no text before or after the array."
)

Message = Dict[str, str]


class LLMClient(Protocol):
    """What the writing operations need from a model provider."""

    async def complete(
        self,
        prompt: str,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str: ...

    async def complete_json(
        self,
        prompt: str,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str: ...

    def stream_complete(
        self,
        messages: List[Message],
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> AsyncIterator[str]: ...


class OpenAIClient:
    """
    Single point of contact with the OpenAI chat completions API.

    Nothing is retried here: every provider or transport failure surfaces as
    UpstreamError carrying the provider's message, and the caller decides.
    """

    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        timeout: float = 60.0,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        if not (api_key or "").strip():
            raise ConfigurationError("OPENAI_API_KEY is not set")

        self.model = model or DEFAULT_MODEL
        self.temperature = temperature
        self._client = client or AsyncOpenAI(api_key=api_key, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenAIClient":
        return cls(
            settings.openai_api_key,
            model=settings.openai_model,
            temperature=settings.openai_temperature,
            timeout=settings.openai_timeout,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _params(self, temperature: Optional[float], max_tokens: Optional[int]) -> Dict[str, object]:
        params: Dict[str, object] = {
            "model": self.model,
            "temperature": self.temperature if temperature is None else temperature,
        }
        if max_tokens is not None:
            params["max_tokens"] = max_tokens
        return params

    async def _chat(
        self,
        messages: List[Message],
        temperature: Optional[float],
        max_tokens: Optional[int],
    ) -> str:
        try:
            res = await self._client.chat.completions.create(
                messages=messages,
                **self._params(temperature, max_tokens),
            )
        except (OpenAIError, httpx.HTTPError) as e:
            raise UpstreamError(str(e)) from e

        if not res.choices:
            raise EmptyUpstreamResponse("Model returned no choices.")
        return res.choices[0].message.content or ""

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------
    async def complete(
        self,
        prompt: str,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        return await self._chat([{"role": "user", "content": prompt}], temperature, max_tokens)

    async def complete_json(
        self,
        prompt: str,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """Raw model text for a prompt that asks for a JSON array. Parsing is the caller's job."""
        messages = [
            {"role": "system", "content": JSON_ARRAY_SYSTEM},
            {"role": "user", "content": prompt},
        ]
        return await self._chat(messages, temperature, max_tokens)

    async def stream_complete(
        self,
        messages: List[Message],
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> AsyncIterator[str]:
        """
        Yield text deltas as the model produces them.

        Forward-only and single-use. Closing the iterator early (client went
        away) closes the underlying HTTP stream.
        """
        try:
            stream = await self._client.chat.completions.create(
                messages=messages,
                stream=True,
                **self._params(temperature, max_tokens),
            )
            async with stream:
                async for chunk in stream:
                    if not chunk.choices:
                        continue
                    delta = chunk.choices[0].delta.content
                    if delta:
                        yield delta
        except (OpenAIError, httpx.HTTPError) as e:
            raise UpstreamError(str(e)) from e
