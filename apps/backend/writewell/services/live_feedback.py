# apps/backend/writewell/services/live_feedback.py

from __future__ import annotations

import inspect
import logging
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Union

from writewell.core.errors import EmptyUpstreamResponse
from writewell.core.openai_client import LLMClient, Message
from writewell.schemas.writing import DEFAULT_TONE

logger = logging.getLogger(__name__)

FragmentCallback = Callable[[str], Union[None, Awaitable[None]]]

LIVE_FEEDBACK_SYSTEM = (
    "You are a writing coach giving live feedback while the user types.\n"
    "Reply with a few short bullet-style lines in plain text, starting each with '- '.\n"
    "Do NOT output JSON. Do NOT use code fences or markdown headings.\n"
    "Keep it under 80 words."
)


def build_live_feedback_messages(text: str, tone: str) -> List[Message]:
    return [
        {"role": "system", "content": LIVE_FEEDBACK_SYSTEM},
        {"role": "user", "content": f"Target tone: {tone}\n\nText:\n{text}"},
    ]


async def stream_analysis(
    client: LLMClient,
    text: str,
    tone: str = DEFAULT_TONE,
    *,
    temperature: Optional[float] = None,
) -> AsyncIterator[str]:
    """
    Fragments of live critique in arrival order, unbuffered.
    Upstream errors propagate; a stream that produced no text raises EmptyUpstreamResponse.
    """
    messages = build_live_feedback_messages(text, tone or DEFAULT_TONE)
    produced = False

    fragments = client.stream_complete(messages, temperature=temperature)
    try:
        async for fragment in fragments:
            if not fragment:
                continue
            produced = True
            yield fragment
    finally:
        close = getattr(fragments, "aclose", None)
        if close is not None:
            await close()

    if not produced:
        raise EmptyUpstreamResponse("Model stream ended without any text.")


async def stream_analyze_summary(
    client: LLMClient,
    text: str,
    tone: str,
    on_fragment: FragmentCallback,
) -> None:
    """
    Callback form of stream_analysis for library callers that push fragments
    somewhere other than an HTTP response (the relay route iterates
    stream_analysis directly). `on_fragment` may be sync or async and is
    called once per fragment, in arrival order.
    """
    async for fragment in stream_analysis(client, text, tone):
        result = on_fragment(fragment)
        if inspect.isawaitable(result):
            await result
