# apps/backend/writewell/services/rewrite.py

from __future__ import annotations

import logging
from typing import Optional

from writewell.core.errors import EmptyUpstreamResponse, OperationFailed, UpstreamError
from writewell.core.openai_client import LLMClient
from writewell.schemas.writing import DEFAULT_TONE

logger = logging.getLogger(__name__)


def build_rewrite_prompt(text: str, tone: str) -> str:
    return (
        f"Rewrite the following text so it is clearer and more concise, in a {tone} tone.\n"
        "Keep the original meaning and language.\n"
        "Return ONLY the rewritten text. No commentary, no quotes, no preamble.\n\n"
        f"Text:\n{text}"
    )


async def suggest_rewrite(
    client: LLMClient,
    text: str,
    tone: str = DEFAULT_TONE,
    *,
    max_tokens: Optional[int] = None,
) -> str:
    """
    One rewritten version of `text`.
    Never returns an empty string: blank output or any upstream failure raises OperationFailed.
    """
    prompt = build_rewrite_prompt(text, tone or DEFAULT_TONE)

    try:
        out = (await client.complete(prompt, max_tokens=max_tokens)).strip()
        if not out:
            raise EmptyUpstreamResponse("Model returned an empty rewrite.")
    except UpstreamError as e:
        raise OperationFailed(f"Rewrite failed: {e}") from e

    return out
