# apps/backend/writewell/services/analysis.py

from __future__ import annotations

import logging
from typing import List, Optional

from writewell.core.errors import UpstreamError
from writewell.core.openai_client import LLMClient
from writewell.schemas.writing import DEFAULT_TONE, Suggestion
from writewell.services.postprocess import parse_suggestions

logger = logging.getLogger(__name__)


def build_analyze_prompt(text: str, tone: str) -> str:
    return (
        "You are a writing assistant reviewing a user's text.\n"
        f"The writer is aiming for a {tone} tone.\n\n"
        "Return a FLAT JSON array. Each element is one issue:\n"
        "{\n"
        '  "id": "string",\n'
        '  "type": "grammar" | "clarity" | "tone" | "improvement",\n'
        '  "title": "short label",\n'
        '  "description": "one or two sentences",\n'
        '  "original": "exact snippet from the text",\n'
        '  "suggested": "replacement for that snippet"\n'
        "}\n\n"
        "Rules:\n"
        '- The top level MUST be an array. Do NOT wrap it in an object like {"suggestions": [...]}.\n'
        "- Do NOT nest objects inside the elements.\n"
        "- Do NOT wrap the output in markdown or ``` code fences.\n"
        "- If there is nothing to improve, return [].\n\n"
        f"Text:\n{text}"
    )


async def analyze_text(
    client: LLMClient,
    text: str,
    tone: str = DEFAULT_TONE,
    *,
    temperature: Optional[float] = None,
) -> List[Suggestion]:
    """
    Structured suggestions for `text`.

    Fails open: upstream failures and malformed model output both come back
    as an empty list, so the caller never sees an exception from here.
    """
    prompt = build_analyze_prompt(text, tone or DEFAULT_TONE)

    try:
        raw = await client.complete_json(prompt, temperature=temperature)
    except UpstreamError as e:
        logger.warning("Analyze upstream call failed, returning no suggestions: %s", e)
        return []

    return parse_suggestions(raw)
