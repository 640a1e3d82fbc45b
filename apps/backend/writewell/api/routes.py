from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse, StreamingResponse

from writewell.core.config import Settings
from writewell.core.openai_client import LLMClient
from writewell.schemas.writing import (
    DEFAULT_TONE,
    AnalyzeRequest,
    AnalyzeResponse,
    RewriteRequest,
    SuggestResponse,
)
from writewell.services.analysis import analyze_text
from writewell.services.live_feedback import stream_analysis
from writewell.services.rewrite import suggest_rewrite

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_TEXT = "Missing text input"
SUGGEST_FAILED = "Failed to get suggestion from OpenAI"
ANALYZE_FAILED = "Failed to analyze text with OpenAI"
STREAM_FAILED = "Failed to stream analysis"

STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
}


def get_llm_client(request: Request) -> LLMClient:
    return request.app.state.llm_client


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def _clean_text(text: Optional[str]) -> Optional[str]:
    if text is None or not text.strip():
        return None
    return text


@router.post("/suggest", response_model=SuggestResponse)
async def suggest(
    payload: RewriteRequest,
    client: LLMClient = Depends(get_llm_client),
    settings: Settings = Depends(get_app_settings),
):
    text = _clean_text(payload.text)
    if text is None:
        raise HTTPException(status_code=400, detail=MISSING_TEXT)

    try:
        suggestion = await suggest_rewrite(
            client,
            text,
            payload.tone or DEFAULT_TONE,
            max_tokens=settings.openai_rewrite_max_tokens,
        )
    except Exception:
        logger.exception("Error in /openai/suggest")
        raise HTTPException(status_code=500, detail=SUGGEST_FAILED)

    return {"suggestion": suggestion}


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    payload: AnalyzeRequest,
    client: LLMClient = Depends(get_llm_client),
    settings: Settings = Depends(get_app_settings),
):
    text = _clean_text(payload.text)
    if text is None:
        raise HTTPException(status_code=400, detail=MISSING_TEXT)

    try:
        suggestions = await analyze_text(
            client,
            text,
            payload.tone or DEFAULT_TONE,
            temperature=settings.openai_analyze_temperature,
        )
    except Exception:
        logger.exception("Error in /openai/analyze")
        raise HTTPException(status_code=500, detail=ANALYZE_FAILED)

    return AnalyzeResponse(suggestions=suggestions)


@router.post("/analyze-stream")
async def analyze_stream(
    payload: AnalyzeRequest,
    client: LLMClient = Depends(get_llm_client),
):
    """
    Live critique as plain text, one chunk per model fragment.

    The first fragment is pulled before the response starts so an early
    failure can still be a 500. After that the status is committed and a
    failure just ends the body.
    """
    text = _clean_text(payload.text)
    if text is None:
        return PlainTextResponse(MISSING_TEXT, status_code=400)

    fragments = stream_analysis(client, text, payload.tone or DEFAULT_TONE)

    try:
        first = await fragments.__anext__()
    except Exception:
        logger.exception("Error in /openai/analyze-stream before first chunk")
        await fragments.aclose()
        return PlainTextResponse(STREAM_FAILED, status_code=500)

    async def relay() -> AsyncIterator[str]:
        try:
            yield first
            async for fragment in fragments:
                yield fragment
        except Exception:
            logger.exception("Error in /openai/analyze-stream after streaming started")
        finally:
            await fragments.aclose()

    return StreamingResponse(
        relay(),
        media_type="text/plain; charset=utf-8",
        headers=STREAM_HEADERS,
    )
