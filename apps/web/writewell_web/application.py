# apps/web/writewell_web/application.py

from __future__ import annotations

from typing import Optional

import httpx
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from writewell_web.config import Settings, get_settings
from writewell_web.metrics import writing_metrics
from writewell_web.proxy import BackendProxy


class SuggestIn(BaseModel):
    # forwarded untouched; the backend owns validation
    text: Optional[str] = None


class AnalyzeIn(BaseModel):
    text: Optional[str] = None
    tone: Optional[str] = None


class MetricsIn(BaseModel):
    text: Optional[str] = None


router = APIRouter()


def _proxy(request: Request) -> BackendProxy:
    return request.app.state.proxy


@router.post("/suggest")
async def suggest(payload: SuggestIn, request: Request):
    return await _proxy(request).post_json("/openai/suggest", {"text": payload.text})


@router.post("/analyze")
async def analyze(payload: AnalyzeIn, request: Request):
    body = {"text": payload.text}
    if payload.tone is not None:
        body["tone"] = payload.tone
    return await _proxy(request).post_json("/openai/analyze", body)


@router.post("/metrics")
def metrics(payload: MetricsIn):
    return writing_metrics(payload.text or "")


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title=settings.app_name, version="0.1.0")
    app.state.settings = settings
    app.state.proxy = BackendProxy(
        settings.backend_url,
        timeout=settings.proxy_timeout,
        transport=transport,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api", tags=["proxy"])

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
