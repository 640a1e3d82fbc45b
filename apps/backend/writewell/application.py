# apps/backend/writewell/application.py

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from writewell import db
from writewell.api.routes import router as openai_router
from writewell.core.config import Settings, get_settings
from writewell.core.openai_client import LLMClient, OpenAIClient
from writewell.models import user as _models  # noqa: F401  (registers tables on Base)
from writewell.routes.users import router as users_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    llm_client: Optional[LLMClient] = None,
) -> FastAPI:
    """
    Build the backend app.
    Raises ConfigurationError right here if no upstream credential is configured.
    """
    settings = settings or get_settings()

    if llm_client is None:
        llm_client = OpenAIClient.from_settings(settings)

    engine = db.init_db(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.Base.metadata.create_all(bind=engine)
        logger.info("Backend ready (model=%s)", settings.openai_model)
        yield
        engine.dispose()

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.llm_client = llm_client

    # -------------------------------------------------------------------------
    # CORS (the browser hits /openai/analyze-stream directly)
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router, tags=["users"])
    app.include_router(openai_router, prefix="/openai", tags=["openai"])

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/debug/runtime")
    def debug_runtime():
        key = settings.openai_api_key
        return {
            "openai_key_present": bool(key),
            "openai_key_len": len(key or ""),
            "openai_model": settings.openai_model,
            "database_url_present": bool(settings.database_url),
            "llm_client": type(app.state.llm_client).__name__,
        }

    return app
