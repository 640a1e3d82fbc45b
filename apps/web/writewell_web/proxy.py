# apps/web/writewell_web/proxy.py

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

BACKEND_FAILED = "Backend failed"
PROXY_ERROR = "Proxy server error"


class BackendProxy:
    """
    Request/response relay to the writing backend.

    The browser only ever sees the backend's JSON on success. Any backend
    failure collapses to {"error": "Backend failed"} and any transport
    failure to {"error": "Proxy server error"}, both 500.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def post_json(self, path: str, payload: Dict[str, Any]) -> JSONResponse:
        url = f"{self.base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload)

            if response.is_error:
                logger.error(
                    "Backend error on POST %s: %s %s",
                    path,
                    response.status_code,
                    response.text[:500],
                )
                return JSONResponse({"error": BACKEND_FAILED}, status_code=500)

            return JSONResponse(response.json(), status_code=response.status_code)

        except (httpx.HTTPError, ValueError):
            logger.exception("Proxy error on POST %s", path)
            return JSONResponse({"error": PROXY_ERROR}, status_code=500)
