from __future__ import annotations

from typing import Any, AsyncIterator, Dict, List, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from writewell.application import create_app
from writewell.core.config import Settings
from writewell.core.errors import UpstreamError


class FakeLLMClient:
    """Scripted stand-in for OpenAIClient. Records every call it receives."""

    def __init__(
        self,
        completion: str = "",
        json_output: str = "[]",
        fragments: Sequence[str] = (),
        error: Optional[Exception] = None,
        stream_error_after: Optional[int] = None,
    ) -> None:
        self.completion = completion
        self.json_output = json_output
        self.fragments = list(fragments)
        self.error = error
        self.stream_error_after = stream_error_after
        self.calls: List[Dict[str, Any]] = []
        self.stream_closed = False

    async def complete(self, prompt: str, *, temperature=None, max_tokens=None) -> str:
        self.calls.append({"op": "complete", "prompt": prompt, "max_tokens": max_tokens})
        if self.error:
            raise self.error
        return self.completion

    async def complete_json(self, prompt: str, *, temperature=None, max_tokens=None) -> str:
        self.calls.append({"op": "complete_json", "prompt": prompt, "temperature": temperature})
        if self.error:
            raise self.error
        return self.json_output

    async def stream_complete(self, messages, *, temperature=None, max_tokens=None) -> AsyncIterator[str]:
        self.calls.append({"op": "stream_complete", "messages": messages})
        try:
            if self.error and self.stream_error_after is None:
                raise self.error
            for i, fragment in enumerate(self.fragments):
                if self.stream_error_after is not None and i == self.stream_error_after:
                    raise self.error or UpstreamError("stream broke")
                yield fragment
            if self.stream_error_after is not None and self.stream_error_after >= len(self.fragments):
                raise self.error or UpstreamError("stream broke")
        finally:
            self.stream_closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="sk-test",
        database_url="sqlite://",
        cors_origins=["http://localhost:3000"],
    )


@pytest.fixture
def fake_llm_cls():
    return FakeLLMClient


@pytest.fixture
def make_client(settings):
    clients: List[TestClient] = []

    def _make(llm: FakeLLMClient) -> TestClient:
        client = TestClient(create_app(settings, llm_client=llm))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
