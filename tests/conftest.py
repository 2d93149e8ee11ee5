from __future__ import annotations

import json
from typing import Any, Callable, List, Optional, Union

import httpx
import pytest

from recallbricks import ClientConfig, RecallBricks

API_KEY = "rb_test_secret_key"
SERVICE_TOKEN = "svc_test_secret_token"
BASE_URL = "https://api.example.com/api/v1"

Scripted = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


class ScriptedHandler:
    """Records every request and answers from a script; the last entry repeats."""

    def __init__(self, *script: Scripted) -> None:
        self.script = list(script) or [httpx.Response(200, json={})]
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.script)) - 1
        item = self.script[index]
        if isinstance(item, Exception):
            raise item
        if callable(item) and not isinstance(item, httpx.Response):
            return item(request)
        return item

    @property
    def count(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


class SleepRecorder:
    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture()
def sleeps() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture()
def make_client(sleeps: SleepRecorder):
    def factory(handler: ScriptedHandler, sleep: Optional[Callable] = None, **options: Any) -> RecallBricks:
        if "service_token" not in options:
            options.setdefault("api_key", API_KEY)
        options.setdefault("base_url", BASE_URL)
        return RecallBricks(
            ClientConfig(**options),
            transport=httpx.MockTransport(handler),
            sleep=sleep or sleeps,
        )

    return factory


def error_response(status: int, **body: Any) -> httpx.Response:
    return httpx.Response(status, json=body)
