"""Canned response bodies and a recording mock-transport handler."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx

API_KEY = "sk-test-key"
BASE_URL = "https://api.example.test/v1"

INVALID_KEY_BODY = (
    '{"error":{"message":"invalid api key","type":"invalid_request_error",'
    '"param":null,"code":null}}'
)


def completions_body(*texts: str, model: str = "m") -> dict[str, Any]:
    return {
        "id": "cmpl-1",
        "object": "text_completion",
        "created": 1670000000,
        "model": model,
        "choices": [
            {"text": text, "index": i, "logprobs": None, "finish_reason": "stop"}
            for i, text in enumerate(texts)
        ],
        "usage": {"prompt_tokens": 4, "completion_tokens": 2, "total_tokens": 6},
    }


def edits_body(*texts: str) -> dict[str, Any]:
    return {
        "object": "edit",
        "created": 1670000000,
        "choices": [{"text": text, "index": i} for i, text in enumerate(texts)],
        "usage": {"prompt_tokens": 10, "completion_tokens": 8, "total_tokens": 18},
    }


class Recorder:
    """Mock transport handler that records requests and replays one response."""

    def __init__(
        self,
        response: httpx.Response | Callable[[httpx.Request], httpx.Response],
    ) -> None:
        self._response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if callable(self._response):
            return self._response(request)
        return self._response

    @property
    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)
