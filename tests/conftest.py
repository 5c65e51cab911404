from __future__ import annotations

from typing import Callable

import httpx
import pytest

from helpers import API_KEY, BASE_URL, Recorder
from text_client.adapter.client import TextClient
from text_client.adapter.factory import reset_client


@pytest.fixture
def make_client() -> Callable[[Recorder], TextClient]:
    """Build a TextClient whose HTTP calls go to ``recorder``."""

    def _make(recorder: Recorder) -> TextClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        return TextClient(API_KEY, base_url=BASE_URL, http_client=http)

    return _make


@pytest.fixture(autouse=True)
def _fresh_singleton():
    reset_client()
    yield
    reset_client()
