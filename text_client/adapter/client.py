"""
Client for the remote text-completion and text-edit API.

One call is one round trip: build the wire request, POST it once, classify
the body. Failures are raised as ``APIError``, ``NetworkError`` or
``OtherError``; nothing is retried.

The ``*_pretty`` methods apply greedy single-result defaults and return the
text of the first choice. They raise the same typed errors as the raw calls.
"""

from __future__ import annotations

import logging
import time

import httpx
from pydantic_core import PydanticSerializationError

from text_client.adapter.classifier import classify_response
from text_client.adapter.errors import APIError, ClientError, NetworkError, OtherError
from text_client.adapter.models import (
    CompletionsParams,
    CompletionsResponse,
    EditsParams,
    EditsResponse,
    WireRequest,
)
from text_client.adapter.operations import COMPLETIONS, EDITS, ResponseT, TextOperation
from text_client.adapter.transport import DEFAULT_TIMEOUT, post_json
from text_client.config import DEFAULT_BASE_URL
from text_client.logging import log_fields
from text_client.observability.metrics import (
    text_request_latency,
    text_requests,
    text_tokens,
)

logger = logging.getLogger(__name__)


class TextClient:
    """
    Async client for the completions and edits endpoints.

    Holds no per-call state, so one instance may serve concurrent calls.
    ``http_client`` is optional; when given it is shared across calls and
    closed by ``aclose()``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._http = http_client

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()

    async def __aenter__(self) -> TextClient:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    # -- raw operations -----------------------------------------------------

    async def completions(
        self, prompt: str, params: CompletionsParams
    ) -> CompletionsResponse:
        request = COMPLETIONS.build_request(prompt, params)
        return await self._execute(COMPLETIONS, request, params.model)

    async def edits(
        self, input: str, instruction: str, params: EditsParams
    ) -> EditsResponse:
        request = EDITS.build_request(input, instruction, params)
        return await self._execute(EDITS, request, params.model)

    # -- convenience wrappers -----------------------------------------------

    async def completions_pretty(
        self, prompt: str, model: str, max_tokens: int
    ) -> str:
        params = COMPLETIONS.default_params(model, max_tokens)
        response = await self.completions(prompt, params)
        return COMPLETIONS.first_text(response)

    async def edits_pretty(self, input: str, instruction: str, model: str) -> str:
        params = EDITS.default_params(model)
        response = await self.edits(input, instruction, params)
        return EDITS.first_text(response)

    # -- shared pipeline ----------------------------------------------------

    async def _execute(
        self,
        operation: TextOperation[ResponseT],
        request: WireRequest,
        model: str,
    ) -> ResponseT:
        url = operation.url(self._base_url)

        try:
            body = request.to_json()
        except PydanticSerializationError as exc:
            text_requests.labels(operation=operation.name, outcome="other_error").inc()
            raise OtherError(
                message=f"Could not serialize {operation.name} request: {exc}",
                stage="serialize",
                cause=exc,
            ) from exc

        logger.debug("%s request body: %s", operation.name, body)

        start = time.perf_counter()
        try:
            status_code, raw = await post_json(
                url,
                body,
                self._api_key,
                timeout=self._timeout,
                client=self._http,
            )
            response = classify_response(raw, operation.response_model, status_code)
        except ClientError as exc:
            outcome = _outcome(exc)
            text_requests.labels(operation=operation.name, outcome=outcome).inc()
            logger.warning(
                "%s call failed: %s",
                operation.name,
                exc,
                extra=log_fields(operation=operation.name, model=model, outcome=outcome),
            )
            raise
        finally:
            text_request_latency.labels(operation=operation.name).observe(
                time.perf_counter() - start
            )

        text_requests.labels(operation=operation.name, outcome="ok").inc()
        text_tokens.labels(operation=operation.name, direction="prompt").inc(
            response.usage.prompt_tokens
        )
        text_tokens.labels(operation=operation.name, direction="completion").inc(
            response.usage.completion_tokens
        )
        logger.info(
            "%s call succeeded",
            operation.name,
            extra=log_fields(
                operation=operation.name,
                model=model,
                choices=len(response.choices),
                total_tokens=response.usage.total_tokens,
            ),
        )
        return response


def _outcome(exc: ClientError) -> str:
    if isinstance(exc, APIError):
        return "api_error"
    if isinstance(exc, NetworkError):
        return "network_error"
    return "other_error"
