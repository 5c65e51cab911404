"""Single-attempt JSON POST over httpx.

Send failures (including a malformed URL) and body-read failures (including
a corrupt compressed body) are reported separately; both are
network errors. No retries are made.
"""

from __future__ import annotations

import logging

import httpx

from text_client.adapter.errors import NetworkError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def build_headers(api_key: str) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


async def post_json(
    url: str,
    body: str,
    api_key: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> tuple[int, bytes]:
    """POST ``body`` to ``url`` and return the status code and raw body.

    An injected ``client`` is used as-is and left open. Without one, a
    client is created for this call only.
    """
    owns_client = client is None
    http = client or httpx.AsyncClient()
    try:
        try:
            request = http.build_request(
                "POST",
                url,
                content=body.encode("utf-8"),
                headers=build_headers(api_key),
                timeout=timeout,
            )
            logger.debug("POST %s (%d bytes)", url, len(request.content))
            response = await http.send(request, stream=True)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise NetworkError(
                message=f"Request to {url} failed: {exc!r}",
                url=url,
                stage="send",
                cause=exc,
            ) from exc

        try:
            raw = await response.aread()
        except (httpx.RequestError, httpx.StreamError) as exc:
            raise NetworkError(
                message=f"Reading response from {url} failed: {exc!r}",
                url=url,
                stage="read",
                cause=exc,
            ) from exc
        finally:
            await response.aclose()
    finally:
        if owns_client:
            await http.aclose()

    logger.debug("POST %s -> %d (%d bytes)", url, response.status_code, len(raw))
    return response.status_code, raw
