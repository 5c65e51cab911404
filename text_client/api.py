"""Module-level entry points taking the API key per call.

Each call builds its own ``TextClient``; see ``text_client.adapter.factory``
for a shared, environment-configured client.
"""

from __future__ import annotations

from text_client.adapter.client import TextClient
from text_client.adapter.models import (
    CompletionsParams,
    CompletionsResponse,
    EditsParams,
    EditsResponse,
)


async def completions(
    prompt: str, params: CompletionsParams, api_key: str
) -> CompletionsResponse:
    return await TextClient(api_key).completions(prompt, params)


async def completions_pretty(
    prompt: str, model: str, max_tokens: int, api_key: str
) -> str:
    return await TextClient(api_key).completions_pretty(prompt, model, max_tokens)


async def edits(
    input: str, instruction: str, params: EditsParams, api_key: str
) -> EditsResponse:
    return await TextClient(api_key).edits(input, instruction, params)


async def edits_pretty(input: str, instruction: str, model: str, api_key: str) -> str:
    return await TextClient(api_key).edits_pretty(input, instruction, model)
