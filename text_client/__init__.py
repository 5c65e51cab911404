"""Async client for a remote text-completion and text-edit API."""

from text_client.adapter import (
    APIError,
    ClientError,
    CompletionsParams,
    CompletionsResponse,
    EditsParams,
    EditsResponse,
    NetworkError,
    OtherError,
    TextClient,
    get_text_client,
)
from text_client.api import completions, completions_pretty, edits, edits_pretty
from text_client.config import ClientConfig

__all__ = [
    "APIError",
    "ClientConfig",
    "ClientError",
    "CompletionsParams",
    "CompletionsResponse",
    "EditsParams",
    "EditsResponse",
    "NetworkError",
    "OtherError",
    "TextClient",
    "completions",
    "completions_pretty",
    "edits",
    "edits_pretty",
    "get_text_client",
]
