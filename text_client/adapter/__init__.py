from text_client.adapter.classifier import classify_response
from text_client.adapter.client import TextClient
from text_client.adapter.errors import APIError, ClientError, NetworkError, OtherError
from text_client.adapter.factory import get_text_client, reset_client
from text_client.adapter.models import (
    CompletionsChoice,
    CompletionsParams,
    CompletionsRequest,
    CompletionsResponse,
    EditsChoice,
    EditsParams,
    EditsRequest,
    EditsResponse,
    ErrorResponse,
    Usage,
)
from text_client.adapter.operations import (
    COMPLETIONS,
    EDITS,
    CompletionsOperation,
    EditsOperation,
    TextOperation,
)

__all__ = [
    "APIError",
    "ClientError",
    "COMPLETIONS",
    "CompletionsChoice",
    "CompletionsOperation",
    "CompletionsParams",
    "CompletionsRequest",
    "CompletionsResponse",
    "EDITS",
    "EditsChoice",
    "EditsOperation",
    "EditsParams",
    "EditsRequest",
    "EditsResponse",
    "ErrorResponse",
    "NetworkError",
    "OtherError",
    "TextClient",
    "TextOperation",
    "Usage",
    "classify_response",
    "get_text_client",
    "reset_client",
]
