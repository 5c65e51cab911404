"""Typed errors raised by the text adapter.

Every failure of a call surfaces as exactly one of three kinds:

- ``APIError``: the remote service answered with an error payload.
- ``NetworkError``: no well-formed response was obtained.
- ``OtherError``: a local failure (serialization, decoding, or a body that
  matched neither known response shape).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ClientError(Exception):
    """Base error type for text adapter failures."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class APIError(ClientError):
    """The remote service rejected or could not fulfil the request."""

    error_type: str = ""
    param: str | None = None
    code: str | int | None = None
    status_code: int | None = None


@dataclass(eq=False)
class NetworkError(ClientError):
    """Connection, timeout or stream failure while talking to the service."""

    url: str = ""
    stage: str = "send"
    cause: Exception | None = None


@dataclass(eq=False)
class OtherError(ClientError):
    """Local failure unrelated to the network or the remote semantics."""

    stage: str = "classify"
    success_parse_error: str | None = None
    error_parse_error: str | None = None
    cause: Exception | None = None
