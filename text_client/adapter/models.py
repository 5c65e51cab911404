"""Data models for the text adapter layer.

Three groups live here:
- Parameters: caller-facing generation settings, independent of the wire.
- Wire requests: the exact JSON bodies posted to the remote API.
- Wire responses: the success and error payloads the remote API returns.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class _Wire(BaseModel):
    # Responses are matched by shape: types must agree exactly, unknown keys
    # are ignored.
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------

class CompletionsParams(_Frozen):
    model: str
    # NOTE: the remote API accepts fractional temperatures, but this client
    # sends an integer (always 0 in the defaults). Kept as observed on the wire.
    temperature: int = Field(default=0, ge=0)
    max_tokens: int = Field(default=16, ge=0)
    top_p: float = 1.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0
    stop: tuple[str, ...] | None = None
    suffix: str | None = None
    n: int = Field(default=1, ge=0)
    stream: bool = False
    logprobs: int | None = Field(default=None, ge=0)
    echo: bool = False
    best_of: int = Field(default=1, ge=0)
    logit_bias: dict[str, int] | None = None
    user: str | None = None


class EditsParams(_Frozen):
    model: str
    temperature: int = Field(default=0, ge=0)
    top_p: float = 1.0
    n: int = Field(default=1, ge=0)


# ---------------------------------------------------------------------------
# Wire requests
# ---------------------------------------------------------------------------

class WireRequest(_Frozen):
    """Base for request bodies. Unset optional fields are left out entirely."""

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class CompletionsRequest(WireRequest):
    model: str
    prompt: str
    temperature: int
    max_tokens: int
    top_p: float
    frequency_penalty: float
    presence_penalty: float
    stop: tuple[str, ...] | None = None
    suffix: str | None = None
    n: int
    stream: bool
    logprobs: int | None = None
    echo: bool
    best_of: int
    logit_bias: dict[str, int] | None = None
    user: str | None = None

    @classmethod
    def from_params(cls, prompt: str, params: CompletionsParams) -> CompletionsRequest:
        return cls(prompt=prompt, **params.model_dump())


class EditsRequest(WireRequest):
    model: str
    input: str
    instruction: str
    n: int
    temperature: int
    top_p: float

    @classmethod
    def from_params(
        cls, input: str, instruction: str, params: EditsParams
    ) -> EditsRequest:
        return cls(input=input, instruction=instruction, **params.model_dump())


# ---------------------------------------------------------------------------
# Wire responses
# ---------------------------------------------------------------------------

class Usage(_Wire):
    prompt_tokens: int = Field(ge=0)
    completion_tokens: int = Field(ge=0)
    total_tokens: int = Field(ge=0)


class CompletionsChoice(_Wire):
    text: str
    index: int = Field(ge=0)
    logprobs: dict[str, Any] | None = None
    finish_reason: str


class CompletionsResponse(_Wire):
    id: str
    object: str
    created: int = Field(ge=0)
    model: str
    choices: tuple[CompletionsChoice, ...]
    usage: Usage


class EditsChoice(_Wire):
    text: str
    index: int = Field(ge=0)


class EditsResponse(_Wire):
    object: str
    created: int = Field(ge=0)
    choices: tuple[EditsChoice, ...]
    usage: Usage


class ErrorDetail(_Wire):
    message: str
    type: str
    param: str | None = None
    code: str | int | None = None


class ErrorResponse(_Wire):
    error: ErrorDetail
