"""Completions and edits as one kind of text-generation operation.

Each operation differs only in its endpoint path, its request shape and its
response shape. Everything else (sending, classifying, picking the first
choice) is shared by ``TextClient``.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, ClassVar, Generic, TypeVar

from text_client.adapter.errors import OtherError
from text_client.adapter.models import (
    CompletionsParams,
    CompletionsRequest,
    CompletionsResponse,
    EditsParams,
    EditsRequest,
    EditsResponse,
)

ResponseT = TypeVar("ResponseT", CompletionsResponse, EditsResponse)


class TextOperation(ABC, Generic[ResponseT]):
    """
    Contract for a text-generation operation.

    Subclasses fix the endpoint path and the response model. Each also
    provides a ``build_request`` taking its own inputs; the signatures differ
    per operation, so it is not part of the shared contract.
    """

    name: ClassVar[str]
    path: ClassVar[str]
    response_model: ClassVar[type[Any]]

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}{self.path}"

    def first_text(self, response: ResponseT) -> str:
        """Return the text of the primary (index 0) choice."""
        if not response.choices:
            raise OtherError(
                message=f"{self.name} response contained no choices",
                stage="classify",
            )
        return response.choices[0].text


class CompletionsOperation(TextOperation[CompletionsResponse]):
    name = "completions"
    path = "/completions"
    response_model = CompletionsResponse

    def build_request(
        self, prompt: str, params: CompletionsParams
    ) -> CompletionsRequest:
        return CompletionsRequest.from_params(prompt, params)

    @staticmethod
    def default_params(model: str, max_tokens: int) -> CompletionsParams:
        """Greedy, single-result settings used by the pretty wrapper."""
        return CompletionsParams(
            model=model,
            temperature=0,
            max_tokens=max_tokens,
            top_p=1.0,
            frequency_penalty=0.0,
            presence_penalty=0.0,
            n=1,
            stream=False,
            echo=False,
            best_of=1,
        )


class EditsOperation(TextOperation[EditsResponse]):
    name = "edits"
    path = "/edits"
    response_model = EditsResponse

    def build_request(
        self, input: str, instruction: str, params: EditsParams
    ) -> EditsRequest:
        return EditsRequest.from_params(input, instruction, params)

    @staticmethod
    def default_params(model: str) -> EditsParams:
        return EditsParams(model=model, temperature=0, top_p=1.0, n=1)


COMPLETIONS = CompletionsOperation()
EDITS = EditsOperation()
