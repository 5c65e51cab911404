"""Wire request building and serialization."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from text_client.adapter.models import (
    CompletionsParams,
    CompletionsRequest,
    CompletionsResponse,
    EditsParams,
    EditsRequest,
    ErrorResponse,
)
from text_client.adapter.operations import COMPLETIONS, EDITS

OPTIONAL_COMPLETION_FIELDS = {"stop", "suffix", "logprobs", "logit_bias", "user"}


def test_unset_optional_fields_are_absent_not_null() -> None:
    request = CompletionsRequest.from_params("hi", CompletionsParams(model="m"))
    payload = json.loads(request.to_json())

    assert OPTIONAL_COMPLETION_FIELDS.isdisjoint(payload)
    assert "null" not in request.to_json()


@pytest.mark.parametrize(
    "overrides",
    [
        {"stop": ["\n"]},
        {"suffix": "end", "user": "u-1"},
        {"logprobs": 0, "logit_bias": {"50256": -100}},
        {
            "stop": ["a", "b"],
            "suffix": "s",
            "logprobs": 3,
            "logit_bias": {"1": 2},
            "user": "x",
        },
    ],
)
def test_exactly_the_set_optional_fields_are_serialized(overrides: dict) -> None:
    params = CompletionsParams(model="m", **overrides)
    payload = json.loads(CompletionsRequest.from_params("p", params).to_json())

    present = OPTIONAL_COMPLETION_FIELDS & payload.keys()
    assert present == set(overrides)
    for key, value in overrides.items():
        assert payload[key] == value


def test_completions_request_carries_every_required_field() -> None:
    params = CompletionsParams(model="text-davinci-003", max_tokens=3)
    payload = json.loads(COMPLETIONS.build_request("Is it?", params).to_json())

    assert payload == {
        "model": "text-davinci-003",
        "prompt": "Is it?",
        "temperature": 0,
        "max_tokens": 3,
        "top_p": 1.0,
        "frequency_penalty": 0.0,
        "presence_penalty": 0.0,
        "n": 1,
        "stream": False,
        "echo": False,
        "best_of": 1,
    }


def test_falsy_optional_values_are_still_sent() -> None:
    params = CompletionsParams(model="m", logprobs=0, suffix="", stop=[])
    payload = json.loads(CompletionsRequest.from_params("p", params).to_json())

    assert payload["logprobs"] == 0
    assert payload["suffix"] == ""
    assert payload["stop"] == []


def test_edits_request_shape() -> None:
    params = EditsParams(model="text-davinci-edit-001")
    request = EDITS.build_request("Helsllo, Mick!", "Fix grammar", params)

    assert isinstance(request, EditsRequest)
    assert json.loads(request.to_json()) == {
        "model": "text-davinci-edit-001",
        "input": "Helsllo, Mick!",
        "instruction": "Fix grammar",
        "n": 1,
        "temperature": 0,
        "top_p": 1.0,
    }


def test_temperature_rejects_negative_values() -> None:
    with pytest.raises(ValidationError):
        CompletionsParams(model="m", temperature=-1)


def test_params_are_immutable() -> None:
    params = CompletionsParams(model="m")
    with pytest.raises(ValidationError):
        params.model = "other"


def test_response_parsing_does_not_coerce_types() -> None:
    body = {
        "id": "x",
        "object": "text_completion",
        "created": "1670000000",
        "model": "m",
        "choices": [],
        "usage": {"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0},
    }
    with pytest.raises(ValidationError):
        CompletionsResponse.model_validate_json(json.dumps(body))


def test_error_response_optional_fields_default_to_none() -> None:
    parsed = ErrorResponse.model_validate_json(
        '{"error": {"message": "boom", "type": "server_error"}}'
    )
    assert parsed.error.param is None
    assert parsed.error.code is None
