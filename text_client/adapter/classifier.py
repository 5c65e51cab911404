"""Response classification.

A raw body is tried against the success shape first, then the error shape.
If neither fits, the body is reported as unclassified with both parse
failures attached. The status code never decides which shape is tried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from pydantic import BaseModel, ValidationError

from text_client.adapter.errors import APIError, OtherError
from text_client.adapter.models import ErrorResponse

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Parsed(Generic[ModelT]):
    value: ModelT


@dataclass(frozen=True)
class Failed:
    detail: str


ParseAttempt = Union[Parsed[ModelT], Failed]


def parse_attempt(raw_text: str, model: type[ModelT]) -> ParseAttempt[ModelT]:
    """Parse ``raw_text`` as ``model``; never raises on a shape mismatch."""
    try:
        return Parsed(model.model_validate_json(raw_text))
    except ValidationError as exc:
        return Failed(str(exc))


def classify_response(
    raw: bytes,
    response_model: type[ModelT],
    status_code: int | None = None,
) -> ModelT:
    """Return the success payload in ``raw`` or raise the matching error."""
    try:
        raw_text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise OtherError(
            message=f"Response body is not valid UTF-8: {exc}",
            stage="decode",
            cause=exc,
        ) from exc

    success = parse_attempt(raw_text, response_model)
    if isinstance(success, Parsed):
        return success.value

    failure = parse_attempt(raw_text, ErrorResponse)
    if isinstance(failure, Parsed):
        detail = failure.value.error
        logger.debug(
            "Remote error (status=%s, type=%s): %s",
            status_code, detail.type, detail.message,
        )
        raise APIError(
            message=detail.message,
            error_type=detail.type,
            param=detail.param,
            code=detail.code,
            status_code=status_code,
        )

    raise OtherError(
        message=(
            f"Response matched neither {response_model.__name__} "
            f"nor ErrorResponse (status={status_code})"
        ),
        stage="classify",
        success_parse_error=success.detail,
        error_parse_error=failure.detail,
    )
