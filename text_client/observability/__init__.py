from text_client.observability.metrics import (
    metrics_payload,
    text_request_latency,
    text_requests,
    text_tokens,
)

__all__ = [
    "metrics_payload",
    "text_request_latency",
    "text_requests",
    "text_tokens",
]
