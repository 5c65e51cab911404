from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)


text_requests = Counter(
    "text_requests_total",
    "Text API calls by operation and outcome",
    ["operation", "outcome"],
)

text_tokens = Counter(
    "text_tokens_total",
    "Tokens reported by the text API",
    ["operation", "direction"],
)

text_request_latency = Histogram(
    "text_request_latency_seconds",
    "Round-trip latency of text API calls",
    ["operation"],
    buckets=(0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)


def metrics_payload() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST
