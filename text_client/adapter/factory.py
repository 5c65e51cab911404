"""
Process-wide TextClient.

Built once from ``ClientConfig.from_env()`` (or an explicit config) and
reused. The client keeps no per-call state, so sharing it is safe.
"""

from __future__ import annotations

import logging

from text_client.adapter.client import TextClient
from text_client.config import ClientConfig

logger = logging.getLogger(__name__)

_instance: TextClient | None = None


def get_text_client(config: ClientConfig | None = None) -> TextClient:
    """
    Return the singleton TextClient.

    Args:
        config: Used only when the singleton does not exist yet. Defaults to
                ``ClientConfig.from_env()``.
    """
    global _instance
    if _instance is not None:
        return _instance

    cfg = config or ClientConfig.from_env()
    _instance = TextClient(cfg.api_key, base_url=cfg.base_url, timeout=cfg.timeout)
    logger.info(
        "Text client initialized (base_url=%s, timeout=%ss)",
        cfg.base_url,
        cfg.timeout,
    )
    return _instance


def reset_client() -> None:
    """Reset the singleton (for testing)."""
    global _instance
    _instance = None
