from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.openai.com/v1"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> ClientConfig:
        """Read settings from the process environment and an optional .env file.

        Variables already set in the environment win over the .env file.
        """
        load_dotenv(dotenv_path, override=False)

        api_key = (
            os.environ.get("OPENAI_API_KEY", "")
            or os.environ.get("OPEN_AI_API_KEY", "")
        )
        if not api_key:
            raise ValueError(
                "An API key is required. "
                "Set OPENAI_API_KEY (or OPEN_AI_API_KEY) in your environment."
            )

        return cls(
            api_key=api_key,
            base_url=os.environ.get("TEXT_API_BASE_URL", "") or DEFAULT_BASE_URL,
            timeout=float(os.environ.get("TEXT_API_TIMEOUT", "30")),
        )
