import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from valorant_api.errors import ConfigError
from valorant_api.logger import logger

DEFAULT_API_END_POINT = "https://api.henrikdev.xyz/valorant"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ApiConfig:
    """
    Where and how the fetch helpers reach the API.
    Passed explicitly to every call so tests can point at a local server.
    """
    base_url: str = DEFAULT_API_END_POINT
    api_key: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if not self.timeout > 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = self.api_key
        return headers

    @classmethod
    def from_env(cls, env_file: str | Path | None = ".env") -> "ApiConfig":
        if env_file is not None:
            load_dotenv(env_file)

        timeout = os.getenv("HENRIK_API_TIMEOUT")
        try:
            timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            logger.error("HENRIK_API_TIMEOUT is not a number: %s", timeout)
            raise ConfigError(f"HENRIK_API_TIMEOUT is not a number: {timeout!r}. Please fix it in your .env file.")

        api_key = os.getenv("HENRIK_API_KEY") or None
        if api_key is None:
            logger.warning("HENRIK_API_KEY not found in environment variables, requests will be unauthenticated.")

        return cls(
            base_url=os.getenv("HENRIK_API_URL", DEFAULT_API_END_POINT),
            api_key=api_key,
            timeout=timeout,
        )
