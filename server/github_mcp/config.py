import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .api import GITHUB_API_URL

@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at startup."""
    github_token: Optional[str] = None
    api_url: str = GITHUB_API_URL
    timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv()

        timeout = os.getenv("GITHUB_TIMEOUT")
        try:
            timeout = float(timeout) if timeout else cls.timeout
        except ValueError:
            raise ValueError(f"GITHUB_TIMEOUT must be a number of seconds, got {timeout!r}")

        return cls(
            github_token=os.getenv("GITHUB_TOKEN") or None,
            api_url=os.getenv("GITHUB_API_URL") or GITHUB_API_URL,
            timeout=timeout,
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )
