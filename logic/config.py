import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "https://sih-backend-seven.vercel.app"
DEFAULT_TIMEOUT = 30.0


def _parse_timeout(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"CASEDB_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"CASEDB_TIMEOUT must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    api_url: str
    timeout: float
    log_level: str

    @classmethod
    def from_env(
        cls,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        log_level: Optional[str] = None,
    ) -> "Settings":
        """Build settings from arguments, then the environment / .env, then defaults."""
        load_dotenv()
        url = api_url or os.getenv("CASEDB_API_URL", DEFAULT_API_URL)
        if timeout is None:
            timeout = _parse_timeout(os.getenv("CASEDB_TIMEOUT", str(DEFAULT_TIMEOUT)))
        level = log_level or os.getenv("CASEDB_LOG_LEVEL", "INFO")
        return cls(api_url=url.rstrip("/"), timeout=timeout, log_level=level.upper())
