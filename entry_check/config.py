"""Application configuration helpers."""

from dataclasses import dataclass
import os
from functools import lru_cache

from dotenv import load_dotenv

from .errors import ConfigurationError


load_dotenv()

DEFAULT_BASE_URL = "https://sandbox.travelperk.com/travelsafe/restrictions"


@dataclass(frozen=True)
class Settings:
    """Holds runtime configuration loaded from the environment."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 5.0
    max_body_bytes: int = 1024 * 1024
    port: int = 3000

    def __repr__(self) -> str:
        return (
            f"Settings(api_key='***', base_url={self.base_url!r}, "
            f"request_timeout={self.request_timeout!r}, "
            f"max_body_bytes={self.max_body_bytes!r}, port={self.port!r})"
        )


def _number_from_env(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number", cause=exc, setting_name=name) from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive", setting_name=name)
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings so every request shares the same read-only values."""

    api_key = os.getenv("ENTRYAPI")
    if not api_key:
        raise ConfigurationError(
            "Please set ENTRYAPI in the environment (e.g., via a .env file).",
            setting_name="ENTRYAPI",
        )

    return Settings(
        api_key=api_key,
        base_url=os.getenv("ENTRYAPI_BASE_URL") or DEFAULT_BASE_URL,
        request_timeout=_number_from_env("ENTRYAPI_TIMEOUT_SECONDS", 5.0, float),
        max_body_bytes=_number_from_env("ENTRYAPI_MAX_BODY_BYTES", 1024 * 1024, int),
        port=_number_from_env("PORT", 3000, int),
    )
