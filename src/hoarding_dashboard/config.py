"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    api_base_url: str = "https://melodic-billboard-portal.onrender.com"
    request_timeout_seconds: float = 10.0
    credential_store_path: Path = Path(".hoarding_dashboard/credentials.json")
    fallback_accounts_enabled: bool = True
    fallback_account_emails: str | None = None
    offline_registration_enabled: bool = True
    search_min_query_length: int = 2
    notification_history_size: int = 50
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_fallback_emails(raw: str | None) -> set[str] | None:
    """Parse the fallback account allow-list from env.

    ``None`` means every built-in fallback account is recognized.
    """
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return None
    emails: set[str] = set()
    for chunk in cleaned.split(","):
        value = chunk.strip().lower()
        if value:
            emails.add(value)
    return emails or None
