"""Runtime settings loaded from the environment and an optional .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_KROGER_BASE_URL = "https://api-ce.kroger.com/v1"
DEFAULT_GOOGLE_PLACES_URL = (
    "https://maps.googleapis.com/maps/api/place/nearbysearch/json"
)


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name, "").strip()
    return Path(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    """Immutable settings shared by the API, CLI and upstream clients."""

    app_name: str = "SilverPoint API"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_allow_origins: str = "*"
    kroger_client_id: str = ""
    kroger_client_secret: str = ""
    kroger_base_url: str = DEFAULT_KROGER_BASE_URL
    google_maps_api_key: str = ""
    google_places_url: str = DEFAULT_GOOGLE_PLACES_URL
    fallback_stores_file: Path | None = None
    http_timeout_seconds: float = 5.0

    @property
    def kroger_configured(self) -> bool:
        return bool(self.kroger_client_id.strip() and self.kroger_client_secret.strip())

    @property
    def places_configured(self) -> bool:
        return bool(self.google_maps_api_key.strip())

    @classmethod
    def from_env(cls, env_file: str | Path | None = ".env") -> "Settings":
        """Create settings from the process env, after loading ``env_file``.

        Variables already set in the environment win over the file.
        """
        if env_file is not None:
            load_dotenv(env_file, override=False)
        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            app_version=os.getenv("APP_VERSION", cls.app_version),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            cors_allow_origins=os.getenv("CORS_ALLOW_ORIGINS", cls.cors_allow_origins),
            kroger_client_id=os.getenv("KROGER_CLIENT_ID", cls.kroger_client_id),
            kroger_client_secret=os.getenv(
                "KROGER_CLIENT_SECRET", cls.kroger_client_secret
            ),
            kroger_base_url=os.getenv("KROGER_BASE_URL", cls.kroger_base_url),
            google_maps_api_key=os.getenv(
                "GOOGLE_MAPS_API_KEY", cls.google_maps_api_key
            ),
            google_places_url=os.getenv("GOOGLE_PLACES_URL", cls.google_places_url),
            fallback_stores_file=_env_path("FALLBACK_STORES_FILE"),
            http_timeout_seconds=float(
                os.getenv("HTTP_TIMEOUT_SECONDS", str(cls.http_timeout_seconds))
            ),
        )
