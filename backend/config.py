"""Centralized configuration — all env vars in one place."""

import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "5000"))
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Upstream provider
        self.base_url: str | None = os.getenv("BASE_URL")
        self.access_token: str | None = os.getenv("ACCESS_TOKEN")
        self.upstream_timeout_seconds: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))

        # View cache
        self.cache_ttl_seconds: float = float(os.getenv("CACHE_TTL_SECONDS", "60"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing required env vars for upstream access."""
        required = ["BASE_URL", "ACCESS_TOKEN"]
        return [var for var in required if not getattr(self, var.lower())]


settings = Settings()
