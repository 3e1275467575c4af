"""Application configuration via Pydantic Settings."""

from typing import Dict, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # App
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Outbound vendor requests
    FETCH_TIMEOUT_SECONDS: float = 15.0
    USER_AGENT: str = ""  # Empty means the default Chrome user-agent
    ROTATE_USER_AGENT: bool = False

    # Comma-separated backend=host pairs, e.g. "getfpv=http://localhost:9001"
    # Unmapped backends are fetched from the vendor's base_url.
    BACKEND_HOSTS: str = ""

    # Responses
    DEALS_CACHE_MAX_AGE: int = 900  # 15 minutes

    # Frontend
    CORS_ORIGINS: str = "*"

    def get_backend_hosts(self) -> Dict[str, str]:
        """Parse BACKEND_HOSTS into a backend -> host mapping.

        Returns:
            Dict of backend identifier to host origin, empty if not set
        """
        hosts: Dict[str, str] = {}
        if not self.BACKEND_HOSTS:
            return hosts
        for pair in self.BACKEND_HOSTS.split(","):
            backend, sep, host = pair.partition("=")
            if sep and backend.strip() and host.strip():
                hosts[backend.strip()] = host.strip().rstrip("/")
        return hosts

    def get_cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS into a list of allowed origins."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
