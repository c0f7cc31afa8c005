"""Application configuration using pydantic-settings."""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    port: int = 3000
    host: str = "0.0.0.0"

    # Logging
    log_level: str = "INFO"

    # HTTP Settings
    http_timeout: float = 30.0  # seconds
    max_image_bytes: int = 10 * 1024 * 1024  # 10MB, 0 disables the limit
    user_agent: str = DEFAULT_USER_AGENT

    # Allow-list
    allowed_host: str = "tradingview.com"
    allowed_path_prefix: str = "/snapshots/"
    allowed_source_name: str = "TradingView snapshot"
    strict_allowlist: bool = True

    # CORS
    cors_origins: str = "*"  # Comma-separated origins or "*" for all

    # Static files
    static_dir: str = "."

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Get list of CORS origins."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def allowed_url_substring(self) -> str:
        """Host and path prefix joined, e.g. 'tradingview.com/snapshots/'."""
        return f"{self.allowed_host}{self.allowed_path_prefix}"


# Global settings instance
settings = Settings()
