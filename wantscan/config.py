"""Application configuration management."""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.want import LookupSource


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Remote wants API
    base_url: str = ""  # Required for online lookups - set via WANTSCAN_BASE_URL
    username: str = ""
    password: str = ""
    lookup_months: int = 3

    # "online" talks to the remote API, "offline" matches against a CSV export
    source: LookupSource = LookupSource.ONLINE
    wants_csv_path: Optional[str] = None

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    default_timeout: int = 30
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="WANTSCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def wants_csv(self) -> Optional[Path]:
        """Get the resolved CSV path, if one is configured."""
        if not self.wants_csv_path:
            return None
        return Path(self.wants_csv_path).expanduser().resolve()


# Global settings instance
settings = Settings()
