"""Application configuration via Pydantic settings."""

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ROOT_DIR = Path(__file__).resolve().parents[3]
ENV_FILE = ROOT_DIR / ".env"


class AppSettings(BaseSettings):
    """Global application configuration."""

    environment: str = Field(default="development")
    async_plugin_enabled: bool = Field(alias="ASYNC_PLUGIN_ENABLED", default=False)
    default_channels: Annotated[list[str], NoDecode] = Field(
        alias="CHANNELS", default_factory=lambda: ["tgsearchers3"]
    )
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(
        alias="CORS_ALLOW_ORIGINS", default_factory=lambda: ["*"]
    )
    gzip_minimum_size: int = Field(alias="GZIP_MINIMUM_SIZE", default=1024, ge=0)
    assets_dir: Path | None = Field(alias="ASSETS_DIR", default=None)
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")
    log_format: str = Field(alias="LOG_FORMAT", default="console")
    host: str = Field(alias="HOST", default="0.0.0.0")
    port: int = Field(alias="PORT", default=8888)

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        extra="ignore",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    @field_validator("default_channels", "cors_allow_origins", mode="before")
    @classmethod
    def split_comma_separated(cls, value: Any) -> Any:
        """Accept ``a,b,c`` strings from the environment."""
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    def snapshot(self) -> dict[str, Any]:
        """Return a dictionary of public settings."""
        return {
            "environment": self.environment,
            "async_plugin_enabled": self.async_plugin_enabled,
            "default_channels": list(self.default_channels),
            "cors_allow_origins": list(self.cors_allow_origins),
            "gzip_minimum_size": self.gzip_minimum_size,
            "assets_dir": str(self.assets_dir) if self.assets_dir else None,
        }


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Load settings once per process."""
    return AppSettings()
