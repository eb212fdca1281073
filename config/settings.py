"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
Settings are built once by the entry point and passed to each component.
"""

import tempfile
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_feed_path() -> Path:
    return Path(tempfile.gettempdir()) / "stock.txt"


class Settings(BaseSettings):
    """
    Application settings.

    All values loaded from .env file or environment variables.
    Validation happens on construction.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check current dir, then parent
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra env vars
    )

    # ===================
    # FTP FEED
    # ===================
    ftp_host: Optional[str] = Field(
        None,
        description="FTP server holding the stock feed"
    )
    ftp_user: Optional[str] = Field(
        None,
        description="FTP username"
    )
    ftp_pass: Optional[str] = Field(
        None,
        description="FTP password"
    )
    ftp_port: int = Field(
        default=21,
        ge=1,
        le=65535,
        description="FTP port"
    )
    ftp_file_path: str = Field(
        default="/Stock.txt",
        description="Remote path of the stock feed"
    )
    local_feed_path: Path = Field(
        default_factory=_default_feed_path,
        description="Where the downloaded feed is written"
    )

    # ===================
    # CATALOG API
    # ===================
    bigcommerce_api_url: str = Field(
        ...,
        description="Catalog products endpoint, e.g. .../v3/catalog/products"
    )
    bigcommerce_token: str = Field(
        ...,
        description="Value sent in the X-Auth-Token header"
    )
    catalog_timeout_seconds: Optional[float] = Field(
        None,
        gt=0,
        description="HTTP timeout for catalog calls (None = no timeout)"
    )

    # ===================
    # SYNC BEHAVIOUR
    # ===================
    sync_create_missing_variants: bool = Field(
        default=False,
        description="Create feed variants that are missing on an existing product"
    )

    # ===================
    # APP SETTINGS
    # ===================
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )

    @field_validator("bigcommerce_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are appended with '/', so drop any trailing one."""
        return v.rstrip("/")

    # ===================
    # COMPUTED PROPERTIES
    # ===================
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def ftp_configured(self) -> bool:
        """Check if FTP download is possible."""
        return bool(self.ftp_host and self.ftp_user)


def load_settings(**overrides) -> Settings:
    """
    Build settings from the environment.

    Call once at startup and pass the result down.

    Returns:
        Settings: Application settings

    Raises:
        pydantic.ValidationError: If required env vars are missing or invalid
    """
    return Settings(**overrides)
