"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from treasury import __version__
from treasury.constants.sweep import (
    DEFAULT_DESTINATION_ADDRESS,
    DEFAULT_EXPLORER_TX_URL,
    DEFAULT_PROVIDER_URL,
)


class Settings(BaseSettings):
    """Treasury sweeper configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="Crypto Treasury Server", description="Application name")
    app_version: str = Field(default=__version__, description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")

    # Treasury wallet
    treasury_private_key: SecretStr | None = Field(
        default=None, description="Signing key of the treasury wallet"
    )
    sweep_destination_address: str = Field(
        default=DEFAULT_DESTINATION_ADDRESS,
        description="Default payout address for sweeps",
    )

    # Ethereum JSON-RPC
    ethers_provider_url: str = Field(
        default=DEFAULT_PROVIDER_URL, description="Ethereum JSON-RPC endpoint URL"
    )
    explorer_tx_url: str = Field(
        default=DEFAULT_EXPLORER_TX_URL,
        description="Block explorer prefix for transaction links",
    )

    @field_validator("treasury_private_key", mode="before")
    @classmethod
    def blank_private_key_is_unset(cls, v: object) -> object:
        """Treat an empty TREASURY_PRIVATE_KEY as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("ethers_provider_url")
    @classmethod
    def validate_provider_url(cls, v: str) -> str:
        """Validate JSON-RPC URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Provider URL must start with http:// or https://")
        return v

    @property
    def is_sweep_configured(self) -> bool:
        """Whether a signing key was supplied."""
        return self.treasury_private_key is not None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
