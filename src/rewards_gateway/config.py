"""Application configuration using pydantic-settings.

Bech32 prefixes, the chain REST endpoint used for reward queries and the
broadcast backend are all taken from the environment.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=1317, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")

    # ======================
    # Chain
    # ======================
    chain_id: str = Field(default="cosmoshub-4", description="Chain ID served by this gateway")
    bech32_account_prefix: str = Field(
        default="cosmos", description="Bech32 prefix for account addresses"
    )
    bech32_validator_prefix: str = Field(
        default="cosmosvaloper", description="Bech32 prefix for validator operator addresses"
    )
    lcd_url: str = Field(
        default="https://cosmos-rest.publicnode.com", description="Cosmos REST (LCD) URL"
    )
    lcd_timeout: float = Field(default=30.0, description="Timeout for LCD queries in seconds")

    # ======================
    # Transactions
    # ======================
    default_gas: int = Field(default=200000, description="Gas limit used when base_req.gas is empty")
    validator_build_error_status: int = Field(
        default=400,
        description="HTTP status for build failures on the validator rewards endpoint",
    )

    # ======================
    # Broadcasting
    # ======================
    dry_run: bool = Field(default=True, description="Enable dry-run mode (no real broadcasts)")
    signer_url: Optional[str] = Field(
        default=None, description="External sign-and-broadcast service URL"
    )
    signer_token: str = Field(default="", description="Bearer token for the signing service")
    signer_timeout: float = Field(default=60.0, description="Timeout for the signing service")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "dry_run": self.dry_run,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "chain": {
                "chain_id": self.chain_id,
                "lcd_url": self.lcd_url,
                "account_prefix": self.bech32_account_prefix,
                "validator_prefix": self.bech32_validator_prefix,
            },
            "signer": {
                "url": self.signer_url or "(not set)",
                "token": "***" if self.signer_token else "(not set)",
            },
            "errors": {
                "validator_build_error_status": self.validator_build_error_status,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
