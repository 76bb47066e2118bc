"""Application configuration using pydantic-settings."""

from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class AdminLimits:
    """How many rows each admin listing shows before summarizing the rest."""

    account_list_limit: int = 100
    currency_list_limit: int = 100
    preview_limit: int = 30
    balance_limit: int = 20


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ECONADMIN_",
        case_sensitive=False,
    )

    # Database holding the host ledger
    database_url: str = "sqlite:///econadmin.db"

    # Server-wide currency that bulk operations must never touch.
    # Passed explicitly into EconomyAdminManager, never read from inside it.
    global_currency: str | None = None

    # Treasury account for the global currency. Empty means
    # "<global currency> - Treasury".
    treasury_account_name: str | None = None
    treasury_initial_balance: int = 1_000_000

    # Default amount for "gc gift"; 0 disables the default
    new_player_gift_amount: int = 0

    # Listing limits
    account_list_limit: int = 100
    currency_list_limit: int = 100
    preview_limit: int = 30
    balance_limit: int = 20

    # Debug
    debug: bool = False
    log_level: LogLevel = "WARNING"

    @property
    def limits(self) -> AdminLimits:
        """Get listing limits as a value object."""
        return AdminLimits(
            account_list_limit=self.account_list_limit,
            currency_list_limit=self.currency_list_limit,
            preview_limit=self.preview_limit,
            balance_limit=self.balance_limit,
        )

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
