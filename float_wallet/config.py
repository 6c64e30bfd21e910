"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from float_wallet.utils.date_utils import DayOverflowPolicy


class Settings(BaseSettings):
    """Application configuration loaded from FLOAT_WALLET_* environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FLOAT_WALLET_",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./float_wallet.db"

    # Service
    service_name: str = "float-wallet"
    log_level: str = "INFO"

    # Billing cycles: rollover matches calendar normalization, clamp pins to month end
    day_overflow_policy: DayOverflowPolicy = DayOverflowPolicy.ROLLOVER

    # Insert the three starter cards when the card store is empty at startup
    seed_demo_wallet: bool = False


settings = Settings()
