"""
Settings Management with Pydantic

Provides type-safe configuration for:
- Benchmark reference values shown beside the user's own metrics
- Forecasting constants
- Application logging
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MetricsConfig(BaseSettings):
    """Pipeline analytics configuration."""
    model_config = SettingsConfigDict(
        env_prefix="METRICS_",
        extra="ignore"
    )

    # Industry placeholders, not derived from any dataset
    benchmark_win_rate: int = Field(default=43, ge=0, le=100)
    benchmark_deal_value: int = Field(default=2800, ge=0)

    # Reported when no won deals fall inside the range
    default_cycle_days: int = Field(default=14, ge=0)

    # Share of the 90-day projection expected to close within 30 days
    thirty_day_fraction: float = Field(default=0.33, ge=0.0, le=1.0)

    recent_deals_limit: int = Field(default=3, ge=0)


# Field defaults only; never reads the environment
DEFAULT_METRICS_CONFIG = MetricsConfig.model_construct()


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    app_name: str = "Scout"
    debug: bool = False  # forces DEBUG logging
    log_level: str = "INFO"
    log_to_file: bool = False

    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(metrics=MetricsConfig())


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
