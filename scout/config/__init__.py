"""
Configuration Management

Centralized configuration for benchmarks, forecasting constants
and logging, loaded from the environment or a .env file.
"""

from .settings import DEFAULT_METRICS_CONFIG, MetricsConfig, Settings, get_settings

__all__ = [
    "DEFAULT_METRICS_CONFIG",
    "MetricsConfig",
    "Settings",
    "get_settings",
]
