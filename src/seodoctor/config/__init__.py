"""Configuration models and the lazily loaded ``settings`` instance."""

from .config import (
    Config,
    GuidanceConfig,
    HealthThresholds,
    LazyConfig,
    MonitoringConfig,
    OverallThresholds,
    ScoringConfig,
    SiteConfig,
    find_config_file,
    settings,
)

__all__ = [
    "Config",
    "GuidanceConfig",
    "HealthThresholds",
    "LazyConfig",
    "MonitoringConfig",
    "OverallThresholds",
    "ScoringConfig",
    "SiteConfig",
    "find_config_file",
    "settings",
]
