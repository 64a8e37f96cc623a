"""
Configuration management for seodoctor using Pydantic.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, ClassVar, Dict, cast

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

# --- Nested Configuration Models ---


class SiteConfig(BaseModel):
    """Site-wide values used when generating URLs, metadata and JSON-LD."""

    site_url: str = Field(default="https://modonty.com", description="Public site origin, without trailing slash.")
    site_name: str = Field(default="مودونتي", description="Site name used in titles and Open Graph tags.")
    default_language: str = Field(default="ar", description="BCP 47 language for inLanguage.")
    default_locale: str = Field(default="ar_SA", description="Open Graph locale.")
    words_per_minute: int = Field(default=200, gt=0, description="Reading speed for reading-time estimates.")

    @field_validator("site_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("site_url must start with http:// or https://")
        return v.rstrip("/")


class HealthThresholds(BaseModel):
    """Bands used by gauges and badges (percentage >= threshold)."""

    excellent: int = Field(default=80, ge=0, le=100)
    good: int = Field(default=60, ge=0, le=100)

    @model_validator(mode="after")
    def check_order(self) -> HealthThresholds:
        if self.excellent <= self.good:
            raise ValueError("excellent threshold must be greater than good threshold")
        return self


class OverallThresholds(BaseModel):
    """Bands used by the overall health card."""

    excellent: int = Field(default=90, ge=0, le=100)
    good: int = Field(default=70, ge=0, le=100)
    fair: int = Field(default=50, ge=0, le=100)

    @model_validator(mode="after")
    def check_order(self) -> OverallThresholds:
        if not self.excellent > self.good > self.fair:
            raise ValueError("thresholds must satisfy excellent > good > fair")
        return self


class ScoringConfig(BaseModel):
    """Configuration for the SEO doctor score bands."""

    health: HealthThresholds = Field(default_factory=HealthThresholds)
    overall: OverallThresholds = Field(default_factory=OverallThresholds)


class GuidanceConfig(BaseModel):
    """Configuration for the article guidance checklist."""

    category_weights: Dict[str, float] = Field(
        default_factory=lambda: {
            "meta_tags": 20,
            "content": 25,
            "images": 15,
            "structured_data": 20,
            "technical": 15,
            "mobile": 5,
        },
        description="Maximum points per checklist category.",
    )
    title_min: int = Field(default=30, ge=0)
    title_max: int = Field(default=60, ge=0)
    description_min: int = Field(default=120, ge=0)
    description_max: int = Field(default=160, ge=0)
    word_count_min: int = Field(default=300, ge=0, description="Below this the content check fails.")
    word_count_recommended: int = Field(default=800, ge=0, description="Below this the content check warns.")
    word_count_max: int = Field(default=3000, ge=0, description="Above this a split is suggested.")
    faq_recommended: int = Field(default=3, ge=1, description="FAQ count needed for FAQ rich results.")

    @field_validator("category_weights")
    @classmethod
    def validate_weights(cls, v: Dict[str, float]) -> Dict[str, float]:
        if any(weight < 0 for weight in v.values()):
            raise ValueError("category weights must be non-negative")
        if sum(v.values()) <= 0:
            raise ValueError("category weights must sum to a positive value")
        return v

    @model_validator(mode="after")
    def check_ranges(self) -> GuidanceConfig:
        if self.title_min > self.title_max:
            raise ValueError("title_min must not exceed title_max")
        if self.description_min > self.description_max:
            raise ValueError("description_min must not exceed description_max")
        if not self.word_count_min <= self.word_count_recommended <= self.word_count_max:
            raise ValueError("word count thresholds must satisfy min <= recommended <= max")
        return self

    def weight(self, category: str) -> float:
        return self.category_weights.get(category, 0.0)


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(
        default=None,
        description="Path to log file. If None, logs to console.",
    )
    metrics_enabled: bool = Field(default=True, description="Record Prometheus metrics for evaluations.")

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"invalid log level: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "seodoctor"
    site: SiteConfig = Field(default_factory=SiteConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    guidance: GuidanceConfig = Field(default_factory=GuidanceConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="SEODOCTOR_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for name in ("seodoctor.yaml", "seodoctor.yml", "config.yaml", "config.yml"):
        path = current_dir / name
        if path.is_file():
            return path
    return None


# --- Lazy Configuration Loader ---


class LazyConfig:
    """
    A proxy for the Config object that delays its loading and validation
    until an attribute is first accessed. A broken config file therefore
    cannot crash an import of the scoring modules.
    """

    _config: ClassVar[Config | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __getattr__(self, name: str) -> Any:
        if self.__class__._config is None:
            with self.__class__._lock:
                if self.__class__._config is None:
                    self.__class__._config = self._load_config_with_fallback()
        return getattr(self.__class__._config, name)

    @classmethod
    def override(cls, config: Config | None) -> None:
        """Replace the loaded configuration (``None`` forces a reload on next access)."""
        with cls._lock:
            cls._config = config

    def _load_config_with_fallback(self) -> Config:
        """Load configuration from file or fall back to defaults."""
        config_path = find_config_file()
        if config_path:
            try:
                log.info("Lazy loading configuration from: %s", config_path)
                return Config.from_yaml(config_path)
            except (ValidationError, FileNotFoundError, yaml.YAMLError) as e:
                log.error(
                    "Failed to load or validate configuration from '%s': %s. "
                    "Falling back to default settings. Please check your config file.",
                    config_path,
                    e,
                    exc_info=log.getEffectiveLevel() <= logging.DEBUG,
                )
        else:
            log.info("No config file found. Using default settings for lazy load.")

        try:
            return Config()
        except ValidationError as e:
            log.critical("FATAL: Default configuration is invalid: %s", e, exc_info=True)
            raise RuntimeError(f"Default configuration is invalid, cannot start: {e}") from e


# --- Global Settings Instance ---
settings: "Config" = cast("Config", LazyConfig())
