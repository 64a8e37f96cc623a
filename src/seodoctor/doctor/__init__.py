"""The SEO doctor: per-entity field validation and scoring."""

from .calculator import (
    calculate_seo_score,
    classify_health,
    classify_overall,
    diagnose,
    prioritize_checks,
    run_health_checks,
)
from .configs import (
    ARTICLE_CONFIG,
    CATEGORY_CONFIG,
    ENTITY_CONFIGS,
    INDUSTRY_CONFIG,
    ORGANIZATION_CONFIG,
    PERSON_CONFIG,
    TAG_CONFIG,
    entity_type_names,
    get_entity_config,
)

__all__ = [
    "ARTICLE_CONFIG",
    "CATEGORY_CONFIG",
    "ENTITY_CONFIGS",
    "INDUSTRY_CONFIG",
    "ORGANIZATION_CONFIG",
    "PERSON_CONFIG",
    "TAG_CONFIG",
    "calculate_seo_score",
    "classify_health",
    "classify_overall",
    "diagnose",
    "entity_type_names",
    "get_entity_config",
    "prioritize_checks",
    "run_health_checks",
]
