"""Article SEO guidance checklist."""

from .analyzer import (
    CATEGORY_ANALYZERS,
    analyze_seo_guidance,
    calculate_category_score,
    generate_off_page_guidance,
)

__all__ = [
    "CATEGORY_ANALYZERS",
    "analyze_seo_guidance",
    "calculate_category_score",
    "generate_off_page_guidance",
]
