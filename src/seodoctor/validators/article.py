"""Validators specific to articles."""

from __future__ import annotations

from typing import Any, Mapping

from seodoctor.protocols import FieldResult
from seodoctor.validators.base import (
    error,
    good,
    has_text,
    info,
    is_set,
    recommended_text,
    required_text,
    text_field,
    warning,
)

PUBLISHED = "PUBLISHED"

validate_title = required_text("Article title is set", "Article title is required")

validate_category = recommended_text(
    "Category assigned - improves organization and SEO",
    "Category recommended - improves organization and SEO",
)


def validate_content(value: Any, data: Mapping[str, Any]) -> FieldResult:
    if not has_text(value):
        return error("Article content is required")

    words = len(value.split())
    if words >= 300:
        return good(f"Article content has {words} words - good depth for SEO", 10)
    if words >= 200:
        return warning(f"Article content has {words} words - aim for 300+ words for better SEO", 5)
    return warning(f"Article content too short ({words} words) - minimum 300 words recommended", 2)


def validate_featured_image(value: Any, data: Mapping[str, Any]) -> FieldResult:
    featured = data.get("featured_image_id")
    has_image = has_text(value) or (isinstance(featured, str) and featured != "")
    if not has_image:
        return warning("Featured image recommended (1200x630px) for social sharing and SEO")
    if text_field(data, "featured_image_alt"):
        return good("Featured image with alt text provided - required for SEO", 10)
    return error("Featured image alt text required when image exists (accessibility + SEO)", 5)


def validate_date_published(value: Any, data: Mapping[str, Any]) -> FieldResult:
    """Only published articles need a publication date."""
    if data.get("status") != PUBLISHED:
        return info("Publication date will be set when article is published")
    if is_set(value):
        return good("Publication date set - required for published articles", 10)
    return error("Publication date required for published articles")


def validate_last_reviewed(value: Any, data: Mapping[str, Any]) -> FieldResult:
    if is_set(value):
        return good("Last reviewed date set - shows content freshness for SEO", 5)
    return warning("Last reviewed date recommended - update when content is reviewed/updated")
