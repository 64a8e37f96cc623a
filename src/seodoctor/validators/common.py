"""
Validators shared by several entity types: slugs, SEO title and description
lengths, Open Graph and Twitter card coverage, canonical and site URLs.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping

from seodoctor.protocols import FieldResult
from seodoctor.validators.base import (
    alt_text,
    error,
    good,
    has_number,
    has_text,
    info,
    is_set,
    text_field,
    warning,
)

FULL_URL_RE = re.compile(r"^https?://.+\..+")

OPTIMAL_OG_WIDTH = 1200
OPTIMAL_OG_HEIGHT = 630


def validate_slug(value: Any, data: Mapping[str, Any]) -> FieldResult:
    if has_text(value):
        return good("URL-friendly slug is set", 5)
    return error("Slug is required (auto-generated from name)")


def validate_seo_title(value: Any, data: Mapping[str, Any]) -> FieldResult:
    """Search results show roughly 50-60 characters of a title."""
    if not has_text(value):
        return error("SEO title is missing - critical for search visibility")

    length = len(value)
    if 50 <= length <= 60:
        return good(f"Perfect length ({length} chars) - optimal for search results", 15)
    if 30 <= length < 50:
        return warning(f"Too short ({length} chars) - aim for 50-60 chars for better visibility", 10)
    if 60 < length <= 70:
        return warning(f"Slightly long ({length} chars) - may be truncated in search results", 12)
    if length > 70:
        return warning(f"Too long ({length} chars) - will be truncated, aim for 50-60 chars", 8)
    return error(f"Too short ({length} chars) - minimum 30 chars recommended", 5)


def validate_seo_description(value: Any, data: Mapping[str, Any]) -> FieldResult:
    """Search snippets show roughly 150-160 characters of a description."""
    if not has_text(value):
        return error("SEO description is missing - critical for click-through rate")

    length = len(value)
    if 150 <= length <= 160:
        return good(f"Perfect length ({length} chars) - optimal for search snippets", 15)
    if 120 <= length < 150:
        return warning(f"Good but could be longer ({length} chars) - aim for 150-160 chars", 12)
    if 160 < length <= 180:
        return warning(f"Slightly long ({length} chars) - may be truncated, aim for 150-160 chars", 10)
    if length > 180:
        return warning(f"Too long ({length} chars) - will be truncated, aim for 150-160 chars", 8)
    return error(f"Too short ({length} chars) - minimum 120 chars recommended", 5)


def validate_og_image(value: Any, data: Mapping[str, Any]) -> FieldResult:
    if has_text(value):
        return good("Open Graph image set for social sharing", 5)
    return warning("OG image recommended (1200x630px) for social media")


validate_og_image_alt = alt_text(
    "og_image",
    present="OG image alt text provided - required for accessibility and SEO",
    missing="OG image alt text required when OG image exists (accessibility + SEO)",
    not_needed="OG image alt text not needed (no OG image provided)",
)

validate_twitter_image_alt = alt_text(
    "twitter_image",
    present="Twitter image alt text provided - required for accessibility and SEO",
    missing="Twitter image alt text required when Twitter image exists (accessibility + SEO)",
    not_needed="Twitter image alt text not needed (no Twitter image provided)",
)

validate_image_alt = alt_text(
    "image",
    present="Image alt text provided - required for accessibility and SEO",
    missing="Image alt text required when image exists (accessibility + SEO)",
    not_needed="Image alt text not needed (no image provided)",
)


def validate_og_image_dimensions(value: Any, data: Mapping[str, Any]) -> FieldResult:
    if not text_field(data, "og_image"):
        return info("OG image dimensions not needed (no OG image provided)")

    width = data.get("og_image_width")
    height = data.get("og_image_height")
    has_width = has_number(width)
    has_height = has_number(height)

    if has_width and has_height:
        size = f"{_fmt_number(width)}x{_fmt_number(height)}px"
        if width == OPTIMAL_OG_WIDTH and height == OPTIMAL_OG_HEIGHT:
            return good("OG image dimensions optimal (1200x630px) - perfect for social sharing", 5)
        if width >= 600 and height >= 314:
            return warning(f"OG image dimensions ({size}) - recommend 1200x630px for best results", 3)
        return warning(f"OG image dimensions ({size}) - recommend 1200x630px minimum", 2)
    if has_width or has_height:
        return warning("OG image dimensions incomplete - add both width and height (recommend 1200x630px)", 1)
    return warning("OG image dimensions recommended (1200x630px) for proper social media rendering")


def _fmt_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Open Graph / Twitter coverage
# ---------------------------------------------------------------------------


def _og_coverage(data: Mapping[str, Any], *, require_url: bool, complete_message: str) -> FieldResult:
    has_title = text_field(data, "seo_title")
    has_description = text_field(data, "seo_description")
    has_url = text_field(data, "url")
    if require_url:
        has_image = text_field(data, "og_image")
    else:
        featured = data.get("featured_image_id")
        has_image = text_field(data, "og_image") or (isinstance(featured, str) and featured != "")
    has_alt = text_field(data, "og_image_alt")
    has_width = has_number(data.get("og_image_width"))
    has_height = has_number(data.get("og_image_height"))

    essentials = has_title and has_description and has_image and (has_url or not require_url)
    if essentials:
        if has_alt and has_width and has_height:
            return good(f"{complete_message} - Complete with alt text and dimensions", 15)
        if has_alt:
            return good(f"{complete_message} - Add image dimensions (1200x630px recommended)", 12)
        if has_width and has_height:
            return good(f"{complete_message} - Add image alt text for accessibility", 12)
        return good(f"{complete_message} - Add image alt text and dimensions for complete coverage", 10)

    missing: List[str] = []
    if not has_title:
        missing.append("og:title")
    if not has_description:
        missing.append("og:description")
    if require_url and not has_url:
        missing.append("og:url")
    if not has_image:
        missing.append("og:image")
    if has_image and not has_alt:
        missing.append("og:image:alt")
    if has_image and not has_width:
        missing.append("og:image:width")
    if has_image and not has_height:
        missing.append("og:image:height")

    partial = (
        (3 if has_title else 0)
        + (3 if has_description else 0)
        + (2 if require_url and has_url else 0)
        + (2 if has_image else 0)
        + (2 if has_alt else 0)
        + (1 if has_width else 0)
        + (1 if has_height else 0)
    )
    return warning(
        f"Missing OG tags: {', '.join(missing)} - add missing fields for complete social sharing",
        partial,
    )


def validate_og_tags(value: Any, data: Mapping[str, Any]) -> FieldResult:
    """Open Graph coverage for entities with their own URL (title, description, url, image)."""
    return _og_coverage(
        data,
        require_url=True,
        complete_message="All essential OG tags can be generated (title, description, url, image, type)",
    )


def validate_article_og_tags(value: Any, data: Mapping[str, Any]) -> FieldResult:
    """Open Graph coverage for articles; the featured image can stand in for ``og_image``."""
    return _og_coverage(data, require_url=False, complete_message="All essential OG tags can be generated")


def _twitter_cards(data: Mapping[str, Any], *, fallback_images: tuple) -> FieldResult:
    configured = all(
        text_field(data, name) for name in ("twitter_card", "twitter_title", "twitter_description", "twitter_image")
    )
    if configured:
        if text_field(data, "twitter_image_alt"):
            return good(
                "Complete Twitter Cards configured - optimal for social SEO - Includes alt text for accessibility",
                15,
            )
        return good(
            "Complete Twitter Cards configured - optimal for social SEO - Add image alt text for accessibility and SEO",
            10,
        )

    can_generate = (
        is_set(data.get("seo_title"))
        and is_set(data.get("seo_description"))
        and any(is_set(data.get(name)) for name in fallback_images)
    )
    if can_generate:
        return warning("Twitter Cards can be auto-generated from existing fields - add for better social SEO", 5)
    return warning("Twitter Cards recommended for social SEO signals - improves engagement and CTR")


def validate_twitter_cards(value: Any, data: Mapping[str, Any]) -> FieldResult:
    return _twitter_cards(data, fallback_images=("og_image",))


def validate_article_twitter_cards(value: Any, data: Mapping[str, Any]) -> FieldResult:
    return _twitter_cards(data, fallback_images=("og_image", "featured_image_id"))


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------


def validate_canonical_url(value: Any, data: Mapping[str, Any]) -> FieldResult:
    if not has_text(value):
        return warning("Canonical URL recommended - prevents duplicate content and consolidates ranking signals")
    if FULL_URL_RE.match(value):
        return good("Canonical URL set - prevents duplicate content issues", 5)
    return warning("Canonical URL format invalid - should be full URL (https://example.com/page)")


def validate_url(value: Any, data: Mapping[str, Any]) -> FieldResult:
    if not has_text(value):
        return warning("Website URL recommended for Schema.org")
    if FULL_URL_RE.match(value):
        return good("Valid website URL provided", 10)
    return warning("URL format should be https://example.com", 5)
