"""
Field validators used by the SEO doctor entity configurations.

A validator is any callable ``(value, data) -> FieldResult``; ``value`` is the
field the rule is bound to and ``data`` the whole entity mapping.
"""

from .base import count_items, has_number, has_text, is_set
from .common import (
    validate_article_og_tags,
    validate_article_twitter_cards,
    validate_canonical_url,
    validate_image_alt,
    validate_og_image,
    validate_og_image_alt,
    validate_og_image_dimensions,
    validate_og_tags,
    validate_seo_description,
    validate_seo_title,
    validate_slug,
    validate_twitter_cards,
    validate_twitter_image_alt,
    validate_url,
)

__all__ = [
    "count_items",
    "has_number",
    "has_text",
    "is_set",
    "validate_article_og_tags",
    "validate_article_twitter_cards",
    "validate_canonical_url",
    "validate_image_alt",
    "validate_og_image",
    "validate_og_image_alt",
    "validate_og_image_dimensions",
    "validate_og_tags",
    "validate_seo_description",
    "validate_seo_title",
    "validate_slug",
    "validate_twitter_cards",
    "validate_twitter_image_alt",
    "validate_url",
]
