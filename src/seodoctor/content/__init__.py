"""Content text helpers: word counts, excerpts, generated SEO fields and key normalisation."""

from seodoctor.utils.slugify import slugify

from .text import (
    BreadcrumbItem,
    content_depth,
    extract_excerpt,
    generate_breadcrumb_path,
    generate_canonical_url,
    generate_seo_description,
    generate_seo_title,
    normalize_keys,
    reading_time,
    strip_html,
    to_snake_case,
    word_count,
)

__all__ = [
    "BreadcrumbItem",
    "content_depth",
    "extract_excerpt",
    "generate_breadcrumb_path",
    "generate_canonical_url",
    "generate_seo_description",
    "generate_seo_title",
    "normalize_keys",
    "reading_time",
    "slugify",
    "strip_html",
    "to_snake_case",
    "word_count",
]
