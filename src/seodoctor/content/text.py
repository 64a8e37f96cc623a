"""
Text helpers for article content and generated SEO fields.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from seodoctor.config import settings

HTML_TAG_RE = re.compile(r"<[^>]*>")
CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

DEFAULT_EXCERPT_LENGTH = 155
HOME_CRUMB = "الرئيسية"


def strip_html(content: Optional[str]) -> str:
    """Remove markup tags, leaving text and entities untouched."""
    if not content:
        return ""
    return HTML_TAG_RE.sub("", content)


def word_count(content: Optional[str]) -> int:
    """Count whitespace-separated words after stripping HTML tags."""
    if not content:
        return 0
    return len(strip_html(content).split())


def reading_time(words: int, words_per_minute: Optional[int] = None) -> int:
    """Minutes needed to read ``words``, rounded up."""
    wpm = words_per_minute or settings.site.words_per_minute
    return math.ceil(words / wpm)


def content_depth(words: int) -> str:
    if words < 500:
        return "short"
    if words < 1500:
        return "medium"
    return "long"


def _truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def extract_excerpt(content: Optional[str], max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Plain-text excerpt of ``content``, at most ``max_length`` characters including the ellipsis."""
    if not content:
        return ""
    return _truncate(strip_html(content).strip(), max_length)


def generate_seo_title(title: Optional[str], client_name: Optional[str] = None) -> str:
    if not title:
        return ""
    if client_name:
        return f"{title} | {client_name}"
    return title


def generate_seo_description(excerpt: Optional[str], max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    return extract_excerpt(excerpt, max_length)


def generate_canonical_url(slug: str, base_url: Optional[str] = None, client_slug: Optional[str] = None) -> str:
    site_url = base_url or settings.site.site_url
    if client_slug:
        return f"{site_url}/clients/{client_slug}/articles/{slug}"
    return f"{site_url}/articles/{slug}"


@dataclass(frozen=True)
class BreadcrumbItem:
    name: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "url": self.url}


def generate_breadcrumb_path(
    category_name: Optional[str] = None,
    category_slug: Optional[str] = None,
    article_title: Optional[str] = None,
    article_slug: Optional[str] = None,
) -> List[BreadcrumbItem]:
    """Home, then category and article when both their name and slug are known."""
    items = [BreadcrumbItem(HOME_CRUMB, "/")]
    if category_name and category_slug:
        items.append(BreadcrumbItem(category_name, f"/categories/{category_slug}"))
    if article_title and article_slug:
        items.append(BreadcrumbItem(article_title, f"/articles/{article_slug}"))
    return items


# ---------------------------------------------------------------------------
# Key normalisation
# ---------------------------------------------------------------------------


def to_snake_case(key: str) -> str:
    """
    >>> to_snake_case("ogImageWidth")
    'og_image_width'
    >>> to_snake_case("linkedIn")
    'linked_in'
    >>> to_snake_case("seo_title")
    'seo_title'
    """
    return CAMEL_BOUNDARY_RE.sub("_", key).lower()


def normalize_keys(value: Any) -> Any:
    """Recursively convert camelCase mapping keys to snake_case.

    JSON-LD keys (``@type``, ``@id``) and the contents of lists are preserved
    apart from nested mappings.
    """
    if isinstance(value, dict):
        return {
            (key if not isinstance(key, str) or key.startswith("@") else to_snake_case(key)): normalize_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [normalize_keys(item) for item in value]
    return value
