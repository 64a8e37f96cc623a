"""
URL slug generation for content entities.

Slugs keep Latin word characters, Arabic letters and hyphens so that Arabic
titles produce readable URLs instead of empty strings.
"""

import re
from typing import Optional

WHITESPACE_PATTERN = re.compile(r"\s+")

# Anything that is not a word character, an Arabic letter or a hyphen
UNSAFE_CHARS_PATTERN = re.compile(r"[^؀-ۿ\w\-]+")

MULTIPLE_HYPHENS_PATTERN = re.compile(r"-{2,}")


def slugify(text: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Convert a title to a URL slug.

    Args:
        text: Input title
        max_length: Optional maximum length of the result

    Returns:
        Slug with whitespace collapsed to single hyphens

    Examples:
        >>> slugify("Hello World!")
        'hello-world'

        >>> slugify("  SEO  --  Basics ")
        'seo-basics'

        >>> slugify("دليل تحسين محركات البحث")
        'دليل-تحسين-محركات-البحث'

        >>> slugify("-draft-")
        '-draft-'

        >>> slugify("")
        ''
    """
    if not text or not text.strip():
        return ""

    result = text.strip().lower()
    result = WHITESPACE_PATTERN.sub("-", result)
    result = UNSAFE_CHARS_PATTERN.sub("", result)
    result = MULTIPLE_HYPHENS_PATTERN.sub("-", result)

    if max_length and len(result) > max_length:
        result = result[:max_length].rstrip("-")

    return result


def is_valid_slug(slug: str) -> bool:
    """Check whether ``slug`` is already in normalized form."""
    return bool(slug) and slugify(slug) == slug
