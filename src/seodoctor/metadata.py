"""
Page ``<head>`` metadata for public pages.

Produces a plain dict shaped like a framework metadata object: full title,
description, keywords, canonical alternate, Open Graph, Twitter card and
robots directives (including the ``googleBot`` block).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from seodoctor.config import settings

DEFAULT_DESCRIPTION = "منصة مدونات احترافية لإدارة المحتوى عبر عملاء متعددين"
OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630

INDEX_FOLLOW = "index,follow"
NOINDEX_NOFOLLOW = "noindex,nofollow"
PAGE_TYPES = ("website", "article", "profile")


@dataclass
class PageSEOData:
    """Inputs for one page. Everything is optional; the site defaults fill the gaps."""

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: List[str] = field(default_factory=list)
    image: Optional[str] = None
    url: Optional[str] = None
    type: str = "website"
    site_name: Optional[str] = None
    locale: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    twitter_creator: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> PageSEOData:
        known = {name: data[name] for name in cls.__dataclass_fields__ if data.get(name) is not None}
        return cls(**known)


def _robots(index: bool) -> Dict[str, Any]:
    return {
        "index": index,
        "follow": index,
        "googleBot": {
            "index": index,
            "follow": index,
            "max-video-preview": -1,
            "max-image-preview": "large",
            "max-snippet": -1,
        },
    }


def build_page_metadata(data: Any, robots: Optional[str] = None, site_url: Optional[str] = None) -> Dict[str, Any]:
    """
    Build page metadata from a :class:`PageSEOData` or an equivalent mapping.

    ``robots`` is ``"index,follow"`` (default) or ``"noindex,nofollow"``; any
    other value indexes the page. ``url`` is site-relative.
    """
    if not isinstance(data, PageSEOData):
        data = PageSEOData.from_mapping(dict(data))
    if data.type not in PAGE_TYPES:
        raise ValueError(f"page type must be one of {', '.join(PAGE_TYPES)}, got {data.type!r}")

    site_url = site_url or settings.site.site_url
    site_name = data.site_name or settings.site.site_name
    full_title = f"{data.title} - {site_name}" if data.title else site_name
    canonical = f"{site_url}{data.url}" if data.url else site_url
    og_image = data.image or f"{site_url}/og-image.jpg"

    open_graph: Dict[str, Any] = {
        "title": full_title,
        "description": data.description or "",
        "url": canonical,
        "siteName": site_name,
        "images": [
            {
                "url": og_image,
                "width": OG_IMAGE_WIDTH,
                "height": OG_IMAGE_HEIGHT,
                "alt": data.title or site_name,
            }
        ],
        "locale": data.locale or settings.site.default_locale,
        "type": data.type,
    }
    if data.type == "profile":
        if data.first_name:
            open_graph["firstName"] = data.first_name
        if data.last_name:
            open_graph["lastName"] = data.last_name

    twitter: Dict[str, Any] = {
        "card": "summary_large_image",
        "title": full_title,
        "description": data.description or "",
        "images": [og_image],
    }
    if data.twitter_creator:
        twitter["creator"] = "@" + data.twitter_creator.lstrip("@")

    return {
        "title": full_title,
        "description": data.description or DEFAULT_DESCRIPTION,
        "keywords": list(data.keywords),
        "alternates": {"canonical": canonical},
        "openGraph": open_graph,
        "twitter": twitter,
        "robots": _robots(robots != NOINDEX_NOFOLLOW),
    }
