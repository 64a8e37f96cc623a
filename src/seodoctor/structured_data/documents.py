"""
Standalone JSON-LD documents for published pages.

Inputs are snake_case mappings of an entity with its relations loaded, for
example an article with ``client``, ``author``, ``category``, ``faqs`` and
``featured_image`` nested inside it.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from seodoctor.config import settings
from seodoctor.structured_data.generators import SCHEMA_CONTEXT, compact
from seodoctor.utils.dates import to_iso, utc_now_iso
from seodoctor.validators.base import count_items, is_set


def present(data: Optional[Mapping[str, Any]], name: str) -> Any:
    if not data:
        return None
    value = data.get(name)
    return value if is_set(value) else None


def relation(data: Mapping[str, Any], name: str) -> Dict[str, Any]:
    """
    A loaded relation as a mapping, or an empty one.

    A plain string stands for an image URL (``featured_image`` in preview
    input) or a display name (``category``, ``author``, ``client``).
    """
    value = data.get(name)
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, str) and value.strip():
        return {"url": value} if name.endswith(("image", "media")) else {"name": value}
    return {}


def non_empty_list(data: Optional[Mapping[str, Any]], name: str) -> Optional[List[Any]]:
    """A non-empty list field, or ``None``."""
    if not data or count_items(data.get(name)) == 0:
        return None
    return list(data[name])


def social_profiles(person: Mapping[str, Any]) -> List[str]:
    """LinkedIn, Twitter and Facebook URLs followed by any extra ``same_as`` entries."""
    profiles = [person[name] for name in ("linked_in", "twitter", "facebook") if is_set(person.get(name))]
    profiles.extend(non_empty_list(person, "same_as") or [])
    return profiles


def article_url(article: Mapping[str, Any], site_url: Optional[str] = None) -> str:
    """The canonical URL, or ``{site}/articles/{slug}`` when none is stored."""
    site_url = site_url or settings.site.site_url
    return present(article, "canonical_url") or f"{site_url}/articles/{article.get('slug', '')}"


def _accessible_for_free(article: Mapping[str, Any]) -> bool:
    value = article.get("is_accessible_for_free")
    return True if value is None else bool(value)


def faq_questions(faqs: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return [
        {
            "@type": "Question",
            "name": faq.get("question"),
            "acceptedAnswer": {"@type": "Answer", "text": faq.get("answer")},
        }
        for faq in faqs
    ]


def article_structured_data(article: Mapping[str, Any], site_url: Optional[str] = None) -> Dict[str, Any]:
    """Schema.org ``Article`` with author, publisher and an embedded ``FAQPage`` when FAQs exist."""
    author = relation(article, "author")
    client = relation(article, "client")
    category = relation(article, "category")
    featured = relation(article, "featured_image")
    logo = present(client, "logo")

    node: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Article",
        "headline": article.get("title"),
        "description": present(article, "seo_description") or present(article, "excerpt") or "",
        "image": present(featured, "url") or present(article, "og_image"),
        "datePublished": to_iso(article.get("date_published")),
        "dateModified": to_iso(article.get("date_modified")) or utc_now_iso(),
        "author": {
            "@type": "Person",
            "name": author.get("name"),
            "url": present(author, "url"),
            "image": present(author, "image"),
        },
        "publisher": {
            "@type": "Organization",
            "name": client.get("name"),
            "logo": {"@type": "ImageObject", "url": logo} if logo else None,
            "url": present(client, "url"),
        },
        "mainEntityOfPage": {"@type": "WebPage", "@id": article_url(article, site_url)},
        "articleSection": present(category, "name"),
        "wordCount": present(article, "word_count"),
        "inLanguage": present(article, "in_language") or settings.site.default_language,
        "isAccessibleForFree": _accessible_for_free(article),
        "license": present(article, "license"),
    }

    faqs = non_empty_list(article, "faqs")
    if faqs:
        node["mainEntity"] = {"@type": "FAQPage", "mainEntity": faq_questions(faqs)}

    return compact(node)


def breadcrumb_structured_data(items: Iterable[Any], site_url: Optional[str] = None) -> Dict[str, Any]:
    """
    ``BreadcrumbList`` for site-relative ``items``.

    Items may be :class:`~seodoctor.content.text.BreadcrumbItem` instances or
    mappings with ``name`` and ``url`` keys.
    """
    site_url = site_url or settings.site.site_url
    elements = []
    for position, item in enumerate(items, start=1):
        name = item["name"] if isinstance(item, Mapping) else item.name
        url = item["url"] if isinstance(item, Mapping) else item.url
        elements.append({"@type": "ListItem", "position": position, "name": name, "item": f"{site_url}{url}"})
    return {"@context": SCHEMA_CONTEXT, "@type": "BreadcrumbList", "itemListElement": elements}


def author_structured_data(author: Mapping[str, Any]) -> Dict[str, Any]:
    node: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Person",
        "name": author.get("name"),
        "description": present(author, "bio"),
        "image": present(author, "image"),
        "url": present(author, "url"),
        "jobTitle": present(author, "job_title"),
        "knowsAbout": non_empty_list(author, "expertise_areas"),
        "hasCredential": non_empty_list(author, "credentials"),
        "sameAs": social_profiles(author) or None,
    }
    return compact(node)


def organization_structured_data(client: Mapping[str, Any]) -> Dict[str, Any]:
    logo = present(client, "logo")
    node: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": client.get("name"),
        "legalName": present(client, "legal_name"),
        "url": present(client, "url"),
        "logo": {"@type": "ImageObject", "url": logo} if logo else None,
        "email": present(client, "email"),
        "telephone": present(client, "phone"),
        "description": present(client, "seo_description"),
        "sameAs": non_empty_list(client, "same_as"),
    }
    return compact(node)


def faq_page_structured_data(faqs: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    return {"@context": SCHEMA_CONTEXT, "@type": "FAQPage", "mainEntity": faq_questions(faqs)}
