"""
Schema.org previews generated from a single entity mapping.

Each generator backs one entity configuration and is shown next to the SEO
doctor results. Absent values are dropped rather than rendered as ``null``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from seodoctor.utils.dates import date_only, utc_now_iso
from seodoctor.validators.base import count_items, is_set

SCHEMA_CONTEXT = "https://schema.org"


def compact(node: Dict[str, Any]) -> Dict[str, Any]:
    """Drop ``None`` values, recursing into nested mappings."""
    result: Dict[str, Any] = {}
    for key, value in node.items():
        if isinstance(value, dict):
            value = compact(value)
        if value is not None:
            result[key] = value
    return result


def _value(data: Mapping[str, Any], name: str) -> Any:
    value = data.get(name)
    return value if is_set(value) else None


def organization_preview(data: Mapping[str, Any]) -> Dict[str, Any]:
    node: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": _value(data, "name"),
        "legalName": _value(data, "legal_name"),
        "url": _value(data, "url"),
        "logo": _value(data, "logo"),
        "description": _value(data, "description") or _value(data, "seo_description"),
        "foundingDate": date_only(data.get("founding_date")),
    }

    if is_set(data.get("email")) or is_set(data.get("phone")):
        node["contactPoint"] = {
            "@type": "ContactPoint",
            "contactType": _value(data, "contact_type"),
            "email": _value(data, "email"),
            "telephone": _value(data, "phone"),
        }

    if any(is_set(data.get(name)) for name in ("address_street", "address_city", "address_country")):
        node["address"] = {
            "@type": "PostalAddress",
            "streetAddress": _value(data, "address_street"),
            "addressLocality": _value(data, "address_city"),
            "addressCountry": _value(data, "address_country"),
            "postalCode": _value(data, "address_postal_code"),
        }

    if count_items(data.get("same_as")) > 0:
        node["sameAs"] = list(data["same_as"])

    return compact(node)


def article_preview(data: Mapping[str, Any]) -> Dict[str, Any]:
    publisher_logo = _value(data, "publisher_logo")
    node: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Article",
        "headline": data.get("title") or "",
        "dateModified": date_only(data.get("date_modified")) or utc_now_iso(),
        "author": {
            "@type": "Person",
            "name": data.get("author_name") or "",
            "url": _value(data, "author_url"),
        },
        "publisher": {
            "@type": "Organization",
            "name": data.get("publisher_name") or "",
            "logo": {"@type": "ImageObject", "url": publisher_logo} if publisher_logo else None,
        },
        "description": _value(data, "excerpt") or _value(data, "description"),
        "image": _value(data, "featured_image") or _value(data, "og_image"),
        "datePublished": date_only(data.get("date_published")),
        "articleSection": _value(data, "category_name"),
        "wordCount": _value(data, "word_count"),
        "inLanguage": _value(data, "in_language"),
    }

    canonical = _value(data, "canonical_url")
    if canonical:
        node["mainEntityOfPage"] = {"@type": "WebPage", "@id": canonical}

    return compact(node)


def person_preview(data: Mapping[str, Any]) -> Dict[str, Any]:
    works_for = _value(data, "works_for")
    node: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Person",
        "name": data.get("name") or "",
        "description": _value(data, "bio"),
        "url": _value(data, "url"),
        "image": _value(data, "image"),
        "jobTitle": _value(data, "job_title"),
        "worksFor": {"@type": "Organization", "name": works_for} if works_for else None,
    }

    if count_items(data.get("expertise_areas")) > 0:
        node["knowsAbout"] = list(data["expertise_areas"])

    if count_items(data.get("same_as")) > 0:
        node["sameAs"] = list(data["same_as"])
    else:
        profiles: List[str] = [data[name] for name in ("linked_in", "twitter", "facebook") if is_set(data.get(name))]
        if profiles:
            node["sameAs"] = profiles

    return compact(node)


def taxonomy_preview(entity_type: str):
    """Preview generator for a taxonomy type such as ``"Category"`` or ``"Tag"``."""

    def generate(data: Mapping[str, Any]) -> Dict[str, Any]:
        return compact(
            {
                "@context": SCHEMA_CONTEXT,
                "@type": entity_type,
                "name": data.get("name") or "",
                "description": _value(data, "description"),
                "url": _value(data, "canonical_url"),
            }
        )

    return generate


category_preview = taxonomy_preview("Category")
tag_preview = taxonomy_preview("Tag")
industry_preview = taxonomy_preview("Industry")
