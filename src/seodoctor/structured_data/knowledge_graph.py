"""
Knowledge graph for an article page.

Emits one JSON-LD document whose ``@graph`` links the WebPage, Article,
publisher Organization, author Person, BreadcrumbList and (when present)
FAQPage nodes through stable ``@id`` values:

* web page      ``{article_url}``
* article       ``{article_url}#article``
* author        ``{site}/authors/{slug}#person``
* publisher     ``{site}/clients/{slug}#organization``
* breadcrumb    ``{article_url}#breadcrumb``
* FAQ page      ``{article_url}#faq``
* hero image    ``{article_url}#primary-image``
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import structlog

from seodoctor.config import settings
from seodoctor.content.text import HOME_CRUMB
from seodoctor.structured_data.documents import (
    article_url,
    faq_questions,
    non_empty_list,
    present,
    relation,
    social_profiles,
)
from seodoctor.structured_data.generators import SCHEMA_CONTEXT, compact
from seodoctor.utils.dates import date_only, to_iso, utc_now_iso

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GraphIds:
    web_page: str
    article: str
    author: str
    publisher: str
    breadcrumb: str
    faq: str
    primary_image: str

    @classmethod
    def for_article(cls, article: Mapping[str, Any], url: str, site_url: str) -> GraphIds:
        author = relation(article, "author")
        client = relation(article, "client")
        return cls(
            web_page=url,
            article=f"{url}#article",
            author=f"{site_url}/authors/{author.get('slug', '')}#person",
            publisher=f"{site_url}/clients/{client.get('slug', '')}#organization",
            breadcrumb=f"{url}#breadcrumb",
            faq=f"{url}#faq",
            primary_image=f"{url}#primary-image",
        )


def _by_position(items: List[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    return sorted((item for item in items if isinstance(item, Mapping)), key=lambda item: item.get("position") or 0)


def _language(article: Mapping[str, Any]) -> str:
    return present(article, "in_language") or settings.site.default_language


def web_page_node(article: Mapping[str, Any], url: str, ids: GraphIds, site_url: str) -> Dict[str, Any]:
    return compact(
        {
            "@type": "WebPage",
            "@id": ids.web_page,
            "url": url,
            "name": present(article, "seo_title") or article.get("title"),
            "description": present(article, "seo_description") or present(article, "excerpt"),
            "mainEntity": {"@id": ids.article},
            "inLanguage": _language(article),
            "isPartOf": {
                "@type": "WebSite",
                "@id": f"{site_url}#website",
                "name": settings.site.site_name,
                "url": site_url,
            },
            "breadcrumb": {"@id": ids.breadcrumb},
            "datePublished": to_iso(article.get("date_published")),
            "dateModified": to_iso(article.get("date_modified")) or utc_now_iso(),
        }
    )


def image_nodes(article: Mapping[str, Any], url: str) -> List[Dict[str, Any]]:
    """Hero image first, then gallery images ordered by position."""
    images: List[Dict[str, Any]] = []

    featured = relation(article, "featured_image")
    if featured:
        creator = present(featured, "creator")
        images.append(
            compact(
                {
                    "@type": "ImageObject",
                    "@id": f"{url}#primary-image",
                    "url": featured.get("url"),
                    "contentUrl": featured.get("url"),
                    "width": present(featured, "width"),
                    "height": present(featured, "height"),
                    "caption": present(featured, "caption"),
                    "name": present(featured, "alt_text"),
                    "license": present(featured, "license"),
                    "creator": {"@type": "Person", "name": creator} if creator else None,
                    "representativeOfPage": True,
                }
            )
        )

    for index, item in enumerate(_by_position(non_empty_list(article, "gallery") or [])):
        media = relation(item, "media")
        images.append(
            compact(
                {
                    "@type": "ImageObject",
                    "@id": f"{url}#image-{index + 2}",
                    "url": media.get("url"),
                    "contentUrl": media.get("url"),
                    "width": present(media, "width"),
                    "height": present(media, "height"),
                    "caption": present(item, "caption") or present(media, "caption"),
                    "name": present(item, "alt_text") or present(media, "alt_text"),
                    "license": present(media, "license"),
                }
            )
        )

    return images


def _tag_names(article: Mapping[str, Any]) -> List[str]:
    names = []
    for entry in non_empty_list(article, "tags") or []:
        tag = entry.get("tag", entry) if isinstance(entry, Mapping) else entry
        if not isinstance(tag, Mapping):
            tag = {"name": tag}
        if present(tag, "name"):
            names.append(tag["name"])
    return names


def article_node(article: Mapping[str, Any], url: str, ids: GraphIds, site_url: str) -> Dict[str, Any]:
    node: Dict[str, Any] = {
        "@type": "Article",
        "@id": ids.article,
        "headline": article.get("title"),
        "description": present(article, "seo_description") or present(article, "excerpt"),
        "author": {"@id": ids.author},
        "publisher": {"@id": ids.publisher},
        "mainEntityOfPage": {"@id": ids.web_page},
        "inLanguage": _language(article),
        "isAccessibleForFree": article.get("is_accessible_for_free") is not False,
        "datePublished": to_iso(article.get("date_published")),
        "dateModified": to_iso(article.get("date_modified")) or utc_now_iso(),
        "lastReviewed": to_iso(article.get("last_reviewed")),
        # Plain-text body for crawlers that do not render HTML
        "articleBody": present(article, "article_body_text"),
        "wordCount": present(article, "word_count"),
        "license": present(article, "license"),
        "citation": non_empty_list(article, "citations"),
    }

    category = relation(article, "category")
    if category:
        node["articleSection"] = category.get("name")
        node["about"] = {
            "@type": "Thing",
            "@id": f"{site_url}/categories/{category.get('slug', '')}",
            "name": category.get("name"),
        }

    tags = _tag_names(article)
    if tags:
        node["keywords"] = ", ".join(tags)

    images = image_nodes(article, url)
    if images:
        node["image"] = images[0] if len(images) == 1 else images

    return compact(node)


def organization_node(client: Mapping[str, Any], node_id: str) -> Dict[str, Any]:
    node: Dict[str, Any] = {
        "@type": "Organization",
        "@id": node_id,
        "name": client.get("name"),
        "legalName": present(client, "legal_name"),
        "url": present(client, "url"),
        "description": present(client, "description"),
        "sameAs": non_empty_list(client, "same_as"),
        "foundingDate": date_only(client.get("founding_date")),
    }

    logo = relation(client, "logo_media")
    if logo:
        node["logo"] = {
            "@type": "ImageObject",
            "url": logo.get("url"),
            "width": present(logo, "width"),
            "height": present(logo, "height"),
        }

    if present(client, "email") or present(client, "phone"):
        node["contactPoint"] = {
            "@type": "ContactPoint",
            "contactType": present(client, "contact_type"),
            "email": present(client, "email"),
            "telephone": present(client, "phone"),
        }

    if any(present(client, name) for name in ("address_street", "address_city", "address_country")):
        node["address"] = {
            "@type": "PostalAddress",
            "streetAddress": present(client, "address_street"),
            "addressLocality": present(client, "address_city"),
            "addressCountry": present(client, "address_country"),
            "postalCode": present(client, "address_postal_code"),
        }

    return compact(node)


def person_node(author: Mapping[str, Any], node_id: str) -> Dict[str, Any]:
    member_of = non_empty_list(author, "member_of")
    return compact(
        {
            "@type": "Person",
            "@id": node_id,
            "name": author.get("name"),
            "description": present(author, "bio"),
            "image": present(author, "image"),
            "url": present(author, "url"),
            "jobTitle": present(author, "job_title"),
            "knowsAbout": non_empty_list(author, "expertise_areas"),
            "hasCredential": non_empty_list(author, "credentials"),
            "memberOf": [{"@type": "Organization", "name": org} for org in member_of] if member_of else None,
            "sameAs": social_profiles(author) or None,
        }
    )


def breadcrumb_node(article: Mapping[str, Any], url: str, node_id: str, site_url: str) -> Dict[str, Any]:
    crumbs = [(HOME_CRUMB, site_url)]
    category = relation(article, "category")
    if category:
        crumbs.append((category.get("name"), f"{site_url}/categories/{category.get('slug', '')}"))
    crumbs.append((article.get("title"), url))

    return {
        "@type": "BreadcrumbList",
        "@id": node_id,
        "itemListElement": [
            {"@type": "ListItem", "position": position, "name": name, "item": item}
            for position, (name, item) in enumerate(crumbs, start=1)
        ],
    }


def faq_node(faqs: List[Mapping[str, Any]], node_id: str) -> Dict[str, Any]:
    return {"@type": "FAQPage", "@id": node_id, "mainEntity": faq_questions(_by_position(faqs))}


def article_knowledge_graph(article: Mapping[str, Any], site_url: Optional[str] = None) -> Dict[str, Any]:
    """Build the linked ``@graph`` document for ``article`` and its relations."""
    site_url = site_url or settings.site.site_url
    url = article_url(article, site_url)
    ids = GraphIds.for_article(article, url, site_url)

    graph = [
        web_page_node(article, url, ids, site_url),
        article_node(article, url, ids, site_url),
        organization_node(relation(article, "client"), ids.publisher),
        person_node(relation(article, "author"), ids.author),
        breadcrumb_node(article, url, ids.breadcrumb, site_url),
    ]

    faqs = non_empty_list(article, "faqs")
    if faqs:
        graph.append(faq_node(faqs, ids.faq))

    logger.debug("Knowledge graph built", url=url, nodes=len(graph))
    return {"@context": SCHEMA_CONTEXT, "@graph": graph}


def stringify_graph(graph: Mapping[str, Any], pretty: bool = False) -> str:
    """Compact JSON for pages, indented JSON for previews."""
    if pretty:
        return json.dumps(graph, ensure_ascii=False, indent=2)
    return json.dumps(graph, ensure_ascii=False, separators=(",", ":"))
