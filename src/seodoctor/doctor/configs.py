"""
Field-validator tables for each entity type the SEO doctor can score.

Rule order matters: checks are reported in this order, and a field that
appears in two rules (``seo_title`` for both length and Open Graph coverage)
is scored by both.
"""

from __future__ import annotations

from typing import Dict, Tuple

from seodoctor.exceptions import UnknownEntityTypeError
from seodoctor.protocols import EntityConfig, FieldRule
from seodoctor.structured_data.generators import (
    article_preview,
    category_preview,
    industry_preview,
    organization_preview,
    person_preview,
    tag_preview,
)
from seodoctor.validators import article, author, organization, taxonomy
from seodoctor.validators.common import (
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

ORGANIZATION_CONFIG = EntityConfig(
    entity_type="Organization",
    max_score=200,
    structured_data=organization_preview,
    rules=(
        FieldRule("name", "Client Name", organization.validate_name),
        FieldRule("slug", "Slug", validate_slug),
        FieldRule("legal_name", "Legal Name", organization.validate_legal_name),
        FieldRule("url", "Website URL", validate_url),
        FieldRule("logo", "Logo", organization.validate_logo),
        FieldRule("logo_alt", "Logo Alt Text", organization.validate_logo_alt),
        FieldRule("og_image", "OG Image", validate_og_image),
        FieldRule("og_image_alt", "OG Image Alt Text", validate_og_image_alt),
        FieldRule("og_image_width", "OG Image Dimensions", validate_og_image_dimensions),
        FieldRule("seo_title", "SEO Title", validate_seo_title),
        FieldRule("seo_description", "SEO Description", validate_seo_description),
        FieldRule("same_as", "Social Profiles", organization.validate_social_profiles),
        FieldRule("business_brief", "Business Brief", organization.validate_business_brief),
        FieldRule("email", "Contact Information", organization.validate_contact_info),
        FieldRule("gtm_id", "Google Tag Manager", organization.validate_gtm_id),
        FieldRule("founding_date", "Founding Date", organization.validate_founding_date),
        FieldRule("description", "Organization Description", organization.validate_description),
        FieldRule("seo_title", "Open Graph Tags", validate_og_tags),
        FieldRule("url", "HTTPS Protocol", organization.validate_https),
        FieldRule("contact_type", "ContactPoint Structure", organization.validate_contact_point),
        FieldRule("logo", "Logo Format", organization.validate_logo_format),
        FieldRule("twitter_card", "Twitter Cards", validate_twitter_cards),
        FieldRule("twitter_image_alt", "Twitter Image Alt Text", validate_twitter_image_alt),
        FieldRule("canonical_url", "Canonical URL", validate_canonical_url),
        FieldRule("address_street", "Address (Local SEO)", organization.validate_address),
    ),
)

ARTICLE_CONFIG = EntityConfig(
    entity_type="Article",
    max_score=200,
    structured_data=article_preview,
    rules=(
        FieldRule("title", "Article Title", article.validate_title),
        FieldRule("slug", "Slug", validate_slug),
        FieldRule("content", "Content (Word Count)", article.validate_content),
        FieldRule("seo_title", "SEO Title", validate_seo_title),
        FieldRule("seo_description", "SEO Description", validate_seo_description),
        FieldRule("featured_image_id", "Featured Image", article.validate_featured_image),
        # The alt-text rule looks at ``image``, which article forms only set
        # once the featured image has been resolved to a URL.
        FieldRule("featured_image_alt", "Featured Image Alt Text", validate_image_alt),
        FieldRule("og_image", "OG Image", validate_og_image),
        FieldRule("og_image_alt", "OG Image Alt Text", validate_og_image_alt),
        FieldRule("og_image_width", "OG Image Dimensions", validate_og_image_dimensions),
        FieldRule("date_published", "Date Published", article.validate_date_published),
        FieldRule("last_reviewed", "Last Reviewed", article.validate_last_reviewed),
        FieldRule("category_id", "Category", article.validate_category),
        FieldRule("seo_title", "Open Graph Tags", validate_article_og_tags),
        FieldRule("twitter_card", "Twitter Cards", validate_article_twitter_cards),
        FieldRule("twitter_image_alt", "Twitter Image Alt Text", validate_twitter_image_alt),
        FieldRule("canonical_url", "Canonical URL", validate_canonical_url),
    ),
)

PERSON_CONFIG = EntityConfig(
    entity_type="Person",
    max_score=150,
    structured_data=person_preview,
    rules=(
        FieldRule("name", "Author Name", author.validate_name),
        FieldRule("slug", "Slug", validate_slug),
        FieldRule("bio", "Author Bio", author.validate_bio),
        FieldRule("image", "Profile Image", validate_og_image),
        FieldRule("image_alt", "Profile Image Alt Text", validate_image_alt),
        FieldRule("job_title", "E-E-A-T Signals", author.validate_eeat),
        FieldRule("linked_in", "Social Profiles", author.validate_social),
        FieldRule("seo_title", "SEO Title", validate_seo_title),
        FieldRule("seo_description", "SEO Description", validate_seo_description),
        FieldRule("url", "Author URL", validate_url),
    ),
)

CATEGORY_CONFIG = EntityConfig(
    entity_type="Category",
    max_score=100,
    structured_data=category_preview,
    rules=(
        FieldRule("name", "Category Name", taxonomy.taxonomy_name("Category")),
        FieldRule("slug", "Slug", validate_slug),
        FieldRule("description", "Category Description", taxonomy.taxonomy_description("Category", required=True)),
        FieldRule("seo_title", "SEO Title", validate_seo_title),
        FieldRule("seo_description", "SEO Description", validate_seo_description),
        FieldRule("seo_title", "Open Graph Tags", validate_og_tags),
        FieldRule("twitter_card", "Twitter Cards", validate_twitter_cards),
        FieldRule("canonical_url", "Canonical URL", validate_canonical_url),
    ),
)


def _tagging_rules(kind: str) -> Tuple[FieldRule, ...]:
    """Tags and industries share one rule table apart from their labels."""
    return (
        FieldRule("name", f"{kind} Name", taxonomy.taxonomy_name(kind)),
        FieldRule("slug", "Slug", validate_slug),
        FieldRule("description", f"{kind} Description", taxonomy.taxonomy_description(kind)),
        FieldRule("seo_title", "SEO Title", validate_seo_title),
        FieldRule("seo_description", "SEO Description", validate_seo_description),
        FieldRule("og_image", "OG Image", validate_og_image),
        FieldRule("og_image_alt", "OG Image Alt Text", validate_og_image_alt),
        FieldRule("og_image_width", "OG Image Dimensions", validate_og_image_dimensions),
        FieldRule("seo_title", "Open Graph Tags", validate_og_tags),
        FieldRule("twitter_card", "Twitter Cards", validate_twitter_cards),
        FieldRule("twitter_image_alt", "Twitter Image Alt Text", validate_twitter_image_alt),
        FieldRule("canonical_url", "Canonical URL", validate_canonical_url),
    )


TAG_CONFIG = EntityConfig(entity_type="Tag", max_score=100, structured_data=tag_preview, rules=_tagging_rules("Tag"))

INDUSTRY_CONFIG = EntityConfig(
    entity_type="Industry",
    max_score=100,
    structured_data=industry_preview,
    rules=_tagging_rules("Industry"),
)

ENTITY_CONFIGS: Tuple[EntityConfig, ...] = (
    ORGANIZATION_CONFIG,
    ARTICLE_CONFIG,
    PERSON_CONFIG,
    CATEGORY_CONFIG,
    TAG_CONFIG,
    INDUSTRY_CONFIG,
)

_REGISTRY: Dict[str, EntityConfig] = {config.entity_type.lower(): config for config in ENTITY_CONFIGS}
_ALIASES = {"client": "organization", "author": "person"}


def get_entity_config(entity_type: str) -> EntityConfig:
    """Look up a configuration by entity type, ignoring case; ``client`` and ``author`` are accepted."""
    key = entity_type.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return _REGISTRY[key]
    except KeyError:
        raise UnknownEntityTypeError(entity_type, sorted(_REGISTRY) + sorted(_ALIASES)) from None


def entity_type_names() -> list[str]:
    return [config.entity_type for config in ENTITY_CONFIGS]
