"""
Shared fixtures for the seodoctor test suite.

Entity fixtures are snake_case mappings the way the CLI hands them to the
engines after key normalisation.
"""

# Standard library imports
import logging
from typing import Any, Dict, Generator

# Third-party imports
import pytest

# Local imports
from seodoctor.config import Config, LazyConfig
from seodoctor.observability.metrics import set_metrics_enabled

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# ============================================================================
# Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def default_settings() -> Generator[Config, None, None]:
    """Run every test against default settings, regardless of files in the working directory."""
    config = Config()
    LazyConfig.override(config)
    yield config
    LazyConfig.override(None)


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """CLI runs reconfigure the root logger; put the original handlers back."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    set_metrics_enabled(True)


# ============================================================================
# Entity fixtures
# ============================================================================

LONG_TEXT = (
    "Acme builds analytics dashboards for publishers and newsrooms. Our team has shipped "
    "reporting tools for more than a decade."
)


@pytest.fixture
def complete_organization() -> Dict[str, Any]:
    """An organization that passes every doctor check at full points."""
    return {
        "name": "Acme Media",
        "slug": "acme-media",
        "legal_name": "Acme Media LLC",
        "url": "https://acme.example.com",
        "logo": "https://acme.example.com/logo.png",
        "logo_alt": "Acme Media logo",
        "og_image": "https://acme.example.com/og.jpg",
        "og_image_alt": "Acme Media newsroom",
        "og_image_width": 1200,
        "og_image_height": 630,
        "seo_title": "Acme Media - Analytics dashboards for modern publishers",
        "seo_description": "a" * 155,
        "same_as": [
            "https://twitter.com/acme",
            "https://linkedin.com/company/acme",
            "https://facebook.com/acme",
        ],
        "business_brief": LONG_TEXT,
        "email": "hello@acme.example.com",
        "phone": "+966500000000",
        "gtm_id": "GTM-ABC123",
        "founding_date": "2010-05-01",
        "description": LONG_TEXT,
        "contact_type": "customer service",
        "twitter_card": "summary_large_image",
        "twitter_title": "Acme Media",
        "twitter_description": "Analytics dashboards for publishers",
        "twitter_image": "https://acme.example.com/twitter.jpg",
        "twitter_image_alt": "Acme Media dashboard",
        "canonical_url": "https://acme.example.com/",
        "address_street": "King Fahd Road",
        "address_city": "Riyadh",
        "address_country": "SA",
    }


@pytest.fixture
def draft_article() -> Dict[str, Any]:
    """A draft article with only the basics filled in."""
    return {
        "title": "How to write SEO titles",
        "slug": "how-to-write-seo-titles",
        "status": "DRAFT",
        "content": "<p>" + " ".join(["word"] * 250) + "</p>",
    }


@pytest.fixture
def published_article() -> Dict[str, Any]:
    """A well-optimised published article as the guidance panel sees it."""
    return {
        "title": "The complete guide to technical SEO audits for publishers",
        "slug": "technical-seo-audits",
        "status": "PUBLISHED",
        "seo_title": "Technical SEO audits: a complete guide for publishers",
        "seo_description": "d" * 150,
        "excerpt": "A practical walkthrough of technical SEO audits.",
        "content": " ".join(["word"] * 900),
        "content_depth": "medium",
        "meta_robots": "index, follow",
        "featured_image_id": "media-1",
        "featured_image_alt": "Audit checklist on a laptop",
        "json_ld_structured_data": '{"@type": "Article"}',
        "author_id": "author-1",
        "date_published": "2024-03-01T10:00:00Z",
        "canonical_url": "https://modonty.com/articles/technical-seo-audits",
        "faqs": [
            {"question": "What is an audit?", "answer": "A review.", "position": 2},
            {"question": "How often?", "answer": "Quarterly.", "position": 1},
            {"question": "Who runs it?", "answer": "The SEO team.", "position": 3},
        ],
        "sitemap_priority": 0.8,
        "sitemap_change_freq": "weekly",
        "og_title": "Technical SEO audits",
        "og_description": "A complete guide",
        "twitter_card": "summary_large_image",
    }


@pytest.fixture
def article_with_relations(published_article) -> Dict[str, Any]:
    """A published article with its client, author, category, tags and images loaded."""
    return {
        **published_article,
        "date_modified": "2024-04-01T08:00:00Z",
        "in_language": "ar",
        "client": {
            "name": "Acme Media",
            "slug": "acme",
            "url": "https://acme.example.com",
            "logo": "https://acme.example.com/logo.png",
            "logo_media": {"url": "https://acme.example.com/logo.png", "width": 512, "height": 512},
            "email": "hello@acme.example.com",
            "same_as": ["https://twitter.com/acme"],
        },
        "author": {
            "name": "Sara Ahmed",
            "slug": "sara-ahmed",
            "bio": "Technical SEO lead",
            "job_title": "SEO Lead",
            "linked_in": "https://linkedin.com/in/sara",
            "same_as": ["https://sara.example.com"],
            "expertise_areas": ["Technical SEO"],
        },
        "category": {"name": "SEO", "slug": "seo"},
        "tags": [{"tag": {"name": "audits"}}, {"tag": {"name": "crawling"}}],
        "featured_image": {
            "url": "https://cdn.example.com/hero.jpg",
            "width": 1200,
            "height": 630,
            "alt_text": "Audit checklist",
        },
        "gallery": [
            {"position": 2, "media": {"url": "https://cdn.example.com/b.jpg"}},
            {"position": 1, "media": {"url": "https://cdn.example.com/a.jpg"}, "alt_text": "First"},
        ],
    }
