"""Unit tests for content text helpers."""

import pytest
from seodoctor.content import (
    BreadcrumbItem,
    content_depth,
    extract_excerpt,
    generate_breadcrumb_path,
    generate_canonical_url,
    generate_seo_description,
    generate_seo_title,
    normalize_keys,
    reading_time,
    slugify,
    strip_html,
    word_count,
)
from seodoctor.content.text import to_snake_case


class TestWordCount:
    """Test word counting and reading time."""

    def test_strips_tags(self):
        assert strip_html("<h1>Hi</h1><p>there</p>") == "Hithere"
        assert word_count("<p>Hello <em>big</em> world</p>") == 3

    def test_empty(self):
        assert word_count(None) == 0
        assert word_count("   ") == 0

    def test_reading_time_rounds_up(self):
        assert reading_time(201) == 2
        assert reading_time(200) == 1
        assert reading_time(0) == 0
        assert reading_time(300, words_per_minute=100) == 3

    @pytest.mark.parametrize(
        "words, depth",
        [(0, "short"), (499, "short"), (500, "medium"), (1499, "medium"), (1500, "long")],
    )
    def test_content_depth(self, words, depth):
        assert content_depth(words) == depth


class TestGeneratedFields:
    """Test excerpt, title, description and URL generation."""

    def test_excerpt_truncates_with_ellipsis(self):
        excerpt = extract_excerpt("<p>" + "a" * 200 + "</p>")
        assert len(excerpt) == 155
        assert excerpt.endswith("...")

    def test_short_excerpt_is_kept(self):
        assert extract_excerpt("<b> Short text </b>") == "Short text"

    def test_seo_title(self):
        assert generate_seo_title("Guide", "Acme") == "Guide | Acme"
        assert generate_seo_title("Guide") == "Guide"
        assert generate_seo_title("") == ""

    def test_seo_description(self):
        assert generate_seo_description("x" * 10) == "x" * 10
        assert len(generate_seo_description("x" * 300, max_length=160)) == 160

    def test_canonical_url(self):
        assert generate_canonical_url("my-post") == "https://modonty.com/articles/my-post"
        assert (
            generate_canonical_url("my-post", "https://blog.example.com", "acme")
            == "https://blog.example.com/clients/acme/articles/my-post"
        )

    def test_breadcrumbs(self):
        items = generate_breadcrumb_path("SEO", "seo", "Audits", "audits")
        assert items == [
            BreadcrumbItem("الرئيسية", "/"),
            BreadcrumbItem("SEO", "/categories/seo"),
            BreadcrumbItem("Audits", "/articles/audits"),
        ]
        assert generate_breadcrumb_path(category_name="SEO") == [BreadcrumbItem("الرئيسية", "/")]
        assert items[1].to_dict() == {"name": "SEO", "url": "/categories/seo"}


class TestSlugify:
    """Test slug generation."""

    @pytest.mark.parametrize(
        "text, slug",
        [
            ("Hello World!", "hello-world"),
            ("  SEO  --  Basics ", "seo-basics"),
            ("دليل تحسين محركات البحث", "دليل-تحسين-محركات-البحث"),
            ("What's new in 2024?", "whats-new-in-2024"),
            ("-draft-", "-draft-"),
            ("Intro !", "intro-"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_slugify(self, text, slug):
        assert slugify(text) == slug

    def test_max_length_does_not_end_with_hyphen(self):
        assert slugify("alpha beta gamma", max_length=11) == "alpha-beta"


class TestKeyNormalisation:
    """Test camelCase to snake_case conversion of input payloads."""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("seoTitle", "seo_title"),
            ("ogImageWidth", "og_image_width"),
            ("linkedIn", "linked_in"),
            ("jsonLdStructuredData", "json_ld_structured_data"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_to_snake_case(self, key, expected):
        assert to_snake_case(key) == expected

    def test_nested(self):
        payload = {
            "seoTitle": "T",
            "author": {"jobTitle": "Editor"},
            "faqs": [{"question": "Q", "answer": "A"}],
            "jsonLd": {"@type": "Article"},
            "sameAs": ["https://x.com/A"],
        }
        assert normalize_keys(payload) == {
            "seo_title": "T",
            "author": {"job_title": "Editor"},
            "faqs": [{"question": "Q", "answer": "A"}],
            "json_ld": {"@type": "Article"},
            "same_as": ["https://x.com/A"],
        }
