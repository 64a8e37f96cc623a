"""Unit tests for the six-category weighted article analyzer."""

import pytest
from prometheus_client import REGISTRY
from seodoctor.analyzer import CATEGORY_MAX_SCORES, NormalizedArticle, analyze_article_seo, empty_report
from seodoctor.analyzer.article_analyzer import (
    analyze_content,
    analyze_images,
    analyze_meta_tags,
    analyze_social,
    analyze_structured_data,
    analyze_technical,
)


def _errors():
    return REGISTRY.get_sample_value("seodoctor_evaluation_errors_total", {"engine": "article_analyzer"}) or 0.0


class TestNormalizedArticle:
    """Test input normalisation."""

    def test_fallbacks(self):
        article = NormalizedArticle.from_mapping(
            {"title": "Title", "excerpt": "Excerpt", "content": "<p>three little words</p>", "faqs": [{}, {}]}
        )
        assert article.seo_title == "Title"
        assert article.seo_description == "Excerpt"
        assert article.meta_robots == "index, follow"
        assert article.word_count == 3
        assert article.faq_count == 2

    def test_stored_word_count_and_json_ld(self):
        article = NormalizedArticle.from_mapping(
            {"word_count": 1200, "content": "ignored", "json_ld_structured_data": {"@type": "Article"}}
        )
        assert article.word_count == 1200
        assert article.json_ld_structured_data == '{"@type": "Article"}'

    def test_wrong_types_are_blank(self):
        article = NormalizedArticle.from_mapping({"title": 42, "sitemap_priority": "high"})
        assert article.title == ""
        assert article.sitemap_priority is None

    def test_numeric_ids_count_as_present(self):
        article = NormalizedArticle.from_mapping({"title": "T", "author_id": 42, "featured_image_id": 7})
        assert article.author_id == "42"
        assert article.featured_image_id == "7"
        # title and author earn 2 points each toward schema completeness
        assert analyze_structured_data(article).score == 4


class TestCategories:
    """Test each category's point allocation."""

    def test_meta_tags(self):
        data = NormalizedArticle(seo_title="t" * 20, seo_description="d" * 140)
        result = analyze_meta_tags(data)
        assert result.score == 20
        assert (result.passed, result.total) == (2, 3)

    def test_noindex_earns_nothing(self):
        data = NormalizedArticle(meta_robots="noindex")
        assert analyze_meta_tags(data).score == 0

    @pytest.mark.parametrize("words, score", [(800, 25), (300, 18), (1, 13), (0, 10)])
    def test_content(self, words, score):
        data = NormalizedArticle(word_count=words, content_depth="medium", excerpt="e")
        assert analyze_content(data).score == score

    def test_images_without_featured_image(self):
        """Missing alt text is not held against an article without an image."""
        result = analyze_images(NormalizedArticle())
        assert result.score == 0
        assert (result.passed, result.total) == (1, 2)
        assert result.percentage == 50

    def test_images_with_alt(self):
        result = analyze_images(NormalizedArticle(featured_image_id="m1", featured_image_alt="Alt"))
        assert result.score == CATEGORY_MAX_SCORES["images"]

    def test_structured_data(self):
        data = NormalizedArticle(title="T", author_id="a1", canonical_url="https://x.com/a", faq_count=1)
        result = analyze_structured_data(data)
        # schema 6 (not passing) + 2 for a single FAQ
        assert result.score == 8
        assert result.passed == 0

    def test_technical(self):
        assert analyze_technical(NormalizedArticle(canonical_url="http://x.com/a")).score == 3
        data = NormalizedArticle(canonical_url="https://x.com/a", sitemap_priority=0.5)
        assert analyze_technical(data).score == 7

    def test_social(self):
        assert analyze_social(NormalizedArticle(og_description="d")).score == 3
        assert analyze_social(NormalizedArticle(og_title="t", twitter_card="summary")).score == 5


class TestAnalyzeArticleSeo:
    """Test the overall analyzer."""

    def test_optimised_article_scores_100(self, published_article):
        report = analyze_article_seo(published_article)
        assert report.score == 100
        assert report.percentage == 100
        assert {name: category.score for name, category in report.categories.items()} == CATEGORY_MAX_SCORES

    def test_empty_article(self):
        report = analyze_article_seo({})
        assert report.score == 5
        assert report.categories["meta_tags"].score == 5

    def test_failure_returns_empty_report(self):
        """Unexpected input is logged and scored as zero instead of raising."""
        before = _errors()
        report = analyze_article_seo(None)
        assert report.to_dict() == empty_report().to_dict()
        assert report.score == 0
        assert _errors() == before + 1

    def test_to_dict(self, published_article):
        data = analyze_article_seo(published_article).to_dict()
        assert data["score"] == 100
        assert data["categories"]["social"] == {
            "score": 5,
            "maxScore": 5,
            "percentage": 100,
            "passed": 2,
            "total": 2,
        }
