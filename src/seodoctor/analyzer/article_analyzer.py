"""
Six-category weighted SEO score for articles.

Unlike the SEO doctor, categories here carry fixed maximum points that add up
to 100, so the total score doubles as the percentage shown in the article
list and editor badge.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import structlog

from seodoctor.content.text import word_count
from seodoctor.observability.logging import entity_context
from seodoctor.observability.metrics import record_error, track_evaluation
from seodoctor.protocols import ArticleSEOReport, CategoryScore
from seodoctor.utils.numbers import round_half_up
from seodoctor.validators.base import count_items, is_set

logger = structlog.get_logger(__name__)

ENGINE = "article_analyzer"

CATEGORY_MAX_SCORES: Dict[str, int] = {
    "meta_tags": 25,
    "content": 25,
    "images": 15,
    "structured_data": 20,
    "technical": 10,
    "social": 5,
}

DEFAULT_ROBOTS = "index, follow"


def _str(value: Any) -> str:
    if isinstance(value, str):
        return value
    return ""


def _id(value: Any) -> str:
    """Ids may be numeric; only presence matters."""
    return str(value) if is_set(value) else ""


@dataclass
class NormalizedArticle:
    """Article fields in the shape the category analyzers expect."""

    title: str = ""
    seo_title: str = ""
    seo_description: str = ""
    meta_robots: str = DEFAULT_ROBOTS
    word_count: int = 0
    content_depth: str = ""
    excerpt: str = ""
    featured_image_id: str = ""
    featured_image_alt: str = ""
    json_ld_structured_data: str = ""
    author_id: str = ""
    date_published: Optional[str] = None
    canonical_url: str = ""
    faq_count: int = 0
    sitemap_priority: Optional[float] = None
    sitemap_change_freq: str = ""
    og_title: str = ""
    og_description: str = ""
    twitter_card: str = ""

    @classmethod
    def from_mapping(cls, article: Mapping[str, Any]) -> NormalizedArticle:
        """
        Build from a snake_case article mapping.

        The SEO title falls back to the title, the SEO description to the
        excerpt, and the word count to a count of ``content``.
        """
        title = _str(article.get("title"))
        excerpt = _str(article.get("excerpt"))

        stored_words = article.get("word_count")
        if isinstance(stored_words, (int, float)) and not isinstance(stored_words, bool) and stored_words > 0:
            words = int(stored_words)
        else:
            words = word_count(_str(article.get("content")))

        json_ld = article.get("json_ld_structured_data")
        if isinstance(json_ld, (dict, list)):
            json_ld = json.dumps(json_ld, ensure_ascii=False)

        date_published = article.get("date_published")
        priority = article.get("sitemap_priority")

        return cls(
            title=title,
            seo_title=_str(article.get("seo_title")) or title,
            seo_description=_str(article.get("seo_description")) or excerpt,
            meta_robots=_str(article.get("meta_robots")) or DEFAULT_ROBOTS,
            word_count=words,
            content_depth=_str(article.get("content_depth")),
            excerpt=excerpt,
            featured_image_id=_id(article.get("featured_image_id")),
            featured_image_alt=_str(article.get("featured_image_alt")),
            json_ld_structured_data=_str(json_ld),
            author_id=_id(article.get("author_id")),
            date_published=str(date_published) if is_set(date_published) else None,
            canonical_url=_str(article.get("canonical_url")),
            faq_count=count_items(article.get("faqs")),
            sitemap_priority=float(priority) if isinstance(priority, (int, float)) else None,
            sitemap_change_freq=_str(article.get("sitemap_change_freq")),
            og_title=_str(article.get("og_title")),
            og_description=_str(article.get("og_description")),
            twitter_card=_str(article.get("twitter_card")),
        )


@dataclass
class _Tally:
    """Running score and pass/fail flags for one category."""

    max_score: int
    score: float = 0
    items: List[bool] = field(default_factory=list)

    def add(self, points: float, passed: bool) -> None:
        self.score += points
        self.items.append(passed)

    def result(self) -> CategoryScore:
        passed = sum(1 for ok in self.items if ok)
        total = len(self.items)
        return CategoryScore(
            score=round_half_up(self.score),
            max_score=self.max_score,
            percentage=round_half_up(passed / total * 100) if total else 0,
            passed=passed,
            total=total,
        )


def analyze_meta_tags(data: NormalizedArticle) -> CategoryScore:
    tally = _Tally(CATEGORY_MAX_SCORES["meta_tags"])

    title_length = len(data.seo_title)
    if 30 <= title_length <= 60:
        tally.add(10, True)
    elif title_length > 0:
        tally.add(5, False)
    else:
        tally.add(0, False)

    description_length = len(data.seo_description)
    if 120 <= description_length <= 160:
        tally.add(10, True)
    elif description_length > 0:
        tally.add(5, False)
    else:
        tally.add(0, False)

    if data.meta_robots and "noindex" not in data.meta_robots:
        tally.add(5, True)
    else:
        tally.add(0, False)

    return tally.result()


def analyze_content(data: NormalizedArticle) -> CategoryScore:
    tally = _Tally(CATEGORY_MAX_SCORES["content"])

    if data.word_count >= 800:
        tally.add(15, True)
    elif data.word_count >= 300:
        tally.add(8, False)
    elif data.word_count > 0:
        tally.add(3, False)
    else:
        tally.add(0, False)

    tally.add(5 if data.content_depth else 0, bool(data.content_depth))
    tally.add(5 if data.excerpt else 0, bool(data.excerpt))
    return tally.result()


def analyze_images(data: NormalizedArticle) -> CategoryScore:
    tally = _Tally(CATEGORY_MAX_SCORES["images"])

    has_image = bool(data.featured_image_id)
    tally.add(10 if has_image else 0, has_image)

    # Alt text only matters once there is an image; without one it counts as passed.
    if has_image and data.featured_image_alt:
        tally.add(5, True)
    else:
        tally.add(0, not has_image)

    return tally.result()


def analyze_structured_data(data: NormalizedArticle) -> CategoryScore:
    tally = _Tally(CATEGORY_MAX_SCORES["structured_data"])

    has_json_ld = bool(data.json_ld_structured_data)
    tally.add(5 if has_json_ld else 0, has_json_ld)

    schema_fields = (data.title, data.author_id, data.date_published, data.canonical_url, data.seo_description)
    schema_score = 2 * sum(1 for value in schema_fields if value)
    tally.add(schema_score, schema_score >= 8)

    if data.faq_count >= 3:
        tally.add(5, True)
    elif data.faq_count > 0:
        tally.add(2, False)
    else:
        tally.add(0, False)

    return tally.result()


def analyze_technical(data: NormalizedArticle) -> CategoryScore:
    tally = _Tally(CATEGORY_MAX_SCORES["technical"])

    if data.canonical_url.startswith("https://"):
        tally.add(5, True)
    elif data.canonical_url:
        tally.add(3, False)
    else:
        tally.add(0, False)

    has_priority = data.sitemap_priority is not None
    has_frequency = bool(data.sitemap_change_freq)
    if has_priority and has_frequency:
        tally.add(5, True)
    elif has_priority or has_frequency:
        tally.add(2, False)
    else:
        tally.add(0, False)

    return tally.result()


def analyze_social(data: NormalizedArticle) -> CategoryScore:
    tally = _Tally(CATEGORY_MAX_SCORES["social"])

    has_og = bool(data.og_title or data.og_description)
    tally.add(3 if has_og else 0, has_og)

    has_card = bool(data.twitter_card)
    tally.add(2 if has_card else 0, has_card)

    return tally.result()


CATEGORY_ANALYZERS = {
    "meta_tags": analyze_meta_tags,
    "content": analyze_content,
    "images": analyze_images,
    "structured_data": analyze_structured_data,
    "technical": analyze_technical,
    "social": analyze_social,
}


def empty_report() -> ArticleSEOReport:
    return ArticleSEOReport(
        score=0,
        percentage=0,
        categories={name: CategoryScore.empty() for name in CATEGORY_ANALYZERS},
    )


def analyze_article_seo(article: Mapping[str, Any]) -> ArticleSEOReport:
    """
    Score an article out of 100.

    Never raises: a malformed article is logged and scored as zero so list
    views can keep rendering.
    """
    with entity_context(article):
        with track_evaluation(ENGINE, "Article") as outcome:
            try:
                normalized = NormalizedArticle.from_mapping(article)
                categories = {name: analyze(normalized) for name, analyze in CATEGORY_ANALYZERS.items()}
            except Exception as e:
                logger.error("Error analyzing article SEO", error=str(e), exc_info=True)
                record_error(ENGINE)
                return empty_report()

            score = min(100, max(0, sum(category.score for category in categories.values())))
            outcome["percentage"] = score

        logger.debug("Article analyzed", score=score)
        return ArticleSEOReport(score=score, percentage=score, categories=categories)
