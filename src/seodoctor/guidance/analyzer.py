"""
SEO guidance for articles.

Builds an in-page checklist from an article mapping (meta tags, content,
images, structured data, technical and mobile checks), weights it per
category and adds off-page recommendations that are not tied to a form field.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

import structlog

from seodoctor.config import settings
from seodoctor.config.config import GuidanceConfig
from seodoctor.content.text import word_count
from seodoctor.observability.metrics import track_evaluation
from seodoctor.protocols import (
    CategoryScore,
    ChecklistItem,
    GuidanceReport,
    Issue,
    IssueSeverity,
    OffPageRecommendation,
    Priority,
    Status,
)
from seodoctor.utils.dates import utc_now_iso
from seodoctor.utils.numbers import clamp_percentage, round_half_up
from seodoctor.validators.base import count_items, is_set

logger = structlog.get_logger(__name__)

ENGINE = "guidance"

TITLE_SOURCE = "https://developers.google.com/search/docs/appearance/title-link"
SNIPPET_SOURCE = "https://developers.google.com/search/docs/appearance/snippet"
ROBOTS_SOURCE = "https://developers.google.com/search/docs/crawling-indexing/robots-meta-tag"
HELPFUL_CONTENT_SOURCE = "https://developers.google.com/search/docs/fundamentals/creating-helpful-content"
IMAGES_SOURCE = "https://developers.google.com/search/docs/appearance/google-images"
STRUCTURED_DATA_SOURCE = "https://developers.google.com/search/docs/appearance/structured-data"
SCHEMA_ARTICLE_SOURCE = "https://schema.org/Article"
FAQ_SOURCE = "https://developers.google.com/search/docs/appearance/structured-data/faqpage"
CANONICAL_SOURCE = "https://developers.google.com/search/docs/crawling-indexing/consolidate-duplicate-urls"
ESSENTIALS_SOURCE = "https://developers.google.com/search/docs/essentials"
MOBILE_SOURCE = "https://developers.google.com/search/docs/essentials/mobile-friendly"
VITALS_SOURCE = "https://web.dev/vitals/"

DEFAULT_ROBOTS = "index, follow"

_SEVERITY_BY_STATUS = {
    Status.FAIL: IssueSeverity.CRITICAL,
    Status.WARNING: IssueSeverity.WARNING,
    Status.INFO: IssueSeverity.SUGGESTION,
}


def _text(article: Mapping[str, Any], *names: str) -> str:
    """First truthy value among ``names`` as a string, or ``""``."""
    for name in names:
        value = article.get(name)
        if is_set(value):
            return str(value)
    return ""


# ---------------------------------------------------------------------------
# In-page checks
# ---------------------------------------------------------------------------


def analyze_meta_tags(article: Mapping[str, Any], config: GuidanceConfig) -> List[ChecklistItem]:
    items: List[ChecklistItem] = []
    title_range = f"{config.title_min}-{config.title_max} characters"
    description_range = f"{config.description_min}-{config.description_max} characters"

    # 1. SEO title, falling back to the article title
    title_length = len(_text(article, "seo_title", "title"))
    if title_length == 0:
        items.append(
            ChecklistItem(
                id="seo-title-missing",
                category="meta_tags",
                label="SEO Title",
                status=Status.FAIL,
                current_value=0,
                target_value=title_range,
                recommendation=(
                    f"Add SEO title ({config.title_min}-{config.title_max} characters optimal, "
                    "50-55 best for search results)"
                ),
                field="seo_title",
                priority=Priority.CRITICAL,
                official_source=TITLE_SOURCE,
            )
        )
    elif title_length < config.title_min:
        items.append(
            ChecklistItem(
                id="seo-title-short",
                category="meta_tags",
                label="SEO Title Length",
                status=Status.WARNING,
                current_value=title_length,
                target_value=title_range,
                recommendation=(
                    f"SEO title is short ({title_length} chars). Aim for {title_range} "
                    "for optimal display in search results."
                ),
                field="seo_title",
                priority=Priority.HIGH,
                official_source=TITLE_SOURCE,
            )
        )
    elif title_length > config.title_max:
        items.append(
            ChecklistItem(
                id="seo-title-long",
                category="meta_tags",
                label="SEO Title Length",
                status=Status.WARNING,
                current_value=title_length,
                target_value=title_range,
                recommendation=(
                    f"SEO title is long ({title_length} chars). Keep it under {config.title_max} "
                    "characters to avoid truncation in search results."
                ),
                field="seo_title",
                priority=Priority.MEDIUM,
                official_source=TITLE_SOURCE,
            )
        )
    else:
        items.append(
            ChecklistItem(
                id="seo-title-optimal",
                category="meta_tags",
                label="SEO Title Length",
                status=Status.PASS,
                current_value=title_length,
                target_value=title_range,
                recommendation=f"SEO title length is optimal ({title_length} chars)",
                field="seo_title",
                priority=Priority.HIGH,
            )
        )

    # 2. SEO description, falling back to the excerpt
    description_length = len(_text(article, "seo_description", "excerpt"))
    if description_length == 0:
        items.append(
            ChecklistItem(
                id="seo-description-missing",
                category="meta_tags",
                label="SEO Description",
                status=Status.FAIL,
                current_value=0,
                target_value=description_range,
                recommendation=(
                    f"Add SEO description ({config.description_min}-{config.description_max} characters "
                    "optimal, 150-155 best for search snippets)"
                ),
                field="seo_description",
                priority=Priority.CRITICAL,
                official_source=SNIPPET_SOURCE,
            )
        )
    elif description_length < config.description_min:
        items.append(
            ChecklistItem(
                id="seo-description-short",
                category="meta_tags",
                label="SEO Description Length",
                status=Status.WARNING,
                current_value=description_length,
                target_value=description_range,
                recommendation=(
                    f"SEO description is short ({description_length} chars). "
                    f"Aim for {description_range} for optimal display."
                ),
                field="seo_description",
                priority=Priority.HIGH,
                official_source=SNIPPET_SOURCE,
            )
        )
    elif description_length > config.description_max:
        items.append(
            ChecklistItem(
                id="seo-description-long",
                category="meta_tags",
                label="SEO Description Length",
                status=Status.WARNING,
                current_value=description_length,
                target_value=description_range,
                recommendation=(
                    f"SEO description is long ({description_length} chars). "
                    f"Keep it under {config.description_max} characters to avoid truncation."
                ),
                field="seo_description",
                priority=Priority.MEDIUM,
                official_source=SNIPPET_SOURCE,
            )
        )
    else:
        items.append(
            ChecklistItem(
                id="seo-description-optimal",
                category="meta_tags",
                label="SEO Description Length",
                status=Status.PASS,
                current_value=description_length,
                target_value=description_range,
                recommendation=f"SEO description length is optimal ({description_length} chars)",
                field="seo_description",
                priority=Priority.HIGH,
            )
        )

    # 3. Robots directives
    robots = _text(article, "meta_robots") or DEFAULT_ROBOTS
    if "noindex" in robots:
        items.append(
            ChecklistItem(
                id="meta-robots-noindex",
                category="meta_tags",
                label="Meta Robots",
                status=Status.WARNING,
                current_value=robots,
                target_value=DEFAULT_ROBOTS,
                recommendation=(
                    "Article is set to noindex - it will not appear in search results. "
                    "Use only if intentionally hiding content."
                ),
                field="meta_robots",
                priority=Priority.HIGH,
                official_source=ROBOTS_SOURCE,
            )
        )
    else:
        items.append(
            ChecklistItem(
                id="meta-robots-ok",
                category="meta_tags",
                label="Meta Robots",
                status=Status.PASS,
                current_value=robots,
                target_value=DEFAULT_ROBOTS,
                recommendation="Meta robots configured correctly",
                field="meta_robots",
                priority=Priority.MEDIUM,
            )
        )

    return items


def analyze_content(article: Mapping[str, Any], config: GuidanceConfig) -> List[ChecklistItem]:
    items: List[ChecklistItem] = []
    stored = article.get("word_count")
    words = int(stored) if is_set(stored) and isinstance(stored, (int, float)) else word_count(_text(article, "content"))
    recommended = f"{config.word_count_recommended}+ words"

    if words == 0:
        items.append(
            ChecklistItem(
                id="content-missing",
                category="content",
                label="Content",
                status=Status.FAIL,
                current_value=0,
                target_value=recommended,
                recommendation=(
                    f"Add article content (minimum {config.word_count_min} words, "
                    f"{config.word_count_recommended}+ recommended for SEO)"
                ),
                field="content",
                priority=Priority.CRITICAL,
                official_source=HELPFUL_CONTENT_SOURCE,
            )
        )
    elif words < config.word_count_min:
        items.append(
            ChecklistItem(
                id="word-count-very-low",
                category="content",
                label="Word Count",
                status=Status.FAIL,
                current_value=words,
                target_value=recommended,
                recommendation=(
                    f"Content is very short ({words} words). Minimum {config.word_count_min} words "
                    f"recommended, {config.word_count_recommended}+ for better SEO."
                ),
                field="content",
                priority=Priority.CRITICAL,
                official_source=HELPFUL_CONTENT_SOURCE,
            )
        )
    elif words < config.word_count_recommended:
        items.append(
            ChecklistItem(
                id="word-count-low",
                category="content",
                label="Word Count",
                status=Status.WARNING,
                current_value=words,
                target_value=recommended,
                recommendation=(
                    f"Content is short ({words} words). Aim for {recommended} for better SEO performance."
                ),
                field="content",
                priority=Priority.HIGH,
                official_source=HELPFUL_CONTENT_SOURCE,
            )
        )
    elif words > config.word_count_max:
        items.append(
            ChecklistItem(
                id="word-count-very-high",
                category="content",
                label="Word Count",
                status=Status.INFO,
                current_value=words,
                target_value=f"1000-{config.word_count_max} words",
                recommendation=(
                    f"Content is very long ({words} words). Consider breaking into multiple articles "
                    "or adding table of contents."
                ),
                field="content",
                priority=Priority.LOW,
            )
        )
    else:
        items.append(
            ChecklistItem(
                id="word-count-optimal",
                category="content",
                label="Word Count",
                status=Status.PASS,
                current_value=words,
                target_value=recommended,
                recommendation=f"Content length is good ({words} words)",
                field="content",
                priority=Priority.HIGH,
            )
        )

    depth = article.get("content_depth")
    if is_set(depth):
        items.append(
            ChecklistItem(
                id="content-depth-set",
                category="content",
                label="Content Depth",
                status=Status.PASS,
                current_value=depth,
                recommendation="Content depth indicator is set",
                priority=Priority.LOW,
            )
        )
    else:
        items.append(
            ChecklistItem(
                id="content-depth-missing",
                category="content",
                label="Content Depth",
                status=Status.INFO,
                recommendation="Content depth indicator helps signal content comprehensiveness",
                priority=Priority.LOW,
            )
        )

    return items


def analyze_images(article: Mapping[str, Any], config: GuidanceConfig) -> List[ChecklistItem]:
    # Only presence is known here; dimensions and alt text live on the media record.
    if not is_set(article.get("featured_image_id")):
        return [
            ChecklistItem(
                id="featured-image-missing",
                category="images",
                label="Featured Image",
                status=Status.FAIL,
                recommendation="Add featured image (1200x630px minimum) for better social sharing and SEO",
                field="featured_image_id",
                priority=Priority.CRITICAL,
                official_source=IMAGES_SOURCE,
            )
        ]
    return [
        ChecklistItem(
            id="featured-image-present",
            category="images",
            label="Featured Image",
            status=Status.PASS,
            recommendation="Featured image is set",
            field="featured_image_id",
            priority=Priority.HIGH,
        )
    ]


def analyze_structured_data(article: Mapping[str, Any], config: GuidanceConfig) -> List[ChecklistItem]:
    items: List[ChecklistItem] = []

    if not is_set(article.get("json_ld_structured_data")):
        items.append(
            ChecklistItem(
                id="jsonld-missing",
                category="structured_data",
                label="JSON-LD Structured Data",
                status=Status.WARNING,
                recommendation=(
                    "Generate JSON-LD structured data for better search visibility "
                    "(will be auto-generated on publish)"
                ),
                priority=Priority.HIGH,
                official_source=STRUCTURED_DATA_SOURCE,
            )
        )
    else:
        items.append(
            ChecklistItem(
                id="jsonld-present",
                category="structured_data",
                label="JSON-LD Structured Data",
                status=Status.PASS,
                recommendation="JSON-LD structured data is present",
                priority=Priority.HIGH,
            )
        )

    # Schema.org Article has no strictly required properties; only present ones are reported.
    if _text(article, "title", "seo_title"):
        items.append(
            ChecklistItem(
                id="schema-headline",
                category="structured_data",
                label="Schema: Headline",
                status=Status.PASS,
                recommendation="Article headline (title) is present",
                priority=Priority.HIGH,
                official_source=SCHEMA_ARTICLE_SOURCE,
            )
        )

    if is_set(article.get("author_id")):
        items.append(
            ChecklistItem(
                id="schema-author",
                category="structured_data",
                label="Schema: Author",
                status=Status.PASS,
                recommendation="Article author is set",
                priority=Priority.HIGH,
                official_source=SCHEMA_ARTICLE_SOURCE,
            )
        )

    if is_set(article.get("date_published")):
        items.append(
            ChecklistItem(
                id="schema-date-published",
                category="structured_data",
                label="Schema: Date Published",
                status=Status.PASS,
                recommendation="Publication date is set",
                priority=Priority.HIGH,
                official_source=SCHEMA_ARTICLE_SOURCE,
            )
        )
    else:
        items.append(
            ChecklistItem(
                id="schema-date-published-missing",
                category="structured_data",
                label="Schema: Date Published",
                status=Status.INFO,
                recommendation="Publication date will be set automatically when article is published",
                priority=Priority.MEDIUM,
                official_source=SCHEMA_ARTICLE_SOURCE,
            )
        )

    faq_count = count_items(article.get("faqs"))
    faq_target = f"{config.faq_recommended}+ questions"
    if faq_count == 0:
        items.append(
            ChecklistItem(
                id="faq-schema-missing",
                category="structured_data",
                label="FAQ Schema",
                status=Status.INFO,
                current_value=0,
                target_value=faq_target,
                recommendation=f"Add {config.faq_recommended}+ FAQs to enable FAQ rich results in search",
                field="faqs",
                priority=Priority.MEDIUM,
                official_source=FAQ_SOURCE,
            )
        )
    elif faq_count < config.faq_recommended:
        items.append(
            ChecklistItem(
                id="faq-schema-few",
                category="structured_data",
                label="FAQ Schema",
                status=Status.WARNING,
                current_value=faq_count,
                target_value=faq_target,
                recommendation=(
                    f"Only {faq_count} FAQ(s). Add more ({config.faq_recommended}+ recommended) "
                    "for FAQ rich results."
                ),
                field="faqs",
                priority=Priority.MEDIUM,
                official_source=FAQ_SOURCE,
            )
        )
    else:
        items.append(
            ChecklistItem(
                id="faq-schema-optimal",
                category="structured_data",
                label="FAQ Schema",
                status=Status.PASS,
                current_value=faq_count,
                target_value=faq_target,
                recommendation=f"FAQ schema is optimal ({faq_count} questions)",
                field="faqs",
                priority=Priority.MEDIUM,
            )
        )

    return items


def analyze_technical(article: Mapping[str, Any], config: GuidanceConfig) -> List[ChecklistItem]:
    items: List[ChecklistItem] = []

    canonical = _text(article, "canonical_url")
    if not canonical:
        items.append(
            ChecklistItem(
                id="canonical-missing",
                category="technical",
                label="Canonical URL",
                status=Status.WARNING,
                recommendation=(
                    "Canonical URL will be auto-generated from slug "
                    "(recommended for duplicate content prevention)"
                ),
                field="canonical_url",
                priority=Priority.HIGH,
                official_source=CANONICAL_SOURCE,
            )
        )
    elif not canonical.startswith("https://"):
        items.append(
            ChecklistItem(
                id="canonical-not-https",
                category="technical",
                label="Canonical URL (HTTPS)",
                status=Status.WARNING,
                current_value="HTTP",
                target_value="HTTPS",
                recommendation="Use HTTPS for canonical URL (required by Google)",
                field="canonical_url",
                priority=Priority.HIGH,
                official_source=ESSENTIALS_SOURCE,
            )
        )
    else:
        items.append(
            ChecklistItem(
                id="canonical-ok",
                category="technical",
                label="Canonical URL",
                status=Status.PASS,
                recommendation="Canonical URL is set and uses HTTPS",
                field="canonical_url",
                priority=Priority.HIGH,
            )
        )

    sitemap_priority = article.get("sitemap_priority")
    if sitemap_priority is not None:
        items.append(
            ChecklistItem(
                id="sitemap-priority-set",
                category="technical",
                label="Sitemap Priority",
                status=Status.PASS,
                current_value=sitemap_priority,
                recommendation="Sitemap priority is configured",
                field="sitemap_priority",
                priority=Priority.LOW,
            )
        )

    change_freq = _text(article, "sitemap_change_freq")
    if change_freq:
        items.append(
            ChecklistItem(
                id="sitemap-changefreq-set",
                category="technical",
                label="Sitemap Change Frequency",
                status=Status.PASS,
                current_value=change_freq,
                recommendation="Sitemap change frequency is configured",
                field="sitemap_change_freq",
                priority=Priority.LOW,
            )
        )

    return items


def analyze_mobile(article: Mapping[str, Any], config: GuidanceConfig) -> List[ChecklistItem]:
    """Mobile checks are reminders; responsiveness is handled by the site templates."""
    return [
        ChecklistItem(
            id="mobile-friendly",
            category="mobile",
            label="Mobile-Friendly",
            status=Status.INFO,
            recommendation="Mobile-friendly design is handled by the responsive site templates",
            priority=Priority.LOW,
            official_source=MOBILE_SOURCE,
        ),
        ChecklistItem(
            id="core-web-vitals",
            category="mobile",
            label="Core Web Vitals",
            status=Status.INFO,
            recommendation="Target: LCP < 2.5s, INP < 200ms, CLS < 0.1 (test with PageSpeed Insights)",
            priority=Priority.MEDIUM,
            official_source=VITALS_SOURCE,
        ),
    ]


CategoryAnalyzer = Callable[[Mapping[str, Any], GuidanceConfig], List[ChecklistItem]]

CATEGORY_ANALYZERS: Dict[str, CategoryAnalyzer] = {
    "meta_tags": analyze_meta_tags,
    "content": analyze_content,
    "images": analyze_images,
    "structured_data": analyze_structured_data,
    "technical": analyze_technical,
    "mobile": analyze_mobile,
}


# ---------------------------------------------------------------------------
# Off-page guidance
# ---------------------------------------------------------------------------


def generate_off_page_guidance(article: Mapping[str, Any]) -> List[OffPageRecommendation]:
    recommendations: List[OffPageRecommendation] = []

    related = count_items(article.get("related_articles"))
    if related > 0:
        recommendations.append(
            OffPageRecommendation(
                id="internal-linking-opportunities",
                category="link-building",
                title="Internal Linking Opportunities",
                description=(
                    f"You have {related} related article(s). "
                    "Consider adding more internal links within the content."
                ),
                actionable=True,
                steps=(
                    "Review related articles and identify natural linking opportunities",
                    "Add contextual internal links within the article content",
                    "Link to related articles in the conclusion or related sections",
                ),
                priority=Priority.HIGH,
            )
        )
    else:
        recommendations.append(
            OffPageRecommendation(
                id="add-related-articles",
                category="link-building",
                title="Add Related Articles",
                description=(
                    "No related articles set. Adding related articles helps with internal linking "
                    "and user engagement."
                ),
                actionable=True,
                steps=(
                    "Go to Related step and select 3-5 related articles",
                    "Use relationship types: related, similar, or recommended",
                    "This helps with internal linking and keeps users on your site",
                ),
                priority=Priority.MEDIUM,
            )
        )

    if is_set(article.get("og_article_author")):
        recommendations.append(
            OffPageRecommendation(
                id="social-author-signal",
                category="social-signals",
                title="Author Social Profile",
                description=(
                    "Article author is set. Consider linking to author social profiles in structured data."
                ),
                actionable=True,
                steps=(
                    "Ensure author has social profiles (Twitter, LinkedIn)",
                    "Add social profile URLs to author schema",
                    "This helps with E-E-A-T signals",
                ),
                priority=Priority.MEDIUM,
            )
        )

    recommendations.append(
        OffPageRecommendation(
            id="content-distribution",
            category="content-distribution",
            title="Content Distribution Strategy",
            description="Plan content distribution across multiple channels for maximum reach.",
            actionable=True,
            steps=(
                "Share on social media platforms (Twitter, LinkedIn, Facebook)",
                "Include in email newsletter if applicable",
                "Submit to relevant industry publications",
                "Engage with community forums and discussions",
            ),
            priority=Priority.HIGH,
        )
    )

    citations = count_items(article.get("citations"))
    if citations > 0:
        recommendations.append(
            OffPageRecommendation(
                id="citations-present",
                category="authority-building",
                title="Citations & Sources",
                description=f"Article has {citations} citation(s). Citations help build authority and trust.",
                actionable=False,
                priority=Priority.LOW,
            )
        )
    else:
        recommendations.append(
            OffPageRecommendation(
                id="add-citations",
                category="authority-building",
                title="Add Citations & Sources",
                description=(
                    "Adding citations and sources helps build E-E-A-T "
                    "(Experience, Expertise, Authoritativeness, Trustworthiness)."
                ),
                actionable=True,
                steps=(
                    "Add citations to authoritative sources",
                    "Link to original research or studies",
                    "Cite industry experts and publications",
                    "This helps Google understand content credibility",
                ),
                priority=Priority.MEDIUM,
            )
        )

    return recommendations


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def calculate_category_score(items: List[ChecklistItem], max_score: float) -> CategoryScore:
    """
    Each item is worth ``max_score / len(items)``; a pass earns it fully and a
    warning earns half. Failures and informational items earn nothing.
    """
    total = len(items)
    passed = sum(1 for item in items if item.status is Status.PASS)
    if total == 0:
        return CategoryScore(score=0, max_score=round_half_up(max_score), percentage=0, passed=0, total=0)

    share = max_score / total
    earned = sum(
        share if item.status is Status.PASS else share * 0.5 if item.status is Status.WARNING else 0.0
        for item in items
    )
    return CategoryScore(
        score=round_half_up(earned),
        max_score=round_half_up(max_score),
        percentage=round_half_up(passed / total * 100),
        passed=passed,
        total=total,
    )


def collect_issues(checklist: List[ChecklistItem], status: Status) -> List[Issue]:
    severity = _SEVERITY_BY_STATUS[status]
    return [Issue.from_item(item, severity) for item in checklist if item.status is status]


def analyze_seo_guidance(article: Mapping[str, Any], config: Optional[GuidanceConfig] = None) -> GuidanceReport:
    """
    Produce the guidance report for one article.

    ``article`` is a snake_case mapping of the article form. The report's
    ``last_updated`` is the only value that depends on the clock.
    """
    config = config or settings.guidance

    with track_evaluation(ENGINE, "Article") as outcome:
        checklist: List[ChecklistItem] = []
        categories: Dict[str, CategoryScore] = {}
        for name, analyzer in CATEGORY_ANALYZERS.items():
            items = analyzer(article, config)
            checklist.extend(items)
            categories[name] = calculate_category_score(items, config.weight(name))

        total_weight = sum(config.weight(name) for name in CATEGORY_ANALYZERS)
        earned = sum(category.score for category in categories.values())
        overall = clamp_percentage(earned / total_weight * 100) if total_weight > 0 else 0
        outcome["percentage"] = overall

    report = GuidanceReport(
        overall_score=overall,
        categories=categories,
        checklist=checklist,
        off_page=generate_off_page_guidance(article),
        critical_issues=collect_issues(checklist, Status.FAIL),
        warnings=collect_issues(checklist, Status.WARNING),
        suggestions=collect_issues(checklist, Status.INFO),
        last_updated=utc_now_iso(),
    )
    logger.debug(
        "Guidance generated",
        overall_score=overall,
        checklist_items=len(checklist),
        critical=len(report.critical_issues),
        warnings=len(report.warnings),
    )
    return report
