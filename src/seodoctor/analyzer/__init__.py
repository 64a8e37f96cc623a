"""Weighted six-category article analyzer."""

from .article_analyzer import CATEGORY_MAX_SCORES, NormalizedArticle, analyze_article_seo, empty_report

__all__ = ["CATEGORY_MAX_SCORES", "NormalizedArticle", "analyze_article_seo", "empty_report"]
