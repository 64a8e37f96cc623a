"""JSON-LD previews, page documents and the article knowledge graph."""

from .documents import (
    article_structured_data,
    author_structured_data,
    breadcrumb_structured_data,
    faq_page_structured_data,
    organization_structured_data,
)
from .generators import (
    article_preview,
    category_preview,
    industry_preview,
    organization_preview,
    person_preview,
    tag_preview,
)
from .knowledge_graph import article_knowledge_graph, stringify_graph

__all__ = [
    "article_structured_data",
    "author_structured_data",
    "breadcrumb_structured_data",
    "faq_page_structured_data",
    "organization_structured_data",
    "article_preview",
    "category_preview",
    "industry_preview",
    "organization_preview",
    "person_preview",
    "tag_preview",
    "article_knowledge_graph",
    "stringify_graph",
]
