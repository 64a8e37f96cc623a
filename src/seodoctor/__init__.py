"""
SEO Doctor - rules-based SEO scoring and guidance for content entities.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .analyzer import analyze_article_seo
from .config import Config, settings
from .doctor import diagnose, get_entity_config
from .guidance import analyze_seo_guidance

__all__ = [
    "__version__",
    "Config",
    "settings",
    "analyze_article_seo",
    "analyze_seo_guidance",
    "diagnose",
    "get_entity_config",
]
