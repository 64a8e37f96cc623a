"""Utility modules for seodoctor."""

from .atomic import atomic_write_json, atomic_write_text
from .dates import date_only, to_iso, utc_now_iso
from .numbers import clamp_percentage, round_half_up
from .slugify import is_valid_slug, slugify

__all__ = [
    "atomic_write_json",
    "atomic_write_text",
    "date_only",
    "to_iso",
    "utc_now_iso",
    "clamp_percentage",
    "round_half_up",
    "is_valid_slug",
    "slugify",
]
