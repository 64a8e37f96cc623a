"""Validators for categories, tags and industries."""

from __future__ import annotations

from seodoctor.protocols import FieldValidator
from seodoctor.validators.base import long_text, required_text


def taxonomy_name(kind: str) -> FieldValidator:
    """Name validator for a taxonomy ``kind`` such as ``"Category"``."""
    return required_text(f"{kind} name is set", f"{kind} name is required")


def taxonomy_description(kind: str, *, required: bool = False) -> FieldValidator:
    """
    Description validator for a taxonomy ``kind``.

    Categories describe a section of the site and call the description
    required; tags and industries only recommend one. Both score the same.
    """
    lower = kind.lower()
    need = "required" if required else "recommended"
    return long_text(
        f"Comprehensive {lower} description ({{length}} chars)",
        f"{kind} description too short ({{length}} chars) - minimum 100 chars recommended",
        f"{kind} description {need} (minimum 100 chars) for SEO",
    )
