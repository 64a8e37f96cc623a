"""Validators for authors (Schema.org ``Person``)."""

from __future__ import annotations

from typing import Any, List, Mapping

from seodoctor.protocols import FieldResult
from seodoctor.validators.base import (
    count_items,
    good,
    long_text,
    profile_count_result,
    required_text,
    text_field,
    warning,
)

# (signal label, points) for each E-E-A-T signal an author profile can carry
EEAT_POINTS = {
    "job title": 2,
    "credentials": 3,
    "qualifications": 3,
    "expertise areas": 2,
    "verification": 5,
}

validate_name = required_text("Author name is set", "Author name is required")

validate_bio = long_text(
    "Comprehensive author bio ({length} chars) for Schema.org Person",
    "Author bio too short ({length} chars) - minimum 100 chars recommended",
    "Author bio required (minimum 100 chars) for Schema.org Person",
)


def eeat_signals(data: Mapping[str, Any]) -> List[str]:
    """Experience, expertise, authoritativeness and trust signals present on a profile."""
    signals: List[str] = []
    if text_field(data, "job_title"):
        signals.append("job title")
    if count_items(data.get("credentials")) > 0:
        signals.append("credentials")
    if count_items(data.get("qualifications")) > 0:
        signals.append("qualifications")
    if count_items(data.get("expertise_areas")) > 0:
        signals.append("expertise areas")
    if data.get("verification_status") is True:
        signals.append("verification")
    return signals


def validate_eeat(value: Any, data: Mapping[str, Any]) -> FieldResult:
    signals = eeat_signals(data)
    score = sum(EEAT_POINTS[signal] for signal in signals)
    listed = ", ".join(signals)

    if len(signals) >= 4:
        return good(f"Strong E-E-A-T signals: {listed} - excellent for SEO", min(score, 15))
    if len(signals) >= 2:
        return warning(f"Partial E-E-A-T signals: {listed} - add more for better SEO", min(score, 10))
    return warning("E-E-A-T signals recommended - add job title, credentials, qualifications, expertise areas")


def validate_social(value: Any, data: Mapping[str, Any]) -> FieldResult:
    networks = sum(1 for name in ("linked_in", "twitter", "facebook") if text_field(data, name))
    return profile_count_result(
        networks + count_items(data.get("same_as")),
        excellent="Excellent! {count} social profiles - great for Schema.org sameAs",
        good_message="Good! {count} social profiles added",
        only_one="Only {count} social profile - add more for better verification",
        missing="Social profiles recommended for Schema.org Person sameAs property",
    )
