"""Validators for client organizations (Schema.org ``Organization``)."""

from __future__ import annotations

import re
from typing import Any, Mapping

from seodoctor.protocols import FieldResult, Status
from seodoctor.validators.base import (
    alt_text,
    count_items,
    good,
    has_text,
    info,
    is_set,
    long_text,
    profile_count_result,
    recommended_text,
    required_text,
    text_field,
    warning,
)

GTM_ID_RE = re.compile(r"^GTM-[A-Z0-9]+$")
LOGO_FORMAT_RE = re.compile(r"\.(png|svg|jpg|jpeg|webp)$", re.IGNORECASE)

validate_name = required_text("Client name is set", "Client name is required")

validate_legal_name = recommended_text(
    "Legal name set for Schema.org Organization",
    "Legal name recommended for Schema.org structured data",
)

validate_logo = recommended_text("Logo URL provided", "Logo recommended for brand recognition")

validate_logo_alt = alt_text(
    "logo",
    present="Logo alt text provided - required for accessibility and SEO",
    missing="Logo alt text required when logo exists (accessibility + SEO)",
    not_needed="Logo alt text not needed (no logo provided)",
)

validate_founding_date = recommended_text(
    "Founding date set - improves Schema.org Organization data",
    "Founding date recommended for Schema.org Organization",
)

validate_business_brief = long_text(
    "Comprehensive business brief ({length} chars)",
    "Business brief too short ({length} chars) - minimum 100 chars required",
    "Business brief is required (minimum 100 chars) for content writers",
    short_score=0,
    missing_status=Status.FAIL,
)

validate_description = long_text(
    "Comprehensive description ({length} chars) for Schema.org",
    "Description too short ({length} chars) - minimum 100 chars recommended",
    "Organization description recommended (separate from SEO description) for Schema.org",
)


def validate_social_profiles(value: Any, data: Mapping[str, Any]) -> FieldResult:
    return profile_count_result(
        count_items(value),
        excellent="Excellent! {count} social profiles added - great for Schema.org",
        good_message="Good! {count} social profiles added",
        only_one="Only {count} social profile - add more for better brand verification",
        missing="Social profiles recommended for Schema.org sameAs property",
    )


def validate_contact_info(value: Any, data: Mapping[str, Any]) -> FieldResult:
    has_email = text_field(data, "email")
    has_phone = text_field(data, "phone")
    if has_email and has_phone:
        return good("Email and phone provided - complete contact info", 10)
    if has_email or has_phone:
        return warning("Partial contact info - add both email and phone for Schema.org", 5)
    return warning("Contact information recommended for Schema.org Organization")


def validate_gtm_id(value: Any, data: Mapping[str, Any]) -> FieldResult:
    if not has_text(value):
        return info("GTM ID optional - enables client to see article performance")
    if GTM_ID_RE.match(value):
        return good("Valid GTM ID - enables analytics tracking", 5)
    return warning("GTM ID format should be GTM-XXXXXXX")


def validate_https(value: Any, data: Mapping[str, Any]) -> FieldResult:
    url = data.get("url")
    if not has_text(url):
        return info("HTTPS validation requires website URL")
    if url.lower().startswith("https://"):
        return good("Website uses HTTPS - secure and SEO-friendly", 5)
    return warning("Website should use HTTPS for security and SEO - Google prefers secure sites")


def validate_contact_point(value: Any, data: Mapping[str, Any]) -> FieldResult:
    has_type = text_field(data, "contact_type")
    has_info = text_field(data, "email") or text_field(data, "phone")
    if has_type and has_info:
        return good("ContactPoint structured with contactType - better Schema.org compliance", 5)
    if has_info:
        return warning("Add contactType (e.g., customer service) for better Schema.org ContactPoint structure", 2)
    return warning("ContactPoint structure recommended - add contactType and contact info")


def validate_logo_format(value: Any, data: Mapping[str, Any]) -> FieldResult:
    logo = data.get("logo")
    if not has_text(logo):
        return warning("Logo recommended - use PNG/SVG/JPG, min 112x112px for Google")
    if not LOGO_FORMAT_RE.search(logo.lower()):
        return warning(
            "Logo should be PNG, SVG, or JPG format - recommend min 112x112px for Google rich results",
            2,
        )

    message = "Logo format valid (PNG/SVG/JPG) - recommend min 112x112px for Google"
    if text_field(data, "logo_alt"):
        return good(f"{message} - Includes alt text for accessibility", 8)
    return good(f"{message} - Add alt text for accessibility and SEO", 5)


def validate_address(value: Any, data: Mapping[str, Any]) -> FieldResult:
    parts = ("address_street", "address_city", "address_country")
    if not any(text_field(data, name) for name in parts):
        return info("Address optional - only needed for local businesses (enables LocalBusiness schema)")
    if all(is_set(data.get(name)) for name in parts):
        return good("Complete address provided - enables LocalBusiness schema for local SEO", 5)
    return warning("Partial address - add street, city, and country for complete LocalBusiness schema", 2)
