"""
Shared predicates and validator factories.

Entity mappings come from forms and JSON payloads, so field values are
loosely typed. The predicates below decide presence the same way for every
validator: a value of the wrong type counts as absent and never raises.
"""

from __future__ import annotations

from typing import Any, Mapping

from seodoctor.protocols import FieldResult, FieldValidator, Status


def has_text(value: Any) -> bool:
    """True for a string with at least one non-whitespace character."""
    return isinstance(value, str) and len(value.strip()) > 0


def has_number(value: Any) -> bool:
    """True for a non-zero int or float (booleans are not numbers here)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == value and value != 0


def is_set(value: Any) -> bool:
    """
    Loose presence test for values that may be strings, dates or numbers.

    Empty strings, zero, ``False`` and ``None`` are unset; any list or mapping,
    even an empty one, is set.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == value and value != 0
    return True


def count_items(value: Any) -> int:
    """Length of a list or tuple, zero for anything else."""
    if isinstance(value, (list, tuple)):
        return len(value)
    return 0


def text_field(data: Mapping[str, Any], name: str) -> bool:
    return has_text(data.get(name))


def good(message: str, score: int) -> FieldResult:
    return FieldResult(Status.PASS, message, score)


def warning(message: str, score: int = 0) -> FieldResult:
    return FieldResult(Status.WARNING, message, score)


def error(message: str, score: int = 0) -> FieldResult:
    return FieldResult(Status.FAIL, message, score)


def info(message: str) -> FieldResult:
    return FieldResult(Status.INFO, message, 0)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def required_text(present: str, missing: str, score: int = 5) -> FieldValidator:
    """Validator for a mandatory text field: PASS when set, FAIL otherwise."""

    def validate(value: Any, data: Mapping[str, Any]) -> FieldResult:
        if has_text(value):
            return good(present, score)
        return error(missing)

    return validate


def recommended_text(present: str, missing: str, score: int = 5) -> FieldValidator:
    """Validator for an optional text field: PASS when set, WARNING otherwise."""

    def validate(value: Any, data: Mapping[str, Any]) -> FieldResult:
        if has_text(value):
            return good(present, score)
        return warning(missing)

    return validate


def long_text(
    complete: str,
    too_short: str,
    missing: str,
    *,
    min_chars: int = 100,
    short_score: int = 5,
    missing_status: Status = Status.WARNING,
) -> FieldValidator:
    """
    Validator for descriptive text that should reach ``min_chars``.

    ``complete`` and ``too_short`` are format strings receiving ``length``,
    the raw length of the value. The threshold is checked on the stripped text.
    """

    def validate(value: Any, data: Mapping[str, Any]) -> FieldResult:
        if isinstance(value, str) and len(value.strip()) >= min_chars:
            return good(complete.format(length=len(value)), 10)
        if has_text(value):
            return warning(too_short.format(length=len(value)), short_score)
        return FieldResult(missing_status, missing, 0)

    return validate


def alt_text(parent: str, present: str, missing: str, not_needed: str) -> FieldValidator:
    """Alt text is only evaluated when the ``parent`` image field is set."""

    def validate(value: Any, data: Mapping[str, Any]) -> FieldResult:
        if not text_field(data, parent):
            return info(not_needed)
        if has_text(value):
            return good(present, 5)
        return error(missing)

    return validate


def profile_count_result(
    count: int,
    *,
    excellent: str,
    good_message: str,
    only_one: str,
    missing: str,
) -> FieldResult:
    """Shared banding for social-profile counts: 3+ = 10, 2 = 8, 1 = 5."""
    if count >= 3:
        return good(excellent.format(count=count), 10)
    if count >= 2:
        return good(good_message.format(count=count), 8)
    if count >= 1:
        return warning(only_one.format(count=count), 5)
    return warning(missing)
