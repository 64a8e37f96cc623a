"""
Core contracts and dataclasses for the SEO scoring engines.

Two engines share these types:
- the SEO doctor, which runs a table of field validators over an entity
  mapping and sums their points against a fixed maximum;
- the guidance analyzer, which builds an in-page checklist for an article and
  weights it per category.

Every finding carries one of four statuses (pass, warning, fail, info). All
report types serialise to plain dicts through ``to_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Tuple, Union

# ============================================================================
# Enums
# ============================================================================


class Status(Enum):
    """Severity of a single finding."""

    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Ordering used when prioritising findings (most severe first)."""
        return _STATUS_RANK[self]


_STATUS_RANK = {Status.FAIL: 0, Status.WARNING: 1, Status.INFO: 2, Status.PASS: 3}


class Priority(Enum):
    """How urgently a checklist item should be addressed."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.CRITICAL: 0, Priority.HIGH: 1, Priority.MEDIUM: 2, Priority.LOW: 3}


class IssueSeverity(Enum):
    """Bucket an issue is reported in."""

    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {IssueSeverity.CRITICAL: 0, IssueSeverity.WARNING: 1, IssueSeverity.SUGGESTION: 2}


class HealthBand(Enum):
    """Qualitative bucket for a percentage score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


# ============================================================================
# SEO doctor types
# ============================================================================


@dataclass(frozen=True)
class FieldResult:
    """Outcome of one field validator."""

    status: Status
    message: str
    score: int = 0

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError("Field score cannot be negative")


class FieldValidator(Protocol):
    """Validates one field, with the whole entity available for cross-field rules."""

    def __call__(self, value: Any, data: Mapping[str, Any]) -> FieldResult: ...


StructuredDataGenerator = Callable[[Mapping[str, Any]], Dict[str, Any]]


@dataclass(frozen=True)
class FieldRule:
    """One row of an entity's field-validator table."""

    name: str
    label: str
    validator: FieldValidator

    def evaluate(self, data: Mapping[str, Any]) -> FieldResult:
        return self.validator(data.get(self.name), data)


@dataclass(frozen=True)
class EntityConfig:
    """Field-validator configuration for one entity type."""

    entity_type: str
    max_score: int
    rules: Tuple[FieldRule, ...]
    structured_data: Optional[StructuredDataGenerator] = None

    def field_names(self) -> List[str]:
        """Distinct field names in rule order."""
        seen: List[str] = []
        for rule in self.rules:
            if rule.name not in seen:
                seen.append(rule.name)
        return seen


@dataclass(frozen=True)
class ScoreResult:
    """Points earned against the configured maximum."""

    score: int
    max_score: int
    percentage: int

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "maxScore": self.max_score, "percentage": self.percentage}


@dataclass(frozen=True)
class HealthCheck:
    """A validator result attached to the field it was computed for."""

    field: str
    label: str
    status: Status
    message: str
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "label": self.label,
            "status": self.status.value,
            "message": self.message,
            "score": self.score,
        }


@dataclass
class DoctorReport:
    """Full SEO doctor output for one entity."""

    entity_type: str
    score: ScoreResult
    band: HealthBand
    checks: List[HealthCheck] = field(default_factory=list)
    issues: List[HealthCheck] = field(default_factory=list)
    structured_data: Dict[str, Any] = field(default_factory=dict)

    @property
    def percentage(self) -> int:
        return self.score.percentage

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entityType": self.entity_type,
            **self.score.to_dict(),
            "band": self.band.value,
            "checks": [check.to_dict() for check in self.checks],
            "issues": [issue.to_dict() for issue in self.issues],
            "structuredData": self.structured_data,
        }


# ============================================================================
# Guidance analyzer types
# ============================================================================


@dataclass(frozen=True)
class CategoryScore:
    """Score of one category of checks."""

    score: int
    max_score: int
    percentage: int
    passed: int
    total: int

    @classmethod
    def empty(cls) -> CategoryScore:
        return cls(score=0, max_score=0, percentage=0, passed=0, total=0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "passed": self.passed,
            "total": self.total,
        }


@dataclass(frozen=True)
class ChecklistItem:
    """One in-page guidance finding."""

    id: str
    category: str
    label: str
    status: Status
    recommendation: str
    priority: Priority
    current_value: Optional[Union[str, int, float]] = None
    target_value: Optional[Union[str, int, float]] = None
    field: Optional[str] = None
    official_source: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "category": self.category,
            "label": self.label,
            "status": self.status.value,
            "recommendation": self.recommendation,
            "priority": self.priority.value,
        }
        if self.current_value is not None:
            data["currentValue"] = self.current_value
        if self.target_value is not None:
            data["targetValue"] = self.target_value
        if self.field is not None:
            data["field"] = self.field
        if self.official_source is not None:
            data["officialSource"] = self.official_source
        return data


@dataclass(frozen=True)
class Issue:
    """A non-passing checklist item, ready for display in an issue list."""

    code: str
    category: str
    message: str
    severity: IssueSeverity
    priority: Priority
    fix: Optional[str] = None
    field: Optional[str] = None

    @classmethod
    def from_item(cls, item: ChecklistItem, severity: IssueSeverity) -> Issue:
        return cls(
            code=item.id,
            category=item.category,
            message=item.recommendation,
            fix=item.recommendation,
            field=item.field,
            severity=severity,
            priority=item.priority,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "category": self.category,
            "message": self.message,
            "fix": self.fix,
            "field": self.field,
            "severity": self.severity.value,
            "priority": self.priority.value,
        }


@dataclass(frozen=True)
class OffPageRecommendation:
    """Guidance that is not tied to a form field."""

    id: str
    category: str
    title: str
    description: str
    actionable: bool
    priority: Priority
    steps: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "title": self.title,
            "description": self.description,
            "actionable": self.actionable,
            "steps": list(self.steps),
            "priority": self.priority.value,
        }


@dataclass
class GuidanceReport:
    """Checklist, category scores and issue buckets for one article."""

    overall_score: int
    categories: Dict[str, CategoryScore]
    checklist: List[ChecklistItem] = field(default_factory=list)
    off_page: List[OffPageRecommendation] = field(default_factory=list)
    critical_issues: List[Issue] = field(default_factory=list)
    warnings: List[Issue] = field(default_factory=list)
    suggestions: List[Issue] = field(default_factory=list)
    last_updated: str = ""

    def prioritized_issues(self) -> List[Issue]:
        """All issues, most severe first, then by priority; stable otherwise."""
        issues = [*self.critical_issues, *self.warnings, *self.suggestions]
        return sorted(issues, key=lambda issue: (issue.severity.rank, issue.priority.rank))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "categories": {name: score.to_dict() for name, score in self.categories.items()},
            "inPageChecklist": [item.to_dict() for item in self.checklist],
            "offPageGuidance": [rec.to_dict() for rec in self.off_page],
            "criticalIssues": [issue.to_dict() for issue in self.critical_issues],
            "warnings": [issue.to_dict() for issue in self.warnings],
            "suggestions": [issue.to_dict() for issue in self.suggestions],
            "lastUpdated": self.last_updated,
        }


# ============================================================================
# Weighted article analyzer types
# ============================================================================


@dataclass
class ArticleSEOReport:
    """Output of the six-category weighted article analyzer."""

    score: int
    percentage: int
    categories: Dict[str, CategoryScore]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "percentage": self.percentage,
            "categories": {name: score.to_dict() for name, score in self.categories.items()},
        }
