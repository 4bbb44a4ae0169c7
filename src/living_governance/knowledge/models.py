"""Immutable models for living knowledge objects.

A knowledge object bundles an evaluation methodology, a list of scored
frameworks, per-framework detailed evaluations, and a dated timeline.
Every model is frozen, every sequence is a tuple and every mapping is a
read-only proxy: knowledge is built once from authored constants and never
changes while the process runs.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import UTC, datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Annotated, Any, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    WrapSerializer,
    computed_field,
    field_validator,
)

_KEY_SEPARATORS = re.compile(r"[\s/]+")

K = TypeVar("K")
V = TypeVar("V")


def as_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _freeze(value: Mapping[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(dict(value))


def _thaw(value: Mapping[Any, Any], handler: SerializerFunctionWrapHandler) -> Any:
    return handler(dict(value))


UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]
FrozenMapping = Annotated[
    Mapping[K, V],
    AfterValidator(_freeze),
    WrapSerializer(_thaw),
]


def criterion_key(name: str) -> str:
    """Derive a breakdown key from a criterion name.

    ``"Tool/API abuse"`` becomes ``"tool-api-abuse"``.
    """
    return _KEY_SEPARATORS.sub("-", name.strip().lower())


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class FrameworkStatus(StrEnum):
    """How actionable a framework's AI guidance is."""

    ACTIVE = "active"
    APPLICABLE = "applicable"
    NO_GUIDANCE = "no-guidance"


class CriterionState(StrEnum):
    """Tri-state result for a single scoring criterion."""

    MET = "met"
    UNMET = "unmet"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: Any) -> CriterionState:
        """Accept authored ``True``/``False``/``"unknown"`` values."""
        if isinstance(value, CriterionState):
            return value
        if value is True:
            return cls.MET
        if value is False:
            return cls.UNMET
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in {"true", "met"}:
                return cls.MET
            if lowered in {"false", "unmet"}:
                return cls.UNMET
            if lowered == "unknown":
                return cls.UNKNOWN
        msg = f"Invalid criterion state: {value!r}"
        raise ValueError(msg)


class TimelineConfidence(StrEnum):
    """Confidence in a timeline entry's date."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ScoreCategory(StrEnum):
    """Scoring categories of the 100-point methodology."""

    THREAT_IDENTIFICATION = "threat_identification"
    PRACTICAL_GUIDANCE = "practical_guidance"
    EVIDENCE_QUALITY = "evidence_quality"
    COMPLETENESS = "completeness"


CATEGORY_BUDGETS: Mapping[ScoreCategory, int] = MappingProxyType(
    {
        ScoreCategory.THREAT_IDENTIFICATION: 40,
        ScoreCategory.PRACTICAL_GUIDANCE: 30,
        ScoreCategory.EVIDENCE_QUALITY: 20,
        ScoreCategory.COMPLETENESS: 10,
    }
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Evaluation metadata
# ---------------------------------------------------------------------------


class Evaluation(_Frozen):
    """When, by whom, and how long a knowledge object stays valid."""

    date: UTCDateTime
    by: str
    valid_days: int | None = Field(
        default=None,
        ge=0,
        description="Validity window in days; falsy falls back to the default.",
    )
    methodology: str = ""


class Source(_Frozen):
    """A primary source consulted during evaluation."""

    name: str
    url: str
    date: UTCDateTime


class KnowledgeMetadata(_Frozen):
    """Self-describing display metadata."""

    description: str
    details: tuple[str, ...] = ()
    category: str
    tags: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Frameworks and detailed evaluations
# ---------------------------------------------------------------------------


class Framework(_Frozen):
    """A scored security framework."""

    id: str
    name: str
    organization: str
    url: str
    data_source: str | None = None
    ai_coverage_score: float = Field(ge=0.0, le=1.0)
    status: FrameworkStatus
    gaps: tuple[str, ...] = ()
    last_framework_update: str = Field(pattern=r"^\d{4}-\d{2}$")
    evaluation_key: str | None = None


class Scores(_Frozen):
    """Category sub-scores and their authored total."""

    threat_identification: int = Field(ge=0, le=40)
    practical_guidance: int = Field(ge=0, le=30)
    evidence_quality: int = Field(ge=0, le=20)
    completeness: int = Field(ge=0, le=10)
    total: int = Field(ge=0, le=100)

    def by_category(self) -> dict[ScoreCategory, int]:
        return {category: getattr(self, category.value) for category in ScoreCategory}

    @property
    def subtotal(self) -> int:
        """Sum of the four category sub-scores."""
        return sum(self.by_category().values())


class DetailedEvaluation(_Frozen):
    """Per-framework scoring record with a criterion breakdown and verdict."""

    framework_name: str
    evaluation_date: UTCDateTime
    evaluated_by: str
    scores: Scores
    breakdown: FrozenMapping[str, CriterionState] = Field(
        default_factory=dict, validate_default=True
    )
    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    verdict: str = ""

    @field_validator("breakdown", mode="before")
    @classmethod
    def coerce_breakdown(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {key: CriterionState.coerce(state) for key, state in value.items()}
        return value


class ScoringCriterion(_Frozen):
    """One entry of the scoring-criteria catalog."""

    category: ScoreCategory
    name: str
    points: int = Field(gt=0)
    section: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def key(self) -> str:
        return criterion_key(self.name)


class ShareableView(_Frozen):
    """Headline card for sharing one view of a knowledge object."""

    title: str
    headline: str
    insights: tuple[str, ...] = ()
    key_metric: str
    visual_type: str


class TimelineEntry(_Frozen):
    """A dated change in a framework's history."""

    date: UTCDateTime
    framework: str
    change: str
    confidence: TimelineConfidence = TimelineConfidence.HIGH


# ---------------------------------------------------------------------------
# Knowledge objects
# ---------------------------------------------------------------------------


class KnowledgeObject(_Frozen):
    """A versioned bundle of methodology, scored frameworks, and timeline."""

    id: str
    name: str
    evaluation: Evaluation
    frameworks: tuple[Framework, ...] = ()
    detailed_evaluations: FrozenMapping[str, DetailedEvaluation] = Field(
        default_factory=dict, validate_default=True
    )
    timeline: tuple[TimelineEntry, ...] = ()
    metadata: KnowledgeMetadata
    criteria: tuple[ScoringCriterion, ...] = ()
    insights: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    sources: tuple[Source, ...] = ()
    update_instructions: str = ""
    comparison_columns: FrozenMapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Column label to detailed evaluation key, in display order.",
    )
    shareable_content: FrozenMapping[str, ShareableView] = Field(
        default_factory=dict, validate_default=True
    )

    def framework(self, framework_id: str) -> Framework | None:
        return next((item for item in self.frameworks if item.id == framework_id), None)


class ArchivedFramework(_Frozen):
    """Framework entry as recorded in an archived snapshot."""

    id: str
    name: str
    version: str
    ai_coverage_score: float = Field(ge=0.0, le=1.0)
    categories: FrozenMapping[str, bool] = Field(
        default_factory=dict, validate_default=True
    )
    strengths: tuple[str, ...] = ()
    gaps: tuple[str, ...] = ()


class ArchivedSnapshot(_Frozen):
    """A frozen historical evaluation kept for comparison."""

    snapshot_date: UTCDateTime
    evaluation: Evaluation
    frameworks: tuple[ArchivedFramework, ...] = ()
    insights: tuple[str, ...] = ()
