"""Display-ready roll-up statistics over a knowledge object's frameworks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from living_governance.knowledge.freshness import (
    DEFAULT_VALID_DAYS,
    ConfidenceStatus,
    confidence_or_unknown,
    is_stale,
)
from living_governance.knowledge.models import FrameworkStatus

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from living_governance.knowledge.models import Framework, KnowledgeObject

NO_CHANGE_HISTORY = "No change history available"

DANGER_BELOW = 0.4
WARNING_BELOW = 0.7


class ScoredEntity(Protocol):
    """Anything carrying a coverage score in [0, 1]."""

    @property
    def ai_coverage_score(self) -> float: ...


class CoverageBand(StrEnum):
    """Colour band for a coverage score."""

    DANGER = "danger"
    WARNING = "warning"
    SUCCESS = "success"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def coverage_percent(score: float) -> int:
    """Coverage score as a whole percentage."""
    return _round_half_up(score * 100)


def average_coverage(entities: Sequence[ScoredEntity]) -> int:
    """Mean coverage as a whole percentage, rounding halves up.

    An empty sequence averages to ``0``.
    """
    if not entities:
        return 0
    mean = sum(entity.ai_coverage_score for entity in entities) / len(entities)
    return coverage_percent(mean)


def count_with_guidance(frameworks: Sequence[Framework]) -> int:
    """Number of frameworks whose status is not ``no-guidance``."""
    return sum(1 for item in frameworks if item.status != FrameworkStatus.NO_GUIDANCE)


def get_latest_change(knowledge: KnowledgeObject) -> str:
    """Change text of the last timeline entry by position, not by date."""
    if not knowledge.timeline:
        return NO_CHANGE_HISTORY
    return knowledge.timeline[-1].change


def coverage_band(
    score: float,
    danger_below: float = DANGER_BELOW,
    warning_below: float = WARNING_BELOW,
) -> CoverageBand:
    """Red below 40%, yellow below 70%, green otherwise."""
    if score >= warning_below:
        return CoverageBand.SUCCESS
    if score >= danger_below:
        return CoverageBand.WARNING
    return CoverageBand.DANGER


def critical_gap(
    framework: Framework,
    danger_below: float = DANGER_BELOW,
) -> str | None:
    """Most critical gap of a low-coverage framework, if any."""
    if framework.ai_coverage_score < danger_below and framework.gaps:
        return framework.gaps[0]
    return None


@dataclass(slots=True)
class KnowledgeSummary:
    """Summarized knowledge view for presentation."""

    knowledge_id: str
    name: str
    framework_count: int
    with_guidance: int
    average_coverage: int
    latest_change: str
    confidence: ConfidenceStatus
    stale: bool

    @property
    def headline(self) -> str:
        return (
            f"{self.with_guidance} of {self.framework_count} frameworks provide "
            f"AI guidance • Average coverage: {self.average_coverage}%"
        )


def summarize(
    knowledge: KnowledgeObject,
    now: datetime | None = None,
    default_valid_days: int = DEFAULT_VALID_DAYS,
) -> KnowledgeSummary:
    """Bundle roll-up statistics and freshness for one knowledge object."""
    return KnowledgeSummary(
        knowledge_id=knowledge.id,
        name=knowledge.name,
        framework_count=len(knowledge.frameworks),
        with_guidance=count_with_guidance(knowledge.frameworks),
        average_coverage=average_coverage(knowledge.frameworks),
        latest_change=get_latest_change(knowledge),
        confidence=confidence_or_unknown(knowledge, now, default_valid_days),
        stale=is_stale(knowledge, now, default_valid_days),
    )
