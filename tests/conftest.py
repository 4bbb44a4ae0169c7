"""Shared pytest fixtures for the living-governance test suite."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest
import structlog

from living_governance.knowledge.models import (
    DetailedEvaluation,
    Evaluation,
    Framework,
    FrameworkStatus,
    KnowledgeMetadata,
    KnowledgeObject,
    ScoreCategory,
    Scores,
    ScoringCriterion,
    TimelineEntry,
)

EVALUATED_AT = datetime(2026, 1, 1, tzinfo=UTC)


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_structlog() -> None:
    """Reset structlog state between tests."""
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


# ---------------------------------------------------------------------------
# Knowledge builders
# ---------------------------------------------------------------------------


def make_scores(
    threat: int = 0,
    guidance: int = 0,
    evidence: int = 0,
    completeness: int = 0,
    total: int | None = None,
) -> Scores:
    """Scores whose total defaults to the sum of the sub-scores."""
    subtotal = threat + guidance + evidence + completeness
    return Scores(
        threat_identification=threat,
        practical_guidance=guidance,
        evidence_quality=evidence,
        completeness=completeness,
        total=subtotal if total is None else total,
    )


def make_evaluation(
    evaluation_date: datetime = EVALUATED_AT,
    scores: Scores | None = None,
    breakdown: dict[str, Any] | None = None,
) -> DetailedEvaluation:
    return DetailedEvaluation(
        framework_name="Example Framework",
        evaluation_date=evaluation_date,
        evaluated_by="@reviewer",
        scores=scores or make_scores(),
        breakdown=breakdown or {},
    )


def make_framework(
    framework_id: str = "example",
    score: float = 0.5,
    status: FrameworkStatus = FrameworkStatus.APPLICABLE,
    gaps: tuple[str, ...] = (),
    evaluation_key: str | None = None,
) -> Framework:
    return Framework(
        id=framework_id,
        name=f"{framework_id.title()} Framework",
        organization="Example Org",
        url=f"https://example.com/{framework_id}",
        ai_coverage_score=score,
        status=status,
        gaps=gaps,
        last_framework_update="2025-12",
        evaluation_key=evaluation_key,
    )


def make_knowledge(
    *,
    evaluation_date: datetime = EVALUATED_AT,
    valid_days: int | None = 90,
    frameworks: tuple[Framework, ...] = (),
    detailed_evaluations: dict[str, DetailedEvaluation] | None = None,
    timeline: tuple[TimelineEntry, ...] = (),
    criteria: tuple[ScoringCriterion, ...] = (),
) -> KnowledgeObject:
    """Minimal knowledge object; one detailed evaluation unless given."""
    if detailed_evaluations is None:
        detailed_evaluations = {"example-v1": make_evaluation(evaluation_date)}
    return KnowledgeObject(
        id="example-knowledge",
        name="Example Knowledge",
        evaluation=Evaluation(
            date=evaluation_date,
            by="@reviewer",
            valid_days=valid_days,
        ),
        frameworks=frameworks,
        detailed_evaluations=detailed_evaluations,
        timeline=timeline,
        metadata=KnowledgeMetadata(description="Example description", category="test"),
        criteria=criteria,
    )


@pytest.fixture()
def knowledge_factory() -> Callable[..., KnowledgeObject]:
    return make_knowledge


@pytest.fixture()
def evaluation_factory() -> Callable[..., DetailedEvaluation]:
    return make_evaluation


@pytest.fixture()
def framework_factory() -> Callable[..., Framework]:
    return make_framework


@pytest.fixture()
def scores_factory() -> Callable[..., Scores]:
    return make_scores


@pytest.fixture()
def small_criteria() -> tuple[ScoringCriterion, ...]:
    """A two-criterion catalog worth 10 threat points and 10 guidance points."""
    return (
        ScoringCriterion(
            category=ScoreCategory.THREAT_IDENTIFICATION,
            name="Tool/API abuse",
            points=10,
            section="Threat Identification",
        ),
        ScoringCriterion(
            category=ScoreCategory.PRACTICAL_GUIDANCE,
            name="Clear patterns",
            points=10,
            section="Practical Guidance",
        ),
    )
