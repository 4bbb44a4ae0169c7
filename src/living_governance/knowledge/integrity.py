"""Editorial integrity checks for authored knowledge objects.

Knowledge is maintained by hand. These checks catch the mistakes an editor
is most likely to make when re-scoring a framework: a total that no longer
matches its sub-scores, a breakdown that drifts from the criteria catalog,
or a headline coverage score that was not updated with its evaluation.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, Field

from living_governance.exceptions import (
    CoverageScoreMismatchError,
    MalformedScoreTotalError,
    UnknownEvaluationKeyError,
)
from living_governance.knowledge.models import CriterionState, ScoreCategory

if TYPE_CHECKING:
    from collections.abc import Sequence

    from living_governance.knowledge.models import (
        DetailedEvaluation,
        KnowledgeObject,
        ScoringCriterion,
    )

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class IssueSeverity(StrEnum):
    """Severity of an integrity issue."""

    WARNING = "warning"
    ERROR = "error"


class IntegrityIssue(BaseModel):
    """A single integrity finding."""

    subject: str
    code: str
    severity: IssueSeverity
    message: str


class IntegrityReport(BaseModel):
    """Aggregate audit result for one knowledge object."""

    knowledge_id: str
    issues: list[IntegrityIssue] = Field(default_factory=list)

    @property
    def errors(self) -> list[IntegrityIssue]:
        return [issue for issue in self.issues if issue.severity == IssueSeverity.ERROR]

    @property
    def warnings(self) -> list[IntegrityIssue]:
        return [
            issue for issue in self.issues if issue.severity == IssueSeverity.WARNING
        ]

    @property
    def healthy(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        return 0 if self.healthy else 1


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def validate_score_total(key: str, evaluation: DetailedEvaluation) -> None:
    """Raise if an evaluation's total differs from the sum of its sub-scores.

    Raises:
        MalformedScoreTotalError: On mismatch.
    """
    scores = evaluation.scores
    if scores.total != scores.subtotal:
        msg = (
            f"{key}: total {scores.total} does not equal the sum of "
            f"sub-scores {scores.subtotal}"
        )
        raise MalformedScoreTotalError(msg)


def points_from_breakdown(
    evaluation: DetailedEvaluation,
    criteria: Sequence[ScoringCriterion],
) -> dict[ScoreCategory, int]:
    """Points per category earned by met criteria.

    Unmet and unknown criteria contribute nothing.
    """
    points = dict.fromkeys(ScoreCategory, 0)
    for criterion in criteria:
        if evaluation.breakdown.get(criterion.key) == CriterionState.MET:
            points[criterion.category] += criterion.points
    return points


def _breakdown_key_issues(
    key: str,
    evaluation: DetailedEvaluation,
    criteria: Sequence[ScoringCriterion],
) -> list[IntegrityIssue]:
    expected = {criterion.key for criterion in criteria}
    actual = set(evaluation.breakdown)
    issues: list[IntegrityIssue] = []

    missing = sorted(expected - actual)
    if missing:
        issues.append(
            IntegrityIssue(
                subject=key,
                code="breakdown-keys",
                severity=IssueSeverity.WARNING,
                message=f"Breakdown is missing criteria: {', '.join(missing)}",
            )
        )
    extra = sorted(actual - expected)
    if extra:
        issues.append(
            IntegrityIssue(
                subject=key,
                code="breakdown-keys",
                severity=IssueSeverity.WARNING,
                message=(
                    f"Breakdown has criteria not in the catalog: {', '.join(extra)}"
                ),
            )
        )
    return issues


def _breakdown_point_issues(
    key: str,
    evaluation: DetailedEvaluation,
    criteria: Sequence[ScoringCriterion],
) -> list[IntegrityIssue]:
    earned = points_from_breakdown(evaluation, criteria)
    authored = evaluation.scores.by_category()
    return [
        IntegrityIssue(
            subject=key,
            code="breakdown-points",
            severity=IssueSeverity.WARNING,
            message=(
                f"{category.value}: authored {authored[category]} points, "
                f"breakdown earns {earned[category]}"
            ),
        )
        for category in ScoreCategory
        if authored[category] != earned[category]
    ]


def _coverage_issues(
    knowledge: KnowledgeObject,
    *,
    enforce: bool,
    tolerance: float,
    strict: bool,
) -> list[IntegrityIssue]:
    issues: list[IntegrityIssue] = []
    for framework in knowledge.frameworks:
        if framework.evaluation_key is None:
            continue

        evaluation = knowledge.detailed_evaluations.get(framework.evaluation_key)
        if evaluation is None:
            key_message = (
                f"References unknown detailed evaluation "
                f"{framework.evaluation_key!r}"
            )
            if strict:
                raise UnknownEvaluationKeyError(f"{framework.id}: {key_message}")
            issues.append(
                IntegrityIssue(
                    subject=framework.id,
                    code="evaluation-key",
                    severity=IssueSeverity.ERROR,
                    message=key_message,
                )
            )
            continue

        expected = evaluation.scores.total / 100
        if abs(framework.ai_coverage_score - expected) <= tolerance:
            continue

        message = (
            f"Coverage score {framework.ai_coverage_score:.2f} does not match "
            f"evaluation total {evaluation.scores.total}/100"
        )
        if enforce and strict:
            raise CoverageScoreMismatchError(f"{framework.id}: {message}")
        issues.append(
            IntegrityIssue(
                subject=framework.id,
                code="coverage-score",
                severity=IssueSeverity.ERROR if enforce else IssueSeverity.WARNING,
                message=message,
            )
        )
    return issues


def _comparison_issues(
    knowledge: KnowledgeObject, *, strict: bool
) -> list[IntegrityIssue]:
    issues: list[IntegrityIssue] = []
    for label, key in knowledge.comparison_columns.items():
        if key in knowledge.detailed_evaluations:
            continue
        message = f"Comparison column {label!r} references unknown evaluation {key!r}"
        if strict:
            raise UnknownEvaluationKeyError(message)
        issues.append(
            IntegrityIssue(
                subject=label,
                code="comparison-key",
                severity=IssueSeverity.ERROR,
                message=message,
            )
        )
    return issues


def _timeline_issues(knowledge: KnowledgeObject) -> list[IntegrityIssue]:
    issues: list[IntegrityIssue] = []
    for previous, current in zip(knowledge.timeline, knowledge.timeline[1:]):
        if current.date < previous.date:
            issues.append(
                IntegrityIssue(
                    subject=current.framework,
                    code="timeline-order",
                    severity=IssueSeverity.WARNING,
                    message=(
                        f"Entry dated {current.date.date().isoformat()} follows "
                        f"{previous.date.date().isoformat()}"
                    ),
                )
            )
    return issues


# ---------------------------------------------------------------------------
# Audit
# ---------------------------------------------------------------------------


def audit_knowledge(
    knowledge: KnowledgeObject,
    *,
    enforce_score_totals: bool = True,
    enforce_coverage_match: bool = False,
    coverage_tolerance: float = 0.005,
    strict: bool = False,
) -> IntegrityReport:
    """Run every integrity check against a knowledge object.

    Args:
        knowledge: The knowledge object to audit.
        enforce_score_totals: Report total/sub-score mismatches as errors
            instead of warnings.
        enforce_coverage_match: Report coverage scores that differ from
            ``total / 100`` as errors instead of warnings.
        coverage_tolerance: Allowed absolute difference for coverage scores.
        strict: Raise on the first error instead of collecting it. An unknown
            evaluation key is always an error; score-total and coverage-score
            findings raise only when their enforce flag is set.

    Returns:
        An ``IntegrityReport`` listing every issue found.

    Raises:
        MalformedScoreTotalError: In strict mode, on an enforced total mismatch.
        CoverageScoreMismatchError: In strict mode, on an enforced coverage
            mismatch.
        UnknownEvaluationKeyError: In strict mode, when a framework or a
            comparison column references a detailed evaluation that does
            not exist.
    """
    issues: list[IntegrityIssue] = []

    for key, evaluation in knowledge.detailed_evaluations.items():
        try:
            validate_score_total(key, evaluation)
        except MalformedScoreTotalError as exc:
            if enforce_score_totals and strict:
                raise
            issues.append(
                IntegrityIssue(
                    subject=key,
                    code="score-total",
                    severity=(
                        IssueSeverity.ERROR
                        if enforce_score_totals
                        else IssueSeverity.WARNING
                    ),
                    message=str(exc),
                )
            )

        if knowledge.criteria:
            issues.extend(_breakdown_key_issues(key, evaluation, knowledge.criteria))
            issues.extend(_breakdown_point_issues(key, evaluation, knowledge.criteria))

    issues.extend(
        _coverage_issues(
            knowledge,
            enforce=enforce_coverage_match,
            tolerance=coverage_tolerance,
            strict=strict,
        )
    )
    issues.extend(_comparison_issues(knowledge, strict=strict))
    issues.extend(_timeline_issues(knowledge))

    for issue in issues:
        logger.warning(
            "integrity_issue",
            knowledge_id=knowledge.id,
            subject=issue.subject,
            code=issue.code,
            severity=issue.severity.value,
            detail=issue.message,
        )

    return IntegrityReport(knowledge_id=knowledge.id, issues=issues)
