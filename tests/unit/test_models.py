"""Unit tests for living_governance.knowledge.models."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from living_governance.knowledge.models import (
    CATEGORY_BUDGETS,
    CriterionState,
    DetailedEvaluation,
    Evaluation,
    ScoreCategory,
    Scores,
    ScoringCriterion,
    criterion_key,
)
from living_governance.knowledge.registry import default_registry


class TestCriterionKey:
    """Breakdown keys derived from criterion names."""

    @pytest.mark.parametrize(
        ("name", "key"),
        [
            ("Memory attacks", "memory-attacks"),
            ("Tool/API abuse", "tool-api-abuse"),
            ("Identity/auth threats", "identity-auth-threats"),
            ("Step-by-step instructions", "step-by-step-instructions"),
        ],
    )
    def test_keys(self, name: str, key: str) -> None:
        assert criterion_key(name) == key

    def test_scoring_criterion_exposes_key(self) -> None:
        criterion = ScoringCriterion(
            category=ScoreCategory.COMPLETENESS,
            name="Response procedures",
            points=5,
            section="Completeness",
        )
        assert criterion.key == "response-procedures"
        assert criterion.model_dump()["key"] == "response-procedures"


class TestCriterionState:
    """Tri-state coercion from authored values."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (True, CriterionState.MET),
            (False, CriterionState.UNMET),
            ("unknown", CriterionState.UNKNOWN),
            ("true", CriterionState.MET),
            ("met", CriterionState.MET),
            ("unmet", CriterionState.UNMET),
            (CriterionState.UNKNOWN, CriterionState.UNKNOWN),
        ],
    )
    def test_coerce(self, raw: object, expected: CriterionState) -> None:
        assert CriterionState.coerce(raw) == expected

    @pytest.mark.parametrize("raw", ["maybe", 1, None])
    def test_rejects_other_values(self, raw: object) -> None:
        with pytest.raises(ValueError, match="Invalid criterion state"):
            CriterionState.coerce(raw)

    def test_breakdown_is_coerced_on_construction(self, evaluation_factory) -> None:
        evaluation = evaluation_factory(breakdown={"a": True, "b": "unknown"})
        assert evaluation.breakdown == {
            "a": CriterionState.MET,
            "b": CriterionState.UNKNOWN,
        }

    def test_invalid_breakdown_value_fails_validation(self, evaluation_factory) -> None:
        with pytest.raises(ValidationError):
            evaluation_factory(breakdown={"a": "sometimes"})


class TestScores:
    """Category bounds and derived totals."""

    def test_category_budgets_sum_to_one_hundred(self) -> None:
        assert sum(CATEGORY_BUDGETS.values()) == 100

    def test_subtotal(self, scores_factory) -> None:
        scores = scores_factory(35, 25, 20, 10)
        assert scores.subtotal == 90
        assert scores.by_category()[ScoreCategory.PRACTICAL_GUIDANCE] == 25

    def test_subscore_above_budget_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Scores(
                threat_identification=45,
                practical_guidance=0,
                evidence_quality=0,
                completeness=0,
                total=45,
            )

    def test_negative_total_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Scores(
                threat_identification=0,
                practical_guidance=0,
                evidence_quality=0,
                completeness=0,
                total=-1,
            )


class TestFramework:
    """Framework validation."""

    def test_coverage_score_bounds(self, framework_factory) -> None:
        with pytest.raises(ValidationError):
            framework_factory(score=1.5)

    def test_last_update_must_be_year_month(self, framework_factory) -> None:
        framework = framework_factory()
        with pytest.raises(ValidationError):
            type(framework).model_validate(
                {**framework.model_dump(), "last_framework_update": "December 2025"}
            )


class TestImmutability:
    """Knowledge models are frozen."""

    def test_framework_is_frozen(self, framework_factory) -> None:
        framework = framework_factory()
        with pytest.raises(ValidationError):
            framework.ai_coverage_score = 0.9  # type: ignore[misc]

    def test_knowledge_is_frozen(self, knowledge_factory) -> None:
        knowledge = knowledge_factory()
        with pytest.raises(ValidationError):
            knowledge.name = "changed"  # type: ignore[misc]

    def test_sequences_are_tuples(self, knowledge_factory, framework_factory) -> None:
        knowledge = knowledge_factory(frameworks=[framework_factory()])
        assert isinstance(knowledge.frameworks, tuple)

    def test_detailed_evaluations_reject_item_assignment(
        self, knowledge_factory, evaluation_factory
    ) -> None:
        knowledge = knowledge_factory()
        with pytest.raises(TypeError):
            knowledge.detailed_evaluations["added"] = evaluation_factory()
        assert list(knowledge.detailed_evaluations) == ["example-v1"]

    def test_breakdown_rejects_item_assignment(self, evaluation_factory) -> None:
        evaluation = evaluation_factory(breakdown={"memory-attacks": True})
        with pytest.raises(TypeError):
            evaluation.breakdown["memory-attacks"] = CriterionState.UNMET
        assert evaluation.breakdown["memory-attacks"] == CriterionState.MET

    def test_default_breakdown_is_read_only(self) -> None:
        evaluation = DetailedEvaluation(
            framework_name="Example",
            evaluation_date=datetime(2026, 1, 1, tzinfo=UTC),
            evaluated_by="@reviewer",
            scores=Scores(
                threat_identification=0,
                practical_guidance=0,
                evidence_quality=0,
                completeness=0,
                total=0,
            ),
        )
        with pytest.raises(TypeError):
            evaluation.breakdown["x"] = CriterionState.MET  # type: ignore[index]

    def test_caller_dict_is_copied(self, evaluation_factory) -> None:
        source = {"memory-attacks": True}
        evaluation = evaluation_factory(breakdown=source)
        source["memory-attacks"] = False
        assert evaluation.breakdown["memory-attacks"] == CriterionState.MET

    def test_shipped_knowledge_cannot_be_mutated(self) -> None:
        knowledge = default_registry().coverage("framework-coverage")
        with pytest.raises(TypeError):
            del knowledge.detailed_evaluations["nist-ai-rmf-v1"]
        assert "nist-ai-rmf-v1" in default_registry().coverage(
            "framework-coverage"
        ).detailed_evaluations

    def test_category_budgets_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            CATEGORY_BUDGETS[ScoreCategory.COMPLETENESS] = 50  # type: ignore[index]

    def test_read_only_mappings_still_serialize(self, knowledge_factory) -> None:
        dumped = knowledge_factory().model_dump(mode="json")
        assert isinstance(dumped["detailed_evaluations"], dict)
        assert dumped["detailed_evaluations"]["example-v1"]["breakdown"] == {}

    def test_framework_lookup(self, knowledge_factory, framework_factory) -> None:
        knowledge = knowledge_factory(frameworks=(framework_factory("cis"),))
        assert knowledge.framework("cis") is not None
        assert knowledge.framework("missing") is None


class TestDates:
    """All dates are normalized to UTC."""

    def test_naive_date_becomes_utc(self) -> None:
        evaluation = Evaluation(date=datetime(2026, 2, 20), by="@reviewer")
        assert evaluation.date.tzinfo == UTC

    def test_offset_date_is_converted(self) -> None:
        offset = timezone(timedelta(hours=5))
        evaluation = Evaluation(
            date=datetime(2026, 2, 20, 5, 0, tzinfo=offset), by="@reviewer"
        )
        assert evaluation.date == datetime(2026, 2, 20, 0, 0, tzinfo=UTC)
        assert evaluation.date.hour == 0

    def test_negative_valid_days_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Evaluation(date=datetime(2026, 2, 20, tzinfo=UTC), by="x", valid_days=-1)
