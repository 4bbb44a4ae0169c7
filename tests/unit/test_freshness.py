"""Unit tests for living_governance.knowledge.freshness."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from living_governance.exceptions import EmptyEvaluationSetError, KnowledgeError
from living_governance.knowledge.archives import SNAPSHOT_2025_04_15
from living_governance.knowledge.freshness import (
    ConfidenceTier,
    classify_age,
    confidence_or_unknown,
    days_between,
    effective_valid_days,
    evaluation_confidence,
    get_confidence_status,
    is_stale,
    latest_evaluation_date,
    resolve_now,
)
from living_governance.knowledge.models import Evaluation

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=UTC)


def _days_ago(days: float) -> datetime:
    return NOW - timedelta(days=days)


# ---- Scenarios ---------------------------------------------------------------


class TestConfidenceScenarios:
    """Tier classification against a 90-day validity window."""

    def test_fresh_after_ten_days(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=_days_ago(10))
        result = get_confidence_status(knowledge, now=NOW)
        assert result.confidence == 1.0
        assert result.status == "Fresh - high confidence"
        assert result.days_until_stale == 80
        assert result.tier == ConfidenceTier.FRESH

    def test_aging_after_fifty_days(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=_days_ago(50))
        result = get_confidence_status(knowledge, now=NOW)
        assert result.confidence == 0.7
        assert result.status == "Aging - consider review"
        assert result.days_until_stale == 40

    def test_stale_after_eighty_days(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=_days_ago(80))
        result = get_confidence_status(knowledge, now=NOW)
        assert result.confidence == 0.5
        assert result.status == "Stale - needs review"
        assert result.days_until_stale == 10

    def test_expired_after_one_hundred_twenty_days(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=_days_ago(120))
        result = get_confidence_status(knowledge, now=NOW)
        assert result.confidence == 0.3
        assert result.status == "Expired - review required"
        assert result.days_until_stale == 0
        assert result.tier == ConfidenceTier.EXPIRED


# ---- Boundaries --------------------------------------------------------------


class TestTierBoundaries:
    """Each tier includes its upper bound."""

    def test_exactly_thirty_percent_is_fresh(self) -> None:
        assert classify_age(27.0, 90).tier == ConfidenceTier.FRESH

    def test_just_past_thirty_percent_is_aging(self) -> None:
        assert classify_age(27.0001, 90).tier == ConfidenceTier.AGING

    def test_exactly_seventy_percent_is_aging(self) -> None:
        assert classify_age(63.0, 90).tier == ConfidenceTier.AGING

    def test_exactly_valid_days_is_stale(self) -> None:
        result = classify_age(90.0, 90)
        assert result.tier == ConfidenceTier.STALE
        assert result.days_until_stale == 0

    def test_past_valid_days_is_expired(self) -> None:
        assert classify_age(90.5, 90).tier == ConfidenceTier.EXPIRED

    def test_boundaries_scale_with_window(self) -> None:
        assert classify_age(3.0, 10).tier == ConfidenceTier.FRESH
        assert classify_age(7.0, 10).tier == ConfidenceTier.AGING

    @pytest.mark.parametrize("valid_days", [1, 7, 30, 90, 365])
    def test_anything_within_thirty_percent_is_full_confidence(
        self, valid_days: int
    ) -> None:
        for fraction in (0.0, 0.1, 0.2, 0.25):
            result = classify_age(valid_days * fraction, valid_days)
            assert result.confidence == 1.0

    @pytest.mark.parametrize("days_since", [91, 120, 1000])
    def test_expired_has_no_days_until_stale(self, days_since: int) -> None:
        assert classify_age(days_since, 90).days_until_stale == 0

    def test_days_until_stale_is_floored(self) -> None:
        assert classify_age(10.75, 90).days_until_stale == 79

    def test_future_evaluation_counts_as_fresh(self) -> None:
        result = classify_age(-5.0, 90)
        assert result.tier == ConfidenceTier.FRESH
        assert result.days_until_stale == 95


# ---- Reference date ----------------------------------------------------------


class TestReferenceDate:
    """Confidence is measured from the newest detailed evaluation."""

    def test_uses_latest_detailed_evaluation(
        self, knowledge_factory, evaluation_factory
    ) -> None:
        knowledge = knowledge_factory(
            evaluation_date=_days_ago(200),
            detailed_evaluations={
                "old": evaluation_factory(_days_ago(150)),
                "new": evaluation_factory(_days_ago(10)),
            },
        )
        assert latest_evaluation_date(knowledge) == _days_ago(10)
        assert get_confidence_status(knowledge, now=NOW).tier == ConfidenceTier.FRESH

    def test_empty_evaluations_raise(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(detailed_evaluations={})
        with pytest.raises(EmptyEvaluationSetError, match="no detailed evaluations"):
            get_confidence_status(knowledge, now=NOW)

    def test_empty_evaluations_error_is_a_knowledge_error(
        self, knowledge_factory
    ) -> None:
        knowledge = knowledge_factory(detailed_evaluations={})
        with pytest.raises(KnowledgeError):
            latest_evaluation_date(knowledge)

    def test_confidence_or_unknown_degrades(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(detailed_evaluations={})
        result = confidence_or_unknown(knowledge, now=NOW)
        assert result.tier == ConfidenceTier.UNKNOWN
        assert result.confidence == 0.0
        assert result.days_until_stale == 0

    def test_confidence_or_unknown_passes_through(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=_days_ago(50))
        assert confidence_or_unknown(knowledge, now=NOW).tier == ConfidenceTier.AGING


# ---- Validity window ---------------------------------------------------------


class TestValidityWindow:
    """Unset or zero windows fall back to the default."""

    @pytest.mark.parametrize("valid_days", [None, 0])
    def test_falsy_window_uses_default(self, valid_days: int | None) -> None:
        evaluation = Evaluation(date=NOW, by="@reviewer", valid_days=valid_days)
        assert effective_valid_days(evaluation) == 90
        assert effective_valid_days(evaluation, 30) == 30

    def test_explicit_window_wins(self) -> None:
        evaluation = Evaluation(date=NOW, by="@reviewer", valid_days=14)
        assert effective_valid_days(evaluation, 30) == 14

    def test_short_window_changes_tier(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=_days_ago(10), valid_days=10)
        result = get_confidence_status(knowledge, now=NOW)
        assert result.tier == ConfidenceTier.STALE
        assert result.days_until_stale == 0

    def test_default_window_is_configurable(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=_days_ago(50), valid_days=None)
        result = get_confidence_status(knowledge, now=NOW, default_valid_days=200)
        assert result.tier == ConfidenceTier.FRESH


# ---- Staleness ---------------------------------------------------------------


class TestIsStale:
    """is_stale measures from the top-level evaluation date."""

    def test_not_stale_within_window(self, knowledge_factory) -> None:
        assert not is_stale(knowledge_factory(evaluation_date=_days_ago(90)), NOW)

    def test_stale_past_window(self, knowledge_factory) -> None:
        assert is_stale(knowledge_factory(evaluation_date=_days_ago(91)), NOW)

    def test_reference_dates_are_independent(
        self, knowledge_factory, evaluation_factory
    ) -> None:
        knowledge = knowledge_factory(
            evaluation_date=_days_ago(120),
            detailed_evaluations={"recent": evaluation_factory(_days_ago(5))},
        )
        assert is_stale(knowledge, NOW)
        assert get_confidence_status(knowledge, now=NOW).tier == ConfidenceTier.FRESH

    def test_archived_snapshot_is_stale(self) -> None:
        assert is_stale(SNAPSHOT_2025_04_15, NOW)


# ---- Purity ------------------------------------------------------------------


class TestIdempotence:
    """Repeated classification at a fixed instant is identical."""

    def test_same_instant_same_result(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=_days_ago(33))
        first = get_confidence_status(knowledge, now=NOW)
        second = get_confidence_status(knowledge, now=NOW)
        assert first == second

    def test_prototypes_are_not_mutated(self, knowledge_factory) -> None:
        get_confidence_status(knowledge_factory(evaluation_date=_days_ago(10)), NOW)
        untouched = classify_age(0.0, 100)
        assert untouched.days_until_stale == 100

    def test_days_between_is_fractional(self) -> None:
        assert days_between(_days_ago(1.5), NOW) == pytest.approx(1.5)

    def test_naive_dates_are_treated_as_utc(self, knowledge_factory) -> None:
        naive = (NOW - timedelta(days=10)).replace(tzinfo=None)
        knowledge = knowledge_factory(evaluation_date=naive)
        assert get_confidence_status(knowledge, now=NOW).days_until_stale == 80

    def test_naive_now_is_treated_as_utc(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=NOW - timedelta(days=10))
        naive_now = NOW.replace(tzinfo=None)
        status = get_confidence_status(knowledge, now=naive_now)
        assert status == get_confidence_status(knowledge, now=NOW)
        assert status.days_until_stale == 80

    def test_naive_now_for_is_stale(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=NOW - timedelta(days=91))
        assert is_stale(knowledge, now=NOW.replace(tzinfo=None)) is True
        earlier = (NOW - timedelta(days=2)).replace(tzinfo=None)
        assert is_stale(knowledge, now=earlier) is False

    def test_resolve_now_converts_offsets(self) -> None:
        offset = timezone(timedelta(hours=-5))
        resolved = resolve_now(datetime(2026, 3, 1, 7, 0, tzinfo=offset))
        assert resolved == datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
        assert resolved.tzinfo == UTC


class TestEvaluationConfidence:
    """Confidence measured from the top-level evaluation date."""

    def test_ignores_detailed_evaluations(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(
            evaluation_date=NOW - timedelta(days=50),
            detailed_evaluations={},
        )
        status = evaluation_confidence(knowledge, now=NOW)
        assert status.tier == ConfidenceTier.AGING
        assert status.days_until_stale == 40

    def test_expired_past_window(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(evaluation_date=NOW - timedelta(days=100))
        assert evaluation_confidence(knowledge, now=NOW).tier == ConfidenceTier.EXPIRED
