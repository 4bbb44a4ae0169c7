"""Checks over the authored framework-coverage knowledge."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from living_governance.knowledge.archives import SNAPSHOT_2025_04_15
from living_governance.knowledge.framework_coverage import (
    CRITERIA,
    FRAMEWORK_COVERAGE,
)
from living_governance.knowledge.freshness import (
    ConfidenceTier,
    get_confidence_status,
    is_stale,
)
from living_governance.knowledge.integrity import audit_knowledge
from living_governance.knowledge.models import (
    CATEGORY_BUDGETS,
    CriterionState,
    FrameworkStatus,
)
from living_governance.knowledge.summary import (
    average_coverage,
    count_with_guidance,
    get_latest_change,
)


class TestCatalog:
    """The 19-criterion, 100-point catalog."""

    def test_catalog_size_and_points(self) -> None:
        assert len(CRITERIA) == 19
        assert sum(criterion.points for criterion in CRITERIA) == 100

    def test_points_per_category_match_budgets(self) -> None:
        for category, budget in CATEGORY_BUDGETS.items():
            points = sum(c.points for c in CRITERIA if c.category == category)
            assert points == budget

    def test_keys_are_unique(self) -> None:
        keys = [criterion.key for criterion in CRITERIA]
        assert len(set(keys)) == len(keys)
        assert "tool-api-abuse" in keys
        assert "identity-auth-threats" in keys


class TestAuthoredKnowledge:
    """Shape and derived numbers of the shipped knowledge."""

    def test_frameworks(self) -> None:
        ids = [framework.id for framework in FRAMEWORK_COVERAGE.frameworks]
        assert ids == [
            "owasp-genai",
            "nist-ai-rmf",
            "iso-27090",
            "iso-42001",
            "mitre-attack",
            "mitre-atlas",
            "cis-controls",
        ]

    def test_roll_up_numbers(self) -> None:
        frameworks = FRAMEWORK_COVERAGE.frameworks
        assert average_coverage(frameworks) == 40
        assert count_with_guidance(frameworks) == 4

    def test_statuses(self) -> None:
        atlas = FRAMEWORK_COVERAGE.framework("mitre-atlas")
        assert atlas is not None
        assert atlas.status == FrameworkStatus.ACTIVE

    def test_latest_change_is_last_by_position(self) -> None:
        assert get_latest_change(FRAMEWORK_COVERAGE).startswith(
            "OpenClaw investigation published"
        )
        assert len(FRAMEWORK_COVERAGE.timeline) == 23

    def test_draft_breakdown_is_unknown(self) -> None:
        draft = FRAMEWORK_COVERAGE.detailed_evaluations["iso-27090-draft"]
        assert set(draft.breakdown.values()) == {CriterionState.UNKNOWN}

    def test_every_framework_links_an_evaluation(self) -> None:
        for framework in FRAMEWORK_COVERAGE.frameworks:
            assert framework.evaluation_key in FRAMEWORK_COVERAGE.detailed_evaluations

    def test_passes_audit_without_errors(self) -> None:
        report = audit_knowledge(FRAMEWORK_COVERAGE)
        assert report.healthy
        assert report.errors == []
        codes = sorted(issue.code for issue in report.warnings)
        assert codes == ["breakdown-points", "breakdown-points", "timeline-order"]

    def test_confidence_at_evaluation(self) -> None:
        now = datetime(2026, 3, 1, tzinfo=UTC)
        result = get_confidence_status(FRAMEWORK_COVERAGE, now=now)
        assert result.tier == ConfidenceTier.FRESH
        assert result.days_until_stale == 81
        assert not is_stale(FRAMEWORK_COVERAGE, now)

    def test_expired_after_validity_window(self) -> None:
        now = datetime(2026, 6, 1, tzinfo=UTC)
        result = get_confidence_status(FRAMEWORK_COVERAGE, now=now)
        assert result.tier == ConfidenceTier.EXPIRED
        assert is_stale(FRAMEWORK_COVERAGE, now)


class TestComparisonAndSharing:
    """Comparison columns and shareable headline cards."""

    def test_columns_reference_detailed_evaluations(self) -> None:
        columns = FRAMEWORK_COVERAGE.comparison_columns
        assert len(columns) == 7
        assert set(columns.values()) == set(FRAMEWORK_COVERAGE.detailed_evaluations)

    def test_columns_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            FRAMEWORK_COVERAGE.comparison_columns["extra"] = "x"  # type: ignore[index]

    def test_shareable_views(self) -> None:
        views = FRAMEWORK_COVERAGE.shareable_content
        assert list(views) == ["main", "methodology", "cloud", "timeline"]
        assert views["main"].key_metric == "2 of 7 Ready"
        assert all(view.insights for view in views.values())


class TestArchive:
    """The April 2025 snapshot."""

    def test_snapshot_contents(self) -> None:
        assert SNAPSHOT_2025_04_15.evaluation.by == "@security-researcher"
        assert len(SNAPSHOT_2025_04_15.frameworks) == 1
        assert average_coverage(SNAPSHOT_2025_04_15.frameworks) == 38
        assert len(SNAPSHOT_2025_04_15.insights) == 4
