"""Unit tests for living_governance.knowledge.service."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from living_governance.config import Settings
from living_governance.exceptions import (
    KnowledgeKindError,
    MalformedScoreTotalError,
    UnknownKnowledgeError,
)
from living_governance.knowledge.freshness import ConfidenceTier
from living_governance.knowledge.models import FrameworkStatus
from living_governance.knowledge.registry import KnowledgeRegistry, default_registry
from living_governance.knowledge.service import KnowledgeService
from living_governance.knowledge.threat_catalog import THREATS_KNOWLEDGE
from living_governance.knowledge.threat_models import ThreatCategoryName

NOW = datetime(2026, 3, 1, tzinfo=UTC)


@pytest.fixture()
def service() -> KnowledgeService:
    return KnowledgeService(default_registry(), Settings())


class TestKnowledgeService:
    """Queries over the shipped framework-coverage knowledge."""

    def test_default_knowledge(self, service: KnowledgeService) -> None:
        assert service.knowledge().id == "framework-coverage-2026-q1"

    def test_summarize(self, service: KnowledgeService) -> None:
        summary = service.summarize(now=NOW)
        assert summary.framework_count == 7
        assert summary.with_guidance == 4
        assert summary.average_coverage == 40
        assert summary.confidence.tier == ConfidenceTier.FRESH
        assert summary.stale is False

    def test_audit_is_healthy(self, service: KnowledgeService) -> None:
        report = service.audit()
        assert report.healthy
        assert len(report.warnings) == 3

    def test_timeline_filter(self, service: KnowledgeService) -> None:
        entries = service.timeline(framework="atlas")
        assert len(entries) == 5
        assert all("ATLAS" in entry.framework for entry in entries)
        assert len(service.timeline()) == 23

    def test_timeline_filter_without_matches(self, service: KnowledgeService) -> None:
        assert service.timeline(framework="nonexistent") == []

    def test_frameworks_by_status(self, service: KnowledgeService) -> None:
        active = service.frameworks(status=FrameworkStatus.ACTIVE)
        assert [item.id for item in active] == ["owasp-genai", "mitre-atlas"]
        assert len(service.frameworks()) == 7

    def test_evaluation_by_key_or_framework_id(self, service: KnowledgeService) -> None:
        by_key = service.evaluation("mitre-atlas-v4")
        by_id = service.evaluation("mitre-atlas")
        assert by_key is by_id
        assert by_key.scores.total == 90

    def test_unknown_evaluation(self, service: KnowledgeService) -> None:
        with pytest.raises(UnknownKnowledgeError, match="no-such-key"):
            service.evaluation("no-such-key")

    def test_unknown_knowledge(self, service: KnowledgeService) -> None:
        with pytest.raises(UnknownKnowledgeError):
            service.summarize("nonexistent")

    def test_threat_catalog_is_not_framework_coverage(
        self, service: KnowledgeService
    ) -> None:
        with pytest.raises(KnowledgeKindError):
            service.summarize("threats")

    def test_status_of_framework_coverage(self, service: KnowledgeService) -> None:
        result = service.status(now=NOW)
        assert result.knowledge.id == "framework-coverage-2026-q1"
        assert result.confidence.tier == ConfidenceTier.FRESH
        assert result.confidence.days_until_stale == 81
        assert result.stale is False

    def test_status_of_threat_catalog(self, service: KnowledgeService) -> None:
        result = service.status("threats", now=NOW)
        assert result.knowledge is THREATS_KNOWLEDGE
        assert result.confidence.tier == ConfidenceTier.FRESH
        assert result.confidence.days_until_stale == 83
        assert result.stale is False

    def test_comparison_columns(self, service: KnowledgeService) -> None:
        columns = service.comparison()
        assert [label for label, _ in columns] == [
            "owasp",
            "nist",
            "iso27090",
            "iso42001",
            "atlas",
            "attack",
            "cis",
        ]
        totals = [detail.scores.total for _, detail in columns]
        assert totals == [100, 30, 0, 35, 90, 0, 25]

    def test_shareable_view(self, service: KnowledgeService) -> None:
        assert service.shareable("Main").key_metric == "2 of 7 Ready"
        with pytest.raises(UnknownKnowledgeError, match="known: main"):
            service.shareable("poster")

    def test_archive_summaries(self, service: KnowledgeService) -> None:
        (snapshot,) = service.archive_summaries(now=NOW)
        assert snapshot.snapshot_date == datetime(2025, 4, 15, tzinfo=UTC)
        assert snapshot.evaluated_by == "@security-researcher"
        assert snapshot.framework_count == 1
        assert snapshot.average_coverage == 38
        assert snapshot.stale is True


class TestServiceSettings:
    """Settings flow into service operations."""

    def test_default_valid_days_from_settings(self, knowledge_factory) -> None:
        knowledge = knowledge_factory(
            evaluation_date=datetime(2026, 1, 1, tzinfo=UTC), valid_days=None
        )
        settings = Settings(freshness={"default_valid_days": 20})
        service = KnowledgeService(KnowledgeRegistry({"example": knowledge}), settings)
        summary = service.summarize("example", now=datetime(2026, 1, 11, tzinfo=UTC))
        assert summary.confidence.tier == ConfidenceTier.AGING

    def test_default_knowledge_from_settings(self, knowledge_factory) -> None:
        knowledge = knowledge_factory()
        settings = Settings(display={"default_knowledge": "example"})
        service = KnowledgeService(KnowledgeRegistry({"example": knowledge}), settings)
        assert service.knowledge() is knowledge

    def test_audit_enforcement_from_settings(
        self, knowledge_factory, evaluation_factory, scores_factory
    ) -> None:
        knowledge = knowledge_factory(
            detailed_evaluations={
                "bad": evaluation_factory(scores=scores_factory(10, total=15)),
            }
        )
        registry = KnowledgeRegistry({"example": knowledge})

        lenient = Settings(integrity={"enforce_score_totals": False})
        assert KnowledgeService(registry, lenient).audit("example").healthy

        service = KnowledgeService(registry, Settings())
        assert not service.audit("example").healthy
        with pytest.raises(MalformedScoreTotalError):
            service.audit("example", strict=True)

    def test_comparison_with_missing_evaluation(self, knowledge_factory) -> None:
        knowledge = knowledge_factory().model_copy(
            update={"comparison_columns": {"gone": "missing-v1"}}
        )
        registry = KnowledgeRegistry({"example": knowledge})
        service = KnowledgeService(registry, Settings())
        with pytest.raises(UnknownKnowledgeError, match="missing-v1"):
            service.comparison("example")

    def test_default_threat_catalog_from_settings(self) -> None:
        settings = Settings(display={"default_threats": "catalog"})
        service = KnowledgeService(
            KnowledgeRegistry({"catalog": THREATS_KNOWLEDGE}), settings
        )
        assert service.threats() is THREATS_KNOWLEDGE


class TestThreatQueries:
    """Queries over the shipped threat catalog."""

    def test_threats_most_exploited_first(self, service: KnowledgeService) -> None:
        ids = [item.id for item in service.threat_list()]
        assert ids == ["TM-001", "TM-002", "TM-003", "TM-004"]

    def test_threats_by_category(self, service: KnowledgeService) -> None:
        items = service.threat_list(category=ThreatCategoryName.TOOL_AND_API_ABUSE)
        assert [item.id for item in items] == ["TM-002"]
        assert service.threat_list(category=ThreatCategoryName.BEHAVIORAL) == []

    def test_incidents_newest_first(self, service: KnowledgeService) -> None:
        ids = [item.id for item in service.incidents()]
        assert ids == ["INC-002", "INC-004", "INC-001", "INC-003"]

    def test_incidents_uncovered_by_framework(self, service: KnowledgeService) -> None:
        missed = service.incidents(uncovered_by="nist-ai-rmf")
        assert [item.id for item in missed] == ["INC-002", "INC-004"]
        assert service.incidents(uncovered_by="owasp-genai") == []
        assert len(service.incidents(uncovered_by="not-tracked")) == 4

    def test_latest_incident(self, service: KnowledgeService) -> None:
        latest = service.latest_incident()
        assert latest is not None
        assert latest.id == "INC-002"

    def test_gaps_and_candidates(self, service: KnowledgeService) -> None:
        assert len(service.gaps()) == 5
        candidates = service.gaps(candidates_only=True)
        assert [(item.incident_id, item.framework_id) for item in candidates] == [
            ("INC-001", "iso-42001"),
            ("INC-002", "nist-ai-rmf"),
            ("INC-004", "nist-ai-rmf"),
            ("INC-004", "iso-42001"),
        ]

    def test_coverage_summary(self, service: KnowledgeService) -> None:
        summary = service.coverage_summary()
        assert summary.total_incidents == 4
        assert summary.total_gaps == 5

    def test_trends_and_evolution(self, service: KnowledgeService) -> None:
        assert len(service.threat_trends()) == 3
        events = service.evolution()
        assert events[0].date == datetime(2026, 2, 9, tzinfo=UTC)

    def test_coverage_object_is_not_a_threat_catalog(
        self, service: KnowledgeService
    ) -> None:
        with pytest.raises(KnowledgeKindError):
            service.threat_list("framework-coverage")
