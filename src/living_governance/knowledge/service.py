"""Service layer for knowledge summary, audit, and query workflows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from living_governance.exceptions import UnknownKnowledgeError
from living_governance.knowledge import threats as threat_views
from living_governance.knowledge.freshness import (
    confidence_or_unknown,
    evaluation_confidence,
    is_stale,
)
from living_governance.knowledge.integrity import IntegrityReport, audit_knowledge
from living_governance.knowledge.models import KnowledgeObject
from living_governance.knowledge.summary import (
    KnowledgeSummary,
    average_coverage,
    summarize,
)

if TYPE_CHECKING:
    from datetime import datetime

    from living_governance.config import Settings
    from living_governance.knowledge.freshness import ConfidenceStatus
    from living_governance.knowledge.models import (
        DetailedEvaluation,
        Framework,
        FrameworkStatus,
        ShareableView,
        TimelineEntry,
    )
    from living_governance.knowledge.registry import AnyKnowledge, KnowledgeRegistry
    from living_governance.knowledge.threat_models import (
        EvolutionEvent,
        Incident,
        Threat,
        ThreatCategoryName,
        ThreatsKnowledge,
    )
    from living_governance.knowledge.threats import (
        CoverageSummary,
        GapRecord,
        ThreatTrend,
    )

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@dataclass(slots=True)
class ArchiveSummary:
    """Roll-up of one archived snapshot for comparison views."""

    snapshot_date: datetime
    evaluated_by: str
    framework_count: int
    average_coverage: int
    stale: bool


@dataclass(slots=True)
class KnowledgeStatus:
    """Freshness of one knowledge object at a point in time."""

    knowledge: AnyKnowledge
    confidence: ConfidenceStatus
    stale: bool


class KnowledgeService:
    """High-level knowledge operations used by CLI commands."""

    def __init__(self, registry: KnowledgeRegistry, settings: Settings) -> None:
        self._registry = registry
        self._settings = settings

    @property
    def default_valid_days(self) -> int:
        return self._settings.freshness.default_valid_days

    def knowledge(self, name: str | None = None) -> KnowledgeObject:
        """Resolve a framework-coverage object, defaulting to the configured one."""
        return self._registry.coverage(
            name or self._settings.display.default_knowledge
        )

    def threats(self, name: str | None = None) -> ThreatsKnowledge:
        """Resolve a threat catalog, defaulting to the configured one."""
        return self._registry.threats(name or self._settings.display.default_threats)

    def status(
        self,
        name: str | None = None,
        now: datetime | None = None,
    ) -> KnowledgeStatus:
        """Confidence and staleness of any registered knowledge object.

        Framework coverage is classified from its newest detailed evaluation;
        a threat catalog, which has none, from its top-level evaluation date.
        """
        item = self._registry.get(name or self._settings.display.default_knowledge)
        if isinstance(item, KnowledgeObject):
            confidence = confidence_or_unknown(item, now, self.default_valid_days)
        else:
            confidence = evaluation_confidence(item, now, self.default_valid_days)
        return KnowledgeStatus(
            knowledge=item,
            confidence=confidence,
            stale=is_stale(item, now, self.default_valid_days),
        )

    def summarize(
        self,
        name: str | None = None,
        now: datetime | None = None,
    ) -> KnowledgeSummary:
        """Roll-up statistics and freshness for a knowledge object."""
        return summarize(self.knowledge(name), now, self.default_valid_days)

    def audit(
        self, name: str | None = None, *, strict: bool = False
    ) -> IntegrityReport:
        """Run the integrity audit with configured enforcement."""
        return self.audit_object(self.knowledge(name), strict=strict)

    def audit_object(
        self,
        knowledge: KnowledgeObject,
        *,
        strict: bool = False,
    ) -> IntegrityReport:
        """Audit a knowledge object that is not necessarily registered."""
        integrity = self._settings.integrity
        report = audit_knowledge(
            knowledge,
            enforce_score_totals=integrity.enforce_score_totals,
            enforce_coverage_match=integrity.enforce_coverage_match,
            coverage_tolerance=integrity.coverage_tolerance,
            strict=strict,
        )
        logger.info(
            "audit_complete",
            knowledge_id=knowledge.id,
            errors=len(report.errors),
            warnings=len(report.warnings),
        )
        return report

    def timeline(
        self,
        name: str | None = None,
        framework: str | None = None,
    ) -> list[TimelineEntry]:
        """Timeline entries in authored order, optionally for one framework.

        The framework filter is a case-insensitive substring match, so
        ``"atlas"`` selects every MITRE ATLAS entry.
        """
        entries = list(self.knowledge(name).timeline)
        if framework is None:
            return entries
        needle = framework.strip().lower()
        return [entry for entry in entries if needle in entry.framework.lower()]

    def frameworks(
        self,
        name: str | None = None,
        status: FrameworkStatus | None = None,
    ) -> list[Framework]:
        frameworks = list(self.knowledge(name).frameworks)
        if status is None:
            return frameworks
        return [item for item in frameworks if item.status == status]

    def evaluation(self, key: str, name: str | None = None) -> DetailedEvaluation:
        """Detailed evaluation by evaluation key or framework id.

        Raises:
            UnknownKnowledgeError: If neither matches.
        """
        knowledge = self.knowledge(name)
        if key in knowledge.detailed_evaluations:
            return knowledge.detailed_evaluations[key]

        framework = knowledge.framework(key)
        if framework is not None and framework.evaluation_key is not None:
            found = knowledge.detailed_evaluations.get(framework.evaluation_key)
            if found is not None:
                return found

        known = ", ".join(sorted(knowledge.detailed_evaluations)) or "none"
        msg = f"No detailed evaluation {key!r} in {knowledge.id} (known: {known})"
        raise UnknownKnowledgeError(msg)

    def archive_summaries(
        self,
        name: str | None = None,
        now: datetime | None = None,
    ) -> list[ArchiveSummary]:
        """Summaries of archived snapshots, oldest first."""
        snapshots = self._registry.archives(
            name or self._settings.display.default_knowledge
        )
        return [
            ArchiveSummary(
                snapshot_date=snapshot.snapshot_date,
                evaluated_by=snapshot.evaluation.by,
                framework_count=len(snapshot.frameworks),
                average_coverage=average_coverage(snapshot.frameworks),
                stale=is_stale(snapshot, now, self.default_valid_days),
            )
            for snapshot in snapshots
        ]

    def comparison(
        self,
        name: str | None = None,
    ) -> list[tuple[str, DetailedEvaluation]]:
        """Detailed evaluations in comparison-column order, with their labels.

        Raises:
            UnknownKnowledgeError: If a column names a missing evaluation.
        """
        knowledge = self.knowledge(name)
        columns = []
        for label, key in knowledge.comparison_columns.items():
            found = knowledge.detailed_evaluations.get(key)
            if found is None:
                msg = f"Comparison column {label!r} has no evaluation {key!r}"
                raise UnknownKnowledgeError(msg)
            columns.append((label, found))
        return columns

    def shareable(self, view: str, name: str | None = None) -> ShareableView:
        """A shareable headline card by view name.

        Raises:
            UnknownKnowledgeError: If the view does not exist.
        """
        knowledge = self.knowledge(name)
        found = knowledge.shareable_content.get(view.strip().lower())
        if found is None:
            known = ", ".join(knowledge.shareable_content) or "none"
            msg = f"No shareable view {view!r} in {knowledge.id} (known: {known})"
            raise UnknownKnowledgeError(msg)
        return found

    # -- Threat catalog ------------------------------------------------------

    def threat_list(
        self,
        name: str | None = None,
        category: ThreatCategoryName | None = None,
    ) -> list[Threat]:
        """Threats most exploited first, optionally for one primary category."""
        catalog = self.threats(name)
        ranked = threat_views.get_threats_by_exploitation(catalog)
        if category is None:
            return ranked
        return [item for item in ranked if item.category.primary == category]

    def incidents(
        self,
        name: str | None = None,
        uncovered_by: str | None = None,
    ) -> list[Incident]:
        """Incidents newest first, optionally only those a framework missed."""
        catalog = self.threats(name)
        if uncovered_by is not None:
            selected = threat_views.get_framework_coverage(catalog, uncovered_by).none
        else:
            selected = list(catalog.incidents)
        return sorted(selected, key=lambda item: item.date, reverse=True)

    def latest_incident(self, name: str | None = None) -> Incident | None:
        return threat_views.get_latest_incident(self.threats(name))

    def gaps(
        self,
        name: str | None = None,
        *,
        candidates_only: bool = False,
    ) -> list[GapRecord]:
        catalog = self.threats(name)
        if candidates_only:
            return threat_views.get_contribution_candidates(catalog)
        return threat_views.get_all_gaps(catalog)

    def coverage_summary(self, name: str | None = None) -> CoverageSummary:
        return threat_views.compute_coverage_summary(self.threats(name))

    def threat_trends(self, name: str | None = None) -> list[ThreatTrend]:
        trends = threat_views.compute_threat_trends(self.threats(name))
        logger.debug("threat_trends_computed", categories=len(trends))
        return trends

    def evolution(self, name: str | None = None) -> list[EvolutionEvent]:
        return threat_views.get_evolution_timeline(self.threats(name))
