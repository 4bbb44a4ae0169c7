"""Derived views over the agentic-AI threat catalog.

Everything here is a pure function of a :class:`ThreatsKnowledge` object:
gap listings, per-framework coverage counts, exploitation rankings and
month-bucketed incident trends per threat category.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum
from fractions import Fraction
from typing import TYPE_CHECKING

from living_governance.knowledge.threat_models import (
    ContributionStatus,
    CoverageLevel,
)

if TYPE_CHECKING:
    from datetime import datetime

    from living_governance.knowledge.threat_models import (
        EvolutionEvent,
        Incident,
        IncidentGap,
        Mitigation,
        Threat,
        ThreatCategoryName,
        ThreatsKnowledge,
    )

MOST_EXPLOITED_LIMIT = 5

# Second half of the observed periods against the first half
ACCELERATING_ABOVE = Fraction(13, 10)
DECLINING_BELOW = Fraction(7, 10)


class Trend(StrEnum):
    """Direction of incident volume for a threat category."""

    ACCELERATING = "accelerating"
    STABLE = "stable"
    DECLINING = "declining"


@dataclass(slots=True)
class GapRecord:
    """An incident gap flattened together with its incident."""

    incident_id: str
    incident_title: str
    incident_date: datetime
    gap: IncidentGap

    @property
    def framework_id(self) -> str:
        return self.gap.framework_id

    @property
    def is_contribution_candidate(self) -> bool:
        return (
            self.gap.contribution_candidate
            and self.gap.contribution_status == ContributionStatus.IDENTIFIED
        )


@dataclass(slots=True)
class FrameworkCoverageCounts:
    """How many incidents one framework covered at each level."""

    framework_id: str
    framework_name: str
    direct: int = 0
    indirect: int = 0
    none: int = 0


@dataclass(slots=True)
class ExploitedThreat:
    threat_id: str
    threat_name: str
    incident_count: int


@dataclass(slots=True)
class CoverageSummary:
    """Catalog-wide incident, gap and coverage roll-up."""

    total_incidents: int
    total_gaps: int
    frameworks: list[FrameworkCoverageCounts] = field(default_factory=list)
    most_exploited: list[ExploitedThreat] = field(default_factory=list)


@dataclass(slots=True)
class IncidentCoverage:
    """Incidents of the catalog partitioned by one framework's coverage."""

    direct: list[Incident] = field(default_factory=list)
    indirect: list[Incident] = field(default_factory=list)
    none: list[Incident] = field(default_factory=list)


@dataclass(slots=True)
class PeriodCount:
    period: str
    count: int


@dataclass(slots=True)
class ThreatTrend:
    """Incident counts per ``YYYY-MM`` period for one threat category."""

    category: ThreatCategoryName
    periods: list[PeriodCount]
    trend: Trend


# ---------------------------------------------------------------------------
# Gaps and coverage
# ---------------------------------------------------------------------------


def get_all_gaps(knowledge: ThreatsKnowledge) -> list[GapRecord]:
    """Every incident gap, in incident then authored order."""
    return [
        GapRecord(
            incident_id=incident.id,
            incident_title=incident.title,
            incident_date=incident.date,
            gap=gap,
        )
        for incident in knowledge.incidents
        for gap in incident.gaps
    ]


def get_contribution_candidates(knowledge: ThreatsKnowledge) -> list[GapRecord]:
    """Gaps flagged as candidates and not yet reported upstream."""
    return [item for item in get_all_gaps(knowledge) if item.is_contribution_candidate]


def compute_coverage_summary(knowledge: ThreatsKnowledge) -> CoverageSummary:
    """Count incidents per framework and coverage level.

    Frameworks appear in the order they are first mentioned by an incident's
    coverage mappings. Only mapped incidents are counted, so a framework that
    an incident never mentions does not gain a ``none``.
    """
    counts: dict[str, FrameworkCoverageCounts] = {}
    for incident in knowledge.incidents:
        for mapping in incident.coverage_mappings:
            entry = counts.setdefault(
                mapping.framework_id,
                FrameworkCoverageCounts(mapping.framework_id, mapping.framework_name),
            )
            if mapping.coverage == CoverageLevel.DIRECT:
                entry.direct += 1
            elif mapping.coverage == CoverageLevel.INDIRECT:
                entry.indirect += 1
            else:
                entry.none += 1

    most_exploited = [
        ExploitedThreat(threat.id, threat.name, len(threat.incident_ids))
        for threat in get_threats_by_exploitation(knowledge)
        if threat.incident_ids
    ]
    return CoverageSummary(
        total_incidents=len(knowledge.incidents),
        total_gaps=len(get_all_gaps(knowledge)),
        frameworks=list(counts.values()),
        most_exploited=most_exploited[:MOST_EXPLOITED_LIMIT],
    )


def get_framework_coverage(
    knowledge: ThreatsKnowledge,
    framework_id: str,
) -> IncidentCoverage:
    """Partition incidents by one framework's coverage level.

    An incident with no mapping for the framework counts as uncovered.
    """
    result = IncidentCoverage()
    for incident in knowledge.incidents:
        mapping = incident.coverage_for(framework_id)
        if mapping is None or mapping.coverage == CoverageLevel.NONE:
            result.none.append(incident)
        elif mapping.coverage == CoverageLevel.DIRECT:
            result.direct.append(incident)
        else:
            result.indirect.append(incident)
    return result


# ---------------------------------------------------------------------------
# Threat lookups
# ---------------------------------------------------------------------------


def get_threats_by_exploitation(knowledge: ThreatsKnowledge) -> list[Threat]:
    """Threats by linked incident count, most exploited first.

    The sort is stable, so ties keep catalog order.
    """
    return sorted(knowledge.threats, key=lambda item: -len(item.incident_ids))


def get_incidents_for_threat(
    knowledge: ThreatsKnowledge, threat_id: str
) -> list[Incident]:
    return [item for item in knowledge.incidents if threat_id in item.threat_ids]


def get_mitigations_for_threat(
    knowledge: ThreatsKnowledge, threat_id: str
) -> list[Mitigation]:
    return [item for item in knowledge.mitigations if threat_id in item.threat_ids]


def get_threats_by_category(
    knowledge: ThreatsKnowledge, category: ThreatCategoryName
) -> list[Threat]:
    """Threats whose primary category matches."""
    return [item for item in knowledge.threats if item.category.primary == category]


# ---------------------------------------------------------------------------
# Trends and timeline
# ---------------------------------------------------------------------------


def classify_trend(periods: list[PeriodCount]) -> Trend:
    """Compare incident volume in the later half of the periods to the earlier.

    With an odd number of periods the middle one belongs to the later half.
    Fewer than two periods is always stable.
    """
    if len(periods) < 2:
        return Trend.STABLE
    mid = len(periods) // 2
    first = sum(item.count for item in periods[:mid])
    second = sum(item.count for item in periods[mid:])
    if second > first * ACCELERATING_ABOVE:
        return Trend.ACCELERATING
    if second < first * DECLINING_BELOW:
        return Trend.DECLINING
    return Trend.STABLE


def compute_threat_trends(knowledge: ThreatsKnowledge) -> list[ThreatTrend]:
    """Month-bucketed incident counts and a trend per primary category.

    An incident linked to several threats counts once for each of their
    categories. Threat ids with no catalog entry are skipped. Categories
    appear in the order they are first reached.
    """
    buckets: dict[ThreatCategoryName, Counter[str]] = {}
    for incident in knowledge.incidents:
        for threat_id in incident.threat_ids:
            threat = knowledge.threat(threat_id)
            if threat is None:
                continue
            counter = buckets.setdefault(threat.category.primary, Counter())
            counter[incident.date.strftime("%Y-%m")] += 1

    trends = []
    for category, counter in buckets.items():
        periods = [PeriodCount(period, counter[period]) for period in sorted(counter)]
        trends.append(ThreatTrend(category, periods, classify_trend(periods)))
    return trends


def get_latest_incident(knowledge: ThreatsKnowledge) -> Incident | None:
    """Most recent incident by date; ``None`` for an empty catalog."""
    if not knowledge.incidents:
        return None
    return max(knowledge.incidents, key=lambda item: item.date)


def get_evolution_timeline(knowledge: ThreatsKnowledge) -> list[EvolutionEvent]:
    """Landscape events, newest first."""
    return sorted(knowledge.evolution, key=lambda item: item.date, reverse=True)
