"""Living knowledge objects, freshness, summary, and integrity tooling."""

from living_governance.knowledge.freshness import (
    ConfidenceStatus,
    ConfidenceTier,
    evaluation_confidence,
    get_confidence_status,
    is_stale,
)
from living_governance.knowledge.registry import KnowledgeRegistry, default_registry
from living_governance.knowledge.service import (
    ArchiveSummary,
    KnowledgeService,
    KnowledgeStatus,
)
from living_governance.knowledge.summary import (
    KnowledgeSummary,
    average_coverage,
    count_with_guidance,
    get_latest_change,
)
from living_governance.knowledge.threat_models import ThreatsKnowledge

__all__ = [
    "ArchiveSummary",
    "ConfidenceStatus",
    "ConfidenceTier",
    "KnowledgeRegistry",
    "KnowledgeService",
    "KnowledgeStatus",
    "KnowledgeSummary",
    "ThreatsKnowledge",
    "average_coverage",
    "count_with_guidance",
    "default_registry",
    "evaluation_confidence",
    "get_confidence_status",
    "get_latest_change",
    "is_stale",
]
