"""Immutable models for the agentic-AI threat catalog.

The catalog normalizes threats across taxonomies (OWASP, MITRE ATLAS, the
MCP Top 10), correlates them with published incidents, and records how well
each tracked framework covered every incident.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from living_governance.knowledge.models import (
    Evaluation,
    KnowledgeMetadata,
    Source,
    UTCDateTime,
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Taxonomy(StrEnum):
    """Source taxonomy a canonical threat is mapped to."""

    OWASP_AGENTIC_THREATS = "owasp-agentic-threats"
    OWASP_AGENTIC_TOP10 = "owasp-agentic-top10"
    OWASP_MCP_TOP10 = "owasp-mcp-top10"
    MITRE_ATLAS = "mitre-atlas"
    MITRE_ATTACK = "mitre-attack"
    NIST_AI_RMF = "nist-ai-rmf"
    OTHER = "other"


class MappingRelationship(StrEnum):
    EXACT = "exact"
    OVERLAPPING = "overlapping"
    PARTIAL = "partial"


class ThreatCategoryName(StrEnum):
    """Primary threat categories."""

    MEMORY_AND_CONTEXT = "memory-and-context"
    TOOL_AND_API_ABUSE = "tool-and-api-abuse"
    IDENTITY_AND_PRIVILEGE = "identity-and-privilege"
    MULTI_AGENT = "multi-agent"
    HUMAN_INTERACTION = "human-interaction"
    CODE_EXECUTION = "code-execution"
    DATA_EXFILTRATION = "data-exfiltration"
    BEHAVIORAL = "behavioral"
    COMMUNICATION = "communication"


class Severity(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IncidentType(StrEnum):
    DISCLOSED_ATTACK = "disclosed-attack"
    SECURITY_RESEARCH = "security-research"
    PROOF_OF_CONCEPT = "proof-of-concept"
    CASE_STUDY = "case-study"


class IncidentStatus(StrEnum):
    CONFIRMED = "confirmed"
    REPORTED = "reported"
    DISPUTED = "disputed"


class CoverageLevel(StrEnum):
    """How directly a framework addresses an incident's attack vector."""

    DIRECT = "direct"
    INDIRECT = "indirect"
    NONE = "none"


class ContributionStatus(StrEnum):
    """Progress of a gap reported back to a framework's maintainers."""

    IDENTIFIED = "identified"
    REPORTED = "reported"
    ACKNOWLEDGED = "acknowledged"
    ADDRESSED = "addressed"


class EvolutionEventType(StrEnum):
    TAXONOMY_UPDATE = "taxonomy-update"
    NEW_ATTACK_CATEGORY = "new-attack-category"
    FRAMEWORK_RESPONSE = "framework-response"
    REGULATORY = "regulatory"
    TREND_OBSERVATION = "trend-observation"


class Level(StrEnum):
    """Three-step high/medium/low rating."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Platform(StrEnum):
    AWS = "aws"
    GCP = "gcp"
    AZURE = "azure"
    GENERIC = "generic"


# ---------------------------------------------------------------------------
# Threats
# ---------------------------------------------------------------------------


class Scope(_Frozen):
    """What something applies to, and what it explicitly does not."""

    applies_to: tuple[str, ...] = ()
    does_not_apply_to: tuple[str, ...] = ()


class SourceMapping(_Frozen):
    """Link from a canonical threat to an entry in a source taxonomy."""

    taxonomy: Taxonomy
    source_id: str
    source_name: str
    source_url: str
    mapping_rationale: str
    relationship: MappingRelationship


class ThreatCategory(_Frozen):
    primary: ThreatCategoryName
    secondary: tuple[str, ...] = ()


class Threat(_Frozen):
    """A canonical threat (``TM-NNN``) unifying overlapping taxonomy entries."""

    id: str
    name: str
    description: str
    category: ThreatCategory
    severity: Severity
    severity_rationale: str
    source_mappings: tuple[SourceMapping, ...] = ()
    taxonomy_disagreements: tuple[str, ...] = ()
    scope: Scope = Scope()
    incident_ids: tuple[str, ...] = ()
    mitigation_ids: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Incidents
# ---------------------------------------------------------------------------


class IncidentSource(_Frozen):
    name: str
    url: str
    published_date: UTCDateTime
    organization: str


class CoverageMapping(_Frozen):
    """One framework's coverage of one incident."""

    framework_id: str
    framework_name: str
    coverage: CoverageLevel
    scoring_rationale: str
    specific_guidance: str | None = None


class IncidentGap(_Frozen):
    """A framework that failed to cover an incident it should have."""

    framework_id: str
    framework_name: str
    gap_description: str
    contribution_candidate: bool
    contribution_status: ContributionStatus | None = None


class IncidentConfidence(_Frozen):
    level: Level
    rationale: str


class Incident(_Frozen):
    """A published incident or research finding involving agentic AI."""

    id: str
    title: str
    date: UTCDateTime
    type: IncidentType
    status: IncidentStatus
    summary: str
    impact: str
    threat_ids: tuple[str, ...] = ()
    attack_vector: str
    affected_systems: tuple[str, ...] = ()
    coverage_mappings: tuple[CoverageMapping, ...] = ()
    gaps: tuple[IncidentGap, ...] = ()
    sources: tuple[IncidentSource, ...] = ()
    confidence: IncidentConfidence

    def coverage_for(self, framework_id: str) -> CoverageMapping | None:
        matches = (
            item for item in self.coverage_mappings if item.framework_id == framework_id
        )
        return next(matches, None)


# ---------------------------------------------------------------------------
# Mitigations and evolution
# ---------------------------------------------------------------------------


class MitigationSource(_Frozen):
    organization: str
    document: str
    section: str | None = None
    url: str


class PlatformContext(_Frozen):
    platform: Platform
    services: tuple[str, ...] = ()
    implementation_note: str | None = None


class Mitigation(_Frozen):
    """A curated reference to published mitigation guidance."""

    id: str
    name: str
    description: str
    threat_ids: tuple[str, ...] = ()
    source: MitigationSource
    platform_context: tuple[PlatformContext, ...] = ()


class EventSource(_Frozen):
    name: str
    url: str
    organization: str


class EvolutionEvent(_Frozen):
    """A dated change in the threat landscape."""

    date: UTCDateTime
    type: EvolutionEventType
    title: str
    description: str
    source: EventSource
    related_threat_ids: tuple[str, ...] = ()
    significance: Level
    confidence: Level


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class ThreatsEvaluation(Evaluation):
    update_instructions: str = ""


class Exclusion(_Frozen):
    what: str
    why: str


class Dissent(_Frozen):
    """Known limitations and open questions about the catalog itself."""

    known_limitations: tuple[str, ...] = ()
    deliberate_exclusions: tuple[Exclusion, ...] = ()
    open_questions: tuple[str, ...] = ()


class CatalogMetadata(KnowledgeMetadata):
    version: str


class ThreatsKnowledge(_Frozen):
    """Threats, incidents, mitigations and landscape events as one object."""

    id: str
    name: str
    threats: tuple[Threat, ...] = ()
    incidents: tuple[Incident, ...] = ()
    mitigations: tuple[Mitigation, ...] = ()
    evolution: tuple[EvolutionEvent, ...] = ()
    evaluation: ThreatsEvaluation
    scope: Scope = Scope()
    dissent: Dissent = Dissent()
    insights: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    sources: tuple[Source, ...] = ()
    metadata: CatalogMetadata

    def threat(self, threat_id: str) -> Threat | None:
        return next((item for item in self.threats if item.id == threat_id), None)

    def incident(self, incident_id: str) -> Incident | None:
        return next((item for item in self.incidents if item.id == incident_id), None)
