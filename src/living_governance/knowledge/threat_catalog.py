"""Agentic-AI threat catalog, Q1 2026 seed dataset.

Four canonical threats normalized across OWASP, MITRE ATLAS and the MCP
Top 10, four incidents with per-framework coverage assessments, two curated
mitigations and three landscape events. Framework ids in the coverage
mappings match the framework-coverage knowledge object.
"""

from __future__ import annotations

from datetime import UTC, datetime

from living_governance.knowledge.models import Source
from living_governance.knowledge.threat_models import (
    CatalogMetadata,
    ContributionStatus,
    CoverageLevel,
    CoverageMapping,
    Dissent,
    EventSource,
    EvolutionEvent,
    EvolutionEventType,
    Exclusion,
    Incident,
    IncidentConfidence,
    IncidentGap,
    IncidentSource,
    IncidentStatus,
    IncidentType,
    Level,
    MappingRelationship,
    Mitigation,
    MitigationSource,
    Platform,
    PlatformContext,
    Scope,
    Severity,
    SourceMapping,
    Taxonomy,
    Threat,
    ThreatCategory,
    ThreatCategoryName,
    ThreatsEvaluation,
    ThreatsKnowledge,
)


def _utc(text: str) -> datetime:
    return datetime.fromisoformat(text).replace(tzinfo=UTC)


DIRECT = CoverageLevel.DIRECT
INDIRECT = CoverageLevel.INDIRECT
NONE = CoverageLevel.NONE

OWASP_THREATS_URL = (
    "https://genai.owasp.org/resource/agentic-ai-threats-and-mitigations/"
)
OWASP_TOP10_URL = (
    "https://genai.owasp.org/resource/owasp-top-10-for-agentic-applications-for-2026/"
)
OWASP_MCP_URL = "https://owasp.org/www-project-mcp-top-10/"
OPENCLAW_URL = (
    "https://ctid.mitre.org/blog/2026/02/09/mitre-atlas-openclaw-investigation/"
)

OWASP_GENAI = ("owasp-genai", "OWASP GenAI Security Project")
MITRE_ATLAS = ("mitre-atlas", "MITRE ATLAS")
NIST_AI_RMF = ("nist-ai-rmf", "NIST AI Risk Management Framework")
ISO_42001 = ("iso-42001", "ISO/IEC 42001:2023")
CIS_CONTROLS = ("cis-controls", "CIS Controls")


def _coverage(
    framework: tuple[str, str],
    coverage: CoverageLevel,
    rationale: str,
    guidance: str | None = None,
) -> CoverageMapping:
    framework_id, framework_name = framework
    return CoverageMapping(
        framework_id=framework_id,
        framework_name=framework_name,
        coverage=coverage,
        scoring_rationale=rationale,
        specific_guidance=guidance,
    )


def _gap(
    framework: tuple[str, str],
    description: str,
    *,
    candidate: bool,
    status: ContributionStatus | None = None,
) -> IncidentGap:
    framework_id, framework_name = framework
    return IncidentGap(
        framework_id=framework_id,
        framework_name=framework_name,
        gap_description=description,
        contribution_candidate=candidate,
        contribution_status=status,
    )


# ---------------------------------------------------------------------------
# Threats
# ---------------------------------------------------------------------------

THREATS: tuple[Threat, ...] = (
    Threat(
        id="TM-001",
        name="Memory & Context Poisoning",
        description=(
            "Exploitation of an AI agent's memory systems, both short-term "
            "(context window) and long-term (persistent memory, RAG stores), to "
            "introduce malicious data that alters decision-making. Attackers "
            "manipulate what the agent remembers or retrieves, causing it to act "
            "on false premises."
        ),
        category=ThreatCategory(
            primary=ThreatCategoryName.MEMORY_AND_CONTEXT,
            secondary=("data-exfiltration",),
        ),
        severity=Severity.CRITICAL,
        severity_rationale=(
            "Memory poisoning can persist across sessions and affect all "
            "subsequent agent actions. The attack surface grows with agent "
            "autonomy: a poisoned memory in a multi-agent system can propagate "
            "to downstream agents."
        ),
        source_mappings=(
            SourceMapping(
                taxonomy=Taxonomy.OWASP_AGENTIC_THREATS,
                source_id="T1",
                source_name="Memory Poisoning",
                source_url=OWASP_THREATS_URL,
                mapping_rationale=(
                    "Exact match. OWASP T1 defines memory poisoning as exploiting "
                    "short and long-term memory to introduce malicious data"
                ),
                relationship=MappingRelationship.EXACT,
            ),
            SourceMapping(
                taxonomy=Taxonomy.OWASP_AGENTIC_TOP10,
                source_id="ASI06",
                source_name="Memory & Context Poisoning",
                source_url=OWASP_TOP10_URL,
                mapping_rationale=(
                    "ASI06 broadens scope to include context window manipulation "
                    "alongside persistent memory attacks"
                ),
                relationship=MappingRelationship.OVERLAPPING,
            ),
            SourceMapping(
                taxonomy=Taxonomy.MITRE_ATLAS,
                source_id="AML.T0070",
                source_name="RAG Poisoning",
                source_url="https://atlas.mitre.org/techniques/AML.T0070",
                mapping_rationale=(
                    "ATLAS RAG Poisoning covers the retrieval-augmented generation "
                    "vector specifically, which is one mechanism for memory and "
                    "context poisoning"
                ),
                relationship=MappingRelationship.PARTIAL,
            ),
        ),
        taxonomy_disagreements=(
            "OWASP treats memory poisoning as a single threat category; ATLAS "
            "splits it across multiple techniques (RAG poisoning, context "
            "manipulation, agent memory manipulation) under different tactics",
            "ASI06 includes context window manipulation which OWASP T1 scopes more "
            "narrowly to persistent memory",
        ),
        scope=Scope(
            applies_to=(
                "LLM-based agents with persistent memory",
                "RAG-augmented systems",
                "Multi-turn conversational agents",
                "Agents with shared memory stores",
            ),
            does_not_apply_to=(
                "Stateless single-turn API endpoints",
                "Traditional ML models without memory",
                "Rule-based systems without LLM components",
            ),
        ),
        incident_ids=("INC-001", "INC-003"),
        mitigation_ids=("MIT-001",),
    ),
    Threat(
        id="TM-002",
        name="Tool Misuse & Exploitation",
        description=(
            "Attackers manipulate AI agents to abuse their integrated tools "
            "through deceptive prompts, poisoned tool definitions, or exploitation "
            "of excessive permissions. Includes MCP tool poisoning, credential "
            "harvesting through tool interfaces, and data exfiltration via tool "
            "invocations."
        ),
        category=ThreatCategory(
            primary=ThreatCategoryName.TOOL_AND_API_ABUSE,
            secondary=("data-exfiltration", "identity-and-privilege"),
        ),
        severity=Severity.CRITICAL,
        severity_rationale=(
            "Tool access is the primary mechanism through which agents affect the "
            "real world. Compromised tool usage can lead to data exfiltration, "
            "unauthorized actions, and lateral movement across connected systems."
        ),
        source_mappings=(
            SourceMapping(
                taxonomy=Taxonomy.OWASP_AGENTIC_THREATS,
                source_id="T2",
                source_name="Tool Misuse",
                source_url=OWASP_THREATS_URL,
                mapping_rationale=(
                    "OWASP T2 covers tool misuse including agent hijacking through "
                    "adversarial data leading to unintended tool interactions"
                ),
                relationship=MappingRelationship.EXACT,
            ),
            SourceMapping(
                taxonomy=Taxonomy.OWASP_AGENTIC_TOP10,
                source_id="ASI02",
                source_name="Tool Misuse and Exploitation",
                source_url=OWASP_TOP10_URL,
                mapping_rationale=(
                    "ASI02 directly addresses tool misuse and exploitation as a "
                    "top-10 agentic risk"
                ),
                relationship=MappingRelationship.EXACT,
            ),
            SourceMapping(
                taxonomy=Taxonomy.OWASP_MCP_TOP10,
                source_id="MCP03",
                source_name="Tool Poisoning",
                source_url=OWASP_MCP_URL,
                mapping_rationale=(
                    "MCP03 specifically addresses tool poisoning through the Model "
                    "Context Protocol, a subset of the broader tool misuse category"
                ),
                relationship=MappingRelationship.PARTIAL,
            ),
            SourceMapping(
                taxonomy=Taxonomy.MITRE_ATLAS,
                source_id="AML.T0053",
                source_name="Exploit Public-Facing Application",
                source_url="https://atlas.mitre.org/techniques/AML.T0053",
                mapping_rationale=(
                    "ATLAS T0053 covers exploitation of AI-facing applications "
                    "including tool interfaces"
                ),
                relationship=MappingRelationship.PARTIAL,
            ),
        ),
        taxonomy_disagreements=(
            "OWASP MCP Top 10 treats tool poisoning as MCP-specific; OWASP Agentic "
            "Threats treats tool misuse more broadly across any tool interface",
            "ATLAS distributes tool-related attacks across multiple techniques "
            "(T0053, T0098, T0099) while OWASP bundles them under T2/ASI02",
        ),
        scope=Scope(
            applies_to=(
                "Agents with tool/function calling capabilities",
                "MCP-connected systems",
                "Agents with API access",
                "Code generation agents with execution capabilities",
            ),
            does_not_apply_to=(
                "Agents without tool access",
                "Pure text generation without function calling",
                "Closed-loop systems without external integrations",
            ),
        ),
        incident_ids=("INC-002", "INC-004"),
        mitigation_ids=("MIT-002",),
    ),
    Threat(
        id="TM-003",
        name="Identity & Privilege Abuse",
        description=(
            "Exploitation of authentication and authorization weaknesses in agent "
            "systems. Includes confused deputy attacks where agents perform "
            "unauthorized actions using their elevated privileges, identity "
            "spoofing between agents, and privilege escalation through tool chains."
        ),
        category=ThreatCategory(
            primary=ThreatCategoryName.IDENTITY_AND_PRIVILEGE,
            secondary=("multi-agent",),
        ),
        severity=Severity.HIGH,
        severity_rationale=(
            "Identity and privilege boundaries in agentic systems are "
            "fundamentally different from traditional applications. Agents often "
            "inherit broad permissions and the confused deputy problem is "
            "structural, not incidental."
        ),
        source_mappings=(
            SourceMapping(
                taxonomy=Taxonomy.OWASP_AGENTIC_THREATS,
                source_id="T9",
                source_name="Identity Spoofing & Impersonation",
                source_url=OWASP_THREATS_URL,
                mapping_rationale=(
                    "OWASP T9 covers agent impersonation and identity spoofing, one "
                    "dimension of the broader identity and privilege category"
                ),
                relationship=MappingRelationship.PARTIAL,
            ),
            SourceMapping(
                taxonomy=Taxonomy.OWASP_AGENTIC_TOP10,
                source_id="ASI03",
                source_name="Identity and Privilege Abuse",
                source_url=OWASP_TOP10_URL,
                mapping_rationale=(
                    "ASI03 directly covers the full scope including confused "
                    "deputy, privilege escalation, and identity abuse"
                ),
                relationship=MappingRelationship.EXACT,
            ),
            SourceMapping(
                taxonomy=Taxonomy.MITRE_ATLAS,
                source_id="AML.T0054",
                source_name="LLM Jailbreak",
                source_url="https://atlas.mitre.org/techniques/AML.T0054",
                mapping_rationale=(
                    "ATLAS jailbreak techniques can be used to bypass privilege "
                    "boundaries, but jailbreak itself is broader than identity and "
                    "privilege abuse"
                ),
                relationship=MappingRelationship.PARTIAL,
            ),
        ),
        scope=Scope(
            applies_to=(
                "Agents acting on behalf of users",
                "Multi-agent systems with delegation",
                "Agents with access to privileged APIs or databases",
                "MCP servers with credential access",
            ),
            does_not_apply_to=(
                "Agents with no external access",
                "Systems where agent and user have identical permissions",
                "Read-only agent deployments",
            ),
        ),
        incident_ids=("INC-002",),
        mitigation_ids=("MIT-002",),
    ),
    Threat(
        id="TM-004",
        name="Agent Communication Poisoning",
        description=(
            "Manipulation of communication channels between AI agents in "
            "multi-agent systems to spread false information, disrupt workflows, "
            "or influence decision-making. Includes message tampering, injection "
            "of false inter-agent messages, and exploitation of trust "
            "relationships between agents."
        ),
        category=ThreatCategory(
            primary=ThreatCategoryName.COMMUNICATION,
            secondary=("multi-agent",),
        ),
        severity=Severity.HIGH,
        severity_rationale=(
            "Multi-agent systems increasingly rely on inter-agent communication "
            "for coordination. Poisoned communications can cascade through agent "
            "networks, amplifying the impact beyond the initial compromise."
        ),
        source_mappings=(
            SourceMapping(
                taxonomy=Taxonomy.OWASP_AGENTIC_THREATS,
                source_id="T12",
                source_name="Agent Communication Poisoning",
                source_url=OWASP_THREATS_URL,
                mapping_rationale=(
                    "OWASP T12 is an exact match and covers manipulation of "
                    "inter-agent communication channels"
                ),
                relationship=MappingRelationship.EXACT,
            ),
            SourceMapping(
                taxonomy=Taxonomy.OWASP_AGENTIC_TOP10,
                source_id="ASI07",
                source_name="Insecure Inter-Agent Communication",
                source_url=OWASP_TOP10_URL,
                mapping_rationale=(
                    "ASI07 addresses the broader category of insecure inter-agent "
                    "communication, of which poisoning is the primary attack vector"
                ),
                relationship=MappingRelationship.OVERLAPPING,
            ),
        ),
        scope=Scope(
            applies_to=(
                "Multi-agent systems",
                "Agent orchestration platforms",
                "Systems with inter-agent delegation or messaging",
            ),
            does_not_apply_to=(
                "Single-agent deployments",
                "Agents communicating only with humans",
                "Isolated agents without peer connections",
            ),
        ),
    ),
)


# ---------------------------------------------------------------------------
# Incidents
# ---------------------------------------------------------------------------

INCIDENTS: tuple[Incident, ...] = (
    Incident(
        id="INC-001",
        title="AI Agent Memory Manipulation via Persistent Context Injection",
        date=_utc("2025-10-22"),
        type=IncidentType.SECURITY_RESEARCH,
        status=IncidentStatus.CONFIRMED,
        summary=(
            "Zenity Labs researchers demonstrated techniques for manipulating AI "
            "agent memory systems, showing how persistent context injection could "
            "alter agent behavior across sessions. The research led to "
            "collaboration with MITRE, resulting in 14 new agentic AI techniques "
            "being added to the ATLAS framework."
        ),
        impact=(
            "Demonstrated that agents with persistent memory can be compromised in "
            "ways that persist across sessions, affecting all subsequent "
            "interactions. Led directly to expansion of ATLAS threat coverage."
        ),
        threat_ids=("TM-001",),
        attack_vector=(
            "Injection of malicious content into agent persistent memory stores, "
            "which is then retrieved and acted upon in subsequent sessions."
        ),
        affected_systems=(
            "LLM-based agents with persistent memory",
            "Enterprise copilots with conversation history",
        ),
        coverage_mappings=(
            _coverage(
                OWASP_GENAI,
                DIRECT,
                "ASI06 (Memory & Context Poisoning) directly addresses this attack "
                "vector with specific detection and mitigation guidance",
                "ASI06",
            ),
            _coverage(
                MITRE_ATLAS,
                DIRECT,
                "The research directly led to new ATLAS techniques for agent memory "
                "manipulation; ATLAS now has dedicated coverage",
                "AI Agent Memory Manipulation technique (Oct 2025 addition)",
            ),
            _coverage(
                NIST_AI_RMF,
                INDIRECT,
                "NIST AI RMF addresses data integrity risks generally but has no "
                "specific guidance on agent memory poisoning",
                "MAP and MEASURE functions (general data integrity)",
            ),
            _coverage(
                ISO_42001,
                NONE,
                "Published before agentic AI era; no coverage of agent memory "
                "systems or persistent context attacks",
            ),
            _coverage(
                CIS_CONTROLS,
                NONE,
                "Zero AI-specific content; traditional IT controls do not address "
                "agent memory threats",
            ),
        ),
        gaps=(
            _gap(
                ISO_42001,
                "No recognition of agent memory as an attack surface. Annex A "
                "controls address data quality but not adversarial manipulation of "
                "agent context.",
                candidate=True,
                status=ContributionStatus.IDENTIFIED,
            ),
            # CIS has no AI coverage at all, a broader issue than this gap
            _gap(
                CIS_CONTROLS,
                "Asset inventory (Control 1) does not include AI agent memory "
                "stores. No guidance on protecting agent persistent state.",
                candidate=False,
            ),
        ),
        sources=(
            IncidentSource(
                name="Zenity Labs - Agentic AI Threat Research",
                url="https://www.zenity.io/blog/agentic-ai-threats/",
                published_date=_utc("2025-10-22"),
                organization="Zenity Labs",
            ),
            IncidentSource(
                name="MITRE ATLAS October 2025 Update",
                url="https://atlas.mitre.org/",
                published_date=_utc("2025-10-22"),
                organization="MITRE Corporation",
            ),
        ),
        confidence=IncidentConfidence(
            level=Level.HIGH,
            rationale=(
                "Research published by credible organization (Zenity Labs), "
                "confirmed by MITRE incorporation into ATLAS framework"
            ),
        ),
    ),
    Incident(
        id="INC-002",
        title="OpenClaw Investigation - Agent Techniques from AI-First Ecosystems",
        date=_utc("2026-02-09"),
        type=IncidentType.CASE_STUDY,
        status=IncidentStatus.CONFIRMED,
        summary=(
            "MITRE ATLAS Center for Threat-Informed Defense (CTID) published the "
            "OpenClaw investigation, discovering 7 new agent-specific techniques "
            "by studying real-world AI-first ecosystems. The investigation "
            "analyzed how agents interact with tools, credentials, and external "
            "systems in production environments, revealing attack patterns not "
            "previously cataloged."
        ),
        impact=(
            "Expanded ATLAS with case studies CS0048-CS0051 covering real-world "
            "agent attack patterns. Demonstrated that AI-first ecosystems create "
            "novel attack surfaces not captured by existing threat models."
        ),
        threat_ids=("TM-002", "TM-003"),
        attack_vector=(
            "Multiple vectors discovered: tool credential harvesting, tool data "
            "poisoning, agent clickbait, and malicious command generation through "
            "agent tool interfaces."
        ),
        affected_systems=(
            "AI coding assistants",
            "MCP tool server ecosystems",
            "Agent-to-tool integration layers",
        ),
        coverage_mappings=(
            _coverage(
                OWASP_GENAI,
                DIRECT,
                "ASI02 (Tool Misuse) and ASI03 (Identity and Privilege Abuse) cover "
                "the attack vectors discovered in OpenClaw",
                "ASI02, ASI03",
            ),
            _coverage(
                MITRE_ATLAS,
                DIRECT,
                "OpenClaw findings were incorporated directly into ATLAS as new "
                "techniques and case studies (CS0048-CS0051)",
                "T0098, T0099, T0100, T0102, CS0048-CS0051",
            ),
            _coverage(
                NIST_AI_RMF,
                NONE,
                "Published NIST guidance does not address agent-tool interaction "
                "threats or credential handling in agentic systems",
            ),
            _coverage(
                ISO_42001,
                NONE,
                "Pre-dates agentic AI; no coverage of tool ecosystems, MCP, or "
                "agent credential management",
            ),
            _coverage(
                CIS_CONTROLS,
                NONE,
                "No AI-specific content; traditional access controls do not address "
                "agent-to-tool privilege boundaries",
            ),
        ),
        gaps=(
            _gap(
                NIST_AI_RMF,
                "No guidance on securing agent-tool interactions, credential "
                "delegation to agents, or tool ecosystem trust. COSAiS draft may "
                "eventually address this but nothing published.",
                candidate=True,
                status=ContributionStatus.IDENTIFIED,
            ),
        ),
        sources=(
            IncidentSource(
                name="MITRE ATLAS OpenClaw Investigation",
                url=OPENCLAW_URL,
                published_date=_utc("2026-02-09"),
                organization="MITRE Corporation CTID",
            ),
        ),
        confidence=IncidentConfidence(
            level=Level.HIGH,
            rationale=(
                "Published by MITRE CTID with structured case studies; primary "
                "source with full methodology disclosed"
            ),
        ),
    ),
    Incident(
        id="INC-003",
        title="Persistent Backdoor via RAG Knowledge Base Poisoning",
        date=_utc("2025-09-15"),
        type=IncidentType.SECURITY_RESEARCH,
        status=IncidentStatus.CONFIRMED,
        summary=(
            "Security researchers demonstrated that RAG (Retrieval-Augmented "
            "Generation) knowledge bases used by AI agents can be poisoned by "
            "injecting adversarial documents that persist across sessions. The "
            "poisoned documents contain instructions that, when retrieved, cause "
            "the agent to exfiltrate data or perform unauthorized actions."
        ),
        impact=(
            "Showed that RAG-augmented agents have a persistent attack surface "
            "through their knowledge stores. Unlike prompt injection which requires "
            "per-session exploitation, RAG poisoning creates a durable backdoor."
        ),
        threat_ids=("TM-001",),
        attack_vector=(
            "Injection of adversarial documents into a shared RAG knowledge base. "
            "When the agent retrieves these documents for context, embedded "
            "instructions override intended behavior."
        ),
        affected_systems=(
            "RAG-augmented AI agents",
            "Enterprise knowledge management systems with AI interfaces",
            "Shared document stores accessed by AI agents",
        ),
        coverage_mappings=(
            _coverage(
                OWASP_GENAI,
                DIRECT,
                "ASI06 explicitly covers context poisoning including RAG-based "
                "attacks; OWASP LLM Top 10 also covers data poisoning",
                "ASI06, LLM03 (Supply Chain)",
            ),
            _coverage(
                MITRE_ATLAS,
                DIRECT,
                "ATLAS AML.T0070 (RAG Poisoning) directly covers this technique",
                "AML.T0070",
            ),
            _coverage(
                NIST_AI_RMF,
                INDIRECT,
                "NIST GenAI Profile (600-1) addresses data integrity for GenAI "
                "systems generally but lacks RAG-specific guidance",
                "NIST AI 600-1 data integrity provisions",
            ),
            _coverage(
                ISO_42001,
                INDIRECT,
                "Annex A data quality controls are conceptually relevant but do not "
                "address adversarial RAG poisoning scenarios",
                "Annex A data management controls",
            ),
            _coverage(CIS_CONTROLS, NONE, "No AI or RAG-specific content"),
        ),
        sources=(
            IncidentSource(
                name="MITRE ATLAS - RAG Poisoning Technique",
                url="https://atlas.mitre.org/techniques/AML.T0070",
                published_date=_utc("2025-09-15"),
                organization="MITRE Corporation",
            ),
        ),
        confidence=IncidentConfidence(
            level=Level.MEDIUM,
            rationale=(
                "Based on published ATLAS technique with multiple referenced "
                "studies; specific incident details aggregated from multiple "
                "research papers rather than a single disclosed event"
            ),
        ),
    ),
    Incident(
        id="INC-004",
        title="MCP Tool Server Data Exfiltration via Cursor IDE",
        date=_utc("2025-12-01"),
        type=IncidentType.PROOF_OF_CONCEPT,
        status=IncidentStatus.CONFIRMED,
        summary=(
            "Security researchers demonstrated that malicious MCP tool servers "
            "connected to AI coding assistants (specifically Cursor IDE) could "
            "exfiltrate sensitive data from the development environment. By "
            "poisoning tool definitions, the attacker caused the agent to include "
            "sensitive file contents in tool invocations sent to "
            "attacker-controlled servers."
        ),
        impact=(
            "Demonstrated a practical data exfiltration path through the MCP "
            "protocol in a widely-used AI coding tool. Highlighted that MCP tool "
            "trust is implicitly granted without adequate verification in current "
            "implementations."
        ),
        threat_ids=("TM-002",),
        attack_vector=(
            "Malicious MCP tool server provides poisoned tool definitions that "
            "instruct the agent to include sensitive context (source code, "
            "environment variables, credentials) in tool call parameters, "
            "exfiltrating data to the attacker."
        ),
        affected_systems=(
            "AI coding assistants with MCP support",
            "Development environments with MCP tool servers",
            "Any MCP client that auto-trusts tool definitions",
        ),
        coverage_mappings=(
            _coverage(
                OWASP_GENAI,
                DIRECT,
                "ASI02 covers tool exploitation; OWASP MCP Top 10 (MCP03 Tool "
                "Poisoning) directly addresses this specific attack pattern",
                "ASI02, MCP03",
            ),
            _coverage(
                MITRE_ATLAS,
                DIRECT,
                "ATLAS case studies from OpenClaw investigation cover MCP-based "
                "exfiltration; Tool Invocation Exfiltration technique applies "
                "directly",
                "T0098, T0099 and related case studies",
            ),
            _coverage(
                NIST_AI_RMF,
                NONE,
                "No MCP, tool calling, or agent-tool integration guidance in any "
                "published NIST document",
            ),
            _coverage(
                ISO_42001,
                NONE,
                "Pre-dates MCP protocol and modern agent tool ecosystems entirely",
            ),
            _coverage(CIS_CONTROLS, NONE, "No AI, MCP, or agent-tool coverage"),
        ),
        gaps=(
            _gap(
                NIST_AI_RMF,
                "No guidance on MCP protocol security, tool server trust, or data "
                "exfiltration through agent tool interfaces. This is a growing "
                "attack surface as MCP adoption increases.",
                candidate=True,
                status=ContributionStatus.IDENTIFIED,
            ),
            _gap(
                ISO_42001,
                "No recognition of agent tool ecosystems as requiring security "
                "controls. Supply chain management (Annex A) does not extend to MCP "
                "tool server vetting.",
                candidate=True,
                status=ContributionStatus.IDENTIFIED,
            ),
        ),
        sources=(
            IncidentSource(
                name="Invariant Labs - MCP Security Research",
                url="https://invariantlabs.ai/blog/mcp-security",
                published_date=_utc("2025-12-01"),
                organization="Invariant Labs",
            ),
        ),
        confidence=IncidentConfidence(
            level=Level.HIGH,
            rationale=(
                "Proof-of-concept demonstrated and published by credible security "
                "research organization with reproducible methodology"
            ),
        ),
    ),
)


# ---------------------------------------------------------------------------
# Mitigations
# ---------------------------------------------------------------------------

MITIGATIONS: tuple[Mitigation, ...] = (
    Mitigation(
        id="MIT-001",
        name="Memory Content Validation & Session Isolation",
        description=(
            "Implement validation of content stored in and retrieved from agent "
            "memory systems. Isolate memory between sessions and users. Detect "
            "anomalous memory modifications."
        ),
        threat_ids=("TM-001",),
        source=MitigationSource(
            organization="OWASP",
            document="Agentic AI Threats and Mitigations v1.1",
            section=(
                "T1 Mitigations: Memory content validation, session isolation, "
                "anomaly detection"
            ),
            url=OWASP_THREATS_URL,
        ),
        platform_context=(
            PlatformContext(
                platform=Platform.AWS,
                services=(
                    "Amazon Bedrock Guardrails",
                    "Amazon Bedrock Knowledge Bases",
                ),
                implementation_note=(
                    "Bedrock Guardrails can filter content entering agent context; "
                    "Knowledge Bases provide managed RAG with access controls"
                ),
            ),
            PlatformContext(
                platform=Platform.GENERIC,
                implementation_note=(
                    "Implement memory content hashing, anomaly detection on memory "
                    "writes, and periodic memory sanitization"
                ),
            ),
        ),
    ),
    Mitigation(
        id="MIT-002",
        name="Tool Access Verification & Least Privilege",
        description=(
            "Enforce strict verification of tool access, monitor tool usage "
            "patterns, validate agent instructions before tool execution, and "
            "apply least-privilege principles to agent tool permissions."
        ),
        threat_ids=("TM-002", "TM-003"),
        source=MitigationSource(
            organization="OWASP",
            document="Agentic AI Threats and Mitigations v1.1",
            section=(
                "T2 Mitigations: Tool access verification, usage monitoring, "
                "instruction validation"
            ),
            url=OWASP_THREATS_URL,
        ),
        platform_context=(
            PlatformContext(
                platform=Platform.AWS,
                services=("Amazon Bedrock Agents", "AWS IAM", "Amazon CloudWatch"),
                implementation_note=(
                    "Use Bedrock Agent action groups with scoped IAM roles; monitor "
                    "tool invocations via CloudWatch"
                ),
            ),
            PlatformContext(
                platform=Platform.GENERIC,
                implementation_note=(
                    "Implement tool allowlists, parameter validation, output "
                    "filtering, and audit logging for all tool invocations"
                ),
            ),
        ),
    ),
)


# ---------------------------------------------------------------------------
# Threat landscape evolution
# ---------------------------------------------------------------------------

EVOLUTION: tuple[EvolutionEvent, ...] = (
    EvolutionEvent(
        date=_utc("2025-10-22"),
        type=EvolutionEventType.TAXONOMY_UPDATE,
        title="MITRE ATLAS adds 14 agentic AI techniques",
        description=(
            "Zenity Labs collaboration resulted in 14 new agentic AI techniques "
            "added to ATLAS, including agent context poisoning, memory "
            "manipulation, and tool invocation exfiltration. Largest single "
            "expansion of AI agent threat coverage in any framework."
        ),
        source=EventSource(
            name="MITRE ATLAS October 2025 Update",
            url="https://atlas.mitre.org/",
            organization="MITRE Corporation",
        ),
        related_threat_ids=("TM-001", "TM-002"),
        significance=Level.HIGH,
        confidence=Level.HIGH,
    ),
    EvolutionEvent(
        date=_utc("2025-12-09"),
        type=EvolutionEventType.FRAMEWORK_RESPONSE,
        title="OWASP Top 10 for Agentic Applications 2026 released",
        description=(
            "Created by 100+ expert contributors, ASI01-ASI10 established the "
            "definitive agentic security checklist. Synchronized with Threats & "
            "Mitigations v1.1 taxonomy. Covers the full spectrum from prompt "
            "injection through multi-agent system risks."
        ),
        source=EventSource(
            name="OWASP Agentic Security Initiative",
            url=OWASP_TOP10_URL,
            organization="OWASP Foundation",
        ),
        related_threat_ids=("TM-001", "TM-002", "TM-003", "TM-004"),
        significance=Level.HIGH,
        confidence=Level.HIGH,
    ),
    EvolutionEvent(
        date=_utc("2026-02-09"),
        type=EvolutionEventType.NEW_ATTACK_CATEGORY,
        title="OpenClaw investigation reveals AI-first ecosystem attack patterns",
        description=(
            "MITRE CTID discovered 7 new agent-specific techniques by studying "
            "real-world AI-first ecosystems. Findings published as case studies "
            "CS0048-CS0051, demonstrating that agent tool ecosystems create novel "
            "attack surfaces."
        ),
        source=EventSource(
            name="MITRE ATLAS OpenClaw Investigation",
            url=OPENCLAW_URL,
            organization="MITRE Corporation CTID",
        ),
        related_threat_ids=("TM-002", "TM-003"),
        significance=Level.HIGH,
        confidence=Level.HIGH,
    ),
)


# ---------------------------------------------------------------------------
# Knowledge object
# ---------------------------------------------------------------------------

METHODOLOGY = """\
Threat catalog methodology:

1. THREAT NORMALIZATION
   - Identify distinct threat types across OWASP (T1-T15, ASI01-ASI10,
     MCP01-MCP10) and MITRE ATLAS (84+ techniques)
   - Create canonical entries (TM-NNN) that unify overlapping descriptions
   - Map each canonical entry to source IDs with relationship classification
     (exact/overlapping/partial)
   - Document where sources disagree on scope or categorization

2. INCIDENT SELECTION CRITERIA
   - Must have a published source from a credible organization (security
     research firm, MITRE, OWASP, academic institution, or vendor advisory)
   - Must involve agentic AI specifically (not traditional ML or general LLM
     prompt injection without tool/agent context)
   - Must have enough detail to map to at least one canonical threat and
     assess framework coverage
   - Prioritize diversity across threat categories over depth in any single
     category

3. COVERAGE ASSESSMENT (three-level)
   - Direct: Framework has specific guidance addressing the attack vector
     used in this incident
   - Indirect: Framework has general principles relevant to this attack but
     not specific enough to be actionable
   - None: No relevant coverage
   - Each assessment requires a one-sentence scoring rationale

4. GAP IDENTIFICATION
   - Coverage 'none' on an incident marks a potential gap
   - Gaps are flagged as contribution candidates when the framework's scope
     should logically include the threat AND the gap represents an
     actionable addition (not a fundamental scope mismatch)
"""

UPDATE_INSTRUCTIONS = """\
Monthly review process:

1. CHECK FOR NEW INCIDENTS
   - Monitor MITRE ATLAS GitHub releases for new case studies
   - Check OWASP agentic security initiative for new publications
   - Review security research blogs (Zenity, Invariant Labs, Trail of Bits)
   - Add new incidents following the selection criteria in methodology

2. UPDATE THREAT CATALOG
   - Check if new incidents map to existing TM-NNN entries
   - If a new threat category emerges, create a new TM-NNN entry with source
     mappings
   - Update incident ids on affected threats

3. RE-ASSESS COVERAGE MAPPINGS
   - For new incidents, assess coverage across all tracked frameworks
   - Check if previously-flagged gaps have been addressed by framework updates
   - Update contribution status on gaps where frameworks have responded

4. UPDATE EVOLUTION TIMELINE
   - Add entries for new taxonomy releases, framework updates, or regulatory
     changes
   - Focus on events that change the threat landscape, not routine updates

5. VERIFY EXISTING DATA
   - Check that all source URLs are still accessible
   - Verify incident details haven't been corrected or updated
   - Update confidence levels if new information has emerged
"""

THREATS_KNOWLEDGE = ThreatsKnowledge(
    id="threats-2026-q1",
    name="Agentic AI Threat Catalog",
    threats=THREATS,
    incidents=INCIDENTS,
    mitigations=MITIGATIONS,
    evolution=EVOLUTION,
    evaluation=ThreatsEvaluation(
        date=_utc("2026-02-22"),
        by="@tsynode",
        valid_days=90,
        methodology=METHODOLOGY,
        update_instructions=UPDATE_INSTRUCTIONS,
    ),
    scope=Scope(
        applies_to=(
            "Threats specific to LLM-based agentic AI systems",
            "Incidents involving AI agents with tool calling, memory, or "
            "multi-agent capabilities",
            "Framework coverage assessment for agentic AI threats specifically",
            "MCP protocol security concerns",
        ),
        does_not_apply_to=(
            "Traditional ML adversarial attacks (evasion, model extraction), "
            "covered by ATLAS core",
            "General LLM prompt injection without agent context, covered by OWASP "
            "LLM Top 10",
            "Non-AI cybersecurity threats, covered by ATT&CK and CIS Controls",
            "AI ethics, bias, and fairness concerns (a different domain)",
            "Comprehensive incident database; this is a curated selection "
            "demonstrating cross-reference value",
        ),
    ),
    dissent=Dissent(
        known_limitations=(
            "Seed dataset of 4 incidents creates selection bias, weighted toward "
            "well-documented research over disclosed production attacks",
            "Coverage mappings assessed by a single evaluator; cross-evaluation by "
            "framework experts would improve accuracy",
            "Three-level coverage scale (direct/indirect/none) loses nuance within "
            'each level: "direct" coverage varies significantly in quality',
            "Threat normalization across taxonomies involves judgment calls where "
            "sources genuinely disagree on categorization",
        ),
        deliberate_exclusions=(
            Exclusion(
                what=(
                    "Traditional ML adversarial attacks (evasion, poisoning of "
                    "training data, model extraction)"
                ),
                why=(
                    "Well-covered by ATLAS core and academic literature; including "
                    "them would dilute focus on novel agentic threats"
                ),
            ),
            Exclusion(
                what="General LLM prompt injection without agent/tool context",
                why=(
                    "Covered by OWASP LLM Top 10; only included when prompt "
                    "injection is used as a vector for agentic-specific attacks"
                ),
            ),
            Exclusion(
                what="Effectiveness assessment of mitigations",
                why=(
                    "v1 provides curated references only; original effectiveness "
                    "evaluation planned for later versions to ensure quality"
                ),
            ),
        ),
        open_questions=(
            "Should threat severity be static or computed from incident frequency "
            "and impact?",
            "How should we handle incidents that span multiple threat categories: "
            "weight toward primary vector or count in all?",
            "At what point does the incident count warrant splitting this into "
            "separate knowledge artifacts per threat category?",
        ),
    ),
    insights=(
        "Only OWASP and MITRE ATLAS provide direct coverage for the majority of "
        "agentic AI incidents; other frameworks have significant gaps",
        "Tool misuse and memory poisoning are the most frequently exploited threat "
        "categories in documented incidents",
        "MCP protocol security is an emerging attack surface with active "
        "exploitation but limited framework coverage beyond OWASP",
        "The gap between incident reality and framework coverage is largest for "
        "NIST, ISO 42001, and CIS Controls, which all lack agentic-specific content",
    ),
    recommendations=(
        "Use OWASP Top 10 for Agentic Applications (ASI01-ASI10) as primary "
        "security checklist; it provides direct coverage for all incidents in this "
        "catalog",
        "Use MITRE ATLAS for threat modeling; its technique-level granularity maps "
        "most precisely to real-world attack patterns",
        "Prioritize tool access controls and memory validation, which address the "
        "two most exploited threat categories",
        "Do not rely on ISO 42001 or CIS Controls alone for agentic AI security; "
        "supplement with OWASP and ATLAS",
    ),
    sources=(
        Source(
            name="OWASP Top 10 for Agentic Applications 2026",
            url=OWASP_TOP10_URL,
            date=_utc("2025-12-09"),
        ),
        Source(
            name="OWASP Agentic AI Threats and Mitigations v1.1",
            url=OWASP_THREATS_URL,
            date=_utc("2025-12-09"),
        ),
        Source(
            name="OWASP MCP Top 10 (Beta v0.1)",
            url=OWASP_MCP_URL,
            date=_utc("2025-12-01"),
        ),
        Source(
            name="MITRE ATLAS",
            url="https://atlas.mitre.org/",
            date=_utc("2026-02-09"),
        ),
        Source(
            name="MITRE ATLAS OpenClaw Investigation",
            url=OPENCLAW_URL,
            date=_utc("2026-02-09"),
        ),
        Source(
            name="Zenity Labs - Agentic AI Threat Research",
            url="https://www.zenity.io/blog/agentic-ai-threats/",
            date=_utc("2025-10-22"),
        ),
        Source(
            name="Invariant Labs - MCP Security Research",
            url="https://invariantlabs.ai/blog/mcp-security",
            date=_utc("2025-12-01"),
        ),
    ),
    metadata=CatalogMetadata(
        description=(
            "Agentic AI threats normalized across OWASP, MITRE ATLAS, and MCP "
            "taxonomies, correlated with real-world incidents and framework "
            "coverage gaps"
        ),
        details=(
            "Seed dataset: 4 threats, 4 incidents, 2 mitigations, 3 evolution events",
            "Three-level coverage assessment: direct, indirect, none",
            "Cross-references OWASP (T1-T15, ASI01-ASI10, MCP01-MCP10) and MITRE "
            "ATLAS (84+ techniques)",
            "Gaps flagged as contribution candidates to framework maintainers",
        ),
        category="security",
        tags=(
            "threats",
            "incidents",
            "coverage-gaps",
            "agentic-ai",
            "mcp-security",
            "cross-reference",
        ),
        version="0.1.0",
    ),
)
