"""Security framework AI coverage knowledge, Q1 2026 evaluation.

Scores seven security frameworks against a binary 100-point methodology
for agentic-AI threats. Edit and redeploy this module to update the
knowledge; nothing changes it at runtime.
"""

from __future__ import annotations

from datetime import UTC, datetime

from living_governance.knowledge.models import (
    DetailedEvaluation,
    Evaluation,
    Framework,
    FrameworkStatus,
    KnowledgeMetadata,
    KnowledgeObject,
    ScoreCategory,
    Scores,
    ScoringCriterion,
    ShareableView,
    Source,
    TimelineConfidence,
    TimelineEntry,
)


def _utc(text: str) -> datetime:
    return datetime.fromisoformat(text).replace(tzinfo=UTC)


HIGH = TimelineConfidence.HIGH
MEDIUM = TimelineConfidence.MEDIUM

EVALUATION_DATE = _utc("2026-02-20")
EVALUATOR = "@tsynode"

METHODOLOGY = """\
Binary Scoring Framework for Security Frameworks (100 points total):

1. THREAT IDENTIFICATION (40 points) - Does the framework acknowledge these threats?
   - Memory attacks mentioned (5 pts): Memory poisoning, context manipulation, persistent data attacks
   - Tool/API abuse covered (5 pts): Tool manipulation, excessive permissions, API misuse
   - Privilege escalation discussed (5 pts): Permission boundaries, role compromise, lateral movement
   - Multi-agent threats included (5 pts): Inter-agent attacks, trust exploitation, coordination failures
   - Temporal behaviors acknowledged (5 pts): Behavioral drift, sleeper agents, delayed activation
   - Human manipulation risks (5 pts): Trust exploitation, cognitive overload, social engineering via AI
   - Communication poisoning (5 pts): Message tampering, channel compromise, misinformation spread
   - Identity/auth threats (5 pts): Agent impersonation, identity spoofing, authentication bypass

2. PRACTICAL GUIDANCE (30 points) - Can developers implement defenses?
   - Provides clear patterns (10 pts): Conceptual examples, anti-patterns, implementation guidance
   - Names specific tools (5 pts): Recommends concrete tools, scanners, or services
   - Provides checklists (5 pts): Step-by-step processes, validation criteria
   - Has architecture diagrams (5 pts): Visual representations, data flows, component relationships
   - Offers step-by-step instructions (5 pts): Clear implementation paths

3. EVIDENCE QUALITY (20 points) - Is it based on real data?
   - References credible research (5 pts): Academic papers, industry studies, official reports
   - References real incidents/research (5 pts): Actual attacks, case studies, post-mortems
   - Describes attack patterns clearly (5 pts): Detailed scenarios, attack chains, TTPs
   - Includes detection/monitoring guidance (5 pts): Observables, indicators, monitoring strategies

4. COMPLETENESS (10 points) - Does it cover the full lifecycle?
   - Covers detection methods (5 pts): How to identify threats and attacks
   - Includes response procedures (5 pts): Incident response, remediation, recovery

Scoring interpretation:
- 90-100: Comprehensive coverage, production-ready
- 70-89: Strong foundation, some gaps
- 50-69: Partial coverage, significant gaps
- 30-49: Limited value for agentic AI
- 0-29: No meaningful coverage"""

UPDATE_INSTRUCTIONS = """\
Monthly review process:
1. Check each framework for updates:
   - Use the data_source link if available (GitHub repos, PDFs, data files)
   - Fall back to the url (official website) if no data_source
   - Look for version changes, new releases, or content updates

2. Re-evaluate each framework using the binary scoring methodology above.
   Use the criteria catalog for scoring.

3. Update detailed_evaluations with:
   - New scores for each category
   - Updated breakdown with met/unmet for each criterion
   - Breakdown keys must match the criteria catalog keys
   - New strengths and weaknesses
   - Updated verdict
   - Set evaluation_date to the review date

4. Update the frameworks list:
   - Set ai_coverage_score = total score / 100
   - Update data_source if a better evaluation source is found
   - Update gaps based on evaluation findings
   - Update status (active, applicable, or no-guidance)
   - Update last_framework_update if the framework was revised

5. If a framework has a new version or major update, add a timeline entry:
   - date: framework release/update date
   - framework: framework name
   - change: what the framework added/changed (not our evaluation)

6. Update insights and recommendations based on new findings
7. Run `living-governance audit` before publishing"""


def _criterion(category: ScoreCategory, name: str, points: int = 5) -> ScoringCriterion:
    section = category.value.replace("_", " ").title()
    return ScoringCriterion(
        category=category, name=name, points=points, section=section
    )


_THREAT = ScoreCategory.THREAT_IDENTIFICATION
_GUIDANCE = ScoreCategory.PRACTICAL_GUIDANCE
_EVIDENCE = ScoreCategory.EVIDENCE_QUALITY
_COMPLETE = ScoreCategory.COMPLETENESS

CRITERIA: tuple[ScoringCriterion, ...] = (
    _criterion(_THREAT, "Memory attacks"),
    _criterion(_THREAT, "Tool/API abuse"),
    _criterion(_THREAT, "Privilege escalation"),
    _criterion(_THREAT, "Multi-agent threats"),
    _criterion(_THREAT, "Temporal behaviors"),
    _criterion(_THREAT, "Human manipulation"),
    _criterion(_THREAT, "Communication poisoning"),
    _criterion(_THREAT, "Identity/auth threats"),
    _criterion(_GUIDANCE, "Clear patterns", points=10),
    _criterion(_GUIDANCE, "Specific tools"),
    _criterion(_GUIDANCE, "Checklists"),
    _criterion(_GUIDANCE, "Architecture diagrams"),
    _criterion(_GUIDANCE, "Step-by-step instructions"),
    _criterion(_EVIDENCE, "Credible research"),
    _criterion(_EVIDENCE, "Real incidents"),
    _criterion(_EVIDENCE, "Attack patterns"),
    _criterion(_EVIDENCE, "Detection guidance"),
    _criterion(_COMPLETE, "Detection methods"),
    _criterion(_COMPLETE, "Response procedures"),
)


def _breakdown(met: set[str], *, unknown: bool = False) -> dict[str, bool | str]:
    """Full criterion breakdown: keys in ``met`` are true, the rest false."""
    if unknown:
        return {criterion.key: "unknown" for criterion in CRITERIA}
    return {criterion.key: criterion.key in met for criterion in CRITERIA}


# ---------------------------------------------------------------------------
# Frameworks
# ---------------------------------------------------------------------------

FRAMEWORKS: tuple[Framework, ...] = (
    Framework(
        id="owasp-genai",
        name="OWASP GenAI Security Project",
        organization="OWASP Foundation",
        url="https://genai.owasp.org/",
        data_source="https://genai.owasp.org/resource/owasp-top-10-for-agentic-applications-for-2026/",
        ai_coverage_score=1.0,
        status=FrameworkStatus.ACTIVE,
        gaps=("Quantitative metrics on attack success rates",),
        last_framework_update="2025-12",
        evaluation_key="owasp-agentic-threats-v1",
    ),
    Framework(
        id="nist-ai-rmf",
        name="NIST AI Risk Management Framework",
        organization="NIST (US)",
        url="https://www.nist.gov/itl/ai-risk-management-framework",
        data_source="https://nvlpubs.nist.gov/nistpubs/ai/NIST.AI.100-1.pdf",
        ai_coverage_score=0.30,
        status=FrameworkStatus.APPLICABLE,
        gaps=(
            "Core AI RMF still lacks agentic AI content",
            "COSAiS and Cyber AI Profile still in draft",
            "No MCP or tool calling guidance yet",
            "AI RMF revision in progress per AI Action Plan",
        ),
        last_framework_update="2025-12",
        evaluation_key="nist-ai-rmf-v1",
    ),
    Framework(
        id="iso-27090",
        name="ISO/IEC DIS 27090 (Draft)",
        organization="ISO/IEC",
        url="https://www.iso.org/standard/56581.html",
        ai_coverage_score=0.0,
        # Draft content is not yet actionable
        status=FrameworkStatus.NO_GUIDANCE,
        gaps=(
            "DIS stage - publication expected May 2026",
            "Content not publicly available",
            "Guidance only (no testable requirements)",
            "Unknown coverage of agentic AI threats",
        ),
        last_framework_update="2026-05",
        evaluation_key="iso-27090-draft",
    ),
    Framework(
        id="iso-42001",
        name="ISO/IEC 42001:2023 AI Management Systems",
        organization="ISO/IEC",
        url="https://www.iso.org/standard/42001",
        ai_coverage_score=0.35,
        status=FrameworkStatus.APPLICABLE,
        gaps=(
            "Published before agentic AI emergence",
            "No MCP or tool calling security",
            "Focuses on traditional AI risks",
            "Limited technical security controls",
        ),
        last_framework_update="2023-12",
        evaluation_key="iso-42001-2023",
    ),
    Framework(
        id="mitre-attack",
        name="MITRE ATT&CK",
        organization="MITRE Corporation",
        url="https://attack.mitre.org/",
        data_source="https://github.com/mitre-attack/attack-data-model",
        ai_coverage_score=0.0,
        status=FrameworkStatus.NO_GUIDANCE,
        gaps=(
            "Only T1588.007 (Obtain Capabilities: AI) - no agentic AI coverage",
            "Defers to MITRE ATLAS for AI/ML threats by design",
            "No MCP, tool calling, or agent security",
        ),
        last_framework_update="2025-10",
        evaluation_key="mitre-attack-v15",
    ),
    Framework(
        id="mitre-atlas",
        name="MITRE ATLAS",
        organization="MITRE Corporation",
        url="https://atlas.mitre.org/",
        data_source="https://github.com/mitre-atlas/atlas-data",
        ai_coverage_score=0.90,
        status=FrameworkStatus.ACTIVE,
        gaps=(
            "Limited response/remediation procedures",
            "No temporal behavioral drift coverage",
        ),
        last_framework_update="2026-02",
        evaluation_key="mitre-atlas-v4",
    ),
    Framework(
        id="cis-controls",
        name="CIS Controls",
        organization="Center for Internet Security",
        url="https://www.cisecurity.org/controls",
        data_source="https://www.cisecurity.org/controls/cis-controls-list",
        ai_coverage_score=0.25,
        status=FrameworkStatus.NO_GUIDANCE,
        gaps=(
            "No AI or ML security coverage",
            "18 controls don't address agent threats",
        ),
        last_framework_update="2024-05",
        evaluation_key="cis-controls-v8",
    ),
)


# ---------------------------------------------------------------------------
# Detailed evaluations
# ---------------------------------------------------------------------------

DETAILED_EVALUATIONS: dict[str, DetailedEvaluation] = {
    "owasp-agentic-threats-v1": DetailedEvaluation(
        framework_name=(
            "OWASP Top 10 for Agentic Applications 2026 + Threats & Mitigations v1.1"
        ),
        evaluation_date=EVALUATION_DATE,
        evaluated_by=EVALUATOR,
        scores=Scores(
            threat_identification=40,
            practical_guidance=30,
            evidence_quality=20,
            completeness=10,
            total=100,
        ),
        breakdown=_breakdown({criterion.key for criterion in CRITERIA}),
        strengths=(
            "OWASP Top 10 for Agentic Applications (ASI01-ASI10) released Dec 2025 "
            "with 100+ expert contributors",
            "Threats & Mitigations v1.1 taxonomy synchronized with Top 10",
            "Multi-Agentic System Threat Modeling Guide v1.0 with MAESTRO framework",
            "Comprehensive suite: threat taxonomy, threat modeling, secure dev "
            "guidelines, governance guide",
            "Real-world scenarios for enterprise copilots, IoT, code review, and RPA",
            "Industry-wide adoption as benchmark for agentic AI security",
        ),
        weaknesses=(
            "No production-ready code samples (appropriate for security framework)",
            "Limited quantitative metrics on attack success rates",
            "Rapidly evolving space may outpace document updates",
        ),
        verdict=(
            "OWASP's Agentic AI security suite is the definitive reference for AI "
            "agent security. The Dec 2025 Top 10 for Agentic Applications "
            "(ASI01-ASI10), backed by 100+ experts, combined with the Threats & "
            "Mitigations v1.1 taxonomy and MAESTRO-based threat modeling guide, "
            "provides the most comprehensive and actionable coverage available."
        ),
    ),
    "nist-ai-rmf-v1": DetailedEvaluation(
        framework_name=(
            "NIST AI RMF 1.0 + GenAI Profile + Cyber AI Profile (Draft) + COSAiS (Draft)"
        ),
        evaluation_date=EVALUATION_DATE,
        evaluated_by=EVALUATOR,
        scores=Scores(
            threat_identification=0,
            practical_guidance=20,
            evidence_quality=10,
            completeness=0,
            total=30,
        ),
        breakdown=_breakdown(
            {
                "clear-patterns",
                "checklists",
                "step-by-step-instructions",
                "credible-research",
                "detection-guidance",
            }
        ),
        strengths=(
            "Excellent general AI governance framework",
            "NIST IR 8596 Cyber AI Profile (Dec 2025 draft) aligns CSF 2.0 with AI risks",
            "COSAiS project (Aug 2025) plans SP 800-53 overlays for multi-agent AI systems",
            "AI RMF currently in revision per AI Action Plan",
            "Strong lifecycle management approach",
            "Comprehensive for traditional AI systems",
        ),
        weaknesses=(
            "Core AI RMF 1.0 still lacks agentic AI or autonomous agent content",
            "COSAiS and Cyber AI Profile are drafts, not yet actionable",
            "No Model Context Protocol (MCP) guidance",
            "No tool calling or function calling security",
            "Multi-agent coverage only in concept papers, not published guidance",
        ),
        verdict=(
            "NIST is expanding its AI security ecosystem with the Cyber AI Profile "
            "(IR 8596, Dec 2025 draft) and COSAiS control overlays (which plan to "
            "cover multi-agent systems). However, published guidance still lacks "
            "agentic AI content. The AI RMF revision is underway but not yet "
            "released. Watch this space - NIST is moving in the right direction "
            "but not yet actionable for agent security."
        ),
    ),
    "iso-27090-draft": DetailedEvaluation(
        framework_name="ISO/IEC DIS 27090 - AI Cybersecurity (Draft)",
        evaluation_date=EVALUATION_DATE,
        evaluated_by=EVALUATOR,
        # Cannot score until published
        scores=Scores(
            threat_identification=0,
            practical_guidance=0,
            evidence_quality=0,
            completeness=0,
            total=0,
        ),
        breakdown=_breakdown(set(), unknown=True),
        strengths=(
            "First ISO standard specifically targeting AI cybersecurity",
            "Addresses security threats to AI systems throughout lifecycle",
            "Applicable to all organization types and sizes",
            "ISO standardization brings global recognition and adoption",
        ),
        weaknesses=(
            "Still in Draft International Standard (DIS) stage - publication "
            "expected May 2026",
            "Content not publicly available for evaluation",
            "Unknown coverage of agentic AI and multi-agent systems",
            'Guidance only - no testable "shall" requirements',
            "May not address latest threats like MCP attacks or tool poisoning",
        ),
        verdict=(
            "ISO/IEC 27090 publication is now expected May 2026 with comment "
            "resolution starting June 2026. As guidance (not certifiable "
            "requirements), it will provide best practices for AI cybersecurity "
            "throughout the lifecycle. Its relevance to agentic AI and MCP threats "
            "remains unknown. Track development but rely on OWASP and ATLAS for "
            "current actionable guidance."
        ),
    ),
    "iso-42001-2023": DetailedEvaluation(
        framework_name="ISO/IEC 42001:2023 - AI Management Systems",
        evaluation_date=EVALUATION_DATE,
        evaluated_by=EVALUATOR,
        scores=Scores(
            threat_identification=0,
            practical_guidance=25,
            evidence_quality=10,
            completeness=0,
            total=35,
        ),
        breakdown=_breakdown(
            {
                "clear-patterns",
                "checklists",
                "step-by-step-instructions",
                "credible-research",
                "detection-guidance",
            }
        ),
        strengths=(
            "First published AI management system standard",
            "Comprehensive management system approach (PDCA)",
            "Annex A provides AI-specific controls",
            "Integration with ISO/IEC 27001 for security",
            "Microsoft Copilot achieved certification",
            "Addresses bias, transparency, and accountability",
        ),
        weaknesses=(
            "Published in 2023 - predates agentic AI emergence",
            "No coverage of MCP, tool calling, or function calling",
            "Lacks specific security threat identification",
            "No multi-agent system considerations",
            "Limited technical security controls",
            "Focuses on ethics/governance over security",
        ),
        verdict=(
            "ISO/IEC 42001:2023 provides solid AI governance foundations but lacks "
            "agentic AI security coverage. As a pre-MCP era standard, it addresses "
            "traditional AI risks (bias, transparency) rather than modern agent "
            "threats. Useful for general AI management but insufficient for "
            "securing autonomous agents or multi-agent systems."
        ),
    ),
    "mitre-atlas-v4": DetailedEvaluation(
        framework_name=(
            "MITRE ATLAS - Adversarial Threat Landscape for AI Systems (latest "
            "confirmed tag: v5.1.1, Nov 2025; Jan/Feb 2026 updates applied)"
        ),
        evaluation_date=EVALUATION_DATE,
        evaluated_by=EVALUATOR,
        scores=Scores(
            threat_identification=35,
            practical_guidance=25,
            evidence_quality=20,
            completeness=10,
            total=90,
        ),
        breakdown=_breakdown(
            {criterion.key for criterion in CRITERIA}
            - {"temporal-behaviors", "checklists"}
        ),
        strengths=(
            "Most comprehensive AI/ML threat framework with 16 tactics, 84+ "
            "techniques, 56+ sub-techniques (as of v5.1.0 Nov 2025, plus Jan/Feb "
            "2026 additions)",
            "Oct 2025: 14 new agentic AI techniques added via Zenity Labs "
            "collaboration (v4.6.0/data v5.0.0)",
            "Jan 2026: New agent techniques confirmed: T0098 (Tool Credential "
            "Harvesting), T0099 (Tool Data Poisoning), T0100 (Agent Clickbait), "
            "T0102 (Generate Malicious Commands)",
            "Feb 2026: OpenClaw investigation discovered 7 new agent-specific "
            "techniques (CS0048-CS0051)",
            "v5.1.0 added Lateral Movement tactic (AML.TA0015) and 32+ mitigations "
            "including M0031 (Memory Hardening)",
            "45+ real-world case studies with growing MCP and agent coverage",
            "Active development with monthly updates and strong industry "
            "partnerships (Zenity, CTID)",
        ),
        weaknesses=(
            "No temporal drift or behavioral evolution coverage",
            "Agent techniques still expanding - coverage not yet complete",
            "Focuses on attack patterns more than defensive implementation",
            "No prescriptive checklists (by design - it's a threat framework)",
            "Some Jan 2026 technique IDs (T0103-T0105) and mitigation IDs (M0032, "
            "M0033) unverified from primary sources",
        ),
        verdict=(
            "MITRE ATLAS has transformed into a comprehensive AI agent security "
            "framework. The Oct 2025 Zenity collaboration added 14 agentic "
            "techniques, and Jan/Feb 2026 releases brought further agent and MCP "
            "coverage including the OpenClaw investigation. With 16 tactics, 84+ "
            "techniques, 45+ case studies and growing agent-specific mitigations, "
            "ATLAS now rivals OWASP for agentic threat coverage while providing "
            "the strongest evidence base of any framework."
        ),
    ),
    "cis-controls-v8": DetailedEvaluation(
        framework_name="CIS Critical Security Controls v8.1",
        evaluation_date=EVALUATION_DATE,
        evaluated_by=EVALUATOR,
        scores=Scores(
            threat_identification=0,
            practical_guidance=15,
            evidence_quality=10,
            completeness=0,
            total=25,
        ),
        breakdown=_breakdown(
            {
                "clear-patterns",
                "checklists",
                "step-by-step-instructions",
                "credible-research",
                "real-incidents",
            }
        ),
        strengths=(
            "18 prioritized controls for cyber hygiene",
            "Implementation Groups for different org sizes",
            "Aligns with NIST CSF 2.0 and other frameworks",
            "Strong community adoption and tooling",
            "Version 8.1 adds governance function",
            "Cloud Companion Guide available",
        ),
        weaknesses=(
            "Zero AI or ML security content",
            "No recognition of AI as distinct asset class",
            "No coverage of prompt injection or model attacks",
            "Traditional IT security focus only",
            "No guidance for AI development lifecycle",
            "Asset inventory doesn't include AI models",
        ),
        verdict=(
            "CIS Controls v8.1 provides excellent general cybersecurity guidance "
            "but contains zero AI-specific content. The 18 controls focus entirely "
            "on traditional IT security without recognizing AI systems as "
            "requiring distinct security measures. Organizations using AI must "
            "supplement CIS Controls with AI-specific frameworks like OWASP or ATLAS."
        ),
    ),
    "mitre-attack-v15": DetailedEvaluation(
        framework_name="MITRE ATT&CK v18.1",
        evaluation_date=EVALUATION_DATE,
        evaluated_by=EVALUATOR,
        scores=Scores(
            threat_identification=0,
            practical_guidance=0,
            evidence_quality=0,
            completeness=0,
            total=0,
        ),
        breakdown=_breakdown(set()),
        strengths=(
            "Industry standard for traditional IT threats",
            "Comprehensive adversary tactics and techniques",
            "Strong community and tooling ecosystem",
            "Regular updates and living framework",
            "Used globally by SOCs and threat intel teams",
            "T1588.007 (Obtain Capabilities: AI) added March 2024 - recognizes AI "
            "as adversary resource",
        ),
        weaknesses=(
            "Only one AI sub-technique (T1588.007) - covers adversaries obtaining "
            "AI, not securing AI systems",
            "No agentic AI, multi-agent, or MCP coverage",
            "Explicitly directs users to ATLAS for AI-specific threats",
            "Traditional IT/enterprise focus by design",
            "No plans to expand AI coverage beyond resource development",
        ),
        verdict=(
            "MITRE ATT&CK contains minimal AI content - T1588.007 (Obtain "
            "Capabilities: AI, added March 2024) covers adversaries acquiring AI "
            "capabilities but provides no coverage of securing AI systems, agents, "
            "or MCP. ATT&CK explicitly directs users to MITRE ATLAS for AI/ML "
            "security. Score reflects zero agentic AI coverage, not absence of all "
            "AI recognition."
        ),
    ),
}


# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------

# Authored order; the 2025-12-16 NIST entry intentionally precedes the
# approximate 2025-12-01 MCP Top 10 entry.
TIMELINE: tuple[TimelineEntry, ...] = (
    TimelineEntry(
        date=_utc("2021-05-01"),
        framework="CIS Controls",
        change="CIS Controls v8.0 released - first version with cloud/mobile focus",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2022-03-01"),
        framework="MITRE ATLAS",
        change="MITRE ATLAS v3.0.0 - adapted ATT&CK tactics for ML threats",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2023-01-26"),
        framework="NIST AI RMF",
        change="NIST AI Risk Management Framework 1.0 officially released",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2023-05-01"),
        framework="OWASP Top 10 for LLM",
        change="Project initiated - community effort begins",
        confidence=MEDIUM,
    ),
    TimelineEntry(
        date=_utc("2023-08-01"),
        framework="OWASP Top 10 for LLM",
        change="Version 1.0 released - first official list",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2023-10-16"),
        framework="OWASP Top 10 for LLM",
        change="Version 1.1 released - refined based on feedback",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2023-11-06"),
        framework="MITRE ATLAS",
        change="Major update adding GenAI and LLM-specific techniques",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2023-12-01"),
        framework="ISO 42001",
        change="ISO/IEC 42001:2023 AI Management System published",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2024-06-25"),
        framework="CIS Controls",
        change="Version 8.1 released - added governance security function",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2024-07-26"),
        framework="NIST AI RMF",
        change="Generative AI Profile (NIST-AI-600-1) released",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2024-11-18"),
        framework="OWASP Top 10 for LLM",
        change="Version 2025 released - adds vectors, system prompts, misinformation",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2024-12-01"),
        framework="OWASP Agentic Security",
        change="Agentic Security Initiative formally announced",
        confidence=MEDIUM,
    ),
    TimelineEntry(
        date=_utc("2025-02-01"),
        framework="OWASP Agentic Security",
        change="Agentic AI Threats and Mitigations v1.0a published",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2025-04-16"),
        framework="ISO 27090",
        change="Draft International Standard ballot initiated - voting through July",
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2025-06-01"),
        framework="OWASP MCP Top 10",
        change=(
            "Phase 1: Drafting initiated (v0.0.0) - defining MCP-specific "
            "vulnerabilities"
        ),
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2025-08-14"),
        framework="NIST AI RMF",
        change=(
            "COSAiS concept paper released - SP 800-53 control overlays for AI "
            "including multi-agent systems"
        ),
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2025-10-01"),
        framework="MITRE ATT&CK",
        change=(
            "ATT&CK v18.1 released - added CI/CD, Kubernetes, cloud DB techniques. "
            "Has T1588.007 (Obtain Capabilities: AI) since March 2024 but no "
            "agentic AI content"
        ),
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2025-10-22"),
        framework="MITRE ATLAS",
        change=(
            "14 new agentic AI techniques added via Zenity Labs collaboration - "
            "agent context poisoning, memory manipulation, tool invocation "
            "exfiltration"
        ),
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2025-12-09"),
        framework="OWASP Agentic Security",
        change=(
            "OWASP Top 10 for Agentic Applications 2026 released (ASI01-ASI10) + "
            "Threats & Mitigations v1.1 taxonomy"
        ),
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2025-12-16"),
        framework="NIST AI RMF",
        change=(
            "Cyber AI Profile (NIST IR 8596) preliminary draft released - aligns "
            "CSF 2.0 with AI risks"
        ),
        confidence=HIGH,
    ),
    TimelineEntry(
        date=_utc("2025-12-01"),
        framework="OWASP MCP Top 10",
        change=(
            "Phase 3: Beta release (v0.1) - 10 MCP vulnerabilities defined "
            "(MCP01-MCP10)"
        ),
        confidence=MEDIUM,
    ),
    TimelineEntry(
        date=_utc("2026-01-15"),
        framework="MITRE ATLAS",
        change=(
            "ATLAS January 2026 release - new agent techniques confirmed: T0098 "
            "(Tool Credential Harvesting), T0099 (Tool Data Poisoning), T0100 "
            "(Agent Clickbait), T0102 (Generate Malicious Commands). Now 16 "
            "tactics, 84+ techniques, 56+ sub-techniques"
        ),
        confidence=MEDIUM,
    ),
    TimelineEntry(
        date=_utc("2026-02-09"),
        framework="MITRE ATLAS",
        change=(
            "OpenClaw investigation published - discovered 7 new agent-specific "
            "techniques from AI-first ecosystems"
        ),
        confidence=HIGH,
    ),
)


# ---------------------------------------------------------------------------
# Knowledge object
# ---------------------------------------------------------------------------

# Column label -> detailed evaluation key for the side-by-side criteria matrix
COMPARISON_COLUMNS: dict[str, str] = {
    "owasp": "owasp-agentic-threats-v1",
    "nist": "nist-ai-rmf-v1",
    "iso27090": "iso-27090-draft",
    "iso42001": "iso-42001-2023",
    "atlas": "mitre-atlas-v4",
    "attack": "mitre-attack-v15",
    "cis": "cis-controls-v8",
}

SHAREABLE_CONTENT: dict[str, ShareableView] = {
    "main": ShareableView(
        title="AI Framework Coverage Analysis",
        headline="Two Frameworks Now Lead",
        insights=("Only 2 of 7 security frameworks score above 70% for AI threats",),
        key_metric="2 of 7 Ready",
        visual_type="ranking",
    ),
    "methodology": ShareableView(
        title="Framework Evaluation Methodology",
        headline="Binary Scoring Reveals Truth",
        insights=(
            "OWASP: 100/100, ATLAS: 90/100 (up from 75), NIST: 30/100",
            "Most frameworks still fail threat identification (40 points)",
            "Binary scoring across 19 criteria exposes gaps",
        ),
        key_metric="100-Point Scale",
        visual_type="matrix",
    ),
    "cloud": ShareableView(
        title="AWS Implementation Guide",
        headline="Deploy Frameworks with 5 Services",
        insights=("Security Hub -> NIST, WAF -> OWASP, GuardDuty -> MITRE",),
        key_metric="5 Services",
        visual_type="aws",
    ),
    "timeline": ShareableView(
        title="AI Security Timeline 2021-2026",
        headline="2025 Was the Agentic AI Year",
        insights=(
            "From 1 to 7 frameworks in 5 years",
            "2025: OWASP Agentic Top 10, ATLAS adds 14 agent techniques, NIST "
            "drafts AI overlays",
            "2026: ATLAS expands to 16 tactics / 84+ techniques, OpenClaw "
            "investigation",
        ),
        key_metric="5-Year Evolution",
        visual_type="timeline",
    ),
}


FRAMEWORK_COVERAGE = KnowledgeObject(
    id="framework-coverage-2026-q1",
    name="Security Framework AI Coverage Analysis",
    evaluation=Evaluation(
        date=EVALUATION_DATE,
        by=EVALUATOR,
        valid_days=90,
        methodology=METHODOLOGY,
    ),
    frameworks=FRAMEWORKS,
    detailed_evaluations=DETAILED_EVALUATIONS,
    timeline=TIMELINE,
    metadata=KnowledgeMetadata(
        description=(
            "Shows how well security frameworks address AI and MCP-specific threats"
        ),
        details=(
            "Evaluated February 2026 with latest framework versions",
            "OWASP Top 10 for Agentic Applications (Dec 2025) and MITRE ATLAS "
            "(16 tactics, 84+ techniques) lead coverage",
            "ATLAS now includes MCP-specific case studies, 14+ agentic techniques "
            "(Oct 2025), and OpenClaw investigation (Feb 2026)",
            "OWASP MCP Top 10 in beta (v0.1) with 10 defined vulnerabilities",
            "Color-coded by coverage: red (<40%), yellow (40-70%), green (>70%)",
        ),
        category="compliance",
        tags=(
            "frameworks",
            "compliance",
            "ai-security",
            "mcp-security",
            "agentic-ai",
            "gap-analysis",
        ),
    ),
    criteria=CRITERIA,
    insights=(
        "Two frameworks now lead: OWASP (100/100) and MITRE ATLAS (90/100) - up "
        "from one in mid-2025",
        "ATLAS expanded massively: 14 agentic techniques (Oct 2025), MCP coverage "
        "+ OpenClaw investigation (Feb 2026) - now 16 tactics, 84+ techniques",
        "OWASP Top 10 for Agentic Applications (Dec 2025) created by 100+ experts "
        "is the definitive agentic security list",
        "NIST is building AI security infrastructure (Cyber AI Profile, COSAiS) "
        "but published docs still lack agentic content",
        "ISO/IEC 42001:2023 unchanged since 2023 - predates agentic AI era",
        "CIS Controls has zero AI content; ATT&CK has minimal AI (T1588.007) but "
        "no agentic coverage - defers to ATLAS by design",
        "OWASP MCP Top 10 reached beta (v0.1) with 10 defined MCP vulnerabilities",
        "EU AI Act enforcement begins Aug 2 2026 (fines up to €35M / 7% global "
        "turnover) - ENISA Multilayer Framework for AI Cybersecurity (2023) "
        "provides practices guidance",
    ),
    recommendations=(
        "Use OWASP Top 10 for Agentic Applications (ASI01-ASI10) as primary "
        "agentic security checklist",
        "Use MITRE ATLAS for threat modeling - now 16 tactics, 84+ techniques with "
        "MCP and agent coverage",
        "Apply MAESTRO framework from OWASP Multi-Agentic System Threat Modeling "
        "Guide for MAS",
        "Track NIST COSAiS and Cyber AI Profile for upcoming SP 800-53 AI overlays",
        "Use OWASP MCP Top 10 (beta) for Model Context Protocol-specific security",
        "Prepare for EU AI Act compliance by Aug 2 2026 using ENISA Multilayer "
        "Framework for Good Cybersecurity Practices for AI",
    ),
    sources=(
        Source(
            name="OWASP GenAI Project Site",
            url="https://genai.owasp.org/",
            date=_utc("2026-02-20"),
        ),
        Source(
            name="OWASP Top 10 for Agentic Applications 2026",
            url="https://genai.owasp.org/resource/owasp-top-10-for-agentic-applications-for-2026/",
            date=_utc("2025-12-09"),
        ),
        Source(
            name="OWASP Agentic AI Threats and Mitigations v1.1",
            url="https://genai.owasp.org/resource/agentic-ai-threats-and-mitigations/",
            date=_utc("2025-12-09"),
        ),
        Source(
            name="OWASP Multi-Agentic System Threat Modeling Guide v1.0",
            url="https://genai.owasp.org/resource/multi-agentic-system-threat-modeling-guide-v1-0/",
            date=_utc("2025-04-01"),
        ),
        Source(
            name="OWASP MCP Top 10 (Beta v0.1)",
            url="https://owasp.org/www-project-mcp-top-10/",
            date=_utc("2025-12-01"),
        ),
        Source(
            name="MITRE ATLAS CHANGELOG (Jan 2026 update)",
            url="https://github.com/mitre-atlas/atlas-data/blob/main/CHANGELOG.md",
            date=_utc("2026-01-15"),
        ),
        Source(
            name="MITRE ATLAS OpenClaw Investigation",
            url="https://ctid.mitre.org/blog/2026/02/09/mitre-atlas-openclaw-investigation/",
            date=_utc("2026-02-09"),
        ),
        Source(
            name="NIST AI Risk Management Framework 1.0",
            url="https://nvlpubs.nist.gov/nistpubs/ai/NIST.AI.100-1.pdf",
            date=_utc("2023-01-26"),
        ),
        Source(
            name="NIST Cyber AI Profile (IR 8596 Draft)",
            url="https://csrc.nist.gov/pubs/ir/8596/iprd",
            date=_utc("2025-12-16"),
        ),
        Source(
            name="NIST COSAiS - Control Overlays for AI",
            url="https://csrc.nist.gov/projects/cosais",
            date=_utc("2025-08-14"),
        ),
    ),
    update_instructions=UPDATE_INSTRUCTIONS,
    comparison_columns=COMPARISON_COLUMNS,
    shareable_content=SHAREABLE_CONTENT,
)
