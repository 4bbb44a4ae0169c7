"""Archived framework-coverage snapshots kept for historical comparison."""

from __future__ import annotations

from datetime import UTC, datetime

from living_governance.knowledge.models import (
    ArchivedFramework,
    ArchivedSnapshot,
    Evaluation,
)

# Before OWASP added tool manipulation coverage
SNAPSHOT_2025_04_15 = ArchivedSnapshot(
    snapshot_date=datetime(2025, 4, 15, tzinfo=UTC),
    evaluation=Evaluation(
        date=datetime(2025, 4, 15, tzinfo=UTC),
        by="@security-researcher",
        valid_days=90,
        methodology=(
            "Reviewed official framework documentation, mapped controls to AI "
            "attack categories"
        ),
    ),
    frameworks=(
        ArchivedFramework(
            id="owasp-top10-llm",
            name="OWASP Top 10 for LLM",
            version="2025",
            ai_coverage_score=0.375,
            categories={
                "mcp-attacks": False,
                "prompt-injection": True,
                "data-poisoning": True,
                "model-theft": True,
                "temporal-drift": False,
                "coordination-attacks": False,
                "tool-manipulation": False,
                "behavior-evolution": False,
            },
            strengths=("Well-documented prompt injection patterns",),
            gaps=("No MCP-specific guidance", "Missing autonomous agent risks"),
        ),
    ),
    insights=(
        "No major framework addresses MCP-specific attacks",
        "Temporal and coordination risks severely underrepresented",
        "Traditional security frameworks retrofitted for AI miss key risks",
        "Gap between compliance requirements and actual AI threats",
    ),
)

FRAMEWORK_COVERAGE_ARCHIVES: tuple[ArchivedSnapshot, ...] = (SNAPSHOT_2025_04_15,)
