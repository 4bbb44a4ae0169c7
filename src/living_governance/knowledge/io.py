"""Knowledge export and import helpers."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from living_governance.knowledge.models import KnowledgeObject
from living_governance.knowledge.summary import (
    DANGER_BELOW,
    coverage_percent,
    critical_gap,
    summarize,
)

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path


def export_to_json(path: Path, knowledge: KnowledgeObject) -> None:
    """Write a knowledge object to disk as JSON."""
    path.write_text(knowledge.model_dump_json(indent=2), encoding="utf-8")


def import_from_json(path: Path) -> KnowledgeObject:
    """Load and validate a knowledge object from a JSON file."""
    content = json.loads(path.read_text(encoding="utf-8"))
    return KnowledgeObject.model_validate(content)


def export_to_markdown(
    knowledge: KnowledgeObject,
    now: datetime | None = None,
    default_valid_days: int = 90,
    danger_below: float = DANGER_BELOW,
) -> str:
    """Render a human-readable markdown report of a knowledge object.

    Frameworks scoring below ``danger_below`` list their most critical gap.
    """
    summary = summarize(knowledge, now, default_valid_days)
    confidence = summary.confidence
    evaluation = knowledge.evaluation

    lines: list[str] = [f"# {knowledge.name}", ""]
    lines.append(knowledge.metadata.description)
    lines.extend(["", f"**{confidence.status}** • {summary.headline}", ""])
    lines.append(
        f"Last evaluated {evaluation.date.date().isoformat()} by {evaluation.by}"
    )
    if confidence.days_until_stale > 0:
        lines[-1] += f" • Review in {confidence.days_until_stale} days"

    lines.extend(["", "## Frameworks"])
    if not knowledge.frameworks:
        lines.append("- No frameworks evaluated.")
    for framework in knowledge.frameworks:
        lines.append(
            f"- **{framework.name}** ({framework.organization}): "
            f"{coverage_percent(framework.ai_coverage_score)}% "
            f"[{framework.status.value}]"
        )
        gap = critical_gap(framework, danger_below)
        if gap:
            lines.append(f"  - Critical gap: {gap}")

    lines.extend(["", "## Insights"])
    if not knowledge.insights:
        lines.append("- No insights recorded.")
    lines.extend(f"- {insight}" for insight in knowledge.insights)

    lines.extend(["", "## Recommendations"])
    if not knowledge.recommendations:
        lines.append("- No recommendations recorded.")
    lines.extend(f"- {item}" for item in knowledge.recommendations)

    lines.extend(["", "## Timeline"])
    if not knowledge.timeline:
        lines.append(f"- {summary.latest_change}.")
    for entry in knowledge.timeline:
        lines.append(
            f"- {entry.date.date().isoformat()} **{entry.framework}**: "
            f"{entry.change} ({entry.confidence.value} confidence)"
        )

    return "\n".join(lines).strip() + "\n"
