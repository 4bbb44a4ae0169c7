"""Typer CLI entry point for living-governance."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Annotated, Any

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from living_governance import __version__
from living_governance.config import Settings, format_validation_error
from living_governance.exceptions import IntegrityError, LivingGovernanceError
from living_governance.knowledge.integrity import IssueSeverity
from living_governance.knowledge.io import (
    export_to_json,
    export_to_markdown,
    import_from_json,
)
from living_governance.knowledge.models import CriterionState, FrameworkStatus
from living_governance.knowledge.registry import default_registry
from living_governance.knowledge.service import KnowledgeService
from living_governance.knowledge.summary import (
    CoverageBand,
    coverage_band,
    coverage_percent,
    critical_gap,
)
from living_governance.knowledge.threat_models import Severity, ThreatCategoryName
from living_governance.logging import configure_logging, knowledge_logging_context

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="living-governance",
    help="Living knowledge base for AI security framework coverage.",
    no_args_is_help=True,
)

_BAND_STYLE = {
    CoverageBand.DANGER: "red",
    CoverageBand.WARNING: "yellow",
    CoverageBand.SUCCESS: "green",
}

_STATUS_BADGE = {
    FrameworkStatus.ACTIVE: "[green]active[/green]",
    FrameworkStatus.APPLICABLE: "[yellow]applicable[/yellow]",
    FrameworkStatus.NO_GUIDANCE: "[red]no-guidance[/red]",
}

_CRITERION_BADGE = {
    CriterionState.MET: "[green]met[/green]",
    CriterionState.UNMET: "[red]unmet[/red]",
    CriterionState.UNKNOWN: "[dim]unknown[/dim]",
}

_CRITERION_MARK = {
    CriterionState.MET: "[green]yes[/green]",
    CriterionState.UNMET: "[red]no[/red]",
    CriterionState.UNKNOWN: "[dim]?[/dim]",
}

_SEVERITY_STYLE = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "green",
}

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to config YAML file."),
]
AsOfOption = Annotated[
    str | None,
    typer.Option(
        "--as-of",
        help="ISO date or timestamp to evaluate freshness against (default: now).",
    ),
]
KnowledgeOption = Annotated[
    str | None,
    typer.Option(
        "--knowledge",
        "-k",
        help="Knowledge name or id (default: display.default_knowledge).",
    ),
]
CatalogOption = Annotated[
    str | None,
    typer.Option(
        "--knowledge",
        "-k",
        help="Threat catalog name or id (default: display.default_threats).",
    ),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_settings(
    config_path: Path | None = None,
    **overrides: Any,
) -> Settings:
    """Load settings with error handling and user-friendly messages."""
    try:
        return Settings.load(config_path=config_path, **overrides)
    except ValidationError as exc:
        err_console.print(
            Panel(
                format_validation_error(exc),
                title="Configuration Error",
                border_style="red",
            )
        )
        raise typer.Exit(code=1) from exc


def _build_service(config_path: Path | None) -> tuple[Settings, KnowledgeService]:
    settings = _load_settings(config_path)
    configure_logging(
        settings.logging.level,
        settings.logging.format,
        settings.logging.file,
    )
    return settings, KnowledgeService(default_registry(), settings)


def _parse_as_of(raw: str | None) -> datetime | None:
    """Parse an ``--as-of`` value; naive values are taken as UTC."""
    if raw is None:
        return None
    try:
        parsed = datetime.fromisoformat(raw.strip())
    except ValueError as exc:
        raise typer.BadParameter(
            f"Invalid --as-of value {raw!r}; expected an ISO date like 2026-03-01."
        ) from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _fail(title: str, exc: Exception) -> typer.Exit:
    err_console.print(Panel(str(exc), title=title, border_style="red"))
    return typer.Exit(code=1)


def _coverage_cell(score: float, settings: Settings) -> str:
    band = coverage_band(
        score,
        settings.display.danger_below,
        settings.display.warning_below,
    )
    style = _BAND_STYLE[band]
    return f"[{style}]{coverage_percent(score)}%[/{style}]"


# ---------------------------------------------------------------------------
# Version callback
# ---------------------------------------------------------------------------


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold]living-governance[/bold] {__version__}")
        raise typer.Exit


@app.callback()
def common(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Living-governance global options."""


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("list")
def list_frameworks(
    status: Annotated[
        FrameworkStatus | None,
        typer.Option("--status", help="Only show frameworks with this status."),
    ] = None,
    knowledge: KnowledgeOption = None,
    config: ConfigOption = None,
) -> None:
    """List evaluated frameworks with coverage and status."""
    settings, service = _build_service(config)
    try:
        frameworks = service.frameworks(knowledge, status=status)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    if not frameworks:
        console.print("[yellow]No frameworks match.[/yellow]")
        return

    table = Table(title="Framework Coverage", show_lines=True)
    table.add_column("Framework", style="cyan")
    table.add_column("Organization")
    table.add_column("Coverage", justify="right")
    table.add_column("Status", justify="center")
    table.add_column("Critical gap")
    for framework in frameworks:
        gap = critical_gap(framework, settings.display.danger_below)
        table.add_row(
            framework.name,
            framework.organization,
            _coverage_cell(framework.ai_coverage_score, settings),
            _STATUS_BADGE[framework.status],
            gap or "",
        )
    console.print(table)


@app.command()
def status(
    knowledge: KnowledgeOption = None,
    as_of: AsOfOption = None,
    config: ConfigOption = None,
) -> None:
    """Show confidence and staleness of a knowledge object."""
    now = _parse_as_of(as_of)
    _, service = _build_service(config)
    try:
        result = service.status(knowledge, now=now)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    item = result.knowledge
    confidence = result.confidence
    evaluated = item.evaluation
    footer = f"Last evaluated: {evaluated.date.date().isoformat()} by {evaluated.by}"
    if confidence.days_until_stale > 0:
        footer += f" • Review in {confidence.days_until_stale} days"

    border = "red" if result.stale else "green"
    console.print(
        Panel(
            f"[bold]{confidence.status}[/bold] "
            f"(confidence {confidence.confidence:.1f})\n"
            f"Stale: {'yes' if result.stale else 'no'}\n"
            f"{footer}",
            title=item.name,
            border_style=border,
        )
    )


@app.command()
def summary(
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Emit machine-readable JSON."),
    ] = False,
    knowledge: KnowledgeOption = None,
    as_of: AsOfOption = None,
    config: ConfigOption = None,
) -> None:
    """Show roll-up statistics for a knowledge object."""
    now = _parse_as_of(as_of)
    _, service = _build_service(config)
    try:
        result = service.summarize(knowledge, now=now)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    if as_json:
        payload = {
            "knowledge_id": result.knowledge_id,
            "name": result.name,
            "framework_count": result.framework_count,
            "with_guidance": result.with_guidance,
            "average_coverage": result.average_coverage,
            "latest_change": result.latest_change,
            "confidence": result.confidence.model_dump(mode="json"),
            "stale": result.stale,
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title=result.name, show_lines=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value")
    table.add_row("Frameworks", str(result.framework_count))
    table.add_row("With AI guidance", str(result.with_guidance))
    table.add_row("Average coverage", f"{result.average_coverage}%")
    table.add_row("Confidence", result.confidence.status)
    table.add_row("Latest change", result.latest_change)
    console.print(table)
    console.print(result.headline)


@app.command()
def evaluation(
    key: Annotated[
        str,
        typer.Argument(help="Evaluation key or framework id (e.g. mitre-atlas)."),
    ],
    knowledge: KnowledgeOption = None,
    config: ConfigOption = None,
) -> None:
    """Show the detailed scoring of one framework evaluation."""
    _, service = _build_service(config)
    try:
        item = service.knowledge(knowledge)
        detail = service.evaluation(key, knowledge)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    scores = detail.scores
    console.print(
        Panel(
            f"Evaluated {detail.evaluation_date.date().isoformat()} "
            f"by {detail.evaluated_by}\n"
            f"Total: [bold]{scores.total}/100[/bold]",
            title=detail.framework_name,
            border_style="cyan",
        )
    )

    table = Table(title="Scores", show_lines=True)
    table.add_column("Criterion", style="cyan")
    table.add_column("Points", justify="right")
    table.add_column("Result", justify="center")
    for criterion in item.criteria:
        state = detail.breakdown.get(criterion.key)
        table.add_row(
            f"{criterion.section}: {criterion.name}",
            str(criterion.points),
            _CRITERION_BADGE[state] if state is not None else "[dim]-[/dim]",
        )
    for category, points in scores.by_category().items():
        table.add_row(f"[bold]{category.value}[/bold]", str(points), "")
    console.print(table)

    if detail.strengths:
        console.print("[bold]Strengths[/bold]")
        for line in detail.strengths:
            console.print(f"- {line}")
    if detail.weaknesses:
        console.print("[bold]Weaknesses[/bold]")
        for line in detail.weaknesses:
            console.print(f"- {line}")
    if detail.verdict:
        console.print(Panel(detail.verdict, title="Verdict", border_style="green"))


@app.command()
def timeline(
    framework: Annotated[
        str | None,
        typer.Option("--framework", "-f", help="Filter by framework name."),
    ] = None,
    knowledge: KnowledgeOption = None,
    config: ConfigOption = None,
) -> None:
    """Show framework change history in authored order."""
    _, service = _build_service(config)
    try:
        entries = service.timeline(knowledge, framework=framework)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    if not entries:
        console.print("[yellow]No timeline entries match.[/yellow]")
        return

    table = Table(title="Framework Timeline", show_lines=True)
    table.add_column("Date", style="cyan")
    table.add_column("Framework")
    table.add_column("Change")
    table.add_column("Confidence", justify="center")
    for entry in entries:
        table.add_row(
            entry.date.date().isoformat(),
            entry.framework,
            entry.change,
            entry.confidence.value,
        )
    console.print(table)


@app.command()
def audit(
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail on the first enforced integrity error."),
    ] = False,
    file: Annotated[
        Path | None,
        typer.Option("--file", help="Audit an exported knowledge JSON file instead."),
    ] = None,
    knowledge: KnowledgeOption = None,
    config: ConfigOption = None,
) -> None:
    """Check authored knowledge for editorial integrity issues."""
    _, service = _build_service(config)
    try:
        if file is not None:
            source = file.expanduser().resolve()
            if not source.exists():
                raise typer.BadParameter(f"Knowledge file not found: {source}")
            try:
                item = import_from_json(source)
            except (ValidationError, json.JSONDecodeError) as exc:
                raise _fail("Invalid Knowledge File", exc) from exc
        else:
            item = service.knowledge(knowledge)

        with knowledge_logging_context(item.id):
            report = service.audit_object(item, strict=strict)
    except IntegrityError as exc:
        raise _fail("Integrity Error", exc) from exc
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    if not report.issues:
        console.print(f"[green]No integrity issues in {report.knowledge_id}.[/green]")
        raise typer.Exit(code=report.exit_code)

    severity_style = {
        IssueSeverity.WARNING: "[yellow]WARN[/yellow]",
        IssueSeverity.ERROR: "[red]ERROR[/red]",
    }
    table = Table(title=f"Integrity Audit: {report.knowledge_id}", show_lines=True)
    table.add_column("Subject", style="cyan")
    table.add_column("Check")
    table.add_column("Severity", justify="center")
    table.add_column("Message")
    for issue in report.issues:
        table.add_row(
            issue.subject,
            issue.code,
            severity_style[issue.severity],
            issue.message,
        )
    console.print(table)
    console.print(
        f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)"
    )
    raise typer.Exit(code=report.exit_code)


@app.command()
def archives(
    knowledge: KnowledgeOption = None,
    as_of: AsOfOption = None,
    config: ConfigOption = None,
) -> None:
    """List archived snapshots kept for historical comparison."""
    now = _parse_as_of(as_of)
    _, service = _build_service(config)
    try:
        snapshots = service.archive_summaries(knowledge, now=now)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    if not snapshots:
        console.print("[yellow]No archived snapshots.[/yellow]")
        return

    table = Table(title="Archived Snapshots", show_lines=True)
    table.add_column("Snapshot", style="cyan")
    table.add_column("Evaluated by")
    table.add_column("Frameworks", justify="right")
    table.add_column("Average coverage", justify="right")
    table.add_column("Stale", justify="center")
    for item in snapshots:
        table.add_row(
            item.snapshot_date.date().isoformat(),
            item.evaluated_by,
            str(item.framework_count),
            f"{item.average_coverage}%",
            "[red]yes[/red]" if item.stale else "[green]no[/green]",
        )
    console.print(table)


@app.command()
def export(
    output: Annotated[
        Path,
        typer.Argument(help="Destination export file (.json or .md)."),
    ],
    export_format: Annotated[
        str,
        typer.Option("--format", help="Export format: json or md."),
    ] = "json",
    knowledge: KnowledgeOption = None,
    as_of: AsOfOption = None,
    config: ConfigOption = None,
) -> None:
    """Export a knowledge object as JSON or a markdown report."""
    normalized_format = export_format.strip().lower()
    if normalized_format not in {"json", "md"}:
        raise typer.BadParameter("Format must be 'json' or 'md'.")

    now = _parse_as_of(as_of)
    settings, service = _build_service(config)
    try:
        item = service.knowledge(knowledge)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    output_path = output.expanduser().resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if normalized_format == "json":
        export_to_json(output_path, item)
    else:
        output_path.write_text(
            export_to_markdown(
                item,
                now,
                settings.freshness.default_valid_days,
                settings.display.danger_below,
            ),
            encoding="utf-8",
        )

    logger.info("knowledge_exported", knowledge_id=item.id, path=str(output_path))
    console.print(f"[green]Knowledge exported:[/green] {output_path}")


@app.command()
def compare(
    knowledge: KnowledgeOption = None,
    config: ConfigOption = None,
) -> None:
    """Compare criterion results across frameworks side by side."""
    _, service = _build_service(config)
    try:
        item = service.knowledge(knowledge)
        columns = service.comparison(knowledge)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    if not columns:
        console.print("[yellow]No comparison columns defined.[/yellow]")
        return

    table = Table(title="Criteria Comparison", show_lines=True)
    table.add_column("Criterion", style="cyan")
    for label, _ in columns:
        table.add_column(label, justify="center")
    for criterion in item.criteria:
        cells = []
        for _, detail in columns:
            state = detail.breakdown.get(criterion.key)
            cells.append(_CRITERION_MARK[state] if state is not None else "-")
        table.add_row(criterion.name, *cells)
    table.add_row(
        "[bold]Total[/bold]",
        *(f"[bold]{detail.scores.total}[/bold]" for _, detail in columns),
    )
    console.print(table)


@app.command()
def share(
    view: Annotated[
        str,
        typer.Argument(help="Shareable view name (e.g. main, timeline)."),
    ],
    knowledge: KnowledgeOption = None,
    config: ConfigOption = None,
) -> None:
    """Print a shareable headline card."""
    _, service = _build_service(config)
    try:
        card = service.shareable(view, knowledge)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    body = [f"[bold]{card.headline}[/bold]", ""]
    body.extend(f"- {line}" for line in card.insights)
    body.extend(["", f"Key metric: {card.key_metric}"])
    console.print(Panel("\n".join(body), title=card.title, border_style="cyan"))


# ---------------------------------------------------------------------------
# Threat catalog commands
# ---------------------------------------------------------------------------


@app.command()
def threats(
    category: Annotated[
        ThreatCategoryName | None,
        typer.Option("--category", help="Only show threats in this category."),
    ] = None,
    knowledge: CatalogOption = None,
    config: ConfigOption = None,
) -> None:
    """List canonical threats, most exploited first."""
    _, service = _build_service(config)
    try:
        items = service.threat_list(knowledge, category=category)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    if not items:
        console.print("[yellow]No threats match.[/yellow]")
        return

    table = Table(title="Agentic AI Threats", show_lines=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Threat")
    table.add_column("Category")
    table.add_column("Severity", justify="center")
    table.add_column("Incidents", justify="right")
    for threat in items:
        style = _SEVERITY_STYLE[threat.severity]
        table.add_row(
            threat.id,
            threat.name,
            threat.category.primary.value,
            f"[{style}]{threat.severity.value}[/{style}]",
            str(len(threat.incident_ids)),
        )
    console.print(table)


@app.command()
def incidents(
    uncovered_by: Annotated[
        str | None,
        typer.Option(
            "--uncovered-by",
            help="Only incidents this framework id does not cover.",
        ),
    ] = None,
    knowledge: CatalogOption = None,
    config: ConfigOption = None,
) -> None:
    """List incidents newest first, then coverage counts per framework."""
    _, service = _build_service(config)
    try:
        items = service.incidents(knowledge, uncovered_by=uncovered_by)
        summary = service.coverage_summary(knowledge)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    if not items:
        console.print("[yellow]No incidents match.[/yellow]")
        return

    table = Table(title="Incidents", show_lines=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Date", no_wrap=True)
    table.add_column("Incident")
    table.add_column("Threats")
    table.add_column("Gaps", justify="right")
    for incident in items:
        table.add_row(
            incident.id,
            incident.date.date().isoformat(),
            incident.title,
            ", ".join(incident.threat_ids),
            str(len(incident.gaps)),
        )
    console.print(table)

    coverage = Table(title="Coverage by Framework", show_lines=True)
    coverage.add_column("Framework", style="cyan")
    coverage.add_column("Direct", justify="right", style="green")
    coverage.add_column("Indirect", justify="right", style="yellow")
    coverage.add_column("None", justify="right", style="red")
    for entry in summary.frameworks:
        coverage.add_row(
            entry.framework_name,
            str(entry.direct),
            str(entry.indirect),
            str(entry.none),
        )
    console.print(coverage)
    console.print(
        f"{summary.total_incidents} incident(s), {summary.total_gaps} gap(s)"
    )


@app.command()
def gaps(
    candidates: Annotated[
        bool,
        typer.Option(
            "--candidates",
            help="Only gaps identified as contribution candidates.",
        ),
    ] = False,
    knowledge: CatalogOption = None,
    config: ConfigOption = None,
) -> None:
    """List framework gaps exposed by incidents."""
    _, service = _build_service(config)
    try:
        records = service.gaps(knowledge, candidates_only=candidates)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    if not records:
        console.print("[yellow]No gaps match.[/yellow]")
        return

    table = Table(title="Framework Gaps", show_lines=True)
    table.add_column("Incident", style="cyan", no_wrap=True)
    table.add_column("Framework")
    table.add_column("Gap")
    table.add_column("Candidate", justify="center")
    for record in records:
        status = record.gap.contribution_status
        table.add_row(
            record.incident_id,
            record.gap.framework_name,
            record.gap.gap_description,
            status.value if status else "no",
        )
    console.print(table)
    console.print(f"{len(records)} gap(s)")


@app.command()
def trends(
    knowledge: CatalogOption = None,
    config: ConfigOption = None,
) -> None:
    """Show monthly incident counts and trend per threat category."""
    _, service = _build_service(config)
    try:
        items = service.threat_trends(knowledge)
        summary = service.coverage_summary(knowledge)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    table = Table(title="Threat Trends", show_lines=True)
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Incidents by month")
    table.add_column("Trend", justify="center")
    for item in items:
        periods = ", ".join(f"{entry.period}: {entry.count}" for entry in item.periods)
        table.add_row(item.category.value, periods, item.trend.value)
    console.print(table)

    if summary.most_exploited:
        console.print("[bold]Most exploited[/bold]")
        for entry in summary.most_exploited:
            console.print(
                f"- {entry.threat_id} {entry.threat_name}: "
                f"{entry.incident_count} incident(s)"
            )


@app.command()
def evolution(
    knowledge: CatalogOption = None,
    config: ConfigOption = None,
) -> None:
    """Show threat landscape events, newest first."""
    _, service = _build_service(config)
    try:
        events = service.evolution(knowledge)
        latest = service.latest_incident(knowledge)
    except LivingGovernanceError as exc:
        raise _fail("Knowledge Error", exc) from exc

    table = Table(title="Threat Landscape", show_lines=True)
    table.add_column("Date", style="cyan")
    table.add_column("Type")
    table.add_column("Event")
    table.add_column("Threats")
    for event in events:
        table.add_row(
            event.date.date().isoformat(),
            event.type.value,
            event.title,
            ", ".join(event.related_threat_ids),
        )
    console.print(table)
    if latest is not None:
        console.print(
            f"Latest incident: {latest.title} ({latest.date.date().isoformat()})"
        )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
