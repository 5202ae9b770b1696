"""Console rendering for audit reports."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.markup import escape
from rich.text import Text

from . import __version__
from .models import AuditReport, BatchResult, Priority


# (good, fair) upper bounds
VITAL_THRESHOLDS = {
    "LCP": (2500, 4000),
    "CLS": (0.1, 0.25),
    "FCP": (1800, 3000),
    "TTI": (3800, 7300),
}

TITLE_PREVIEW = 37


def truncate(text: str, limit: int) -> str:
    """Cut text to `limit` chars, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def score_status(score: int) -> tuple[str, str]:
    """Color and label for a Lighthouse category score."""
    if score >= 90:
        return "green", "✓ Good"
    elif score >= 50:
        return "yellow", "⚠ Fair"
    else:
        return "red", "✗ Needs Work"


def vital_color(value: float, good: float, fair: float) -> str:
    if value <= good:
        return "green"
    elif value <= fair:
        return "yellow"
    return "red"


def priority_style(priority: Priority) -> str:
    return {
        Priority.HIGH: "bold red",
        Priority.MEDIUM: "yellow",
        Priority.LOW: "dim",
    }.get(priority, "white")


def scores_table(report: AuditReport) -> Table:
    scores = report.performance.scores
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Status")

    for name, score in (
        ("Performance", scores.performance),
        ("SEO", scores.seo),
        ("Accessibility", scores.accessibility),
        ("Best Practices", scores.best_practices),
    ):
        color, status = score_status(score)
        table.add_row(name, f"[{color}]{score}/100[/]", status)
    return table


def meta_table(report: AuditReport) -> Table:
    meta = report.structural.meta
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Tag", style="cyan")
    table.add_column("Status")
    table.add_column("Value", overflow="fold", max_width=50)

    if meta.title:
        ok = 50 <= meta.title_length <= 60
        table.add_row("Title", "[green]✓[/]" if ok else "[yellow]⚠[/]",
                      f"{escape(truncate(meta.title, TITLE_PREVIEW))} ({meta.title_length} chars)")
    else:
        table.add_row("Title", "[red]✗[/]", "Missing")

    if meta.description:
        ok = 150 <= meta.description_length <= 160
        table.add_row("Description", "[green]✓[/]" if ok else "[yellow]⚠[/]",
                      f"{meta.description_length} chars")
    else:
        table.add_row("Description", "[red]✗[/]", "Missing")

    table.add_row("Canonical", "[green]✓[/]" if meta.canonical else "[red]✗[/]", escape(meta.canonical or "Missing"))
    return table


def print_report(report: AuditReport, console: Console) -> None:
    """Print a single audit report."""
    console.print()
    console.print(Panel(
        f"[bold]{escape(report.url)}[/bold]\n"
        f"[dim]{report.timestamp.isoformat()}[/dim]",
        title="🔍 SEO Audit",
        border_style="blue"
    ))

    console.print("\n[bold]📊 Lighthouse Scores[/bold]")
    console.print(scores_table(report))

    metrics = report.performance.metrics
    console.print("[bold]⚡ Core Web Vitals[/bold]\n")
    for label, value, unit in (
        ("LCP", metrics.lcp, "ms"),
        ("CLS", metrics.cls, ""),
        ("FCP", metrics.fcp, "ms"),
        ("TTI", metrics.tti, "ms"),
    ):
        good, fair = VITAL_THRESHOLDS[label]
        shown = f"{value:.3f}" if label == "CLS" else f"{round(value)}"
        console.print(f"  {label}: [{vital_color(value, good, fair)}]{shown}{unit}[/]")

    console.print("\n[bold]🏷  Meta Tags[/bold]")
    console.print(meta_table(report))

    structural = report.structural
    h1 = structural.headings.get("h1", [])
    h1_style = "green" if len(h1) == 1 else "red"
    console.print("[bold]📝 Content[/bold]\n")
    console.print(f"  H1: [{h1_style}]{len(h1)}[/] {escape(', '.join(h1)[:50])}")
    console.print(f"  H2: {len(structural.headings.get('h2', []))} headings")
    missing_style = "red" if structural.images.missing_alt else "green"
    console.print(f"  Images: {structural.images.total} "
                  f"([{missing_style}]{structural.images.missing_alt} missing alt[/])")
    types = structural.schema_types
    if types:
        console.print(f"  Schema: [green]{', '.join(types)}[/green]")
    else:
        console.print("  Schema: [red]none found[/red]")

    recs = report.recommendations
    if recs.enabled and recs.recommendations:
        console.print(f"\n[bold]🤖 Recommendations[/bold] [dim]({recs.provider}/{recs.model})[/dim]\n")
        for i, rec in enumerate(recs.recommendations, 1):
            text = Text(f"  {i}. ")
            text.append(f"[{rec.priority.value}]", style=priority_style(rec.priority))
            text.append(f" {rec.issue}")
            console.print(text)
            console.print(Text(f"     → {rec.fix}\n", style="cyan"))
    elif not recs.enabled:
        console.print("\n[dim]AI recommendations disabled (no provider configured or generation failed)[/dim]")

    console.print("[dim]" + "─" * 50 + "[/dim]")
    console.print(f"[dim]seo-audit v{__version__}[/dim]")
    console.print()


def print_batch_summary(result: BatchResult, console: Console) -> None:
    summary = result.summary
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("URL", style="cyan")
    table.add_column("Result")
    table.add_column("Performance", justify="right")
    table.add_column("SEO", justify="right")

    for item in result.results:
        if item.success and item.report is not None:
            scores = item.report.performance.scores
            table.add_row(item.url, "[green]✓[/]", str(scores.performance), str(scores.seo))
        else:
            table.add_row(item.url, f"[red]✗ {escape(item.error or '')}[/]", "-", "-")

    console.print()
    console.print(Panel(
        f"[green]Successful:[/green] {summary.successful}/{summary.total}\n"
        f"[red]Failed:[/red] {summary.failed}/{summary.total}\n"
        f"[dim]Duration:[/dim] {summary.duration_seconds}s",
        title="Batch Audit Summary",
        border_style="cyan"
    ))
    console.print(table)
