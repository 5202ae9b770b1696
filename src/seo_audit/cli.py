"""CLI interface for seo-audit."""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .analyzer import normalize_url
from .auditor import AuditOrchestrator
from .batch import run_batch
from .config import Settings
from .errors import AuditError
from .formatter import print_batch_summary, print_report
from .storage import report_filename, save_report


console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def audit_single(orchestrator: AuditOrchestrator, url: str, json_output: bool,
                 save: bool, output_dir: Path | None) -> None:
    if json_output:
        report = orchestrator.audit_one(url)
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        return

    with console.status(f"[bold blue]Auditing {url}...[/bold blue]"):
        report = orchestrator.audit_one(url)
    print_report(report, console)

    if save:
        path = save_report(report.to_dict(), report_filename(url), output_dir)
        console.print(f"[dim]Report saved: {path}[/dim]\n")


def audit_many(orchestrator: AuditOrchestrator, urls: list[str], json_output: bool,
               save: bool, output_dir: Path | None) -> None:
    def progress(index: int, total: int, url: str) -> None:
        if not json_output:
            console.print(f"[bold][{index}/{total}][/bold] {escape(url)}", highlight=False)

    if not json_output:
        console.print(f"\n[cyan]🔍 Batch auditing {len(urls)} URLs...[/cyan]\n")

    result = run_batch(orchestrator, urls, on_progress=progress)

    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    print_batch_summary(result, console)
    if save:
        path = save_report(result.to_dict(), report_filename(), output_dir)
        console.print(f"[dim]Batch report saved: {path}[/dim]\n")


@click.command()
@click.argument("urls", nargs=-1)
@click.option("--json", "json_output", is_flag=True, help="Print the report as JSON instead of saving it")
@click.option("--no-save", is_flag=True, help="Do not write the JSON report to disk")
@click.option("-o", "--output", type=click.Path(file_okay=False, path_type=Path),
              help="Directory for saved reports (default: current dir)")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.version_option(version=__version__)
def cli(urls: tuple[str, ...], json_output: bool, no_save: bool, output: Path | None, verbose: bool):
    """SEO Audit - Lighthouse, HTML and AI recommendations in one report.

    \b
    Examples:
        seo-audit https://example.com
        seo-audit https://site1.com https://site2.com
        seo-audit example.com --json
    """
    if not urls:
        raise click.UsageError("At least one URL is required.")

    configure_logging(verbose)
    orchestrator = AuditOrchestrator.from_settings(Settings.from_env())
    targets = [normalize_url(u) for u in urls]
    save = not (no_save or json_output)

    if len(targets) == 1:
        try:
            audit_single(orchestrator, targets[0], json_output, save, output)
        except AuditError as e:
            err_console.print(f"\n[red]✗ Audit failed:[/red] {escape(str(e))}")
            sys.exit(1)
    else:
        audit_many(orchestrator, targets, json_output, save, output)


def main():
    cli()


if __name__ == "__main__":
    main()
