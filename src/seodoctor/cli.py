"""Command-line interface for seodoctor."""

from __future__ import annotations

import functools
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import click
import structlog
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from seodoctor import __version__
from seodoctor.analyzer import analyze_article_seo
from seodoctor.config import Config, LazyConfig, settings
from seodoctor.content.text import normalize_keys
from seodoctor.doctor import diagnose, entity_type_names, get_entity_config
from seodoctor.exceptions import InputError, SEODoctorError
from seodoctor.guidance import analyze_seo_guidance
from seodoctor.observability import configure_logging, set_metrics_enabled
from seodoctor.stats import summarize_scores
from seodoctor.structured_data import article_knowledge_graph, stringify_graph
from seodoctor.utils import atomic_write_json

console = Console()
# Messages carry file paths and parser errors; wrapping would split them
err_console = Console(stderr=True, soft_wrap=True)
logger = structlog.get_logger(__name__)

STATUS_STYLES = {
    "pass": "green",
    "warning": "yellow",
    "fail": "red",
    "info": "blue",
}


def load_entity_file(path: str, expect_list: bool = False) -> Any:
    """Read a JSON entity file (or ``-`` for stdin) and convert camelCase keys."""
    try:
        if path == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(path).read_text(encoding="utf-8")
        data = json.loads(raw)
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InputError(f"{path} is not valid JSON: {e}") from e

    if expect_list and not isinstance(data, list):
        raise InputError(f"{path} must contain a JSON array of entities")
    if not expect_list and not isinstance(data, dict):
        raise InputError(f"{path} must contain a JSON object")
    if expect_list and not all(isinstance(item, dict) for item in data):
        raise InputError(f"every entry in {path} must be a JSON object")
    return normalize_keys(data)


def emit(data: Dict[str, Any], as_json: bool, output: Optional[str]) -> bool:
    """Write ``data`` to ``output`` and/or stdout. Returns True when nothing is left to render."""
    if output:
        atomic_write_json(Path(output), data)
        err_console.print(f"[green]Report saved to {output}[/green]")
    if as_json:
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return True
    return False


def _status_cell(status: str) -> str:
    style = STATUS_STYLES.get(status, "white")
    return f"[{style}]{status.upper()}[/{style}]"


def run_command(func: Any) -> Any:
    """Map seodoctor errors raised by a command to a red message and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SEODoctorError as e:
            err_console.print(f"[red]Error: {e}[/red]")
            sys.exit(1)

    return wrapper


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """SEO Doctor - score content entities and produce SEO guidance."""
    ctx.ensure_object(dict)

    if config:
        try:
            LazyConfig.override(Config.from_yaml(Path(config)))
        except (ValidationError, yaml.YAMLError) as e:
            err_console.print(f"[red]Invalid configuration file {config}: {e}[/red]")
            sys.exit(1)

    monitoring = settings.monitoring
    if log_level:
        monitoring = monitoring.model_copy(update={"log_level": log_level.upper()})
    configure_logging(monitoring)
    set_metrics_enabled(monitoring.metrics_enabled)
    ctx.obj["config_path"] = Path(config) if config else None


@cli.command()
@click.argument("entity_type")
@click.argument("path", metavar="FILE")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--output", "-o", type=click.Path(), help="Write the JSON report to a file")
@run_command
def score(entity_type: str, path: str, as_json: bool, output: Optional[str]) -> None:
    """Run the SEO doctor on one entity."""
    config = get_entity_config(entity_type)
    report = diagnose(load_entity_file(path), config)
    if emit(report.to_dict(), as_json, output):
        return

    table = Table(title=f"{config.entity_type} SEO checks")
    table.add_column("Field", style="cyan")
    table.add_column("Status")
    table.add_column("Points", justify="right")
    table.add_column("Message")
    for check in report.checks:
        table.add_row(check.label, _status_cell(check.status.value), str(check.score), check.message)
    console.print(table)
    console.print(
        Panel.fit(
            f"[bold]{report.score.score}/{report.score.max_score}[/bold] "
            f"({report.percentage}%) - {report.band.value}\n"
            f"Issues: {len(report.issues)}",
            title="SEO Score",
        )
    )


@cli.command()
@click.argument("path", metavar="FILE")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--output", "-o", type=click.Path(), help="Write the JSON report to a file")
@run_command
def guidance(path: str, as_json: bool, output: Optional[str]) -> None:
    """Build the SEO guidance checklist for an article."""
    report = analyze_seo_guidance(load_entity_file(path))
    if emit(report.to_dict(), as_json, output):
        return

    table = Table(title="Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Passed", justify="right")
    for name, category in report.categories.items():
        table.add_row(name, f"{category.score}/{category.max_score}", f"{category.passed}/{category.total}")
    console.print(table)

    issues = report.prioritized_issues()
    if issues:
        issue_table = Table(title="Prioritized issues")
        issue_table.add_column("Severity")
        issue_table.add_column("Priority")
        issue_table.add_column("Code", style="cyan")
        issue_table.add_column("Fix")
        for issue in issues:
            issue_table.add_row(issue.severity.value, issue.priority.value, issue.code, issue.fix or "")
        console.print(issue_table)

    console.print(Panel.fit(f"[bold]{report.overall_score}%[/bold]", title="Overall SEO score"))


@cli.command()
@click.argument("path", metavar="FILE")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--output", "-o", type=click.Path(), help="Write the JSON report to a file")
@run_command
def analyze(path: str, as_json: bool, output: Optional[str]) -> None:
    """Score an article with the six-category weighted analyzer."""
    report = analyze_article_seo(load_entity_file(path))
    if emit(report.to_dict(), as_json, output):
        return

    table = Table(title="Article SEO analysis")
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Checks passed", justify="right")
    for name, category in report.categories.items():
        table.add_row(name, f"{category.score}/{category.max_score}", f"{category.passed}/{category.total}")
    table.add_row("[bold]total[/bold]", f"[bold]{report.score}/100[/bold]", "")
    console.print(table)


@cli.command()
@click.argument("entity_type")
@click.argument("path", metavar="FILE")
@click.option("--graph", is_flag=True, help="Emit the linked article knowledge graph")
@click.option("--pretty/--compact", default=True, help="Indent the JSON-LD output")
@run_command
def jsonld(entity_type: str, path: str, graph: bool, pretty: bool) -> None:
    """Print the JSON-LD for one entity."""
    config = get_entity_config(entity_type)
    data = load_entity_file(path)

    if graph:
        if config.entity_type != "Article":
            raise InputError("--graph is only available for articles")
        document = article_knowledge_graph(data)
    elif config.structured_data is not None:
        document = config.structured_data(data)
    else:
        raise InputError(f"No structured data generator for {config.entity_type}")

    click.echo(stringify_graph(document, pretty=pretty))


@cli.command()
@click.argument("entity_type")
@click.argument("path", metavar="FILE")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.option("--output", "-o", type=click.Path(), help="Write the JSON summary to a file")
@run_command
def stats(entity_type: str, path: str, as_json: bool, output: Optional[str]) -> None:
    """Summarize SEO scores over a JSON array of entities."""
    config = get_entity_config(entity_type)
    entities: List[Dict[str, Any]] = load_entity_file(path, expect_list=True)
    summary = summarize_scores(entities, config)
    if emit(summary.to_dict(), as_json, output):
        return

    table = Table(title=f"{config.entity_type} score summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("Entities", str(summary.count))
    table.add_row("Average", f"{summary.average}%")
    table.add_row("Minimum", f"{summary.minimum}%")
    table.add_row("Maximum", f"{summary.maximum}%")
    for band, total in summary.bands.items():
        table.add_row(f"bands.{band.value}", str(total))
    console.print(table)


@cli.command("types")
def list_types() -> None:
    """List the entity types the SEO doctor knows."""
    for name in entity_type_names():
        click.echo(name)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
