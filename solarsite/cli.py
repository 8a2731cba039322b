"""Command-line interface for SolarSite."""

import json
import os
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich import print
from rich.console import Console
from rich.table import Table

from solarsite import __version__
from solarsite.analysis.report import display_value, format_report
from solarsite.analysis.site_scoring import SiteScoringEngine
from solarsite.config import DEFAULT_CATALOG, get_config, reset_config
from solarsite.exceptions import SolarSiteError
from solarsite.types import Decision
from solarsite.utils.logging import configure_from_settings, get_logger

app = typer.Typer(
    name="solarsite",
    help="Solar-farm site suitability scoring",
    add_completion=False
)

console = Console()
logger = get_logger(__name__)

_DECISION_STYLES = {
    Decision.GO: "bold green",
    Decision.REVIEW: "bold yellow",
    Decision.NO_GO: "bold red",
}


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        print(f"SolarSite v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose logging"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file"
    )
):
    """SolarSite - score candidate solar-farm sites."""
    if config_file:
        os.environ["SOLARSITE_CONFIG_PATH"] = str(config_file)
        reset_config()

    configure_from_settings(get_config().logging, verbose=verbose)


def _load_metrics(path: Path) -> dict:
    """Read a YAML or JSON metrics mapping."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if data is not None else {}


@app.command()
def score(
    metrics_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="YAML or JSON file mapping metric keys to values (null = unavailable)"
    ),
    ownership: int = typer.Option(
        ...,
        "--ownership",
        "-o",
        help="Land ownership code (1 = government, other = private)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON")
):
    """Score a site and print its decision matrix."""
    try:
        metrics = _load_metrics(metrics_file)
        report = SiteScoringEngine().evaluate(metrics, land_ownership=ownership)
    except yaml.YAMLError as e:
        console.print(f"[red]✗ Could not parse metrics file: {e}[/red]")
        raise typer.Exit(1)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]✗ Could not read metrics file: {e}[/red]")
        raise typer.Exit(1)
    except SolarSiteError as e:
        console.print(f"[red]✗ Invalid input: {e}[/red]")
        logger.error("Scoring failed", path=str(metrics_file), error=e.message)
        raise typer.Exit(1)

    formatted = format_report(report)

    if as_json:
        typer.echo(json.dumps(formatted, indent=2, ensure_ascii=False))
        return

    table = Table(title="Decision Matrix")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value")
    table.add_column("Score", justify="right", style="bold")
    table.add_column("Weight", justify="right")
    table.add_column("Weighted", justify="right", style="bold")

    for row, shown in zip(report.rows, formatted["rows"]):
        table.add_row(
            row.display_name,
            display_value(row),
            f"{shown['score']:.1f}",
            f"{shown['weight_percent']}%",
            f"{shown['weighted_score']:.2f}",
        )

    console.print(table)

    style = _DECISION_STYLES[report.decision]
    console.print(f"\nTotal score: [bold]{formatted['total_score']:.2f}[/bold]")
    console.print(f"Decision: [{style}]{report.decision.label}[/{style}]\n")

    console.print("[bold]Suggestions[/bold]")
    for suggestion in report.suggestions:
        console.print(f"  • {suggestion}")


@app.command()
def criteria():
    """List the scored criteria and their weights."""
    table = Table(title="Scoring Criteria")
    table.add_column("Key", style="cyan")
    table.add_column("Name")
    table.add_column("Weight", justify="right")
    table.add_column("Unit")
    table.add_column("Policy")
    table.add_column("Best", justify="right")
    table.add_column("Worst", justify="right")

    for criterion in DEFAULT_CATALOG.criteria:
        thresholds = criterion.thresholds
        table.add_row(
            criterion.key,
            criterion.display_name,
            f"{criterion.weight:.2f}",
            criterion.unit or "-",
            criterion.policy.value,
            f"{thresholds.best:g}" if thresholds else "-",
            f"{thresholds.worst:g}" if thresholds else "-",
        )

    console.print(table)
    console.print(f"Total weight: {DEFAULT_CATALOG.total_weight():.2f}")


if __name__ == "__main__":
    app()
