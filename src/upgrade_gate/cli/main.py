"""Main CLI interface using Typer."""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..api import AdmissionDecision, AdmissionHook, AdmissionService
from ..exceptions import VersionParseError
from ..model.config import GateConfig
from ..model.kubernetes import ClusterSnapshot
from ..upgrade.versions import ReleaseVersion, compare, major_delta
from ..utils.logger import configure_logging, get_logger

# Create CLI app
app = typer.Typer(
    name="upgrade-gate",
    help="Validate cluster release upgrades against the release catalog and cluster status",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Supported output formats."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


def load_snapshot(path: Path) -> ClusterSnapshot:
    """Load a cluster manifest from a YAML or JSON file."""
    with open(path) as f:
        manifest = yaml.safe_load(f)

    if not isinstance(manifest, dict):
        raise ValueError(f"{path} does not contain a Kubernetes object")

    return ClusterSnapshot.from_manifest(manifest)


def _print_decision(decision: AdmissionDecision, output: OutputFormat) -> None:
    data: Dict[str, Any] = decision.model_dump(mode="json")

    if output == OutputFormat.JSON:
        console.print_json(json.dumps(data))
        return
    if output == OutputFormat.YAML:
        console.print(
            yaml.safe_dump(data, default_flow_style=False, sort_keys=False),
            markup=False,
            soft_wrap=True,
        )
        return

    # Messages quote raw label values, which may contain markup.
    message = escape(decision.message)
    if decision.allowed and not decision.dependency_fault:
        console.print("[green]✓[/green] Transition allowed")
    elif decision.allowed:
        console.print(f"[yellow]![/yellow] Allowed without evaluation: {message}")
    else:
        console.print(f"[red]✗[/red] Transition rejected: {message}")
        if decision.rule:
            console.print(f"  Rule: [cyan]{decision.rule.value}[/cyan]")


@app.command()
def check(
    old_manifest: Path = typer.Argument(..., help="Currently persisted cluster manifest"),
    new_manifest: Path = typer.Argument(..., help="Requested cluster manifest"),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Kubernetes context to use"
    ),
    hook: AdmissionHook = typer.Option(
        AdmissionHook.FULL, "--hook", help="Which checks to run"
    ),
    fail_open: bool = typer.Option(
        False,
        "--fail-open",
        help="Allow the change when the catalog or cluster status cannot be read",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Deadline in seconds for each kubectl read"
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.TEXT, "--output", "-o", help="Output format"
    ),
):
    """Check whether a cluster may move from OLD_MANIFEST to NEW_MANIFEST."""
    try:
        config = GateConfig.from_env(
            kube_context=context, fail_open=fail_open or None, kubectl_timeout=timeout
        )
        configure_logging(config.log_level)

        old = load_snapshot(old_manifest)
        new = load_snapshot(new_manifest)

        service = AdmissionService.from_config(config)
        decision = service.review(old, new, hook)
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _print_decision(decision, output)
    if not decision.allowed:
        raise typer.Exit(1)


@app.command("compare")
def compare_versions(
    current: str = typer.Argument(..., help="Current release version, e.g. 3.0.0"),
    target: str = typer.Argument(..., help="Target release version, e.g. 4.0.0"),
):
    """Compare two release versions without contacting the cluster."""
    try:
        a = ReleaseVersion.parse(current)
        b = ReleaseVersion.parse(target)
    except VersionParseError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    delta = major_delta(a, b)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Current", style="cyan")
    table.add_column("Target", style="green")
    table.add_column("Ordering", style="white")
    table.add_column("Major delta", style="white")
    table.add_row(str(a), str(b), compare(a, b).name.lower(), f"{delta:+d}")
    console.print(table)

    if delta in (0, 1):
        console.print("Major step is within policy (catalog state not checked)")
    else:
        console.print("[yellow]Major step violates the one-major-at-a-time policy[/yellow]")


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]upgrade-gate[/bold] version {__version__}")


if __name__ == "__main__":
    app()
