# shipshape/cli/utils/output.py
"""Output formatting utilities"""

from typing import List, Optional

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from ...constants import DeployPhase, EMOJI_ERROR
from ...core.path_classifier import is_network_path
from ...core.path_resolver import PathResolver
from ...models import DeploymentConfig, DeployResult, OperationStatus
from ...utils.output import console

STATUS_STYLES = {
    OperationStatus.SUCCESS: "[green]✓ done[/green]",
    OperationStatus.SKIPPED: "[dim]– nothing to run[/dim]",
    OperationStatus.FAILED: "[red]✗ failed[/red]",
    OperationStatus.IN_PROGRESS: "[yellow]… interrupted[/yellow]",
}

PHASE_TITLES = {
    DeployPhase.PRE_DEPLOY: "Pre-deploy",
    DeployPhase.RECONCILE: "Reconcile",
    DeployPhase.COPY: "Copy",
    DeployPhase.POST_DEPLOY: "Post-deploy",
}


def print_error(error: BaseException) -> None:
    """Print an error the way every command reports failures"""
    console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)


def format_deploy_result(result: DeployResult) -> None:
    """Format and display a deployment result"""
    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("Phase", style="cyan")
    table.add_column("Status")
    table.add_column("Details")

    for phase in result.phases:
        details = phase.message
        if phase.commands:
            details = "\n".join(phase.commands)
        table.add_row(PHASE_TITLES.get(phase.phase, phase.phase.value),
                      STATUS_STYLES[phase.status], details)

    lines: List[str] = []
    if result.destination_path:
        lines.append(f"[bold]Destination:[/bold] {result.destination_path}")
    if result.kept:
        lines.append(f"[bold]Kept:[/bold] {', '.join(result.kept)}")
    if result.removed:
        lines.append(f"[bold]Removed:[/bold] {len(result.removed)} entries")
    if result.duration is not None:
        lines.append(f"[dim]Duration: {result.duration:.2f}s[/dim]")

    if result.is_success:
        console.print(Panel("\n".join(lines) or "Deployment completed",
                            title="Deploy Result", border_style="green"))
    else:
        failed = PHASE_TITLES.get(result.failed_phase, "unknown phase")
        lines.insert(0, f"[red]{EMOJI_ERROR} Failed during {failed}:[/red] {escape(result.message)}")
        console.print(Panel("\n".join(lines), title="Deploy Error", border_style="red"))

    console.print(table)


def format_plan(config: DeploymentConfig, resolver: PathResolver,
                environment: Optional[str] = None) -> None:
    """Display what a deployment would do without running it"""
    destination = resolver.resolve_destination(config.destination)

    if not config.post_deploy:
        post_cwd = "-"
    elif is_network_path(config.destination):
        post_cwd = str(resolver.invocation_root)
    else:
        post_cwd = str(destination)

    table = Table(title="Deployment Plan", box=box.ROUNDED, show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Environment", environment.upper() if environment else "(default)")
    table.add_row("Source", str(resolver.make_relative(resolver.resolve_source(config.source))))
    table.add_row("Destination", str(destination))
    table.add_row("Keep", ", ".join(sorted(config.keep_set)) or "-")
    table.add_row("Pre-deploy", "\n".join(config.pre_deploy) or "-")
    table.add_row("Post-deploy", "\n".join(config.post_deploy) or "-")
    table.add_row("Post-deploy cwd", post_cwd)

    console.print(table)
    console.print("[yellow]Dry run: nothing was executed[/yellow]")
