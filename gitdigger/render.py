"""
Rendering functions for gitdigger output.

Core functions return data, this module makes it human-readable.
"""

from rich.table import Table
from rich.console import Console
from rich import box
from rich.markup import escape

from .domain.operation import SyncResult, SyncStatus, SyncAction

console = Console()

STATUS_LABELS = {
    SyncAction.CLONED: ("Cloned", "green"),
    SyncAction.PULLED: ("Updated", "green"),
    SyncAction.EXISTS: ("Exists", "yellow"),
    SyncAction.UNREACHABLE: ("Unreachable", "red"),
    SyncAction.CLONE_FAILED: ("Clone failed", "red"),
    SyncAction.PULL_FAILED: ("Pull failed", "red"),
}


def render_sync_table(result: SyncResult, target: Console = None) -> None:
    """
    Render a synchronization result as a pretty table.

    Args:
        result: Result of MirrorService.synchronize
        target: Console to print to (module console by default)
    """
    target = target or console

    table = Table(
        title="Repository Mirror",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )
    table.add_column("Repository", style="cyan")
    table.add_column("Host", style="blue")
    table.add_column("Status")
    table.add_column("Path", style="dim")

    label, color = STATUS_LABELS.get(result.action, (result.action, "white"))
    table.add_row(
        result.identity.full_name,
        result.identity.host,
        f"[{color}]{label}[/{color}]",
        str(result.path),
    )
    target.print(table)

    if result.error and result.status != SyncStatus.SUCCESS:
        target.print(f"[red]{escape(result.error)}[/red]")
