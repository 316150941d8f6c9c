"""
Rich Terminal Output for cs

Provides the session status panel, registry listing and styled messages.
Uses the Rich library for all formatting. Errors and warnings go to
stderr, everything else to stdout.
"""

from typing import TYPE_CHECKING, Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from ..resolver import SessionPlan


class OutputManager:
    """
    Manages rich terminal output for the cs CLI.

    Provides consistent styling for:
    - The session status panel shown before launching claude
    - The registry listing
    - Success/info/warning/error messages
    """

    # Color per session action
    ACTION_STYLES = {
        "new": "green",
        "exists": "cyan",
        "force-create": "yellow",
        "resume-with-picker": "magenta",
    }

    def __init__(
        self,
        console: Optional["Console"] = None,
        err_console: Optional["Console"] = None,
    ):
        """
        Initialize the output manager.

        Args:
            console: Console for regular output (creates one if not provided)
            err_console: Console for errors and warnings (stderr by default)
        """
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    # ==================== Basic Output ====================

    def print(self, message: str = "", style: str | None = None) -> None:
        """
        Print a message with optional styling.

        Args:
            message: Message to print (defaults to empty string for blank line)
            style: Optional rich style string
        """
        self.console.print(message, style=style)

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[green]v[/green] {message}")

    def print_info(self, message: str) -> None:
        """Print an info message."""
        self.console.print(f"[blue]i[/blue] {message}")

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        self.err_console.print(f"[yellow]![/yellow] {message}")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.err_console.print(f"[red]x[/red] {message}")

    # ==================== Panels ====================

    def session_panel(self, plan: "SessionPlan") -> None:
        """
        Display the resolved session.

        Args:
            plan: Resolved session plan
        """
        action = plan.action.value
        style = self.ACTION_STYLES.get(action, "white")
        lines = [
            f"[bold]Session:[/bold] {escape(plan.session_name)}",
            f"[bold]UUID:[/bold]    {plan.session_id}",
            f"[bold]Status:[/bold]  [{style}]{action}[/{style}]",
        ]
        if not plan.has_branch:
            lines.append("[dim]No git branch found, using folder name only[/dim]")
        if plan.dry_run:
            lines.append("[dim]Dry run: claude not launched, session not recorded[/dim]")

        self.console.print(Panel("\n".join(lines), title="cs", border_style="blue"))

    # ==================== Tables ====================

    def registry_table(self, session_ids: Iterable[str], path: str = "") -> None:
        """
        Display the registered session identifiers.

        Args:
            session_ids: Identifiers from the registry
            path: Registry file path shown as caption
        """
        ids = sorted(session_ids)
        if not ids:
            self.print_info("No sessions in database.")
            return

        table = Table(title=f"Sessions ({len(ids)})", caption=escape(path) or None)
        table.add_column("#", style="dim", width=4)
        table.add_column("UUID", style="cyan", no_wrap=True)
        for i, session_id in enumerate(ids, 1):
            table.add_row(str(i), session_id)

        self.console.print(table)


# Singleton instance for convenience
_default_output: OutputManager | None = None


def get_output() -> OutputManager:
    """Get the default output manager."""
    global _default_output
    if _default_output is None:
        _default_output = OutputManager()
    return _default_output
