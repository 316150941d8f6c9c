#!/usr/bin/env python3
"""
cs CLI

Starts or resumes the Claude Code session belonging to the current
folder and git branch.

Usage:
- cs [cs flags] [claude flags] [prompt]: Start/resume the session
- cs <claude subcommand> ...: Forward to claude unchanged (mcp, doctor, ...)
- cs --list / --clear: Inspect or delete the session registry
- cs upgrade: Upgrade cs
"""

import logging
import os
import sys

import typer
from rich.markup import escape

from .. import DIST_NAME, __version__
from ..arguments import (
    ArgumentError,
    ClearRegistry,
    Help,
    ListRegistry,
    Passthrough,
    RunSession,
    SelfUpdate,
    Version,
    classify,
)
from ..errors import CommandNotFoundError, SessionResumerError
from ..identity import IdentityDeriver, parse_namespace
from ..launcher import SpawnLauncher, select_launcher
from ..registry import SessionRegistry
from ..resolver import SessionResolver
from ..settings import Settings, load_settings
from ..workspace import detect_workspace
from .output import get_output

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "CS_LOG_LEVEL"

app = typer.Typer(
    name="cs",
    help="cs - Claude Code Session Manager",
    add_completion=False,
)
output = get_output()

HELP_TEXT = """[bold blue]cs[/bold blue] - Claude Code Session Manager

[bold]USAGE[/bold]
  [cyan]cs[/cyan]                  Start/resume session for current folder+branch
  [cyan]cs --force[/cyan]          Force create new session (ignore database)
  [cyan]cs --reset[/cyan]          Remove session from database and create new
  [cyan]cs --resume[/cyan]         Resume through claude's session picker
  [cyan]cs --list[/cyan]           List all sessions in database
  [cyan]cs --clear[/cyan]          Clear entire session database
  [cyan]cs --dry-run[/cyan]        Show session info without launching claude
  [cyan]cs upgrade[/cyan]          Upgrade cs
  [cyan]cs --help[/cyan]           Show this help message
  [cyan]cs --version[/cyan]        Show version

[bold]SHORT FLAGS[/bold]
  -f  --force    -n  --dry-run    -R  --resume    -l  --list
  -U  upgrade    -h  --help       -v  --version

[bold]CLAUDE ARGUMENTS[/bold]
  Claude flags and prompts are forwarded unchanged:
    cs --model opus "explain this repo"
  Claude subcommands bypass session handling:
    cs mcp list, cs doctor, cs update
  --session-id is rejected; cs derives the id itself.

[bold]SESSION FORMAT[/bold]
  <folder>+<branch> -> deterministic UUID v5
  Outside git the folder name alone is used.

[bold]TROUBLESHOOTING[/bold]
  If claude reports "No conversation found":
    cs --reset   # Clears stale entry and creates fresh session

[bold]ENVIRONMENT VARIABLES[/bold]
  CS_NAMESPACE       Custom UUID v5 namespace (default: DNS namespace)
  CS_DB_PATH         Session database path (default: ~/.cs/sessions)
  CS_CLAUDE_COMMAND  Executable to launch (default: claude)
  CS_LAUNCH_MODE     auto, exec or spawn (default: auto)
  CS_REQUIRE_BRANCH  Fail outside git instead of using the folder name
  CS_CONFIG_DIR      Directory holding config.yaml (default: ~/.cs)
  CS_LOG_LEVEL       Logging level (default: WARNING)

[bold]FILES[/bold]
  ~/.cs/sessions     Session database (one UUID per line)
  ~/.cs/config.yaml  Optional settings"""


def configure_logging() -> None:
    """Configure root logging on stderr from CS_LOG_LEVEL."""
    level_name = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def run(ctx: typer.Context):
    """
    Start or resume the Claude Code session for the current folder and branch.

    All arguments are classified by cs itself; unknown claude flags are
    rejected before anything is launched.
    """
    configure_logging()
    outcome = classify(ctx.args)
    logger.debug("Classified %s as %s", ctx.args, outcome)

    if isinstance(outcome, ArgumentError):
        output.print_error(escape(outcome.message))
        output.print_error("Run 'cs --help' for usage")
        raise typer.Exit(1)
    if isinstance(outcome, Help):
        output.print(HELP_TEXT)
        return
    if isinstance(outcome, Version):
        output.print(f"cs {__version__}")
        return

    settings = load_settings()
    registry = SessionRegistry(settings.db_path)

    if isinstance(outcome, ListRegistry):
        output.registry_table(registry.load(), str(registry.path))
        return
    if isinstance(outcome, ClearRegistry):
        _clear_registry(registry)
        return
    if isinstance(outcome, SelfUpdate):
        raise typer.Exit(_self_update())
    if isinstance(outcome, Passthrough):
        raise typer.Exit(_launch(settings, outcome.args))
    if isinstance(outcome, RunSession):
        raise typer.Exit(_run_session(settings, registry, outcome))


def _clear_registry(registry: SessionRegistry) -> None:
    try:
        deleted = registry.clear()
    except SessionResumerError as e:
        output.print_error(escape(str(e)))
        raise typer.Exit(e.exit_code)
    if deleted:
        output.print_success("Session database cleared.")
    else:
        output.print_info("Session database already empty.")


def _run_session(settings: Settings, registry: SessionRegistry, run: RunSession) -> int:
    """Resolve the workspace session and launch claude for it."""
    try:
        context = detect_workspace(require_branch=settings.require_branch)
    except SessionResumerError as e:
        output.print_error(f"Error: {escape(str(e))}")
        return e.exit_code

    if settings.namespace and parse_namespace(settings.namespace) is None:
        output.print_warning(
            f"Ignoring malformed namespace {escape(repr(settings.namespace))}, using the default"
        )

    resolver = SessionResolver(IdentityDeriver.from_override(settings.namespace), registry)
    plan = resolver.resolve(context, run)
    output.session_panel(plan)

    if plan.dry_run:
        return 0

    output.print("Creating session..." if plan.action.creates else "Resuming session...")
    return _launch(settings, plan.argv)


def _launch(settings: Settings, args: list[str]) -> int:
    """Launch claude with the given arguments and return its exit status."""
    launcher = select_launcher(settings.claude_command, settings.launch_mode)
    try:
        return launcher.launch(args)
    except CommandNotFoundError as e:
        output.print_error(escape(str(e)))
        output.print_error("Install Claude Code (https://claude.ai/code) or set CS_CLAUDE_COMMAND")
        return e.exit_code
    except SessionResumerError as e:
        output.print_error(escape(str(e)))
        return e.exit_code


def _self_update() -> int:
    """Upgrade cs with the running interpreter's pip."""
    output.print_info(f"Upgrading {DIST_NAME}...")
    launcher = SpawnLauncher(sys.executable)
    try:
        code = launcher.launch(["-m", "pip", "install", "--upgrade", DIST_NAME])
    except SessionResumerError as e:
        output.print_error(escape(str(e)))
        return e.exit_code
    if code == 0:
        output.print_success(f"{DIST_NAME} is up to date")
    else:
        output.print_error(f"Upgrade failed (pip exited with {code})")
    return code


def main():
    """CLI entry point."""
    app(prog_name="cs")


if __name__ == "__main__":
    main()
