#!/usr/bin/env python3
"""
Argument Classification for cs

Splits the raw command line into cs's own directives and an ordered list
of arguments forwarded verbatim to Claude Code.

Rules, applied in a single left-to-right scan:
- A leading Claude subcommand (mcp, doctor, ...) forwards everything as-is
- cs directives (--help, --version, --list, --clear, upgrade) end the scan
- cs mode flags (--dry-run, --force, --reset, --resume) set a flag
- --session-id is rejected; cs manages the session id itself
- Known Claude flags are forwarded, value flags together with their value
- Bare words are positional arguments (e.g. a prompt) and are forwarded
- A bare -- separator is dropped
- Anything else is an error
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

# Claude Code subcommands that do not take part in session management
CLAUDE_SUBCOMMANDS = frozenset({
    "config",
    "doctor",
    "install",
    "mcp",
    "migrate-installer",
    "plugin",
    "setup-token",
    "update",
})

# Claude Code flags without a value
CLAUDE_BOOLEAN_FLAGS = frozenset({
    "-c", "--continue",
    "-d", "--debug",
    "-p", "--print",
    "--verbose",
    "--ide",
    "--mcp-debug",
    "--strict-mcp-config",
    "--fork-session",
    "--include-partial-messages",
    "--replay-user-messages",
    "--dangerously-skip-permissions",
    "--allow-dangerously-skip-permissions",
})

# Claude Code flags followed by a value
CLAUDE_VALUE_FLAGS = frozenset({
    "--model",
    "--fallback-model",
    "--agent",
    "--agents",
    "--output-format",
    "--input-format",
    "--json-schema",
    "--permission-mode",
    "--permission-prompt-tool",
    "--allowedTools", "--allowed-tools",
    "--disallowedTools", "--disallowed-tools",
    "--tools",
    "--system-prompt",
    "--append-system-prompt",
    "--mcp-config",
    "--settings",
    "--setting-sources",
    "--add-dir",
    "--plugin-dir",
    "--max-turns",
    "--betas",
})

# Claude Code flags that would override the identifier cs derives
CONFLICTING_FLAGS = frozenset({"--session-id"})

END_OF_OPTIONS = "--"

HELP_FLAGS = ("--help", "-h")
VERSION_FLAGS = ("--version", "-v")
LIST_FLAGS = ("--list", "-l")
CLEAR_FLAGS = ("--clear",)
UPGRADE_FLAGS = ("upgrade", "--upgrade", "-U")
DRY_RUN_FLAGS = ("--dry-run", "-n")
FORCE_FLAGS = ("--force", "-f")
RESET_FLAGS = ("--reset",)
RESUME_FLAGS = ("--resume", "-R")


class Outcome:
    """Base class for classification results."""


@dataclass(frozen=True)
class Help(Outcome):
    """Show usage and exit."""


@dataclass(frozen=True)
class Version(Outcome):
    """Show the cs version and exit."""


@dataclass(frozen=True)
class ListRegistry(Outcome):
    """List the session registry and exit."""


@dataclass(frozen=True)
class ClearRegistry(Outcome):
    """Delete the session registry and exit."""


@dataclass(frozen=True)
class SelfUpdate(Outcome):
    """Upgrade cs itself."""


@dataclass(frozen=True)
class Passthrough(Outcome):
    """Forward a Claude subcommand untouched, bypassing session handling."""

    args: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RunSession(Outcome):
    """
    Start or resume the session for the current workspace.

    Attributes:
        dry_run: Show the session without launching Claude or recording it
        force: Create the session even if it is registered
        reset: Drop the registry entry before deciding
        resume: Let Claude resume with its own picker
        passthrough: Arguments forwarded to Claude, in input order
    """

    dry_run: bool = False
    force: bool = False
    reset: bool = False
    resume: bool = False
    passthrough: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ArgumentError(Outcome):
    """The command line could not be classified."""

    message: str


def is_known_flag(flag: str) -> bool:
    """Check whether a flag belongs to Claude Code."""
    return flag in CLAUDE_BOOLEAN_FLAGS or flag in CLAUDE_VALUE_FLAGS


def _conflict_error(flag: str) -> ArgumentError:
    return ArgumentError(
        f"{flag} conflicts with cs session management; "
        "cs derives the session id from folder and branch"
    )


def classify(raw_args: Sequence[str]) -> Outcome:
    """
    Classify a command line.

    Args:
        raw_args: Arguments after the program name

    Returns:
        The Outcome describing what cs should do
    """
    # A bare -- is dropped wherever it appears; click swallows the first one
    args = [arg for arg in raw_args if arg != END_OF_OPTIONS]
    if args and args[0] in CLAUDE_SUBCOMMANDS:
        return Passthrough(args=args)

    dry_run = force = reset = resume = False
    passthrough: list[str] = []

    i = 0
    while i < len(args):
        arg = args[i]

        if arg in HELP_FLAGS:
            return Help()
        if arg in VERSION_FLAGS:
            return Version()
        if arg in LIST_FLAGS:
            return ListRegistry()
        if arg in CLEAR_FLAGS:
            return ClearRegistry()
        if arg in UPGRADE_FLAGS:
            return SelfUpdate()

        if arg in DRY_RUN_FLAGS:
            dry_run = True
        elif arg in FORCE_FLAGS:
            force = True
        elif arg in RESET_FLAGS:
            reset = True
        elif arg in RESUME_FLAGS:
            resume = True
        elif arg in CONFLICTING_FLAGS:
            return _conflict_error(arg)
        elif arg in CLAUDE_BOOLEAN_FLAGS:
            passthrough.append(arg)
        elif arg in CLAUDE_VALUE_FLAGS:
            if i + 1 >= len(args):
                return ArgumentError(f"{arg} requires a value")
            passthrough.extend(args[i:i + 2])
            i += 1
        # Only flag tokens are split on "="; a prompt such as "x=1" is positional
        elif "=" in arg and arg.startswith("-"):
            flag = arg.split("=", 1)[0]
            if flag in CONFLICTING_FLAGS:
                return _conflict_error(flag)
            if not is_known_flag(flag):
                return ArgumentError(f"Unknown argument: {flag}")
            passthrough.append(arg)
        elif not arg.startswith("-"):
            passthrough.append(arg)
        else:
            return ArgumentError(f"Unknown argument: {arg}")

        i += 1

    return RunSession(
        dry_run=dry_run,
        force=force,
        reset=reset,
        resume=resume,
        passthrough=passthrough,
    )
