"""
cs - Claude Code Session Manager

Gives every folder+branch its own Claude Code session. The session
identifier is a deterministic UUID v5 of "<folder>+<branch>", so running
cs in the same place always lands in the same conversation.

Architecture:
    - identity: Session name -> identifier derivation
    - registry: File-backed set of identifiers cs has created
    - arguments: Splits cs flags from arguments forwarded to claude
    - resolver: Chooses create/resume and builds the claude command line
    - launcher: Replaces the process with claude, or spawns and waits

Example usage:
    from session_resumer import IdentityDeriver, SessionRegistry, SessionResolver
    from session_resumer import classify, detect_workspace

    resolver = SessionResolver(IdentityDeriver(), SessionRegistry())
    plan = resolver.resolve(detect_workspace(), classify(["--dry-run"]))
    print(plan.session_id, plan.action.value)
"""

__version__ = "0.4.0"
__author__ = "cs contributors"

DIST_NAME = "claude-session-resumer"

from .arguments import (
    ArgumentError,
    ClearRegistry,
    Help,
    ListRegistry,
    Outcome,
    Passthrough,
    RunSession,
    SelfUpdate,
    Version,
    classify,
)
from .errors import (
    CommandNotFoundError,
    LaunchError,
    RegistryError,
    SessionResumerError,
    WorkspaceError,
)
from .identity import DEFAULT_NAMESPACE, IdentityDeriver, derive, parse_namespace, resolve_namespace
from .launcher import ExecLauncher, Launcher, SpawnLauncher, select_launcher
from .registry import SessionRegistry, default_registry_path
from .resolver import SessionAction, SessionPlan, SessionResolver
from .workspace import WorkspaceContext, detect_workspace, get_folder_name, get_git_branch

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "DIST_NAME",
    # Identity
    "DEFAULT_NAMESPACE",
    "IdentityDeriver",
    "derive",
    "parse_namespace",
    "resolve_namespace",
    # Registry
    "SessionRegistry",
    "default_registry_path",
    # Arguments
    "classify",
    "Outcome",
    "Help",
    "Version",
    "ListRegistry",
    "ClearRegistry",
    "SelfUpdate",
    "Passthrough",
    "RunSession",
    "ArgumentError",
    # Workspace
    "WorkspaceContext",
    "detect_workspace",
    "get_folder_name",
    "get_git_branch",
    # Resolver
    "SessionAction",
    "SessionPlan",
    "SessionResolver",
    # Launcher
    "Launcher",
    "ExecLauncher",
    "SpawnLauncher",
    "select_launcher",
    # Errors
    "SessionResumerError",
    "WorkspaceError",
    "RegistryError",
    "LaunchError",
    "CommandNotFoundError",
]
