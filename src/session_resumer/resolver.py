#!/usr/bin/env python3
"""
Session Resolver for cs

Decides whether the current workspace starts a new Claude Code session
or resumes a known one, and builds the argument vector for claude.

Priority:
1. --resume: hand the identifier to claude's resume picker, registry untouched
2. --force / --reset / unknown identifier: create with --session-id
3. Otherwise: resume the registered session with -r
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from .arguments import RunSession
from .identity import IdentityDeriver
from .registry import SessionRegistry
from .workspace import WorkspaceContext

logger = logging.getLogger(__name__)

CREATE_FLAG = "--session-id"
RESUME_EXACT_FLAG = "-r"
RESUME_PICKER_FLAG = "--resume"


class SessionAction(str, Enum):
    """How cs hands the session to claude."""

    NEW = "new"
    EXISTS = "exists"
    FORCE_CREATE = "force-create"
    RESUME_WITH_PICKER = "resume-with-picker"

    @property
    def creates(self) -> bool:
        return self in (SessionAction.NEW, SessionAction.FORCE_CREATE)


@dataclass
class SessionPlan:
    """
    The resolved session and the claude invocation for it.

    Attributes:
        session_name: "<folder>+<branch>" or "<folder>"
        session_id: Identifier derived from the session name
        action: Chosen action
        existed: Whether the identifier was registered when checked
        has_branch: Whether a git branch contributed to the name
        dry_run: Whether the plan is for display only
        argv: Arguments for claude (directive, identifier, pass-through)
    """

    session_name: str
    session_id: str
    action: SessionAction
    existed: bool
    has_branch: bool
    dry_run: bool = False
    argv: list[str] = field(default_factory=list)


def directive_for(action: SessionAction, session_id: str) -> list[str]:
    """Return the claude flag/value pair selecting a session."""
    if action is SessionAction.RESUME_WITH_PICKER:
        return [RESUME_PICKER_FLAG, session_id]
    if action.creates:
        return [CREATE_FLAG, session_id]
    return [RESUME_EXACT_FLAG, session_id]


class SessionResolver:
    """Composes identity derivation and the registry into a SessionPlan."""

    def __init__(self, deriver: IdentityDeriver, registry: SessionRegistry):
        """
        Initialize the resolver.

        Args:
            deriver: Identity deriver bound to the configured namespace
            registry: Session registry to consult and update
        """
        self.deriver = deriver
        self.registry = registry

    def resolve(self, context: WorkspaceContext, run: RunSession) -> SessionPlan:
        """
        Resolve the session for a workspace.

        A reset always drops the registry entry, even on a dry run. A dry
        run never records a new identifier.

        Args:
            context: Workspace folder and branch
            run: Classified command line

        Returns:
            SessionPlan with the action and the claude argument vector
        """
        session_name = context.session_name
        session_id = self.deriver.session_id(session_name)

        if run.reset:
            logger.debug("Resetting session %s", session_id)
            self.registry.remove(session_id)

        exists = session_id in self.registry.load()

        action = self._decide(run, exists)

        if action.creates and not exists and not run.dry_run:
            self.registry.save(session_id)

        return SessionPlan(
            session_name=session_name,
            session_id=session_id,
            action=action,
            existed=exists,
            has_branch=context.has_branch,
            dry_run=run.dry_run,
            argv=directive_for(action, session_id) + list(run.passthrough),
        )

    @staticmethod
    def _decide(run: RunSession, exists: bool) -> SessionAction:
        if run.resume:
            return SessionAction.RESUME_WITH_PICKER
        if run.force or run.reset:
            return SessionAction.FORCE_CREATE
        if not exists:
            return SessionAction.NEW
        return SessionAction.EXISTS
