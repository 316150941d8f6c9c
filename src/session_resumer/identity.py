#!/usr/bin/env python3
"""
Session Identity for cs

Derives deterministic session identifiers from a session name.
The identifier is a name-based (version 5) UUID: the same namespace and
name always produce the same identifier, so a folder+branch pair maps to
the same Claude Code session on every run.

Namespace resolution:
- A configured override (32 hex digits, hyphens optional)
- Otherwise the RFC 4122 DNS namespace
"""

import logging
import string
import uuid

logger = logging.getLogger(__name__)

# RFC 4122 DNS namespace (6ba7b810-9dad-11d1-80b4-00c04fd430c8)
DEFAULT_NAMESPACE = uuid.NAMESPACE_DNS

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_namespace(text: str) -> uuid.UUID | None:
    """
    Parse a namespace override into a UUID.

    Every non-hex character is dropped first, so the canonical hyphenated
    form, the bare 32-digit form and mixed case all parse to the same value.

    Args:
        text: Namespace string from configuration

    Returns:
        Parsed UUID, or None if the text does not hold exactly 32 hex digits
    """
    digits = "".join(c for c in text if c in _HEX_DIGITS)
    if len(digits) != 32:
        return None
    return uuid.UUID(hex=digits)


def resolve_namespace(override: str | None = None) -> uuid.UUID:
    """
    Resolve the namespace used for identifier derivation.

    A malformed override is ignored and the default namespace is used.

    Args:
        override: Optional namespace string (e.g. from CS_NAMESPACE)

    Returns:
        Namespace UUID
    """
    if override:
        parsed = parse_namespace(override)
        if parsed is not None:
            return parsed
        logger.debug("Ignoring malformed namespace override %r", override)
    return DEFAULT_NAMESPACE


def derive(namespace: uuid.UUID | bytes, name: str) -> str:
    """
    Derive the session identifier for a name.

    SHA-1 over the namespace bytes followed by the UTF-8 name, truncated to
    16 bytes with the version 5 and RFC 4122 variant bits set.

    Args:
        namespace: Namespace UUID or its 16 raw bytes
        name: Session name (e.g. "my-project+main")

    Returns:
        Lowercase 36-character identifier (8-4-4-4-12)
    """
    if isinstance(namespace, bytes):
        namespace = uuid.UUID(bytes=namespace)
    return str(uuid.uuid5(namespace, name))


class IdentityDeriver:
    """Derives session identifiers within a fixed namespace."""

    def __init__(self, namespace: uuid.UUID = DEFAULT_NAMESPACE):
        self.namespace = namespace

    @classmethod
    def from_override(cls, override: str | None) -> "IdentityDeriver":
        """Create a deriver from an optional namespace override string."""
        return cls(resolve_namespace(override))

    def session_id(self, session_name: str) -> str:
        """Return the identifier for a session name."""
        return derive(self.namespace, session_name)
