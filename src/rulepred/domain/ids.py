"""Rule identifier parsing — namespace prefix extraction.

A rule UID is optionally composed as ``<namespace>:<local-id>``.
The namespace is derived from the UID on every call; it is never
stored on the rule.

INVARIANT: A namespace is either a non-empty string or None.
There is no empty-string namespace.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rulepred.domain.rules import Rule

# Separator between namespace and local id. Shared by every UID.
PREFIX_SEPARATOR = ":"


def namespace_of(uid: str | None) -> str | None:
    """Return the namespace prefix of *uid*, or None.

    Only the first separator counts. A missing separator or an empty
    prefix both yield None.

    Examples:
        >>> namespace_of("hue:livingroom")
        'hue'
        >>> namespace_of("a:b:c")
        'a'
        >>> namespace_of(":orphan") is None
        True
        >>> namespace_of("bare") is None
        True
    """
    if uid is None:
        return None
    index = uid.find(PREFIX_SEPARATOR)
    if index > 0:
        return uid[:index]
    return None


def extract_namespace(rule: Rule | None) -> str | None:
    """Return the namespace of *rule*, or None if it has none.

    Total over its input: a missing rule or a missing UID gives None.
    """
    if rule is None:
        return None
    return namespace_of(rule.uid)
