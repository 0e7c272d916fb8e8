"""Predicate factories over rule namespaces and tags.

Each factory captures its criteria by value and returns a plain
callable ``rule -> bool``. Callers combine results with ``and``,
``or`` and ``not`` and apply them with ``filter()`` or comprehensions.

NOTE: An empty or missing tag list passed to :func:`matches_all_tags`
or :func:`matches_any_tag` selects *untagged* rules only. It does not
match everything.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from rulepred.domain.ids import extract_namespace
from rulepred.domain.rules import Rule

RulePredicate = Callable[[Rule], bool]

TagArgs = str | Iterable[str] | None

__all__ = [
    "RulePredicate",
    "extract_namespace",
    "has_any_tag",
    "has_no_tags",
    "matches_all_tags",
    "matches_any_namespace",
    "matches_any_tag",
    "matches_namespace",
]


def _tag_set(tags: tuple[TagArgs, ...]) -> frozenset[str]:
    """Collapse variadic tags or a single collection into a frozenset."""
    if len(tags) == 1 and not isinstance(tags[0], str):
        only = tags[0]
        if only is None:
            return frozenset()
        return frozenset(only)
    for tag in tags:
        if not isinstance(tag, str):
            msg = (
                "Pass tags either as separate strings or as one collection, "
                f"got {type(tag).__name__} among several arguments"
            )
            raise TypeError(msg)
    return frozenset(tags)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Namespace
# ---------------------------------------------------------------------------


def matches_namespace(namespace: str | None) -> RulePredicate:
    """Match rules whose namespace equals *namespace*.

    ``None`` matches rules without a namespace.
    """

    def predicate(rule: Rule) -> bool:
        return extract_namespace(rule) == namespace

    return predicate


def matches_any_namespace(*namespaces: str | None) -> RulePredicate:
    """Match rules whose namespace is any of *namespaces*.

    ``None`` is a valid member, so rules without a namespace match
    when it is passed.
    """
    namespace_set = frozenset(namespaces)

    def predicate(rule: Rule) -> bool:
        return extract_namespace(rule) in namespace_set

    return predicate


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


def has_any_tag() -> RulePredicate:
    """Match rules carrying at least one tag."""

    def predicate(rule: Rule) -> bool:
        return len(rule.tags) > 0

    return predicate


def has_no_tags() -> RulePredicate:
    """Match rules without tags."""

    def predicate(rule: Rule) -> bool:
        return len(rule.tags) == 0

    return predicate


def matches_all_tags(*tags: TagArgs) -> RulePredicate:
    """Match rules carrying every tag in *tags* (they may carry more).

    Accepts ``matches_all_tags("a", "b")`` or ``matches_all_tags(["a", "b"])``.
    With no tags, or ``None``, this is :func:`has_no_tags`.
    """
    tag_set = _tag_set(tags)
    if not tag_set:
        return has_no_tags()

    def predicate(rule: Rule) -> bool:
        return tag_set.issubset(rule.tags)

    return predicate


def matches_any_tag(*tags: TagArgs) -> RulePredicate:
    """Match rules sharing at least one tag with *tags*.

    Accepts ``matches_any_tag("a", "b")`` or ``matches_any_tag(["a", "b"])``.
    With no tags, or ``None``, this is :func:`has_no_tags`.
    """
    tag_set = _tag_set(tags)
    if not tag_set:
        return has_no_tags()

    def predicate(rule: Rule) -> bool:
        return not tag_set.isdisjoint(rule.tags)

    return predicate
