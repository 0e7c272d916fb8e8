"""FilterService — select rules by namespace and tags.

Three read-only operations:
- filter_rules: AND-combination of namespace and tag predicates
- list_namespaces: distinct namespaces with rule counts
- get_namespace: namespace of a bare UID
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from typing import Any

from rulepred.domain.ids import PREFIX_SEPARATOR, extract_namespace, namespace_of
from rulepred.domain.predicates import (
    RulePredicate,
    has_any_tag,
    has_no_tags,
    matches_all_tags,
    matches_any_namespace,
    matches_any_tag,
    matches_namespace,
)
from rulepred.domain.rules import RuleModel
from rulepred.services.base import BaseService
from rulepred.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

_TAG_MATCH_MODES = ("all", "any")


def _rule_item(rule: RuleModel) -> dict[str, Any]:
    return {
        "uid": rule.uid,
        "name": rule.name,
        "namespace": extract_namespace(rule),
        "tags": sorted(rule.tags),
        "visibility": rule.visibility,
    }


class FilterService(BaseService):
    """Filters the catalog's rules with namespace and tag predicates."""

    def build_predicates(
        self,
        *,
        namespaces: Sequence[str] | None = None,
        include_unnamespaced: bool = False,
        tags: Sequence[str] | None = None,
        tag_match: str = "all",
        tagged: bool | None = None,
        exclude_tags: Sequence[str] | None = None,
    ) -> list[RulePredicate]:
        """Translate filter criteria into a list of predicates to AND together.

        ``tags=None`` adds no tag criterion. An explicit empty ``tags``
        list selects untagged rules, same as the tag factories.

        Raises:
            ValueError: If *tag_match* is not ``"all"`` or ``"any"``.
        """
        if tag_match not in _TAG_MATCH_MODES:
            msg = f"Unknown tag match mode '{tag_match}', expected one of {_TAG_MATCH_MODES}"
            raise ValueError(msg)

        predicates: list[RulePredicate] = []

        targets: list[str | None] = list(namespaces or [])
        if include_unnamespaced:
            targets.append(None)
        if len(targets) == 1:
            predicates.append(matches_namespace(targets[0]))
        elif targets:
            predicates.append(matches_any_namespace(*targets))

        if tagged is True:
            predicates.append(has_any_tag())
        elif tagged is False:
            predicates.append(has_no_tags())

        if tags is not None:
            factory = matches_all_tags if tag_match == "all" else matches_any_tag
            predicates.append(factory(tags))

        if exclude_tags:
            excluded = matches_any_tag(exclude_tags)
            predicates.append(lambda rule: not excluded(rule))

        return predicates

    def filter_rules(
        self,
        *,
        namespaces: Sequence[str] | None = None,
        include_unnamespaced: bool = False,
        tags: Sequence[str] | None = None,
        tag_match: str = "all",
        tagged: bool | None = None,
        exclude_tags: Sequence[str] | None = None,
    ) -> ServiceResult:
        """Return the rules matching every given criterion.

        Args:
            namespaces: Keep rules in any of these namespaces.
            include_unnamespaced: Also keep rules without a namespace.
            tags: Tags to match; see *tag_match*.
            tag_match: ``"all"`` requires every tag, ``"any"`` at least one.
            tagged: True keeps tagged rules only, False untagged only.
            exclude_tags: Drop rules carrying any of these tags.
        """
        op = "filter_rules"
        if tag_match not in _TAG_MATCH_MODES:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_TAG_MATCH",
                    message=f"Unknown tag match mode '{tag_match}'",
                    detail={"allowed": list(_TAG_MATCH_MODES)},
                ),
            )

        rules = self._load_rules(op)
        if isinstance(rules, ServiceResult):
            return rules

        predicates = self.build_predicates(
            namespaces=namespaces,
            include_unnamespaced=include_unnamespaced,
            tags=tags,
            tag_match=tag_match,
            tagged=tagged,
            exclude_tags=exclude_tags,
        )
        matched = [rule for rule in rules if all(p(rule) for p in predicates)]
        logger.debug(
            "Matched %d of %d rules with %d criteria", len(matched), len(rules), len(predicates)
        )

        warnings: list[str] = []
        if tags is not None and not tags:
            warnings.append("Empty tag list selects untagged rules only")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "items": [_rule_item(rule) for rule in matched],
                "count": len(matched),
                "total": len(rules),
            },
            warnings=warnings,
            meta={
                "rules_path": str(self._catalog.path),
                "criteria": len(predicates),
            },
        )

    def list_namespaces(self) -> ServiceResult:
        """Count rules per namespace. Rules without one count under None."""
        op = "list_namespaces"
        rules = self._load_rules(op)
        if isinstance(rules, ServiceResult):
            return rules

        counts = Counter(extract_namespace(rule) for rule in rules)
        named = sorted(ns for ns in counts if ns is not None)
        items = [{"namespace": ns, "count": counts[ns]} for ns in named]
        if None in counts:
            items.append({"namespace": None, "count": counts[None]})

        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items), "total": len(rules)},
            meta={"rules_path": str(self._catalog.path)},
        )

    def get_namespace(self, uid: str) -> ServiceResult:
        """Report the namespace of *uid* without touching the rule file."""
        namespace = namespace_of(uid)
        if namespace is None:
            local_id = uid[1:] if uid.startswith(PREFIX_SEPARATOR) else uid
        else:
            local_id = uid[len(namespace) + len(PREFIX_SEPARATOR) :]
        return ServiceResult(
            ok=True,
            op="get_namespace",
            data={"uid": uid, "namespace": namespace, "local_id": local_id},
        )
