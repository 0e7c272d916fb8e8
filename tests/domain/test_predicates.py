"""Tests for namespace and tag predicate factories."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from rulepred.domain.predicates import (
    has_any_tag,
    has_no_tags,
    matches_all_tags,
    matches_any_namespace,
    matches_any_tag,
    matches_namespace,
)


@dataclass(frozen=True)
class _Rule:
    uid: str | None = None
    tags: frozenset[str] = field(default_factory=frozenset)


def _rule(uid: str | None = None, *tags: str) -> _Rule:
    return _Rule(uid=uid, tags=frozenset(tags))


XYZ = _rule("a:xyz", "x", "y", "z")
ONLY_Y = _rule("a:y", "y")
UNTAGGED = _rule("a:none")

SAMPLE_RULES = [XYZ, ONLY_Y, UNTAGGED, _rule("b:w", "w"), _rule(None), _rule(":x", "x")]


# ---------------------------------------------------------------------------
# Namespace
# ---------------------------------------------------------------------------


class TestMatchesNamespace:
    def test_matches_equal_namespace(self) -> None:
        pred = matches_namespace("a")
        assert pred(_rule("a:b"))
        assert not pred(_rule("c:b"))

    def test_none_matches_bare_uid(self) -> None:
        pred = matches_namespace(None)
        assert pred(_rule("ab"))
        assert not pred(_rule("a:b"))

    def test_none_matches_empty_prefix_and_missing_uid(self) -> None:
        pred = matches_namespace(None)
        assert pred(_rule(":b"))
        assert pred(_rule(None))

    def test_concrete_never_matches_absent(self) -> None:
        pred = matches_namespace("a")
        assert not pred(_rule("ab"))
        assert not pred(_rule(None))

    def test_prefix_is_not_a_match(self) -> None:
        """Namespace comparison is equality, not startswith."""
        assert not matches_namespace("a")(_rule("ab:c"))


class TestMatchesAnyNamespace:
    def test_matches_listed_namespaces(self) -> None:
        pred = matches_any_namespace("a", "b")
        assert pred(_rule("a:1"))
        assert pred(_rule("b:1"))
        assert not pred(_rule("c:1"))

    def test_absent_only_when_listed(self) -> None:
        assert not matches_any_namespace("a")(_rule("bare"))
        assert matches_any_namespace("a", None)(_rule("bare"))
        assert matches_any_namespace("a", None)(_rule(None))

    def test_duplicates_collapse(self) -> None:
        pred = matches_any_namespace("a", "a", None, None)
        assert pred(_rule("a:1"))
        assert pred(_rule("bare"))
        assert not pred(_rule("b:1"))

    def test_no_namespaces_matches_nothing(self) -> None:
        pred = matches_any_namespace()
        assert not any(pred(r) for r in SAMPLE_RULES)


# ---------------------------------------------------------------------------
# Tag presence
# ---------------------------------------------------------------------------


class TestTagPresence:
    def test_has_any_tag(self) -> None:
        assert has_any_tag()(XYZ)
        assert not has_any_tag()(UNTAGGED)

    def test_has_no_tags(self) -> None:
        assert has_no_tags()(UNTAGGED)
        assert not has_no_tags()(ONLY_Y)

    def test_complementary(self) -> None:
        for rule in SAMPLE_RULES:
            assert has_any_tag()(rule) is not has_no_tags()(rule)


# ---------------------------------------------------------------------------
# All tags
# ---------------------------------------------------------------------------


class TestMatchesAllTags:
    def test_subset_matches(self) -> None:
        assert matches_all_tags(["x", "y"])(XYZ)

    def test_missing_tag_fails(self) -> None:
        assert not matches_all_tags(["x", "w"])(XYZ)

    def test_exact_set_matches(self) -> None:
        assert matches_all_tags("x", "y", "z")(XYZ)

    def test_variadic_and_collection_agree(self) -> None:
        variadic = matches_all_tags("x", "y")
        collection = matches_all_tags({"x", "y"})
        for rule in SAMPLE_RULES:
            assert variadic(rule) == collection(rule)

    def test_duplicates_collapse(self) -> None:
        assert matches_all_tags("y", "y")(ONLY_Y)

    @pytest.mark.parametrize(
        ("factory", "args"),
        [
            (matches_all_tags, (["y"], ["z"])),
            (matches_all_tags, ("x", ["y"])),
            (matches_any_tag, ("a", None)),
            (matches_any_tag, (["a"], {"b"})),
        ],
    )
    def test_mixed_arguments_rejected(
        self, factory: Callable[..., object], args: tuple[object, ...]
    ) -> None:
        """Several arguments must all be strings; collections are never dropped."""
        with pytest.raises(TypeError):
            factory(*args)

    def test_single_string_is_one_tag(self) -> None:
        """A lone string is a tag, not an iterable of characters."""
        assert matches_all_tags("xy")(_rule("a:1", "xy"))
        assert not matches_all_tags("xy")(_rule("a:1", "x", "y"))

    def test_untagged_rule_fails(self) -> None:
        assert not matches_all_tags("x")(UNTAGGED)

    @pytest.mark.parametrize("empty", [[], (), set(), None])
    def test_empty_selects_untagged_only(self, empty: object) -> None:
        """Requiring all of nothing means untagged, not everything."""
        pred = matches_all_tags(empty)  # type: ignore[arg-type]
        for rule in SAMPLE_RULES:
            assert pred(rule) == has_no_tags()(rule)

    def test_no_arguments_selects_untagged_only(self) -> None:
        pred = matches_all_tags()
        assert pred(UNTAGGED)
        assert not pred(XYZ)


# ---------------------------------------------------------------------------
# Any tag
# ---------------------------------------------------------------------------


class TestMatchesAnyTag:
    def test_overlap_matches(self) -> None:
        assert matches_any_tag(["x", "y"])(ONLY_Y)

    def test_untagged_rule_fails(self) -> None:
        assert not matches_any_tag(["x", "y"])(UNTAGGED)

    def test_disjoint_fails(self) -> None:
        assert not matches_any_tag("q", "w")(XYZ)

    def test_variadic_and_collection_agree(self) -> None:
        variadic = matches_any_tag("x", "w")
        collection = matches_any_tag(["x", "w"])
        for rule in SAMPLE_RULES:
            assert variadic(rule) == collection(rule)

    @pytest.mark.parametrize("empty", [[], (), frozenset(), None])
    def test_empty_selects_untagged_only(self, empty: object) -> None:
        pred = matches_any_tag(empty)  # type: ignore[arg-type]
        for rule in SAMPLE_RULES:
            assert pred(rule) == has_no_tags()(rule)

    def test_no_arguments_selects_untagged_only(self) -> None:
        pred = matches_any_tag()
        assert pred(UNTAGGED)
        assert not pred(ONLY_Y)


# ---------------------------------------------------------------------------
# Predicate values
# ---------------------------------------------------------------------------


class TestPredicateValues:
    def test_criteria_captured_by_value(self) -> None:
        tags = ["x"]
        pred = matches_all_tags(tags)
        tags.append("missing")
        assert pred(XYZ)

    def test_idempotent(self) -> None:
        preds = [
            matches_namespace("a"),
            matches_any_namespace("a", None),
            has_any_tag(),
            has_no_tags(),
            matches_all_tags("x"),
            matches_any_tag("y"),
        ]
        for pred in preds:
            for rule in SAMPLE_RULES:
                assert pred(rule) == pred(rule)

    def test_composable_with_boolean_operators(self) -> None:
        in_a = matches_namespace("a")
        tagged_x = matches_any_tag("x")
        selected = [r for r in SAMPLE_RULES if in_a(r) and not tagged_x(r)]
        assert selected == [ONLY_Y, UNTAGGED]

    def test_usable_with_filter(self) -> None:
        assert list(filter(matches_namespace("b"), SAMPLE_RULES)) == [_rule("b:w", "w")]
