"""Rule shapes consumed by the predicate factories.

The predicates only need two things from a rule: its UID and its tags.
:class:`Rule` captures that as a structural protocol, so rule objects
owned by any engine can be filtered without adapting them.

:class:`RuleModel` is the concrete rule loaded from rule files.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, Field, field_validator


@runtime_checkable
class Rule(Protocol):
    """Anything exposing a UID and a tag collection.

    INVARIANT: ``tags`` is never None. It may be empty.
    """

    @property
    def uid(self) -> str | None: ...

    @property
    def tags(self) -> Collection[str]: ...


Visibility = Literal["VISIBLE", "HIDDEN", "EXPERT"]


class RuleModel(BaseModel):
    """A rule as described in a rule file."""

    model_config = {"frozen": True}

    uid: str | None = None
    name: str | None = None
    description: str | None = None
    tags: frozenset[str] = Field(default_factory=frozenset)
    visibility: Visibility = "VISIBLE"

    @field_validator("tags", mode="before")
    @classmethod
    def _none_tags_are_empty(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            return frozenset({value})
        return value
