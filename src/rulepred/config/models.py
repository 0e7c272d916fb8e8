"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rulepred.toml only contains
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

TagMatch = Literal["all", "any"]


class RulesConfig(BaseModel):
    """[rules] section."""

    model_config = {"frozen": True}

    path: str = "rules.yaml"


class FilterConfig(BaseModel):
    """[filter] section."""

    model_config = {"frozen": True}

    tag_match: TagMatch = "all"

