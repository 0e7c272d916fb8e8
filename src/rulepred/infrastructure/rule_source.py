"""Rule file reader.

Rule files are YAML (JSON is accepted too, as a YAML subset). The top
level is either a list of rule mappings or a mapping with a ``rules``
list::

    rules:
      - uid: "hue:evening-lights"
        name: Evening lights
        tags: [lighting, evening]
      - uid: standalone
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from rulepred.domain.rules import RuleModel

logger = logging.getLogger(__name__)


class RuleSourceError(Exception):
    """A rule file could not be read or did not describe rules."""

    def __init__(self, code: str, message: str, path: Path) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path


def _new_yaml() -> YAML:
    """Create a fresh safe-loading YAML parser."""
    return YAML(typ="safe", pure=True)


def parse_rules(data: Any, path: Path) -> list[RuleModel]:
    """Validate parsed YAML *data* into rule models."""
    if data is None:
        return []
    if isinstance(data, dict):
        if "rules" not in data:
            raise RuleSourceError(
                "RULES_INVALID", f"Expected a top-level 'rules' list in {path}", path
            )
        data = data["rules"]
        if data is None:
            return []
    if not isinstance(data, list):
        raise RuleSourceError(
            "RULES_INVALID",
            f"Expected a list of rules in {path}, got {type(data).__name__}",
            path,
        )

    rules: list[RuleModel] = []
    for index, entry in enumerate(data):
        try:
            rules.append(RuleModel.model_validate(entry))
        except ValidationError as exc:
            msg = f"Invalid rule at index {index} in {path}: {exc.error_count()} error(s)"
            raise RuleSourceError("RULES_INVALID", msg, path) from exc
    return rules


def load_rules(path: Path) -> list[RuleModel]:
    """Read and validate every rule in the file at *path*.

    Raises:
        RuleSourceError: ``RULES_NOT_FOUND`` if the file is missing,
            ``RULES_INVALID`` if it cannot be parsed or validated.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RuleSourceError("RULES_NOT_FOUND", f"Rule file not found: {path}", path) from exc
    except UnicodeDecodeError as exc:
        raise RuleSourceError("RULES_INVALID", f"Rule file is not UTF-8: {path}", path) from exc
    except OSError as exc:
        msg = f"Cannot read rule file {path}: {exc.strerror or exc}"
        raise RuleSourceError("RULES_INVALID", msg, path) from exc

    try:
        data = _new_yaml().load(raw)
    except YAMLError as exc:
        raise RuleSourceError("RULES_INVALID", f"Invalid YAML in {path}: {exc}", path) from exc

    rules = parse_rules(data, path)
    logger.debug("Loaded %d rules from %s", len(rules), path)
    return rules
