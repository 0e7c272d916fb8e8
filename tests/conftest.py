"""Shared pytest fixtures and test helpers for rulepred tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from rulepred.config.settings import RulePredSettings
from rulepred.infrastructure.catalog import RuleCatalog

RULES_YAML = """\
rules:
  - uid: "hue:evening-lights"
    name: Evening lights
    tags: [lighting, evening]
  - uid: "hue:wake-up"
    name: Wake up
    tags: [lighting, morning]
  - uid: "zwave:door-alarm"
    name: Door alarm
    tags: [security]
    visibility: EXPERT
  - uid: "zwave:heartbeat"
    name: Heartbeat
  - uid: "standalone"
    name: Standalone
    tags: [experimental]
  - uid: ":orphan"
    name: Orphan
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    """A rule file with six rules: two namespaces plus two without one."""
    path = tmp_path / "rules.yaml"
    path.write_text(RULES_YAML, encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> RulePredSettings:
    monkeypatch.delenv("RULEPRED_CONFIG", raising=False)
    return RulePredSettings.from_cli(root=tmp_path)


@pytest.fixture
def catalog(settings: RulePredSettings, rules_file: Path) -> RuleCatalog:
    """Catalog over ``rules_file`` (the default ``rules.yaml`` under root)."""
    return RuleCatalog(settings)


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so the CLI only sees test files."""
    monkeypatch.delenv("RULEPRED_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
