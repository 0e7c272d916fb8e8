"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RULEPRED_*`` prefix
  3. TOML file    — ``rulepred.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rulepred.config.discovery import find_config, read_config
from rulepred.config.models import FilterConfig, RulesConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``rulepred.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RulePredSettings(BaseSettings):
    """Unified settings for the rulepred CLI.

    Attributes:
        root: Directory relative rule paths resolve against (parent of
            ``rulepred.toml``, or CWD if no config found).
        config_path: The TOML file in effect, or None.
        rules_path: Explicit ``--rules`` override, or None to use
            ``[rules] path``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RULEPRED_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    rules_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    rules: RulesConfig = Field(default_factory=RulesConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> RulePredSettings:
        """Construct settings from a CLI invocation.

        Discovers ``rulepred.toml`` via walk-up (or explicit *config_path*),
        resolves *root* from the config file's parent directory, and
        merges CLI flags as highest-priority overrides. Flags passed as
        None are dropped so they don't mask lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        flags = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(root=resolved_root, config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None

    def resolve_rules_path(self) -> Path:
        """Return the rule file to load, absolute where possible."""
        path = self.rules_path if self.rules_path is not None else Path(self.rules.path)
        if path.is_absolute():
            return path
        if self.rules_path is not None:
            return Path.cwd() / path
        return self.root / path
