"""Optional YAML configuration (``.react-state-patterns.yml``).

Example:
    pattern: "src/**/*.{jsx,tsx}"
    ignore: [node_modules, dist, "**/*.stories.tsx"]
    disable: [form-state-patterns]
    strict: true
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from react_state_patterns.rules import RULE_NAMES
from react_state_patterns.utils import DEFAULT_IGNORE, DEFAULT_PATTERN

log = logging.getLogger(__name__)

CONFIG_FILENAMES = (".react-state-patterns.yml", ".react-state-patterns.yaml")


class ConfigError(Exception):
    """Raised for an unreadable, malformed or invalid configuration file."""


class AnalyzerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pattern: str = DEFAULT_PATTERN
    ignore: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE))
    disable: list[str] = Field(default_factory=list)
    strict: bool = False

    @field_validator("disable")
    @classmethod
    def _known_rules(cls, names: list[str]) -> list[str]:
        unknown = [n for n in names if n not in RULE_NAMES]
        if unknown:
            raise ValueError(
                f"unknown rule(s): {', '.join(unknown)} (known: {', '.join(RULE_NAMES)})"
            )
        return names


def find_config(project_dir: Path) -> Path | None:
    for name in CONFIG_FILENAMES:
        candidate = project_dir / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, project_dir: Path | None = None) -> AnalyzerConfig:
    """Load an explicit config file, else one discovered in project_dir, else defaults."""
    if path is None and project_dir is not None:
        path = find_config(project_dir)
    if path is None:
        return AnalyzerConfig()

    log.debug("Loading config from %s", path)
    try:
        raw = yaml.safe_load(path.read_text())
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return AnalyzerConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    try:
        return AnalyzerConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
