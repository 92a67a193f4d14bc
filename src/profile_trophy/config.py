"""Configuration models for Profile Trophy."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from profile_trophy.exceptions import ConfigError


class LayoutConfig(BaseModel):
    """Grid defaults applied when a request leaves an option unset."""
    panel_size: int = 110
    max_columns: int = 8
    max_rows: int = 3
    margin_width: int = 0
    margin_height: int = 0
    no_background: bool = False
    no_frame: bool = False


class FetchConfig(BaseModel):
    """GitHub API fetch parameters."""
    api_url: str = "https://api.github.com/graphql"
    repository_limit: int = 50
    languages_per_repository: int = 3
    timeout_seconds: float = 20.0


class ProfileTrophyConfig(BaseModel):
    """Top-level configuration composing all sub-configs."""
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)


_DEFAULT_PATHS = (".profile-trophy.yml", ".profile-trophy.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            yaml_data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if yaml_data is None:
        return {}
    if not isinstance(yaml_data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return yaml_data


def load_config(path: str | Path | None = None) -> ProfileTrophyConfig:
    """Load configuration from YAML file, environment variables, and defaults.

    Priority (highest to lowest):
    1. Environment variables (PROFILE_TROPHY_*)
    2. YAML config file
    3. Defaults
    """
    config_data: dict[str, Any] = {}

    if path is not None:
        config_path = Path(path)
        if config_path.is_file():
            config_data = _read_yaml(config_path)
    else:
        for default_path in _DEFAULT_PATHS:
            p = Path(default_path)
            if p.is_file():
                config_data = _read_yaml(p)
                break

    env_mapping = {
        "PROFILE_TROPHY_PANEL_SIZE": ("layout", "panel_size", int),
        "PROFILE_TROPHY_MAX_COLUMNS": ("layout", "max_columns", int),
        "PROFILE_TROPHY_MAX_ROWS": ("layout", "max_rows", int),
        "PROFILE_TROPHY_MARGIN_WIDTH": ("layout", "margin_width", int),
        "PROFILE_TROPHY_MARGIN_HEIGHT": ("layout", "margin_height", int),
        "PROFILE_TROPHY_API_URL": ("fetch", "api_url", str),
        "PROFILE_TROPHY_REPOSITORY_LIMIT": ("fetch", "repository_limit", int),
        "PROFILE_TROPHY_TIMEOUT": ("fetch", "timeout_seconds", float),
    }

    for env_var, (section, key, type_fn) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                converted = type_fn(value)
            except ValueError as exc:
                raise ConfigError(f"Invalid value for {env_var}: {value!r}") from exc
            config_data.setdefault(section, {})[key] = converted

    try:
        return ProfileTrophyConfig(**config_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
