"""Configuration helpers for YAML files and environment settings."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULTS: dict[str, Any] = {
    "algorithm": "merge",
    "log_level": "INFO",
    "merge": {"stable": False},
    "benchmark": {
        "sizes": [10, 100, 500],
        "datasets": ["random", "sorted", "reversed", "few_unique"],
        "repeat": 3,
        "seed": 1337,
    },
}


def _merge_dict(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | None, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return DEFAULTS merged with the YAML file at *path* and then *overrides*."""

    config = copy.deepcopy(DEFAULTS)
    if path:
        with Path(path).open("r", encoding="utf-8") as fh:
            file_cfg = yaml.safe_load(fh) or {}
        if not isinstance(file_cfg, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")
        config = _merge_dict(config, file_cfg)
    if overrides:
        config = _merge_dict(config, overrides)
    return config


class SortkitSettings(BaseSettings):
    """Environment driven settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    algorithm: str | None = Field(default=None, alias="SORTKIT_ALGORITHM")
    stable_merge: bool | None = Field(default=None, alias="SORTKIT_STABLE_MERGE")
    log_level: str | None = Field(default=None, alias="SORTKIT_LOG_LEVEL")

    def as_overrides(self) -> dict[str, Any]:
        """Return the variables that are set, shaped like the config dict."""

        overrides: dict[str, Any] = {}
        if self.algorithm is not None:
            overrides["algorithm"] = self.algorithm
        if self.stable_merge is not None:
            overrides["merge"] = {"stable": self.stable_merge}
        if self.log_level is not None:
            overrides["log_level"] = self.log_level
        return overrides


def load_settings() -> SortkitSettings:
    """Return settings initialised from environment."""

    return SortkitSettings()
