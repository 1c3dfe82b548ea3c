"""Typed configuration schema and loader for the podreformat package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, constr, field_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ReformatOptions(BaseModel):
    """Options controlling how preformatted blocks are rewritten."""

    squash_blank_lines: bool
    tag: constr(strip_whitespace=True, min_length=1, pattern=r"^[A-Za-z][A-Za-z0-9:_-]*$")

    model_config = ConfigDict(extra="forbid")

    @field_validator("tag")
    @classmethod
    def _lower_tag(cls, value: str) -> str:
        return value.lower()


class IOSettings(BaseModel):
    """Encodings and buffering used when reading and writing documents."""

    encoding_in: str
    encoding_out: str
    read_size: conint(ge=1)

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Log level and the environment variable that may override it."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"]
    level_env: str

    model_config = ConfigDict(extra="forbid")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    reformat: ReformatOptions
    io: IOSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``logging.level_env``.
    """

    with (
        importlib_resources.files("podreformat.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    logging_section = merged.get("logging")
    level_env = logging_section.get("level_env") if isinstance(logging_section, dict) else None
    if isinstance(level_env, str) and level_env in environ:
        merged = deep_merge_dicts(merged, {"logging": {"level": environ[level_env]}})

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "ReformatOptions",
    "IOSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
