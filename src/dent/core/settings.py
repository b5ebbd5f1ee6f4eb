"""
Settings for the Dent engine and CLI.

Resolution order (later wins):
1. Defaults
2. The ``[dent]`` table of a TOML file (an explicit path, or ``dent.toml``
   in the working directory when present)
3. Environment variables ``DENT_ENCODING``, ``DENT_BUILTINS``,
   ``DENT_LOG_LEVEL``

Example dent.toml:

    [dent]
    encoding = "utf-8"
    builtins = true
    log_level = "INFO"
"""

from __future__ import annotations

import codecs
import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "dent.toml"

_ENV_VARS = {
    "encoding": "DENT_ENCODING",
    "builtins": "DENT_BUILTINS",
    "log_level": "DENT_LOG_LEVEL",
}

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class DentSettings(BaseModel):
    """Engine and CLI configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str = "utf-8"
    builtins: bool = True
    log_level: str = "WARNING"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}") from None
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper().strip()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        data = tomllib.load(f)
    section = data.get("dent", {})
    if not isinstance(section, dict):
        raise ValueError(f"[dent] in {path} must be a table")
    return section


def _read_env(environ: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for field, var in _ENV_VARS.items():
        raw = environ.get(var)
        if raw is not None and raw.strip():
            values[field] = raw.strip()
    return values


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> DentSettings:
    """Load settings from a TOML file and the environment.

    Args:
        path: Explicit config file. If omitted, ``dent.toml`` in the working
            directory is used when it exists.
        environ: Environment mapping (defaults to ``os.environ``).

    Returns:
        Validated settings.

    Raises:
        FileNotFoundError: If an explicit ``path`` does not exist.
        pydantic.ValidationError: If a value is invalid.
    """
    values: dict[str, Any] = {}

    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_FILE
        if candidate.is_file():
            path = candidate
    if path is not None:
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")
        logger.debug("Reading settings from %s", path)
        values.update(_read_toml(path))

    values.update(_read_env(os.environ if environ is None else environ))
    return DentSettings.model_validate(values)
