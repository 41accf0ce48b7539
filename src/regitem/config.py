"""
Configuration for the regitem command line.

Defines Settings, a frozen dataclass carrying runtime options for the CLI layer.
The core library never reads configuration; everything here only changes how
the CLI logs and whether ``item hash`` forces canonicalization by default.

Precedence: env > TOML > defaults.

Sources
- TOML: ``[tool.regitem]`` in a pyproject-style file, or the top level of a
  ``regitem.toml``.
- Env: ``REGITEM_LOG_LEVEL``, ``REGITEM_FORCE``.

Examples:
    >>> from regitem.config import Settings
    >>> Settings()
    Settings(log_level='WARNING', force=False)
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

__all__ = [
    "Settings",
]

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in _TRUTHY
    return False


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for the CLI.

    Attributes:
        log_level (str): Root log level name ("DEBUG" ... "CRITICAL").
        force (bool): Default for ``item hash --force``.
    """

    log_level: str = "WARNING"
    force: bool = False

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def _apply_mapping(cls, base: Settings, cfg: dict[str, Any] | None) -> Settings:
        """Apply a loose config mapping onto Settings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base
        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            level = cfg["log_level"].strip().upper()
            if level in _LEVELS:
                s = replace(s, log_level=level)
        if "force" in cfg:
            s = replace(s, force=_bool(cfg["force"]))
        return s

    @classmethod
    def from_toml(cls, path: str | Path, base: Settings | None = None) -> Settings:
        """
        Build Settings from a TOML file. Missing files leave ``base`` untouched.

        A ``[tool.regitem]`` table is used when present (pyproject.toml);
        otherwise the top-level table is read (regitem.toml).
        """
        s = base or cls()
        p = Path(path)
        if not p.is_file():
            return s
        with p.open("rb") as fh:
            data = tomllib.load(fh)
        if p.name == "pyproject.toml":
            return cls._apply_mapping(s, data.get("tool", {}).get("regitem"))
        section = data.get("tool", {}).get("regitem")
        return cls._apply_mapping(s, section if isinstance(section, dict) else data)

    @classmethod
    def from_env(cls, base: Settings | None = None, prefix: str = "REGITEM_") -> Settings:
        """
        Build Settings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - REGITEM_LOG_LEVEL
            - REGITEM_FORCE (1/0/true/false/yes/no/on/off)
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        v = os.getenv(prefix + "LOG_LEVEL")
        if v:
            mapping["log_level"] = v
        v = os.getenv(prefix + "FORCE")
        if v:
            mapping["force"] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def load(cls, toml_path: str | Path | None = None) -> Settings:
        """
        Load Settings with precedence env > TOML > defaults.

        Args:
            toml_path: Explicit TOML file. Defaults to ``regitem.toml`` in the
                working directory, falling back to ``pyproject.toml``.
        """
        if toml_path is None:
            toml_path = Path("regitem.toml")
            if not toml_path.is_file():
                toml_path = Path("pyproject.toml")
        return cls.from_env(cls.from_toml(toml_path))
