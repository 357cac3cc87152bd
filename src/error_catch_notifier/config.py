from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

CONFIG_SECTION = "error_catch_notifier"


class ConfigError(ValueError):
    """Raised when a notifier config file is malformed."""


def _parse_flag(raw: str) -> bool:
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


def _coerce_flag(raw: Any, fallback: bool) -> bool:
    """YAML booleans pass through; strings and numbers go through the env flag rules."""
    if raw is None:
        return fallback
    if isinstance(raw, bool):
        return raw
    return _parse_flag(str(raw))


def _parse_level(raw: Union[str, int, None], fallback: int) -> int:
    """Accept a logging level name ("INFO") or number; anything else gives `fallback`."""
    if raw is None:
        return fallback
    if isinstance(raw, bool):
        return fallback
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else fallback


@dataclass(frozen=True)
class NotifierConfig:
    """
    Startup settings for the notifier and its diagnostic logging.

    Parameters
    ----------
    catching_enabled
        Initial catching flag. Still subject to the rule that catching stays
        off without at least one valid subscriber.
    logging_enabled
        Initial logging flag for subscriber diagnostics.
    console_level
        Logging level for console output.
    file_level
        Logging level for file output.
    log_file
        If set, diagnostics are also written to this file.
    env_prefix
        Prefix for environment-variable overrides, e.g. "MYAPP_".

    Usage example
    -------------
        cfg = NotifierConfig(catching_enabled=True, logging_enabled=True)
    """

    catching_enabled: bool = False
    logging_enabled: bool = False

    console_level: int = logging.WARNING
    file_level: int = logging.DEBUG
    log_file: Optional[Path] = None

    env_prefix: str = field(default="", repr=False)

    @classmethod
    def from_env(cls, *, default: Optional["NotifierConfig"] = None) -> "NotifierConfig":
        """
        Create config from environment variables.

        Supported variables (prefix controlled by env_prefix on `default`):
        - <PFX>ERROR_CATCHING: "1"/"0"
        - <PFX>ERROR_LOGGING: "1"/"0"
        - <PFX>LOG_FILE: path
        - <PFX>LOG_LEVEL: level name or number, applied to the console

        Usage example
        -------------
            cfg = NotifierConfig.from_env(default=NotifierConfig(env_prefix="MYAPP_"))
        """
        base = default if default is not None else cls()
        pfx = base.env_prefix

        catching_raw = os.getenv(f"{pfx}ERROR_CATCHING")
        catching = base.catching_enabled if catching_raw is None else _parse_flag(catching_raw)

        logging_raw = os.getenv(f"{pfx}ERROR_LOGGING")
        logging_enabled = base.logging_enabled if logging_raw is None else _parse_flag(logging_raw)

        log_file_raw = os.getenv(f"{pfx}LOG_FILE", "").strip()
        log_file = Path(log_file_raw) if log_file_raw else base.log_file

        console_level = _parse_level(os.getenv(f"{pfx}LOG_LEVEL"), base.console_level)

        return cls(
            catching_enabled=catching,
            logging_enabled=logging_enabled,
            console_level=console_level,
            file_level=base.file_level,
            log_file=log_file,
            env_prefix=pfx,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NotifierConfig":
        """Build a config from a plain mapping, ignoring unknown keys."""
        base = cls()
        log_file = data.get("log_file")
        return cls(
            catching_enabled=_coerce_flag(data.get("catching_enabled"), base.catching_enabled),
            logging_enabled=_coerce_flag(data.get("logging_enabled"), base.logging_enabled),
            console_level=_parse_level(data.get("console_level"), base.console_level),
            file_level=_parse_level(data.get("file_level"), base.file_level),
            log_file=Path(str(log_file)) if log_file else None,
            env_prefix=str(data.get("env_prefix", base.env_prefix)),
        )


def load_config(path: Path) -> NotifierConfig:
    """
    Load a NotifierConfig from a YAML file.

    Settings are read from the ``error_catch_notifier`` section when present,
    otherwise from the top-level mapping. A missing file gives defaults.

    Example file
    ------------
        error_catch_notifier:
          catching_enabled: true
          logging_enabled: true
          console_level: INFO
          log_file: logs/errors.log
    """
    if not path.exists():
        return NotifierConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    if data is None:
        return NotifierConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}.")

    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigError(f"'{CONFIG_SECTION}' in {path} must be a mapping.")
    return NotifierConfig.from_mapping(section)
