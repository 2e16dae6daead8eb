"""Project-wide defaults (.omegasort.json).

Config only supplies defaults for command-line flags; anything passed on the
command line wins. Keys cover the locale, case handling, path flavor,
comment prefix and backup naming.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from omegasort.utils import PROJECT_ROOT

CONFIG_FILE = PROJECT_ROOT / ".omegasort.json"
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigKey:
    type: type
    default: object
    description: str


CONFIG_SCHEMA: dict[str, ConfigKey] = {
    "locale": ConfigKey(str, "", "BCP-47 locale for text comparison (empty = code point order)"),
    "case_insensitive": ConfigKey(bool, False, "Compare text case-insensitively"),
    "windows": ConfigKey(bool, False, "Parse paths as Windows paths for path sort"),
    "comment_prefix": ConfigKey(str, "", "Prefix marking comment lines to keep with the next line"),
    "backup_suffix": ConfigKey(str, ".bak", "Suffix appended to the backup copy of a sorted file"),
}


def default_config() -> dict[str, Any]:
    """Return a config dict with all keys set to their defaults."""
    return {k: copy.deepcopy(v.default) for k, v in CONFIG_SCHEMA.items()}


def config_path() -> Path:
    override = os.environ.get("OMEGASORT_CONFIG")
    return Path(override) if override else CONFIG_FILE


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config from disk, filling missing keys with defaults.

    Unknown keys are dropped and values of the wrong type fall back to the
    default, so a stale or hand-edited file never breaks a sort.
    """
    p = path or config_path()
    config = default_config()
    if not p.exists():
        return config
    try:
        raw = json.loads(p.read_text())
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        logger.debug("Ignoring unreadable config file %s: %s", p, exc)
        return config
    if not isinstance(raw, dict):
        logger.debug("Ignoring config file %s: top level is not an object", p)
        return config

    for key, value in raw.items():
        schema = CONFIG_SCHEMA.get(key)
        if schema is None:
            logger.debug("Ignoring unknown config key %s in %s", key, p)
            continue
        if not isinstance(value, schema.type):
            logger.debug(
                "Ignoring config key %s in %s: expected %s, got %r",
                key, p, schema.type.__name__, value,
            )
            continue
        config[key] = value
    return config


def set_config_value(config: dict, key: str, raw: str) -> None:
    """Parse and set a config value from a raw string ("true"/"false" for bools)."""
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")

    schema = CONFIG_SCHEMA[key]
    if schema.type is bool:
        if raw.lower() in ("true", "1", "yes"):
            config[key] = True
        elif raw.lower() in ("false", "0", "no"):
            config[key] = False
        else:
            raise ValueError(f"Expected true/false for {key}, got: {raw}")
    elif key == "backup_suffix" and not raw.strip():
        raise ValueError("backup_suffix cannot be empty")
    else:
        config[key] = raw


def apply_env_overrides(config: dict, environ: dict[str, str] | None = None) -> dict:
    """Apply ``OMEGASORT_<KEY>`` environment variables on top of ``config``.

    Bad values are logged and skipped rather than aborting the run.
    """
    environ = os.environ if environ is None else environ
    for key in CONFIG_SCHEMA:
        raw = environ.get(f"OMEGASORT_{key.upper()}")
        if raw is None:
            continue
        try:
            set_config_value(config, key, raw)
        except ValueError as exc:
            logger.warning("Ignoring OMEGASORT_%s: %s", key.upper(), exc)
    return config
