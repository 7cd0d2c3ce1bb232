"""Project config (.playwright-review/config.json).

Config controls discovery and output only; the rule catalog is fixed.
Command-line flags override whatever the file sets.
"""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from playwright_review.fallbacks import log_best_effort_failure, warn_best_effort
from playwright_review.utils import PROJECT_ROOT

CONFIG_FILE = PROJECT_ROOT / ".playwright-review" / "config.json"
logger = logging.getLogger(__name__)
MIN_FAIL_UNDER = 0
MAX_FAIL_UNDER = 10


@dataclass(frozen=True)
class ConfigKey:
    type: type
    default: object
    description: str


CONFIG_SCHEMA: dict[str, ConfigKey] = {
    "exclude": ConfigKey(list, [], "Path patterns to exclude from discovery"),
    "include_js": ConfigKey(bool, False, "Also review *.spec.js / *.test.js files"),
    "jobs": ConfigKey(int, 1, "Files reviewed in parallel (1 = sequential)"),
    "fail_under": ConfigKey(
        int, 0, "Exit non-zero when any file scores below this (0 = never)"
    ),
}


def default_config() -> dict[str, Any]:
    """Return a config dict with all keys set to their defaults."""
    return {k: copy.deepcopy(v.default) for k, v in CONFIG_SCHEMA.items()}


def _coerce_fail_under(value: object) -> tuple[int, bool]:
    """Coerce the fail-under threshold and report whether it is in range."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return MIN_FAIL_UNDER, False
    valid = MIN_FAIL_UNDER <= parsed <= MAX_FAIL_UNDER
    return parsed, valid


def _matches_type(value: object, expected: type) -> bool:
    # bool is an int subclass; an int key must not accept true/false.
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config from disk, filling missing or invalid keys with defaults.

    A missing file is normal and yields the defaults silently. An unreadable
    or malformed file also yields the defaults, with the failure logged.
    """
    p = path or CONFIG_FILE
    config = default_config()
    if not p.exists():
        return config
    try:
        raw = json.loads(p.read_text())
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        log_best_effort_failure(logger, f"read config {p}", exc)
        return config
    if not isinstance(raw, dict):
        warn_best_effort(f"Ignoring {p}: expected a JSON object")
        return config

    for key, value in raw.items():
        schema = CONFIG_SCHEMA.get(key)
        if schema is None:
            logger.debug("Ignoring unknown config key %r in %s", key, p)
            continue
        if not _matches_type(value, schema.type):
            warn_best_effort(
                f"Config key '{key}' should be {schema.type.__name__}; using default"
            )
            continue
        config[key] = value

    fail_under, valid = _coerce_fail_under(config["fail_under"])
    if not valid:
        warn_best_effort(
            f"Expected integer {MIN_FAIL_UNDER}-{MAX_FAIL_UNDER} for fail_under, "
            f"got: {config['fail_under']}; using default"
        )
        fail_under = CONFIG_SCHEMA["fail_under"].default
    config["fail_under"] = fail_under
    if config["jobs"] < 1:
        config["jobs"] = 1
    config["exclude"] = [str(item) for item in config["exclude"]]
    return config


__all__ = ["CONFIG_FILE", "CONFIG_SCHEMA", "ConfigKey", "default_config", "load_config"]
