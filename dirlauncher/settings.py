#===============================================================================
#  DirLauncher | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Load/save of engine settings (probe cache TTL, probe timeout, logging).
#  Launcher and directory records are not stored here; they belong to the
#  config store that calls into the engine.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict

from .constants import CACHE_TTL_SECONDS, LOG_RETENTION_DAYS, PROBE_TIMEOUT_SECONDS

logger = logging.getLogger("dirlauncher.Settings")


# key -> type the value must convert to (and be > 0)
NUMERIC_SETTINGS = (
    ("cache_ttl_seconds", float),
    ("probe_timeout_seconds", float),
    ("log_retention_days", int),
)


def default_settings() -> Dict[str, Any]:
    return {
        "cache_ttl_seconds": CACHE_TTL_SECONDS,
        "probe_timeout_seconds": PROBE_TIMEOUT_SECONDS,
        "log_level": "INFO",
        "log_retention_days": LOG_RETENTION_DAYS,
        "log_dir": "",              # empty -> <base>/.dirlauncher/logs
    }


def _positive(data: Dict[str, Any], key: str, default: Any, cast: Callable[[Any], Any]) -> Any:
    raw = data.get(key)
    try:
        if isinstance(raw, bool):
            raise TypeError(key)
        value = cast(raw)
    except (TypeError, ValueError):
        value = None
    if value is None or not value > 0:
        logger.warning("Ignoring %s=%r, using %s", key, raw, default)
        return default
    return value


def load_settings(settings_path: Path) -> Dict[str, Any]:
    """Load settings from disk (or defaults). Missing or invalid values fall back to defaults."""
    d = default_settings()
    if not settings_path.exists():
        return d
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s, using defaults: %s", settings_path, e)
        return d
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", settings_path)
        return d
    for k in d:
        if k not in data:
            data[k] = d[k]
    for k, cast in NUMERIC_SETTINGS:
        data[k] = _positive(data, k, d[k], cast)
    if not isinstance(data.get("log_level"), str):
        logger.warning("Ignoring log_level=%r, using %s", data.get("log_level"), d["log_level"])
        data["log_level"] = d["log_level"]
    return data


def save_settings(settings_path: Path, settings: Dict[str, Any]) -> None:
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(settings, indent=2), encoding="utf-8")
