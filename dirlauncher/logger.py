#===============================================================================
#  DirLauncher | logger.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Logging setup for the engine.
#    - Development (DIRLAUNCHER_ENV=development): DEBUG, also echoed to stderr
#    - Otherwise: INFO and above, file only
#  Log files live under <base>/.dirlauncher/logs, one file per day, and are
#  pruned after LOG_RETENTION_DAYS.
#
#  Library modules only call logging.getLogger("dirlauncher.<Component>");
#  handlers are attached here, by the entry point.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import sys
import time
from datetime import date
from pathlib import Path
from typing import Optional

from .constants import APP_NAME, LOG_RETENTION_DAYS, LOGS_SUBDIR

LOG_FORMAT = "[%(asctime)s.%(msecs)03d] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def is_dev_mode() -> bool:
    return os.environ.get("DIRLAUNCHER_ENV", "").lower() == "development"


def ensure_log_dir(base_dir: Path) -> Path:
    logs_dir = base_dir / LOGS_SUBDIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def log_file_path(logs_dir: Path, day: Optional[date] = None) -> Path:
    day = day or date.today()
    return logs_dir / f"{APP_NAME}-{day.isoformat()}.log"


def clean_old_logs(logs_dir: Path, retention_days: int = LOG_RETENTION_DAYS, now: Optional[float] = None) -> int:
    """Delete our log files older than retention_days. Returns how many were removed."""
    if not logs_dir.is_dir():
        return 0
    now = time.time() if now is None else now
    max_age = retention_days * 24 * 60 * 60
    removed = 0
    for f in logs_dir.glob(f"{APP_NAME}-*.log"):
        try:
            if now - f.stat().st_mtime > max_age:
                f.unlink()
                removed += 1
        except OSError as e:
            logging.getLogger("dirlauncher.Logger").warning("Could not remove old log %s: %s", f, e)
    return removed


def configure_logging(
    base_dir: Path,
    level: Optional[str] = None,
    retention_days: int = LOG_RETENTION_DAYS,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """Attach file (and in dev mode, console) handlers to the package logger."""
    root = logging.getLogger(APP_NAME)
    dev = is_dev_mode()
    root.setLevel(logging.DEBUG if dev else getattr(logging, (level or "INFO").upper(), logging.INFO))

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    logs_dir = Path(log_dir) if log_dir else ensure_log_dir(base_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    clean_old_logs(logs_dir, retention_days)

    fh = logging.FileHandler(log_file_path(logs_dir), encoding="utf-8")
    fh.setFormatter(fmt)
    root.addHandler(fh)

    if dev:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        root.addHandler(ch)

    root.propagate = False
    return root
