#===============================================================================
#  DirLauncher | validator_base.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  The contract every platform validator implements, plus the checks that are
#  identical on all platforms (launcher config, directory existence) and the
#  table-driven terminal check shared by the macOS and Linux validators.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import stat
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Sequence, Tuple

from .models import ErrorType, LauncherDefinition, PathFormat, ValidationResult

logger = logging.getLogger("dirlauncher.Validator")


class PlatformValidator(Protocol):
    platform: str

    def validate_config(self, launcher: Optional[LauncherDefinition]) -> ValidationResult: ...

    def validate_path(self, path: str) -> ValidationResult: ...

    def validate_terminal(self, launcher: LauncherDefinition) -> ValidationResult: ...

    def detect_installed(self) -> Dict[str, Any]: ...

    def invalidate_cache(self) -> None: ...

    def cache_stats(self) -> Dict[str, Any]: ...


def validate_config(launcher: Optional[LauncherDefinition]) -> ValidationResult:
    command = getattr(launcher, "command", None)
    if not isinstance(command, str) or not command.strip():
        return ValidationResult.error(ErrorType.INVALID_CONFIG, "command")
    try:
        PathFormat.parse(launcher.path_format)
    except ValueError:
        return ValidationResult.error(ErrorType.INVALID_CONFIG, "pathFormat")
    return ValidationResult.ok()


def validate_path(path: str) -> ValidationResult:
    # Never cached: the directory can disappear between two launches.
    if not isinstance(path, str) or not path:
        return ValidationResult.error(ErrorType.PATH_NOT_FOUND, path)
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return ValidationResult.error(ErrorType.PATH_NOT_FOUND, path)
    if not stat.S_ISDIR(st.st_mode):
        return ValidationResult.error(ErrorType.PATH_NOT_DIRECTORY, path)
    return ValidationResult.ok()


def terminal_cache_key(launcher: LauncherDefinition) -> str:
    return f"terminal:{launcher.id}:{launcher.command}"


def extract_terminal_type(command: str, signatures: Sequence[Tuple[str, Tuple[str, ...]]]) -> Optional[str]:
    """First terminal type whose needle appears in the (lower-cased) command."""
    lower = command.lower()
    for terminal_type, needles in signatures:
        if any(n in lower for n in needles):
            return terminal_type
    return None


def check_known_terminal(
    launcher: LauncherDefinition,
    signatures: Sequence[Tuple[str, Tuple[str, ...]]],
    checks: Mapping[str, Callable[[], bool]],
) -> ValidationResult:
    """Probe the terminal named in the command; unknown terminals pass."""
    terminal_type = extract_terminal_type(launcher.command, signatures)
    if terminal_type is None:
        return ValidationResult.ok()

    check = checks.get(terminal_type)
    if check is not None and not check():
        logger.info("Terminal not installed: %s (%s)", terminal_type, launcher.name or launcher.id)
        return ValidationResult.error(ErrorType.TERMINAL_NOT_FOUND, launcher.name or terminal_type)
    return ValidationResult.ok()
