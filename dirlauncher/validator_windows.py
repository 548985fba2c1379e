#===============================================================================
#  DirLauncher | validator_windows.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Windows validator. Looks for Windows Terminal (wt.exe) and WSL (wsl.exe,
#  optionally with -d <distro>) in the launcher command and checks that the
#  real installation matches before anything is spawned.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from .cache import TTLCache
from .constants import CACHE_TTL_SECONDS
from .models import ErrorType, LauncherDefinition, ValidationResult
from .process_runner import ProbeRunner
from .validator_base import terminal_cache_key, validate_config, validate_path

logger = logging.getLogger("dirlauncher.WindowsValidator")

WT_RE = re.compile(r'(?:^|[\s"\\/])wt(?:\.exe)?(?=[\s"]|$)', re.IGNORECASE)
WSL_RE = re.compile(r'(?:^|[\s"\\/])wsl(?:\.exe)?(?=[\s"]|$)', re.IGNORECASE)
WSL_DISTRO_RE = re.compile(r'wsl(?:\.exe)?\s+(?:-d|--distribution)\s+("[^"]+"|\S+)', re.IGNORECASE)

GIT_BASH_PATHS = (
    "C:\\Program Files\\Git\\git-bash.exe",
    "C:\\Program Files (x86)\\Git\\git-bash.exe",
)


def uses_windows_terminal(command: str) -> bool:
    return bool(WT_RE.search(command))


def uses_wsl(command: str) -> bool:
    return bool(WSL_RE.search(command))


def extract_wsl_distro(command: str) -> Optional[str]:
    m = WSL_DISTRO_RE.search(command)
    if not m:
        return None
    return m.group(1).strip('"') or None


def parse_distro_list(output: str) -> List[str]:
    return [ln.strip() for ln in output.splitlines() if ln.strip()]


class WindowsValidator:
    platform = "win32"

    def __init__(self, runner: Optional[ProbeRunner] = None, cache: Optional[TTLCache] = None) -> None:
        self.runner = runner or ProbeRunner()
        self.cache = cache or TTLCache(CACHE_TTL_SECONDS)

    # ----------------------------
    # Probes (each memoized)
    # ----------------------------
    def is_windows_terminal_installed(self) -> bool:
        return self.cache.get("wt_installed", lambda: self.runner.succeeds(["where", "wt.exe"]))

    def is_wsl_installed(self) -> bool:
        return self.cache.get("wsl_installed", lambda: self.runner.succeeds(["wsl", "--status"]))

    def get_wsl_distros(self) -> List[str]:
        def probe() -> List[str]:
            out = self.runner.output(["wsl", "-l", "-q"])
            return parse_distro_list(out) if out else []
        return self.cache.get("wsl_distros", probe)

    def is_wsl_distro_installed(self, distro: str) -> bool:
        wanted = distro.lower()
        return any(d.lower() == wanted for d in self.get_wsl_distros())

    def is_git_bash_installed(self) -> bool:
        return self.cache.get(
            "git_bash_installed",
            lambda: any(self.runner.path_exists(p) for p in GIT_BASH_PATHS),
        )

    def is_powershell_available(self) -> bool:
        return self.cache.get("powershell_available", lambda: self.runner.succeeds(["where", "powershell.exe"]))

    def is_cmd_available(self) -> bool:
        return self.cache.get("cmd_available", lambda: self.runner.succeeds(["where", "cmd.exe"]))

    # ----------------------------
    # Contract
    # ----------------------------
    def validate_config(self, launcher: Optional[LauncherDefinition]) -> ValidationResult:
        return validate_config(launcher)

    def validate_path(self, path: str) -> ValidationResult:
        return validate_path(path)

    def _check_terminal(self, command: str) -> ValidationResult:
        if uses_windows_terminal(command) and not self.is_windows_terminal_installed():
            return ValidationResult.error(ErrorType.WINDOWS_TERMINAL_NOT_FOUND)

        if uses_wsl(command):
            if not self.is_wsl_installed():
                return ValidationResult.error(ErrorType.WSL_NOT_FOUND)
            distro = extract_wsl_distro(command)
            if distro and not self.is_wsl_distro_installed(distro):
                return ValidationResult.error(ErrorType.WSL_DISTRO_NOT_FOUND, distro)

        return ValidationResult.ok()

    def validate_terminal(self, launcher: LauncherDefinition) -> ValidationResult:
        return self.cache.get(terminal_cache_key(launcher), lambda: self._check_terminal(launcher.command))

    def detect_installed(self) -> Dict[str, Any]:
        def detect() -> Dict[str, Any]:
            logger.info("Detecting installed launchers...")
            result = {
                "windowsTerminal": self.is_windows_terminal_installed(),
                "wsl": self.is_wsl_installed(),
                "wslDistros": self.get_wsl_distros(),
                "gitBash": self.is_git_bash_installed(),
                "powerShell": self.is_powershell_available(),
                "cmd": self.is_cmd_available(),
            }
            logger.info("Launcher detection completed: %s", result)
            return result
        return self.cache.get("detected_launchers", detect)

    def invalidate_cache(self) -> None:
        self.cache.invalidate()

    def cache_stats(self) -> Dict[str, Any]:
        return self.cache.stats()
