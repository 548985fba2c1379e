#===============================================================================
#  DirLauncher | validator_macos.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  macOS validator. Recognizes the common terminal apps by name in the
#  launcher command and checks for their binary on PATH or their .app bundle.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from .cache import TTLCache
from .constants import CACHE_TTL_SECONDS
from .models import LauncherDefinition, ValidationResult
from .process_runner import ProbeRunner
from .validator_base import check_known_terminal, terminal_cache_key, validate_config, validate_path

logger = logging.getLogger("dirlauncher.MacOSValidator")

# Order matters: "terminal" is matched first, as in "open -a Terminal {path}".
TERMINAL_SIGNATURES = (
    ("terminalApp", ("terminal.app", "terminal")),
    ("iterm2", ("iterm",)),
    ("alacritty", ("alacritty",)),
    ("kitty", ("kitty",)),
    ("hyper", ("hyper",)),
    ("warp", ("warp",)),
)

APP_DIRS = (
    "/Applications",
    "/Applications/Utilities",
    "/System/Applications",
    "/System/Applications/Utilities",
    os.path.expanduser("~/Applications"),
)


class MacOSValidator:
    platform = "darwin"

    def __init__(self, runner: Optional[ProbeRunner] = None, cache: Optional[TTLCache] = None) -> None:
        self.runner = runner or ProbeRunner()
        self.cache = cache or TTLCache(CACHE_TTL_SECONDS)

    def command_exists(self, cmd: str) -> bool:
        return self.cache.get(f"cmd_exists_{cmd}", lambda: self.runner.which(cmd))

    def app_exists(self, bundle: str) -> bool:
        """True when <bundle> (e.g. "iTerm.app") is found in one of the app folders."""
        return self.cache.get(
            f"app_exists_{bundle}",
            lambda: any(self.runner.path_exists(os.path.join(d, bundle)) for d in APP_DIRS),
        )

    def is_terminal_app_installed(self) -> bool:
        return self.app_exists("Terminal.app")

    def is_iterm2_installed(self) -> bool:
        return self.app_exists("iTerm.app")

    def is_alacritty_installed(self) -> bool:
        return self.command_exists("alacritty") or self.app_exists("Alacritty.app")

    def is_kitty_installed(self) -> bool:
        return self.command_exists("kitty") or self.app_exists("kitty.app")

    def is_hyper_installed(self) -> bool:
        return self.app_exists("Hyper.app")

    def is_warp_installed(self) -> bool:
        return self.app_exists("Warp.app")

    def _checks(self):
        return {
            "terminalApp": self.is_terminal_app_installed,
            "iterm2": self.is_iterm2_installed,
            "alacritty": self.is_alacritty_installed,
            "kitty": self.is_kitty_installed,
            "hyper": self.is_hyper_installed,
            "warp": self.is_warp_installed,
        }

    # ----------------------------
    # Contract
    # ----------------------------
    def validate_config(self, launcher: Optional[LauncherDefinition]) -> ValidationResult:
        return validate_config(launcher)

    def validate_path(self, path: str) -> ValidationResult:
        return validate_path(path)

    def validate_terminal(self, launcher: LauncherDefinition) -> ValidationResult:
        return self.cache.get(
            terminal_cache_key(launcher),
            lambda: check_known_terminal(launcher, TERMINAL_SIGNATURES, self._checks()),
        )

    def detect_installed(self) -> Dict[str, Any]:
        def detect() -> Dict[str, Any]:
            logger.info("Detecting installed launchers...")
            result = {name: check() for name, check in self._checks().items()}
            logger.info("Launcher detection completed: %s", result)
            return result
        return self.cache.get("detected_launchers", detect)

    def invalidate_cache(self) -> None:
        self.cache.invalidate()

    def cache_stats(self) -> Dict[str, Any]:
        return self.cache.stats()
