#===============================================================================
#  DirLauncher | validator_linux.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Linux validator. Recognizes the common terminal emulators by name in the
#  launcher command and checks that their binary is on PATH.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .cache import TTLCache
from .constants import CACHE_TTL_SECONDS
from .models import LauncherDefinition, ValidationResult
from .process_runner import ProbeRunner
from .validator_base import check_known_terminal, terminal_cache_key, validate_config, validate_path

logger = logging.getLogger("dirlauncher.LinuxValidator")

# terminal type -> (needles in the command, binary to look up)
# xfce4-terminal must win over xterm; x-terminal-emulator matches nothing on
# purpose (it is an alternatives link we cannot attribute to one terminal).
TERMINALS = (
    ("gnomeTerminal", ("gnome-terminal",), "gnome-terminal"),
    ("konsole", ("konsole",), "konsole"),
    ("xfce4Terminal", ("xfce4-terminal",), "xfce4-terminal"),
    ("xterm", ("xterm",), "xterm"),
    ("alacritty", ("alacritty",), "alacritty"),
    ("kitty", ("kitty",), "kitty"),
    ("tilix", ("tilix",), "tilix"),
    ("terminator", ("terminator",), "terminator"),
    ("wezterm", ("wezterm",), "wezterm"),
)

TERMINAL_SIGNATURES = tuple((t, needles) for t, needles, _ in TERMINALS)


class LinuxValidator:
    platform = "linux"

    def __init__(self, runner: Optional[ProbeRunner] = None, cache: Optional[TTLCache] = None) -> None:
        self.runner = runner or ProbeRunner()
        self.cache = cache or TTLCache(CACHE_TTL_SECONDS)

    def command_exists(self, cmd: str) -> bool:
        return self.cache.get(f"cmd_exists_{cmd}", lambda: self.runner.which(cmd))

    def _checks(self):
        return {t: (lambda b=binary: self.command_exists(b)) for t, _, binary in TERMINALS}

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
            result = {t: self.command_exists(binary) for t, _, binary in TERMINALS}
            logger.info("Launcher detection completed: %s", result)
            return result
        return self.cache.get("detected_launchers", detect)

    def invalidate_cache(self) -> None:
        self.cache.invalidate()

    def cache_stats(self) -> Dict[str, Any]:
        return self.cache.stats()
