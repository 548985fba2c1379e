#===============================================================================
#  DirLauncher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Central place for engine timings, file/folder naming conventions and the
#  static remediation tables attached to error results.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from .models import ErrorAction, ErrorType

APP_NAME = "dirlauncher"
SETTINGS_FILE_NAME = "launcher_settings.json"
LOGS_SUBDIR = ".dirlauncher/logs"

PATH_PLACEHOLDER = "{path}"

CACHE_TTL_SECONDS = 5 * 60
PROBE_TIMEOUT_SECONDS = 2.0
LOG_RETENTION_DAYS = 7

# --- Remediation actions (consumed by the UI layer) ---
ACTION_SWITCH_TERMINAL = ErrorAction("internal", "error.action.switchTerminal", "open-terminal-settings")
ACTION_EDIT_DIRECTORY = ErrorAction("internal", "error.action.editDirectory", "edit-directory")

ERROR_ACTIONS = {
    ErrorType.WINDOWS_TERMINAL_NOT_FOUND: (
        ErrorAction("url", "error.action.installWindowsTerminal",
                    "ms-windows-store://pdp/?productid=9N0DX20HK701"),
        ACTION_SWITCH_TERMINAL,
    ),
    ErrorType.WSL_NOT_FOUND: (
        ErrorAction("url", "error.action.installWsl", "https://docs.microsoft.com/windows/wsl/install"),
        ACTION_SWITCH_TERMINAL,
    ),
    ErrorType.WSL_DISTRO_NOT_FOUND: (
        ErrorAction("url", "error.action.installDistro", "ms-windows-store://search/?query=wsl"),
        ACTION_SWITCH_TERMINAL,
    ),
    ErrorType.PATH_NOT_FOUND: (ACTION_EDIT_DIRECTORY,),
    ErrorType.PATH_NOT_DIRECTORY: (ACTION_EDIT_DIRECTORY,),
    ErrorType.PATH_UNSAFE: (ACTION_EDIT_DIRECTORY,),
}

# macOS: where to download terminals that are not bundled with the OS
MACOS_INSTALL_URLS = {
    "iterm2": "https://iterm2.com/",
    "alacritty": "https://alacritty.org/",
    "kitty": "https://sw.kovidgoyal.net/kitty/",
    "hyper": "https://hyper.is/",
    "warp": "https://www.warp.dev/",
}

# Linux: package manager hint (apt flavoured)
LINUX_INSTALL_HINTS = {
    "gnome-terminal": "apt install gnome-terminal",
    "gnometerminal": "apt install gnome-terminal",
    "konsole": "apt install konsole",
    "xterm": "apt install xterm",
    "alacritty": "apt install alacritty",
    "kitty": "apt install kitty",
    "tilix": "apt install tilix",
    "terminator": "apt install terminator",
    "xfce4-terminal": "apt install xfce4-terminal",
    "xfce4terminal": "apt install xfce4-terminal",
    "wezterm": "apt install wezterm",
}
