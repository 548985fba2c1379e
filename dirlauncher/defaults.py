#===============================================================================
#  DirLauncher | defaults.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Built-in launcher definitions per platform. The config store seeds new
#  installs with these; they can be hidden or reordered but never deleted.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import sys
from typing import List

from .models import LauncherDefinition


def file_manager_launcher(platform: str = sys.platform) -> LauncherDefinition:
    if platform == "darwin":
        name, command, fmt = "Finder", "open {path}", "unix"
    elif platform == "win32":
        name, command, fmt = "File Explorer", "explorer.exe {path}", "windows"
    else:
        name, command, fmt = "File Manager", "xdg-open {path}", "unix"
    return LauncherDefinition(
        id="file-manager", name=name, icon="📂", command=command,
        path_format=fmt, is_builtin=True, order=0,
    )


def default_launchers(platform: str = sys.platform) -> List[LauncherDefinition]:
    launchers = [file_manager_launcher(platform)]

    if platform == "darwin":
        launchers.append(LauncherDefinition(
            id="terminal-app", name="Terminal", icon="🖥️",
            command="open -a Terminal {path}", path_format="unix", is_builtin=True, order=1,
        ))
    elif platform == "win32":
        launchers += [
            LauncherDefinition(
                id="wsl-ubuntu", name="WSL Ubuntu", icon="🐧",
                command="wt.exe -w 0 new-tab wsl.exe -d Ubuntu --cd {path}",
                path_format="unix", is_builtin=True, order=1,
            ),
            LauncherDefinition(
                id="git-bash", name="Git Bash", icon="🐱",
                command='"C:\\Program Files\\Git\\git-bash.exe" "--cd={path}"',
                path_format="windows", is_builtin=True, order=2,
            ),
            LauncherDefinition(
                id="powershell", name="PowerShell", icon="⚡",
                command='wt.exe -w 0 new-tab -p "Windows PowerShell" -d {path}',
                path_format="windows", is_builtin=True, order=3,
            ),
        ]
    else:
        launchers.append(LauncherDefinition(
            id="default-terminal", name="Terminal", icon="🖥️",
            command="x-terminal-emulator --working-directory={path}",
            path_format="unix", is_builtin=True, order=1,
        ))
    return launchers


def default_launcher_id(platform: str = sys.platform) -> str:
    if platform == "darwin":
        return "terminal-app"
    if platform == "win32":
        return "wsl-ubuntu"
    return "default-terminal"
