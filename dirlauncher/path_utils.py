#===============================================================================
#  DirLauncher | path_utils.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Pure path helpers: Windows -> POSIX/WSL conversion, shell-safety checks on
#  untrusted directory paths and unconditional shell quoting.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import re
from typing import Union

from .models import PathFormat, PathSafety

DRIVE_PATH_RE = re.compile(r"^([A-Za-z]):\\(.*)$", re.DOTALL)

# Checked in this order; the first match decides the reason.
# "&" is intentionally absent: it is legal in file names and every shell
# string we build quotes the path first. A {path} the template itself quotes
# may be re-read by an inner shell (sh -c 'cd {path}'), so launch.py refuses
# "&" there.
UNSAFE_PATTERNS = (
    ("COMMAND_SUBSTITUTION", re.compile(r"\$\(")),
    ("SHELL_METACHAR", re.compile(r"[;|`$]")),
    ("REDIRECTION", re.compile(r"[<>]")),
    ("NEWLINE", re.compile(r"[\r\n]")),
)


def to_posix_path(path: str) -> str:
    """Convert ``C:\\a\\b`` to ``/mnt/c/a/b``; otherwise just flip backslashes."""
    m = DRIVE_PATH_RE.match(path)
    if m:
        drive = m.group(1).lower()
        rest = m.group(2).replace("\\", "/")
        return f"/mnt/{drive}/{rest}"
    return path.replace("\\", "/")


def format_path(path: str, path_format: Union[str, PathFormat, None]) -> str:
    if PathFormat.parse(path_format) is PathFormat.UNIX:
        return to_posix_path(path)
    return path


def validate_path_safety(path) -> PathSafety:
    if not isinstance(path, str) or not path:
        return PathSafety(False, "INVALID_PATH")
    for reason, pattern in UNSAFE_PATTERNS:
        if pattern.search(path):
            return PathSafety(False, reason)
    return PathSafety(True)


def escape_for_shell(path: str, platform: str) -> str:
    """Quote a path for embedding in a shell command string.

    Quoting is unconditional, even for paths without special characters.
      - win32 (cmd.exe): "..." with embedded quotes doubled
      - everything else (sh): '...' with embedded quotes written as '\\''
    """
    if platform == "win32":
        return '"' + path.replace('"', '""') + '"'
    return "'" + path.replace("'", "'\\''") + "'"


def escape_inside_quotes(path: str, quote: str, platform: str) -> str:
    """Escape a path for a spot that the template already wraps in quotes.

    No outer quotes are added; the template's own quotes stay balanced.
      - '...' (sh): embedded quotes written as '\\''
      - "..." (sh): backslash before \\ " $ and the backtick
      - "..." (cmd.exe): embedded quotes doubled
    """
    if quote == "'" and platform != "win32":
        return path.replace("'", "'\\''")
    if quote == '"':
        if platform == "win32":
            return path.replace('"', '""')
        return re.sub(r'([\\"$`])', r"\\\1", path)
    # cmd.exe gives single quotes no meaning
    return escape_for_shell(path, platform)
