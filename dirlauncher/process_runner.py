#===============================================================================
#  DirLauncher | process_runner.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Process helpers with side effects:
#    - ProbeRunner: short, time-boxed probe commands (where/wsl/which) and
#      filesystem existence checks used by the platform validators
#    - spawn_detached: fire-and-forget launch of a launcher process
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from typing import List, Optional, Sequence, Tuple, Union

import psutil

from .constants import PROBE_TIMEOUT_SECONDS

logger = logging.getLogger("dirlauncher.ProcessRunner")

# Missing on non-Windows builds of the subprocess module
CREATE_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0)
DETACHED_PROCESS = getattr(subprocess, "DETACHED_PROCESS", 0)
CREATE_NEW_PROCESS_GROUP = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0)


def decode_output(raw: bytes) -> str:
    """Decode probe output. wsl.exe writes UTF-16LE, everything else UTF-8."""
    if not raw:
        return ""
    if b"\x00" in raw:
        text = raw.decode("utf-16-le", errors="ignore")
    else:
        text = raw.decode("utf-8", errors="ignore")
    return text.replace("\x00", "").lstrip("\ufeff")


def kill_process_tree(pid: int) -> None:
    """Kill pid and all of its children; processes already gone are ignored."""
    try:
        parent = psutil.Process(pid)
        procs = parent.children(recursive=True) + [parent]
    except psutil.NoSuchProcess:
        return
    for p in procs:
        try:
            p.kill()
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
    psutil.wait_procs(procs, timeout=1)


class ProbeRunner:
    """Runs probe commands with a hard timeout.

    A probe that cannot be started, exits non-zero or runs past the timeout is
    reported as failed; the caller treats the dependency as absent.
    """

    def __init__(self, timeout: float = PROBE_TIMEOUT_SECONDS) -> None:
        self.timeout = timeout

    def run(self, args: Sequence[str]) -> Optional[Tuple[int, bytes]]:
        """Return (returncode, stdout) or None when the probe could not complete."""
        logger.debug("Probe: %s", " ".join(args))
        try:
            p = subprocess.Popen(
                list(args),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                creationflags=CREATE_NO_WINDOW,
            )
        except OSError as e:
            logger.debug("Probe could not start (%s): %s", args[0], e)
            return None

        try:
            out, _ = p.communicate(timeout=self.timeout)
        except subprocess.TimeoutExpired:
            logger.warning("Probe timed out after %.1fs: %s", self.timeout, " ".join(args))
            kill_process_tree(p.pid)
            p.communicate()
            return None
        return p.returncode, out or b""

    def succeeds(self, args: Sequence[str]) -> bool:
        res = self.run(args)
        return res is not None and res[0] == 0

    def output(self, args: Sequence[str]) -> Optional[str]:
        res = self.run(args)
        if res is None or res[0] != 0:
            return None
        return decode_output(res[1])

    def which(self, name: str) -> bool:
        return shutil.which(name) is not None

    def path_exists(self, path: str) -> bool:
        return os.path.exists(path)


def spawn_detached(command: Union[str, List[str]], shell: bool, platform: str = sys.platform) -> None:
    """Start a process that outlives us. Output is discarded; we never wait on it."""
    kwargs = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
        "shell": shell,
        "close_fds": True,
    }
    if platform == "win32":
        kwargs["creationflags"] = DETACHED_PROCESS | CREATE_NEW_PROCESS_GROUP
    else:
        kwargs["start_new_session"] = True
    p = subprocess.Popen(command, **kwargs)
    logger.debug("Spawned pid=%s", p.pid)
