#===============================================================================
#  DirLauncher | validators.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Picks the validator for the host OS. Called once when the coordinator is
#  created; the validator (and its probe cache) then lives as long as it does.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import sys
from typing import Optional

from .cache import TTLCache
from .constants import CACHE_TTL_SECONDS, PROBE_TIMEOUT_SECONDS
from .process_runner import ProbeRunner
from .validator_base import PlatformValidator
from .validator_linux import LinuxValidator
from .validator_macos import MacOSValidator
from .validator_windows import WindowsValidator


def get_validator(
    platform: str = sys.platform,
    runner: Optional[ProbeRunner] = None,
    cache_ttl: float = CACHE_TTL_SECONDS,
    probe_timeout: float = PROBE_TIMEOUT_SECONDS,
) -> PlatformValidator:
    runner = runner or ProbeRunner(timeout=probe_timeout)
    cache = TTLCache(cache_ttl)
    if platform == "win32":
        return WindowsValidator(runner, cache)
    if platform == "darwin":
        return MacOSValidator(runner, cache)
    # Linux and the other POSIX flavours
    return LinuxValidator(runner, cache)
