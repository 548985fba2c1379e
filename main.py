#===============================================================================
#  DirLauncher  |  Launch Execution Engine
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Command-line entry point for the launch engine. Opens (or previews) a
#  directory with a launcher command template such as
#      wt.exe -w 0 new-tab wsl.exe -d Ubuntu --cd {path}
#      code {path}
#  after checking that the directory exists, the terminal/WSL dependency is
#  installed and the path is safe to hand to a shell.
#
#  Commands
#  --------
#    preview  --command TEMPLATE [--path-format windows|unix] PATH
#    open     --command TEMPLATE [--path-format windows|unix] PATH
#    detect                       -> installed terminals / WSL distros
#    defaults                     -> built-in launchers for this platform
#    cache-stats                  -> probe cache statistics
#
#  Output is JSON on stdout; exit code 1 when the result is an error.
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (e.g., psutil) which are licensed
#  separately by their respective authors. Ensure compliance with their
#  license terms when distributing this software.
#===============================================================================

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dirlauncher.constants import SETTINGS_FILE_NAME
from dirlauncher.defaults import default_launcher_id, default_launchers
from dirlauncher.launch import create_coordinator
from dirlauncher.logger import configure_logging
from dirlauncher.models import LauncherDefinition
from dirlauncher.settings import load_settings

BASE_DIR = Path(__file__).resolve().parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Open a directory with a terminal, editor or file manager")
    parser.add_argument("--settings", default=str(BASE_DIR / SETTINGS_FILE_NAME))
    sub = parser.add_subparsers(dest="cmd", required=True)

    for name in ("preview", "open"):
        p = sub.add_parser(name)
        p.add_argument("path")
        p.add_argument("--command", required=True, help="Template containing {path}")
        p.add_argument("--path-format", default="windows", choices=["windows", "unix"])
        p.add_argument("--name", default="")
        p.add_argument("--id", default="cli")

    sub.add_parser("detect")
    sub.add_parser("defaults")
    sub.add_parser("cache-stats")
    return parser


def _print(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings(Path(args.settings))
    configure_logging(
        BASE_DIR,
        level=settings.get("log_level"),
        retention_days=int(settings.get("log_retention_days", 7)),
        log_dir=Path(settings["log_dir"]) if settings.get("log_dir") else None,
    )
    coordinator = create_coordinator(settings)

    if args.cmd == "detect":
        _print(coordinator.detect_installed_launchers())
        return 0

    if args.cmd == "defaults":
        _print({
            "defaultLauncherId": default_launcher_id(coordinator.platform),
            "launchers": [l.to_dict() for l in default_launchers(coordinator.platform)],
        })
        return 0

    if args.cmd == "cache-stats":
        _print(coordinator.cache_stats())
        return 0

    launcher = LauncherDefinition(
        id=args.id,
        name=args.name or (args.command.split() or [""])[0],
        command=args.command,
        path_format=args.path_format,
    )
    if args.cmd == "preview":
        result = coordinator.preview_command(args.path, launcher)
    else:
        result = coordinator.open_launcher(args.path, launcher)

    _print(result.to_dict())
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
