#===============================================================================
#  DirLauncher | launch.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Opens a directory with a launcher (terminal, editor, IDE, file manager).
#
#  Pipeline (stops at the first failure):
#    config -> directory exists -> terminal/WSL installed -> path is safe
#      -> format path -> build command -> spawn detached
#
#  Execution modes:
#    - macOS/Linux: templates without shell syntax run directly (argv list,
#      no shell); the path is passed as a plain argument
#    - Windows, or any template that needs a shell: the path is escaped for
#      the platform shell (matching any quotes the template puts around
#      {path}) and substituted into the command string
#
#  The functions at the bottom of the module are the public surface used by
#  the UI / IPC handlers and the agent tools; they share one coordinator.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sys
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from .command_parser import (
    placeholder_inside_quotes,
    substitute_escaped,
    substitute_path,
    try_shell_free_decomposition,
)
from .constants import (
    ACTION_SWITCH_TERMINAL,
    CACHE_TTL_SECONDS,
    ERROR_ACTIONS,
    LINUX_INSTALL_HINTS,
    MACOS_INSTALL_URLS,
    PROBE_TIMEOUT_SECONDS,
)
from .models import (
    ErrorAction,
    ErrorType,
    LauncherDefinition,
    LaunchResult,
    PathSafety,
    PreviewResult,
    TargetDirectory,
    ValidationResult,
)
from .path_utils import format_path, validate_path_safety
from .process_runner import spawn_detached
from .validator_base import PlatformValidator
from .validators import get_validator

logger = logging.getLogger("dirlauncher.Launch")

Command = Union[str, List[str]]
Spawner = Callable[[Command, bool], None]

LauncherLike = Union[LauncherDefinition, Mapping[str, Any], None]
DirectoryLike = Union[TargetDirectory, Mapping[str, Any], str, None]


def _as_launcher(launcher: LauncherLike) -> Optional[LauncherDefinition]:
    if launcher is None or isinstance(launcher, LauncherDefinition):
        return launcher
    return LauncherDefinition.from_dict(launcher)


def _as_directory(directory: DirectoryLike) -> TargetDirectory:
    if isinstance(directory, TargetDirectory):
        return directory
    if isinstance(directory, str):
        return TargetDirectory(path=directory)
    if directory is None:
        return TargetDirectory(path="")
    return TargetDirectory.from_dict(directory)


def macos_install_action(terminal_name: str) -> Optional[ErrorAction]:
    lower = terminal_name.lower()
    for key, url in MACOS_INSTALL_URLS.items():
        if key in lower:
            return ErrorAction("url", "error.action.installFromWebsite", url)
    return None


def linux_install_hint(terminal_name: str) -> Optional[str]:
    lower = terminal_name.lower()
    for key, cmd in LINUX_INSTALL_HINTS.items():
        if key in lower:
            return cmd
    return None


def create_error_result(error_type: ErrorType, detail: Optional[str], platform: str = sys.platform) -> LaunchResult:
    """Failed LaunchResult with the remediation actions for error_type."""
    result = LaunchResult(success=False, error_type=error_type, error_detail=detail)

    if error_type is ErrorType.TERMINAL_NOT_FOUND:
        if platform == "darwin":
            action = macos_install_action(detail or "")
            if action:
                result.actions.append(action)
        elif platform.startswith("linux"):
            result.install_hint = linux_install_hint(detail or "")
        result.actions.append(ACTION_SWITCH_TERMINAL)
    else:
        result.actions.extend(ERROR_ACTIONS.get(error_type, ()))

    return result


class LaunchCoordinator:
    """Validates, builds and spawns launcher commands for one host platform."""

    def __init__(
        self,
        validator: Optional[PlatformValidator] = None,
        spawner: Optional[Spawner] = None,
        platform: str = sys.platform,
    ) -> None:
        self.platform = platform
        self.validator = validator or get_validator(platform)
        self._spawner = spawner

    def _spawn(self, command: Command, shell: bool) -> None:
        if self._spawner is not None:
            self._spawner(command, shell)
        else:
            spawn_detached(command, shell, self.platform)

    # ----------------------------
    # Validation
    # ----------------------------
    def check_prerequisites(self, directory: TargetDirectory, launcher: Optional[LauncherDefinition]) -> ValidationResult:
        result = self.validator.validate_config(launcher)
        if not result.valid:
            return result
        result = self.validator.validate_path(directory.path)
        if not result.valid:
            return result
        return self.validator.validate_terminal(launcher)

    # ----------------------------
    # Command building
    # ----------------------------
    def shell_command(self, launcher: LauncherDefinition, formatted_path: str) -> str:
        # Escape per quoting context, then substitute.
        return substitute_escaped(launcher.command, formatted_path, self.platform)

    def check_template_safety(self, launcher: LauncherDefinition, formatted_path: str) -> PathSafety:
        """Refuse "&" where the template quotes {path} itself.

        Such templates usually hand the string to an inner shell
        (sh -c 'cd {path}', wsl bash -c "..."), which re-reads the path
        without the outer quotes.
        """
        if "&" in formatted_path and placeholder_inside_quotes(launcher.command):
            return PathSafety(False, "SHELL_METACHAR")
        return PathSafety(True)

    def direct_argv(self, launcher: LauncherDefinition, formatted_path: str) -> Optional[List[str]]:
        """argv for shell-free execution, or None when the shell is required."""
        if self.platform == "win32":
            return None
        parsed = try_shell_free_decomposition(launcher.command)
        if parsed is None:
            return None
        return [substitute_path(t, formatted_path) for t in [parsed.executable] + parsed.arg_templates]

    def build_command(self, launcher: LauncherDefinition, formatted_path: str) -> Tuple[Command, bool]:
        """(command, use_shell) for the launch."""
        argv = self.direct_argv(launcher, formatted_path)
        if argv is not None:
            return argv, False
        return self.shell_command(launcher, formatted_path), True

    # ----------------------------
    # Public operations
    # ----------------------------
    def preview_command(self, directory: DirectoryLike, launcher: LauncherLike) -> PreviewResult:
        """Show what open_launcher would run, without touching disk or spawning."""
        directory = _as_directory(directory)
        launcher = _as_launcher(launcher)

        result = self.validator.validate_config(launcher)
        if not result.valid:
            return PreviewResult(success=False, error_type=result.error_type, error_detail=result.error_detail)

        safety = validate_path_safety(directory.path)
        if not safety.safe:
            return PreviewResult(success=False, error_type=ErrorType.PATH_UNSAFE, error_detail=safety.reason)

        formatted = format_path(directory.path, launcher.path_format)
        safety = self.check_template_safety(launcher, formatted)
        if not safety.safe:
            return PreviewResult(success=False, error_type=ErrorType.PATH_UNSAFE, error_detail=safety.reason)

        argv = self.direct_argv(launcher, formatted)
        return PreviewResult(
            success=True,
            command=self.shell_command(launcher, formatted),
            formatted_path=formatted,
            original_path=directory.path,
            terminal_name=launcher.name,
            path_format=launcher.path_format,
            shell_free=argv is not None,
            argv=argv,
        )

    def open_launcher(self, directory: DirectoryLike, launcher: LauncherLike) -> LaunchResult:
        directory = _as_directory(directory)
        launcher = _as_launcher(launcher)

        result = self.check_prerequisites(directory, launcher)
        if not result.valid:
            logger.warning("Prerequisites check failed: %s (%s)", result.error_type.value, result.error_detail)
            return create_error_result(result.error_type, result.error_detail, self.platform)

        safety = validate_path_safety(directory.path)
        if not safety.safe:
            logger.warning("Path contains unsafe characters: %r (%s)", directory.path, safety.reason)
            return create_error_result(ErrorType.PATH_UNSAFE, safety.reason, self.platform)

        formatted = format_path(directory.path, launcher.path_format)
        safety = self.check_template_safety(launcher, formatted)
        if not safety.safe:
            logger.warning("Path %r is not safe inside the quoted {path} of %s", directory.path, launcher.name or launcher.id)
            return create_error_result(ErrorType.PATH_UNSAFE, safety.reason, self.platform)

        command, shell = self.build_command(launcher, formatted)

        try:
            logger.debug("Execute command (%s): %s", "shell" if shell else "shell-free", command)
            self._spawn(command, shell)
        except (OSError, ValueError) as e:
            logger.error("Failed to spawn %s", launcher.name or launcher.id, exc_info=True)
            return LaunchResult(success=False, error_type=ErrorType.SPAWN_FAILED, error_detail=str(e))

        logger.info("Opened %s with %s", directory.path, launcher.name or launcher.id)
        return LaunchResult(success=True)

    def detect_installed_launchers(self) -> Dict[str, Any]:
        return self.validator.detect_installed()

    def invalidate_validator_cache(self) -> None:
        self.validator.invalidate_cache()

    def cache_stats(self) -> Dict[str, Any]:
        return self.validator.cache_stats()


def create_coordinator(settings: Optional[Mapping[str, Any]] = None, platform: str = sys.platform) -> LaunchCoordinator:
    """Build a coordinator from engine settings (see settings.default_settings)."""
    settings = settings or {}
    validator = get_validator(
        platform,
        cache_ttl=float(settings.get("cache_ttl_seconds", CACHE_TTL_SECONDS)),
        probe_timeout=float(settings.get("probe_timeout_seconds", PROBE_TIMEOUT_SECONDS)),
    )
    return LaunchCoordinator(validator=validator, platform=platform)


# ----------------------------
# Module-level API
# ----------------------------
_default: Optional[LaunchCoordinator] = None
_default_lock = threading.Lock()


def get_coordinator() -> LaunchCoordinator:
    global _default
    with _default_lock:
        if _default is None:
            _default = create_coordinator()
        return _default


def set_coordinator(coordinator: Optional[LaunchCoordinator]) -> None:
    """Replace the shared coordinator (None resets to a fresh default on next use)."""
    global _default
    with _default_lock:
        _default = coordinator


def preview_command(directory: DirectoryLike, launcher: LauncherLike) -> PreviewResult:
    return get_coordinator().preview_command(directory, launcher)


def open_launcher(directory: DirectoryLike, launcher: LauncherLike) -> LaunchResult:
    return get_coordinator().open_launcher(directory, launcher)


def detect_installed_launchers() -> Dict[str, Any]:
    return get_coordinator().detect_installed_launchers()


def invalidate_validator_cache() -> None:
    get_coordinator().invalidate_validator_cache()


def get_validator_cache_stats() -> Dict[str, Any]:
    return get_coordinator().cache_stats()


def log_cache_stats() -> None:
    logger.info("Validator cache statistics: %s", get_validator_cache_stats())
