#===============================================================================
#  DirLauncher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Shared data models used across the launch engine: launcher and directory
#  records, validation results, error kinds, remediation actions and the
#  result records returned to callers.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union


class ErrorType(str, Enum):
    INVALID_CONFIG = "INVALID_CONFIG"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    PATH_NOT_DIRECTORY = "PATH_NOT_DIRECTORY"
    PATH_UNSAFE = "PATH_UNSAFE"
    # Windows only
    WINDOWS_TERMINAL_NOT_FOUND = "WINDOWS_TERMINAL_NOT_FOUND"
    WSL_NOT_FOUND = "WSL_NOT_FOUND"
    WSL_DISTRO_NOT_FOUND = "WSL_DISTRO_NOT_FOUND"
    # any platform
    TERMINAL_NOT_FOUND = "TERMINAL_NOT_FOUND"
    SPAWN_FAILED = "SPAWN_FAILED"


class PathFormat(str, Enum):
    WINDOWS = "windows"
    UNIX = "unix"

    @classmethod
    def parse(cls, value: Union[str, "PathFormat", None]) -> "PathFormat":
        """Accept the stored values plus the native/posix aliases."""
        if isinstance(value, PathFormat):
            return value
        if value is None or value == "":
            return cls.WINDOWS
        v = str(value).strip().lower()
        if v in ("windows", "native"):
            return cls.WINDOWS
        if v in ("unix", "posix"):
            return cls.UNIX
        raise ValueError(f"Unknown path format: {value!r}")


def _as_int(value: Any, default: int = 0) -> int:
    # sort key only; bad values sort first
    try:
        return int(value or default)
    except (TypeError, ValueError, OverflowError):
        return default


@dataclass(frozen=True)
class LauncherDefinition:
    """A user-configured external program that can open a directory."""
    id: str
    name: str
    command: str                # template containing the literal "{path}"
    path_format: str = PathFormat.WINDOWS.value   # "windows" | "unix"
    icon: str = ""
    is_builtin: bool = False
    hidden: bool = False
    order: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LauncherDefinition":
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            command=data.get("command") or "",
            path_format=data.get("pathFormat", data.get("path_format")) or PathFormat.WINDOWS.value,
            icon=str(data.get("icon") or ""),
            is_builtin=bool(data.get("isBuiltin", data.get("is_builtin", False))),
            hidden=bool(data.get("hidden", False)),
            order=_as_int(data.get("order")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "command": self.command,
            "pathFormat": self.path_format,
            "isBuiltin": self.is_builtin,
            "hidden": self.hidden,
            "order": self.order,
        }


@dataclass(frozen=True)
class TargetDirectory:
    path: str
    id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TargetDirectory":
        return cls(path=data.get("path") or "", id=str(data.get("id") or ""))


@dataclass(frozen=True)
class ValidationResult:
    """Ok, or an error kind with an optional detail string."""
    error_type: Optional[ErrorType] = None
    error_detail: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.error_type is None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return _OK

    @classmethod
    def error(cls, error_type: ErrorType, detail: Optional[str] = None) -> "ValidationResult":
        return cls(error_type=error_type, error_detail=detail)


_OK = ValidationResult()


@dataclass(frozen=True)
class PathSafety:
    safe: bool
    reason: Optional[str] = None    # INVALID_PATH | COMMAND_SUBSTITUTION | SHELL_METACHAR | REDIRECTION | NEWLINE


@dataclass(frozen=True)
class SimpleCommand:
    """A template split into an executable and argument templates (no shell needed)."""
    executable: str
    arg_templates: List[str]


@dataclass(frozen=True)
class ErrorAction:
    type: str           # "url" | "internal"
    label_key: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "labelKey": self.label_key, "value": self.value}


@dataclass
class PreviewResult:
    success: bool
    command: str = ""
    formatted_path: str = ""
    original_path: str = ""
    terminal_name: str = ""
    path_format: str = ""
    shell_free: bool = False
    argv: Optional[List[str]] = None
    error_type: Optional[ErrorType] = None
    error_detail: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {
                "success": False,
                "errorType": self.error_type.value if self.error_type else None,
                "errorDetail": self.error_detail,
            }
        d: Dict[str, Any] = {
            "success": True,
            "command": self.command,
            "formattedPath": self.formatted_path,
            "originalPath": self.original_path,
            "terminalName": self.terminal_name,
            "pathFormat": self.path_format,
            "shellFree": self.shell_free,
        }
        if self.argv is not None:
            d["argv"] = list(self.argv)
        return d


@dataclass
class LaunchResult:
    success: bool
    error_type: Optional[ErrorType] = None
    error_detail: Optional[str] = None
    actions: List[ErrorAction] = field(default_factory=list)
    install_hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True}
        d: Dict[str, Any] = {
            "success": False,
            "errorType": self.error_type.value if self.error_type else None,
            "errorDetail": self.error_detail,
            "actions": [a.to_dict() for a in self.actions],
        }
        if self.install_hint:
            d["installHint"] = self.install_hint
        return d
