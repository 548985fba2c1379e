"""Test doubles for the probe runner, the spawner and the cache clock."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional


class FakeRunner:
    """Stands in for ProbeRunner; records every probe it is asked to run."""

    def __init__(
        self,
        succeeds: Iterable[str] = (),
        outputs: Optional[Dict[str, str]] = None,
        binaries: Iterable[str] = (),
        paths: Iterable[str] = (),
    ) -> None:
        self.succeeding = set(succeeds)
        self.outputs = dict(outputs or {})
        self.binaries = set(binaries)
        self.paths = set(paths)
        self.calls: List[tuple] = []

    def succeeds(self, args) -> bool:
        cmd = " ".join(args)
        self.calls.append(("run", cmd))
        return cmd in self.succeeding

    def output(self, args) -> Optional[str]:
        cmd = " ".join(args)
        self.calls.append(("run", cmd))
        return self.outputs.get(cmd)

    def which(self, name: str) -> bool:
        self.calls.append(("which", name))
        return name in self.binaries

    def path_exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        return path in self.paths


class RecordingSpawner:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.calls: List[tuple] = []
        self.error = error

    def __call__(self, command, shell: bool) -> None:
        self.calls.append((command, shell))
        if self.error is not None:
            raise self.error


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def windows_host_with_debian_only() -> FakeRunner:
    return FakeRunner(
        succeeds={"where wt.exe", "wsl --status"},
        outputs={"wsl -l -q": "Debian\r\n"},
    )
