import subprocess
import sys

from dirlauncher import process_runner
from dirlauncher.process_runner import ProbeRunner, decode_output, spawn_detached


def test_decode_output_handles_wsl_utf16():
    raw = "Ubuntu\r\nDebian\r\n".encode("utf-16-le")
    assert decode_output(raw).split() == ["Ubuntu", "Debian"]
    assert decode_output("\ufeffUbuntu\n".encode("utf-8")) == "Ubuntu\n"
    assert decode_output(b"") == ""


def test_probe_success_and_output():
    runner = ProbeRunner(timeout=10)
    assert runner.succeeds([sys.executable, "-c", "pass"])
    assert not runner.succeeds([sys.executable, "-c", "raise SystemExit(3)"])
    assert runner.output([sys.executable, "-c", "print('Ubuntu')"]).strip() == "Ubuntu"
    assert runner.output([sys.executable, "-c", "raise SystemExit(1)"]) is None


def test_probe_that_cannot_start_fails():
    assert ProbeRunner().run(["definitely-not-a-real-binary-xyz"]) is None


def test_hung_probe_is_killed_after_timeout():
    runner = ProbeRunner(timeout=0.5)
    assert runner.run([sys.executable, "-c", "import time; time.sleep(30)"]) is None


def test_which_and_path_exists(tmp_path):
    runner = ProbeRunner()
    assert runner.path_exists(str(tmp_path))
    assert not runner.path_exists(str(tmp_path / "missing"))
    assert not runner.which("definitely-not-a-real-binary-xyz")


class _FakePopen:
    calls = []

    def __init__(self, command, **kwargs):
        self.pid = 4242
        _FakePopen.calls.append((command, kwargs))


def test_spawn_detached_posix(monkeypatch):
    _FakePopen.calls = []
    monkeypatch.setattr(process_runner.subprocess, "Popen", _FakePopen)

    spawn_detached(["code", "/tmp/x"], shell=False, platform="linux")

    ((command, kwargs),) = _FakePopen.calls
    assert command == ["code", "/tmp/x"]
    assert kwargs["shell"] is False
    assert kwargs["start_new_session"] is True
    assert kwargs["stdout"] is subprocess.DEVNULL
    assert kwargs["stderr"] is subprocess.DEVNULL
    assert kwargs["stdin"] is subprocess.DEVNULL


def test_spawn_detached_windows_flags(monkeypatch):
    _FakePopen.calls = []
    monkeypatch.setattr(process_runner.subprocess, "Popen", _FakePopen)

    spawn_detached('code "C:\\x"', shell=True, platform="win32")

    ((command, kwargs),) = _FakePopen.calls
    assert kwargs["shell"] is True
    assert "start_new_session" not in kwargs
    assert kwargs["creationflags"] == process_runner.DETACHED_PROCESS | process_runner.CREATE_NEW_PROCESS_GROUP
