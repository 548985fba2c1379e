import pytest

from dirlauncher.models import ErrorType, LauncherDefinition
from dirlauncher.validator_base import validate_config, validate_path
from dirlauncher.validator_linux import LinuxValidator
from dirlauncher.validator_macos import MacOSValidator
from dirlauncher.validator_windows import (
    WindowsValidator,
    extract_wsl_distro,
    uses_windows_terminal,
    uses_wsl,
)
from dirlauncher.validators import get_validator
from fakes import FakeRunner, windows_host_with_debian_only

WSL_UBUNTU = LauncherDefinition(
    id="wsl-ubuntu",
    name="WSL Ubuntu",
    command="wt.exe -w 0 new-tab wsl.exe -d Ubuntu --cd {path}",
    path_format="unix",
)


def _runs(runner):
    return [c for c in runner.calls if c[0] == "run"]


# ----------------------------
# Shared checks
# ----------------------------
def test_validate_config_requires_a_command():
    assert validate_config(None).error_type is ErrorType.INVALID_CONFIG
    bad = LauncherDefinition(id="x", name="x", command="   ")
    result = validate_config(bad)
    assert result.error_type is ErrorType.INVALID_CONFIG
    assert result.error_detail == "command"
    assert validate_config(LauncherDefinition(id="x", name="x", command="code {path}")).valid


def test_validate_config_rejects_unknown_path_format():
    bad = LauncherDefinition(id="x", name="x", command="code {path}", path_format="dos")
    assert validate_config(bad).error_detail == "pathFormat"


def test_validate_path(tmp_path):
    assert validate_path(str(tmp_path)).valid

    missing = tmp_path / "nope"
    result = validate_path(str(missing))
    assert result.error_type is ErrorType.PATH_NOT_FOUND
    assert result.error_detail == str(missing)

    f = tmp_path / "file.txt"
    f.write_text("x", encoding="utf-8")
    assert validate_path(str(f)).error_type is ErrorType.PATH_NOT_DIRECTORY

    assert validate_path("").error_type is ErrorType.PATH_NOT_FOUND
    assert validate_path("bad\x00path").error_type is ErrorType.PATH_NOT_FOUND


# ----------------------------
# Windows
# ----------------------------
def test_windows_command_signatures():
    assert uses_windows_terminal(WSL_UBUNTU.command)
    assert uses_wsl(WSL_UBUNTU.command)
    assert extract_wsl_distro(WSL_UBUNTU.command) == "Ubuntu"
    assert extract_wsl_distro('wsl --distribution "Ubuntu-22.04" --cd {path}') == "Ubuntu-22.04"
    assert not uses_windows_terminal("explorer.exe {path}")
    assert not uses_wsl('wt.exe -w 0 new-tab -p "Windows PowerShell" -d {path}')
    assert extract_wsl_distro("wsl.exe --cd {path}") is None


def test_windows_missing_distro_is_reported_with_its_name():
    v = WindowsValidator(windows_host_with_debian_only())
    result = v.validate_terminal(WSL_UBUNTU)
    assert result.error_type is ErrorType.WSL_DISTRO_NOT_FOUND
    assert result.error_detail == "Ubuntu"


def test_windows_distro_match_is_case_insensitive():
    runner = FakeRunner(succeeds={"where wt.exe", "wsl --status"}, outputs={"wsl -l -q": "ubuntu\nDebian\n"})
    assert WindowsValidator(runner).validate_terminal(WSL_UBUNTU).valid


def test_windows_terminal_missing():
    v = WindowsValidator(FakeRunner())
    assert v.validate_terminal(WSL_UBUNTU).error_type is ErrorType.WINDOWS_TERMINAL_NOT_FOUND


def test_wsl_missing():
    v = WindowsValidator(FakeRunner(succeeds={"where wt.exe"}))
    result = v.validate_terminal(WSL_UBUNTU)
    assert result.error_type is ErrorType.WSL_NOT_FOUND
    assert result.error_detail is None


def test_windows_plain_command_needs_no_probe():
    runner = FakeRunner()
    launcher = LauncherDefinition(id="explorer", name="Explorer", command="explorer.exe {path}")
    assert WindowsValidator(runner).validate_terminal(launcher).valid
    assert runner.calls == []


def test_validate_terminal_probes_once_within_ttl():
    runner = windows_host_with_debian_only()
    v = WindowsValidator(runner)

    v.validate_terminal(WSL_UBUNTU)
    first = len(_runs(runner))
    assert first == 3
    v.validate_terminal(WSL_UBUNTU)
    assert len(_runs(runner)) == first

    v.invalidate_cache()
    v.validate_terminal(WSL_UBUNTU)
    assert len(_runs(runner)) == 2 * first


def test_editing_a_launcher_command_is_not_served_from_cache():
    runner = windows_host_with_debian_only()
    v = WindowsValidator(runner)
    assert not v.validate_terminal(WSL_UBUNTU).valid
    edited = LauncherDefinition(id=WSL_UBUNTU.id, name=WSL_UBUNTU.name,
                                command="wt.exe -w 0 new-tab wsl.exe -d Debian --cd {path}")
    assert v.validate_terminal(edited).valid


def test_windows_detect_installed_is_cached():
    runner = FakeRunner(
        succeeds={"where wt.exe", "wsl --status", "where cmd.exe"},
        outputs={"wsl -l -q": "Ubuntu\n"},
        paths={"C:\\Program Files\\Git\\git-bash.exe"},
    )
    v = WindowsValidator(runner)
    result = v.detect_installed()
    assert result == {
        "windowsTerminal": True,
        "wsl": True,
        "wslDistros": ["Ubuntu"],
        "gitBash": True,
        "powerShell": False,
        "cmd": True,
    }
    calls = len(runner.calls)
    assert v.detect_installed() == result
    assert len(runner.calls) == calls


# ----------------------------
# macOS
# ----------------------------
def test_macos_terminal_app_found_in_system_applications():
    runner = FakeRunner(paths={"/System/Applications/Utilities/Terminal.app"})
    launcher = LauncherDefinition(id="terminal-app", name="Terminal", command="open -a Terminal {path}")
    assert MacOSValidator(runner).validate_terminal(launcher).valid


def test_macos_missing_iterm():
    launcher = LauncherDefinition(id="iterm", name="iTerm2", command="open -a iTerm {path}")
    result = MacOSValidator(FakeRunner()).validate_terminal(launcher)
    assert result.error_type is ErrorType.TERMINAL_NOT_FOUND
    assert result.error_detail == "iTerm2"


def test_macos_kitty_on_path_is_enough():
    launcher = LauncherDefinition(id="kitty", name="", command="kitty --directory {path}")
    assert MacOSValidator(FakeRunner(binaries={"kitty"})).validate_terminal(launcher).valid


def test_macos_unknown_launcher_passes():
    runner = FakeRunner()
    launcher = LauncherDefinition(id="code", name="VS Code", command="code {path}")
    assert MacOSValidator(runner).validate_terminal(launcher).valid
    assert runner.calls == []


# ----------------------------
# Linux
# ----------------------------
@pytest.mark.parametrize(
    "command,binary",
    [
        ("gnome-terminal --working-directory={path}", "gnome-terminal"),
        ("konsole --workdir {path}", "konsole"),
        ("xfce4-terminal --working-directory={path}", "xfce4-terminal"),
        ("xterm -e 'cd {path} && bash'", "xterm"),
        ("tilix -w {path}", "tilix"),
        ("wezterm start --cwd {path}", "wezterm"),
    ],
)
def test_linux_known_terminals(command, binary):
    launcher = LauncherDefinition(id="t", name="", command=command)
    assert LinuxValidator(FakeRunner(binaries={binary})).validate_terminal(launcher).valid
    result = LinuxValidator(FakeRunner()).validate_terminal(launcher)
    assert result.error_type is ErrorType.TERMINAL_NOT_FOUND


def test_linux_detail_prefers_launcher_name():
    launcher = LauncherDefinition(id="k", name="Konsole", command="konsole --workdir {path}")
    assert LinuxValidator(FakeRunner()).validate_terminal(launcher).error_detail == "Konsole"
    unnamed = LauncherDefinition(id="k2", name="", command="konsole --workdir {path}")
    assert LinuxValidator(FakeRunner()).validate_terminal(unnamed).error_detail == "konsole"


def test_linux_alternatives_link_is_not_probed():
    runner = FakeRunner()
    launcher = LauncherDefinition(id="d", name="Terminal", command="x-terminal-emulator --working-directory={path}")
    assert LinuxValidator(runner).validate_terminal(launcher).valid
    assert runner.calls == []


def test_linux_probe_results_shared_between_launchers():
    runner = FakeRunner(binaries={"kitty"})
    v = LinuxValidator(runner)
    v.validate_terminal(LauncherDefinition(id="a", name="", command="kitty {path}"))
    v.validate_terminal(LauncherDefinition(id="b", name="", command="kitty -d {path}"))
    assert runner.calls.count(("which", "kitty")) == 1


def test_linux_detect_installed():
    result = LinuxValidator(FakeRunner(binaries={"xterm", "kitty"})).detect_installed()
    assert result["xterm"] is True
    assert result["kitty"] is True
    assert result["gnomeTerminal"] is False


# ----------------------------
# Factory
# ----------------------------
def test_factory_picks_validator_by_platform():
    assert isinstance(get_validator("win32", FakeRunner()), WindowsValidator)
    assert isinstance(get_validator("darwin", FakeRunner()), MacOSValidator)
    assert isinstance(get_validator("linux", FakeRunner()), LinuxValidator)
    assert isinstance(get_validator("freebsd13", FakeRunner()), LinuxValidator)


def test_factory_passes_ttl_to_cache():
    v = get_validator("linux", FakeRunner(), cache_ttl=12)
    assert v.cache_stats()["ttlSeconds"] == 12
