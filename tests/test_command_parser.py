import shlex

from dirlauncher.command_parser import (
    placeholder_inside_quotes,
    substitute_escaped,
    substitute_path,
    try_shell_free_decomposition,
)
from dirlauncher.models import SimpleCommand


def test_simple_template_decomposes():
    assert try_shell_free_decomposition("code {path}") == SimpleCommand("code", ["{path}"])


def test_embedded_placeholder_argument():
    parsed = try_shell_free_decomposition("x-terminal-emulator --working-directory={path}")
    assert parsed.executable == "x-terminal-emulator"
    assert parsed.arg_templates == ["--working-directory={path}"]


def test_quoted_tokens_are_unquoted():
    parsed = try_shell_free_decomposition("\"/opt/My Editor/bin/edit\" --new-window {path}")
    assert parsed.executable == "/opt/My Editor/bin/edit"
    assert parsed.arg_templates == ["--new-window", "{path}"]


def test_tabs_separate_tokens():
    parsed = try_shell_free_decomposition("open\t-a\tTerminal {path}")
    assert parsed == SimpleCommand("open", ["-a", "Terminal", "{path}"])


def test_placeholder_inside_quotes_needs_shell():
    assert try_shell_free_decomposition('bash -c "cd {path}"') is None
    assert try_shell_free_decomposition("kitty --title 'x {path}'") is None


def test_shell_operators_need_shell():
    assert try_shell_free_decomposition("echo {path} | cat") is None
    assert try_shell_free_decomposition("cd {path} && code .") is None
    assert try_shell_free_decomposition("code {path} > /dev/null") is None
    assert try_shell_free_decomposition("code $HOME/{path}") is None
    assert try_shell_free_decomposition("code {path};ls") is None


def test_unterminated_quote_or_empty_template():
    assert try_shell_free_decomposition('code "{path}') is None
    assert try_shell_free_decomposition("") is None
    assert try_shell_free_decomposition("   ") is None


def test_substitute_path_replaces_every_occurrence():
    assert substitute_path("a {path} b {path}", "/x") == "a /x b /x"


def test_placeholder_inside_quotes():
    assert placeholder_inside_quotes("sh -c 'cd {path}'")
    assert placeholder_inside_quotes('"C:\\Git\\git-bash.exe" "--cd={path}"')
    assert not placeholder_inside_quotes("'/opt/My Editor/edit' {path}")
    assert not placeholder_inside_quotes("code {path}")


def test_substitute_escaped_quotes_bare_placeholder():
    assert substitute_escaped("code {path} > /dev/null", "/a b", "linux") == "code '/a b' > /dev/null"
    assert substitute_escaped("code {path}", "C:\\a b", "win32") == 'code "C:\\a b"'


def test_substitute_escaped_inside_single_quotes_posix():
    path = "/home/u/it's mine"
    command = substitute_escaped("xterm -e 'cd {path}; bash'", path, "linux")
    assert shlex.split(command) == ["xterm", "-e", f"cd {path}; bash"]


def test_substitute_escaped_inside_double_quotes_posix():
    path = '/home/u/say "hi" \\ now'
    command = substitute_escaped('bash -c "cd {path}"', path, "darwin")
    assert shlex.split(command) == ["bash", "-c", f"cd {path}"]


def test_substitute_escaped_inside_double_quotes_windows():
    command = substitute_escaped('git-bash.exe "--cd={path}"', "C:\\Users\\me", "win32")
    assert command == 'git-bash.exe "--cd=C:\\Users\\me"'


def test_substitute_escaped_mixed_contexts():
    command = substitute_escaped("open {path} '{path}'", "/a'b", "linux")
    assert shlex.split(command) == ["open", "/a'b", "/a'b"]
