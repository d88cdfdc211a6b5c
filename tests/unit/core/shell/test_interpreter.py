from __future__ import annotations

"""
Unit tests for the Command Interpreter.

Verifies:
1. Echo, trimming and tokenization of input lines.
2. Dispatch and unknown-command reporting.
3. Containment of unexpected handler failures.
4. The end-to-end session scenarios.
"""

from webbash.core.shell.interpreter import CommandInterpreter, parse_line
from webbash.core.shell.sink import ScrollbackBuffer
from webbash.domain.output_models import LineKind, OutputLine


def test_parse_line_splits_on_whitespace_runs():
    assert parse_line("mkdir \t  a   b") == ("mkdir", ["a", "b"])
    assert parse_line("pwd") == ("pwd", [])


def test_echo_uses_prompt_and_trimmed_line(shell, buffer):
    shell.execute("   pwd   ")
    assert buffer.lines[0] == OutputLine("user@webbash:~$ pwd", LineKind.COMMAND)


def test_empty_line_is_echoed_but_not_dispatched(shell, buffer):
    shell.execute("   ")
    assert buffer.lines == [OutputLine("user@webbash:~$ ", LineKind.COMMAND)]


def test_unknown_command_reports_single_error(shell, buffer, session):
    before = session.current
    shell.execute("rm -rf /")
    assert buffer.of_kind(LineKind.ERROR) == ["Command not found: rm"]
    assert len(buffer) == 2
    assert session.current is before


def test_dispatch_is_case_sensitive(shell, buffer):
    shell.execute("PWD")
    assert buffer.of_kind(LineKind.ERROR) == ["Command not found: PWD"]


def test_echo_prompt_reflects_directory_before_the_command(shell, buffer):
    shell.execute("cd documents")
    shell.execute("pwd")
    assert buffer.of_kind(LineKind.COMMAND) == [
        "user@webbash:~$ cd documents",
        "user@webbash:~/documents$ pwd",
    ]


def test_handler_exceptions_are_contained(session, buffer):
    def broken(sess, sink, args):
        raise RuntimeError("boom")

    interpreter = CommandInterpreter(session, buffer, commands={"broken": broken})
    interpreter.execute("broken")
    assert buffer.of_kind(LineKind.ERROR) == ["broken: boom"]


def test_custom_dispatch_table_replaces_builtins(session, buffer):
    interpreter = CommandInterpreter(session, buffer, commands={})
    interpreter.execute("pwd")
    assert buffer.of_kind(LineKind.ERROR) == ["Command not found: pwd"]


def test_clear_then_following_output(shell, buffer):
    shell.execute("help")
    shell.execute("clear")
    shell.execute("pwd")
    assert buffer.texts() == ["user@webbash:~$ pwd", "/home/user"]

# -----------------------------------------------------------------------------
# Session scenarios
# -----------------------------------------------------------------------------

def _system_output(buffer: ScrollbackBuffer) -> list[str]:
    return buffer.of_kind(LineKind.SYSTEM)


def test_scenario_fresh_pwd(shell, buffer):
    shell.execute("pwd")
    assert _system_output(buffer) == ["/home/user"]


def test_scenario_cd_documents(shell, buffer):
    shell.execute("cd documents")
    shell.execute("pwd")
    assert _system_output(buffer) == ["/home/user/documents"]
    assert shell.prompt == "user@webbash:~/documents$ "


def test_scenario_mkdir_then_ls(shell, buffer):
    shell.execute("mkdir notes")
    shell.execute("ls")
    assert _system_output(buffer) == ["documents  downloads  notes  projects"]


def test_scenario_cd_nonexistent(shell, buffer, session):
    before = session.current
    shell.execute("cd /nonexistent")
    assert buffer.of_kind(LineKind.ERROR) == ["cd: no such file or directory: /nonexistent"]
    assert session.current is before


def test_scenario_mkdir_with_separator(shell, buffer, session):
    shell.execute("mkdir a/b")
    assert buffer.of_kind(LineKind.ERROR) == ["mkdir: invalid directory name"]
    assert [c.name for c in session.current.children] == ["documents", "downloads", "projects"]


def test_scenario_climb_to_root(shell, buffer):
    shell.run_lines(["cd ..", "cd ..", "cd ..", "pwd"])
    assert _system_output(buffer) == ["/"]
    assert shell.prompt == "user@webbash:/$ "
