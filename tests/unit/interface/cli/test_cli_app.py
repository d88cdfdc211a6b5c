from __future__ import annotations

"""
Unit tests for the CLI application controller.

Runs main() in-process with logging bootstrap disabled and the
configuration file isolated, and inspects the captured streams.
"""

import json

import pytest

from webbash.interface.cli import app as cli_app


@pytest.fixture(autouse=True)
def isolated_cli(monkeypatch: pytest.MonkeyPatch, config_file) -> None:
    """Keep root logging untouched and config.json inside tmp_path."""
    monkeypatch.setattr(cli_app, "configure_logging", lambda *a, **k: None)


def test_batch_lines_run_in_order(capsys):
    code = cli_app.main(["-c", "cd documents", "-c", "pwd"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out == [
        "user@webbash:~$ cd documents",
        "user@webbash:~/documents$ pwd",
        "/home/user/documents",
    ]


def test_batch_error_sets_exit_code(capsys):
    code = cli_app.main(["--no-echo", "-c", "cd /nonexistent; pwd"])
    captured = capsys.readouterr()

    assert code == 1
    assert captured.out.splitlines() == ["/home/user"]
    assert captured.err.splitlines() == ["cd: no such file or directory: /nonexistent"]


def test_json_output(capsys):
    code = cli_app.main(["--json", "--no-echo", "-c", "mkdir notes; ls"])
    rows = [json.loads(line) for line in capsys.readouterr().out.splitlines()]

    assert code == 0
    assert rows == [{"text": "documents  downloads  notes  projects", "kind": "system"}]


def test_identity_override_changes_prompt(capsys):
    cli_app.main(["--user", "ana", "--host", "lab", "-c", "cd /"])
    assert capsys.readouterr().out.splitlines() == ["ana@lab:~$ cd /"]


def test_script_file(tmp_path, capsys):
    script = tmp_path / "setup.sh"
    script.write_text("cd ..\ncd ..\ncd ..\npwd\n", encoding="utf-8")

    code = cli_app.main(["--no-echo", "--script", str(script)])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["/"]


def test_unreadable_script_returns_2(tmp_path, capsys):
    code = cli_app.main(["--script", str(tmp_path / "missing.sh")])
    assert code == 2
    assert "ERROR:" in capsys.readouterr().err


def test_dump_config(capsys):
    code = cli_app.main(["--use-defaults", "--user", "ana", "--dump-config"])
    dumped = json.loads(capsys.readouterr().out)
    assert code == 0
    assert dumped["user"] == "ana"
    assert dumped["host"] == "webbash"


def test_repl_reads_until_exit(monkeypatch, capsys):
    feed = iter(["mkdir notes", "cd notes", "pwd", "exit", "pwd"])
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(feed)

    monkeypatch.setattr("builtins.input", fake_input)
    code = cli_app.main(["--repl"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert prompts == [
        "user@webbash:~$ ",
        "user@webbash:~$ ",
        "user@webbash:~/notes$ ",
        "user@webbash:~/notes$ ",
    ]
    assert "/home/user/notes" in out
    assert 'WebBash ready. Type "help" to see the commands.' in out


def test_repl_stops_on_eof(monkeypatch, capsys):
    def eof(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert cli_app.main(["--repl"]) == 0


def test_script_keeps_semicolons_inside_names(tmp_path, capsys):
    script = tmp_path / "names.sh"
    script.write_text("mkdir a;b\nls\n", encoding="utf-8")

    code = cli_app.main(["--no-echo", "--script", str(script)])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["a;b  documents  downloads  projects"]
