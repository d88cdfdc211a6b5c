from __future__ import annotations

"""
Unit tests for the window host's ShellController and TextboxSink.

Widgets are replaced by MagicMock objects, so no display is required.
"""

from unittest.mock import MagicMock, call

import pytest

from webbash.core.shell.session import ShellSession
from webbash.domain.output_models import LineKind
from webbash.interface.gui.controllers.shell_controller import ShellController
from webbash.interface.gui.sink import LINE_COLORS, TextboxSink


@pytest.fixture
def view() -> MagicMock:
    """Mock TerminalFrame exposing textbox, prompt_label and entry."""
    return MagicMock()


@pytest.fixture
def controller(view: MagicMock) -> ShellController:
    return ShellController(MagicMock(), view, ShellSession.create())


def _inserted_lines(textbox: MagicMock) -> list[tuple[str, str]]:
    return [(c.args[1].rstrip("\n"), c.args[2]) for c in textbox.insert.call_args_list]


def test_textbox_sink_registers_one_tag_per_kind():
    textbox = MagicMock()
    TextboxSink(textbox)
    tags = {c.args[0] for c in textbox.tag_config.call_args_list}
    assert tags == {kind.value for kind in LINE_COLORS}


def test_textbox_sink_append_keeps_buffer_read_only():
    textbox = MagicMock()
    sink = TextboxSink(textbox)
    sink.append("/home/user", LineKind.SYSTEM)

    textbox.insert.assert_called_once_with("end", "/home/user\n", "system")
    textbox.see.assert_called_once_with("end")
    assert textbox.configure.call_args_list[-2:] == [call(state="normal"), call(state="disabled")]


def test_textbox_sink_clear_deletes_everything():
    textbox = MagicMock()
    TextboxSink(textbox).clear()
    textbox.delete.assert_called_once_with("1.0", "end")


def test_controller_shows_initial_prompt(controller, view):
    view.prompt_label.configure.assert_called_with(text="user@webbash:~$ ")


def test_submit_runs_line_and_empties_entry(controller, view):
    view.entry.get.return_value = "cd documents"

    result = controller.submit()

    assert result == "break"
    view.entry.delete.assert_called_once_with(0, "end")
    assert _inserted_lines(view.textbox) == [("user@webbash:~$ cd documents", "command")]
    view.prompt_label.configure.assert_called_with(text="user@webbash:~/documents$ ")


def test_submit_error_is_tagged(controller, view):
    view.entry.get.return_value = "nope"
    controller.submit()
    assert _inserted_lines(view.textbox)[-1] == ("Command not found: nope", "error")


def test_clear_command_clears_textbox(controller, view):
    view.entry.get.return_value = "clear"
    controller.submit()
    view.textbox.delete.assert_called_with("1.0", "end")


def test_bind_events_wires_enter_and_focus(controller, view):
    controller.bind_events()
    view.entry.bind.assert_called_once_with("<Return>", controller.submit)
    controller.app.bind.assert_called_once_with("<Button-1>", controller.focus_input, add="+")
    view.entry.focus_set.assert_called()


def test_show_banner_is_system_line(controller, view):
    controller.show_banner("hello")
    assert _inserted_lines(view.textbox) == [("hello", "system")]
