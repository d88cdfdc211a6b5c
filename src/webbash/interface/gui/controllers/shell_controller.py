from __future__ import annotations

"""
Shell Controller.

Bridges the terminal view with the interpreter: submits the entry text on
Enter, keeps the prompt label in sync with the session and returns focus
to the entry whenever the window is clicked.
"""

import logging
from typing import Any

from webbash.core.shell.interpreter import CommandInterpreter
from webbash.core.shell.session import ShellSession
from webbash.domain.output_models import LineKind
from webbash.interface.gui.sink import TextboxSink

logger = logging.getLogger(__name__)


class ShellController:
    """
    Event handlers for the window host.

    Commands run synchronously on the Tk thread; each finishes before the
    next Enter press is processed.
    """

    def __init__(self, app: Any, view: Any, session: ShellSession):
        """
        Wire a session to the view's scrollback and prompt label.

        Args:
            app: Root window, used for the global click binding.
            view: TerminalFrame (or compatible) exposing textbox,
                prompt_label and entry.
            session: Shell state driven by this window.
        """
        self.app = app
        self.view = view
        self.sink = TextboxSink(view.textbox)
        self.interpreter = CommandInterpreter(session, self.sink)

        session.on_prompt_changed(self.refresh_prompt)
        self.refresh_prompt(session.prompt)

    def bind_events(self) -> None:
        self.view.entry.bind("<Return>", self.submit)
        self.app.bind("<Button-1>", self.focus_input, add="+")
        self.focus_input()

    def show_banner(self, text: str) -> None:
        self.sink.append(text, LineKind.SYSTEM)

    # -------------------------------------------------------------------------
    # EVENT HANDLERS
    # -------------------------------------------------------------------------

    def submit(self, event: Any = None) -> str:
        """
        Run the entry text as one shell line and empty the entry.

        Returns:
            str: 'break' so Tk stops further handling of the key.
        """
        value = self.view.entry.get()
        self.view.entry.delete(0, "end")
        logger.debug(f"GUI submit: {value!r}")
        self.interpreter.execute(value)
        return "break"

    def refresh_prompt(self, prompt: str) -> None:
        self.view.prompt_label.configure(text=prompt)

    def focus_input(self, event: Any = None) -> None:
        self.view.entry.focus_set()
