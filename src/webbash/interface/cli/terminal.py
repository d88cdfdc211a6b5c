from __future__ import annotations

"""
Terminal Output Sink.

Renders classified shell lines on the process streams: normal output on
stdout, errors on stderr, or every line as a JSON object on stdout.
"""

import json
import sys
from typing import Optional, TextIO

from webbash.domain.output_models import LineKind, OutputLine

ANSI_CLEAR = "\033[2J\033[H"


class TerminalSink:
    """
    OutputSink writing straight to the terminal.

    Attributes:
        error_count: Number of error lines emitted so far.
    """

    def __init__(
            self,
            *,
            json_output: bool = False,
            echo_commands: bool = True,
            stdout: Optional[TextIO] = None,
            stderr: Optional[TextIO] = None,
    ):
        """
        Args:
            json_output: Emit one JSON object per line instead of plain text.
            echo_commands: Print the prompt+command echo lines.
            stdout: Stream for normal output (defaults to sys.stdout).
            stderr: Stream for error lines in text mode (defaults to sys.stderr).
        """
        self.json_output = json_output
        self.echo_commands = echo_commands
        self._stdout = stdout
        self._stderr = stderr
        self.error_count = 0

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def append(self, text: str, kind: LineKind) -> None:
        if kind is LineKind.ERROR:
            self.error_count += 1
        if kind is LineKind.COMMAND and not self.echo_commands:
            return

        if self.json_output:
            payload = OutputLine(text=text, kind=kind).to_dict()
            print(json.dumps(payload, ensure_ascii=False), file=self.stdout)
            return

        stream = self.stderr if kind is LineKind.ERROR else self.stdout
        print(text, file=stream)

    def clear(self) -> None:
        """Clear the screen when attached to a terminal."""
        if self.json_output:
            return
        if self.stdout.isatty():
            self.stdout.write(ANSI_CLEAR)
            self.stdout.flush()
