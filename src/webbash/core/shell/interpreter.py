from __future__ import annotations

"""
Command Interpreter.

Parses one input line into a command name and arguments, echoes it to the
sink behind the current prompt and dispatches it to a registered handler.
No exception raised by a handler ever reaches the host.
"""

import logging
from typing import Dict, List, Optional

from webbash.core.shell.commands import BUILTIN_COMMANDS, CommandHandler
from webbash.core.shell.session import ShellSession
from webbash.core.shell.sink import OutputSink
from webbash.domain.output_models import LineKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# INTERPRETER CLASS
# -----------------------------------------------------------------------------

class CommandInterpreter:
    """
    Line-oriented front end of the shell.

    Owns the dispatch table and runs every line to completion before
    returning.
    """

    def __init__(
            self,
            session: ShellSession,
            sink: OutputSink,
            commands: Optional[Dict[str, CommandHandler]] = None,
    ):
        """
        Args:
            session: State the handlers read and mutate.
            sink: Destination for echoed and produced lines.
            commands: Dispatch table; defaults to the built-in commands.
        """
        self.session = session
        self.sink = sink
        self.commands: Dict[str, CommandHandler] = dict(
            BUILTIN_COMMANDS if commands is None else commands
        )

    @property
    def prompt(self) -> str:
        return self.session.prompt

    def execute(self, raw_line: str) -> None:
        """
        Run one input line.

        The trimmed line is always echoed behind the prompt, even when empty.
        Unknown names produce a single error line.

        Args:
            raw_line: Text as submitted by the host.
        """
        line = raw_line.strip()
        self.sink.append(self.prompt + line, LineKind.COMMAND)

        if not line:
            return

        name, args = parse_line(line)
        handler = self.commands.get(name)
        if handler is None:
            logger.debug(f"Unknown command: {name}")
            self.sink.append(f"Command not found: {name}", LineKind.ERROR)
            return

        logger.debug(f"Dispatching '{name}' with args {args}")
        try:
            handler(self.session, self.sink, args)
        except Exception as e:
            logger.error(f"Command '{name}' failed unexpectedly: {e}", exc_info=True)
            self.sink.append(f"{name}: {e}", LineKind.ERROR)

    def run_lines(self, lines: List[str]) -> None:
        """Execute each line in order."""
        for line in lines:
            self.execute(line)

# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

def parse_line(line: str) -> tuple[str, List[str]]:
    """
    Split a trimmed, non-empty line on whitespace runs.

    No quoting or escaping: tokens are passed through verbatim.

    Returns:
        tuple[str, List[str]]: Command name and positional arguments.
    """
    tokens = line.split()
    return tokens[0], tokens[1:]
