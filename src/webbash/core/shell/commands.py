from __future__ import annotations

"""
Built-in Shell Commands.

Each handler receives the session, the output sink and the positional
arguments. Handlers report failures as error lines and always return
normally; the tree is only mutated by 'mkdir', all-or-nothing.
"""

import logging
from typing import Callable, Dict, List

from webbash.core.shell.session import ShellSession
from webbash.core.shell.sink import OutputSink
from webbash.domain import constants as const
from webbash.domain.output_models import LineKind

logger = logging.getLogger(__name__)

CommandHandler = Callable[[ShellSession, OutputSink, List[str]], None]

# Name -> handler, filled by the @command decorator below
BUILTIN_COMMANDS: Dict[str, CommandHandler] = {}

LS_SEPARATOR = "  "


def command(name: str) -> Callable[[CommandHandler], CommandHandler]:
    """Register the decorated function as the handler for 'name'."""
    def decorator(func: CommandHandler) -> CommandHandler:
        BUILTIN_COMMANDS[name] = func
        return func
    return decorator

# -----------------------------------------------------------------------------
# NAVIGATION
# -----------------------------------------------------------------------------

@command("ls")
def cmd_ls(session: ShellSession, sink: OutputSink, args: List[str]) -> None:
    """List the directory children of the target, sorted by name."""
    target = session.current
    if args:
        resolved = session.resolve(args[0])
        if resolved is None:
            sink.append(
                f"ls: cannot access '{args[0]}': No such file or directory",
                LineKind.ERROR,
            )
            return
        target = resolved

    names = sorted(child.name for child in target.children if child.is_dir)
    if not names:
        return

    sink.append(LS_SEPARATOR.join(names), LineKind.SYSTEM)


@command("cd")
def cmd_cd(session: ShellSession, sink: OutputSink, args: List[str]) -> None:
    """Change the working directory; no argument means home."""
    if not args:
        home = session.resolve(session.home_path)
        if home is not None:
            session.change_directory(home)
        else:
            logger.debug(f"cd: home '{session.home_path}' unresolvable, ignoring.")
        return

    target = session.resolve(args[0])
    if target is None:
        sink.append(f"cd: no such file or directory: {args[0]}", LineKind.ERROR)
        return

    session.change_directory(target)


@command("pwd")
def cmd_pwd(session: ShellSession, sink: OutputSink, args: List[str]) -> None:
    sink.append(session.cwd_path, LineKind.SYSTEM)

# -----------------------------------------------------------------------------
# MUTATION
# -----------------------------------------------------------------------------

@command("mkdir")
def cmd_mkdir(session: ShellSession, sink: OutputSink, args: List[str]) -> None:
    """
    Create a directory under the working directory.

    Rejects a missing operand, names containing the separator, and names
    already used by any child of the working directory.
    """
    if not args:
        sink.append("mkdir: missing operand", LineKind.ERROR)
        return

    name = args[0]
    if const.PATH_SEPARATOR in name:
        sink.append("mkdir: invalid directory name", LineKind.ERROR)
        return

    # Collisions are checked against every child kind
    if any(child.name == name for child in session.current.children):
        sink.append(
            f"mkdir: cannot create directory '{name}': File exists",
            LineKind.ERROR,
        )
        return

    session.create_directory(name)

# -----------------------------------------------------------------------------
# DISPLAY
# -----------------------------------------------------------------------------

@command("clear")
def cmd_clear(session: ShellSession, sink: OutputSink, args: List[str]) -> None:
    sink.clear()


@command("help")
def cmd_help(session: ShellSession, sink: OutputSink, args: List[str]) -> None:
    for line in const.HELP_LINES:
        sink.append(line, LineKind.SYSTEM)
