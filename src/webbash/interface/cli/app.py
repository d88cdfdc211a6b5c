from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the terminal host lifecycle: logging bootstrap, configuration
loading and merging, session creation, and either a batch run of the given
lines or an interactive read-eval loop on the terminal.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from webbash.core.shell.interpreter import CommandInterpreter
from webbash.core.shell.session import ShellSession
from webbash.core.validator import validate_config
from webbash.domain.config import get_default_config, load_config
from webbash.infra.fs import read_script_lines
from webbash.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from webbash.interface.cli import args as cli_args
from webbash.interface.cli.terminal import TerminalSink
from webbash.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_WORDS = ("exit", "quit")

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 when a shell line reported an error, 2 on
        unreadable input, 130 on interrupt.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (defaults or persisted, then CLI overrides)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    log_file = get_default_log_path() if clean_conf["save_log"] else None
    configure_logging(LoggingConfig(level=clean_conf["log_level"], console=True, log_file=log_file))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if clean_conf["locale"] != i18n.locale:
        i18n.load_locale(clean_conf["locale"])

    # 4. Session bootstrap
    session = ShellSession.create(user=clean_conf["user"], host=clean_conf["host"])
    mode = cli_args.resolve_mode(args)
    logger.debug(f"CLI session started in {mode} mode as {session.user}@{session.host}")

    if mode == cli_args.MODE_BATCH:
        try:
            lines = _collect_batch_lines(args)
        except OSError as e:
            msg = i18n.t("cli.errors.script_unreadable", path=args.script_path, error=e)
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return 2

        sink = TerminalSink(json_output=args.json_output, echo_commands=not args.no_echo)
        interpreter = CommandInterpreter(session, sink)
        try:
            interpreter.run_lines(lines)
        except KeyboardInterrupt:
            print(i18n.t("cli.status.interrupted"), file=sys.stderr)
            return 130
        return 1 if sink.error_count else 0

    # The terminal already shows what the user typed, so echoes are dropped
    sink = TerminalSink(json_output=args.json_output, echo_commands=args.json_output)
    return run_repl(CommandInterpreter(session, sink))

# -----------------------------------------------------------------------------
# INTERACTIVE LOOP
# -----------------------------------------------------------------------------

def run_repl(interpreter: CommandInterpreter) -> int:
    """
    Read lines from the terminal until 'exit' or end of input.

    Args:
        interpreter: Interpreter bound to the session and terminal sink.

    Returns:
        int: Process exit code (always 0).
    """
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        pass

    print(i18n.t("app.banner"))
    while True:
        try:
            line = input(interpreter.prompt)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            # Drop the partial line like a real shell does
            print()
            continue

        if line.strip() in EXIT_WORDS:
            break
        interpreter.execute(line)

    print(i18n.t("cli.status.bye"))
    return 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _collect_batch_lines(args: Any) -> List[str]:
    """Gather '-c' lines first, then the script lines."""
    lines = cli_args.split_command_lines(args.commands)
    if args.script_path:
        lines.extend(read_script_lines(args.script_path))
    return lines


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only keys already present in 'base' are merged and None means "unset".
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
