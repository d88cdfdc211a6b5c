from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the terminal host and translates the
parsed namespace into configuration overrides and a run mode.
"""

import argparse
from typing import Any, Dict, List

from webbash.utils.i18n import SUPPORTED_LOCALES, i18n

MODE_BATCH = "batch"
MODE_REPL = "repl"

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the WebBash CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="webbash",
        description=i18n.t("app.description"),
    )

    # --- Input Sources ---
    p.add_argument(
        "-c", "--command",
        dest="commands",
        action="append",
        default=[],
        metavar="LINE",
        help=i18n.t("cli.args.command"),
    )
    p.add_argument(
        "--script",
        dest="script_path",
        default=None,
        metavar="FILE",
        help=i18n.t("cli.args.script"),
    )
    p.add_argument(
        "--repl",
        action="store_true",
        help=i18n.t("cli.args.repl"),
    )

    # --- Output Format ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--no-echo",
        action="store_true",
        help=i18n.t("cli.args.no_echo"),
    )

    # --- Prompt Identity and Presentation ---
    p.add_argument("--user", default=None, help=i18n.t("cli.args.user"))
    p.add_argument("--host", default=None, help=i18n.t("cli.args.host"))
    p.add_argument(
        "--locale",
        default=None,
        choices=SUPPORTED_LOCALES,
        help=i18n.t("cli.args.locale"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides; None values mean "keep the loaded value".
    """
    overrides: Dict[str, Any] = {
        "user": args.user,
        "host": args.host,
        "locale": args.locale,
    }
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return overrides


def resolve_mode(args: argparse.Namespace) -> str:
    """Batch when lines or a script are given, interactive otherwise."""
    if args.commands or args.script_path:
        return MODE_BATCH
    return MODE_REPL


def split_command_lines(commands: List[str]) -> List[str]:
    """
    Expand each '-c' value into shell lines.

    A value may hold several lines separated by newlines or ';', so ';'
    never survives inside a token here; '--script' keeps lines verbatim.
    """
    lines: List[str] = []
    for value in commands:
        for chunk in value.splitlines() or [""]:
            lines.extend(chunk.split(";"))
    return lines
