from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the terminal host (any argument given) or the window
host (no arguments), and installs a global exception hook so fatal errors
are logged and reported instead of vanishing with the process.
"""

import logging
import os
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Make 'webbash' importable when this file is run directly from a checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, "frozen", False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and report it on stderr.

    In window mode a native alert is attempted as well, since the user may
    not be watching a terminal.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("webbash.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (WEBBASH)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)

    if len(sys.argv) <= 1:
        try:
            import tkinter.messagebox as mb
            from tkinter import Tk
            root = Tk()
            root.withdraw()
            mb.showerror("WebBash - Fatal Error", f"A critical error occurred:\n\n{error_msg}")
            root.destroy()
        except Exception as e:
            logger.error(f"System alert unavailable: {e}")

    sys.exit(1)


sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Detect execution context and delegate to the matching host.

    Returns:
        int: Standard process exit code.
    """
    if len(sys.argv) > 1:
        from webbash.interface.cli.app import main as cli_main
        return cli_main()

    from webbash.interface.gui.app import main as gui_main
    gui_main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
