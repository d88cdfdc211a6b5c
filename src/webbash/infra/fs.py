from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user data directory that holds the configuration file
and the diagnostic log, and reads host input scripts. Acts as the only
module that touches the real disk.
"""

import os
import sys
from typing import List

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "WebBash"
UNIX_APP_DIR_NAME = ".webbash"
STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/WebBash
    - Linux/Mac: ~/.webbash

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)

# -----------------------------------------------------------------------------
# SCRIPT INPUT
# -----------------------------------------------------------------------------

def read_script_lines(path: str) -> List[str]:
    """
    Read a command script, one shell line per text line.

    Args:
        path: Script location, or '-' for standard input.

    Returns:
        List[str]: Lines without their trailing newline.

    Raises:
        OSError: If the file cannot be read.
    """
    if path == STDIN_MARKER:
        return sys.stdin.read().splitlines()

    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()
