from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to shell-wide constants: the path separator,
the seeded filesystem skeleton, the default prompt identity and the fixed
help summary.
"""

from typing import Any, Dict, List

CURRENT_CONFIG_VERSION = "1.0.0"
APP_NAME = "WebBash"

# -----------------------------------------------------------------------------
# FILESYSTEM LAYOUT
# -----------------------------------------------------------------------------
PATH_SEPARATOR = "/"
HOME_PATH = "/home/user"
HOME_SYMBOL = "~"

# Nested directory names below the root, created in insertion order
SEED_SKELETON: Dict[str, Any] = {
    "home": {
        "user": {
            "documents": {},
            "downloads": {},
            "projects": {},
        },
    },
}

# -----------------------------------------------------------------------------
# PROMPT IDENTITY
# -----------------------------------------------------------------------------
DEFAULT_USER = "user"
DEFAULT_HOST = "webbash"

# -----------------------------------------------------------------------------
# HELP SUMMARY
# -----------------------------------------------------------------------------
HELP_LINES: List[str] = [
    "Available commands:",
    "  ls [path]      List directories",
    "  cd [path]      Change directory",
    "  mkdir <name>   Create directory",
    "  pwd            Print working directory",
    "  clear          Clear terminal",
    "  help           Show this help",
]

# Host appearance presets offered by the GUI
APPEARANCE_MODES: Dict[str, str] = {
    "system": "System",
    "dark": "Dark",
    "light": "Light",
}
