from __future__ import annotations

"""
Main Application Window Factory.

Initializes the root CustomTkinter window, applies the configured
appearance and establishes the single-cell grid holding the terminal.
"""

import customtkinter as ctk

from webbash.domain import constants as const
from webbash.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ROOT WINDOW CONSTRUCTION
# -----------------------------------------------------------------------------

def create_main_window(appearance_mode: str = "system") -> ctk.CTk:
    """
    Instantiate and configure the primary application window.

    Args:
        appearance_mode: Key of constants.APPEARANCE_MODES.

    Returns:
        ctk.CTk: The configured root application instance.
    """
    ctk.set_appearance_mode(const.APPEARANCE_MODES.get(appearance_mode, "System"))
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title(i18n.t("gui.window.title", default="WebBash - v{version}", version=const.CURRENT_CONFIG_VERSION))
    app.geometry("900x560")

    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=1)

    return app
