from __future__ import annotations

"""
Terminal View Component.

Provides the terminal-like surface of the window host: a read-only
monospaced scrollback, the prompt label and the input entry.
"""

from typing import Any

import customtkinter as ctk

from webbash.utils.i18n import i18n

MONO_FONT_FAMILY = "Consolas"

# -----------------------------------------------------------------------------
# TERMINAL VIEW CLASS
# -----------------------------------------------------------------------------

class TerminalFrame(ctk.CTkFrame):
    """
    Scrollback plus prompt/input row.

    The controller owns behavior; this class only builds and exposes the
    widgets.
    """

    def __init__(self, master: Any, font_size: int = 13, **kwargs: Any):
        """
        Build the terminal widgets.

        Args:
            master: Parent UI container.
            font_size: Point size of the monospaced font.
        """
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)

        mono = (MONO_FONT_FAMILY, font_size)

        self.textbox = ctk.CTkTextbox(self, state="disabled", font=mono, wrap="char")
        self.textbox.grid(row=0, column=0, columnspan=2, sticky="nsew")

        # -----------------------------------------------------------------------------
        # INPUT ROW
        # -----------------------------------------------------------------------------
        self.prompt_label = ctk.CTkLabel(self, text="", font=mono, anchor="w")
        self.prompt_label.grid(row=1, column=0, pady=(8, 0), sticky="w")

        self.entry = ctk.CTkEntry(self, font=mono)
        self.entry.grid(row=1, column=1, pady=(8, 0), sticky="ew")

        self.btn_copy = ctk.CTkButton(
            self,
            text=i18n.t("gui.terminal.copy", default="Copy output"),
            width=110,
            command=self._copy_output,
        )
        self.btn_copy.grid(row=2, column=1, pady=10, sticky="e")

    def _copy_output(self) -> None:
        """Copy the whole scrollback to the system clipboard."""
        self.master.clipboard_clear()
        self.master.clipboard_append(self.textbox.get("1.0", "end"))
