from __future__ import annotations

"""
Textbox Output Sink.

Writes classified shell lines into a read-only CustomTkinter textbox, one
text tag per line kind, and keeps the view scrolled to the newest line.
"""

from typing import Any, Dict

from webbash.domain.output_models import LineKind

# Foreground color per line kind
LINE_COLORS: Dict[LineKind, str] = {
    LineKind.COMMAND: "#4fc1ff",
    LineKind.SYSTEM: "#d4d4d4",
    LineKind.ERROR: "#f48771",
}


class TextboxSink:
    """OutputSink over any widget exposing the Tk text API."""

    def __init__(self, textbox: Any):
        """
        Args:
            textbox: CTkTextbox (or compatible) created in 'disabled' state.
        """
        self.textbox = textbox
        for kind, color in LINE_COLORS.items():
            self.textbox.tag_config(kind.value, foreground=color)

    def append(self, text: str, kind: LineKind) -> None:
        """Append one tagged line while keeping the buffer read-only."""
        self.textbox.configure(state="normal")
        self.textbox.insert("end", text + "\n", kind.value)
        self.textbox.see("end")
        self.textbox.configure(state="disabled")

    def clear(self) -> None:
        self.textbox.configure(state="normal")
        self.textbox.delete("1.0", "end")
        self.textbox.configure(state="disabled")
