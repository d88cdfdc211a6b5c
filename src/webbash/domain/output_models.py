from __future__ import annotations

"""
Output Domain Data Models.

Defines the classified line emitted by the interpreter to whatever
scrollback the host owns.
"""

from dataclasses import dataclass
from enum import Enum

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

class LineKind(str, Enum):
    """
    Classification tag attached to every emitted line.

    The string values double as style tags for the hosts.
    """
    COMMAND = "command"
    SYSTEM = "system"
    ERROR = "error"


@dataclass(frozen=True)
class OutputLine:
    """
    Single rendered scrollback entry.

    Attributes:
        text: Line content without a trailing newline.
        kind: Classification used by the host for styling.
    """
    text: str
    kind: LineKind

    def to_dict(self) -> dict:
        """Serialize to the JSON shape printed by the CLI."""
        return {"text": self.text, "kind": self.kind.value}
