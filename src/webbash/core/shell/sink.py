from __future__ import annotations

"""
Output Sink Contract and In-Memory Scrollback.

The interpreter only knows the OutputSink protocol; hosts decide where the
lines end up. ScrollbackBuffer keeps them in memory for tests and for
hosts that render after each command.
"""

from typing import List, Protocol

from webbash.domain.output_models import LineKind, OutputLine

# -----------------------------------------------------------------------------
# SINK CONTRACT
# -----------------------------------------------------------------------------

class OutputSink(Protocol):
    """Append-only line display owned by the host."""

    def append(self, text: str, kind: LineKind) -> None:
        ...

    def clear(self) -> None:
        ...

# -----------------------------------------------------------------------------
# IN-MEMORY IMPLEMENTATION
# -----------------------------------------------------------------------------

class ScrollbackBuffer:
    """
    Ordered in-memory scrollback.

    Keeps every appended line until clear() is called.
    """

    def __init__(self) -> None:
        self._lines: List[OutputLine] = []

    def append(self, text: str, kind: LineKind) -> None:
        self._lines.append(OutputLine(text=text, kind=kind))

    def clear(self) -> None:
        self._lines.clear()

    @property
    def lines(self) -> List[OutputLine]:
        """Snapshot of the buffered lines."""
        return list(self._lines)

    def texts(self) -> List[str]:
        return [line.text for line in self._lines]

    def of_kind(self, kind: LineKind) -> List[str]:
        """Return the text of every buffered line carrying 'kind'."""
        return [line.text for line in self._lines if line.kind is kind]

    def drain(self) -> List[OutputLine]:
        """Return the buffered lines and empty the buffer."""
        lines = self._lines
        self._lines = []
        return lines

    def __len__(self) -> int:
        return len(self._lines)
