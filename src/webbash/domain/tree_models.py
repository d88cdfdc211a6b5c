from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the node type of the in-memory filesystem. Ownership flows from
parent to children; the parent link is a plain back reference used for
upward traversal ('..' and path rendering).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Kind of entry stored in the tree. Only directories exist today."""
    DIRECTORY = "dir"


@dataclass(eq=False)
class DirectoryNode:
    """
    Represents one directory in the simulated filesystem.

    Nodes compare by identity, so two directories with the same name in
    different places are never equal.

    Attributes:
        name: Identifier unique among siblings. The root carries the separator.
        parent: Owning directory, or None for the root.
        children: Child entries in insertion order.
        kind: Entry kind used to filter lookups.
    """
    name: str
    parent: Optional["DirectoryNode"] = field(default=None, repr=False)
    children: List["DirectoryNode"] = field(default_factory=list, repr=False)
    kind: NodeKind = NodeKind.DIRECTORY

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY
