from __future__ import annotations

"""
Path Resolution Service.

Translates absolute or relative path strings into tree nodes. Resolution is
atomic: it yields the final node or None, never a partial walk, and it never
mutates the tree or the session.
"""

from typing import List, Optional

from webbash.core.filesystem.tree import find_child
from webbash.domain import constants as const
from webbash.domain.tree_models import DirectoryNode, NodeKind

CURRENT_DIR = "."
PARENT_DIR = ".."

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_path(path: str) -> List[str]:
    """
    Split a path into its non-empty segments.

    Repeated and trailing separators therefore have no effect.
    """
    return [part for part in path.split(const.PATH_SEPARATOR) if part]


def resolve(
        path: Optional[str],
        current: DirectoryNode,
        root: DirectoryNode,
) -> Optional[DirectoryNode]:
    """
    Resolve a path string against the tree.

    Absolute paths start at 'root', relative ones at 'current'. The '.'
    segment is skipped and '..' climbs one level, staying put at the root.
    Any other segment must name a directory child of the walk node.

    Args:
        path: Path to resolve. Empty or None yields 'current'.
        current: Base for relative paths.
        root: Base for absolute paths.

    Returns:
        Optional[DirectoryNode]: The target node, or None if any segment
        does not exist.
    """
    if not path:
        return current

    node = root if path.startswith(const.PATH_SEPARATOR) else current

    for segment in split_path(path):
        if segment == CURRENT_DIR:
            continue
        if segment == PARENT_DIR:
            if node.parent is not None:
                node = node.parent
            continue

        child = find_child(node, segment, NodeKind.DIRECTORY)
        if child is None:
            return None
        node = child

    return node
