from __future__ import annotations

"""
Virtual Filesystem Tree Operations.

Builds and inspects the in-memory directory tree: node creation, child
lookup, absolute path rendering and the fixed startup skeleton.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from webbash.domain import constants as const
from webbash.domain.tree_models import DirectoryNode, NodeKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def create_node(name: str, parent: Optional[DirectoryNode]) -> DirectoryNode:
    """
    Allocate a directory node with no children.

    Sibling uniqueness is not checked here; callers handle collisions.

    Args:
        name: Directory name.
        parent: Owning directory, or None for the root.

    Returns:
        DirectoryNode: The detached node.
    """
    return DirectoryNode(name=name, parent=parent)


def add_child(parent: DirectoryNode, name: str) -> DirectoryNode:
    """
    Create a node under 'parent' and register it as the last child.

    Args:
        parent: Directory receiving the new entry.
        name: Name of the new directory.

    Returns:
        DirectoryNode: The attached node.
    """
    node = create_node(name, parent)
    parent.children.append(node)
    return node


def find_child(
        node: DirectoryNode,
        name: str,
        kind: Optional[NodeKind] = None,
) -> Optional[DirectoryNode]:
    """
    Return the first child called 'name', optionally restricted to a kind.

    Args:
        node: Directory to search.
        name: Exact, case-sensitive child name.
        kind: When given, children of any other kind are ignored.

    Returns:
        Optional[DirectoryNode]: The matching child or None.
    """
    for child in node.children:
        if child.name != name:
            continue
        if kind is not None and child.kind is not kind:
            continue
        return child
    return None


def path_of(node: DirectoryNode) -> str:
    """
    Render the absolute path of a node by walking its parent links.

    Args:
        node: Any node of the tree.

    Returns:
        str: '/'-joined names from the root; the root alone is '/'.
    """
    segments = []
    current = node
    while current.parent is not None:
        segments.append(current.name)
        current = current.parent
    segments.reverse()
    return const.PATH_SEPARATOR + const.PATH_SEPARATOR.join(segments)


def seed_filesystem() -> Tuple[DirectoryNode, DirectoryNode]:
    """
    Build the startup skeleton and locate the initial working directory.

    Returns:
        Tuple[DirectoryNode, DirectoryNode]: The root and the home directory.
    """
    root = create_node(const.PATH_SEPARATOR, None)
    _populate(root, const.SEED_SKELETON)

    home = root
    for segment in const.HOME_PATH.split(const.PATH_SEPARATOR):
        if not segment:
            continue
        child = find_child(home, segment, NodeKind.DIRECTORY)
        if child is None:
            logger.warning(f"Home directory '{const.HOME_PATH}' missing from skeleton.")
            break
        home = child

    logger.debug(f"Filesystem seeded. Initial directory: {path_of(home)}")
    return root, home

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _populate(parent: DirectoryNode, layout: Dict[str, Any]) -> None:
    """Recursively create the nested directory layout under 'parent'."""
    for name, sub_layout in layout.items():
        child = add_child(parent, name)
        _populate(child, sub_layout)
