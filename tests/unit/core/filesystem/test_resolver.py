from __future__ import annotations

"""
Unit tests for the Path Resolver.

Verifies:
1. Absolute vs relative starting points.
2. '.', '..' and separator handling.
3. Atomic failure on missing segments.
4. Round trip with path_of.
"""

import pytest

from webbash.core.filesystem.resolver import resolve, split_path
from webbash.core.filesystem.tree import add_child, find_child, path_of, seed_filesystem
from webbash.domain.tree_models import DirectoryNode


@pytest.fixture
def tree() -> tuple[DirectoryNode, DirectoryNode]:
    return seed_filesystem()


def _walk(root: DirectoryNode) -> list[DirectoryNode]:
    nodes = [root]
    for child in root.children:
        nodes.extend(_walk(child))
    return nodes


@pytest.mark.parametrize("path", ["", None])
def test_empty_path_returns_current(tree, path):
    root, home = tree
    assert resolve(path, home, root) is home


def test_absolute_path_starts_at_root(tree):
    root, home = tree
    documents = find_child(home, "documents")
    assert resolve("/home/user/documents", documents, root) is documents
    assert resolve("/", home, root) is root


def test_relative_path_starts_at_current(tree):
    root, home = tree
    assert resolve("projects", home, root) is find_child(home, "projects")


def test_repeated_and_trailing_separators_are_ignored(tree):
    root, home = tree
    assert resolve("//home///user/", root, root) is home
    assert resolve("documents/", home, root) is find_child(home, "documents")


def test_dot_segments_are_noops(tree):
    root, home = tree
    assert resolve(".", home, root) is home
    assert resolve("./././documents/.", home, root) is find_child(home, "documents")


def test_dotdot_climbs_one_level(tree):
    root, home = tree
    assert resolve("..", home, root) is home.parent
    assert resolve("../..", home, root) is root
    assert resolve("documents/../downloads", home, root) is find_child(home, "downloads")


def test_dotdot_is_clamped_at_root(tree):
    root, home = tree
    assert resolve("..", root, root) is root
    assert resolve("../../../../..", home, root) is root
    assert resolve("/../home", home, root) is root.children[0]


def test_missing_segment_fails_without_partial_result(tree):
    root, home = tree
    assert resolve("documents/missing/..", home, root) is None
    assert resolve("/nonexistent", home, root) is None
    assert resolve("Documents", home, root) is None


def test_resolve_does_not_mutate_tree(tree):
    root, home = tree
    before = [path_of(n) for n in _walk(root)]
    resolve("/home/user/nothing/here", home, root)
    resolve("../..", home, root)
    assert [path_of(n) for n in _walk(root)] == before


def test_stepwise_resolution_matches_manual_traversal(tree):
    """A path of '.' and existing names lands where stepping child by child does."""
    root, home = tree
    deep = add_child(add_child(find_child(home, "projects"), "web"), "assets")

    manual = home
    for name in ["projects", "web", "assets"]:
        manual = find_child(manual, name)

    assert manual is deep
    assert resolve("./projects/./web/assets/.", home, root) is manual


def test_path_of_round_trip_from_any_start(tree):
    """resolve(path_of(node)) finds the node regardless of the current node."""
    root, home = tree
    add_child(find_child(home, "documents"), "notes")
    nodes = _walk(root)
    for node in nodes:
        for start in (root, home, nodes[-1]):
            assert resolve(path_of(node), start, root) is node


def test_split_path_discards_empty_segments():
    assert split_path("/a//b/") == ["a", "b"]
    assert split_path("") == []
