from __future__ import annotations

"""
Shell Session State.

Holds the mutable pair (root, current directory) together with the prompt
identity. Every command reads and writes the filesystem through one of
these objects; independent sessions never share nodes.
"""

import logging
from typing import Callable, List, Optional

from webbash.core.filesystem import resolver
from webbash.core.filesystem.tree import add_child, path_of, seed_filesystem
from webbash.domain import constants as const
from webbash.domain.tree_models import DirectoryNode

logger = logging.getLogger(__name__)

PromptListener = Callable[[str], None]

# -----------------------------------------------------------------------------
# SESSION CLASS
# -----------------------------------------------------------------------------

class ShellSession:
    """
    Working state of one simulated shell.

    The current directory is always a live node reachable from the root,
    since nodes are never deleted.
    """

    def __init__(
            self,
            root: DirectoryNode,
            current: DirectoryNode,
            home_path: str = const.HOME_PATH,
            user: str = const.DEFAULT_USER,
            host: str = const.DEFAULT_HOST,
    ):
        """
        Bind the session to an existing tree.

        Args:
            root: Root node of the tree.
            current: Initial working directory.
            home_path: Absolute path used by 'cd' with no argument and by '~'.
            user: User name shown in the prompt.
            host: Host name shown in the prompt.
        """
        self.root = root
        self.current = current
        self.home_path = home_path
        self.user = user
        self.host = host
        self._prompt_listeners: List[PromptListener] = []

    @classmethod
    def create(
            cls,
            user: str = const.DEFAULT_USER,
            host: str = const.DEFAULT_HOST,
    ) -> "ShellSession":
        """Seed a fresh filesystem and start in the home directory."""
        root, home = seed_filesystem()
        return cls(root, home, home_path=path_of(home), user=user, host=host)

    # -------------------------------------------------------------------------
    # PATH VIEWS
    # -------------------------------------------------------------------------

    @property
    def cwd_path(self) -> str:
        """Absolute path of the current directory."""
        return path_of(self.current)

    @property
    def display_path(self) -> str:
        """Current path with the home prefix collapsed to '~'."""
        return collapse_home(self.cwd_path, self.home_path)

    @property
    def prompt(self) -> str:
        return f"{self.user}@{self.host}:{self.display_path}$ "

    # -------------------------------------------------------------------------
    # STATE TRANSITIONS
    # -------------------------------------------------------------------------

    def resolve(self, path: Optional[str]) -> Optional[DirectoryNode]:
        """Resolve 'path' relative to the current directory."""
        return resolver.resolve(path, self.current, self.root)

    def change_directory(self, node: DirectoryNode) -> None:
        """
        Make 'node' the working directory and notify prompt listeners.

        Args:
            node: Target directory, already resolved against this tree.
        """
        self.current = node
        logger.debug(f"Working directory changed to {self.cwd_path}")
        prompt = self.prompt
        for listener in list(self._prompt_listeners):
            listener(prompt)

    def create_directory(self, name: str) -> DirectoryNode:
        """Append a new directory to the working directory."""
        node = add_child(self.current, name)
        logger.debug(f"Created directory {path_of(node)}")
        return node

    def on_prompt_changed(self, listener: PromptListener) -> None:
        """Register a callback receiving the new prompt after each 'cd'."""
        self._prompt_listeners.append(listener)

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def collapse_home(path: str, home_path: str) -> str:
    """
    Replace a leading home path with '~'.

    Args:
        path: Absolute path to display.
        home_path: Absolute home path.

    Returns:
        str: '~' for the home itself, '~/<rest>' below it, else 'path'.
    """
    if path == home_path:
        return const.HOME_SYMBOL
    prefix = home_path.rstrip(const.PATH_SEPARATOR) + const.PATH_SEPARATOR
    if home_path and path.startswith(prefix):
        return const.HOME_SYMBOL + const.PATH_SEPARATOR + path[len(prefix):]
    return path
