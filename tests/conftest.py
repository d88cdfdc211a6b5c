from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for fresh shell sessions, scrollback buffers and an
   isolated configuration file.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from webbash.core.shell.interpreter import CommandInterpreter  # noqa: E402
from webbash.core.shell.session import ShellSession  # noqa: E402
from webbash.core.shell.sink import ScrollbackBuffer  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def session() -> ShellSession:
    """Return a freshly seeded session positioned at /home/user."""
    return ShellSession.create()


@pytest.fixture
def buffer() -> ScrollbackBuffer:
    return ScrollbackBuffer()


@pytest.fixture
def shell(session: ShellSession, buffer: ScrollbackBuffer) -> CommandInterpreter:
    """Interpreter bound to the 'session' and 'buffer' fixtures."""
    return CommandInterpreter(session, buffer)


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect config.json into a temporary directory."""
    path = tmp_path / "config.json"
    monkeypatch.setattr("webbash.domain.config.get_config_path", lambda: str(path))
    return path
