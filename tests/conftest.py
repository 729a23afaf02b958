"""Pytest configuration for sway-scratch tests."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
from i3ipc.aio import Connection

# Make the sway_scratch package importable without installation
package_root = Path(__file__).parent.parent
if str(package_root) not in sys.path:
    sys.path.insert(0, str(package_root))

from sway_scratch.core.sway_client import SwayClient  # noqa: E402

from tests.fixtures.ipc_replies import reply  # noqa: E402
from tests.fixtures.sway_trees import make_tree, output, scratch_output, window, workspace  # noqa: E402


@pytest.fixture
def mock_sway_connection():
    """Mock i3ipc connection; tests set get_tree/command return values."""
    conn = AsyncMock(spec=Connection)
    conn.command.return_value = [reply()]
    return conn


@pytest.fixture
def sway_client(mock_sway_connection):
    """SwayClient wired to the mock connection."""
    return SwayClient(connection=mock_sway_connection)


@pytest.fixture
def mock_launcher():
    """Launcher double recording spawn calls."""
    launcher = Mock()
    launcher.spawn = AsyncMock(return_value=None)
    return launcher


@pytest.fixture
def empty_scratch_tree():
    """First use: nothing has ever been moved to the scratchpad."""
    return make_tree(
        output(1, "HEADLESS-1", [
            workspace(10, "1", nodes=[window(100, app_id="foot", focused=True)]),
        ]),
        scratch_output(),
    )


@pytest.fixture
def isolated_config_home(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at an empty directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path
