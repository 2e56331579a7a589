"""
Pytest fixtures for Psydekick tests.
"""

import sys
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

# Add project root to path for package imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from psydekick.setup import Environment, Installer, LifecycleManager


class FakeLifecycle(LifecycleManager):
    """Records restarts; optionally fails."""

    def __init__(self, calls: list, error: Exception | None = None):
        self.calls = calls
        self.error = error
        self.running = False
        self.restarts = 0

    def restart(self) -> None:
        self.calls.append("restart")
        self.running = False
        if self.error is not None:
            raise self.error
        self.running = True
        self.restarts += 1


class FakeInstaller(Installer):
    """Returns a fixed path; optionally fails."""

    def __init__(self, calls: list, server_path: str, error: Exception | None = None):
        self.calls = calls
        self.server_path = server_path
        self.error = error

    def resolve_server_path(self) -> str:
        self.calls.append("resolve")
        if self.error is not None:
            raise self.error
        return self.server_path


class FakeEnvironment(Environment):
    def __init__(self, calls: list, data_root: Path):
        self.calls = calls
        self._data_root = data_root
        self.refreshes = 0

    @property
    def data_root(self) -> Path:
        return self._data_root

    def refresh_index(self) -> None:
        self.calls.append("refresh")
        self.refreshes += 1


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def unity_project(temp_dir: Path) -> Path:
    """Create a minimal Unity project layout."""
    project = temp_dir / "MyGame"
    (project / "Assets" / "Scripts").mkdir(parents=True)
    (project / "Assets" / "Scripts" / "Player.cs").write_text("class Player {}")
    (project / "ProjectSettings").mkdir()
    (project / "ProjectSettings" / "ProjectVersion.txt").write_text("m_EditorVersion: 2022.3")
    (project / "Library").mkdir()
    (project / "Library" / "ArtifactDB").write_text("cache")
    return project


@pytest.fixture
def calls() -> list:
    """Shared call log for ordering assertions."""
    return []


@pytest.fixture
def make_lifecycle(calls: list) -> Callable[..., FakeLifecycle]:
    """Factory for lifecycle managers sharing the call log."""

    def _make(error: Exception | None = None) -> FakeLifecycle:
        return FakeLifecycle(calls, error=error)

    return _make


@pytest.fixture
def make_installer(calls: list) -> Callable[..., FakeInstaller]:
    """Factory for installers sharing the call log."""

    def _make(
        server_path: str = "/home/user/.local/UnityMcpServer/src",
        error: Exception | None = None,
    ) -> FakeInstaller:
        return FakeInstaller(calls, server_path, error=error)

    return _make


@pytest.fixture
def fake_lifecycle(make_lifecycle) -> FakeLifecycle:
    return make_lifecycle()


@pytest.fixture
def fake_installer(make_installer) -> FakeInstaller:
    return make_installer()


@pytest.fixture
def make_environment(calls: list) -> Callable[[Path], FakeEnvironment]:
    """Factory for environments over an arbitrary data root."""

    def _make(data_root: Path) -> FakeEnvironment:
        return FakeEnvironment(calls, data_root)

    return _make


@pytest.fixture
def fake_environment(make_environment, unity_project: Path) -> FakeEnvironment:
    return make_environment(unity_project / "Assets")
