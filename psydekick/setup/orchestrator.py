"""
Setup Orchestrator

Runs the Psydekick/Setup action:

1. Restart the bridge listener (failures propagate)
2. Resolve the UnityMcpServer directory (failures propagate)
3. Ensure the marker directory exists
4. Write the server path into the marker file
5. Refresh the host file index, only after a successful write

Steps 3-4 form the only local recovery boundary: a failure there is logged
once and the run completes without refreshing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from psydekick.configs import get_host_logger
from psydekick.setup.marker import (
    MarkerWriteResult,
    ensure_marker_dir,
    get_marker_dir,
    get_marker_path,
    write_marker,
)

logger = get_host_logger("setup")


class LifecycleManager(ABC):
    """Owns start/stop of the bridge listener."""

    @abstractmethod
    def restart(self) -> None:
        """
        Stop any running listener and start a new one.

        Raises:
            Exception: If the listener cannot be started
        """
        pass


class Installer(ABC):
    """Locates the installed companion server."""

    @abstractmethod
    def resolve_server_path(self) -> str:
        """Return the absolute path of the UnityMcpServer source directory."""
        pass


class Environment(ABC):
    """Host environment hooks used by the setup action."""

    @property
    @abstractmethod
    def data_root(self) -> Path:
        """The project's primary data root (the Assets folder)."""
        pass

    @abstractmethod
    def refresh_index(self) -> None:
        """Make newly written files visible in the host's file index."""
        pass


class SetupState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass
class SetupReport:
    """What a single setup run did."""

    server_path: str
    marker_path: Path
    written: bool = False
    refreshed: bool = False
    error: Optional[str] = None


class SetupOrchestrator:
    """
    Sequences the setup action over injected collaborators.

    The host serializes invocations, so no locking is done here.
    """

    def __init__(
        self,
        lifecycle: LifecycleManager,
        installer: Installer,
        environment: Environment,
    ):
        self.lifecycle = lifecycle
        self.installer = installer
        self.environment = environment
        self.state = SetupState.IDLE
        self.runs = 0

    def run(self) -> SetupReport:
        """
        Execute one setup run.

        Returns:
            SetupReport describing the outcome of the marker write

        Raises:
            Exception: Whatever the lifecycle manager or installer raise
        """
        self.lifecycle.restart()
        self.state = SetupState.RUNNING
        self.runs += 1

        server_path = self.installer.resolve_server_path()
        logger.info(f"UnityMcpServer directory: {server_path}")

        data_root = self.environment.data_root
        report = SetupReport(server_path=server_path, marker_path=get_marker_path(data_root))

        result = self._record_server_path(data_root, server_path)
        if not result.ok:
            report.error = result.error
            logger.error(
                f"Failed to write serverpath.txt at {result.path}: {result.error}"
            )
            return report

        report.written = True
        logger.info(f"Wrote server path to {report.marker_path}")

        self.environment.refresh_index()
        report.refreshed = True
        return report

    def _record_server_path(self, data_root: Path, server_path: str) -> MarkerWriteResult:
        """Create the marker directory and write the file; first failure wins."""
        dir_result = ensure_marker_dir(get_marker_dir(data_root))
        if not dir_result.ok:
            return dir_result
        return write_marker(get_marker_path(data_root), server_path)
