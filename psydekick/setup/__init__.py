"""
Setup Command

The Psydekick/Setup action and the registration table that exposes it.
"""

from .marker import (
    MarkerWriteResult,
    ensure_marker_dir,
    get_marker_dir,
    get_marker_path,
    read_marker,
    write_marker,
)
from .orchestrator import (
    Environment,
    Installer,
    LifecycleManager,
    SetupOrchestrator,
    SetupReport,
    SetupState,
)
from .commands import (
    SETUP_COMMAND_ID,
    CommandRegistry,
    CommandSpec,
    register_setup_command,
)

__all__ = [
    # Marker file
    "MarkerWriteResult",
    "ensure_marker_dir",
    "get_marker_dir",
    "get_marker_path",
    "read_marker",
    "write_marker",
    # Orchestrator
    "Environment",
    "Installer",
    "LifecycleManager",
    "SetupOrchestrator",
    "SetupReport",
    "SetupState",
    # Commands
    "SETUP_COMMAND_ID",
    "CommandRegistry",
    "CommandSpec",
    "register_setup_command",
]
